"""Tests for row/domain mappers."""

from datetime import datetime, timezone
from uuid import uuid4

from forum.domain.value import CommunityRank, GlobalRank
from forum.persistence.mappers import (
    principal_to_dict,
    row_to_comment,
    row_to_membership,
    row_to_principal,
)

NOW = datetime(2026, 1, 1, tzinfo=timezone.utc)


def test_principal_rank_round_trips_through_integers():
    row = {
        "id": str(uuid4()),
        "external_id": "ext-1",
        "display_name": "alice",
        "avatar_url": None,
        "rank": 9,
        "created_at": NOW,
        "updated_at": NOW,
    }

    principal = row_to_principal(row)

    assert principal.rank is GlobalRank.ADMIN
    assert principal_to_dict(principal)["rank"] == 9


def test_missing_principal_rank_is_anonymous():
    row = {
        "id": uuid4(),
        "external_id": "ext-1",
        "display_name": "alice",
        "rank": None,
        "created_at": NOW,
        "updated_at": NOW,
    }

    assert row_to_principal(row).rank is GlobalRank.ANONYMOUS


def test_membership_rank_is_community_scoped():
    row = {"community_id": uuid4(), "principal_id": uuid4(), "rank": 10}

    membership = row_to_membership(row)

    assert membership.rank is CommunityRank.OWNER


def test_comment_parent_is_optional():
    parent_id = uuid4()
    base = {
        "id": uuid4(),
        "post_id": uuid4(),
        "author_id": uuid4(),
        "body": "hi",
        "has_descendants": False,
        "edited": False,
        "created_at": NOW,
    }

    top = row_to_comment({**base, "parent_id": None})
    reply = row_to_comment({**base, "parent_id": str(parent_id)})

    assert top.parent_id is None
    assert reply.parent_id == parent_id
