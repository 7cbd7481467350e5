"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping. Ranks are stored as
raw integers and only become enums here.
"""

from typing import Any, Dict
from uuid import UUID

from forum.domain.model import Comment, Community, Membership, Post, Principal
from forum.domain.value import (
    CommentId,
    CommunityId,
    CommunityRank,
    GlobalRank,
    PostId,
    PrincipalId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_principal(row: Dict[str, Any]) -> Principal:
    """Convert database row to Principal domain model.

    Args:
        row: Database row as dict

    Returns:
        Principal domain model
    """
    return Principal(
        id=PrincipalId(_uuid(row["id"])),
        external_id=row["external_id"],
        display_name=row["display_name"],
        avatar_url=row.get("avatar_url"),
        rank=GlobalRank.from_storage(row.get("rank")),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def principal_to_dict(principal: Principal) -> Dict[str, Any]:
    """Convert Principal domain model to database dict."""
    data = principal.model_dump()
    data["rank"] = principal.rank.to_storage()
    return data


def row_to_community(row: Dict[str, Any]) -> Community:
    """Convert database row to Community domain model."""
    return Community(
        id=CommunityId(_uuid(row["id"])),
        name=row["name"],
        description=row.get("description") or "",
        approved=row["approved"],
        created_at=row["created_at"],
    )


def community_to_dict(community: Community) -> Dict[str, Any]:
    """Convert Community domain model to database dict."""
    return community.model_dump()


def row_to_membership(row: Dict[str, Any]) -> Membership:
    """Convert database row to Membership domain model."""
    return Membership(
        community_id=CommunityId(_uuid(row["community_id"])),
        principal_id=PrincipalId(_uuid(row["principal_id"])),
        rank=CommunityRank.from_storage(row.get("rank")),
    )


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model."""
    return Post(
        id=PostId(_uuid(row["id"])),
        community_id=CommunityId(_uuid(row["community_id"])),
        author_id=PrincipalId(_uuid(row["author_id"])),
        title=row["title"],
        body=row["body"],
        edited=row["edited"],
        edited_at=row.get("edited_at"),
        created_at=row["created_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict."""
    return post.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    parent_id = row.get("parent_id")
    return Comment(
        id=CommentId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        author_id=PrincipalId(_uuid(row["author_id"])),
        body=row["body"],
        parent_id=CommentId(_uuid(parent_id)) if parent_id else None,
        has_descendants=row["has_descendants"],
        edited=row["edited"],
        edited_at=row.get("edited_at"),
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return comment.model_dump()
