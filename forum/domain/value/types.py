"""Domain value objects for the forum.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum

from pydantic import Field

from forum.domain.value.common import ValueObject

# Body written over a soft-deleted comment
DELETED_COMMENT_BODY = "[This message was deleted]"


class ScopedRank(Enum):
    """Ordinal rank that only compares against ranks of the same scope.

    Comparing a global rank with a community rank raises TypeError, so a
    community owner can never be mistaken for a site admin.
    """

    def __lt__(self, other):
        if self.__class__ is other.__class__:
            return self.value < other.value
        return NotImplemented

    def __le__(self, other):
        if self.__class__ is other.__class__:
            return self.value <= other.value
        return NotImplemented

    def __gt__(self, other):
        if self.__class__ is other.__class__:
            return self.value > other.value
        return NotImplemented

    def __ge__(self, other):
        if self.__class__ is other.__class__:
            return self.value >= other.value
        return NotImplemented

    @classmethod
    def from_storage(cls, value: int | None):
        """Convert a raw stored integer into a rank (missing means lowest)."""
        if value is None:
            return cls(0)
        return cls(value)

    def to_storage(self) -> int:
        """Raw integer written to the database."""
        return self.value


class GlobalRank(ScopedRank):
    """Site-wide privilege level of a principal."""

    ANONYMOUS = 0
    MEMBER = 1
    ADMIN = 9


class CommunityRank(ScopedRank):
    """Privilege level of a principal within one community."""

    NONE = 0  # No membership row
    SUBSCRIBER = 1
    ADMIN = 9
    OWNER = 10


class LedgerOutcome(str, Enum):
    """Result of a membership ledger mutation."""

    APPLIED = "applied"
    UNCHANGED = "unchanged"


class DeletionOutcome(str, Enum):
    """How a comment was removed."""

    SOFT_DELETED = "soft_deleted"  # Body replaced, node kept for its replies
    HARD_DELETED = "hard_deleted"  # Row removed


class FeedView(str, Enum):
    """Which posts the front page shows."""

    LATEST = "latest"
    SUBSCRIBED = "subscribed"  # Communities the viewer holds a membership in
    FOLLOWING = "following"  # Principals the viewer follows

    @classmethod
    def from_query(cls, value: str | None) -> "FeedView":
        """Parse a view name; unknown or missing names fall back to latest."""
        try:
            return cls((value or cls.LATEST.value).strip().lower())
        except ValueError:
            return cls.LATEST


class ExternalIdentity(ValueObject):
    """Verified identity delivered by the authentication provider on login."""

    provider_user_id: str = Field(min_length=1, max_length=255)
    display_name: str = Field(min_length=1, max_length=255)
    avatar_url: str | None = None


class Capabilities(ValueObject):
    """What a principal may do with one piece of content in one community."""

    can_edit_own_content: bool = False
    can_delete: bool = False
    can_manage_members: bool = False
