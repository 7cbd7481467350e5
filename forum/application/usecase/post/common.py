"""Shared response models for post use cases."""

from datetime import datetime

from pydantic import BaseModel

from forum.domain.model import Post


class PostItem(BaseModel):
    """Post item in responses."""

    post_id: str
    community_id: str
    author_id: str
    title: str
    body: str
    edited: bool
    edited_at: datetime | None
    created_at: datetime

    @classmethod
    def from_post(cls, post: Post) -> "PostItem":
        return cls(
            post_id=str(post.id),
            community_id=str(post.community_id),
            author_id=str(post.author_id),
            title=post.title,
            body=post.body,
            edited=post.edited,
            edited_at=post.edited_at,
            created_at=post.created_at,
        )
