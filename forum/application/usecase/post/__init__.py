"""Post use cases."""

from .common import PostItem
from .create_post import CreatePostRequest, CreatePostUseCase
from .delete_post import DeletePostRequest, DeletePostUseCase
from .get_feed import GetFeedRequest, GetFeedResponse, GetFeedUseCase
from .get_post import GetPostRequest, GetPostResponse, GetPostUseCase
from .list_by_author import (
    ListAuthorPostsRequest,
    ListAuthorPostsResponse,
    ListAuthorPostsUseCase,
)
from .list_posts import ListPostsRequest, ListPostsResponse, ListPostsUseCase
from .update_post import UpdatePostRequest, UpdatePostUseCase

__all__ = [
    "CreatePostRequest",
    "CreatePostUseCase",
    "DeletePostRequest",
    "DeletePostUseCase",
    "GetFeedRequest",
    "GetFeedResponse",
    "GetFeedUseCase",
    "GetPostRequest",
    "GetPostResponse",
    "GetPostUseCase",
    "ListAuthorPostsRequest",
    "ListAuthorPostsResponse",
    "ListAuthorPostsUseCase",
    "ListPostsRequest",
    "ListPostsResponse",
    "ListPostsUseCase",
    "PostItem",
    "UpdatePostRequest",
    "UpdatePostUseCase",
]
