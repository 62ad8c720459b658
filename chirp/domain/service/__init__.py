"""Domain services."""

from .accounts import AccountsClient
from .post_service import PostService

__all__ = [
    "AccountsClient",
    "PostService",
]
