"""Test configuration and fixtures."""

from datetime import datetime, timezone

from chirp.domain.model import Comment, Post
from chirp.domain.value import Credentials, PostId, new_post_id


def make_post(
    author: str = "alice",
    content: str = "hello world",
    post_id: PostId | None = None,
    likers: list[str] | None = None,
    comments: list[tuple[str, str]] | None = None,
) -> Post:
    """Helper function to build test posts.

    Args:
        author: Author username
        content: Post content
        post_id: Optional fixed id (random otherwise)
        likers: Usernames that liked the post
        comments: (commentor, content) pairs

    Returns:
        Post domain model
    """
    return Post(
        id=post_id or new_post_id(),
        author=author,
        content=content,
        created_at=datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc),
        likers=likers or [],
        comments=[
            Comment(commentor=commentor, content=text)
            for commentor, text in comments or []
        ],
    )


def creds(username: str, password: str = "p") -> Credentials:
    """Helper function to build credentials."""
    return Credentials.of(username, password)
