"""In-memory post repository for testing."""

from datetime import datetime
from typing import Optional

from chirp.domain.model.post import Comment, Post
from chirp.domain.repository.post import PostRepository
from chirp.domain.value import PostId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing.

    Posts are immutable, so every mutation stores an updated copy.
    """

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    def _replace(self, post_id: PostId, **changes) -> bool:
        post = self._posts.get(post_id)
        if post is None:
            return False
        self._posts[post_id] = post.model_copy(update=changes)
        return True

    async def insert(self, post: Post) -> Post:
        """Insert a new post."""
        if post.id in self._posts:
            raise ValueError(f"Post already exists: {post.id}")
        self._posts[post.id] = post
        return post

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_all(self) -> list[Post]:
        """Return posts in insertion order."""
        return list(self._posts.values())

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post."""
        return self._posts.pop(post_id, None) is not None

    async def update_content(
        self, post_id: PostId, content: str, updated_at: datetime
    ) -> bool:
        """Overwrite content and stamp updated_at."""
        return self._replace(post_id, content=content, updated_at=updated_at)

    async def add_liker(self, post_id: PostId, username: str) -> bool:
        """Add a liker if not already present."""
        post = self._posts.get(post_id)
        if post is None:
            return False
        if username in post.likers:
            return True
        return self._replace(post_id, likers=[*post.likers, username])

    async def remove_liker(self, post_id: PostId, username: str) -> bool:
        """Remove a liker if present."""
        post = self._posts.get(post_id)
        if post is None:
            return False
        return self._replace(
            post_id, likers=[u for u in post.likers if u != username]
        )

    async def append_comment(self, post_id: PostId, comment: Comment) -> bool:
        """Append a comment, keeping duplicates."""
        post = self._posts.get(post_id)
        if post is None:
            return False
        return self._replace(post_id, comments=[*post.comments, comment])

    async def remove_comments(self, post_id: PostId, comment: Comment) -> bool:
        """Remove every comment equal to the given one."""
        post = self._posts.get(post_id)
        if post is None:
            return False
        return self._replace(
            post_id, comments=[c for c in post.comments if c != comment]
        )
