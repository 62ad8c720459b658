"""Post repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from chirp.domain.model.post import Comment, Post
from chirp.domain.value import PostId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the single-document store primitives posts need. Every mutating
    primitive is atomic on its own document. Methods returning bool report
    whether the document existed.
    """

    @abstractmethod
    async def insert(self, post: Post) -> Post:
        """Insert a new post.

        Args:
            post: The post to insert

        Returns:
            The inserted post
        """
        pass

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Post]:
        """Return every stored post, in store iteration order."""
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> bool:
        """Delete a post with its likers and comments (hard delete)."""
        pass

    @abstractmethod
    async def update_content(
        self, post_id: PostId, content: str, updated_at: datetime
    ) -> bool:
        """Overwrite the content of a post and stamp updated_at.

        Args:
            post_id: ID of the post to update
            content: New content
            updated_at: Update timestamp
        """
        pass

    @abstractmethod
    async def add_liker(self, post_id: PostId, username: str) -> bool:
        """Atomically add a username to the likers set (no-op if present)."""
        pass

    @abstractmethod
    async def remove_liker(self, post_id: PostId, username: str) -> bool:
        """Atomically remove a username from the likers set (no-op if absent)."""
        pass

    @abstractmethod
    async def append_comment(self, post_id: PostId, comment: Comment) -> bool:
        """Atomically append a comment, keeping duplicates."""
        pass

    @abstractmethod
    async def remove_comments(self, post_id: PostId, comment: Comment) -> bool:
        """Atomically remove every comment equal to the given one."""
        pass
