"""Firestore implementation of Post repository."""

from datetime import datetime
from typing import List, Optional

import logfire
from google.api_core.exceptions import NotFound
from google.cloud.firestore import (
    ArrayRemove,
    ArrayUnion,
    AsyncClient,
    AsyncTransaction,
    async_transactional,
)

from chirp.config import Settings
from chirp.domain.model import Comment, Post
from chirp.domain.repository.post import PostRepository
from chirp.domain.value import PostId
from chirp.persistence.mappers import (
    comment_to_dict,
    document_to_post,
    post_to_document,
)


class FirestorePostRepository(PostRepository):
    """Firestore implementation of PostRepository.

    Likers use ArrayUnion/ArrayRemove, which give set semantics. Comments may
    repeat, so appending goes through a transaction; removal uses ArrayRemove,
    which drops every element equal to the given map.
    """

    def __init__(self, client: AsyncClient, settings: Settings) -> None:
        """Initialize repository with a Firestore client.

        Args:
            client: Firestore async client
            settings: Application settings
        """
        self.client = client
        self.settings = settings
        self.collection = client.collection(settings.firestore.collection)

    async def _update(self, post_id: PostId, fields: dict) -> bool:
        try:
            await self.collection.document(post_id).update(fields)
        except NotFound:
            logfire.warn("Post not found for update", post_id=post_id)
            return False
        return True

    async def insert(self, post: Post) -> Post:
        """Insert a new post (fails if the id is taken)."""
        with logfire.span("post_repository.insert", post_id=post.id):
            await self.collection.document(post.id).create(post_to_document(post))
            logfire.info("Post inserted", post_id=post.id, author=post.author)
            return post

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=post_id):
            snapshot = await self.collection.document(post_id).get()

            if not snapshot.exists:
                logfire.warn("Post not found", post_id=post_id)
                return None

            return document_to_post(snapshot.id, snapshot.to_dict())

    async def find_all(self) -> List[Post]:
        """Stream every post in the collection.

        Firestore has no case-insensitive pattern query, so author filtering
        happens in the service.
        """
        with logfire.span("post_repository.find_all"):
            posts = []
            async for snapshot in self.collection.stream():
                posts.append(document_to_post(snapshot.id, snapshot.to_dict()))

            logfire.info("Found posts", count=len(posts))
            return posts

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post (hard delete)."""
        with logfire.span("post_repository.delete", post_id=post_id):
            try:
                await self.collection.document(post_id).delete(
                    option=self.client.write_option(exists=True)
                )
            except NotFound:
                logfire.warn("Post not found for delete", post_id=post_id)
                return False
            return True

    async def update_content(
        self, post_id: PostId, content: str, updated_at: datetime
    ) -> bool:
        """Overwrite content and stamp updatedAt."""
        with logfire.span("post_repository.update_content", post_id=post_id):
            return await self._update(
                post_id, {"content": content, "updatedAt": updated_at}
            )

    async def add_liker(self, post_id: PostId, username: str) -> bool:
        """Atomically add a liker."""
        with logfire.span(
            "post_repository.add_liker", post_id=post_id, username=username
        ):
            return await self._update(
                post_id, {"reacts.likers": ArrayUnion([username])}
            )

    async def remove_liker(self, post_id: PostId, username: str) -> bool:
        """Atomically remove a liker."""
        with logfire.span(
            "post_repository.remove_liker", post_id=post_id, username=username
        ):
            return await self._update(
                post_id, {"reacts.likers": ArrayRemove([username])}
            )

    async def append_comment(self, post_id: PostId, comment: Comment) -> bool:
        """Append a comment inside a transaction."""
        doc_ref = self.collection.document(post_id)

        @async_transactional
        async def _append(transaction: AsyncTransaction) -> bool:
            snapshot = await doc_ref.get(transaction=transaction)
            if not snapshot.exists:
                return False

            comments = (snapshot.to_dict() or {}).get("comments") or []
            transaction.update(
                doc_ref, {"comments": [*comments, comment_to_dict(comment)]}
            )
            return True

        with logfire.span(
            "post_repository.append_comment",
            post_id=post_id,
            commentor=comment.commentor,
        ):
            appended = await _append(self.client.transaction())
            if not appended:
                logfire.warn("Post not found for comment", post_id=post_id)
            return appended

    async def remove_comments(self, post_id: PostId, comment: Comment) -> bool:
        """Atomically remove every matching comment."""
        with logfire.span(
            "post_repository.remove_comments",
            post_id=post_id,
            commentor=comment.commentor,
        ):
            return await self._update(
                post_id, {"comments": ArrayRemove([comment_to_dict(comment)])}
            )
