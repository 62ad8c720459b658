"""Post domain service."""

import re
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any, Optional

import logfire

from chirp.domain.error import AuthorizationError, NotFoundError, ValidationError
from chirp.domain.model import Comment, Post, PostView, check_content, parse_post
from chirp.domain.repository import PostRepository
from chirp.domain.value import Credentials, PostId, new_post_id

from .accounts import AccountsClient


class PostService:
    """Domain service for post operations.

    Owner-restricted operations (delete, update, delete comment) read the
    post, check ownership, then write. The read and the write are separate
    store calls, so a concurrent change between them is possible; this race
    is accepted.
    """

    def __init__(
        self, post_repository: PostRepository, accounts_client: AccountsClient
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            accounts_client: Accounts collaborator used to check credentials
        """
        self.post_repository = post_repository
        self.accounts_client = accounts_client

    async def _is_authorized(self, creds: Credentials) -> bool:
        return await self.accounts_client.is_authorized(
            creds.username, creds.password.get_secret_value()
        )

    async def _authenticate(self, creds: Credentials, action: str) -> None:
        if not await self._is_authorized(creds):
            logfire.warn(
                "Invalid credentials", username=creds.username, action=action
            )
            raise AuthorizationError(action, creds.username)

    async def _find_or_raise(self, post_id: PostId) -> Post:
        post = await self.post_repository.find_by_id(post_id)
        if post is None:
            logfire.warn("Post not found", post_id=post_id)
            raise NotFoundError("post", post_id)
        return post

    async def _authorize_author(
        self, post: Post, creds: Credentials, action: str
    ) -> None:
        authorized = await self._is_authorized(creds) and post.author == creds.username
        if not authorized:
            logfire.warn(
                "Not the author",
                post_id=post.id,
                username=creds.username,
                action=action,
            )
            raise AuthorizationError(action, creds.username)

    async def create_post(
        self, post_obj: Mapping[str, Any], creds: Credentials
    ) -> PostId:
        """Create a post authored by the authenticated user.

        Any author or timestamp in the payload is ignored: the author comes
        from the credentials and the timestamp is taken now.

        Args:
            post_obj: Raw post payload (needs "content")
            creds: Caller credentials

        Returns:
            ID of the new post

        Raises:
            AuthorizationError: If the credentials are invalid
            ValidationError: If the payload is malformed
        """
        with logfire.span("post_service.create_post", username=creds.username):
            await self._authenticate(creds, "create post")

            if not isinstance(post_obj, Mapping):
                raise ValidationError(["post: Input should be an object"])

            raw = {
                **post_obj,
                "author": creds.username,
                "created_at": datetime.now(timezone.utc),
            }
            result = parse_post(raw)
            if not result.ok:
                logfire.warn("Rejected post payload", errors=result.errors)
                raise ValidationError(result.errors)

            draft = result.post
            post = Post(
                id=new_post_id(),
                author=draft.author,
                content=draft.content,
                created_at=draft.created_at,
            )
            saved = await self.post_repository.insert(post)
            logfire.info("Post created", post_id=saved.id, author=saved.author)
            return saved.id

    async def list_posts(self, user_filter: Optional[str] = None) -> list[PostView]:
        """List posts whose author matches a pattern.

        The filter is a regular expression searched case-insensitively
        anywhere in the author name, so "ali" matches "Alice". An empty or
        missing filter matches every post. Result order follows the store
        and is not guaranteed.

        Raises:
            ValidationError: If the filter is not a valid pattern
        """
        with logfire.span("post_service.list_posts", user_filter=user_filter):
            try:
                pattern = re.compile(user_filter or "", re.IGNORECASE)
            except re.error as e:
                raise ValidationError([f"user_filter: {e}"])

            posts = await self.post_repository.find_all()
            views = [post.to_view() for post in posts if pattern.search(post.author)]
            logfire.info("Posts listed", count=len(views), scanned=len(posts))
            return views

    async def get_post(self, post_id: PostId) -> PostView:
        """Get a post by ID.

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span("post_service.get_post", post_id=post_id):
            post = await self._find_or_raise(post_id)
            return post.to_view()

    async def delete_post(self, post_id: PostId, creds: Credentials) -> None:
        """Delete a post. Only its author may do so.

        Raises:
            NotFoundError: If the post does not exist
            AuthorizationError: If the credentials are invalid or not the author's
        """
        with logfire.span(
            "post_service.delete_post", post_id=post_id, username=creds.username
        ):
            post = await self._find_or_raise(post_id)
            await self._authorize_author(post, creds, "delete post")

            if not await self.post_repository.delete(post_id):
                # Deleted between the read and the write
                raise NotFoundError("post", post_id)
            logfire.info("Post deleted", post_id=post_id)

    async def update_post(
        self, post_id: PostId, update_obj: Mapping[str, Any], creds: Credentials
    ) -> dict[str, str]:
        """Replace the content of a post. Only its author may do so.

        Author, creation time, likers and comments are left untouched.

        Args:
            post_id: Post ID
            update_obj: Payload carrying the new "content"
            creds: Caller credentials

        Returns:
            Confirmation message

        Raises:
            NotFoundError: If the post does not exist
            AuthorizationError: If the credentials are invalid or not the author's
            ValidationError: If the new content is malformed
        """
        with logfire.span(
            "post_service.update_post", post_id=post_id, username=creds.username
        ):
            post = await self._find_or_raise(post_id)
            await self._authorize_author(post, creds, "update post")

            content = None
            if isinstance(update_obj, Mapping):
                content = update_obj.get("content")
            errors = check_content(content)
            if errors:
                raise ValidationError(errors)

            updated = await self.post_repository.update_content(
                post_id, content, datetime.now(timezone.utc)
            )
            if not updated:
                # Deleted between the read and the write
                raise NotFoundError("post", post_id)

            logfire.info("Post updated", post_id=post_id, content_length=len(content))
            return {"message": "Post updated successfully"}

    async def like_post(self, creds: Credentials, post_id: PostId) -> None:
        """Record the caller as a liker of a post. Idempotent.

        Raises:
            AuthorizationError: If the credentials are invalid
            NotFoundError: If the post does not exist
        """
        with logfire.span(
            "post_service.like_post", post_id=post_id, username=creds.username
        ):
            await self._authenticate(creds, "like post")

            if not await self.post_repository.add_liker(post_id, creds.username):
                raise NotFoundError("post", post_id)
            logfire.info("Post liked", post_id=post_id, username=creds.username)

    async def dislike_post(self, creds: Credentials, post_id: PostId) -> None:
        """Remove the caller from the likers of a post. No-op if absent.

        Raises:
            AuthorizationError: If the credentials are invalid
            NotFoundError: If the post does not exist
        """
        with logfire.span(
            "post_service.dislike_post", post_id=post_id, username=creds.username
        ):
            await self._authenticate(creds, "dislike post")

            if not await self.post_repository.remove_liker(post_id, creds.username):
                raise NotFoundError("post", post_id)
            logfire.info("Post disliked", post_id=post_id, username=creds.username)

    async def add_comment(
        self, creds: Credentials, post_id: PostId, comment: str
    ) -> None:
        """Append a comment by the caller. Any authenticated user may comment.

        Raises:
            AuthorizationError: If the credentials are invalid
            ValidationError: If the comment is not a string
            NotFoundError: If the post does not exist
        """
        with logfire.span(
            "post_service.add_comment", post_id=post_id, username=creds.username
        ):
            await self._authenticate(creds, "comment on post")

            if not isinstance(comment, str):
                raise ValidationError(["comment: Input should be a valid string"])

            appended = await self.post_repository.append_comment(
                post_id, Comment(commentor=creds.username, content=comment)
            )
            if not appended:
                raise NotFoundError("post", post_id)
            logfire.info("Comment added", post_id=post_id, username=creds.username)

    async def delete_comment(
        self, post_id: PostId, comment_content: str, creds: Credentials
    ) -> dict[str, str]:
        """Delete the caller's comments with exactly this content.

        Every comment matching (caller, content) is removed, not only the
        first one.

        Returns:
            Confirmation message

        Raises:
            NotFoundError: If the post does not exist
            AuthorizationError: If the credentials are invalid or the caller has
                no comment with this content on the post
        """
        with logfire.span(
            "post_service.delete_comment", post_id=post_id, username=creds.username
        ):
            post = await self._find_or_raise(post_id)

            authorized = await self._is_authorized(creds) and post.has_comment(
                creds.username, comment_content
            )
            if not authorized:
                logfire.warn(
                    "No matching comment for user",
                    post_id=post_id,
                    username=creds.username,
                )
                raise AuthorizationError("delete comment", creds.username)

            removed = await self.post_repository.remove_comments(
                post_id, Comment(commentor=creds.username, content=comment_content)
            )
            if not removed:
                raise NotFoundError("post", post_id)
            logfire.info("Comments deleted", post_id=post_id, username=creds.username)
            return {"message": "Comment deleted successfully"}
