"""Post aggregate root.

A post belongs to its author by username only; the account itself lives in
the accounts service.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from chirp.domain.model.common import DomainModel
from chirp.domain.value import PostId


class Comment(DomainModel):
    """A comment left on a post.

    Comments have no identity of their own; two comments with the same
    commentor and content are interchangeable.
    """

    commentor: str
    content: str


class PostView(DomainModel):
    """Projection of a post returned to callers."""

    post_id: PostId
    author: str
    content: str
    created_at: datetime
    likes: list[str]
    comments: list[Comment]


class Post(DomainModel):
    """Post aggregate root."""

    id: PostId
    author: str = Field(min_length=1)
    content: str
    created_at: datetime
    updated_at: Optional[datetime] = None
    likers: list[str] = Field(default_factory=list)
    comments: list[Comment] = Field(default_factory=list)

    @field_validator("likers")
    @classmethod
    def validate_unique_likers(cls, v: list[str]) -> list[str]:
        """Likers form a set: each username appears at most once."""
        if len(v) != len(set(v)):
            raise ValueError("likers must not contain duplicate usernames")
        return v

    def has_comment(self, commentor: str, content: str) -> bool:
        """Check whether the post carries a comment with this exact pair."""
        return any(
            c.commentor == commentor and c.content == content for c in self.comments
        )

    def to_view(self) -> PostView:
        """Project the post into the caller-facing view."""
        return PostView(
            post_id=self.id,
            author=self.author,
            content=self.content,
            created_at=self.created_at,
            likes=list(self.likers),
            comments=list(self.comments),
        )
