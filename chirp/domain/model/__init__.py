"""Domain model entities for Chirp."""

from chirp.domain.model.draft import (
    MAX_CONTENT_LENGTH,
    ParsedPost,
    PostDraft,
    PostParseFailure,
    PostParseResult,
    check_content,
    parse_post,
)
from chirp.domain.model.post import Comment, Post, PostView

__all__ = [
    "Post",
    "PostView",
    "Comment",
    "PostDraft",
    "ParsedPost",
    "PostParseFailure",
    "PostParseResult",
    "MAX_CONTENT_LENGTH",
    "parse_post",
    "check_content",
]
