"""Post drafts: the validated input shape for new posts.

Raw payloads coming from callers are untrusted. `parse_post` turns them into
a `PostDraft` or a list of problems, without raising.
"""

from datetime import datetime
from typing import Annotated, Any, Literal, Union

from pydantic import AfterValidator, StringConstraints, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from chirp.domain.model.common import DomainModel

MAX_CONTENT_LENGTH = 10000


def _not_blank(v: str) -> str:
    if not v.strip():
        raise ValueError("Content must not be blank")
    return v


Content = Annotated[
    str,
    StringConstraints(strict=True, min_length=1, max_length=MAX_CONTENT_LENGTH),
    AfterValidator(_not_blank),
]


class PostDraft(DomainModel):
    """Validated fields of a post about to be created."""

    author: Annotated[str, StringConstraints(min_length=1, max_length=255)]
    content: Content
    created_at: datetime


class ParsedPost(DomainModel):
    """Successful parse."""

    ok: Literal[True] = True
    post: PostDraft


class PostParseFailure(DomainModel):
    """Failed parse with one message per problem found."""

    ok: Literal[False] = False
    errors: list[str]


PostParseResult = Union[ParsedPost, PostParseFailure]

_content_adapter: TypeAdapter[str] = TypeAdapter(Content)


def _format_errors(exc: PydanticValidationError) -> list[str]:
    messages = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err["loc"]) or "post"
        messages.append(f"{location}: {err['msg']}")
    return messages


def parse_post(raw: Any) -> PostParseResult:
    """Validate a raw post payload.

    Unknown keys are ignored. Content must be a non-blank str of at most
    MAX_CONTENT_LENGTH characters; bytes and numbers are not coerced.

    Args:
        raw: Untrusted payload, normally a mapping

    Returns:
        ParsedPost on success, PostParseFailure otherwise
    """
    try:
        draft = PostDraft.model_validate(raw)
    except PydanticValidationError as e:
        return PostParseFailure(errors=_format_errors(e))
    return ParsedPost(post=draft)


def check_content(value: Any) -> list[str]:
    """Validate a replacement content value.

    Returns:
        Problems found, empty when the content is acceptable
    """
    try:
        _content_adapter.validate_python(value)
    except PydanticValidationError as e:
        return [f"content: {err['msg']}" for err in e.errors()]
    return []
