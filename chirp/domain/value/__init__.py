"""Domain value objects for Chirp."""

from chirp.domain.value.identifiers import PostId, new_post_id
from chirp.domain.value.types import Credentials

__all__ = [
    # Identifiers
    "PostId",
    "new_post_id",
    # Types
    "Credentials",
]
