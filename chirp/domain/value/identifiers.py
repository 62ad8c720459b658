"""Strongly typed identifiers for Chirp domain entities.

Post ids are opaque strings: a 128-bit random value, hex-encoded with no
separators.
"""

from typing import NewType
from uuid import uuid4

PostId = NewType("PostId", str)


def new_post_id() -> PostId:
    """Generate a new globally unique post id."""
    return PostId(uuid4().hex)
