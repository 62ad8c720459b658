"""Repository interfaces for the Chirp domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from chirp.domain.repository.post import PostRepository

__all__ = [
    "PostRepository",
]
