"""Firestore repository implementations."""

from chirp.persistence.repository.post import FirestorePostRepository

__all__ = [
    "FirestorePostRepository",
]
