"""Mappers for converting between stored documents and domain models.

Stored layout of a post document:

    {
        "_id": str,
        "author": str,
        "content": str,
        "createdAt": timestamp,
        "updatedAt": timestamp,          # only after an update
        "reacts": {"likers": [str, ...]},
        "comments": [{"commentor": str, "content": str}, ...],
    }
"""

from typing import Any, Dict

from chirp.domain.model import Comment, Post
from chirp.domain.value import PostId


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment to its stored map.

    Comment maps are compared by value when pulling them out of a post, so
    only the two identifying fields are stored.
    """
    return {"commentor": comment.commentor, "content": comment.content}


def post_to_document(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to a store document.

    Args:
        post: Post domain model

    Returns:
        Dict suitable for insertion
    """
    document: Dict[str, Any] = {
        "_id": post.id,
        "author": post.author,
        "content": post.content,
        "createdAt": post.created_at,
        "reacts": {"likers": list(post.likers)},
        "comments": [comment_to_dict(c) for c in post.comments],
    }
    if post.updated_at is not None:
        document["updatedAt"] = post.updated_at
    return document


def document_to_post(doc_id: str, data: Dict[str, Any]) -> Post:
    """Convert a stored document to Post domain model.

    Args:
        doc_id: Document id (the post id)
        data: Document fields

    Returns:
        Post domain model
    """
    reacts = data.get("reacts") or {}
    return Post(
        id=PostId(data.get("_id", doc_id)),
        author=data["author"],
        content=data["content"],
        created_at=data["createdAt"],
        updated_at=data.get("updatedAt"),
        likers=list(reacts.get("likers") or []),
        comments=[
            Comment(commentor=c["commentor"], content=c["content"])
            for c in data.get("comments") or []
        ],
    )
