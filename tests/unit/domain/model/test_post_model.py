"""Unit tests for the Post aggregate."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from chirp.domain.model import Comment, Post
from chirp.domain.value import Credentials, PostId
from tests.conftest import make_post


class TestPost:
    """Tests for Post model."""

    def test_rejects_duplicate_likers(self):
        """Likers form a set."""
        with pytest.raises(ValidationError, match="duplicate"):
            Post(
                id=PostId("abc"),
                author="alice",
                content="hi",
                created_at=datetime.now(timezone.utc),
                likers=["bob", "bob"],
            )

    def test_defaults_to_no_likers_or_comments(self):
        """A new post has empty likers and comments."""
        post = Post(
            id=PostId("abc"),
            author="alice",
            content="hi",
            created_at=datetime.now(timezone.utc),
        )

        assert post.likers == []
        assert post.comments == []
        assert post.updated_at is None

    def test_is_immutable(self):
        """Author cannot be reassigned."""
        post = make_post(author="alice")

        with pytest.raises(ValidationError):
            post.author = "mallory"

    def test_has_comment_requires_exact_pair(self):
        """has_comment matches commentor and content exactly."""
        post = make_post(comments=[("bob", "nice")])

        assert post.has_comment("bob", "nice")
        assert not post.has_comment("bob", "Nice")
        assert not post.has_comment("carol", "nice")

    def test_to_view_projects_fields(self):
        """The view exposes likers as likes."""
        post = make_post(author="alice", likers=["bob"], comments=[("bob", "hey")])

        view = post.to_view()

        assert view.post_id == post.id
        assert view.author == "alice"
        assert view.content == post.content
        assert view.created_at == post.created_at
        assert view.likes == ["bob"]
        assert view.comments == [Comment(commentor="bob", content="hey")]


class TestCredentials:
    """Tests for Credentials value object."""

    def test_hides_password(self):
        """The password never appears in the repr."""
        credentials = Credentials.of("alice", "s3cret")

        assert "s3cret" not in repr(credentials)
        assert credentials.password.get_secret_value() == "s3cret"

    def test_rejects_empty_username(self):
        """A username is required."""
        with pytest.raises(ValidationError):
            Credentials.of("", "p")
