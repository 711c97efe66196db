"""Tests for the User aggregate: registration, profile changes and logins."""

import pytest
from marketplace.identity.events import ProfileUpdated, UserLoggedIn, UserRegistered
from marketplace.identity.user import User
from protean.exceptions import ValidationError


def _make_user(**overrides):
    defaults = {"email": "alice@example.com", "username": "alice", "password_hash": "hashed"}
    defaults.update(overrides)
    return User.register(**defaults)


class TestRegister:
    def test_register_sets_fields(self):
        user = _make_user()
        assert user.email == "alice@example.com"
        assert user.username == "alice"
        assert user.created_at is not None
        assert user.last_login_at is None

    def test_email_is_normalized(self):
        user = _make_user(email="  Alice@Example.com ")
        assert user.email == "alice@example.com"

    def test_register_raises_event(self):
        user = _make_user()
        assert len(user._events) == 1
        event = user._events[0]
        assert isinstance(event, UserRegistered)
        assert event.user_id == str(user.id)
        assert event.email == "alice@example.com"

    def test_invalid_email_rejected(self):
        with pytest.raises(ValidationError):
            _make_user(email="not-an-email")

    def test_username_required(self):
        with pytest.raises(ValidationError):
            _make_user(username="")


class TestUpdateProfile:
    def test_partial_update_keeps_other_fields(self):
        user = _make_user()
        user.update_profile(username="alice_w")
        assert user.username == "alice_w"
        assert user.email == "alice@example.com"
        assert user.avatar_url is None

    def test_update_email_normalizes(self):
        user = _make_user()
        user.update_profile(email="ALICE.W@example.com")
        assert user.email == "alice.w@example.com"

    def test_update_with_invalid_email_rejected(self):
        user = _make_user()
        with pytest.raises(ValidationError):
            user.update_profile(email="broken@")

    def test_update_raises_event(self):
        user = _make_user()
        user._events.clear()

        user.update_profile(avatar_url="/media/alice.png")
        assert len(user._events) == 1
        event = user._events[0]
        assert isinstance(event, ProfileUpdated)
        assert event.avatar_url == "/media/alice.png"


class TestRecordLogin:
    def test_record_login_sets_timestamp(self):
        user = _make_user()
        user._events.clear()

        user.record_login()
        assert user.last_login_at is not None
        assert isinstance(user._events[0], UserLoggedIn)


def test_public_projection_hides_credential():
    user = _make_user()
    public = user.to_public()
    assert set(public) == {"id", "email", "username", "avatar_url"}
    assert "password_hash" not in public
