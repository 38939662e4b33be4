"""Tests for the session store and profile mapping."""

import uuid

import pytest

from app.models.profile import UserProfile
from app.services.linkedin import LinkedInAPIError, profile_from_userinfo
from app.services.sessions import SessionStore


class TestSessionStore:
    """Tests for creating and looking up sessions."""

    def test_create_and_get(self, session_store: SessionStore):
        profile = UserProfile(id="t1", full_name="Jane Doe", email="j@d.com")

        session_id = session_store.create(profile)

        assert uuid.UUID(session_id)
        assert session_store.get(session_id) == profile
        # Reads do not consume the session
        assert session_store.get(session_id) == profile

    def test_unknown_session(self, session_store: SessionStore):
        assert session_store.get("missing") is None

    def test_sessions_are_distinct(self, session_store: SessionStore):
        profile = UserProfile(id="t1")

        first = session_store.create(profile)
        second = session_store.create(profile)

        assert first != second
        assert len(session_store) == 2


class TestProfileMapping:
    """Tests for mapping LinkedIn userinfo onto UserProfile."""

    def test_full_userinfo(self, mock_userinfo):
        profile = profile_from_userinfo("t1", mock_userinfo)

        assert profile.id == "t1"
        assert profile.full_name == "Jane Doe"
        assert profile.first_name == "Jane"
        assert profile.last_name == "Doe"
        assert profile.profile_picture == "https://media.licdn.com/dms/image/jane.jpg"
        assert profile.email == "j@d.com"
        assert profile.email_verified is True

    def test_missing_email_fields_default(self):
        profile = profile_from_userinfo("t2", {"name": "No Mail", "given_name": "No"})

        assert profile.email is None
        assert profile.email_verified is False
        assert profile.last_name is None

    def test_wrong_claim_types_raise_api_error(self):
        with pytest.raises(LinkedInAPIError):
            profile_from_userinfo("t1", {"name": {"localized": "x"}, "email": 42})

    def test_serializes_with_camel_case(self, mock_userinfo):
        data = profile_from_userinfo("t1", mock_userinfo).model_dump(by_alias=True)

        assert data == {
            "id": "t1",
            "fullName": "Jane Doe",
            "firstName": "Jane",
            "lastName": "Doe",
            "profilePicture": "https://media.licdn.com/dms/image/jane.jpg",
            "email": "j@d.com",
            "emailVerified": True,
        }
