"""Unit tests for password hashing, access tokens, and the session provider."""

import time
from datetime import timedelta

import pytest
from jose import JWTError

from frontdesk.auth.jwt import create_access_token, decode_token
from frontdesk.auth.session import SessionProvider, hash_password, verify_password
from frontdesk.config import Settings
from frontdesk.models.user import User


@pytest.fixture
def sessions(test_settings: Settings) -> SessionProvider:
    return SessionProvider.from_settings(test_settings)


class TestPasswordHashing:
    def test_hash_is_not_plaintext(self):
        assert hash_password("secret") != "secret"

    def test_hashes_are_salted(self):
        assert hash_password("secret") != hash_password("secret")

    def test_verify(self):
        hashed = hash_password("secret")
        assert verify_password("secret", hashed) is True
        assert verify_password("wrong", hashed) is False


class TestAccessToken:
    def test_claims(self, test_settings: Settings):
        payload = decode_token(create_access_token("admin", test_settings), test_settings)
        assert payload["sub"] == "admin"
        assert payload["type"] == "access"
        assert "jti" in payload
        assert "exp" in payload

    def test_each_token_has_its_own_jti(self, test_settings: Settings):
        first = decode_token(create_access_token("admin", test_settings), test_settings)
        second = decode_token(create_access_token("admin", test_settings), test_settings)
        assert first["jti"] != second["jti"]

    def test_expired_token_raises(self, test_settings: Settings):
        token = create_access_token("admin", test_settings, expires_delta=timedelta(seconds=-1))
        with pytest.raises(JWTError):
            decode_token(token, test_settings)

    def test_wrong_key_raises(self, test_settings: Settings):
        token = create_access_token("admin", test_settings)
        other = test_settings.model_copy(update={"jwt_secret_key": "another-secret"})
        with pytest.raises(JWTError):
            decode_token(token, other)


class TestSessionProvider:
    def test_builtin_accounts(self, sessions: SessionProvider):
        admin = sessions.authenticate("admin", "adminpass")
        staff = sessions.authenticate("staff", "staffpass")
        assert admin.role == "admin"
        assert staff.role == "staff"

    @pytest.mark.parametrize(
        "username, password",
        [("admin", "wrong"), ("nobody", "adminpass"), ("staff", "adminpass")],
    )
    def test_rejected_credentials(self, sessions: SessionProvider, username, password):
        assert sessions.authenticate(username, password) is None
        assert sessions.login(username, password) is None

    def test_login_then_current_user(self, sessions: SessionProvider):
        user, token = sessions.login("admin", "adminpass")
        assert sessions.current_user(token) == user

    def test_logout_revokes_only_that_session(self, sessions: SessionProvider):
        _, first = sessions.login("staff", "staffpass")
        _, second = sessions.login("staff", "staffpass")

        sessions.logout(first)

        assert sessions.current_user(first) is None
        assert sessions.current_user(second) is not None

    def test_expired_revocations_are_pruned(self, sessions: SessionProvider):
        _, token = sessions.login("admin", "adminpass")
        sessions.logout(token)
        assert sessions.revoked_count == 1

        # Twelve hours is the default token lifetime.
        sessions._prune_revoked(now=time.time() + 13 * 60 * 60)
        assert sessions.revoked_count == 0

    def test_only_expired_revocations_are_pruned(self, sessions: SessionProvider, test_settings: Settings):
        _, long_lived = sessions.login("admin", "adminpass")
        short = create_access_token("staff", test_settings, expires_delta=timedelta(minutes=5))
        sessions.logout(short)
        sessions.logout(long_lived)
        assert sessions.revoked_count == 2

        sessions._prune_revoked(now=time.time() + 10 * 60)
        assert sessions.revoked_count == 1
        assert sessions.current_user(long_lived) is None

    def test_logout_of_expired_token_is_not_recorded(self, sessions: SessionProvider, test_settings: Settings):
        stale = create_access_token("admin", test_settings, expires_delta=timedelta(seconds=-1))
        sessions.logout(stale)
        assert sessions.revoked_count == 0

    def test_garbage_token(self, sessions: SessionProvider):
        assert sessions.current_user("not-a-jwt") is None
        sessions.logout("not-a-jwt")

    def test_inactive_user_cannot_log_in(self, sessions: SessionProvider):
        sessions.add_user(User(id="3", username="night", name="Night Clerk", is_active=False), "pw")
        assert sessions.login("night", "pw") is None

    def test_token_for_unknown_user(self, sessions: SessionProvider, test_settings: Settings):
        token = create_access_token("ghost", test_settings)
        assert sessions.current_user(token) is None
