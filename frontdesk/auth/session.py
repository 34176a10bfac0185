"""Session provider: who is at the desk.

Replaces ambient "current user" storage with an explicit object that the
API dependencies consult. Passwords are stored as bcrypt hashes; sessions
are JWT access tokens, and logging out revokes the token's ``jti``.
"""

import logging
import time

import bcrypt
from jose import JWTError

from frontdesk.auth.jwt import create_access_token, decode_token
from frontdesk.config import Settings
from frontdesk.models.user import User

logger = logging.getLogger(__name__)


def hash_password(password: str) -> str:
    """Return a salted bcrypt hash of ``password``."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))


class SessionProvider:
    """Authenticates operators and resolves tokens back to users."""

    def __init__(self, settings: Settings) -> None:
        self._settings = settings
        self._accounts: dict[str, tuple[User, str]] = {}
        # jti -> expiry (unix seconds); entries are dropped once the token would have expired anyway
        self._revoked: dict[str, float] = {}

    @classmethod
    def from_settings(cls, settings: Settings) -> "SessionProvider":
        """Provider with the two built-in desk accounts, ``admin`` and ``staff``."""
        provider = cls(settings)
        provider.add_user(User(id="1", username="admin", name="Admin User", role="admin"), settings.admin_password)
        provider.add_user(User(id="2", username="staff", name="Staff User", role="staff"), settings.staff_password)
        return provider

    def add_user(self, user: User, password: str) -> None:
        self._accounts[user.username] = (user, hash_password(password))

    def authenticate(self, username: str, password: str) -> User | None:
        """Return the user when the credentials match an active account."""
        account = self._accounts.get(username)
        if account is None:
            logger.info("Login rejected for unknown user %r", username)
            return None
        user, hashed = account
        if not user.is_active or not verify_password(password, hashed):
            logger.info("Login rejected for %r", username)
            return None
        return user

    def login(self, username: str, password: str) -> tuple[User, str] | None:
        """Authenticate and open a session, returning the user and its token."""
        user = self.authenticate(username, password)
        if user is None:
            return None
        logger.info("User %s logged in", username)
        return user, create_access_token(user.username, self._settings)

    def current_user(self, token: str) -> User | None:
        """Resolve a token to its user, or ``None`` if it is not a live session."""
        try:
            payload = decode_token(token, self._settings)
        except JWTError:
            return None

        if payload.get("type") != "access" or payload.get("jti") in self._revoked:
            return None

        account = self._accounts.get(payload.get("sub", ""))
        if account is None or not account[0].is_active:
            return None
        return account[0]

    def logout(self, token: str) -> None:
        """Revoke the session behind ``token``. Unknown or expired tokens are ignored."""
        try:
            payload = decode_token(token, self._settings)
        except JWTError:
            return
        self._prune_revoked()
        jti = payload.get("jti")
        if jti:
            self._revoked[jti] = float(payload.get("exp", 0))
            logger.info("User %s logged out", payload.get("sub"))

    @property
    def revoked_count(self) -> int:
        return len(self._revoked)

    def _prune_revoked(self, now: float | None = None) -> None:
        """Forget revoked tokens past their expiry; decoding rejects them on its own."""
        now = time.time() if now is None else now
        expired = [jti for jti, exp in self._revoked.items() if exp <= now]
        for jti in expired:
            del self._revoked[jti]
