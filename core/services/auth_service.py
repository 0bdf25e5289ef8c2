# core/services/auth_service.py

import logging
from typing import Optional

from core.auth import create_token, hash_password, is_password_allowed, verify_password
from core.config import Settings, get_settings
from core.errors import ValidationError
from core.models import User, UserWithToken
from core.repositories.base import UserStore

logger = logging.getLogger(__name__)

class AuthService:
    """Registration and login against a user store."""

    def __init__(self, users: UserStore, settings: Optional[Settings] = None):
        self.users = users
        self.settings = settings or get_settings()

    def _with_token(self, user: User, token: Optional[str] = None) -> UserWithToken:
        return UserWithToken(
            id=user.id,
            username=user.username,
            token=token or create_token(user.id, self.settings),
        )

    @staticmethod
    def _require_credentials(username: Optional[str], password: Optional[str]) -> None:
        if not username:
            raise ValidationError("username can't be blank")
        if not password:
            raise ValidationError("password can't be blank")

    def register(self, username: Optional[str], password: Optional[str]) -> UserWithToken:
        """Create a user and issue a token for it.

        Raises:
            ValidationError: If a field is blank, the password is too weak
                or the username is taken
        """
        self._require_credentials(username, password)
        if not is_password_allowed(password):
            raise ValidationError("password is not strong enough")
        if self.users.read_by_username(username):
            raise ValidationError("username taken")

        hash, salt = hash_password(password)
        user = self.users.insert(username=username, hash=hash, salt=salt)
        logger.info("Registered user %s", user.id)
        return self._with_token(user)

    def login(self, username: Optional[str], password: Optional[str]) -> UserWithToken:
        self._require_credentials(username, password)
        user = self.users.read_by_username(username)
        if user is None or not verify_password(password, user.hash, user.salt):
            logger.warning("Failed login attempt")
            raise ValidationError("username or password is invalid")
        return self._with_token(user)

    def me(self, user: User, token: str) -> UserWithToken:
        """Describe the authenticated user with the token they presented."""
        return self._with_token(user, token)
