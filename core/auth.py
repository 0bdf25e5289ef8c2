# core/auth.py
"""Password hashing and token helpers.

Passwords are stored as PBKDF2-HMAC-SHA512 hashes with a per-user random
salt. Tokens are HS256 JWTs carrying the user id.
"""

import hashlib
import hmac
import re
import secrets
from datetime import datetime, timedelta, UTC
from typing import Optional, Tuple

import jwt

from core.config import Settings, get_settings
from core.errors import AuthenticationError

HASH_ITERATIONS = 100_000
HASH_LENGTH = 64
SALT_BYTES = 16
TOKEN_ALGORITHM = "HS256"

_PASSWORD_RULES = (
    re.compile(r"\W"),      # non-alphanumeric
    re.compile(r"\d"),      # digit
    re.compile(r"[A-Z]"),   # uppercase letter
    re.compile(r"[a-z]"),   # lowercase letter
)


def is_password_allowed(password: str) -> bool:
    return len(password) > 6 and all(rule.search(password) for rule in _PASSWORD_RULES)


def hash_password(password: str, salt: Optional[str] = None) -> Tuple[str, str]:
    """Hash a password.

    Args:
        password: The plain text password
        salt: Hex encoded salt, generated when omitted

    Returns:
        Tuple of (hash, salt), both hex encoded
    """
    salt = salt or secrets.token_hex(SALT_BYTES)
    digest = hashlib.pbkdf2_hmac(
        "sha512", password.encode("utf-8"), salt.encode("utf-8"), HASH_ITERATIONS, HASH_LENGTH
    )
    return digest.hex(), salt


def verify_password(password: str, hash: str, salt: str) -> bool:
    candidate, _ = hash_password(password, salt)
    return hmac.compare_digest(candidate, hash)


def create_token(user_id: str, settings: Optional[Settings] = None, now: Optional[datetime] = None) -> str:
    settings = settings or get_settings()
    issued_at = now or datetime.now(UTC)
    payload = {
        "id": user_id,
        "iat": issued_at,
        "exp": issued_at + timedelta(days=settings.token_ttl_days),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=TOKEN_ALGORITHM)


def decode_token(token: str, settings: Optional[Settings] = None) -> str:
    """Verify a token and return the user id it was issued for.

    Raises:
        AuthenticationError: If the token is malformed, tampered with or expired
    """
    settings = settings or get_settings()
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[TOKEN_ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise AuthenticationError("invalid_token", "jwt expired")
    except jwt.InvalidTokenError as e:
        raise AuthenticationError("invalid_token", str(e) or "invalid token")
    user_id = payload.get("id")
    if not user_id:
        raise AuthenticationError("invalid_token", "token has no user id")
    return user_id
