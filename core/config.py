# core/config.py
import os
from dataclasses import dataclass, field
from typing import List

DEFAULT_DATABASE_URL = "sqlite:///bookshelf.db"
DEFAULT_JWT_SECRET = "bookshelf-development-secret-change-me"
DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",   # Local React dev server
    "http://localhost:5173",   # Local Vite dev server
    "http://127.0.0.1:5173",
]


@dataclass(frozen=True)
class Settings:
    """Runtime settings read from the environment.

    Attributes:
        database_url: SQLAlchemy connection string
        jwt_secret: Secret used to sign and verify auth tokens
        token_ttl_days: Lifetime of an issued token
        log_level: Logging level name (DEBUG, INFO, WARNING, ERROR)
        cors_origins: Origins allowed to call the API from a browser
    """
    database_url: str = DEFAULT_DATABASE_URL
    jwt_secret: str = DEFAULT_JWT_SECRET
    token_ttl_days: int = 60
    log_level: str = "INFO"
    cors_origins: List[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))

    @property
    def uses_default_secret(self) -> bool:
        return self.jwt_secret == DEFAULT_JWT_SECRET


def _split_origins(value: str) -> List[str]:
    return [origin.strip() for origin in value.split(",") if origin.strip()]


def get_settings() -> Settings:
    """Build settings from the current environment.

    Read on every call so tests can monkeypatch environment variables.
    """
    origins = os.getenv("CORS_ORIGINS")
    return Settings(
        database_url=os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL),
        jwt_secret=os.getenv("JWT_SECRET", DEFAULT_JWT_SECRET),
        token_ttl_days=int(os.getenv("TOKEN_TTL_DAYS", "60")),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        cors_origins=_split_origins(origins) if origins else list(DEFAULT_CORS_ORIGINS),
    )
