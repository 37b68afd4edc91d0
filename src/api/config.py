"""Process configuration read from the environment."""

import os
from dataclasses import dataclass

from adapter.security.bcrypt_hasher import DEFAULT_ROUNDS
from adapter.security.jwt_token_issuer import DEFAULT_EXPIRES_IN_SECONDS

_TRUE_VALUES = {"1", "true", "yes", "on"}
_SAMESITE_VALUES = {"strict", "lax", "none"}


@dataclass(frozen=True)
class Settings:
    """Application settings. Loaded once at startup, never hot-reloaded."""
    jwt_secret_key: str
    jwt_expires_in_seconds: int = DEFAULT_EXPIRES_IN_SECONDS
    bcrypt_rounds: int = DEFAULT_ROUNDS
    environment: str = "development"
    cookie_samesite: str = "strict"
    unify_signin_errors: bool = False
    cors_origins: str = "*"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


def load_settings() -> Settings:
    """Build Settings from environment variables.

    Raises:
        ValueError: JWT_SECRET_KEY missing or a value is out of range
    """
    secret = os.getenv("JWT_SECRET_KEY")
    if not secret:
        raise ValueError(
            "JWT_SECRET_KEY environment variable is required. "
            "Generate a secure key with: openssl rand -hex 32"
        )

    samesite = os.getenv("COOKIE_SAMESITE", "strict").strip().lower()
    if samesite not in _SAMESITE_VALUES:
        raise ValueError(f"COOKIE_SAMESITE must be one of {sorted(_SAMESITE_VALUES)}, got {samesite!r}")

    return Settings(
        jwt_secret_key=secret,
        jwt_expires_in_seconds=_get_int("JWT_EXPIRES_IN_SECONDS", DEFAULT_EXPIRES_IN_SECONDS),
        bcrypt_rounds=_get_int("BCRYPT_ROUNDS", DEFAULT_ROUNDS),
        environment=os.getenv("ENVIRONMENT", "development").strip().lower(),
        cookie_samesite=samesite,
        unify_signin_errors=os.getenv("AUTH_UNIFY_SIGNIN_ERRORS", "false").strip().lower() in _TRUE_VALUES,
        cors_origins=os.getenv("CORS_ORIGINS", "*"),
    )
