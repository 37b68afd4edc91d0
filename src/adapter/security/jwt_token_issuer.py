"""JWT (HS256) implementation of TokenIssuer."""

from datetime import datetime, timedelta, timezone
from logging import getLogger

from jose import ExpiredSignatureError, JWTError, jwt
from jose.exceptions import JWTClaimsError

from domain.model.account import Role, SessionClaims
from domain.model.errors import TokenExpiredError, TokenInvalidError, TokenMalformedError

logger = getLogger(__name__)

JWT_ALGORITHM = "HS256"
DEFAULT_EXPIRES_IN_SECONDS = 24 * 60 * 60
_REQUIRED_CLAIMS = ("accountId", "email", "role", "iat", "exp")


class JWTTokenIssuer:
    """Signs and verifies session tokens with a process-wide secret.

    The secret is handed in at construction. Calling rotate_secret() swaps it,
    which invalidates every token issued before the call; there is no
    revocation list, so this is the only way to kill outstanding sessions.
    """

    def __init__(self, secret_key: str, expires_in_seconds: int = DEFAULT_EXPIRES_IN_SECONDS):
        if not secret_key:
            raise ValueError("JWT secret key must not be empty")
        if expires_in_seconds <= 0:
            raise ValueError("Token lifetime must be positive")
        self._secret_key = secret_key
        self._expires_in = expires_in_seconds

    @property
    def max_age_seconds(self) -> int:
        return self._expires_in

    def rotate_secret(self, new_secret_key: str) -> None:
        if not new_secret_key:
            raise ValueError("JWT secret key must not be empty")
        self._secret_key = new_secret_key
        logger.warning("JWT signing secret rotated; all outstanding sessions are now invalid")

    def issue(self, claims: SessionClaims) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            "accountId": claims.account_id,
            "email": claims.email,
            "role": Role(claims.role).value,
            "iat": now,
            "exp": now + timedelta(seconds=self._expires_in),
        }
        return jwt.encode(payload, self._secret_key, algorithm=JWT_ALGORITHM)

    def verify(self, token: str) -> SessionClaims:
        try:
            jwt.get_unverified_header(token)
        except JWTError as e:
            raise TokenMalformedError("Token could not be parsed") from e

        try:
            payload = jwt.decode(token, self._secret_key, algorithms=[JWT_ALGORITHM])
        except ExpiredSignatureError as e:
            raise TokenExpiredError("Token has expired") from e
        except JWTClaimsError as e:
            raise TokenInvalidError(f"Token claims rejected: {e}") from e
        except JWTError as e:
            raise TokenInvalidError("Token signature verification failed") from e

        missing = [name for name in _REQUIRED_CLAIMS if name not in payload]
        if missing:
            raise TokenMalformedError(f"Token is missing claims: {', '.join(missing)}")

        try:
            role = Role(payload["role"])
            issued_at = datetime.fromtimestamp(payload["iat"], tz=timezone.utc)
            expires_at = datetime.fromtimestamp(payload["exp"], tz=timezone.utc)
        except (ValueError, TypeError) as e:
            raise TokenMalformedError("Token claims have unexpected values") from e

        return SessionClaims(
            account_id=payload["accountId"],
            email=payload["email"],
            role=role,
            issued_at=issued_at,
            expires_at=expires_at,
        )
