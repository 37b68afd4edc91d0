"""Domain-level exceptions.

Services raise these errors to express business rule violations.
Route handlers catch them and map to appropriate HTTP status codes.
Every error carries a ``kind`` so callers can dispatch without
matching on messages.
"""

from enum import Enum


class AuthErrorKind(str, Enum):
    ACCOUNT_EXISTS = 'account_exists'
    ACCOUNT_NOT_FOUND = 'account_not_found'
    INVALID_CREDENTIALS = 'invalid_credentials'
    HASHING = 'hashing'
    DUPLICATE_EMAIL = 'duplicate_email'
    TOKEN_INVALID = 'token_invalid'
    TOKEN_EXPIRED = 'token_expired'
    TOKEN_MALFORMED = 'token_malformed'


class DomainError(Exception):
    """Base class for all domain errors."""
    kind: AuthErrorKind | None = None


class AccountExistsError(DomainError):
    """An account with this email is already registered."""
    kind = AuthErrorKind.ACCOUNT_EXISTS

    def __init__(self, email: str):
        self.email = email
        super().__init__("Email already exists")


class AccountNotFoundError(DomainError):
    """No account is registered under this email."""
    kind = AuthErrorKind.ACCOUNT_NOT_FOUND

    def __init__(self, email: str):
        self.email = email
        super().__init__("User not found")


class InvalidCredentialsError(DomainError):
    """Password does not match the stored hash."""
    kind = AuthErrorKind.INVALID_CREDENTIALS

    def __init__(self):
        super().__init__("Invalid credentials")


class HashingError(DomainError):
    """The password hasher failed internally (not a mismatch)."""
    kind = AuthErrorKind.HASHING


class DuplicateEmailError(DomainError):
    """Storage rejected an insert because the email is already taken.

    Raised by repositories; the auth service translates it to
    AccountExistsError.
    """
    kind = AuthErrorKind.DUPLICATE_EMAIL

    def __init__(self, email: str):
        self.email = email
        super().__init__("Duplicate email")


class TokenError(DomainError):
    """Base class for session token verification failures."""


class TokenInvalidError(TokenError):
    """Signature or claim check failed."""
    kind = AuthErrorKind.TOKEN_INVALID


class TokenExpiredError(TokenError):
    """Token is past its expiry."""
    kind = AuthErrorKind.TOKEN_EXPIRED


class TokenMalformedError(TokenError):
    """Token cannot be parsed or lacks required claims."""
    kind = AuthErrorKind.TOKEN_MALFORMED
