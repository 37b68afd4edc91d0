"""Auth service: registration and authentication business logic.

Pure business logic with no HTTP dependencies.
Raises domain errors that route handlers map to HTTP status codes.
"""

import logging

from domain.model.account import PublicAccount, Role
from domain.model.errors import (
    AccountExistsError,
    AccountNotFoundError,
    DuplicateEmailError,
    InvalidCredentialsError,
)
from port.account_repository import AccountRepository
from port.password_hasher import PasswordHasher

logger = logging.getLogger(__name__)


def register(
    repo: AccountRepository,
    hasher: PasswordHasher,
    name: str,
    email: str,
    password: str,
    role: Role = Role.USER,
) -> PublicAccount:
    """Register a new account.

    The email lookup only spares a bcrypt round for obvious duplicates.
    Two concurrent signups can both pass it; the repository's uniqueness
    check decides, and its DuplicateEmailError is reported the same way.

    Raises:
        AccountExistsError: email already registered
        HashingError: hasher failed internally
    """
    if repo.find_by_email(email):
        logger.info("Registration rejected: email already exists", extra={"email": email})
        raise AccountExistsError(email)

    password_hash = hasher.hash(password)

    try:
        account = repo.create(name=name, email=email, password_hash=password_hash, role=role)
    except DuplicateEmailError as e:
        logger.info("Registration lost race on email", extra={"email": email})
        raise AccountExistsError(email) from e

    logger.info("Account registered", extra={"accountId": account.id, "email": email})
    return account.to_public()


def authenticate(
    repo: AccountRepository,
    hasher: PasswordHasher,
    email: str,
    password: str,
) -> PublicAccount:
    """Authenticate an account by email and password.

    Raises:
        AccountNotFoundError: no account for this email
        InvalidCredentialsError: password mismatch
        HashingError: stored hash unusable or hasher failure
    """
    account = repo.find_by_email(email)
    if account is None:
        logger.info("Authentication failed: unknown email", extra={"email": email})
        raise AccountNotFoundError(email)

    if not hasher.verify(password, account.password_hash):
        logger.info("Authentication failed: wrong password", extra={"accountId": account.id})
        raise InvalidCredentialsError()

    logger.info("Account authenticated", extra={"accountId": account.id, "email": email})
    return account.to_public()
