# domain/model/account.py

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class Role(str, Enum):
    """Roles an account can hold."""
    USER = 'user'
    ADMIN = 'admin'


@dataclass(frozen=True)
class PublicAccount:
    """Account view safe to hand to callers (no password hash)."""
    id: str
    name: str
    email: str
    role: Role
    created_at: datetime


@dataclass
class Account:
    """Domain model representing a registered account."""
    id: str
    name: str
    email: str
    password_hash: str
    created_at: datetime
    role: Role = Role.USER

    def to_public(self) -> PublicAccount:
        return PublicAccount(
            id=self.id,
            name=self.name,
            email=self.email,
            role=self.role,
            created_at=self.created_at,
        )


@dataclass(frozen=True)
class SessionClaims:
    """Identity facts carried inside a session token.

    issued_at/expires_at are only populated on claims returned by the verifier.
    """
    account_id: str
    email: str
    role: Role
    issued_at: datetime | None = None
    expires_at: datetime | None = None

    @classmethod
    def for_account(cls, account: PublicAccount) -> 'SessionClaims':
        return cls(account_id=account.id, email=account.email, role=account.role)
