"""In-memory implementation of AccountRepository for testing."""

import uuid
from datetime import datetime, timezone

from domain.model.account import Account, Role
from domain.model.errors import DuplicateEmailError


class FakeAccountRepository:
    def __init__(self):
        self.store: dict[str, Account] = {}

    # ── write operations ─────────────────────────────────────

    def create(self, name: str, email: str, password_hash: str, role: Role = Role.USER) -> Account:
        if any(a.email == email for a in self.store.values()):
            raise DuplicateEmailError(email)

        account = Account(
            id=uuid.uuid4().hex,
            name=name,
            email=email,
            password_hash=password_hash,
            role=Role(role),
            created_at=datetime.now(timezone.utc),
        )
        self.store[account.id] = account
        return account

    # ── read operations ──────────────────────────────────────

    def find_by_email(self, email: str) -> Account | None:
        for account in self.store.values():
            if account.email == email:
                return account
        return None
