from typing import Protocol

from domain.model.account import Account, Role


class AccountRepository(Protocol):
    """Protocol defining the interface for account persistence."""
    def find_by_email(self, email: str) -> Account | None:
        """Find an account by email. Return Account or None if not found."""
        ...

    def create(self, name: str, email: str, password_hash: str, role: Role) -> Account:
        """Create a new account.

        Raises DuplicateEmailError when the email is already taken. This check
        is authoritative; callers' own lookups are only an optimisation.
        """
        ...
