"""Port definition for session token signing."""

from typing import Protocol

from domain.model.account import SessionClaims


class TokenIssuer(Protocol):
    @property
    def max_age_seconds(self) -> int: ...
    def issue(self, claims: SessionClaims) -> str: ...
    def verify(self, token: str) -> SessionClaims: ...
