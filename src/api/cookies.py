"""Session cookie handling."""

from typing import Literal

from fastapi import Request, Response

SESSION_COOKIE_NAME = "token"


class SessionCookieManager:
    """Attaches, reads and clears the session cookie.

    Attribute policy is fixed at construction and identical for set and
    clear, so the browser treats the cleared cookie as the same cookie.
    """

    def __init__(
        self,
        max_age: int,
        secure: bool,
        samesite: Literal["lax", "strict", "none"] = "strict",
        path: str = "/",
    ):
        self.max_age = max_age
        self.secure = secure
        self.samesite = samesite
        self.path = path

    def set(self, response: Response, name: str, token: str) -> None:
        response.set_cookie(
            key=name,
            value=token,
            max_age=self.max_age,
            path=self.path,
            httponly=True,
            secure=self.secure,
            samesite=self.samesite,
        )

    def get(self, request: Request, name: str) -> str | None:
        return request.cookies.get(name) or None

    def clear(self, response: Response, name: str) -> None:
        response.delete_cookie(
            key=name,
            path=self.path,
            httponly=True,
            secure=self.secure,
            samesite=self.samesite,
        )
