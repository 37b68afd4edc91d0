from fastapi import HTTPException, Request

from adapter.mongodb.account_repository import MongoAccountRepository
from adapter.mongodb.connection import get_mongodb_client, DATABASE_NAME
from api.config import Settings
from api.cookies import SessionCookieManager
from port.account_repository import AccountRepository
from port.password_hasher import PasswordHasher
from port.token_issuer import TokenIssuer


def _get_db():
    """Get MongoDB database, raising 503 if unavailable."""
    client = get_mongodb_client()
    if client is None:
        raise HTTPException(status_code=503, detail="Database unavailable")
    return client[DATABASE_NAME]


def get_account_repo() -> AccountRepository:
    return MongoAccountRepository(_get_db())


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher


def get_token_issuer(request: Request) -> TokenIssuer:
    return request.app.state.token_issuer


def get_cookie_manager(request: Request) -> SessionCookieManager:
    return request.app.state.cookie_manager
