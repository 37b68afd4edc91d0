"""Authentication routes (signup, signin, signout)."""

import asyncio
import logging

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse

from api.config import Settings
from api.cookies import SESSION_COOKIE_NAME, SessionCookieManager
from api.dependencies import (
    get_account_repo,
    get_cookie_manager,
    get_password_hasher,
    get_settings,
    get_token_issuer,
)
from api.models import AccountResponse, AuthResponse, MessageResponse, SigninRequest, SignupRequest
from domain.model.account import SessionClaims
from domain.model.errors import (
    AccountExistsError,
    AccountNotFoundError,
    InvalidCredentialsError,
    TokenError,
)
from port.account_repository import AccountRepository
from port.password_hasher import PasswordHasher
from port.token_issuer import TokenIssuer
from services import auth_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def signup(
    request: SignupRequest,
    response: Response,
    repo: AccountRepository = Depends(get_account_repo),
    hasher: PasswordHasher = Depends(get_password_hasher),
    issuer: TokenIssuer = Depends(get_token_issuer),
    cookies: SessionCookieManager = Depends(get_cookie_manager),
):
    """Register a new account and start a session.

    Raises:
        409 if the email is already registered
    """
    try:
        # bcrypt and pymongo both block; keep them off the event loop
        account = await asyncio.to_thread(
            auth_service.register,
            repo,
            hasher,
            name=request.name,
            email=request.email,
            password=request.password,
            role=request.role,
        )
    except AccountExistsError:
        return _error(status.HTTP_409_CONFLICT, "Email already exists")

    token = issuer.issue(SessionClaims.for_account(account))
    cookies.set(response, SESSION_COOKIE_NAME, token)

    logger.info("User registered", extra={"accountId": account.id, "email": account.email})
    return AuthResponse(message="User registered", user=AccountResponse.from_domain(account))


@router.post("/signin", response_model=AuthResponse)
async def signin(
    request: SigninRequest,
    response: Response,
    repo: AccountRepository = Depends(get_account_repo),
    hasher: PasswordHasher = Depends(get_password_hasher),
    issuer: TokenIssuer = Depends(get_token_issuer),
    cookies: SessionCookieManager = Depends(get_cookie_manager),
    settings: Settings = Depends(get_settings),
):
    """Authenticate with email and password and start a session.

    Raises:
        404 if the email is unknown, 401 on a wrong password
        (both 401 when AUTH_UNIFY_SIGNIN_ERRORS is on)
    """
    try:
        account = await asyncio.to_thread(
            auth_service.authenticate,
            repo,
            hasher,
            email=request.email,
            password=request.password,
        )
    except AccountNotFoundError:
        if settings.unify_signin_errors:
            return _error(status.HTTP_401_UNAUTHORIZED, "Invalid credentials")
        return _error(status.HTTP_404_NOT_FOUND, "User not found")
    except InvalidCredentialsError:
        return _error(status.HTTP_401_UNAUTHORIZED, "Invalid credentials")

    token = issuer.issue(SessionClaims.for_account(account))
    cookies.set(response, SESSION_COOKIE_NAME, token)

    logger.info("User signed in", extra={"accountId": account.id, "email": account.email})
    return AuthResponse(message="User signed in successfully", user=AccountResponse.from_domain(account))


@router.post("/signout", response_model=MessageResponse)
async def signout(
    request: Request,
    response: Response,
    issuer: TokenIssuer = Depends(get_token_issuer),
    cookies: SessionCookieManager = Depends(get_cookie_manager),
):
    """Clear the session cookie. Always succeeds, with or without a valid session."""
    email = "unknown"
    token = cookies.get(request, SESSION_COOKIE_NAME)
    if token:
        # Only used to attribute the audit log entry
        try:
            email = issuer.verify(token).email
        except TokenError as e:
            logger.warning("Invalid token during signout", extra={"reason": e.kind.value if e.kind else None})

    cookies.clear(response, SESSION_COOKIE_NAME)

    logger.info("User signed out", extra={"email": email})
    return MessageResponse(message="User signed out successfully")
