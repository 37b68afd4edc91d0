"""FastAPI application factory."""

import logging
import tomllib
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from adapter.mongodb.connection import get_mongodb_client, DATABASE_NAME
from adapter.mongodb.indexes import ensure_all_indexes
from adapter.security.bcrypt_hasher import BcryptPasswordHasher
from adapter.security.jwt_token_issuer import JWTTokenIssuer
from api.config import Settings
from api.cookies import SessionCookieManager
from api.routes import auth, health
from domain.model.errors import HashingError

logger = logging.getLogger(__name__)

SERVICE_NAME = "Acquisitions Auth API"

_project_root = Path(__file__).parent.parent.parent


def _read_version() -> str:
    # pyproject.toml is the single source of truth when running from a checkout
    try:
        with open(_project_root / "pyproject.toml", "rb") as f:
            return tomllib.load(f)["project"]["version"]
    except FileNotFoundError:
        return "0.0.0"


VERSION = _read_version()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: startup and shutdown logic.

    A failure to build the unique email index is raised, not logged, so the
    service never runs without its duplicate-account guard.
    """
    client = get_mongodb_client()
    if client:
        if ensure_all_indexes(client[DATABASE_NAME]):
            logger.info("MongoDB indexes verified/created successfully")
        else:
            logger.warning("Failed to create some MongoDB indexes")
    else:
        logger.warning("MongoDB unavailable, skipping index creation")

    yield


def format_validation_errors(exc: RequestValidationError) -> list[dict]:
    """Flatten pydantic errors into [{field, message}] pairs."""
    details = []
    for err in exc.errors():
        loc = list(err.get("loc", ()))
        if loc and loc[0] == "body":
            loc = loc[1:]
        # Unparseable JSON reports a character offset, not a field
        if loc and not isinstance(loc[0], str):
            loc = []
        loc = [str(part) for part in loc]
        details.append({
            "field": ".".join(loc) or "body",
            "message": err.get("msg", "Invalid value"),
        })
    return details


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Validation failed", "details": format_validation_errors(exc)},
    )


async def internal_error_handler(request: Request, exc: Exception):
    logger.error(
        "Unhandled error while processing request",
        extra={"path": request.url.path, "method": request.method, "errorType": type(exc).__name__},
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )


def _configure_cors(app: FastAPI, cors_origins_env: str) -> None:
    # Browsers refuse credentials (our session cookie) with a wildcard origin
    if cors_origins_env.strip() == "*":
        cors_origins = ["*"]
        allow_credentials = False
        logger.warning(
            "CORS configured with wildcard origin ('*'). "
            "For production, set CORS_ORIGINS to specific domains (e.g., 'https://app.example.com')"
        )
    else:
        cors_origins = [origin.strip() for origin in cors_origins_env.split(",") if origin.strip()]
        allow_credentials = True
        logger.info(f"CORS configured with specific origins: {cors_origins}")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def create_app(settings: Settings) -> FastAPI:
    """Build the application with collaborators wired from settings."""
    app = FastAPI(
        title=SERVICE_NAME,
        description="Account registration and cookie-based session service",
        version=VERSION,
        lifespan=lifespan,
    )

    token_issuer = JWTTokenIssuer(settings.jwt_secret_key, settings.jwt_expires_in_seconds)
    app.state.settings = settings
    app.state.token_issuer = token_issuer
    app.state.password_hasher = BcryptPasswordHasher(settings.bcrypt_rounds)
    app.state.cookie_manager = SessionCookieManager(
        max_age=token_issuer.max_age_seconds,
        secure=settings.is_production,
        samesite=settings.cookie_samesite,
    )

    _configure_cors(app, settings.cors_origins)

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(HashingError, internal_error_handler)
    app.add_exception_handler(PyMongoError, internal_error_handler)
    app.add_exception_handler(Exception, internal_error_handler)

    app.include_router(health.router)
    app.include_router(auth.router)

    return app
