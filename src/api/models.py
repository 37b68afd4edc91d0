"""Pydantic models for API request/response."""

from pydantic import BaseModel, EmailStr, Field, field_validator

from domain.model.account import PublicAccount, Role

# bcrypt only looks at the first 72 bytes and newer releases reject longer input
MAX_PASSWORD_BYTES = 72


def _normalize_email(value):
    if isinstance(value, str):
        return value.strip().lower()
    return value


def _check_password_bytes(value: str) -> str:
    if len(value.encode('utf-8')) > MAX_PASSWORD_BYTES:
        raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
    return value


class SignupRequest(BaseModel):
    """Request model for account registration."""
    name: str = Field(..., min_length=2, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=128)
    role: Role = Role.USER

    @field_validator('name', mode='before')
    @classmethod
    def strip_name(cls, value):
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator('email', mode='before')
    @classmethod
    def normalize_email(cls, value):
        return _normalize_email(value)

    @field_validator('password')
    @classmethod
    def check_password_bytes(cls, value: str) -> str:
        return _check_password_bytes(value)


class SigninRequest(BaseModel):
    """Request model for sign-in."""
    email: EmailStr
    password: str = Field(..., min_length=1, max_length=128)

    @field_validator('email', mode='before')
    @classmethod
    def normalize_email(cls, value):
        return _normalize_email(value)

    @field_validator('password')
    @classmethod
    def check_password_bytes(cls, value: str) -> str:
        return _check_password_bytes(value)


class AccountResponse(BaseModel):
    """Public account fields returned to clients."""
    id: str
    name: str
    email: str
    role: Role

    @classmethod
    def from_domain(cls, account: PublicAccount) -> 'AccountResponse':
        return cls(id=account.id, name=account.name, email=account.email, role=account.role)


class AuthResponse(BaseModel):
    """Response model for signup/signin."""
    message: str
    user: AccountResponse


class MessageResponse(BaseModel):
    message: str
