"""Authentication Pydantic schemas for API validation."""

from .user import (
    LoginInput,
    RegistrationInput,
    TokenResponse,
    UserIdentity,
    UserRecord,
)

__all__ = [
    "LoginInput",
    "RegistrationInput",
    "TokenResponse",
    "UserIdentity",
    "UserRecord",
]
