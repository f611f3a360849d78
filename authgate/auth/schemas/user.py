"""User, credential and token schemas."""

import re
from typing import Annotated

from pydantic import BaseModel, EmailStr, Field, StringConstraints, field_validator
from pydantic_core import PydanticCustomError

# Column widths of the users table
NAME_MAX_LENGTH = 256
EMAIL_MAX_LENGTH = 256

PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 16
PASSWORD_STRENGTH_MESSAGE = (
    "Password must contain at least one lowercase letter, "
    "one uppercase letter, and one digit"
)


def _check_email_length(value: str) -> str:
    if len(value) > EMAIL_MAX_LENGTH:
        raise PydanticCustomError(
            "email_too_long",
            "Email must be at most {max_length} characters",
            {"max_length": EMAIL_MAX_LENGTH},
        )
    return value


# ============================================================================
# Credential Input Schemas
# ============================================================================


class RegistrationInput(BaseModel):
    """Registration request body."""

    name: Annotated[
        str,
        StringConstraints(strip_whitespace=True, min_length=1, max_length=NAME_MAX_LENGTH),
    ]
    email: EmailStr
    password: Annotated[
        str,
        StringConstraints(min_length=PASSWORD_MIN_LENGTH, max_length=PASSWORD_MAX_LENGTH),
    ]

    @field_validator("email")
    @classmethod
    def email_fits_column(cls, v: str) -> str:
        return _check_email_length(v)

    @field_validator("password")
    @classmethod
    def password_strength(cls, v: str) -> str:
        """
        Require an ASCII lowercase letter, uppercase letter and digit.

        Order does not matter and other characters are allowed.
        """
        if not (re.search(r"[a-z]", v) and re.search(r"[A-Z]", v) and re.search(r"[0-9]", v)):
            raise PydanticCustomError("password_strength", PASSWORD_STRENGTH_MESSAGE)
        return v


class LoginInput(BaseModel):
    """Login request body. Passwords are checked against the stored hash only."""

    email: EmailStr
    password: str = Field(..., min_length=1)

    @field_validator("email")
    @classmethod
    def email_fits_column(cls, v: str) -> str:
        return _check_email_length(v)


# ============================================================================
# User Schemas
# ============================================================================


class UserIdentity(BaseModel):
    """Public identity of a user: the register response and the token claims."""

    id: int
    name: str
    email: str


class UserRecord(UserIdentity):
    """A stored user row. ``password`` holds the bcrypt hash, or None once redacted."""

    password: str | None = None

    def redacted(self) -> "UserRecord":
        return self.model_copy(update={"password": None})


class TokenResponse(BaseModel):
    """Login response body."""

    token: str
