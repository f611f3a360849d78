"""Credential service: password hashing, registration and login.

Functions take a ``UserOperations`` bound to the caller's connection and
leave commit/rollback to the caller (see ``authgate.db.Core``). Failures are
returned as ``Err`` values, never raised.
"""

import logging
import sqlite3
from functools import lru_cache

import bcrypt

from ..db.user import UserOperations
from ..exceptions import DuplicateEmailError, InvalidCredentialsError, StoreError
from ..result import Err, Ok, Result
from .schemas import RegistrationInput, UserIdentity, UserRecord

logger = logging.getLogger(__name__)


# ============================================================================
# Password Hashing
# ============================================================================


def hash_password(password: str, work_factor: int = 12) -> str:
    """Hash a password with bcrypt using a fresh random salt."""
    salt = bcrypt.gensalt(rounds=work_factor)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str | None) -> bool:
    """Check a password against a bcrypt hash.

    A missing or malformed hash never matches.
    """
    if not password_hash:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        return False


@lru_cache
def _dummy_hash(work_factor: int) -> str:
    """Hash compared against when no stored hash exists, so misses cost a bcrypt check too."""
    return hash_password("dummy-password", work_factor)


# ============================================================================
# Registration
# ============================================================================


def register_user(
    users: UserOperations,
    data: RegistrationInput,
    work_factor: int = 12,
) -> Result[UserIdentity]:
    """
    Register a new user.

    The lookup is only a fast path for the common duplicate case. Two
    concurrent registrations can both miss it, so a unique-constraint
    violation on insert is reported as a duplicate as well.

    Returns:
        Ok(UserIdentity) for the new user, or Err with DuplicateEmailError
        or StoreError
    """
    try:
        existing = users.get_by_email(data.email)
    except sqlite3.Error as e:
        logger.error(f"User lookup failed during registration: {e}")
        return Err(StoreError())

    if existing is not None:
        return Err(DuplicateEmailError())

    password_hash = hash_password(data.password, work_factor)

    try:
        user_id = users.create(data.name, data.email, password_hash)
    except sqlite3.IntegrityError:
        logger.info("Registration lost race on unique email")
        return Err(DuplicateEmailError())
    except sqlite3.Error as e:
        logger.error(f"User insert failed: {e}")
        return Err(StoreError())

    return Ok(UserIdentity(id=user_id, name=data.name, email=data.email))


# ============================================================================
# Login
# ============================================================================


def authenticate(
    users: UserOperations,
    email: str,
    password: str,
    work_factor: int = 12,
) -> Result[UserRecord]:
    """
    Verify login credentials.

    Unknown email and wrong password produce the same InvalidCredentialsError,
    and both pay for one bcrypt check at the given work factor.

    Returns:
        Ok(UserRecord) with the password cleared, or Err with
        InvalidCredentialsError or StoreError
    """
    try:
        row = users.get_by_email(email)
    except sqlite3.Error as e:
        logger.error(f"User lookup failed during login: {e}")
        return Err(StoreError())

    if row is None or not row["password"]:
        verify_password(password, _dummy_hash(work_factor))
        return Err(InvalidCredentialsError())

    if not verify_password(password, row["password"]):
        return Err(InvalidCredentialsError())

    user = UserRecord(
        id=row["id"],
        name=row["name"],
        email=row["email"],
        password=row["password"],
    )
    return Ok(user.redacted())
