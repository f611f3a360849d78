"""JWT token issuing and verification.

Tokens carry the user's identity claims (id, name, email) and are signed
with the configured secret. No expiry is set when issuing; tokens that do
carry an ``exp`` claim are still checked by PyJWT on decode.
"""

import logging

import jwt
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import UnauthorizedError
from ..result import Err, Ok, Result
from .schemas import UserIdentity

logger = logging.getLogger(__name__)

DEFAULT_ALGORITHM = "HS256"
CLAIM_FIELDS = set(UserIdentity.model_fields)


def generate_access_token(
    user: UserIdentity,
    secret_key: str,
    algorithm: str = DEFAULT_ALGORITHM,
) -> str:
    """Sign the identity claims of a user.

    Only id, name and email are signed, so a UserRecord can be passed
    directly without leaking its password field.
    """
    claims = user.model_dump(include=CLAIM_FIELDS)
    return jwt.encode(claims, secret_key, algorithm=algorithm)


def validate_access_token(
    token: str,
    secret_key: str,
    algorithm: str = DEFAULT_ALGORITHM,
) -> UserIdentity:
    """Verify a token's signature and return its identity claims.

    Raises:
        jwt.InvalidTokenError: Bad signature, malformed or expired token
        pydantic.ValidationError: Payload lacks the identity claims
    """
    payload = jwt.decode(token, secret_key, algorithms=[algorithm])
    return UserIdentity.model_validate(payload)


def parse_bearer(auth_header: str | None) -> str | None:
    """Extract the token from an ``Authorization: Bearer <token>`` value."""
    if not auth_header:
        return None
    parts = auth_header.split(" ")
    if len(parts) != 2 or parts[0].lower() != "bearer" or not parts[1]:
        return None
    return parts[1]


def verify_bearer(
    auth_header: str | None,
    secret_key: str,
    algorithm: str = DEFAULT_ALGORITHM,
) -> Result[UserIdentity]:
    """
    Resolve an Authorization header to the identity it encodes.

    Every failure is reported as the same UnauthorizedError so callers
    learn nothing about why a token was refused.
    """
    token = parse_bearer(auth_header)
    if token is None:
        logger.warning("Missing or malformed authorization header")
        return Err(UnauthorizedError())

    try:
        return Ok(validate_access_token(token, secret_key, algorithm))
    except (jwt.InvalidTokenError, PydanticValidationError) as e:
        logger.warning(f"Rejected bearer token: {e.__class__.__name__}")
        return Err(UnauthorizedError())
