"""Request body validation for credential endpoints.

Each input shape has its own function returning a ``Result``: ``Ok`` with the
typed input, or ``Err`` with a ``ValidationError`` whose details map each
failing field to its messages.
"""

import logging
from typing import Any

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import ValidationError
from ..result import Err, Ok, Result
from .schemas import LoginInput, RegistrationInput

logger = logging.getLogger(__name__)

# Key for errors that belong to the body as a whole
BODY_ERRORS_KEY = "_errors"


def field_errors(exc: PydanticValidationError) -> dict[str, list[str]]:
    """Group pydantic errors by top-level field name."""
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        loc = error["loc"]
        field = str(loc[0]) if loc else BODY_ERRORS_KEY
        errors.setdefault(field, []).append(error["msg"])
    return errors


def _validate(schema: type[BaseModel], payload: Any) -> Result:
    if not isinstance(payload, dict):
        return Err(ValidationError(
            "Invalid request data",
            {BODY_ERRORS_KEY: ["Request body must be a JSON object"]}
        ))

    try:
        return Ok(schema.model_validate(payload))
    except PydanticValidationError as e:
        errors = field_errors(e)
        logger.debug(f"{schema.__name__} rejected fields: {sorted(errors)}")
        return Err(ValidationError("Invalid request data", errors))


def validate_registration(payload: Any) -> Result[RegistrationInput]:
    """Validate a registration body: name, email and a strong password."""
    return _validate(RegistrationInput, payload)


def validate_login(payload: Any) -> Result[LoginInput]:
    """Validate a login body: non-empty email and password, no strength rule."""
    return _validate(LoginInput, payload)
