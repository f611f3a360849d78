"""Exception classes for AuthGate.

Each error carries the HTTP status it maps to. Errors are returned inside
``Err`` results by validation, service and token operations and rendered
once, at the request boundary, by ``authgate.responses.error_response``.
"""


class AuthGateError(Exception):
    """Base exception for all AuthGate errors."""

    status_code = 500

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(AuthGateError):
    """Malformed request input. Details map field name to messages."""

    status_code = 400


class DuplicateEmailError(AuthGateError):
    """Registration attempted with an email that is already taken."""

    status_code = 400

    def __init__(self, message: str = "Email is already registered"):
        super().__init__(message, {"email": [message]})


class InvalidCredentialsError(AuthGateError):
    """Login failed.

    Raised with the same message whether the email is unknown or the
    password is wrong, so callers cannot probe for registered emails.
    """

    status_code = 400

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message, {"email": [message]})


class StoreError(AuthGateError):
    """The user store failed. Never carries details."""

    status_code = 500

    def __init__(self, message: str = "An internal error occurred"):
        super().__init__(message)


class UnauthorizedError(AuthGateError):
    """Missing or invalid bearer token. Never carries details."""

    status_code = 401

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)
