"""JSON error rendering shared by handlers and Flask error handlers."""

from flask import jsonify

from .exceptions import AuthGateError


def error_response(error: AuthGateError):
    """
    Render a domain error as a JSON response tuple.

    Response format:
    ```json
    {
        "error": {
            "type": "DuplicateEmailError",
            "message": "Email is already registered",
            "details": {"email": ["Email is already registered"]}
        }
    }
    ```

    ``details`` is omitted when the error has none.
    """
    response = {
        "error": {
            "type": error.__class__.__name__,
            "message": error.message
        }
    }
    if error.details:
        response["error"]["details"] = error.details
    return jsonify(response), error.status_code
