"""Authentication module for AuthGate.

This module provides:
- Request validation for registration and login
- Password hashing and credential checks
- JWT token issuing and verification
- The auth blueprint (register, login, me)
"""

from . import schemas, service, token, validation

__all__ = ["schemas", "service", "token", "validation"]
