"""Result types for operations that can fail with a domain error."""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from .exceptions import AuthGateError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying a value."""

    value: T


@dataclass(frozen=True)
class Err:
    """Failed outcome carrying the domain error to report."""

    error: AuthGateError


Result = Union[Ok[T], Err]
