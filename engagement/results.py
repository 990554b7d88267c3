"""Typed results and error taxonomy for engagement operations."""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ErrorKind(Enum):
    AUTH_REQUIRED = "auth_required"
    REMOTE_WRITE_FAILED = "remote_write_failed"
    REMOTE_READ_FAILED = "remote_read_failed"
    CONSTRAINT_CONFLICT = "constraint_conflict"


class RemoteStoreError(Exception):
    """Raised by a relation store when the backend call fails."""


class UnsupportedInteraction(ValueError):
    """Raised when a kind has no relation table for a namespace."""


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Outcome of an engagement operation.

    A failed result may still carry a usable value, e.g. the cached count a
    read fell back to.
    """
    value: Optional[T] = None
    error: Optional[ErrorKind] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: ErrorKind, value: Optional[T] = None) -> "Result[T]":
        return cls(value=value, error=error)
