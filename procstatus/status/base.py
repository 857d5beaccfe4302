"""Base interfaces for process status reporting."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum

from procstatus.exceptions import InvalidArgumentError


class Status(str, Enum):
    """Outcome of a long-running operation, passed to ``stop``."""

    ABORTED = "aborted"
    COMPLETED = "completed"
    FAILED = "failed"

    @classmethod
    def coerce(cls, value: Status | str) -> Status:
        """Return ``value`` as a ``Status``.

        Raises:
            InvalidArgumentError: If ``value`` is not a supported status.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidArgumentError(f"unsupported status: {value!r}") from None


def status_for_exception(exc_type: type[BaseException] | None) -> Status:
    """Map the exception leaving a ``with`` block to an outcome."""
    if exc_type is None:
        return Status.COMPLETED
    if issubclass(exc_type, KeyboardInterrupt):
        return Status.ABORTED
    return Status.FAILED


class StatusReporter(ABC):
    """Abstract base class for process status reporting.

    A reporter is owned by one operation. The driver calls ``start`` before
    work begins and ``stop`` once it ends; the operation loop calls ``update``
    (or ``update_unknown_total``) once per processed chunk with cumulative
    byte counts. Using the reporter as a context manager does both lifecycle
    calls, choosing the outcome from how the block exits.
    """

    bytes_processed: int = 0

    @abstractmethod
    def start(self) -> None:
        """Record the start of the operation."""

    @abstractmethod
    def update(self, bytes_read: int, bytes_total: int) -> None:
        """Report progress when the total amount of bytes is known."""

    @abstractmethod
    def update_unknown_total(self, bytes_read: int, bytes_total: int = 0) -> None:
        """Report progress when the total amount of bytes is unknown."""

    @abstractmethod
    def stop(self, bytes_total: int, status: Status | str) -> None:
        """Record the end of the operation."""

    def __enter__(self) -> StatusReporter:
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.stop(self.bytes_processed, status_for_exception(exc_type))


def validate_byte_count(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"invalid {name}: expected an integer")
    if value < 0:
        raise InvalidArgumentError(f"invalid {name}: value less than zero")
    return value


__all__ = [
    "Status",
    "StatusReporter",
    "status_for_exception",
    "validate_byte_count",
]
