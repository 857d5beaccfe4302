"""procstatus exception hierarchy.

All procstatus-specific exceptions inherit from ProcStatusError, so a caller
driving a long-running copy can catch any reporter or digest error with a
single except clause:

    try:
        reporter.stop(bytes_total, Status.COMPLETED)
    except procstatus.ProcStatusError as e:
        handle_gracefully(e)

Each exception also inherits from its stdlib counterpart so existing
``except ValueError:`` / ``except OSError:`` handlers keep working.

Every class carries a ``code`` following the tool layer's result convention:
``-1`` for an invalid argument, ``0`` for an operational failure of an
underlying resource. ``1`` (success) is never raised.
"""

from __future__ import annotations

from enum import IntEnum


class StatusCode(IntEnum):
    """Three-level result convention shared by the tool layer."""

    INVALID_ARGUMENT = -1
    FAILURE = 0
    SUCCESS = 1


class ProcStatusError(Exception):
    """Base exception for all procstatus errors."""

    code: StatusCode = StatusCode.FAILURE


class InvalidArgumentError(ProcStatusError, ValueError):
    """Invalid argument or violated precondition."""

    code = StatusCode.INVALID_ARGUMENT


class ConfigurationError(ProcStatusError, ValueError):
    """Invalid configuration file, override, or option."""

    code = StatusCode.INVALID_ARGUMENT


class OutputError(ProcStatusError, OSError):
    """The output stream rejected a write."""


class DigestError(ProcStatusError, RuntimeError):
    """Digest backend could not be created or failed while hashing."""


__all__ = [
    "StatusCode",
    "ProcStatusError",
    "InvalidArgumentError",
    "ConfigurationError",
    "OutputError",
    "DigestError",
]
