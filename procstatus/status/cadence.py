"""Reporting cadence and completion estimates shared by text and log reporters."""

from __future__ import annotations

import time
from abc import abstractmethod
from dataclasses import dataclass
from typing import Callable

from procstatus.status.base import Status, StatusReporter, validate_byte_count

SENTINEL_PERCENTAGE = -1

# Unknown-total mode emits when input grew by this much since the last line...
UNKNOWN_TOTAL_BYTES_INTERVAL = 10 * 1024 * 1024
# ...or when this many seconds passed since the last line.
UNKNOWN_TOTAL_SECONDS_INTERVAL = 30

Clock = Callable[[], float]


@dataclass(frozen=True)
class CompletionEstimate:
    """Extrapolated timing for an operation with a known total."""

    elapsed_seconds: int
    total_seconds: int
    remaining_seconds: int


def calculate_percentage(bytes_read: int, bytes_total: int) -> int:
    """Truncated percentage of ``bytes_total`` covered by ``bytes_read``.

    Capped at 100 when more bytes were read than expected, e.g. a source
    that grew after its size was taken.
    """
    if bytes_total > 0 and bytes_read > 0:
        return min((bytes_read * 100) // bytes_total, 100)
    return 0


def estimate_completion(elapsed_seconds: int, percentage: int) -> CompletionEstimate:
    """Extrapolate the total duration from the time taken for ``percentage``.

    Integer truncation is used throughout. A negative remaining time means
    the operation is nearly finished and is clamped to zero.
    """
    total_seconds = (elapsed_seconds * 100) // percentage
    remaining_seconds = max(total_seconds - elapsed_seconds, 0)
    return CompletionEstimate(
        elapsed_seconds=elapsed_seconds,
        total_seconds=total_seconds,
        remaining_seconds=remaining_seconds,
    )


class CadencedStatusReporter(StatusReporter):
    """Status reporter that decides when a progress update is worth emitting.

    Known totals emit when the percentage strictly increases and the wall
    clock moved past the last emission. Unknown totals emit on the first
    update, after 10 MiB of growth, or after 30 seconds. Time is kept in
    whole seconds.

    Subclasses render the emissions through the ``_report_*`` hooks.
    """

    def __init__(self, *, clock: Clock | None = None) -> None:
        self._clock = clock or time.time
        self.start_timestamp = 0
        self.last_timestamp = 0
        self.last_percentage = SENTINEL_PERCENTAGE
        self.last_bytes_total = 0
        self.bytes_processed = 0

    def now(self) -> int:
        return int(self._clock())

    def start(self) -> None:
        self.last_percentage = SENTINEL_PERCENTAGE
        self.start_timestamp = self.now()
        self._report_start(self.start_timestamp)

    def update(self, bytes_read: int, bytes_total: int) -> None:
        validate_byte_count("bytes read", bytes_read)
        validate_byte_count("bytes total", bytes_total)
        self.bytes_processed = bytes_read

        if not self._reports_updates():
            return

        new_percentage = calculate_percentage(bytes_read, bytes_total)
        timestamp_current = self.now()

        if new_percentage <= self.last_percentage:
            return
        if timestamp_current <= self.last_timestamp:
            return

        self.last_percentage = new_percentage

        estimate = None
        if timestamp_current > self.start_timestamp and new_percentage > 0:
            self.last_timestamp = timestamp_current
            estimate = estimate_completion(
                timestamp_current - self.start_timestamp, new_percentage
            )
        self._report_update(bytes_read, bytes_total, new_percentage, estimate)

    def update_unknown_total(self, bytes_read: int, bytes_total: int = 0) -> None:
        validate_byte_count("bytes read", bytes_read)
        self.bytes_processed = bytes_read

        if not self._reports_updates():
            return

        timestamp_current = self.now()
        if timestamp_current <= self.last_timestamp:
            return

        if not (
            self.last_bytes_total == 0
            or bytes_read > self.last_bytes_total + UNKNOWN_TOTAL_BYTES_INTERVAL
            or timestamp_current - self.last_timestamp > UNKNOWN_TOTAL_SECONDS_INTERVAL
        ):
            return

        self.last_timestamp = timestamp_current
        self.last_bytes_total = bytes_read
        self._report_update_unknown_total(
            bytes_read, timestamp_current - self.start_timestamp
        )

    def stop(self, bytes_total: int, status: Status | str) -> None:
        status = Status.coerce(status)
        validate_byte_count("bytes total", bytes_total)

        self.last_timestamp = self.now()
        self._report_stop(
            bytes_total, status, self.last_timestamp - self.start_timestamp
        )

    @abstractmethod
    def _reports_updates(self) -> bool:
        """Whether progress updates have anywhere to go."""

    @abstractmethod
    def _report_start(self, timestamp: int) -> None:
        pass

    @abstractmethod
    def _report_update(
        self,
        bytes_read: int,
        bytes_total: int,
        percentage: int,
        estimate: CompletionEstimate | None,
    ) -> None:
        pass

    @abstractmethod
    def _report_update_unknown_total(
        self, bytes_read: int, elapsed_seconds: int
    ) -> None:
        pass

    @abstractmethod
    def _report_stop(
        self, bytes_total: int, status: Status, elapsed_seconds: int
    ) -> None:
        pass


__all__ = [
    "CadencedStatusReporter",
    "CompletionEstimate",
    "SENTINEL_PERCENTAGE",
    "UNKNOWN_TOTAL_BYTES_INTERVAL",
    "UNKNOWN_TOTAL_SECONDS_INTERVAL",
    "calculate_percentage",
    "estimate_completion",
]
