"""Line-oriented status reporter writing to a text stream.

This is the reporter used by the imaging commands. Output looks like::

    Hashing started at: Mon Oct 19 06:38:00 2026
    This could take a while.

    Status: at 50%.
            hashed 1.0 GiB (1073741824 bytes) of total 2.0 GiB (2147483648 bytes).
            completion in 1 minute(s) and 4 second(s) with 16.0 MiB/s (16777216 bytes/second).

    Hashing completed at: Mon Oct 19 06:40:08 2026
    Hashed: 2.0 GiB (2147483648 bytes) in 2 minute(s) and 8 second(s) with 16.0 MiB/s (16777216 bytes/second).
"""

from __future__ import annotations

import logging
from typing import TextIO

from procstatus.exceptions import InvalidArgumentError, OutputError
from procstatus.status.base import Status
from procstatus.status.cadence import (
    SENTINEL_PERCENTAGE,
    CadencedStatusReporter,
    Clock,
    CompletionEstimate,
)
from procstatus.utils.formatting import (
    format_bytes,
    format_duration,
    format_throughput,
    format_timestamp,
)

logger = logging.getLogger(__name__)


def _duration_clause(seconds: int) -> str:
    duration = format_duration(seconds)
    if duration is None:
        return ""
    return f" in {duration}"


def _timestamp_clause(timestamp: int, fallback: str) -> str:
    time_string = format_timestamp(timestamp)
    if time_string is None:
        return fallback
    return f" at: {time_string}\n"


class StreamStatusReporter(CadencedStatusReporter):
    """Status reporter printing human-readable blocks to ``output_stream``.

    The stream is borrowed: it is written to and flushed, never closed. When
    ``output_stream`` is ``None`` the reporter keeps its state but prints
    nothing. Banners need ``process_label``, progress blocks need
    ``update_label`` and the completion summary needs ``summary_label``.
    """

    def __init__(
        self,
        process_label: str | None = None,
        update_label: str | None = None,
        summary_label: str | None = None,
        output_stream: TextIO | None = None,
        *,
        clock: Clock | None = None,
    ) -> None:
        super().__init__(clock=clock)
        self.process_label = process_label
        self.update_label = update_label
        self.summary_label = summary_label
        self.output_stream = output_stream

    def _write(self, text: str) -> None:
        stream = self.output_stream
        if stream is None:
            return
        try:
            stream.write(text)
            stream.flush()
        except (OSError, ValueError) as exc:
            raise OutputError(f"unable to write process status: {exc}") from exc

    def _reports_lifecycle(self) -> bool:
        return self.output_stream is not None and self.process_label is not None

    def _reports_updates(self) -> bool:
        return self.output_stream is not None and self.update_label is not None

    def _report_start(self, timestamp: int) -> None:
        logger.debug("Status reporter started at %d", timestamp)
        if not self._reports_lifecycle():
            return
        banner = f"{self.process_label} started"
        banner += _timestamp_clause(timestamp, ".\n")
        banner += "This could take a while.\n\n"
        self._write(banner)

    def _report_update(
        self,
        bytes_read: int,
        bytes_total: int,
        percentage: int,
        estimate: CompletionEstimate | None,
    ) -> None:
        block = (
            f"Status: at {percentage}%.\n"
            f"        {self.update_label}{format_bytes(bytes_read)}"
            f" of total{format_bytes(bytes_total)}.\n"
        )
        if estimate is not None:
            block += (
                f"        completion{_duration_clause(estimate.remaining_seconds)}"
                f"{format_throughput(bytes_total, estimate.total_seconds)}.\n"
            )
        block += "\n"
        self._write(block)

    def _report_update_unknown_total(
        self, bytes_read: int, elapsed_seconds: int
    ) -> None:
        self._write(
            f"Status: {self.update_label}{format_bytes(bytes_read)}\n"
            f"       {_duration_clause(elapsed_seconds)}"
            f"{format_throughput(bytes_read, elapsed_seconds)}.\n\n"
        )

    def _report_stop(
        self, bytes_total: int, status: Status, elapsed_seconds: int
    ) -> None:
        logger.debug(
            "Status reporter stopped: %s after %d second(s)",
            status.value,
            elapsed_seconds,
        )
        if not self._reports_lifecycle():
            return
        banner = f"{self.process_label} {status.value}"
        banner += _timestamp_clause(self.last_timestamp, ".\n")

        if status is Status.COMPLETED and self.summary_label is not None:
            banner += (
                f"{self.summary_label}:{format_bytes(bytes_total)}"
                f"{_duration_clause(elapsed_seconds)}"
                f"{format_throughput(bytes_total, elapsed_seconds)}.\n"
            )
        self._write(banner)

    def release(self) -> None:
        """Detach the output stream and reset state. The stream stays open."""
        self.output_stream = None
        self.start_timestamp = 0
        self.last_timestamp = 0
        self.last_percentage = SENTINEL_PERCENTAGE
        self.last_bytes_total = 0
        self.bytes_processed = 0


def initialize(
    status: StreamStatusReporter | None = None,
    *,
    process_label: str | None = None,
    update_label: str | None = None,
    summary_label: str | None = None,
    output_stream: TextIO | None = None,
    clock: Clock | None = None,
) -> StreamStatusReporter:
    """Create a reporter, or return ``status`` unchanged if it already exists.

    Raises:
        InvalidArgumentError: If ``status`` is neither ``None`` nor a
            ``StreamStatusReporter``.
    """
    if status is None:
        return StreamStatusReporter(
            process_label,
            update_label,
            summary_label,
            output_stream,
            clock=clock,
        )
    if not isinstance(status, StreamStatusReporter):
        raise InvalidArgumentError(
            f"invalid process status: {type(status).__name__}"
        )
    return status


def free(status: StreamStatusReporter | None) -> None:
    """Release ``status``. Safe to call on ``None`` or twice."""
    if status is None:
        return
    if not isinstance(status, StreamStatusReporter):
        raise InvalidArgumentError(
            f"invalid process status: {type(status).__name__}"
        )
    status.release()


__all__ = ["StreamStatusReporter", "initialize", "free"]
