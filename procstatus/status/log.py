"""Status reporter using standard logging (JSON-friendly)."""

from __future__ import annotations

import logging

from procstatus.status.base import Status
from procstatus.status.cadence import (
    CadencedStatusReporter,
    Clock,
    CompletionEstimate,
)
from procstatus.utils.formatting import bytes_per_second

logger = logging.getLogger(__name__)


class LogStatusReporter(CadencedStatusReporter):
    """Status reporter emitting one log record per emitted update.

    Uses the same cadence as the text reporter, so a JSON log carries the
    same number of progress events as the terminal would show. Every record
    carries structured ``extra`` fields (``event``, ``percent``,
    ``bytes_read`` ...).
    """

    def __init__(self, description: str = "Processing", *, clock: Clock | None = None) -> None:
        super().__init__(clock=clock)
        self.description = description

    def _reports_updates(self) -> bool:
        return True

    def _report_start(self, timestamp: int) -> None:
        logger.info(
            "%s started",
            self.description,
            extra={
                "event": "status_start",
                "process_label": self.description,
            },
        )

    def _report_update(
        self,
        bytes_read: int,
        bytes_total: int,
        percentage: int,
        estimate: CompletionEstimate | None,
    ) -> None:
        extra = {
            "event": "status_update",
            "process_label": self.description,
            "percent": percentage,
            "bytes_read": bytes_read,
            "bytes_total": bytes_total,
        }
        if estimate is not None:
            extra["elapsed_seconds"] = estimate.elapsed_seconds
            extra["remaining_seconds"] = estimate.remaining_seconds
            extra["bytes_per_second"] = bytes_per_second(
                bytes_total, estimate.total_seconds
            )

        logger.info(
            "%s: %s/%s bytes (%d%%)",
            self.description,
            bytes_read,
            bytes_total,
            percentage,
            extra=extra,
        )

    def _report_update_unknown_total(
        self, bytes_read: int, elapsed_seconds: int
    ) -> None:
        logger.info(
            "%s: %s bytes",
            self.description,
            bytes_read,
            extra={
                "event": "status_update",
                "process_label": self.description,
                "bytes_read": bytes_read,
                "elapsed_seconds": elapsed_seconds,
                "bytes_per_second": bytes_per_second(bytes_read, elapsed_seconds),
            },
        )

    def _report_stop(
        self, bytes_total: int, status: Status, elapsed_seconds: int
    ) -> None:
        level = logging.INFO if status is Status.COMPLETED else logging.WARNING
        logger.log(
            level,
            "%s %s: %s bytes in %d second(s)",
            self.description,
            status.value,
            bytes_total,
            elapsed_seconds,
            extra={
                "event": "status_stop",
                "process_label": self.description,
                "status": status.value,
                "bytes_total": bytes_total,
                "elapsed_seconds": elapsed_seconds,
                "bytes_per_second": bytes_per_second(bytes_total, elapsed_seconds),
            },
        )
