"""Status reporter that delegates to multiple other reporters."""

from __future__ import annotations

from procstatus.status.base import Status, StatusReporter


class CompositeStatusReporter(StatusReporter):
    """Status reporter that delegates to multiple other reporters."""

    def __init__(self, reporters: list[StatusReporter]) -> None:
        self._reporters = reporters

    def start(self) -> None:
        for reporter in self._reporters:
            reporter.start()

    def update(self, bytes_read: int, bytes_total: int) -> None:
        self.bytes_processed = bytes_read
        for reporter in self._reporters:
            reporter.update(bytes_read, bytes_total)

    def update_unknown_total(self, bytes_read: int, bytes_total: int = 0) -> None:
        self.bytes_processed = bytes_read
        for reporter in self._reporters:
            reporter.update_unknown_total(bytes_read, bytes_total)

    def stop(self, bytes_total: int, status: Status | str) -> None:
        # Validate once so no child prints a banner for a bad status.
        status = Status.coerce(status)
        # Every child is stopped, e.g. so a live progress display is closed.
        first_error: Exception | None = None
        for reporter in self._reporters:
            try:
                reporter.stop(bytes_total, status)
            except Exception as exc:
                if first_error is None:
                    first_error = exc
        if first_error is not None:
            raise first_error
