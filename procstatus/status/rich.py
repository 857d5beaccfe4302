"""Status reporter using Rich's dynamic progress bars."""

from __future__ import annotations

import sys

from rich.console import Console
from rich.progress import (
    BarColumn,
    DownloadColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
    TimeRemainingColumn,
    TransferSpeedColumn,
)

from procstatus.status.base import Status, StatusReporter, validate_byte_count


class RichStatusReporter(StatusReporter):
    """Status reporter drawing a live progress bar on standard error.

    Rich refreshes the bar on its own schedule, so every update is forwarded.
    Unknown totals render as an indeterminate (pulsing) bar.
    """

    def __init__(self, description: str = "Processing", *, console: Console | None = None) -> None:
        self.description = description
        # legacy_windows=False keeps the braille spinner encodable on CP1252
        # Windows consoles.
        self._console = console or Console(
            file=sys.stderr,
            legacy_windows=False,
            highlight=False,
        )
        self._progress = Progress(
            SpinnerColumn(spinner_name="dots", style="cyan"),
            TextColumn("[bold cyan]{task.description}"),
            BarColumn(
                bar_width=40,
                style="dim white",
                complete_style="green",
                finished_style="bold green",
            ),
            TextColumn("[progress.percentage]{task.percentage:>3.0f}%"),
            TextColumn("•", style="dim"),
            DownloadColumn(binary_units=True),
            TextColumn("•", style="dim"),
            TransferSpeedColumn(),
            TextColumn("•", style="dim"),
            TimeElapsedColumn(),
            TextColumn("•", style="dim"),
            TimeRemainingColumn(),
            console=self._console,
        )
        self._task_id: TaskID | None = None

    def start(self) -> None:
        self._progress.start()
        self._task_id = self._progress.add_task(self.description, total=None)

    def update(self, bytes_read: int, bytes_total: int) -> None:
        validate_byte_count("bytes read", bytes_read)
        validate_byte_count("bytes total", bytes_total)
        self.bytes_processed = bytes_read
        if self._task_id is None:
            return
        self._progress.update(
            self._task_id,
            completed=bytes_read,
            total=bytes_total or None,
        )

    def update_unknown_total(self, bytes_read: int, bytes_total: int = 0) -> None:
        validate_byte_count("bytes read", bytes_read)
        self.bytes_processed = bytes_read
        if self._task_id is None:
            return
        self._progress.update(self._task_id, completed=bytes_read, total=None)

    def stop(self, bytes_total: int, status: Status | str) -> None:
        status = Status.coerce(status)
        validate_byte_count("bytes total", bytes_total)
        if self._task_id is not None and status is Status.COMPLETED:
            self._progress.update(
                self._task_id, completed=bytes_total, total=bytes_total
            )
        self._progress.stop()
        self._task_id = None
        self._console.print(f"{self.description} {status.value}.")
