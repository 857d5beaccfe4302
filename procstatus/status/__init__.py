"""Process status reporting for long-running byte-stream operations."""

from __future__ import annotations

import sys
from typing import TextIO

from procstatus.status.base import Status, StatusReporter, status_for_exception
from procstatus.status.cadence import (
    CadencedStatusReporter,
    Clock,
    CompletionEstimate,
    calculate_percentage,
    estimate_completion,
)
from procstatus.status.composite import CompositeStatusReporter
from procstatus.status.log import LogStatusReporter
from procstatus.status.rich import RichStatusReporter
from procstatus.status.stream import StreamStatusReporter, free, initialize
from procstatus.utils import logging_utils

REPORTER_STYLES = ("text", "rich")


def get_status_reporter(
    process_label: str | None,
    update_label: str | None,
    summary_label: str | None,
    *,
    style: str = "text",
    quiet: bool = False,
    log_events: bool = False,
    output_stream: TextIO | None = None,
    clock: Clock | None = None,
) -> StatusReporter:
    """Get the appropriate status reporter based on logging configuration.

    Args:
        process_label: Operation name used in banners (e.g. "Hashing")
        update_label: Label printed before byte counts in progress blocks
        summary_label: Label of the completion summary line
        style: "text" for status blocks, "rich" for a live progress bar
        quiet: Suppress terminal output (status events may still be logged)
        log_events: Also emit status events as log records
        output_stream: Stream for text output, standard error by default
        clock: Wall-clock source, ``time.time`` by default
    """
    description = process_label or "Processing"

    if logging_utils.get_log_format() == "json":
        return LogStatusReporter(description, clock=clock)

    reporters: list[StatusReporter] = []
    if style == "rich" and not quiet:
        reporters.append(RichStatusReporter(description))
    else:
        stream = None if quiet else (output_stream or sys.stderr)
        reporters.append(
            StreamStatusReporter(
                process_label,
                update_label,
                summary_label,
                stream,
                clock=clock,
            )
        )

    if log_events:
        reporters.append(LogStatusReporter(description, clock=clock))

    if len(reporters) == 1:
        return reporters[0]

    return CompositeStatusReporter(reporters)


__all__ = [
    "REPORTER_STYLES",
    "Status",
    "StatusReporter",
    "CadencedStatusReporter",
    "CompletionEstimate",
    "StreamStatusReporter",
    "LogStatusReporter",
    "RichStatusReporter",
    "CompositeStatusReporter",
    "calculate_percentage",
    "estimate_completion",
    "status_for_exception",
    "get_status_reporter",
    "initialize",
    "free",
]
