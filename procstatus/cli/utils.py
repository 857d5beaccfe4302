"""CLI utility functions."""

from __future__ import annotations

import os
import stat
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Iterator

from procstatus.config import ProcStatusConfig
from procstatus.exceptions import ProcStatusError, StatusCode
from procstatus.status import StatusReporter, get_status_reporter

STDIO_NAME = "-"

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_INVALID_ARGUMENT = 2


def exit_code_for(error: BaseException) -> int:
    """Map an error to the process exit status."""
    if isinstance(error, ProcStatusError) and error.code == StatusCode.INVALID_ARGUMENT:
        return EXIT_INVALID_ARGUMENT
    return EXIT_FAILURE


def source_size(stream: BinaryIO) -> int | None:
    """Size of a regular file or seekable device, ``None`` when unknown.

    Block devices report a zero ``st_size``; their size is found by seeking
    to the end.
    """
    try:
        mode = os.fstat(stream.fileno()).st_mode
    except (OSError, ValueError, AttributeError):
        return None

    if stat.S_ISREG(mode):
        return os.fstat(stream.fileno()).st_size
    if stat.S_ISBLK(mode):
        try:
            size = stream.seek(0, os.SEEK_END)
            stream.seek(0, os.SEEK_SET)
        except OSError:
            return None
        return size or None
    return None


@contextmanager
def open_source(name: str) -> Iterator[tuple[BinaryIO, int | None]]:
    """Open ``name`` for reading, ``-`` meaning standard input."""
    if name == STDIO_NAME:
        yield sys.stdin.buffer, None
        return
    with Path(name).open("rb") as stream:
        yield stream, source_size(stream)


@contextmanager
def open_destination(name: str) -> Iterator[BinaryIO]:
    """Open ``name`` for writing, ``-`` meaning standard output."""
    if name == STDIO_NAME:
        yield sys.stdout.buffer
        sys.stdout.buffer.flush()
        return
    with Path(name).open("xb") as stream:
        yield stream


def reporter_from_config(config: ProcStatusConfig) -> StatusReporter:
    return get_status_reporter(
        config.labels.process,
        config.labels.update,
        config.labels.summary,
        style=config.reporter.style,
        quiet=config.reporter.quiet,
        log_events=config.logging.file is not None,
    )


def collect_overrides(
    options: dict[str, object],
    overrides: tuple[str, ...] = (),
) -> list[str]:
    """Turn explicitly passed CLI options into config overrides.

    Options left at ``None`` do not override the configuration. The explicit
    ``--set`` assignments come last so they win.
    """
    collected = [f"{key}={value}" for key, value in options.items() if value is not None]
    collected.extend(overrides)
    return collected


__all__ = [
    "EXIT_FAILURE",
    "EXIT_INVALID_ARGUMENT",
    "EXIT_SUCCESS",
    "STDIO_NAME",
    "collect_overrides",
    "exit_code_for",
    "open_destination",
    "open_source",
    "reporter_from_config",
    "source_size",
]
