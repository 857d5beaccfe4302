"""Chunked stream processing that drives a status reporter.

These loops sit outside the reporter: they read the data, hand every chunk
to the digest context and optional destination, and report cumulative byte
counts after each chunk.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import BinaryIO

from procstatus.digest import DigestContext
from procstatus.exceptions import InvalidArgumentError
from procstatus.status import StatusReporter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StreamResult:
    bytes_processed: int
    digest: bytes | None = None

    @property
    def hexdigest(self) -> str | None:
        return self.digest.hex() if self.digest is not None else None


def process_stream(
    source: BinaryIO,
    reporter: StatusReporter,
    *,
    chunk_size: int,
    bytes_total: int | None = None,
    digest: DigestContext | None = None,
    destination: BinaryIO | None = None,
) -> StreamResult:
    """Read ``source`` to the end, reporting progress after every chunk.

    ``bytes_total`` selects the reporting mode: a positive total reports
    percentages and completion estimates, ``None`` or ``0`` reports in
    unknown-total mode. The reporter must already be started.
    """
    if chunk_size <= 0:
        raise InvalidArgumentError("invalid chunk size: value zero or less")

    bytes_read = 0
    while True:
        chunk = source.read(chunk_size)
        if not chunk:
            break
        if digest is not None:
            digest.update(chunk)
        if destination is not None:
            destination.write(chunk)
        bytes_read += len(chunk)

        if bytes_total:
            reporter.update(bytes_read, bytes_total)
        else:
            reporter.update_unknown_total(bytes_read)

    if bytes_total and bytes_read != bytes_total:
        logger.warning(
            "Read %d bytes but expected %d bytes", bytes_read, bytes_total
        )
    return StreamResult(
        bytes_processed=bytes_read,
        digest=digest.finalize() if digest is not None else None,
    )


__all__ = ["StreamResult", "process_stream"]
