"""Commands that read a byte stream while reporting process status."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Annotated

from cyclopts import Parameter

from procstatus.cli.utils import (
    EXIT_FAILURE,
    EXIT_SUCCESS,
    collect_overrides,
    exit_code_for,
    open_destination,
    open_source,
    reporter_from_config,
)
from procstatus.config import ProcStatusConfig, load_config
from procstatus.digest import DigestContext
from procstatus.exceptions import ConfigurationError, ProcStatusError
from procstatus.operations import StreamResult, process_stream
from procstatus.utils import logging_utils

logger = logging.getLogger(__name__)

_HASH_LABELS = ("labels.process=Hashing", "labels.update=hashed", "labels.summary=Hashed")
_COPY_LABELS = ("labels.process=Copying", "labels.update=copied", "labels.summary=Copied")


def _resolve_config(
    config: Path | None,
    options: dict[str, object],
    overrides: tuple[str, ...],
    defaults: tuple[str, ...],
) -> ProcStatusConfig:
    resolved = load_config(
        config,
        overrides=collect_overrides(options, overrides),
        defaults=defaults,
    )
    logging_utils.configure_logging(
        level=resolved.logging.level,
        log_format=resolved.logging.format,
        log_file=resolved.logging.file,
    )
    return resolved


def _print_digest(result: StreamResult, algorithm: str) -> None:
    if result.hexdigest is None:
        return
    print(f"{algorithm.upper()} hash calculated over data:\t{result.hexdigest}")


def hash_command(
    source: Annotated[str, Parameter(help="File or device to hash, '-' for stdin")],
    *,
    algorithm: Annotated[
        str | None, Parameter(help="Digest algorithm (md5/sha1)")
    ] = None,
    backend: Annotated[str | None, Parameter(help="Digest backend name")] = None,
    chunk_size: Annotated[
        int | None, Parameter(help="Bytes read per chunk")
    ] = None,
    style: Annotated[
        str | None, Parameter(help="Status output style (text/rich)")
    ] = None,
    quiet: Annotated[
        bool | None, Parameter(help="Do not print process status")
    ] = None,
    log_level: Annotated[
        str | None, Parameter(help="Logging level (critical/error/warning/info/debug/trace)")
    ] = None,
    log_format: Annotated[
        str | None, Parameter(help="Log format (human/json)")
    ] = None,
    config: Annotated[
        Path | None, Parameter(help="Path to a YAML config file")
    ] = None,
    overrides: Annotated[
        tuple[str, ...],
        Parameter(
            name="--set",
            help="Config overrides (e.g. io.chunk_size=65536)",
            show_default=False,
        ),
    ] = (),
) -> int:
    """Calculate the digest of a file or stream, reporting progress."""
    try:
        settings = _resolve_config(
            config,
            {
                "digest.algorithm": algorithm,
                "digest.backend": backend,
                "io.chunk_size": chunk_size,
                "reporter.style": style,
                "reporter.quiet": quiet,
                "logging.level": log_level,
                "logging.format": log_format,
            },
            overrides,
            _HASH_LABELS,
        )
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return exit_code_for(exc)

    reporter = reporter_from_config(settings)
    try:
        with open_source(source) as (stream, bytes_total):
            digest = DigestContext.initialize(
                settings.digest.algorithm, settings.digest.backend
            )
            with reporter:
                result = process_stream(
                    stream,
                    reporter,
                    chunk_size=settings.io.chunk_size,
                    bytes_total=bytes_total,
                    digest=digest,
                )
    except ProcStatusError as exc:
        logger.error("Hashing failed: %s", exc)
        return exit_code_for(exc)
    except OSError as exc:
        logger.error("Unable to read %s: %s", source, exc)
        return EXIT_FAILURE
    except KeyboardInterrupt:
        return EXIT_FAILURE

    _print_digest(result, settings.digest.algorithm)
    return EXIT_SUCCESS


def copy_command(
    source: Annotated[str, Parameter(help="File or device to read, '-' for stdin")],
    destination: Annotated[
        str, Parameter(help="File to create, '-' for stdout")
    ],
    *,
    algorithm: Annotated[
        str | None, Parameter(help="Digest algorithm (md5/sha1)")
    ] = None,
    verify: Annotated[
        bool, Parameter(help="Calculate a digest of the copied data")
    ] = True,
    chunk_size: Annotated[
        int | None, Parameter(help="Bytes read per chunk")
    ] = None,
    style: Annotated[
        str | None, Parameter(help="Status output style (text/rich)")
    ] = None,
    quiet: Annotated[
        bool | None, Parameter(help="Do not print process status")
    ] = None,
    log_level: Annotated[
        str | None, Parameter(help="Logging level (critical/error/warning/info/debug/trace)")
    ] = None,
    log_format: Annotated[
        str | None, Parameter(help="Log format (human/json)")
    ] = None,
    config: Annotated[
        Path | None, Parameter(help="Path to a YAML config file")
    ] = None,
    overrides: Annotated[
        tuple[str, ...],
        Parameter(
            name="--set",
            help="Config overrides (e.g. io.chunk_size=65536)",
            show_default=False,
        ),
    ] = (),
) -> int:
    """Copy a file or stream to a new file, reporting progress."""
    try:
        settings = _resolve_config(
            config,
            {
                "digest.algorithm": algorithm,
                "io.chunk_size": chunk_size,
                "reporter.style": style,
                "reporter.quiet": quiet,
                "logging.level": log_level,
                "logging.format": log_format,
            },
            overrides,
            _COPY_LABELS,
        )
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return exit_code_for(exc)

    reporter = reporter_from_config(settings)
    try:
        with open_source(source) as (stream, bytes_total):
            digest = None
            if verify:
                digest = DigestContext.initialize(
                    settings.digest.algorithm, settings.digest.backend
                )
            with open_destination(destination) as target:
                with reporter:
                    result = process_stream(
                        stream,
                        reporter,
                        chunk_size=settings.io.chunk_size,
                        bytes_total=bytes_total,
                        digest=digest,
                        destination=target,
                    )
    except ProcStatusError as exc:
        logger.error("Copying failed: %s", exc)
        return exit_code_for(exc)
    except FileExistsError:
        logger.error("Destination already exists: %s", destination)
        return EXIT_FAILURE
    except OSError as exc:
        logger.error("Unable to copy %s to %s: %s", source, destination, exc)
        return EXIT_FAILURE
    except KeyboardInterrupt:
        return EXIT_FAILURE

    # Digest lines would corrupt data copied to stdout.
    if destination != "-":
        _print_digest(result, settings.digest.algorithm)
    return EXIT_SUCCESS
