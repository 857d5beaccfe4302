"""Cyclopts-powered CLI entrypoints for procstatus."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated, Sequence

from cyclopts import App, Parameter

from procstatus._version import VERSION_SOURCE, __version__
from procstatus.cli.commands.stream_commands import copy_command, hash_command
from procstatus.cli.utils import EXIT_SUCCESS, exit_code_for
from procstatus.config import config_to_yaml, load_config
from procstatus.digest import DigestType, list_digest_backends
from procstatus.exceptions import ConfigurationError

app = App(
    name="procstatus",
    help="Copy and hash large byte streams with process status reporting",
    version=__version__,
)

app.command(hash_command, name="hash")
app.command(copy_command, name="copy")


@app.command(name="info")
def show_info(
    *,
    config: Annotated[
        Path | None, Parameter(help="Path to a YAML config file")
    ] = None,
) -> int:
    """Show version, digest backends and the effective configuration."""
    try:
        settings = load_config(config)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return exit_code_for(exc)

    print(f"procstatus {__version__} ({VERSION_SOURCE})")
    print("\nDigest algorithms:")
    for digest_type in DigestType:
        print(f"  - {digest_type.value} ({digest_type.digest_size} bytes)")
    print("\nDigest backends:")
    for name in list_digest_backends():
        print(f"  - {name}")
    print("\nConfiguration:")
    print(config_to_yaml(settings), end="")
    return EXIT_SUCCESS


def main(argv: Sequence[str] | None = None) -> int:
    parsed_argv = list(argv) if argv is not None else None
    try:
        result = app(parsed_argv)
    except SystemExit as exc:  # pragma: no cover - CLI integration path
        return int(exc.code or 0)
    return int(result) if isinstance(result, int) else 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
