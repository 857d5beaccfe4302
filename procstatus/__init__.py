"""procstatus - process status reporting for long-running byte-stream operations.

Create one reporter per operation and drive it from the operation loop:

    import sys
    from procstatus import Status, StreamStatusReporter

    reporter = StreamStatusReporter("Acquiring", "acquired", "Written", sys.stderr)
    reporter.start()
    for bytes_read in chunks:
        reporter.update(bytes_read, media_size)
    reporter.stop(media_size, Status.COMPLETED)

The ``procstatus`` command line hashes or copies files and devices using the
same reporter.
"""

from procstatus._version import __version__
from procstatus.digest import DigestContext, DigestType, register_digest_backend
from procstatus.exceptions import (
    ConfigurationError,
    DigestError,
    InvalidArgumentError,
    OutputError,
    ProcStatusError,
    StatusCode,
)
from procstatus.status import (
    CompositeStatusReporter,
    LogStatusReporter,
    RichStatusReporter,
    Status,
    StatusReporter,
    StreamStatusReporter,
    free,
    get_status_reporter,
    initialize,
)

__all__ = [
    # Reporters
    "Status",
    "StatusReporter",
    "StreamStatusReporter",
    "LogStatusReporter",
    "RichStatusReporter",
    "CompositeStatusReporter",
    "get_status_reporter",
    "initialize",
    "free",
    # Digest
    "DigestContext",
    "DigestType",
    "register_digest_backend",
    # Exceptions
    "StatusCode",
    "ProcStatusError",
    "InvalidArgumentError",
    "ConfigurationError",
    "OutputError",
    "DigestError",
    # Version
    "__version__",
]
