import hashlib
import io

import pytest

from procstatus.digest import DigestContext
from procstatus.exceptions import InvalidArgumentError
from procstatus.operations import process_stream
from tests.factories import make_reporter


class TickingClock:
    """Clock advancing one second per reading."""

    def __init__(self, start: int = 1_000_000) -> None:
        self.now = start

    def __call__(self) -> float:
        self.now += 1
        return self.now


def test_known_total_reports_percentages():
    data = b"x" * 4000
    reporter, _, output = make_reporter(clock=TickingClock())
    reporter.start()

    result = process_stream(
        io.BytesIO(data),
        reporter,
        chunk_size=1000,
        bytes_total=len(data),
        digest=DigestContext.initialize("md5"),
    )

    assert result.bytes_processed == 4000
    assert result.digest == hashlib.md5(data).digest()
    assert result.hexdigest == hashlib.md5(data).hexdigest()
    for percentage in (25, 50, 75, 100):
        assert f"Status: at {percentage}%." in output.getvalue()


def test_unknown_total_uses_unknown_total_mode():
    reporter, _, output = make_reporter(clock=TickingClock())
    reporter.start()

    result = process_stream(io.BytesIO(b"y" * 10), reporter, chunk_size=4)

    assert result.bytes_processed == 10
    assert result.digest is None
    assert result.hexdigest is None
    text = output.getvalue()
    assert "Status: hashed 4 bytes\n" in text
    assert "Status: at" not in text


def test_copies_to_destination():
    reporter, _, _ = make_reporter(clock=TickingClock())
    destination = io.BytesIO()

    with reporter:
        process_stream(
            io.BytesIO(b"evidence"),
            reporter,
            chunk_size=3,
            bytes_total=8,
            destination=destination,
        )

    assert destination.getvalue() == b"evidence"
    assert reporter.bytes_processed == 8


def test_short_read_is_logged(caplog):
    reporter, _, _ = make_reporter(clock=TickingClock())
    reporter.start()

    with caplog.at_level("WARNING", logger="procstatus.operations"):
        result = process_stream(
            io.BytesIO(b"abc"), reporter, chunk_size=2, bytes_total=10
        )

    assert result.bytes_processed == 3
    assert "Read 3 bytes but expected 10 bytes" in caplog.text


def test_rejects_invalid_chunk_size():
    reporter, _, _ = make_reporter()
    with pytest.raises(InvalidArgumentError):
        process_stream(io.BytesIO(b""), reporter, chunk_size=0)
