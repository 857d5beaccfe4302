import io
from unittest.mock import MagicMock

import pytest

from procstatus.exceptions import InvalidArgumentError, OutputError
from procstatus.status import (
    CompositeStatusReporter,
    LogStatusReporter,
    RichStatusReporter,
    Status,
    StreamStatusReporter,
    get_status_reporter,
)
from procstatus.utils import logging_utils


class TestCompositeStatusReporter:
    def test_delegates_calls(self):
        first = MagicMock()
        second = MagicMock()
        composite = CompositeStatusReporter([first, second])

        composite.start()
        composite.update(10, 100)
        composite.update_unknown_total(20)
        composite.stop(100, "completed")

        for child in (first, second):
            child.start.assert_called_once_with()
            child.update.assert_called_once_with(10, 100)
            child.update_unknown_total.assert_called_once_with(20, 0)
            child.stop.assert_called_once_with(100, Status.COMPLETED)
        assert composite.bytes_processed == 20

    def test_invalid_status_reaches_no_child(self):
        child = MagicMock()
        composite = CompositeStatusReporter([child])

        with pytest.raises(InvalidArgumentError):
            composite.stop(100, "paused")
        child.stop.assert_not_called()

    def test_failing_child_does_not_skip_others(self):
        first = MagicMock()
        first.stop.side_effect = OutputError("stream closed")
        second = MagicMock()
        second.stop.side_effect = RuntimeError("display gone")
        third = MagicMock()
        composite = CompositeStatusReporter([first, second, third])

        with pytest.raises(OutputError, match="stream closed"):
            composite.stop(100, Status.FAILED)

        second.stop.assert_called_once_with(100, Status.FAILED)
        third.stop.assert_called_once_with(100, Status.FAILED)

    def test_context_manager(self):
        child = MagicMock()
        composite = CompositeStatusReporter([child])

        with composite:
            composite.update(5, 10)

        child.start.assert_called_once_with()
        child.stop.assert_called_once_with(5, Status.COMPLETED)


class TestGetStatusReporter:
    @pytest.fixture(autouse=True)
    def human_format(self, monkeypatch):
        monkeypatch.setattr(logging_utils, "_CURRENT_LOG_FORMAT", "human")

    def test_text_reporter_on_given_stream(self):
        output = io.StringIO()
        reporter = get_status_reporter(
            "Hashing", "hashed", "Hashed", output_stream=output
        )
        assert isinstance(reporter, StreamStatusReporter)
        assert reporter.output_stream is output

    def test_quiet_text_reporter_is_silent(self):
        reporter = get_status_reporter("Hashing", "hashed", "Hashed", quiet=True)
        assert isinstance(reporter, StreamStatusReporter)
        assert reporter.output_stream is None

    def test_rich_style(self):
        reporter = get_status_reporter("Hashing", "hashed", "Hashed", style="rich")
        assert isinstance(reporter, RichStatusReporter)
        assert reporter.description == "Hashing"

    def test_log_events_adds_log_reporter(self):
        reporter = get_status_reporter(
            "Hashing", "hashed", "Hashed", log_events=True
        )
        assert isinstance(reporter, CompositeStatusReporter)
        assert isinstance(reporter._reporters[0], StreamStatusReporter)
        assert isinstance(reporter._reporters[1], LogStatusReporter)

    def test_json_log_format_uses_log_reporter(self, monkeypatch):
        monkeypatch.setattr(logging_utils, "_CURRENT_LOG_FORMAT", "json")
        reporter = get_status_reporter("Hashing", "hashed", "Hashed")
        assert isinstance(reporter, LogStatusReporter)
