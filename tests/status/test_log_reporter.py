import logging
import unittest
from unittest.mock import patch

from procstatus.status import LogStatusReporter, Status
from tests.factories import FakeClock


class TestLogStatusReporter(unittest.TestCase):
    def setUp(self):
        self.clock = FakeClock(1_000_000)
        self.reporter = LogStatusReporter("Hashing", clock=self.clock)

    @patch("procstatus.status.log.logger")
    def test_start_logs_event(self, mock_logger):
        self.reporter.start()

        mock_logger.info.assert_called_once()
        args, kwargs = mock_logger.info.call_args
        self.assertEqual(args[1], "Hashing")
        self.assertEqual(kwargs["extra"]["event"], "status_start")

    @patch("procstatus.status.log.logger")
    def test_update_uses_cadence(self, mock_logger):
        self.reporter.start()
        mock_logger.reset_mock()

        self.clock.advance(10)
        self.reporter.update(25, 100)
        mock_logger.info.assert_called_once()
        _, kwargs = mock_logger.info.call_args
        extra = kwargs["extra"]
        self.assertEqual(extra["event"], "status_update")
        self.assertEqual(extra["percent"], 25)
        self.assertEqual(extra["elapsed_seconds"], 10)
        self.assertEqual(extra["remaining_seconds"], 30)
        self.assertEqual(extra["bytes_per_second"], 2)

        # Same percentage: suppressed
        mock_logger.reset_mock()
        self.clock.advance(1)
        self.reporter.update(25, 100)
        mock_logger.info.assert_not_called()

    @patch("procstatus.status.log.logger")
    def test_unknown_total(self, mock_logger):
        self.reporter.start()
        mock_logger.reset_mock()

        self.clock.advance(4)
        self.reporter.update_unknown_total(4096)
        _, kwargs = mock_logger.info.call_args
        self.assertEqual(kwargs["extra"]["bytes_read"], 4096)
        self.assertEqual(kwargs["extra"]["bytes_per_second"], 1024)

        mock_logger.reset_mock()
        self.clock.advance(1)
        self.reporter.update_unknown_total(8192)
        mock_logger.info.assert_not_called()

    @patch("procstatus.status.log.logger")
    def test_stop_levels(self, mock_logger):
        self.reporter.start()
        self.clock.advance(2)
        self.reporter.stop(100, Status.COMPLETED)
        level = mock_logger.log.call_args[0][0]
        extra = mock_logger.log.call_args[1]["extra"]
        self.assertEqual(level, logging.INFO)
        self.assertEqual(extra["status"], "completed")
        self.assertEqual(extra["bytes_per_second"], 50)

        self.reporter.stop(100, Status.FAILED)
        self.assertEqual(mock_logger.log.call_args[0][0], logging.WARNING)

    def test_records_carry_structured_fields(self):
        with self.assertLogs("procstatus.status.log", level="INFO") as captured:
            self.reporter.start()
            self.clock.advance(1)
            self.reporter.update(50, 100)

        self.assertEqual(captured.records[0].event, "status_start")
        self.assertEqual(captured.records[0].process_label, "Hashing")
        record = captured.records[-1]
        self.assertEqual(record.event, "status_update")
        self.assertEqual(record.process_label, "Hashing")
        self.assertEqual(record.percent, 50)
        self.assertEqual(record.getMessage(), "Hashing: 50/100 bytes (50%)")

    def test_failed_stop_record(self):
        self.reporter.start()
        with self.assertLogs("procstatus.status.log", level="WARNING") as captured:
            self.clock.advance(3)
            self.reporter.stop(30, Status.FAILED)

        record = captured.records[0]
        self.assertEqual(record.levelno, logging.WARNING)
        self.assertEqual(record.event, "status_stop")
        self.assertEqual(record.process_label, "Hashing")
        self.assertEqual(record.status, "failed")
        self.assertEqual(record.bytes_per_second, 10)
