"""Tests for byte, duration, throughput and timestamp rendering."""

import time
from datetime import datetime

import pytest

from procstatus.utils import formatting
from procstatus.utils.formatting import (
    byte_size_string,
    bytes_per_second,
    format_bytes,
    format_duration,
    format_throughput,
    format_timestamp,
)


class TestByteSizeString:
    @pytest.mark.parametrize(
        "size, expected",
        [
            (500, "500 B"),
            (1536, "1.5 KiB"),
            (2 * 1024 * 1024, "2.0 MiB"),
            (3 * 1024**3 // 2, "1.5 GiB"),
            (1024**8, "1.0 YiB"),
        ],
    )
    def test_binary_units(self, size, expected):
        assert byte_size_string(size) == expected

    def test_decimal_is_truncated(self):
        # 1.99... MiB must not round up to 2.0
        assert byte_size_string(2 * 1024 * 1024 - 1) == "1.9 MiB"

    def test_out_of_range(self):
        assert byte_size_string(1024**9) is None
        assert byte_size_string(-1) is None


class TestFormatBytes:
    def test_small_count_is_raw(self):
        assert format_bytes(500) == " 500 bytes"

    def test_exactly_one_kibibyte_is_raw(self):
        assert format_bytes(1024) == " 1024 bytes"

    def test_scaled_count(self):
        assert format_bytes(2_097_152) == " 2.0 MiB (2097152 bytes)"

    def test_just_above_threshold(self):
        assert format_bytes(1025) == " 1.0 KiB (1025 bytes)"

    def test_unscalable_count_falls_back_to_raw(self):
        assert format_bytes(1024**9) == f" {1024**9} bytes"


class TestFormatDuration:
    @pytest.mark.parametrize(
        "seconds, expected",
        [
            (0, "0 second(s)"),
            (59, "59 second(s)"),
            (65, "1 minute(s) and 5 second(s)"),
            (3661, "1 hour(s), 1 minute(s) and 1 second(s)"),
            (7200, "2 hour(s), 0 minute(s) and 0 second(s)"),
            (90000, "1 day(s), 1 hour(s), 0 minute(s) and 0 second(s)"),
        ],
    )
    def test_decomposition(self, seconds, expected):
        assert format_duration(seconds) == expected

    def test_dst_hour_is_removed(self, monkeypatch):
        dst_elements = time.struct_time((1970, 1, 1, 2, 0, 5, 3, 1, 1))
        monkeypatch.setattr(formatting.time, "gmtime", lambda seconds: dst_elements)
        assert format_duration(7205) == "1 hour(s), 0 minute(s) and 5 second(s)"

    def test_unconvertible_value(self):
        assert format_duration(10**20) is None


class TestFormatThroughput:
    def test_no_elapsed_time(self):
        assert format_throughput(100, 0) == ""
        assert bytes_per_second(100, 0) is None

    def test_raw_rate(self):
        assert format_throughput(100, 2) == " with 50 bytes/second"

    def test_rate_is_truncated(self):
        assert format_throughput(100, 3) == " with 33 bytes/second"

    def test_exactly_one_kibibyte_per_second_is_raw(self):
        assert format_throughput(2048, 2) == " with 1024 bytes/second"

    def test_scaled_rate(self):
        assert (
            format_throughput(2 * 1024**3, 128)
            == " with 16.0 MiB/s (16777216 bytes/second)"
        )


class TestFormatTimestamp:
    def test_local_ctime(self):
        assert format_timestamp(0) == datetime.fromtimestamp(0).ctime()

    def test_out_of_range(self):
        assert format_timestamp(1e20) is None
