"""Tests for the procstatus exception hierarchy."""

import pytest

from procstatus.exceptions import (
    ConfigurationError,
    DigestError,
    InvalidArgumentError,
    OutputError,
    ProcStatusError,
    StatusCode,
)


class TestExceptionHierarchy:
    """All domain exceptions inherit from ProcStatusError."""

    @pytest.mark.parametrize(
        "exc_cls",
        [InvalidArgumentError, ConfigurationError, OutputError, DigestError],
    )
    def test_inherits_from_procstatus_error(self, exc_cls):
        assert issubclass(exc_cls, ProcStatusError)

    def test_catch_all_with_procstatus_error(self):
        for exc_cls in (InvalidArgumentError, ConfigurationError, OutputError, DigestError):
            with pytest.raises(ProcStatusError):
                raise exc_cls("test")


class TestStdlibCompatibility:
    def test_invalid_argument_is_value_error(self):
        with pytest.raises(ValueError):
            raise InvalidArgumentError("bad status")

    def test_output_error_is_os_error(self):
        with pytest.raises(OSError):
            raise OutputError("write failed")

    def test_digest_error_is_runtime_error(self):
        with pytest.raises(RuntimeError):
            raise DigestError("backend failed")


class TestResultCodes:
    @pytest.mark.parametrize(
        "exc_cls, code",
        [
            (InvalidArgumentError, StatusCode.INVALID_ARGUMENT),
            (ConfigurationError, StatusCode.INVALID_ARGUMENT),
            (OutputError, StatusCode.FAILURE),
            (DigestError, StatusCode.FAILURE),
        ],
    )
    def test_codes(self, exc_cls, code):
        assert exc_cls("x").code == code

    def test_convention_values(self):
        assert int(StatusCode.INVALID_ARGUMENT) < 0
        assert int(StatusCode.FAILURE) == 0
        assert int(StatusCode.SUCCESS) > 0
