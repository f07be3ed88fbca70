"""Tests for error codes and exception mapping."""

import errno

import pytest

from mediafs.core.errors import (
    ERROR_SUGGESTIONS,
    ConfigurationError,
    DirectoryCreationError,
    ErrorCode,
    MediaFSError,
    MountCheckError,
    MountSetupError,
    UnsupportedFormatError,
    error_code_for,
    suggestion_for,
)


class TestErrorCodeMapping:
    @pytest.mark.parametrize(
        "exc,code",
        [
            (ConfigurationError("bad"), ErrorCode.INVALID_CONFIG),
            (UnsupportedFormatError("xyz"), ErrorCode.UNSUPPORTED_FORMAT),
            (DirectoryCreationError("/a"), ErrorCode.DIRECTORY_CREATION_FAILED),
            (MountCheckError("/mnt", "gone"), ErrorCode.MOUNT_CHECK_FAILED),
            (MountSetupError("overlap"), ErrorCode.MOUNT_REFUSED),
            (RuntimeError("boom"), ErrorCode.INTERNAL_ERROR),
        ],
    )
    def test_error_code_for(self, exc: Exception, code: str):
        assert error_code_for(exc) == code

    def test_every_code_has_suggestion(self):
        codes = [v for k, v in vars(ErrorCode).items() if not k.startswith("_")]
        assert set(codes) == set(ERROR_SUGGESTIONS)

    def test_suggestion_for(self):
        assert "desttype" in suggestion_for(UnsupportedFormatError("xyz"))


class TestExceptions:
    def test_hierarchy(self):
        assert issubclass(ConfigurationError, MediaFSError)
        assert issubclass(ConfigurationError, ValueError)
        assert issubclass(MountCheckError, MediaFSError)

    def test_directory_creation_error_message(self):
        exc = DirectoryCreationError("/a/b", errno=errno.EACCES, reason="Permission denied")
        assert str(exc) == "Unable to create directory '/a/b': Permission denied"
        assert exc.errno == errno.EACCES

    def test_mount_check_error_message(self):
        exc = MountCheckError("/mnt", "No such file or directory")
        assert "/mnt" in str(exc)
        assert exc.reason == "No such file or directory"
