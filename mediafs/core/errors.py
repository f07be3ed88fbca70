"""Exception hierarchy and error codes.

Resolution code never raises: an unresolvable format is the ``Unknown``
sentinel and malformed paths produce degenerate but well-defined names.
The exceptions below are raised only by filesystem-touching calls and by
the raising wrappers callers use when they want to fail closed.
"""

from typing import Dict, Optional, Type


class MediaFSError(Exception):
    """Base exception for mediafs errors."""

    pass


class ConfigurationError(MediaFSError, ValueError):
    """Raised when the loaded configuration cannot be used."""

    pass


class UnsupportedFormatError(MediaFSError):
    """Raised when no configured destination type is in the format catalog."""

    def __init__(self, type_list: str):
        self.type_list = type_list
        super().__init__(f"No supported destination type in '{type_list}'")


class DirectoryCreationError(MediaFSError):
    """Raised when a directory component cannot be created."""

    def __init__(self, path: str, errno: Optional[int] = None, reason: Optional[str] = None):
        self.path = path
        self.errno = errno
        self.reason = reason
        message = f"Unable to create directory '{path}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class MountCheckError(MediaFSError):
    """Raised when a mount point check cannot reach a verdict."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Unable to determine whether '{path}' is a mount point: {reason}")


class MountSetupError(MediaFSError):
    """Raised when the mount configuration would recurse into itself."""

    pass


class ErrorCode:
    """Machine-readable identifiers for error conditions."""

    INVALID_CONFIG = "INVALID_CONFIG"
    UNSUPPORTED_FORMAT = "UNSUPPORTED_FORMAT"
    DIRECTORY_CREATION_FAILED = "DIRECTORY_CREATION_FAILED"
    MOUNT_CHECK_FAILED = "MOUNT_CHECK_FAILED"
    MOUNT_REFUSED = "MOUNT_REFUSED"
    INTERNAL_ERROR = "INTERNAL_ERROR"


ERROR_SUGGESTIONS: Dict[str, str] = {
    ErrorCode.INVALID_CONFIG: "Check config.yaml and MEDIAFS_* environment variables",
    ErrorCode.UNSUPPORTED_FORMAT: (
        "Set formats.desttype to a comma-separated list containing at least one of "
        "mp3, mp4, wav, ogg, webm, mov, aiff, opus, prores"
    ),
    ErrorCode.DIRECTORY_CREATION_FAILED: "Check permissions and free space of the cache path",
    ErrorCode.MOUNT_CHECK_FAILED: "Make sure the mount path exists and is accessible",
    ErrorCode.MOUNT_REFUSED: "Choose a mount path outside the source tree that is not already mounted",
    ErrorCode.INTERNAL_ERROR: "An unexpected error occurred",
}


# Order matters: subclasses must come before their base classes
EXCEPTION_TO_ERROR_CODE: Dict[Type[Exception], str] = {
    ConfigurationError: ErrorCode.INVALID_CONFIG,
    UnsupportedFormatError: ErrorCode.UNSUPPORTED_FORMAT,
    DirectoryCreationError: ErrorCode.DIRECTORY_CREATION_FAILED,
    MountCheckError: ErrorCode.MOUNT_CHECK_FAILED,
    MountSetupError: ErrorCode.MOUNT_REFUSED,
}


def error_code_for(exc: Exception) -> str:
    """Map an exception to its error code.

    Args:
        exc: The exception to map.

    Returns:
        The matching ErrorCode value, INTERNAL_ERROR for anything unknown.
    """
    for exc_type, error_code in EXCEPTION_TO_ERROR_CODE.items():
        if isinstance(exc, exc_type):
            return error_code
    return ErrorCode.INTERNAL_ERROR


def suggestion_for(exc: Exception) -> Optional[str]:
    """Return the user-facing suggestion for an exception, if any."""
    return ERROR_SUGGESTIONS.get(error_code_for(exc))
