"""Small filesystem helpers used around mount setup."""

import os

import structlog

logger = structlog.get_logger(__name__)

DEFAULT_TEMPDIR = "/tmp"  # nosec B108 - fallback only when TMPDIR is unset


def tempdir() -> str:
    """Return $TMPDIR if set, otherwise /tmp."""
    return os.environ.get("TMPDIR") or DEFAULT_TEMPDIR


def sanitise_name(path: str) -> str:
    """
    Resolve a path to its canonical absolute form.

    Args:
        path: Path to resolve

    Returns:
        The resolved path, or ``path`` unchanged if it cannot be resolved
        (e.g. it does not exist)
    """
    if not path:
        return path
    try:
        return os.path.realpath(path, strict=True)
    except OSError:
        return path


def expand_path(path: str) -> str:
    """Expand ``~`` and environment variables in a path."""
    if not path:
        return path
    return os.path.expandvars(os.path.expanduser(path))


def get_disk_free(path: str) -> int:
    """
    Get the free space of the filesystem holding ``path``.

    Args:
        path: Any path on the filesystem

    Returns:
        Free bytes, 0 if the filesystem cannot be queried
    """
    try:
        stats = os.statvfs(path)
    except OSError as e:
        logger.debug("disk_free_unavailable", path=path, error=str(e))
        return 0
    return stats.f_bfree * stats.f_bsize
