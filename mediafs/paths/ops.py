"""Primitive path string operations.

Pure string transforms with POSIX ``dirname``/``basename`` edge-case
semantics. Nothing here touches the filesystem.
"""

from typing import Tuple

SEPARATOR = "/"
EXTENSION_SEPARATOR = "."


def ensure_trailing_separator(path: str) -> str:
    """Append a separator to ``path`` unless it already ends with one."""
    if path.endswith(SEPARATOR):
        return path
    return path + SEPARATOR


def append_filename(path: str, filename: str) -> str:
    """Join ``filename`` onto ``path`` with a single separator in between."""
    return ensure_trailing_separator(path) + filename


def strip_filename(path: str) -> str:
    """
    Remove the last component of a path, like POSIX ``dirname``.

    ``"/a/b/"`` gives ``"/a"``, ``"/"`` gives ``"/"`` and a path without a
    separator gives ``"."``.
    """
    if not path:
        return "."

    stripped = path.rstrip(SEPARATOR)
    if not stripped:
        return SEPARATOR

    if SEPARATOR not in stripped:
        return "."

    head = stripped.rsplit(SEPARATOR, 1)[0].rstrip(SEPARATOR)
    return head or SEPARATOR


def strip_directory(path: str) -> str:
    """
    Remove the directory part of a path, like POSIX ``basename``.

    Trailing separators collapse (``"/a/b/"`` gives ``"b"``), ``"/"`` gives
    ``"/"`` and a path without a separator is returned unchanged, including
    the empty string.
    """
    if not path:
        return path

    stripped = path.rstrip(SEPARATOR)
    if not stripped:
        return SEPARATOR

    return stripped.rsplit(SEPARATOR, 1)[-1]


def find_extension(filename: str) -> Tuple[bool, str]:
    """
    Find the extension of a filename.

    Args:
        filename: File name, without directory

    Returns:
        (found, extension); extension is everything after the last dot and
        empty when there is no dot
    """
    found = filename.rfind(EXTENSION_SEPARATOR)
    if found == -1:
        return False, ""
    return True, filename[found + 1 :]


def replace_extension(filename: str, extension: str) -> str:
    """
    Replace the extension of a filename, or add one if it has none.

    Everything up to and including the last dot is kept. When the new
    extension contains no dot, applying the same replacement twice gives
    the same result as applying it once. A dotted extension is not
    idempotent: replace_extension("a.tar.gz", "tar.gz") is "a.tar.tar.gz".
    """
    found = filename.rfind(EXTENSION_SEPARATOR)
    if found == -1:
        return filename + EXTENSION_SEPARATOR + extension
    return filename[: found + 1] + extension
