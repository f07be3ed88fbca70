"""Path string primitives and destination path resolution."""

from mediafs.paths.ops import (
    SEPARATOR,
    append_filename,
    ensure_trailing_separator,
    find_extension,
    replace_extension,
    strip_directory,
    strip_filename,
)
from mediafs.paths.resolver import PathResolver, destination_name, destination_path

__all__ = [
    "SEPARATOR",
    "PathResolver",
    "append_filename",
    "destination_name",
    "destination_path",
    "ensure_trailing_separator",
    "find_extension",
    "replace_extension",
    "strip_directory",
    "strip_filename",
]
