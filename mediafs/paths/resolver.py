"""Mapping of source files to their names in the mount's virtual namespace."""

import structlog

from mediafs.formats.catalog import FormatSpec
from mediafs.paths.ops import SEPARATOR, append_filename, replace_extension, strip_directory

logger = structlog.get_logger(__name__)


def destination_name(source_path: str, spec: FormatSpec) -> str:
    """
    Compute the transcoded file name of a source file.

    The directory part is dropped and the extension replaced by the format's
    container name. An UNKNOWN spec has no container name, so the bare
    source file name is returned unchanged.

    Args:
        source_path: Path of the source file
        spec: Resolved destination format

    Returns:
        Destination file name without directory
    """
    filename = strip_directory(source_path)
    if not spec.is_valid:
        return filename
    return replace_extension(filename, spec.container_name)


def destination_path(source_path: str, mount_root: str, spec: FormatSpec) -> str:
    """
    Compute the path of a source file under the mount root.

    Exactly one separator joins the mount root and the file name, whether or
    not ``mount_root`` ends with one.

    Args:
        source_path: Path of the source file
        mount_root: Root of the virtual namespace
        spec: Resolved destination format

    Returns:
        Destination path
    """
    # basename of "/" is "/" itself
    name = destination_name(source_path, spec).lstrip(SEPARATOR)
    return append_filename(mount_root, name)


class PathResolver:
    """Destination path resolution bound to one mount root."""

    def __init__(self, mount_root: str, spec: FormatSpec):
        """
        Initialize the resolver.

        Args:
            mount_root: Root of the virtual namespace
            spec: Destination format used for every path
        """
        self.mount_root = mount_root
        self.spec = spec

    def destination_path(self, source_path: str) -> str:
        """Return the destination path of ``source_path`` under the mount root."""
        result = destination_path(source_path, self.mount_root, self.spec)
        logger.debug("destination_resolved", source=source_path, destination=result)
        return result

    def destination_name(self, source_path: str) -> str:
        return destination_name(source_path, self.spec)
