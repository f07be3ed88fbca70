"""Filesystem safety checks and helpers."""

from mediafs.fs.helpers import expand_path, get_disk_free, sanitise_name, tempdir
from mediafs.fs.safety import (
    DirectoryTreeResult,
    MountCheckResult,
    MountGuard,
    MountStatus,
    check_mount_point,
    is_mount_point,
    make_directory_tree,
)

__all__ = [
    "DirectoryTreeResult",
    "MountCheckResult",
    "MountGuard",
    "MountStatus",
    "check_mount_point",
    "expand_path",
    "get_disk_free",
    "is_mount_point",
    "make_directory_tree",
    "sanitise_name",
    "tempdir",
]
