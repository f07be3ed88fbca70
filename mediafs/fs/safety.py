"""Safety checks consulted before the filesystem is mutated or mounted.

``make_directory_tree`` creates a directory path component by component,
treating components that already exist as success so concurrent creators
never fail each other. ``check_mount_point`` compares device ids of a path
and its parent to find mount boundaries; it reports an indeterminate outcome
rather than guessing when the path cannot be examined.

Both take their platform calls (``mkdir``, ``stat``) as parameters so tests
can substitute fakes.
"""

import os
import stat as stat_module
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, List, Optional

import structlog

from mediafs.core.errors import DirectoryCreationError, MountCheckError, MountSetupError
from mediafs.fs.helpers import expand_path, sanitise_name
from mediafs.paths.ops import SEPARATOR, ensure_trailing_separator

logger = structlog.get_logger(__name__)

DEFAULT_DIR_MODE = 0o755

MkdirFunc = Callable[[str, int], None]
StatFunc = Callable[[str], Any]


@dataclass
class DirectoryTreeResult:
    """Result of a directory tree creation.

    Attributes:
        path: Requested directory path
        success: Whether every component exists now
        created: Components created by this call, in order
        existing: Components that already existed
        failed_path: Component whose creation failed
        errno: errno of the failure
        error: Error message of the failure
    """

    path: str
    success: bool
    created: List[str] = field(default_factory=list)
    existing: List[str] = field(default_factory=list)
    failed_path: Optional[str] = None
    errno: Optional[int] = None
    error: Optional[str] = None

    def raise_for_status(self) -> None:
        """Raise DirectoryCreationError if the creation failed."""
        if not self.success:
            raise DirectoryCreationError(
                self.failed_path or self.path, errno=self.errno, reason=self.error
            )


def _tree_components(path: str) -> List[str]:
    """List every prefix directory of ``path``, shortest first."""
    prefix = SEPARATOR if path.startswith(SEPARATOR) else ""
    parts = [p for p in path.split(SEPARATOR) if p]
    return [prefix + SEPARATOR.join(parts[: i + 1]) for i in range(len(parts))]


def make_directory_tree(
    path: str, mode: int = DEFAULT_DIR_MODE, mkdir: MkdirFunc = os.mkdir
) -> DirectoryTreeResult:
    """
    Create a directory and all missing parents.

    A component that already exists counts as success. Any other failure
    stops creation; components created so far are left in place.

    Args:
        path: Directory to create
        mode: Permission bits for new directories
        mkdir: Directory creation call

    Returns:
        DirectoryTreeResult describing what was created
    """
    result = DirectoryTreeResult(path=path, success=True)

    for component in _tree_components(path):
        try:
            mkdir(component, mode)
        except FileExistsError:
            result.existing.append(component)
            continue
        except OSError as e:
            result.success = False
            result.failed_path = component
            result.errno = e.errno
            result.error = e.strerror or str(e)
            logger.error(
                "directory_creation_failed",
                path=path,
                component=component,
                errno=e.errno,
                error=result.error,
            )
            return result

        result.created.append(component)
        logger.debug("directory_created", path=component, mode=oct(mode))

    return result


class MountStatus(str, Enum):
    """Outcome of a mount point check."""

    MOUNT_POINT = "mount_point"
    NOT_MOUNT_POINT = "not_mount_point"
    INDETERMINATE = "indeterminate"


@dataclass(frozen=True)
class MountCheckResult:
    """Result of a mount point check."""

    path: str
    status: MountStatus
    error: Optional[str] = None

    @property
    def is_mount_point(self) -> bool:
        return self.status is MountStatus.MOUNT_POINT

    @property
    def is_indeterminate(self) -> bool:
        return self.status is MountStatus.INDETERMINATE


def check_mount_point(path: str, stat: StatFunc = os.stat) -> MountCheckResult:
    """
    Check whether a path is a mount point.

    A directory is a mount point when its device id differs from its
    parent's, or when it is its own parent (the root directory). Anything
    that is not a directory is never a mount point.

    Args:
        path: Path to check
        stat: stat call returning an object with st_dev, st_ino and st_mode

    Returns:
        MountCheckResult; INDETERMINATE if the path or its parent cannot be
        examined
    """
    # "." has to be compared with "..", not with itself
    parent = os.path.join(path, "..")

    try:
        file_stat = stat(path)
    except OSError as e:
        logger.warning("mount_check_failed", path=path, error=str(e))
        return MountCheckResult(path=path, status=MountStatus.INDETERMINATE, error=str(e))

    if not stat_module.S_ISDIR(file_stat.st_mode):
        return MountCheckResult(path=path, status=MountStatus.NOT_MOUNT_POINT)

    try:
        parent_stat = stat(parent)
    except OSError as e:
        logger.warning("mount_check_failed", path=path, parent=parent, error=str(e))
        return MountCheckResult(path=path, status=MountStatus.INDETERMINATE, error=str(e))

    if file_stat.st_dev != parent_stat.st_dev or file_stat.st_ino == parent_stat.st_ino:
        return MountCheckResult(path=path, status=MountStatus.MOUNT_POINT)

    return MountCheckResult(path=path, status=MountStatus.NOT_MOUNT_POINT)


def is_mount_point(path: str, stat: StatFunc = os.stat) -> bool:
    """
    Check whether a path is a mount point, failing closed.

    Raises:
        MountCheckError: If the check is indeterminate
    """
    result = check_mount_point(path, stat=stat)
    if result.is_indeterminate:
        raise MountCheckError(path, result.error or "unknown error")
    return result.is_mount_point


def _contains(root: str, path: str) -> bool:
    if not root:
        return False
    return path == root or path.startswith(ensure_trailing_separator(root))


class MountGuard:
    """Refuses mount setups that would recurse into themselves."""

    def __init__(self, stat: StatFunc = os.stat):
        self._stat = stat

    def verify(self, basepath: str, mountpath: str) -> None:
        """
        Verify that ``mountpath`` can host the virtual namespace of ``basepath``.

        Args:
            basepath: Source tree root
            mountpath: Mount root

        Raises:
            MountSetupError: If a path is not configured, the trees overlap or
                mountpath is already mounted
            MountCheckError: If mountpath cannot be examined
        """
        if not basepath or not mountpath:
            missing = "basepath" if not basepath else "mountpath"
            logger.error("mount_refused", reason="not_configured", missing=missing)
            raise MountSetupError(f"Mount {missing} is not configured")

        base = sanitise_name(expand_path(basepath))
        mount = sanitise_name(expand_path(mountpath))

        if _contains(base, mount) or _contains(mount, base):
            logger.error("mount_refused", reason="overlap", basepath=base, mountpath=mount)
            raise MountSetupError(
                f"Mount path '{mount}' and source path '{base}' overlap"
            )

        if is_mount_point(mount, stat=self._stat):
            logger.error("mount_refused", reason="already_mounted", mountpath=mount)
            raise MountSetupError(f"'{mount}' is already a mount point")

        logger.debug("mount_verified", basepath=base, mountpath=mount)
