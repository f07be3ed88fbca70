"""Startup validation for a mount.

Runs once before the virtual namespace is exposed:
- the configured destination type list must resolve to a known format
- the mount path must not overlap the source tree or already be mounted
- the cache directory must exist or be creatable
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import structlog

from mediafs.core.config import Config
from mediafs.core.errors import MountCheckError, MountSetupError, suggestion_for
from mediafs.core.formatting import format_size
from mediafs.core.logging import bind_mount_context
from mediafs.formats.catalog import FormatSpec
from mediafs.formats.resolver import FormatResolver
from mediafs.fs.helpers import get_disk_free
from mediafs.fs.safety import MountGuard, make_directory_tree

logger = structlog.get_logger(__name__)


@dataclass
class ComponentCheckResult:
    """Result of a startup component check.

    Attributes:
        name: Component name ("format", "mount", "cache")
        passed: Whether the check passed
        critical: If True, failure blocks startup
        message: Human-readable message about the result
        details: Additional details about the check
    """

    name: str
    passed: bool
    critical: bool
    message: Optional[str] = None
    details: Dict[str, Any] = field(default_factory=dict)


@dataclass
class StartupResult:
    """Result of full startup validation.

    Attributes:
        success: Whether the mount can proceed
        format_spec: Resolved destination format
        checks: List of individual component check results
        errors: List of error messages for critical failures
        warnings: List of warning messages for non-critical issues
    """

    success: bool
    format_spec: Optional[FormatSpec] = None
    checks: List[ComponentCheckResult] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


class StartupValidator:
    """Validates configuration and filesystem state before mounting."""

    def __init__(
        self,
        config: Config,
        resolver: Optional[FormatResolver] = None,
        mount_guard: Optional[MountGuard] = None,
    ):
        """Initialize the startup validator.

        Args:
            config: Application configuration.
            resolver: Format resolver, the shared one by default.
            mount_guard: Mount guard, one using os.stat by default.
        """
        self.config = config
        self.resolver = resolver or FormatResolver()
        self.mount_guard = mount_guard or MountGuard()
        self.format_spec: Optional[FormatSpec] = None

    def validate_all(self) -> StartupResult:
        """Run all startup validations.

        Returns:
            StartupResult with overall status and component details.
        """
        bind_mount_context(self.config.mount.basepath, self.config.mount.mountpath)
        logger.info("startup_validation_started")

        checks = [self.check_format(), self.check_mount(), self.check_cache()]
        if checks[-1].passed:
            checks.append(self.check_cache_space())

        errors = [f"{r.name}: {r.message}" for r in checks if not r.passed and r.critical]
        warnings = [f"{r.name}: {r.message}" for r in checks if not r.passed and not r.critical]
        success = not errors

        log_method = logger.info if success else logger.error
        log_method(
            "startup_validation_completed",
            success=success,
            error_count=len(errors),
            warning_count=len(warnings),
        )

        return StartupResult(
            success=success,
            format_spec=self.format_spec,
            checks=checks,
            errors=errors,
            warnings=warnings,
        )

    def check_format(self) -> ComponentCheckResult:
        """Resolve the configured destination type list."""
        desttype = self.config.formats.desttype
        spec = self.resolver.resolve(desttype)
        self.format_spec = spec

        if not spec.is_valid:
            return ComponentCheckResult(
                name="format",
                passed=False,
                critical=True,
                message=f"No supported destination type in '{desttype}'",
                details={"desttype": desttype},
            )

        return ComponentCheckResult(
            name="format",
            passed=True,
            critical=True,
            message=f"Transcoding to {spec.container_name}",
            details={
                "container_type": spec.container_type.value,
                "audio_codec": spec.audio_codec.value,
                "video_codec": spec.video_codec.value,
            },
        )

    def check_mount(self) -> ComponentCheckResult:
        """Refuse overlapping or already mounted mount paths."""
        basepath = self.config.mount.basepath
        mountpath = self.config.mount.mountpath

        try:
            self.mount_guard.verify(basepath, mountpath)
        except (MountSetupError, MountCheckError) as e:
            return ComponentCheckResult(
                name="mount",
                passed=False,
                critical=True,
                message=str(e),
                details={"suggestion": suggestion_for(e)},
            )

        return ComponentCheckResult(
            name="mount",
            passed=True,
            critical=True,
            message="Mount path verified",
            details={"basepath": basepath, "mountpath": mountpath},
        )

    def check_cache(self) -> ComponentCheckResult:
        """Create the cache directory tree if it is missing."""
        cachepath = self.config.cache.resolved_cachepath
        result = make_directory_tree(cachepath, self.config.cache.dir_mode)

        if not result.success:
            return ComponentCheckResult(
                name="cache",
                passed=False,
                critical=True,
                message=f"Cannot create cache directory {result.failed_path}: {result.error}",
                details={"path": cachepath, "errno": result.errno},
            )

        return ComponentCheckResult(
            name="cache",
            passed=True,
            critical=True,
            message="Cache directory ready",
            details={"path": cachepath, "created": result.created},
        )

    def check_cache_space(self) -> ComponentCheckResult:
        """Warn when the cache filesystem reports no free space."""
        cachepath = self.config.cache.resolved_cachepath
        free = get_disk_free(cachepath)

        return ComponentCheckResult(
            name="cache_space",
            passed=free > 0,
            critical=False,
            message=f"{format_size(free)} free" if free else "No free space reported",
            details={"path": cachepath, "free_bytes": free},
        )
