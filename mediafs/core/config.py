"""Configuration management with YAML and environment variable support"""

import os
from typing import Any, Dict, Optional, Tuple, Type

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from mediafs.core.errors import ConfigurationError
from mediafs.formats.resolver import format_resolver
from mediafs.fs.helpers import tempdir


class BaseConfigSection(BaseSettings):
    """Base class for all config sections with correct environment variable precedence.

    This class customizes the settings source priority to ensure that:
    1. Environment variables have highest priority
    2. Init kwargs (YAML data) have second priority
    3. Default values have lowest priority
    """

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings source priority: env vars > init kwargs > defaults."""
        return (env_settings, init_settings, dotenv_settings, file_secret_settings)


class FormatsConfig(BaseConfigSection):
    """Destination format configuration"""

    # Ordered, comma-separated destination types; the first known one is used
    desttype: str = "mp4"

    model_config = SettingsConfigDict(env_prefix="MEDIAFS_FORMATS_")


class MountConfig(BaseConfigSection):
    """Source and mount path configuration"""

    basepath: str = ""
    mountpath: str = ""

    model_config = SettingsConfigDict(env_prefix="MEDIAFS_MOUNT_")


class CacheConfig(BaseConfigSection):
    """Transcoder cache directory configuration"""

    cachepath: Optional[str] = None
    dir_mode: int = 0o755

    model_config = SettingsConfigDict(env_prefix="MEDIAFS_CACHE_")

    @field_validator("dir_mode")
    @classmethod
    def validate_dir_mode(cls, v: int) -> int:
        if not 0 <= v <= 0o7777:
            raise ValueError("dir_mode must be between 0 and 0o7777")
        return v

    @property
    def resolved_cachepath(self) -> str:
        """Cache path, defaulting to a mediafs directory in the temp dir"""
        return self.cachepath or os.path.join(tempdir(), "mediafs")


class LoggingConfig(BaseConfigSection):
    """Logging configuration"""

    level: str = "INFO"
    format: str = "json"

    model_config = SettingsConfigDict(env_prefix="MEDIAFS_LOGGING_")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"level must be one of {valid_levels}")
        return v_upper

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        v_lower = v.lower()
        if v_lower not in ("json", "console"):
            raise ValueError("format must be 'json' or 'console'")
        return v_lower


class Config(BaseSettings):
    """Main application configuration"""

    formats: FormatsConfig = Field(default_factory=FormatsConfig)
    mount: MountConfig = Field(default_factory=MountConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = SettingsConfigDict(env_prefix="MEDIAFS_")


class ConfigService:
    """Service for loading and managing configuration"""

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = config_path or "config.yaml"
        self._config: Optional[Config] = None

    def load(self) -> Config:
        """Load configuration from YAML file with environment variable overrides."""
        config_data: Dict[str, Any] = {}

        if os.path.exists(self.config_path):
            with open(self.config_path, "r", encoding="utf-8") as f:
                yaml_data = yaml.safe_load(f)
                if yaml_data:
                    config_data = yaml_data

        # BaseConfigSection handles env var precedence
        self._config = Config(
            formats=FormatsConfig(**config_data.get("formats", {})),
            mount=MountConfig(**config_data.get("mount", {})),
            cache=CacheConfig(**config_data.get("cache", {})),
            logging=LoggingConfig(**config_data.get("logging", {})),
        )

        return self._config

    def validate(self) -> bool:
        """Validate the loaded configuration

        Raises:
            ConfigurationError: If the configuration is not loaded or unusable
        """
        if self._config is None:
            raise ConfigurationError("Configuration not loaded. Call load() first.")

        if not format_resolver.resolve(self._config.formats.desttype).is_valid:
            raise ConfigurationError(
                f"No supported destination type in '{self._config.formats.desttype}'"
            )

        if not self._config.mount.basepath:
            raise ConfigurationError("mount.basepath must be configured")
        if not self._config.mount.mountpath:
            raise ConfigurationError("mount.mountpath must be configured")

        return True

    @property
    def config(self) -> Config:
        """Get the loaded configuration"""
        if self._config is None:
            raise ConfigurationError("Configuration not loaded. Call load() first.")
        return self._config
