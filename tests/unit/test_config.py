"""Tests for configuration management"""

from pathlib import Path

import pytest
import yaml

from mediafs.core.config import CacheConfig, ConfigService
from mediafs.core.errors import ConfigurationError


def write_config(path: Path, data: dict) -> str:
    with open(path, "w") as f:
        yaml.dump(data, f)
    return str(path)


class TestConfigService:
    """Test ConfigService functionality"""

    def test_load_from_yaml(self, tmp_path: Path) -> None:
        """Test loading configuration from YAML file"""
        config_file = write_config(
            tmp_path / "config.yaml",
            {
                "formats": {"desttype": "webm,mp4"},
                "mount": {"basepath": "/srv/media", "mountpath": "/mnt/media"},
                "logging": {"level": "debug"},
            },
        )

        config = ConfigService(config_file).load()

        assert config.formats.desttype == "webm,mp4"
        assert config.mount.basepath == "/srv/media"
        assert config.mount.mountpath == "/mnt/media"
        assert config.logging.level == "DEBUG"

    def test_load_with_defaults(self, tmp_path: Path) -> None:
        """Test loading configuration with default values"""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("{}")

        config = ConfigService(str(config_file)).load()

        assert config.formats.desttype == "mp4"
        assert config.mount.basepath == ""
        assert config.cache.cachepath is None
        assert config.cache.dir_mode == 0o755
        assert config.logging.format == "json"

    def test_environment_variable_override(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test environment variable overrides YAML configuration"""
        config_file = write_config(
            tmp_path / "config.yaml",
            {"formats": {"desttype": "mp3"}, "mount": {"basepath": "/srv/media"}},
        )
        monkeypatch.setenv("MEDIAFS_FORMATS_DESTTYPE", "ogg,mp3")

        config = ConfigService(config_file).load()

        assert config.formats.desttype == "ogg,mp3"
        assert config.mount.basepath == "/srv/media"

    def test_nested_environment_variable_override(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test section override with environment variables"""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("{}")

        monkeypatch.setenv("MEDIAFS_MOUNT_MOUNTPATH", "/mnt/custom")
        monkeypatch.setenv("MEDIAFS_CACHE_CACHEPATH", "/var/cache/mediafs")

        config = ConfigService(str(config_file)).load()

        assert config.mount.mountpath == "/mnt/custom"
        assert config.cache.cachepath == "/var/cache/mediafs"

    def test_validation_log_level(self, tmp_path: Path) -> None:
        """Test log level validation"""
        config_file = write_config(tmp_path / "config.yaml", {"logging": {"level": "LOUD"}})

        with pytest.raises(ValueError, match="level must be one of"):
            ConfigService(config_file).load()

    def test_validation_log_format(self, tmp_path: Path) -> None:
        config_file = write_config(tmp_path / "config.yaml", {"logging": {"format": "xml"}})

        with pytest.raises(ValueError, match="format must be"):
            ConfigService(config_file).load()

    def test_validation_dir_mode(self, tmp_path: Path) -> None:
        config_file = write_config(tmp_path / "config.yaml", {"cache": {"dir_mode": 0o17777}})

        with pytest.raises(ValueError, match="dir_mode must be between"):
            ConfigService(config_file).load()

    def test_load_nonexistent_file(self) -> None:
        """Test loading when config file doesn't exist uses defaults"""
        config = ConfigService("nonexistent.yaml").load()

        assert config.formats.desttype == "mp4"
        assert config.logging.level == "INFO"


class TestConfigValidation:
    """Test ConfigService.validate()"""

    @pytest.fixture
    def valid_data(self) -> dict:
        return {
            "formats": {"desttype": "xyz,mp3"},
            "mount": {"basepath": "/srv/media", "mountpath": "/mnt/media"},
        }

    def test_valid_configuration(self, tmp_path: Path, valid_data: dict) -> None:
        service = ConfigService(write_config(tmp_path / "config.yaml", valid_data))
        service.load()
        assert service.validate() is True

    def test_unresolvable_desttype(self, tmp_path: Path, valid_data: dict) -> None:
        """Test that a type list without known formats is rejected"""
        valid_data["formats"]["desttype"] = "xyz,abc"
        service = ConfigService(write_config(tmp_path / "config.yaml", valid_data))
        service.load()

        with pytest.raises(ConfigurationError, match="No supported destination type"):
            service.validate()

    @pytest.mark.parametrize("missing", ["basepath", "mountpath"])
    def test_mount_paths_required(self, tmp_path: Path, valid_data: dict, missing: str) -> None:
        del valid_data["mount"][missing]
        service = ConfigService(write_config(tmp_path / "config.yaml", valid_data))
        service.load()

        with pytest.raises(ConfigurationError, match=f"mount.{missing}"):
            service.validate()

    def test_config_property_before_load(self) -> None:
        """Test accessing config property before loading raises error"""
        with pytest.raises(ValueError, match="Configuration not loaded"):
            _ = ConfigService().config

    def test_validate_before_load(self) -> None:
        """Test validating before loading raises error"""
        with pytest.raises(ConfigurationError, match="Configuration not loaded"):
            ConfigService().validate()


class TestCacheConfig:
    def test_default_cachepath_in_tempdir(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TMPDIR", "/scratch")
        assert CacheConfig().resolved_cachepath == "/scratch/mediafs"

    def test_explicit_cachepath(self) -> None:
        assert CacheConfig(cachepath="/var/cache/x").resolved_cachepath == "/var/cache/x"
