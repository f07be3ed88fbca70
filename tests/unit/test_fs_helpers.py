"""Tests for filesystem helpers."""

import os
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import patch

import pytest

from mediafs.fs.helpers import expand_path, get_disk_free, sanitise_name, tempdir


class TestTempdir:
    def test_uses_tmpdir(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("TMPDIR", "/var/scratch")
        assert tempdir() == "/var/scratch"

    def test_falls_back_to_tmp(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.delenv("TMPDIR", raising=False)
        assert tempdir() == "/tmp"

    def test_empty_tmpdir_ignored(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("TMPDIR", "")
        assert tempdir() == "/tmp"


class TestSanitiseName:
    def test_resolves_existing_path(self, tmp_path: Path):
        (tmp_path / "a").mkdir()
        messy = f"{tmp_path}/a/../a/"
        assert sanitise_name(messy) == os.path.realpath(str(tmp_path / "a"))

    def test_resolves_symlink(self, tmp_path: Path):
        target = tmp_path / "target"
        target.mkdir()
        link = tmp_path / "link"
        link.symlink_to(target)
        assert sanitise_name(str(link)) == os.path.realpath(str(target))

    def test_missing_path_unchanged(self, tmp_path: Path):
        missing = str(tmp_path / "does" / "not" / "exist")
        assert sanitise_name(missing) == missing

    def test_empty_path(self):
        assert sanitise_name("") == ""


class TestExpandPath:
    def test_home(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("HOME", "/home/listener")
        assert expand_path("~/music") == "/home/listener/music"

    def test_variables(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("MEDIA_ROOT", "/srv/media")
        assert expand_path("$MEDIA_ROOT/video") == "/srv/media/video"

    def test_plain_path_unchanged(self):
        assert expand_path("/srv/media") == "/srv/media"

    def test_empty(self):
        assert expand_path("") == ""


class TestGetDiskFree:
    def test_existing_path(self, tmp_path: Path):
        assert get_disk_free(str(tmp_path)) >= 0

    def test_missing_path_returns_zero(self, tmp_path: Path):
        assert get_disk_free(str(tmp_path / "missing")) == 0

    def test_computed_from_statvfs(self):
        fake = SimpleNamespace(f_bsize=4096, f_bfree=25, f_bavail=20)
        with patch("mediafs.fs.helpers.os.statvfs", return_value=fake):
            assert get_disk_free("/anything") == 25 * 4096
