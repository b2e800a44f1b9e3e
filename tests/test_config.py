"""
Tests for build-info loading

Author: appv maintainers | 2026-10-17
"""

import logging
from pathlib import Path

import pytest
import yaml

from appv.config import (
    find_build_info,
    load_version_config,
    load_version_record,
    save_version_config,
)
from appv.errors import ConfigurationError
from appv.record import VersionConfig

BUILD_INFO = """\
version: 1.2.3-2-ga1b2c3d
git_hash: 1234567890abcdef
git_branch: testing
git_user: Jane Doe
os: linux
arch: amd64
compiler: CPython 3.12.1
release: test
timestamp: Thu Feb 14 15:04:05 SAST 2019
"""


@pytest.fixture
def build_info(temp_dir: Path) -> Path:
    path = temp_dir / "build_info.yaml"
    path.write_text(BUILD_INFO)
    return path


class TestFindBuildInfo:
    """Tests for find_build_info()."""

    def test_finds_in_start_dir(self, build_info):
        assert find_build_info(build_info.parent) == build_info.resolve()

    def test_finds_in_dot_appv(self, temp_dir):
        target = temp_dir / ".appv" / "build_info.yaml"
        target.parent.mkdir()
        target.write_text(BUILD_INFO)
        assert find_build_info(temp_dir) == target.resolve()

    def test_searches_upward(self, build_info):
        nested = build_info.parent / "a" / "b"
        nested.mkdir(parents=True)
        assert find_build_info(nested) == build_info.resolve()

    def test_not_found(self, temp_dir, monkeypatch):
        monkeypatch.setenv("HOME", str(temp_dir))
        empty = temp_dir / "empty"
        empty.mkdir()
        assert find_build_info(empty) is None


class TestLoadVersionConfig:
    """Tests for load_version_config()."""

    def test_load_file(self, build_info):
        config = load_version_config(build_info)
        assert config.version == "1.2.3-2-ga1b2c3d"
        assert config.git_user == "Jane Doe"
        assert config.timestamp == "Thu Feb 14 15:04:05 SAST 2019"

    def test_env_overrides_file(self, build_info, monkeypatch):
        monkeypatch.setenv("APPV_RELEASE", "production")
        monkeypatch.setenv("APPV_VERSION", "2.0.0")
        config = load_version_config(build_info)
        assert config.release == "production"
        assert config.version == "2.0.0"
        assert config.git_branch == "testing"

    def test_empty_env_value_overrides(self, build_info, monkeypatch):
        """An exported but empty variable still wins over the file."""
        monkeypatch.setenv("APPV_GIT_USER", "")
        assert load_version_config(build_info).git_user == ""

    def test_env_only(self, temp_dir, monkeypatch):
        """Without a file, fields come from the environment or stay empty."""
        monkeypatch.chdir(temp_dir)
        monkeypatch.setenv("HOME", str(temp_dir))
        monkeypatch.setenv("APPV_VERSION", "1.0.0")
        config = load_version_config()
        assert config == VersionConfig(version="1.0.0")

    def test_null_is_empty(self, temp_dir):
        path = temp_dir / "build_info.yaml"
        path.write_text("version: 1.0.0\nrelease:\n")
        config = load_version_config(path)
        assert config.release == ""

    @pytest.mark.parametrize("line", [
        "git_hash: 0123456",
        "git_hash: 0x1a2b",
        "version: 1.0",
        "release: true",
    ])
    def test_unquoted_non_string_rejected(self, temp_dir, line):
        """Values YAML reads as numbers or booleans are not silently rewritten."""
        path = temp_dir / "build_info.yaml"
        path.write_text(line + "\n")
        key = line.split(":")[0]
        with pytest.raises(ConfigurationError, match=f"'{key}' must be a string"):
            load_version_config(path)

    def test_quoted_hash_kept_verbatim(self, temp_dir):
        path = temp_dir / "build_info.yaml"
        path.write_text("git_hash: '0123456'\n")
        assert load_version_config(path).git_hash == "0123456"

    def test_unknown_keys_warned(self, temp_dir, caplog):
        path = temp_dir / "build_info.yaml"
        path.write_text("version: 1.0.0\nflavour: vanilla\n")
        with caplog.at_level(logging.WARNING, logger="appv.config"):
            config = load_version_config(path)
        assert config.version == "1.0.0"
        assert "flavour" in caplog.text

    def test_missing_explicit_file(self, temp_dir):
        with pytest.raises(ConfigurationError):
            load_version_config(temp_dir / "missing.yaml")

    def test_invalid_yaml(self, temp_dir):
        path = temp_dir / "build_info.yaml"
        path.write_text("version: [1.2.3\n")
        with pytest.raises(ConfigurationError):
            load_version_config(path)

    def test_not_a_mapping(self, temp_dir):
        path = temp_dir / "build_info.yaml"
        path.write_text("- 1.2.3\n")
        with pytest.raises(ConfigurationError):
            load_version_config(path)


class TestSaveVersionConfig:
    """Tests for save_version_config()."""

    def test_save_and_load(self, temp_dir):
        config = VersionConfig(
            version="1.2.3",
            git_hash="0123",
            release="prod",
            timestamp="Thu Feb 14 15:04:05 SAST 2019",
        )
        path = temp_dir / "out" / "build_info.yaml"
        save_version_config(config, path)

        assert yaml.safe_load(path.read_text())["git_hash"] == "0123"
        assert load_version_config(path) == config


class TestLoadVersionRecord:
    """Tests for load_version_record()."""

    def test_record_with_warnings_logged(self, build_info, caplog):
        with caplog.at_level(logging.WARNING, logger="appv.config"):
            record = load_version_record(build_info)
        assert record is not None
        assert record.pre() == "2-ga1b2c3d"
        warnings = [r.getMessage() for r in caplog.records if r.levelno == logging.WARNING]
        assert warnings == list(record.warnings())

    def test_invalid_metadata_disables_reporting(self, build_info, monkeypatch, caplog):
        monkeypatch.setenv("APPV_VERSION", "not-a-version")
        with caplog.at_level(logging.ERROR, logger="appv.config"):
            record = load_version_record(build_info)
        assert record is None
        assert "Version reporting disabled" in caplog.text
        assert "not-a-version" in caplog.text

    def test_missing_file_disables_reporting(self, temp_dir, caplog):
        with caplog.at_level(logging.ERROR, logger="appv.config"):
            assert load_version_record(temp_dir / "missing.yaml") is None
        assert "not found" in caplog.text
