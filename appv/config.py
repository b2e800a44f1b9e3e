"""
appv Build-Info Configuration
=============================

Loads the raw version strings of an application from a build_info.yaml
file written at build time, with environment variable overrides:

    version: 1.2.3-2-ga1b2c3d
    git_hash: 1234567890abcdef
    git_branch: main
    git_user: Jane Doe
    os: linux
    arch: amd64
    compiler: CPython 3.12.1
    release: production
    timestamp: Thu Feb 14 15:04:05 SAST 2019

load_version_record() applies the usual application policy: if the
metadata is invalid, the problem is logged and version reporting is
disabled instead of crashing the process.

Author: appv maintainers | 2026-10-17
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .errors import AppvError, ConfigurationError
from .record import VersionConfig, VersionRecord, build

logger = logging.getLogger(__name__)

BUILD_INFO_FILENAME = "build_info.yaml"

# Environment variable -> VersionConfig field
ENV_OVERRIDES = {
    "APPV_VERSION": "version",
    "APPV_GIT_HASH": "git_hash",
    "APPV_GIT_BRANCH": "git_branch",
    "APPV_GIT_USER": "git_user",
    "APPV_OS": "os",
    "APPV_ARCH": "arch",
    "APPV_COMPILER": "compiler",
    "APPV_RELEASE": "release",
    "APPV_TIMESTAMP": "timestamp",
}


# =============================================================================
# Build-info file discovery
# =============================================================================

def find_build_info(start_path: Optional[Path] = None) -> Optional[Path]:
    """
    Find build_info.yaml by searching upward from start_path.

    Search order:
    1. start_path / build_info.yaml
    2. start_path / .appv / build_info.yaml
    3. Parent directories (recursive)
    4. ~/.config/appv/build_info.yaml

    Args:
        start_path: Starting directory (defaults to cwd)

    Returns:
        Path to build-info file or None if not found
    """
    if start_path is None:
        start_path = Path.cwd()

    current = Path(start_path).resolve()
    for _ in range(10):  # Max 10 levels up
        candidates = [
            current / BUILD_INFO_FILENAME,
            current / ".appv" / BUILD_INFO_FILENAME,
        ]
        for candidate in candidates:
            if candidate.is_file():
                return candidate

        parent = current.parent
        if parent == current:
            break
        current = parent

    user_config = Path.home() / ".config" / "appv" / BUILD_INFO_FILENAME
    if user_config.is_file():
        return user_config

    return None


# =============================================================================
# Loading and saving
# =============================================================================

def _read_build_info(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigurationError(f"Cannot read build info {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in build info {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Build info {path} must be a mapping, got {type(data).__name__}"
        )

    unknown = sorted(str(key) for key in data if key not in VersionConfig.field_names())
    if unknown:
        logger.warning(f"Ignoring unknown build info keys in {path}: {', '.join(unknown)}")

    # YAML reads unquoted 0123 or 0x1a as numbers; those fields must stay verbatim
    for name in VersionConfig.field_names():
        value = data.get(name)
        if value is not None and not isinstance(value, str):
            raise ConfigurationError(
                f"Build info {path}: '{name}' must be a string, got "
                f"{type(value).__name__} {value!r}; quote the value"
            )

    return data


def _apply_env_overrides(config: VersionConfig) -> VersionConfig:
    """Apply APPV_* environment variable overrides to config."""
    for env_name, field_name in ENV_OVERRIDES.items():
        value = os.environ.get(env_name)
        if value is not None:
            logger.debug(f"{env_name} overrides build info field '{field_name}'")
            setattr(config, field_name, value)
    return config


def load_version_config(path: Optional[Path] = None) -> VersionConfig:
    """
    Load raw version strings from a build-info file and the environment.

    Environment variables (APPV_VERSION, APPV_GIT_HASH, ...) override file
    values. An explicitly given path must exist; an auto-detected file is
    optional.

    Args:
        path: Path to build_info.yaml (auto-detected if None)

    Returns:
        VersionConfig instance

    Raises:
        ConfigurationError: If the file is missing, unreadable or malformed
    """
    if path is None:
        path = find_build_info()
        if path is None:
            logger.info("No build info file found, using environment only")
    else:
        path = Path(path)
        if not path.is_file():
            raise ConfigurationError(f"Build info file not found: {path}")

    if path is not None:
        logger.info(f"Loading build info from: {path}")
        config = VersionConfig.from_dict(_read_build_info(path))
    else:
        config = VersionConfig()

    return _apply_env_overrides(config)


def save_version_config(config: VersionConfig, path: Path) -> None:
    """
    Save raw version strings to a build-info YAML file.

    Args:
        config: VersionConfig instance
        path: Output path
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(config.to_dict(), f, default_flow_style=False, sort_keys=False)

    logger.info(f"Build info saved to: {path}")


def load_version_record(path: Optional[Path] = None) -> Optional[VersionRecord]:
    """
    Load build info and build the application's VersionRecord.

    Failures are logged with the offending configuration and reported as
    None, so the application can keep running with version reporting
    disabled.

    Args:
        path: Path to build_info.yaml (auto-detected if None)

    Returns:
        VersionRecord, or None if the build info is missing or invalid
    """
    config = None
    try:
        config = load_version_config(path)
        record = build(config)
    except AppvError as e:
        logger.error(f"Version reporting disabled: {e}; build info: {config}")
        return None

    for warning in record.warnings():
        logger.warning(warning)

    return record
