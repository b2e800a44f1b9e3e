"""
Pytest Configuration and Fixtures

Author: appv maintainers | 2026-10-17
"""

import sys
import tempfile
from pathlib import Path
from typing import Generator

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from appv.config import ENV_OVERRIDES
from appv.record import VersionConfig


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep APPV_* variables from the calling shell out of the tests."""
    for name in ENV_OVERRIDES:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def prod_config() -> VersionConfig:
    """A production release build."""
    return VersionConfig(
        version="1.2.3",
        git_hash="1234567890abcdef",
        git_branch="testing",
        git_user="Jane Doe",
        os="linux",
        arch="amd64",
        compiler="go1.11.1",
        release="prod",
        timestamp="Thu Feb 14 15:04:05 SAST 2019",
    )


@pytest.fixture
def pre_config() -> VersionConfig:
    """A pre-release test build (git describe style version)."""
    return VersionConfig(
        version="1.2.3-2-ga1b2c3d",
        git_hash="1234567890abcdef",
        git_branch="testing",
        git_user="Jane Doe",
        os="darwin",
        arch="amd64",
        compiler="go1.11.1",
        release="test",
        timestamp="Thu Feb 14 15:04:05 SAST 2019",
    )
