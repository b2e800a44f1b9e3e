"""
Version Record - validated build-time version metadata

A VersionConfig holds the raw strings stamped into an application at build
time. build() validates them and returns an immutable VersionRecord:

    config = VersionConfig(
        version="1.2.3-2-ga1b2c3d",
        git_hash="1234567890abcdef",
        release="test",
        timestamp="Thu Feb 14 15:04:05 SAST 2019",
    )
    record = build(config)
    record.pre()        # "2-ga1b2c3d"
    record.warnings()   # pre-release warning, then release warning

Construction either succeeds completely or raises a ConstructionError.
Nothing in this module performs I/O or logs.

Author: appv maintainers | 2026-10-17
"""

from dataclasses import dataclass, fields
from datetime import datetime
from typing import Any, Dict, List, Tuple

from semver import Version

from .errors import InvalidSemverError
from .timestamps import format_rfc3339, parse_unix_date
from .versioner import Versioner

# Release tags that do not trigger the release warning (exact match)
PRODUCTION_RELEASES = ("production", "prod")

PRE_RELEASE_WARNING = 'This version is tagged as a pre-release "{}". Please don\'t use in production.'
RELEASE_WARNING = 'This version is tagged as release "{}". Please don\'t use in production.'


@dataclass
class VersionConfig:
    """Raw version strings, as injected by the build."""
    version: str = ""  # semver string
    git_hash: str = ""
    git_branch: str = ""
    git_user: str = ""
    os: str = ""
    arch: str = ""
    compiler: str = ""
    release: str = ""
    timestamp: str = ""  # Unix `date` output

    @classmethod
    def field_names(cls) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "VersionConfig":
        """Create from a mapping of strings; unknown keys are ignored, None becomes ""."""
        values = {}
        for name in cls.field_names():
            value = data.get(name)
            values[name] = "" if value is None else value
        return cls(**values)

    def to_dict(self) -> Dict[str, str]:
        return {name: getattr(self, name) for name in self.field_names()}


def format_identifiers(identifiers: Tuple[str, ...]) -> str:
    """Render pre-release identifiers as a bracketed list, e.g. [rc, 1]."""
    return "[" + ", ".join(identifiers) + "]"


@dataclass(frozen=True)
class VersionRecord(Versioner):
    """
    Immutable, validated version information.

    Instances are produced by build(); all fields are read through the
    accessor methods.
    """
    _semver: Version
    _git_hash: str
    _git_branch: str
    _git_user: str
    _os: str
    _arch: str
    _compiler: str
    _release: str
    _timestamp: datetime
    _warnings: Tuple[str, ...]

    # --- semantic version ---

    def semver(self) -> str:
        return str(self._semver)

    def to_display_string(self) -> str:
        """Text shown wherever the application reports its version."""
        return self.semver()

    def major(self) -> int:
        return self._semver.major

    def minor(self) -> int:
        return self._semver.minor

    def patch(self) -> int:
        return self._semver.patch

    def pre_release(self) -> Tuple[str, ...]:
        """All pre-release identifiers, in order; empty for a normal release."""
        if not self._semver.prerelease:
            return ()
        return tuple(self._semver.prerelease.split("."))

    def pre(self) -> str:
        identifiers = self.pre_release()
        return identifiers[0] if identifiers else ""

    def build_metadata(self) -> str:
        return self._semver.build or ""

    def is_pre_release(self) -> bool:
        return bool(self.pre_release())

    # --- build metadata ---

    def warnings(self) -> Tuple[str, ...]:
        return self._warnings

    def git_hash(self) -> str:
        return self._git_hash

    def git_branch(self) -> str:
        return self._git_branch

    def git_user(self) -> str:
        return self._git_user

    def os(self) -> str:
        return self._os

    def arch(self) -> str:
        return self._arch

    def compiler(self) -> str:
        return self._compiler

    def release(self) -> str:
        return self._release

    def is_production(self) -> bool:
        return self._release in PRODUCTION_RELEASES

    def built_at(self) -> datetime:
        return self._timestamp

    def timestamp(self) -> str:
        """Build time as RFC 3339 text."""
        return format_rfc3339(self._timestamp)

    def to_dict(self) -> Dict[str, Any]:
        """Snapshot of all version information for reporting."""
        return {
            "semver": self.semver(),
            "major": self.major(),
            "minor": self.minor(),
            "patch": self.patch(),
            "pre": self.pre(),
            "git_hash": self.git_hash(),
            "git_branch": self.git_branch(),
            "git_user": self.git_user(),
            "os": self.os(),
            "arch": self.arch(),
            "compiler": self.compiler(),
            "release": self.release(),
            "timestamp": self.timestamp(),
            "warnings": list(self.warnings()),
        }


def _collect_warnings(version: Version, release: str) -> Tuple[str, ...]:
    warnings: List[str] = []

    if version.prerelease:
        identifiers = tuple(version.prerelease.split("."))
        warnings.append(PRE_RELEASE_WARNING.format(format_identifiers(identifiers)))

    if release not in PRODUCTION_RELEASES:
        warnings.append(RELEASE_WARNING.format(release))

    return tuple(warnings)


def build(config: VersionConfig) -> VersionRecord:
    """
    Validate a VersionConfig and build its VersionRecord.

    Args:
        config: Raw version strings

    Returns:
        Fully populated VersionRecord

    Raises:
        InvalidSemverError: If config.version is not a semantic version
        InvalidTimestampError: If config.timestamp is not Unix `date` output
    """
    try:
        version = Version.parse(config.version)
    except (ValueError, TypeError) as e:
        raise InvalidSemverError(config.version, str(e)) from e

    built_at = parse_unix_date(config.timestamp)

    return VersionRecord(
        _semver=version,
        _git_hash=config.git_hash,
        _git_branch=config.git_branch,
        _git_user=config.git_user,
        _os=config.os,
        _arch=config.arch,
        _compiler=config.compiler,
        _release=config.release,
        _timestamp=built_at,
        _warnings=_collect_warnings(version, config.release),
    )
