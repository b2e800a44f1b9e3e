"""
Exception hierarchy for appv

Construction of a VersionRecord fails in exactly two ways (bad semver,
bad timestamp). Both are raised as ConstructionError subclasses so callers
can catch either the specific failure or the whole family.

Author: appv maintainers | 2026-10-17
"""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Kinds of version record construction failure."""
    INVALID_SEMVER = "invalid_semver"
    INVALID_TIMESTAMP = "invalid_timestamp"


class AppvError(Exception):
    """Base class for all appv errors."""
    pass


class ConfigurationError(AppvError):
    """Raised when a build-info file cannot be read or is malformed."""
    pass


class ConstructionError(AppvError):
    """
    Raised when a VersionRecord cannot be built from its configuration.

    Attributes:
        kind: Which check failed
        value: The offending raw input
        reason: Underlying parser message
    """

    kind: Optional[ErrorKind] = None

    def __init__(self, value: object, reason: str):
        self.value = value
        self.reason = reason
        super().__init__(f"{reason} (got {value!r})")


class InvalidSemverError(ConstructionError):
    """The version string is not a valid semantic version."""
    kind = ErrorKind.INVALID_SEMVER


class InvalidTimestampError(ConstructionError):
    """The build timestamp does not match the expected layout."""
    kind = ErrorKind.INVALID_TIMESTAMP
