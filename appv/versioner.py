"""
Versioner - read-only version accessor protocol

Display and reporting code should depend on this interface rather than on
VersionRecord itself.

Author: appv maintainers | 2026-10-17
"""

from abc import ABC, abstractmethod
from typing import Tuple


class Versioner(ABC):
    """Abstract read accessors for application version information."""

    @abstractmethod
    def semver(self) -> str:
        """Complete semantic version number as a string."""
        ...

    @abstractmethod
    def major(self) -> int:
        """Major version number."""
        ...

    @abstractmethod
    def minor(self) -> int:
        """Minor version number."""
        ...

    @abstractmethod
    def patch(self) -> int:
        """Patch version number."""
        ...

    @abstractmethod
    def pre(self) -> str:
        """First pre-release identifier, or "" for a normal release."""
        ...

    @abstractmethod
    def warnings(self) -> Tuple[str, ...]:
        """Advisory warnings, in detection order."""
        ...
