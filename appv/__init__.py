"""
appv - Build-time version metadata for Python applications

Turns the version strings stamped in at build time (semantic version, git
hash/branch/user, OS/arch/compiler, release tag, build timestamp) into a
validated, read-only VersionRecord with production-readiness warnings.

Author: appv maintainers | 2026-10-17
"""

__version__ = "0.1.0"

from .errors import (
    AppvError,
    ConfigurationError,
    ConstructionError,
    ErrorKind,
    InvalidSemverError,
    InvalidTimestampError,
)
from .timestamps import format_rfc3339, parse_rfc3339, parse_unix_date
from .versioner import Versioner
from .record import (
    PRODUCTION_RELEASES,
    VersionConfig,
    VersionRecord,
    build,
)
from .config import (
    find_build_info,
    load_version_config,
    load_version_record,
    save_version_config,
)

__all__ = [
    "__version__",
    # Errors
    "AppvError",
    "ConfigurationError",
    "ConstructionError",
    "ErrorKind",
    "InvalidSemverError",
    "InvalidTimestampError",
    # Timestamps
    "format_rfc3339",
    "parse_rfc3339",
    "parse_unix_date",
    # Records
    "Versioner",
    "PRODUCTION_RELEASES",
    "VersionConfig",
    "VersionRecord",
    "build",
    # Build info
    "find_build_info",
    "load_version_config",
    "load_version_record",
    "save_version_config",
]
