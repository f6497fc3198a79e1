# SPDX-License-Identifier: MIT
"""Shared helpers for mobile tooling commands.

This package provides container filtering helpers, iOS/Android platform flag
interpretation, and a three-component version type with parsing and
comparison.

Example:
    >>> from lwc_mobile_common import Version, platform_flag_is_ios
    >>>
    >>> Version.parse("13-0-4")
    Version(major=13, minor=0, patch=4)
    >>> Version.parse("2.0.0").same_or_newer(Version.parse("1.9.9"))
    True
    >>> platform_flag_is_ios("iOS")
    True
"""

__version__ = "0.1.0"

from .constants import (
    ANDROID_FLAG,
    IOS_FLAG,
    PLATFORM_FLAGS,
)
from .filtering import (
    filter_mapping,
    filter_set,
)
from .flags import (
    platform_flag_is_android,
    platform_flag_is_ios,
    platform_flag_is_valid,
    resolve_flag,
)
from .version import (
    ParseError,
    Version,
    is_valid_version,
    parse_version,
)
from .compare import (
    compare_versions,
    version_key,
)

__all__ = [
    # Constants
    "ANDROID_FLAG",
    "IOS_FLAG",
    "PLATFORM_FLAGS",
    # Filtering
    "filter_mapping",
    "filter_set",
    # Flags
    "platform_flag_is_android",
    "platform_flag_is_ios",
    "platform_flag_is_valid",
    "resolve_flag",
    # Versions
    "ParseError",
    "Version",
    "is_valid_version",
    "parse_version",
    "compare_versions",
    "version_key",
]
