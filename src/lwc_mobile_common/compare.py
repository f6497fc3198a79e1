# SPDX-License-Identifier: MIT
"""Version comparison helpers accepting strings or Version objects.

Ordering follows :meth:`Version.compare`, which weights components as
``major * 100 + minor * 10 + patch``.
"""

from __future__ import annotations

from typing import Union

from .version import Version, parse_version


def _coerce(version: Union[str, Version]) -> Version:
    return parse_version(version) if isinstance(version, str) else version


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two versions.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 is older than version2
        0 if version1 is the same as version2
        1 if version1 is newer than version2

    Raises:
        ParseError: If either version string is invalid

    Examples:
        >>> compare_versions("13.0", "14.2")
        -1
        >>> compare_versions("13-0-0", "13")
        0
        >>> compare_versions("2.0.0", "1.9.9")
        1
    """
    return _coerce(version1).compare(_coerce(version2))


def version_key(version: Union[str, Version]) -> int:
    """Return a sort key for a version, consistent with compare_versions.

    Examples:
        >>> sorted(["14.0", "13", "13.1"], key=version_key)
        ['13', '13.1', '14.0']
    """
    return _coerce(version).scalar
