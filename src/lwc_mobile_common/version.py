# SPDX-License-Identifier: MIT
"""Version parsing and comparison for mobile platform requirements.

Supports MAJOR[.MINOR[.PATCH]] strings where either ``.`` or ``-`` may be used
as the separator (``13.0.4`` and ``13-0-4`` are equivalent). Missing trailing
components default to zero and components past the third are ignored.

Comparison folds each version into a single weighted scalar
(``major * 100 + minor * 10 + patch``). Minor or patch components of 10 or
more spill into the next weight, so ``1.10.0`` compares equal to ``2.0.0``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# Characters accepted anywhere in a version string (after trimming)
VERSION_CHARS_PATTERN = re.compile(r"[0-9.\-]*")

# Weights applied to major, minor and patch when computing the scalar
_COMPONENT_WEIGHTS = (100, 10, 1)


class ParseError(Exception):
    """Raised when a string cannot be parsed as a version."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid version string: {version}"
        super().__init__(self.message)


@dataclass(frozen=True, slots=True)
class Version:
    """A three-component version number.

    Attributes:
        major: Major version number
        minor: Minor version number
        patch: Patch version number
    """

    major: int
    minor: int
    patch: int

    def __str__(self) -> str:
        """Return the version as ``major.minor.patch``."""
        return f"{self.major}.{self.minor}.{self.patch}"

    @classmethod
    def parse(cls, version_string: str) -> "Version":
        """Parse a version string. See :func:`parse_version`."""
        return parse_version(version_string)

    @property
    def scalar(self) -> int:
        """Return the weighted value used for ordering."""
        return sum(
            weight * value
            for weight, value in zip(_COMPONENT_WEIGHTS, (self.major, self.minor, self.patch))
        )

    def compare(self, other: Version) -> int:
        """Compare this version against another.

        Returns:
            -1 if this version is older than ``other``
            0 if both versions are the same
            1 if this version is newer than ``other``
        """
        mine = self.scalar
        theirs = other.scalar
        if mine == theirs:
            return 0
        return -1 if mine < theirs else 1

    def same(self, other: Version) -> bool:
        """Return True if ``other`` compares equal to this version."""
        return self.compare(other) == 0

    def same_or_newer(self, other: Version) -> bool:
        """Return True if this version is the same as or newer than ``other``."""
        return self.compare(other) > -1


def parse_version(version_string: str) -> Version:
    """Parse a version string into a Version object.

    Args:
        version_string: A string such as ``"13"``, ``"13.0"``, ``"13.0.4"`` or
            ``"13-0-4"``. Surrounding whitespace is ignored.

    Returns:
        A Version object with parsed components

    Raises:
        ParseError: If the string contains characters other than digits,
            ``.`` and ``-``, or if one of the first three components is empty

    Examples:
        >>> parse_version("13.0.4")
        Version(major=13, minor=0, patch=4)

        >>> parse_version("13")
        Version(major=13, minor=0, patch=0)

        >>> parse_version(" 13-0-4 ")
        Version(major=13, minor=0, patch=4)
    """
    if not isinstance(version_string, str):
        raise ParseError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )

    normalized = version_string.strip().lower()
    if not VERSION_CHARS_PATTERN.fullmatch(normalized):
        raise ParseError(version_string)

    parts = normalized.replace("-", ".").split(".")

    components: list[int] = []
    for part in parts[:3]:
        try:
            components.append(int(part, 10))
        except ValueError as e:
            raise ParseError(version_string) from e

    # Missing trailing components default to zero
    components.extend([0] * (3 - len(components)))

    major, minor, patch = components
    return Version(major=major, minor=minor, patch=patch)


def is_valid_version(version_string: str) -> bool:
    """Check if a string can be parsed as a version.

    Examples:
        >>> is_valid_version("13.0")
        True
        >>> is_valid_version("13.0.")
        False
        >>> is_valid_version("v13")
        False
    """
    try:
        parse_version(version_string)
    except ParseError:
        return False
    return True
