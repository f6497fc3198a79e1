# SPDX-License-Identifier: MIT
"""Helpers for interpreting command-line flag values."""

from __future__ import annotations

from typing import Any, Optional

from .constants import ANDROID_FLAG, IOS_FLAG


def _flag_matches(value: Optional[str], expected: str) -> bool:
    if not value:
        return False
    return value.lower() == expected


def platform_flag_is_ios(value: Optional[str]) -> bool:
    """Check if a platform flag targets iOS (case-insensitive)."""
    return _flag_matches(value, IOS_FLAG)


def platform_flag_is_android(value: Optional[str]) -> bool:
    """Check if a platform flag targets Android (case-insensitive)."""
    return _flag_matches(value, ANDROID_FLAG)


def platform_flag_is_valid(value: Optional[str]) -> bool:
    """Check if a platform flag targets either iOS or Android."""
    return platform_flag_is_ios(value) or platform_flag_is_android(value)


def resolve_flag(flag: Any, default_value: str) -> str:
    """Resolve a flag value, falling back to a default.

    Args:
        flag: The raw flag value, of any type
        default_value: Value to use when the flag is unset or empty

    Returns:
        ``str(flag)`` if the flag is truthy and its string form is
        non-empty, otherwise ``default_value``

    Examples:
        >>> resolve_flag("", "ios")
        'ios'
        >>> resolve_flag("android", "ios")
        'android'
        >>> resolve_flag(None, "ios")
        'ios'
    """
    if not flag:
        return default_value
    resolved = str(flag)
    return resolved if resolved else default_value
