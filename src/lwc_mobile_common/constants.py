# SPDX-License-Identifier: MIT
"""Shared constants for platform flags and configuration defaults."""

IOS_FLAG = "ios"
ANDROID_FLAG = "android"

PLATFORM_FLAGS = (IOS_FLAG, ANDROID_FLAG)

# Table name under [tool] in pyproject.toml
CONFIG_TABLE = "lwc-mobile"

DEFAULT_MINIMUM_IOS_VERSION = "13.0"
DEFAULT_MINIMUM_ANDROID_VERSION = "26"
