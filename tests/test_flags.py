# SPDX-License-Identifier: MIT
"""Unit tests for platform flag helpers."""

import pytest

from lwc_mobile_common import (
    ANDROID_FLAG,
    IOS_FLAG,
    platform_flag_is_android,
    platform_flag_is_ios,
    platform_flag_is_valid,
    resolve_flag,
)


class TestPlatformFlags:
    """Tests for platform flag checks."""

    def test_constants(self):
        assert IOS_FLAG == "ios"
        assert ANDROID_FLAG == "android"

    @pytest.mark.parametrize("value", ["ios", "IOS", "iOS"])
    def test_is_ios(self, value):
        assert platform_flag_is_ios(value) is True

    @pytest.mark.parametrize("value", ["Android", "", None, " ios", "iphone"])
    def test_is_not_ios(self, value):
        assert platform_flag_is_ios(value) is False

    @pytest.mark.parametrize("value", ["android", "ANDROID", "Android"])
    def test_is_android(self, value):
        assert platform_flag_is_android(value) is True

    @pytest.mark.parametrize("value", ["ios", "", None, "droid"])
    def test_is_not_android(self, value):
        assert platform_flag_is_android(value) is False

    def test_is_valid(self):
        assert platform_flag_is_valid("android") is True
        assert platform_flag_is_valid("IOS") is True

    def test_is_not_valid(self):
        assert platform_flag_is_valid("windows") is False
        assert platform_flag_is_valid("") is False
        assert platform_flag_is_valid(None) is False


class TestResolveFlag:
    """Tests for resolve_flag function."""

    def test_empty_uses_default(self):
        assert resolve_flag("", "default") == "default"

    def test_none_uses_default(self):
        assert resolve_flag(None, "default") == "default"

    def test_value_wins(self):
        assert resolve_flag("custom", "default") == "custom"

    def test_non_string_is_coerced(self):
        assert resolve_flag(26, "default") == "26"

    def test_falsy_non_string_uses_default(self):
        assert resolve_flag(0, "default") == "default"
        assert resolve_flag(False, "default") == "default"
