# SPDX-License-Identifier: MIT
"""CLI command implementations."""

from . import check, platform, version

__all__ = ["check", "platform", "version"]
