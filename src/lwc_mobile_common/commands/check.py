# SPDX-License-Identifier: MIT
"""Check a platform version against the configured minimum."""

from __future__ import annotations

from typing import Optional

import click

from ..constants import PLATFORM_FLAGS
from ..flags import platform_flag_is_valid, resolve_flag
from ..main import (
    Context,
    echo_error,
    echo_success,
    echo_verbose,
    echo_warning,
    pass_context,
)
from ..version import ParseError, parse_version


@click.command()
@click.option(
    "--platform",
    "-p",
    "platform_flag",
    help="Target platform (ios or android). Defaults to [tool.lwc-mobile].default_platform.",
)
@click.option(
    "--version",
    "-V",
    "version_string",
    required=True,
    help="Platform version to check, e.g. 14.2 or 28.",
)
@pass_context
def check(ctx: Context, platform_flag: Optional[str], version_string: str) -> None:
    """Check that a platform version meets the configured minimum.

    \b
    Examples:
        lwc-mobile check --platform ios --version 14.2
        lwc-mobile check -p android -V 26
        lwc-mobile -C path/to/project check -V 15
    """
    config = ctx.load_config()
    echo_verbose(ctx, f"Using configuration from {config.project_dir}")

    target = resolve_flag(platform_flag, config.default_platform)
    if not target:
        echo_error(
            "No platform given. Pass --platform or set default_platform in [tool.lwc-mobile]"
        )
        raise SystemExit(1)

    if not platform_flag_is_valid(target):
        echo_error(f"Invalid platform '{target}'. Expected one of: {', '.join(PLATFORM_FLAGS)}")
        raise SystemExit(1)

    try:
        actual = parse_version(version_string)
    except ParseError as e:
        echo_error(str(e))
        raise SystemExit(1)

    minimum = config.minimum_version(target)
    echo_verbose(ctx, f"Minimum {target.lower()} version: {minimum}")

    if minimum.minor >= 10 or minimum.patch >= 10 or actual.minor >= 10 or actual.patch >= 10:
        echo_warning("Minor or patch components of 10 or more may compare incorrectly")

    if not actual.same_or_newer(minimum):
        echo_error(f"{target.lower()} {actual} is older than the minimum supported {minimum}")
        raise SystemExit(1)

    echo_success(f"{target.lower()} {actual} meets the minimum supported {minimum}")
