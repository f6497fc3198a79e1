# SPDX-License-Identifier: MIT
"""Validate a platform flag."""

from __future__ import annotations

import click

from ..constants import PLATFORM_FLAGS
from ..flags import platform_flag_is_valid
from ..main import Context, echo_error, echo_info, echo_verbose, pass_context


@click.command()
@click.argument("flag")
@pass_context
def platform(ctx: Context, flag: str) -> None:
    """Check that FLAG names a supported platform.

    Prints the normalized platform name on success.

    \b
    Examples:
        lwc-mobile platform iOS       # prints "ios"
        lwc-mobile platform windows   # exits with status 1
    """
    if not platform_flag_is_valid(flag):
        echo_error(
            f"Invalid platform '{flag}'. Expected one of: {', '.join(PLATFORM_FLAGS)}"
        )
        raise SystemExit(1)

    echo_verbose(ctx, f"Platform flag '{flag}' is valid")
    echo_info(flag.lower())
