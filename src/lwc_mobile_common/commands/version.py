# SPDX-License-Identifier: MIT
"""Parse and compare version strings."""

from __future__ import annotations

import click

from ..compare import compare_versions
from ..main import Context, echo_error, echo_info, echo_verbose, pass_context
from ..version import ParseError, parse_version


@click.group()
def version() -> None:
    """Parse and compare version numbers."""


@version.command("parse")
@click.argument("value")
@pass_context
def parse(ctx: Context, value: str) -> None:
    """Print VALUE normalized to MAJOR.MINOR.PATCH.

    \b
    Examples:
        lwc-mobile version parse 13-0-4   # prints "13.0.4"
        lwc-mobile version parse 13       # prints "13.0.0"
    """
    try:
        parsed = parse_version(value)
    except ParseError as e:
        echo_error(str(e))
        raise SystemExit(1)

    echo_verbose(ctx, f"major={parsed.major} minor={parsed.minor} patch={parsed.patch}")
    echo_info(str(parsed))


@version.command("compare")
@click.argument("first")
@click.argument("second")
@pass_context
def compare(ctx: Context, first: str, second: str) -> None:
    """Compare FIRST against SECOND.

    Prints -1 if FIRST is older, 0 if both are the same and 1 if FIRST is
    newer.
    """
    try:
        left, right = parse_version(first), parse_version(second)
    except ParseError as e:
        echo_error(str(e))
        raise SystemExit(1)

    echo_verbose(ctx, f"Comparing {left} with {right}")
    echo_info(str(compare_versions(left, right)))
