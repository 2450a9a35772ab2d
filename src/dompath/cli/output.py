"""Utility functions for cli output."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/dompath/cli/output.py
import argparse
import sys
from typing import Iterable, TextIO

from dompath.exceptions import DependencyError


def check_rich_available() -> bool:
    """Check if Rich library is available."""
    try:
        import rich  # noqa: F401
    except ImportError:
        return False
    return True


def should_use_rich_output(args: argparse.Namespace, stream: TextIO | None = None) -> bool:
    """Determine if Rich output should be used based on TTY and args.

    Rich output is used when ``--rich`` is set and either ``--force-rich`` is
    set or the output stream is a TTY.

    Raises
    ------
    DependencyError
        If ``--rich`` was requested but rich is not installed

    """
    if not getattr(args, "rich", False):
        return False

    if not check_rich_available():
        raise DependencyError(
            converter_name="rich-output",
            missing_packages=[("rich", "")],
            message="Rich output requires the optional 'rich' dependency. Install with: pip install dompath[rich]",
        )

    if getattr(args, "force_rich", False):
        return True

    target = stream or sys.stdout
    isatty = getattr(target, "isatty", None)
    return bool(callable(isatty) and isatty())


def print_rows(
    rows: Iterable[tuple[str, str]],
    headers: tuple[str, str],
    use_rich: bool,
    title: str | None = None,
) -> None:
    """Print two-column results, as a rich table or as the second column only."""
    if not use_rich:
        for _, value in rows:
            print(value)
        return

    from rich.console import Console
    from rich.table import Table

    table = Table(title=title)
    table.add_column(headers[0], style="cyan", no_wrap=True)
    table.add_column(headers[1], style="green", overflow="fold")
    for key, value in rows:
        table.add_row(key, value)
    Console().print(table)
