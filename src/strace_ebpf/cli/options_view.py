"""Rendering of the resolved configuration for ``--debug`` runs.

Shows every :class:`~strace_ebpf.core.models.TraceOptions` field in a
Rich table, or a plain two-column listing when Rich is not installed.
No decisions are made here; it purely displays what the parser produced.
"""

from __future__ import annotations

import enum
import sys
from collections.abc import Sequence
from dataclasses import fields

from strace_ebpf.cli.console import console, escape, rich_available
from strace_ebpf.core.models import FollowForkMode, TraceOptions


# ---------------------------------------------------------------------------
# Row collection
# ---------------------------------------------------------------------------

def _format_value(value: object) -> str:
    """Render one field value for display."""
    if value is None:
        return "-"
    if isinstance(value, enum.Enum):
        return str(value.value)
    if isinstance(value, str):
        return repr(value)
    return str(value)


def option_rows(options: TraceOptions) -> list[tuple[str, str]]:
    """Return ``(field, value)`` pairs in declaration order."""
    return [(field.name, _format_value(getattr(options, field.name))) for field in fields(options)]


def describe_target(options: TraceOptions, command: Sequence[str]) -> str:
    """One-line summary of what would be traced."""
    if command:
        target = "command: " + " ".join(command)
    else:
        target = f"pid {options.pid}"
    if options.follow_fork is FollowForkMode.FULL:
        target += " (following forks)"
    return target


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

def _print_plain_options_table(rows: list[tuple[str, str]]) -> None:
    """Render the option table without Rich."""
    print("\nResolved options", file=sys.stderr)
    print("=" * 48, file=sys.stderr)
    for name, value in rows:
        print(f"{name:<20} {value}", file=sys.stderr)
    print(file=sys.stderr)


def render_options(options: TraceOptions) -> None:
    """Display every resolved option on stderr."""
    rows = option_rows(options)

    if not rich_available():
        _print_plain_options_table(rows)
        return

    from rich.table import Table

    table = Table(
        title="Resolved options",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Option", style="bold", min_width=18)
    table.add_column("Value", min_width=20)
    for name, value in rows:
        table.add_row(name, escape(value))

    console.print()
    console.print(table)
    console.print()
