"""Domain models for strace-ebpf.

All models are **frozen** dataclasses: immutable value objects with no
behaviour beyond data access.  The dispatcher never mutates a
:class:`TraceOptions` in place; each accepted option yields a new value
via :func:`dataclasses.replace`, so the object handed to the caller is
final by construction.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from strace_ebpf.core.formats import OutputFormat, StringArgMode


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class FollowForkMode(enum.Enum):
    """Whether tracing extends into children created by ``fork``."""

    NONE = "none"
    FULL = "full"


# ---------------------------------------------------------------------------
# Configuration object
# ---------------------------------------------------------------------------

DEFAULT_FIELD_SEPARATOR: str = " "
"""Separator used by line-oriented formats when ``-K`` is not given."""


@dataclass(frozen=True, slots=True)
class TraceOptions:
    """Resolved command-line configuration consumed by the tracer."""

    no_progress: bool = False
    """Suppress progress output."""

    timestamp: bool = False
    """Include timestamps in trace output."""

    failed_only: bool = False
    """Report only syscalls that failed."""

    debug: bool = False
    """Verbose internal diagnostics."""

    pid: int | None = None
    """Process to attach to; always ``>= 1`` when set."""

    output_filename: str | None = None
    """Destination for trace output, or ``None`` for the default stream."""

    field_separator: str = DEFAULT_FIELD_SEPARATOR
    """Single-character field separator for line-oriented output."""

    ebpf_src_dir: str | None = None
    """Location of the eBPF source assets."""

    expression: str | None = None
    """Syscall-set selection expression, stored verbatim."""

    output_format_name: str | None = None
    """Raw ``--format`` value as typed by the user."""

    output_format: OutputFormat = OutputFormat.STRACE
    """Format resolved from :attr:`output_format_name`."""

    string_arg_mode: StringArgMode = StringArgMode.FAST
    """How string syscall arguments are rendered."""

    follow_fork: FollowForkMode = FollowForkMode.NONE
    """Fork-following behaviour."""

    separate_logs: bool = False
    """Write one log per traced process (only with ``FollowForkMode.FULL``)."""

    has_command: bool = False
    """``True`` iff argv tokens remain after option scanning."""
