"""Exit-code constants shared by every layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.  The
core parser reports these through :class:`~strace_ebpf.core.outcome.Terminate`;
only the CLI layer hands them to the operating system.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit: normal completion or an informational request."""

GENERAL_ERROR: int = 1
"""Malformed invocation or a known StraceEbpfError was reported."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""


def from_table_status(status: int) -> int:
    """Map the builtin syscall-table printer's status to an exit code.

    The printer reports ``1`` when it wrote the table and ``0`` when it
    had nothing to write; any other value is passed through verbatim.
    """
    if status == 1:
        return SUCCESS
    if status == 0:
        return GENERAL_ERROR
    return status
