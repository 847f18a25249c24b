"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure and CLI adapters must
satisfy.  Core code depends ONLY on these protocols, never on concrete
implementations, so the parser can be driven from tests with fakes.
"""

from __future__ import annotations

from typing import Protocol, TextIO


class SyscallCatalog(Protocol):
    """Contract for the syscall enumeration and printing routines."""

    def print_syscall_list(self, stream: TextIO, *, low_level: bool) -> None:
        """Write the traceable syscalls of the running kernel to *stream*.

        With *low_level* set, every traceable kernel function is listed
        without filtering down to syscall entry points.

        Raises
        ------
        KernelInterfaceError
            When the kernel interface cannot be read.
        """
        ...  # pragma: no cover

    def print_trace_sets(self, stream: TextIO) -> None:
        """Write the named syscall sets accepted by ``-e trace=<set>``."""
        ...  # pragma: no cover

    def print_syscalls_table(self, stream: TextIO) -> int:
        """Write the builtin syscall table and return a status.

        ``1`` means the table was written, ``0`` means nothing was
        written; any other value is an exit status in its own right.
        """
        ...  # pragma: no cover


class Reporter(Protocol):
    """Destination for diagnostics and informational text."""

    @property
    def out(self) -> TextIO:
        """Stream for requested output (help, listings)."""
        ...  # pragma: no cover

    @property
    def err(self) -> TextIO:
        """Stream for diagnostics and usage after an error."""
        ...  # pragma: no cover

    def info(self, message: str) -> None:
        """Report an informational message."""
        ...  # pragma: no cover

    def error(self, message: str) -> None:
        """Report an error message."""
        ...  # pragma: no cover
