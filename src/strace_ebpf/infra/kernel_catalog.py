"""Infrastructure: syscall listings for the running kernel.

:class:`KernelSyscallCatalog` is the default
:class:`~strace_ebpf.core.protocols.SyscallCatalog`.  Kernel listings
come from tracefs ``available_filter_functions``; the builtin table and
trace sets come from :mod:`strace_ebpf.infra.syscall_table`.

Rules
-----
* No imports from ``cli``.
* ``OSError`` never escapes: it is re-raised as
  :class:`~strace_ebpf.exceptions.KernelInterfaceError`.
* Output goes only to the stream the caller passes in.
"""

from __future__ import annotations

from pathlib import Path
from typing import TextIO

from strace_ebpf.exceptions import KernelInterfaceError
from strace_ebpf.infra.syscall_table import BUILTIN_SYSCALLS, TRACE_SETS, SyscallEntry, syscalls_in_set

TRACEFS_MOUNTS: tuple[Path, ...] = (
    Path("/sys/kernel/tracing"),
    Path("/sys/kernel/debug/tracing"),
)
"""tracefs mount points, preferred first."""

FILTER_FUNCTIONS_FILE = "available_filter_functions"
"""tracefs listing of every function kprobes may attach to."""

SYSCALL_PREFIXES: tuple[str, ...] = (
    "__x64_sys_",
    "__ia32_sys_",
    "__arm64_sys_",
    "__se_sys_",
    "SyS_",
    "sys_",
)
"""Prefixes marking syscall entry points, longest first."""


def syscall_name(function: str) -> str | None:
    """Return the syscall behind kernel *function*, or ``None``.

    ``__x64_sys_openat`` and ``SyS_openat`` both yield ``"openat"``.
    """
    for prefix in SYSCALL_PREFIXES:
        if function.startswith(prefix):
            name = function[len(prefix):]
            return name or None
    return None


def find_filter_functions(mounts: tuple[Path, ...] = TRACEFS_MOUNTS) -> Path:
    """Return the first existing ``available_filter_functions`` under *mounts*.

    Falls back to the preferred mount so the read error names it.
    """
    for mount in mounts:
        candidate = mount / FILTER_FUNCTIONS_FILE
        if candidate.exists():
            return candidate
    return mounts[0] / FILTER_FUNCTIONS_FILE


class KernelSyscallCatalog:
    """Concrete :class:`SyscallCatalog` backed by tracefs and the builtin table.

    Parameters
    ----------
    filter_functions_path:
        Location of ``available_filter_functions``.  Defaults to the
        first one found by :func:`find_filter_functions`.
    table:
        Builtin syscall table to print.
    """

    def __init__(
        self,
        filter_functions_path: Path | None = None,
        table: tuple[SyscallEntry, ...] = BUILTIN_SYSCALLS,
    ) -> None:
        if filter_functions_path is None:
            filter_functions_path = find_filter_functions()
        self._path: Path = filter_functions_path
        self._table: tuple[SyscallEntry, ...] = table

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def print_syscall_list(self, stream: TextIO, *, low_level: bool) -> None:
        """Write kernel functions (``low_level``) or syscall names to *stream*."""
        functions = self._read_functions()

        if low_level:
            for function in functions:
                stream.write(f"{function}\n")
            return

        names = {name for name in map(syscall_name, functions) if name is not None}
        for name in sorted(names):
            stream.write(f"{name}\n")

    def print_trace_sets(self, stream: TextIO) -> None:
        """Write each trace set with its description and members."""
        stream.write("List of supported syscall sets:\n")
        for set_name, description in TRACE_SETS.items():
            members = ", ".join(syscalls_in_set(set_name))
            stream.write(f"  trace={set_name:<8} {description}\n")
            if members:
                stream.write(f"      {members}\n")

    def print_syscalls_table(self, stream: TextIO) -> int:
        """Write the builtin table; return 1 when written, 0 when empty."""
        if not self._table:
            return 0
        stream.write(f"{'NR':>4}  {'NAME':<20} NARGS\n")
        for entry in self._table:
            stream.write(f"{entry.number:>4}  {entry.name:<20} {entry.nargs}\n")
        return 1

    # ------------------------------------------------------------------
    # tracefs access
    # ------------------------------------------------------------------

    def _read_functions(self) -> list[str]:
        """Return the function names listed in tracefs, module tags stripped."""
        try:
            text = self._path.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            raise KernelInterfaceError(
                f"cannot read {self._path}: {exc.strerror or exc}",
                hint=(
                    "Run as root with tracefs mounted "
                    f"(mount -t tracefs nodev {TRACEFS_MOUNTS[0]})."
                ),
            ) from exc

        functions: list[str] = []
        for line in text.splitlines():
            # Lines look like "vfs_read" or "ext4_file_open [ext4]".
            field = line.split(maxsplit=1)[0] if line.strip() else ""
            if field:
                functions.append(field)
        return functions
