"""Infrastructure layer: kernel and reference-data integration.

This layer wraps all interaction with tracefs and the builtin syscall
table.  Every raw ``OSError`` must be caught here and re-raised as a
:class:`~strace_ebpf.exceptions.StraceEbpfError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing rendering (no Rich); output only to caller-supplied streams.
* Must expose clean, typed interfaces consumed by the core layer.
"""

from strace_ebpf.infra.kernel_catalog import KernelSyscallCatalog, syscall_name
from strace_ebpf.infra.syscall_table import BUILTIN_SYSCALLS, TRACE_SETS, SyscallEntry, syscalls_in_set

__all__: list[str] = [
    "BUILTIN_SYSCALLS",
    "KernelSyscallCatalog",
    "SyscallEntry",
    "TRACE_SETS",
    "syscall_name",
    "syscalls_in_set",
]
