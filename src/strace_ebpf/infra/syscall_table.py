"""Builtin x86-64 syscall table and the named trace sets.

The table is static reference data: it is what ``--builtin-list``
prints and what ``-e trace=help`` groups into sets.  It is not meant
to be exhaustive; the running kernel's list comes from
:mod:`strace_ebpf.infra.kernel_catalog`.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True, slots=True)
class SyscallEntry:
    """One row of the builtin table."""

    number: int
    name: str
    nargs: int
    sets: frozenset[str]


TRACE_SETS: Mapping[str, str] = MappingProxyType(
    {
        "file": "syscalls taking a file name",
        "desc": "syscalls operating on file descriptors",
        "network": "network related syscalls",
        "process": "process management syscalls",
        "signal": "signal related syscalls",
        "ipc": "System V IPC syscalls",
        "memory": "memory mapping syscalls",
    }
)
"""Set name -> short description, in listing order."""


def _sc(number: int, name: str, nargs: int, *sets: str) -> SyscallEntry:
    return SyscallEntry(number, name, nargs, frozenset(sets))


BUILTIN_SYSCALLS: tuple[SyscallEntry, ...] = (
    _sc(0, "read", 3, "desc"),
    _sc(1, "write", 3, "desc"),
    _sc(2, "open", 3, "file", "desc"),
    _sc(3, "close", 1, "desc"),
    _sc(4, "stat", 2, "file"),
    _sc(5, "fstat", 2, "desc"),
    _sc(6, "lstat", 2, "file"),
    _sc(7, "poll", 3, "desc"),
    _sc(8, "lseek", 3, "desc"),
    _sc(9, "mmap", 6, "desc", "memory"),
    _sc(10, "mprotect", 3, "memory"),
    _sc(11, "munmap", 2, "memory"),
    _sc(12, "brk", 1, "memory"),
    _sc(13, "rt_sigaction", 4, "signal"),
    _sc(14, "rt_sigprocmask", 4, "signal"),
    _sc(15, "rt_sigreturn", 0, "signal"),
    _sc(16, "ioctl", 3, "desc"),
    _sc(17, "pread64", 4, "desc"),
    _sc(18, "pwrite64", 4, "desc"),
    _sc(19, "readv", 3, "desc"),
    _sc(20, "writev", 3, "desc"),
    _sc(21, "access", 2, "file"),
    _sc(22, "pipe", 1, "desc"),
    _sc(23, "select", 5, "desc"),
    _sc(25, "mremap", 5, "memory"),
    _sc(28, "madvise", 3, "memory"),
    _sc(29, "shmget", 3, "ipc"),
    _sc(30, "shmat", 3, "ipc", "memory"),
    _sc(31, "shmctl", 3, "ipc"),
    _sc(32, "dup", 1, "desc"),
    _sc(33, "dup2", 2, "desc"),
    _sc(35, "nanosleep", 2),
    _sc(39, "getpid", 0),
    _sc(40, "sendfile", 4, "desc", "network"),
    _sc(41, "socket", 3, "network"),
    _sc(42, "connect", 3, "network", "desc"),
    _sc(43, "accept", 3, "network", "desc"),
    _sc(44, "sendto", 6, "network", "desc"),
    _sc(45, "recvfrom", 6, "network", "desc"),
    _sc(46, "sendmsg", 3, "network", "desc"),
    _sc(47, "recvmsg", 3, "network", "desc"),
    _sc(48, "shutdown", 2, "network", "desc"),
    _sc(49, "bind", 3, "network", "desc"),
    _sc(50, "listen", 2, "network", "desc"),
    _sc(56, "clone", 5, "process"),
    _sc(57, "fork", 0, "process"),
    _sc(58, "vfork", 0, "process"),
    _sc(59, "execve", 3, "file", "process"),
    _sc(60, "exit", 1, "process"),
    _sc(61, "wait4", 4, "process"),
    _sc(62, "kill", 2, "signal"),
    _sc(64, "semget", 3, "ipc"),
    _sc(65, "semop", 3, "ipc"),
    _sc(66, "semctl", 4, "ipc"),
    _sc(67, "shmdt", 1, "ipc", "memory"),
    _sc(68, "msgget", 2, "ipc"),
    _sc(69, "msgsnd", 4, "ipc"),
    _sc(70, "msgrcv", 5, "ipc"),
    _sc(71, "msgctl", 3, "ipc"),
    _sc(72, "fcntl", 3, "desc"),
    _sc(74, "fsync", 1, "desc"),
    _sc(76, "truncate", 2, "file"),
    _sc(77, "ftruncate", 2, "desc"),
    _sc(78, "getdents", 3, "desc"),
    _sc(79, "getcwd", 2, "file"),
    _sc(80, "chdir", 1, "file"),
    _sc(82, "rename", 2, "file"),
    _sc(83, "mkdir", 2, "file"),
    _sc(84, "rmdir", 1, "file"),
    _sc(86, "link", 2, "file"),
    _sc(87, "unlink", 1, "file"),
    _sc(88, "symlink", 2, "file"),
    _sc(89, "readlink", 3, "file"),
    _sc(90, "chmod", 2, "file"),
    _sc(92, "chown", 3, "file"),
    _sc(130, "rt_sigsuspend", 2, "signal"),
    _sc(131, "sigaltstack", 2, "signal"),
    _sc(200, "tkill", 2, "signal"),
    _sc(217, "getdents64", 3, "desc"),
    _sc(231, "exit_group", 1, "process"),
    _sc(234, "tgkill", 3, "signal"),
    _sc(257, "openat", 4, "file", "desc"),
    _sc(258, "mkdirat", 3, "file", "desc"),
    _sc(263, "unlinkat", 3, "file", "desc"),
    _sc(288, "accept4", 4, "network", "desc"),
    _sc(292, "dup3", 3, "desc"),
    _sc(293, "pipe2", 2, "desc"),
    _sc(322, "execveat", 5, "file", "desc", "process"),
    _sc(435, "clone3", 2, "process"),
)


def syscalls_in_set(set_name: str) -> tuple[str, ...]:
    """Return the names of builtin syscalls belonging to *set_name*.

    Raises
    ------
    KeyError
        If *set_name* is not a known trace set.
    """
    if set_name not in TRACE_SETS:
        raise KeyError(set_name)
    return tuple(entry.name for entry in BUILTIN_SYSCALLS if set_name in entry.sets)
