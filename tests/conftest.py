"""Shared pytest fixtures and configuration for the strace-ebpf test suite.

Guidelines
----------
* No root privileges and no tracefs access in any test.
* Kernel listings are faked through the ``SyscallCatalog`` protocol or
  pointed at a file under ``tmp_path``.
* Core tests must be pure; output is captured by ``RecordingReporter``.
"""

from __future__ import annotations

import io
from typing import TextIO

import pytest

from strace_ebpf.core.dispatcher import OptionDispatcher


class FakeCatalog:
    """In-memory :class:`SyscallCatalog` that records every call."""

    def __init__(self, table_status: int = 1) -> None:
        self.table_status: int = table_status
        self.calls: list[str] = []

    def print_syscall_list(self, stream: TextIO, *, low_level: bool) -> None:
        self.calls.append("low-level-list" if low_level else "list")
        stream.write("__x64_sys_openat\n" if low_level else "openat\n")

    def print_trace_sets(self, stream: TextIO) -> None:
        self.calls.append("trace-sets")
        stream.write("trace=file\n")

    def print_syscalls_table(self, stream: TextIO) -> int:
        self.calls.append("table")
        stream.write("257 openat 4\n")
        return self.table_status


class RecordingReporter:
    """:class:`Reporter` keeping everything in memory."""

    def __init__(self) -> None:
        self._out = io.StringIO()
        self._err = io.StringIO()
        self.infos: list[str] = []
        self.errors: list[str] = []

    @property
    def out(self) -> TextIO:
        return self._out

    @property
    def err(self) -> TextIO:
        return self._err

    def info(self, message: str) -> None:
        self.infos.append(message)

    def error(self, message: str) -> None:
        self.errors.append(message)


@pytest.fixture()
def catalog() -> FakeCatalog:
    return FakeCatalog()


@pytest.fixture()
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture()
def dispatcher(catalog: FakeCatalog, reporter: RecordingReporter) -> OptionDispatcher:
    return OptionDispatcher(catalog, reporter)
