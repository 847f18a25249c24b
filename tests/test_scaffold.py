"""Smoke tests: verify package wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
"""

from __future__ import annotations

import pytest

from strace_ebpf import __version__, exit_codes
from strace_ebpf.exceptions import (
    EnvironmentError,
    InvalidValueError,
    KernelInterfaceError,
    MissingArgumentError,
    OptionError,
    OptionSchemaError,
    StraceEbpfError,
    UnknownOptionError,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            OptionError,
            MissingArgumentError,
            UnknownOptionError,
            InvalidValueError,
            OptionSchemaError,
            KernelInterfaceError,
            EnvironmentError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[StraceEbpfError]
    ) -> None:
        assert issubclass(exc_class, StraceEbpfError)

    @pytest.mark.parametrize(
        "exc_class", [MissingArgumentError, UnknownOptionError, InvalidValueError],
    )
    def test_option_errors(self, exc_class: type[OptionError]) -> None:
        assert issubclass(exc_class, OptionError)

    def test_usage_follows_scan_errors_only(self) -> None:
        assert MissingArgumentError.show_usage is True
        assert UnknownOptionError.show_usage is True
        assert InvalidValueError.show_usage is False

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(StraceEbpfError, Exception)

    def test_hint_is_stored(self) -> None:
        err = StraceEbpfError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        err = StraceEbpfError("boom")
        assert err.hint is None


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2

    @pytest.mark.parametrize(
        ("status", "expected"),
        [(1, exit_codes.SUCCESS), (0, exit_codes.GENERAL_ERROR), (42, 42)],
    )
    def test_from_table_status(self, status: int, expected: int) -> None:
        assert exit_codes.from_table_status(status) == expected
