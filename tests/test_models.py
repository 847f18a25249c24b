"""Tests for domain models (core/models.py, core/outcome.py).

All models are frozen dataclasses; these tests verify defaults,
immutability and equality semantics.
"""

from __future__ import annotations

from dataclasses import replace

import pytest

from strace_ebpf import exit_codes
from strace_ebpf.core.formats import OutputFormat, StringArgMode
from strace_ebpf.core.models import DEFAULT_FIELD_SEPARATOR, FollowForkMode, TraceOptions
from strace_ebpf.core.outcome import Continue, Terminate
from strace_ebpf.exceptions import UnknownOptionError


# ---------------------------------------------------------------------------
# TraceOptions
# ---------------------------------------------------------------------------

class TestTraceOptions:
    def test_defaults(self) -> None:
        options = TraceOptions()
        assert options.no_progress is False
        assert options.timestamp is False
        assert options.failed_only is False
        assert options.debug is False
        assert options.pid is None
        assert options.output_filename is None
        assert options.field_separator == DEFAULT_FIELD_SEPARATOR
        assert options.ebpf_src_dir is None
        assert options.expression is None
        assert options.output_format_name is None
        assert options.output_format is OutputFormat.STRACE
        assert options.string_arg_mode is StringArgMode.FAST
        assert options.follow_fork is FollowForkMode.NONE
        assert options.separate_logs is False
        assert options.has_command is False

    def test_frozen(self) -> None:
        options = TraceOptions()
        with pytest.raises(AttributeError):
            options.pid = 1  # type: ignore[misc]

    def test_replace_leaves_original_untouched(self) -> None:
        original = TraceOptions()
        updated = replace(original, pid=5)
        assert original.pid is None
        assert updated.pid == 5

    def test_equality(self) -> None:
        assert TraceOptions(debug=True) == TraceOptions(debug=True)
        assert TraceOptions(debug=True) != TraceOptions()


# ---------------------------------------------------------------------------
# Outcomes
# ---------------------------------------------------------------------------

class TestOutcome:
    def test_continue_fields(self) -> None:
        outcome = Continue(TraceOptions(), 3)
        assert outcome.command_index == 3

    def test_terminate_success(self) -> None:
        outcome = Terminate(exit_codes.SUCCESS)
        assert outcome.error is None
        assert outcome.options is None

    def test_terminate_failure(self) -> None:
        outcome = Terminate(exit_codes.GENERAL_ERROR, error=UnknownOptionError("x"))
        assert isinstance(outcome.error, UnknownOptionError)

    def test_frozen(self) -> None:
        outcome = Terminate(exit_codes.SUCCESS)
        with pytest.raises(AttributeError):
            outcome.status = 1  # type: ignore[misc]
