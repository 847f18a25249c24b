"""Action dispatcher: applies scanned options to the configuration.

The dispatcher drives :func:`~strace_ebpf.core.scanner.scan_arguments`
and, for each event, either produces the next :class:`TraceOptions`,
serves an informational request, or stops with an error.  It never
exits the process: every path ends in a
:class:`~strace_ebpf.core.outcome.Continue` or
:class:`~strace_ebpf.core.outcome.Terminate` returned to the caller.

Guarantees
----------
* Validation is local to one option occurrence; a later occurrence of
  the same option overwrites the earlier one.
* Reserved values (``help``, ``list``, ``trace=help``, ``trace=list``)
  are matched case-insensitively against explicit tables before a value
  is stored.
* Only :class:`~strace_ebpf.exceptions.OptionError` is converted into a
  failed outcome; other errors propagate to the CLI boundary.
"""

from __future__ import annotations

import enum
import re
from collections.abc import Callable, Mapping, Sequence
from dataclasses import replace
from types import MappingProxyType

from strace_ebpf import exit_codes
from strace_ebpf.core.formats import (
    OutputFormat,
    StringArgMode,
    resolve_output_format,
    resolve_string_arg_mode,
    supported_format_names,
)
from strace_ebpf.core.models import FollowForkMode, TraceOptions
from strace_ebpf.core.outcome import Continue, ParseOutcome, Terminate
from strace_ebpf.core.protocols import Reporter, SyscallCatalog
from strace_ebpf.core.scanner import End, MissingValue, Unrecognized, scan_arguments
from strace_ebpf.core.schema import DEFAULT_SCHEMA, Action, OptionSchema
from strace_ebpf.core.usage import PROG, render_usage
from strace_ebpf.exceptions import (
    InvalidValueError,
    MissingArgumentError,
    OptionError,
    UnknownOptionError,
)


# ---------------------------------------------------------------------------
# Reserved values
# ---------------------------------------------------------------------------

class InfoTopic(enum.Enum):
    """Informational listing requested through an option value."""

    EXPRESSIONS = "expressions"
    TRACE_SETS = "trace-sets"
    FORMATS = "formats"


RESERVED_EXPRESSIONS: Mapping[str, InfoTopic] = MappingProxyType(
    {
        "help": InfoTopic.EXPRESSIONS,
        "list": InfoTopic.EXPRESSIONS,
        "trace=help": InfoTopic.TRACE_SETS,
        "trace=list": InfoTopic.TRACE_SETS,
    }
)
"""``--expr`` sentinels, keyed by their lower-case spelling."""

RESERVED_FORMATS: Mapping[str, InfoTopic] = MappingProxyType(
    {
        "help": InfoTopic.FORMATS,
        "list": InfoTopic.FORMATS,
    }
)
"""``--format`` sentinels, keyed by their lower-case spelling."""


def reserved_topic(value: str, table: Mapping[str, InfoTopic]) -> InfoTopic | None:
    """Return the topic *value* requests from *table*, ignoring case."""
    return table.get(value.lower())


# ---------------------------------------------------------------------------
# Dispatcher
# ---------------------------------------------------------------------------

_DECIMAL = re.compile(r"[+-]?[0-9]+", re.ASCII)

_Step = TraceOptions | Terminate
_Handler = Callable[[TraceOptions, str | None], _Step]


class OptionDispatcher:
    """Resolve an argument vector into a :class:`ParseOutcome`.

    Parameters
    ----------
    catalog:
        Syscall listing routines used by the informational options.
    reporter:
        Destination for help, listings and diagnostics.
    schema:
        Option table to scan with; :data:`DEFAULT_SCHEMA` by default.
    format_resolver, mode_resolver:
        Lookups turning ``--format`` and ``--string-args`` values into
        enums.  They signal unknown names with ``InvalidValueError``.
    """

    def __init__(
        self,
        catalog: SyscallCatalog,
        reporter: Reporter,
        *,
        schema: OptionSchema = DEFAULT_SCHEMA,
        format_resolver: Callable[[str], OutputFormat] = resolve_output_format,
        mode_resolver: Callable[[str], StringArgMode] = resolve_string_arg_mode,
        prog: str = PROG,
    ) -> None:
        self._catalog: SyscallCatalog = catalog
        self._reporter: Reporter = reporter
        self._schema: OptionSchema = schema
        self._resolve_format = format_resolver
        self._resolve_mode = mode_resolver
        self._usage: str = render_usage(schema, prog)
        self._handlers: Mapping[Action, _Handler] = {
            Action.NO_PROGRESS: self._on_no_progress,
            Action.TIMESTAMP: self._on_timestamp,
            Action.FAILED_ONLY: self._on_failed_only,
            Action.HELP: self._on_help,
            Action.DEBUG: self._on_debug,
            Action.PID: self._on_pid,
            Action.OUTPUT_FILENAME: self._on_output_filename,
            Action.FIELD_SEPARATOR: self._on_field_separator,
            Action.SOURCE_DIRECTORY: self._on_source_directory,
            Action.EXPR: self._on_expr,
            Action.FORMAT: self._on_format,
            Action.STRING_ARG_MODE: self._on_string_arg_mode,
            Action.LIST_SYSCALLS: self._on_list_syscalls,
            Action.LIST_LOW_LEVEL_SYSCALLS: self._on_list_low_level_syscalls,
            Action.LIST_BUILTIN_SYSCALLS: self._on_list_builtin_syscalls,
            Action.FOLLOW_FORK: self._on_follow_fork,
        }

    @property
    def usage(self) -> str:
        return self._usage

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def parse(self, argv: Sequence[str]) -> ParseOutcome:
        """Scan *argv* (program name excluded) and apply every option."""
        options = TraceOptions()
        try:
            for event in scan_arguments(argv, self._schema):
                if isinstance(event, End):
                    has_command = event.index < len(argv)
                    return Continue(replace(options, has_command=has_command), event.index)
                if isinstance(event, MissingValue):
                    raise MissingArgumentError(
                        f"missing mandatory argument for option '{event.option}'",
                    )
                if isinstance(event, Unrecognized):
                    raise UnknownOptionError(f"{event.reason}: '{event.token}'")

                step = self._handlers[event.action](options, event.value)
                if isinstance(step, Terminate):
                    return step
                options = step
        except OptionError as exc:
            return self._fail(exc, options)

        # scan_arguments always finishes with End.
        raise AssertionError("scanner stopped without an End event")

    # ------------------------------------------------------------------
    # Outcome helpers
    # ------------------------------------------------------------------

    def _fail(self, exc: OptionError, options: TraceOptions) -> Terminate:
        self._reporter.error(str(exc))
        if exc.hint:
            self._reporter.info(exc.hint)
        if exc.show_usage:
            self._reporter.err.write(self._usage)
        return Terminate(exit_codes.GENERAL_ERROR, error=exc, options=options)

    @staticmethod
    def _done(options: TraceOptions, status: int = exit_codes.SUCCESS) -> Terminate:
        return Terminate(status, options=options)

    # ------------------------------------------------------------------
    # Flags
    # ------------------------------------------------------------------

    def _on_no_progress(self, options: TraceOptions, _value: str | None) -> _Step:
        return replace(options, no_progress=True)

    def _on_timestamp(self, options: TraceOptions, _value: str | None) -> _Step:
        return replace(options, timestamp=True)

    def _on_failed_only(self, options: TraceOptions, _value: str | None) -> _Step:
        return replace(options, failed_only=True)

    def _on_debug(self, options: TraceOptions, _value: str | None) -> _Step:
        return replace(options, debug=True)

    def _on_follow_fork(self, options: TraceOptions, value: str | None) -> _Step:
        if value is not None:
            return replace(options, follow_fork=FollowForkMode.FULL, separate_logs=True)
        return replace(options, follow_fork=FollowForkMode.FULL)

    # ------------------------------------------------------------------
    # Valued options
    # ------------------------------------------------------------------

    def _on_pid(self, options: TraceOptions, value: str | None) -> _Step:
        raw = _required(value)
        # int() alone would also take "4_2" and non-ASCII digits.
        pid = int(raw) if _DECIMAL.fullmatch(raw.strip()) else None
        if pid is None or pid < 1:
            raise InvalidValueError(f"wrong value for pid option is provided: '{raw}'")
        return replace(options, pid=pid)

    def _on_output_filename(self, options: TraceOptions, value: str | None) -> _Step:
        return replace(options, output_filename=_required(value))

    def _on_field_separator(self, options: TraceOptions, value: str | None) -> _Step:
        raw = _required(value)
        if not raw:
            raise InvalidValueError("hex separator must be a single character, got ''")
        return replace(options, field_separator=raw[0])

    def _on_source_directory(self, options: TraceOptions, value: str | None) -> _Step:
        return replace(options, ebpf_src_dir=_required(value))

    def _on_string_arg_mode(self, options: TraceOptions, value: str | None) -> _Step:
        return replace(options, string_arg_mode=self._resolve_mode(_required(value)))

    def _on_expr(self, options: TraceOptions, value: str | None) -> _Step:
        raw = _required(value)
        topic = reserved_topic(raw, RESERVED_EXPRESSIONS)
        if topic is InfoTopic.EXPRESSIONS:
            self._reporter.info("List of supported expressions: 'help', 'list', 'trace=set'")
            self._reporter.info(
                "For list of supported sets you should use 'trace=help' or 'trace=list'",
            )
            return self._done(options)
        if topic is InfoTopic.TRACE_SETS:
            self._catalog.print_trace_sets(self._reporter.err)
            self._reporter.info("You can combine sets by using comma.")
            return self._done(options)
        return replace(options, expression=raw)

    def _on_format(self, options: TraceOptions, value: str | None) -> _Step:
        raw = _required(value)
        if reserved_topic(raw, RESERVED_FORMATS) is InfoTopic.FORMATS:
            names = ", ".join(f"'{name}'" for name in supported_format_names())
            self._reporter.info(f"List of supported formats: {names}, 'list' & 'help'")
            return self._done(options)
        return replace(
            options,
            output_format_name=raw,
            output_format=self._resolve_format(raw),
        )

    # ------------------------------------------------------------------
    # Informational options
    # ------------------------------------------------------------------

    def _on_help(self, options: TraceOptions, _value: str | None) -> _Step:
        self._reporter.out.write(self._usage)
        return self._done(options)

    def _on_list_syscalls(self, options: TraceOptions, _value: str | None) -> _Step:
        self._catalog.print_syscall_list(self._reporter.out, low_level=False)
        return self._done(options)

    def _on_list_low_level_syscalls(self, options: TraceOptions, _value: str | None) -> _Step:
        self._catalog.print_syscall_list(self._reporter.out, low_level=True)
        return self._done(options)

    def _on_list_builtin_syscalls(self, options: TraceOptions, _value: str | None) -> _Step:
        status = self._catalog.print_syscalls_table(self._reporter.out)
        return self._done(options, exit_codes.from_table_status(status))


def _required(value: str | None) -> str:
    """Return a value the scanner guarantees for required-value options."""
    if value is None:
        raise MissingArgumentError("missing mandatory option's argument")
    return value


def parse_command_line(
    argv: Sequence[str],
    catalog: SyscallCatalog,
    reporter: Reporter,
) -> ParseOutcome:
    """Parse *argv* with the default schema and lookups."""
    return OptionDispatcher(catalog, reporter).parse(argv)
