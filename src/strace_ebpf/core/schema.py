"""Option schema: the table of every option the scanner recognises.

The schema is data, not control flow: the scanner, the dispatcher and
the usage text all read the same :class:`OptionSchema`, and the table
is validated once on construction.
"""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass

from strace_ebpf.exceptions import OptionSchemaError


# ---------------------------------------------------------------------------
# Descriptor types
# ---------------------------------------------------------------------------

class Arity(enum.Enum):
    """Whether an option takes a value."""

    NONE = "none"
    REQUIRED = "required"
    OPTIONAL = "optional"


class Action(enum.Enum):
    """Symbolic tag the dispatcher keys its handlers on."""

    TIMESTAMP = "timestamp"
    FAILED_ONLY = "failed-only"
    HELP = "help"
    DEBUG = "debug"
    LIST_SYSCALLS = "list-syscalls"
    LIST_LOW_LEVEL_SYSCALLS = "list-low-level-syscalls"
    LIST_BUILTIN_SYSCALLS = "list-builtin-syscalls"
    NO_PROGRESS = "no-progress"
    PID = "pid"
    FORMAT = "format"
    STRING_ARG_MODE = "string-arg-mode"
    EXPR = "expr"
    OUTPUT_FILENAME = "output-filename"
    SOURCE_DIRECTORY = "source-directory"
    FIELD_SEPARATOR = "field-separator"
    FOLLOW_FORK = "follow-fork"


@dataclass(frozen=True, slots=True)
class OptionSpec:
    """Static description of one command-line option."""

    action: Action
    short: str | None
    """Single-character short form (without the dash), or ``None``."""

    long: str | None
    """Long form (without the leading ``--``), or ``None``."""

    arity: Arity = Arity.NONE
    metavar: str | None = None
    help: str = ""

    @property
    def display_name(self) -> str:
        """Name used in diagnostics, preferring the long form."""
        if self.long is not None:
            return f"--{self.long}"
        return f"-{self.short}"


# ---------------------------------------------------------------------------
# Schema container
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class OptionSchema:
    """Ordered, validated collection of :class:`OptionSpec` entries.

    Raises
    ------
    OptionSchemaError
        If two specs share a short form, long form or action, or if a
        spec is malformed.
    """

    specs: tuple[OptionSpec, ...]

    def __post_init__(self) -> None:
        validate_specs(self.specs)

    def __iter__(self) -> Iterator[OptionSpec]:
        return iter(self.specs)

    def __len__(self) -> int:
        return len(self.specs)

    def find_short(self, char: str) -> OptionSpec | None:
        """Return the spec whose short form is *char*, if any."""
        for spec in self.specs:
            if spec.short == char:
                return spec
        return None

    def match_long(self, name: str) -> tuple[OptionSpec, ...]:
        """Return the specs a long-option *name* may refer to.

        An exact match is returned alone.  Otherwise every spec whose
        long form starts with *name* is returned, so a unique
        abbreviation yields one spec and an ambiguous one several.
        """
        if not name:
            return ()
        prefixed: list[OptionSpec] = []
        for spec in self.specs:
            if spec.long is None:
                continue
            if spec.long == name:
                return (spec,)
            if spec.long.startswith(name):
                prefixed.append(spec)
        return tuple(prefixed)


def validate_specs(specs: tuple[OptionSpec, ...]) -> None:
    """Check a spec table for duplicates and malformed entries."""
    shorts: set[str] = set()
    longs: set[str] = set()
    actions: set[Action] = set()

    for spec in specs:
        if spec.short is None and spec.long is None:
            raise OptionSchemaError(f"option {spec.action.value} has no short or long form")

        if spec.short is not None:
            if len(spec.short) != 1 or spec.short in "-=" or spec.short.isspace():
                raise OptionSchemaError(f"invalid short form: {spec.short!r}")
            if spec.short in shorts:
                raise OptionSchemaError(f"duplicate short form: -{spec.short}")
            shorts.add(spec.short)

        if spec.long is not None:
            if not spec.long or spec.long.startswith("-") or "=" in spec.long:
                raise OptionSchemaError(f"invalid long form: {spec.long!r}")
            if spec.long in longs:
                raise OptionSchemaError(f"duplicate long form: --{spec.long}")
            longs.add(spec.long)

        if spec.action in actions:
            raise OptionSchemaError(f"duplicate action: {spec.action.value}")
        actions.add(spec.action)

        takes_value = spec.arity is not Arity.NONE
        if takes_value != (spec.metavar is not None):
            raise OptionSchemaError(
                f"{spec.display_name}: metavar must be given iff the option takes a value",
            )


# ---------------------------------------------------------------------------
# The tool's options
# ---------------------------------------------------------------------------

DEFAULT_SCHEMA: OptionSchema = OptionSchema(
    specs=(
        OptionSpec(Action.TIMESTAMP, "t", "timestamp",
                   help="include timestamp in output"),
        OptionSpec(Action.FAILED_ONLY, "X", "failed",
                   help="trace only failed syscalls"),
        OptionSpec(Action.HELP, "h", "help",
                   help="print this help and exit"),
        OptionSpec(Action.DEBUG, "d", "debug",
                   help="enable debug output"),
        OptionSpec(Action.LIST_SYSCALLS, "L", "list",
                   help="print the syscalls traceable on this kernel and exit"),
        OptionSpec(Action.LIST_LOW_LEVEL_SYSCALLS, "R", "ll-list",
                   help="print every traceable low-level kernel function and exit"),
        OptionSpec(Action.LIST_BUILTIN_SYSCALLS, "B", "builtin-list",
                   help="print the builtin syscall table and exit"),
        OptionSpec(Action.NO_PROGRESS, "r", "no-progress",
                   help="do not print progress messages"),
        OptionSpec(Action.PID, "p", "pid", Arity.REQUIRED, "pid",
                   help="trace the process with this pid"),
        OptionSpec(Action.FORMAT, "l", "format", Arity.REQUIRED, "fmt",
                   help="output format ('list' or 'help' prints the formats)"),
        OptionSpec(Action.STRING_ARG_MODE, "s", "string-args", Arity.REQUIRED, "mode",
                   help="how string arguments are captured: fast, packet or full"),
        OptionSpec(Action.EXPR, "e", "expr", Arity.REQUIRED, "expr",
                   help="syscall-set expression ('help', 'trace=help' for lists)"),
        OptionSpec(Action.OUTPUT_FILENAME, "o", "output", Arity.REQUIRED, "file",
                   help="write the trace to this file"),
        OptionSpec(Action.SOURCE_DIRECTORY, "N", "ebpf-src-dir", Arity.REQUIRED, "dir",
                   help="directory holding the eBPF sources"),
        OptionSpec(Action.FIELD_SEPARATOR, "K", "hex-separator", Arity.REQUIRED, "char",
                   help="field separator for line-oriented formats"),
        OptionSpec(Action.FOLLOW_FORK, "f", "full-follow-fork", Arity.OPTIONAL, "split",
                   help="follow forks; with a value, write one log per process"),
    )
)
