"""Result of a command-line parse.

Parsing never exits the process.  It returns either :class:`Continue`
carrying the final configuration, or :class:`Terminate` carrying the
exit status the caller should use.
"""

from __future__ import annotations

from dataclasses import dataclass

from strace_ebpf.core.models import TraceOptions
from strace_ebpf.exceptions import OptionError


@dataclass(frozen=True, slots=True)
class Continue:
    """Options were parsed; tracing may proceed."""

    options: TraceOptions

    command_index: int
    """Index into argv where the traced command starts."""


@dataclass(frozen=True, slots=True)
class Terminate:
    """The invocation is finished; the caller should exit with *status*."""

    status: int

    error: OptionError | None = None
    """The reported error for failed invocations, else ``None``."""

    options: TraceOptions | None = None
    """Configuration as it stood when parsing stopped."""


ParseOutcome = Continue | Terminate
