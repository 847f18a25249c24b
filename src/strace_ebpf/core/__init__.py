"""Core layer: option schema, scanning, dispatch and the configuration model.

Rules
-----
* No ``print()`` calls; text goes through an injected ``Reporter`` or a
  stream handed to a collaborator.
* No filesystem or kernel access.
* No imports from ``cli`` or ``infra``.
* No ``sys.exit``: parsing ends in a ``Continue`` or ``Terminate`` value.
"""

from strace_ebpf.core.dispatcher import OptionDispatcher, parse_command_line
from strace_ebpf.core.formats import OutputFormat, StringArgMode
from strace_ebpf.core.models import FollowForkMode, TraceOptions
from strace_ebpf.core.outcome import Continue, ParseOutcome, Terminate
from strace_ebpf.core.protocols import Reporter, SyscallCatalog
from strace_ebpf.core.schema import DEFAULT_SCHEMA, Action, Arity, OptionSchema, OptionSpec

__all__: list[str] = [
    "DEFAULT_SCHEMA",
    "Action",
    "Arity",
    "Continue",
    "FollowForkMode",
    "OptionDispatcher",
    "OptionSchema",
    "OptionSpec",
    "OutputFormat",
    "ParseOutcome",
    "Reporter",
    "StringArgMode",
    "SyscallCatalog",
    "Terminate",
    "TraceOptions",
    "parse_command_line",
]
