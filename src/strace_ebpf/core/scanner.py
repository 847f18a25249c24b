"""Argument scanner: turns argv into a stream of parse events.

Scanning follows ``getopt_long`` in POSIX (``+``) mode:

* options must precede the traced command; the first token that is not
  an option ends scanning for good, so the command's own flags are
  never read as ours;
* ``--`` ends options and is consumed;
* short options may be clustered (``-tX``) and may carry their value
  attached (``-p42``) or in the next token (``-p 42``);
* long options take ``--name=value`` or, for required values, the next
  token; unique abbreviations of long names are accepted.

The scanner is a single left-to-right pass with no history; repeated
options simply produce repeated events.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from strace_ebpf.core.schema import Action, Arity, OptionSchema, OptionSpec


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Recognized:
    """An option matched a spec."""

    action: Action
    value: str | None = None


@dataclass(frozen=True, slots=True)
class MissingValue:
    """An option that requires a value was given none."""

    action: Action
    option: str
    """The option as the user spelled it (``-p`` or ``--pid``)."""


@dataclass(frozen=True, slots=True)
class Unrecognized:
    """A token looked like an option but could not be matched."""

    token: str
    reason: str = "unknown option"


@dataclass(frozen=True, slots=True)
class End:
    """No more options; *index* is the first unconsumed argv position."""

    index: int


ScanEvent = Recognized | MissingValue | Unrecognized | End


# ---------------------------------------------------------------------------
# Scanner
# ---------------------------------------------------------------------------

def scan_arguments(argv: Sequence[str], schema: OptionSchema) -> Iterator[ScanEvent]:
    """Yield one event per option in *argv*, then a final :class:`End`.

    *argv* excludes the program name.  Iteration may be abandoned at any
    event; nothing is consumed ahead of what has been yielded.
    """
    index = 0
    count = len(argv)

    while index < count:
        token = argv[index]

        if token == "--":
            yield End(index + 1)
            return
        if token == "-" or not token.startswith("-"):
            break

        if token.startswith("--"):
            event, index = _scan_long(argv, index, schema)
            yield event
            continue

        # Short cluster: walk the characters after the dash.
        index += 1
        position = 1
        while position < len(token):
            char = token[position]
            position += 1
            spec = schema.find_short(char)

            if spec is None:
                yield Unrecognized(f"-{char}")
                continue

            if spec.arity is Arity.NONE:
                yield Recognized(spec.action)
                continue

            attached = token[position:]
            if attached:
                yield Recognized(spec.action, attached)
                break
            if spec.arity is Arity.OPTIONAL:
                yield Recognized(spec.action)
                break
            if index < count:
                yield Recognized(spec.action, argv[index])
                index += 1
            else:
                yield MissingValue(spec.action, f"-{char}")
            break

    yield End(index)


def _scan_long(
    argv: Sequence[str],
    index: int,
    schema: OptionSchema,
) -> tuple[ScanEvent, int]:
    """Scan the ``--name[=value]`` token at *index*.

    Returns the event and the index of the next unread token.
    """
    token = argv[index]
    name, has_value, value = token[2:].partition("=")
    next_index = index + 1

    matches = schema.match_long(name)
    if not matches:
        return Unrecognized(token), next_index
    if len(matches) > 1:
        candidates = ", ".join(_long_name(spec) for spec in matches)
        return Unrecognized(token, f"ambiguous option (could be {candidates})"), next_index

    spec = matches[0]
    spelled = _long_name(spec)

    if spec.arity is Arity.NONE:
        if has_value:
            return Unrecognized(token, f"option {spelled} does not take a value"), next_index
        return Recognized(spec.action), next_index

    if has_value:
        return Recognized(spec.action, value), next_index
    if spec.arity is Arity.OPTIONAL:
        return Recognized(spec.action), next_index
    if next_index < len(argv):
        return Recognized(spec.action, argv[next_index]), next_index + 1
    return MissingValue(spec.action, spelled), next_index


def _long_name(spec: OptionSpec) -> str:
    return f"--{spec.long}"
