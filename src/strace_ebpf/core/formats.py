"""Name lookups for output formats and string-argument modes.

Both lookups are case-insensitive and pure.  Unknown names raise
:class:`~strace_ebpf.exceptions.InvalidValueError` with the accepted
names in the hint, so a typo never degrades silently to a default.
"""

from __future__ import annotations

import enum
from collections.abc import Mapping
from types import MappingProxyType

from strace_ebpf.exceptions import InvalidValueError


class OutputFormat(enum.Enum):
    """Encoding used by the output subsystem for trace records."""

    BIN = "bin"
    HEX_RAW = "hex_raw"
    HEX_SL = "hex_sl"
    STRACE = "strace"


class StringArgMode(enum.Enum):
    """Rendering policy for string-typed syscall arguments."""

    FAST = "fast"
    PACKET = "packet"
    FULL = "full"


# Order matters: it is the order shown by ``--format list``.
_FORMAT_NAMES: Mapping[str, OutputFormat] = MappingProxyType(
    {
        "bin": OutputFormat.BIN,
        "binary": OutputFormat.BIN,
        "hex": OutputFormat.HEX_RAW,
        "hex_raw": OutputFormat.HEX_RAW,
        "hex_sl": OutputFormat.HEX_SL,
        "strace": OutputFormat.STRACE,
    }
)

_MODE_NAMES: Mapping[str, StringArgMode] = MappingProxyType(
    {mode.value: mode for mode in StringArgMode}
)


def supported_format_names() -> tuple[str, ...]:
    """Return every accepted ``--format`` name, aliases included."""
    return tuple(_FORMAT_NAMES)


def supported_mode_names() -> tuple[str, ...]:
    """Return every accepted ``--string-args`` name."""
    return tuple(_MODE_NAMES)


def _quoted(names: tuple[str, ...]) -> str:
    return ", ".join(f"'{name}'" for name in names)


def resolve_output_format(name: str) -> OutputFormat:
    """Resolve a ``--format`` value to an :class:`OutputFormat`.

    Raises
    ------
    InvalidValueError
        If *name* is not a known format.
    """
    try:
        return _FORMAT_NAMES[name.lower()]
    except KeyError:
        raise InvalidValueError(
            f"unknown output format: '{name}'",
            hint=f"Supported formats: {_quoted(supported_format_names())}",
        ) from None


def resolve_string_arg_mode(name: str) -> StringArgMode:
    """Resolve a ``--string-args`` value to a :class:`StringArgMode`.

    Raises
    ------
    InvalidValueError
        If *name* is not a known mode.
    """
    try:
        return _MODE_NAMES[name.lower()]
    except KeyError:
        raise InvalidValueError(
            f"unknown string-args mode: '{name}'",
            hint=f"Supported modes: {_quoted(supported_mode_names())}",
        ) from None
