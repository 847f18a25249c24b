"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so that ``--help`` and the listings remain functional even
when Rich is not installed.
"""

from __future__ import annotations

import re
import sys
from typing import Any, TextIO

from strace_ebpf.exceptions import EnvironmentError

_MARKUP_TAG = re.compile(r"(?<!\\)\[/?[a-z][a-z ]*\]")


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console() -> Any:
    """Create a Rich console instance targeting stderr."""
    console_class = _load_rich_console_class()
    return console_class(stderr=True, highlight=False)


def rich_available() -> bool:
    """Return whether Rich can be imported."""
    try:
        _load_rich_console_class()
    except EnvironmentError:
        return False
    return True


def escape(text: str) -> str:
    """Escape user-supplied *text* so Rich does not read it as markup."""
    try:
        from rich.markup import escape as rich_escape
    except ModuleNotFoundError:
        # strip_markup() turns "\[" back into "[".
        return text.replace("[", "\\[")
    return rich_escape(text)


def strip_markup(text: str) -> str:
    """Drop ``[bold red]``-style tags for plain output."""
    return _MARKUP_TAG.sub("", text).replace("\\[", "[")


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def print(self, *objects: object) -> None:
        """Render with Rich when available, else plain stderr print."""
        try:
            rich_console = get_rich_console()
        except EnvironmentError:
            print(*(strip_markup(obj) if isinstance(obj, str) else obj for obj in objects),
                  file=sys.stderr)
            return
        rich_console.print(*objects)


console = _ConsoleProxy()


class ConsoleReporter:
    """:class:`~strace_ebpf.core.protocols.Reporter` writing to the process streams.

    Streams are looked up at call time so redirected ``sys.stdout`` and
    ``sys.stderr`` (pytest's ``capsys`` included) are honoured.
    """

    @property
    def out(self) -> TextIO:
        return sys.stdout

    @property
    def err(self) -> TextIO:
        return sys.stderr

    def info(self, message: str) -> None:
        console.print(f"[cyan]INFO:[/cyan] {escape(message)}")

    def error(self, message: str) -> None:
        console.print(f"[bold red]ERROR:[/bold red] {escape(message)}")
