"""CLI application entry point for strace-ebpf.

This module is the **sole error boundary** for the entire application.
It catches :class:`~strace_ebpf.exceptions.StraceEbpfError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* Option handling lives in :mod:`strace_ebpf.core.dispatcher`; this
  module wires its collaborators and acts on the outcome.
* This module is the only place that translates between the domain
  world and the OS process exit code.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

from strace_ebpf import exit_codes
from strace_ebpf.cli.console import ConsoleReporter, console, escape
from strace_ebpf.core.dispatcher import OptionDispatcher
from strace_ebpf.core.outcome import Continue, Terminate
from strace_ebpf.exceptions import StraceEbpfError


# ---------------------------------------------------------------------------
# Wiring
# ---------------------------------------------------------------------------

def _build_dispatcher(reporter: ConsoleReporter) -> OptionDispatcher:
    """Create a dispatcher backed by the kernel syscall catalog."""
    from strace_ebpf.infra.kernel_catalog import KernelSyscallCatalog

    return OptionDispatcher(KernelSyscallCatalog(), reporter)


# ---------------------------------------------------------------------------
# Outcome handling
# ---------------------------------------------------------------------------

def _handle_trace(outcome: Continue, argv: Sequence[str], reporter: ConsoleReporter) -> int:
    """Hand the resolved options over to tracing.

    The eBPF engine consumes ``outcome.options``; on this side the run
    is summarised and, with ``--debug``, every option is shown.
    """
    from strace_ebpf.cli.options_view import describe_target, render_options

    options = outcome.options
    command = list(argv[outcome.command_index:])

    if not options.has_command and options.pid is None:
        reporter.error("nothing to trace: give a command or -p <pid>")
        return exit_codes.GENERAL_ERROR

    if options.debug:
        render_options(options)

    console.print(f"[bold]Target:[/bold] {escape(describe_target(options, command))}")
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: Sequence[str] | None = None) -> int:
    """Run the strace-ebpf CLI.

    Parameters
    ----------
    argv:
        Explicit argument list, program name excluded.  When ``None``
        (default), ``sys.argv[1:]`` is used.  Accepting *argv* enables
        deterministic testing without monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    reporter = ConsoleReporter()
    dispatcher = _build_dispatcher(reporter)

    if not args:
        reporter.out.write(dispatcher.usage)
        return exit_codes.SUCCESS

    outcome = dispatcher.parse(args)
    if isinstance(outcome, Terminate):
        return outcome.status
    return _handle_trace(outcome, args, reporter)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except StraceEbpfError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
