"""Custom exception hierarchy for strace-ebpf.

All exceptions that cross layer boundaries must inherit from
:class:`StraceEbpfError`.  Raw ``OSError`` from the kernel interfaces
must never propagate beyond the infrastructure layer; it is caught and
re-raised as a typed subclass defined here.

Hierarchy
---------
StraceEbpfError
├── OptionError
│   ├── MissingArgumentError
│   ├── UnknownOptionError
│   └── InvalidValueError
├── OptionSchemaError
├── KernelInterfaceError
└── EnvironmentError
"""

from __future__ import annotations


class StraceEbpfError(Exception):
    """Base exception for all strace-ebpf errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Command-line options --------------------------------------------------

class OptionError(StraceEbpfError):
    """Raised when the command line cannot be honoured.

    The dispatcher turns these into a failed
    :class:`~strace_ebpf.core.outcome.Terminate` outcome.
    """

    show_usage: bool = False
    """Whether the usage text follows the error message."""


class MissingArgumentError(OptionError):
    """Raised when an option requiring a value was given none."""

    show_usage = True


class UnknownOptionError(OptionError):
    """Raised when a token looks like an option but matches none."""

    show_usage = True


class InvalidValueError(OptionError):
    """Raised when an option's value fails its semantic constraint."""


# --- Option schema ---------------------------------------------------------

class OptionSchemaError(StraceEbpfError):
    """Raised when an option table is internally inconsistent."""


# --- Kernel / tracefs ------------------------------------------------------

class KernelInterfaceError(StraceEbpfError):
    """Raised when a kernel tracing interface cannot be read."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(StraceEbpfError):
    """Raised when an optional runtime dependency is not available."""
