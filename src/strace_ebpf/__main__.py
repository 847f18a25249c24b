"""Allow ``python -m strace_ebpf`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m strace_ebpf`` behaves identically to the
``strace-ebpf`` console script.
"""

from __future__ import annotations

from strace_ebpf.cli.app import cli

if __name__ == "__main__":
    cli()
