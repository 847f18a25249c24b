"""strace-ebpf: command-line front end for the eBPF syscall tracer.

Resolves the tool's arguments into an immutable configuration object
and serves the informational invocations (help, syscall listings).
"""

from strace_ebpf.version import __version__

__all__: list[str] = ["__version__"]
