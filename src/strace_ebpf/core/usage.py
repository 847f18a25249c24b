"""Usage text generated from the option schema."""

from __future__ import annotations

from strace_ebpf.core.schema import Arity, OptionSchema, OptionSpec

PROG: str = "strace.ebpf"

_HELP_COLUMN: int = 32


def _option_label(spec: OptionSpec) -> str:
    """Render ``-p, --pid <pid>`` style labels.

    Optional values are shown attached (``--full-follow-fork[=split]``)
    because only the attached form supplies them.
    """
    forms: list[str] = []
    if spec.short is not None:
        forms.append(f"-{spec.short}")
    if spec.long is not None:
        forms.append(f"--{spec.long}")
    label = ", ".join(forms)

    if spec.arity is Arity.REQUIRED:
        label += f" <{spec.metavar}>"
    elif spec.arity is Arity.OPTIONAL:
        label += f"[={spec.metavar}]"
    return label


def render_usage(schema: OptionSchema, prog: str = PROG) -> str:
    """Return the full usage text, newline-terminated."""
    lines = [
        f"Usage: {prog} [options] [--] command [arg ...]",
        f"   or: {prog} [options] -p <pid>",
        "",
        "Options:",
    ]
    for spec in schema:
        label = _option_label(spec)
        if len(label) + 2 >= _HELP_COLUMN:
            lines.append(f"  {label}")
            lines.append(" " * _HELP_COLUMN + spec.help)
        else:
            lines.append(f"  {label:<{_HELP_COLUMN - 2}}{spec.help}")
    lines.append("")
    lines.append("Options must precede the command to trace.")
    return "\n".join(lines) + "\n"
