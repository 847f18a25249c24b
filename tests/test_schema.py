"""Tests for the option schema (core/schema.py)."""

from __future__ import annotations

import pytest

from strace_ebpf.core.schema import DEFAULT_SCHEMA, Action, Arity, OptionSchema, OptionSpec
from strace_ebpf.exceptions import OptionSchemaError


# ---------------------------------------------------------------------------
# Default table
# ---------------------------------------------------------------------------

class TestDefaultSchema:
    def test_every_action_has_one_option(self) -> None:
        assert {spec.action for spec in DEFAULT_SCHEMA} == set(Action)
        assert len(DEFAULT_SCHEMA) == len(Action)

    @pytest.mark.parametrize(
        ("short", "long", "arity"),
        [
            ("t", "timestamp", Arity.NONE),
            ("X", "failed", Arity.NONE),
            ("h", "help", Arity.NONE),
            ("d", "debug", Arity.NONE),
            ("L", "list", Arity.NONE),
            ("R", "ll-list", Arity.NONE),
            ("B", "builtin-list", Arity.NONE),
            ("r", "no-progress", Arity.NONE),
            ("p", "pid", Arity.REQUIRED),
            ("l", "format", Arity.REQUIRED),
            ("s", "string-args", Arity.REQUIRED),
            ("e", "expr", Arity.REQUIRED),
            ("o", "output", Arity.REQUIRED),
            ("N", "ebpf-src-dir", Arity.REQUIRED),
            ("K", "hex-separator", Arity.REQUIRED),
            ("f", "full-follow-fork", Arity.OPTIONAL),
        ],
    )
    def test_forms_and_arity(self, short: str, long: str, arity: Arity) -> None:
        spec = DEFAULT_SCHEMA.find_short(short)
        assert spec is not None
        assert spec.long == long
        assert spec.arity is arity
        assert DEFAULT_SCHEMA.match_long(long) == (spec,)

    def test_every_option_has_help(self) -> None:
        assert all(spec.help for spec in DEFAULT_SCHEMA)

    def test_unknown_short(self) -> None:
        assert DEFAULT_SCHEMA.find_short("Z") is None

    def test_schema_is_frozen(self) -> None:
        with pytest.raises(AttributeError):
            DEFAULT_SCHEMA.specs = ()  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Long-name matching
# ---------------------------------------------------------------------------

class TestMatchLong:
    def test_prefix(self) -> None:
        assert [spec.action for spec in DEFAULT_SCHEMA.match_long("builtin")] == [
            Action.LIST_BUILTIN_SYSCALLS,
        ]

    def test_ambiguous_prefix(self) -> None:
        actions = {spec.action for spec in DEFAULT_SCHEMA.match_long("l")}
        assert actions == {Action.LIST_SYSCALLS, Action.LIST_LOW_LEVEL_SYSCALLS}

    def test_empty_name(self) -> None:
        assert DEFAULT_SCHEMA.match_long("") == ()

    def test_exact_match_wins_over_longer_name(self) -> None:
        schema = OptionSchema(
            specs=(
                OptionSpec(Action.LIST_SYSCALLS, "L", "list"),
                OptionSpec(Action.LIST_LOW_LEVEL_SYSCALLS, "R", "list-all"),
            )
        )
        assert [spec.short for spec in schema.match_long("list")] == ["L"]
        assert len(schema.match_long("lis")) == 2


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

class TestValidation:
    def test_duplicate_short(self) -> None:
        with pytest.raises(OptionSchemaError, match="duplicate short"):
            OptionSchema(
                specs=(
                    OptionSpec(Action.TIMESTAMP, "t", "timestamp"),
                    OptionSpec(Action.DEBUG, "t", "debug"),
                )
            )

    def test_duplicate_long(self) -> None:
        with pytest.raises(OptionSchemaError, match="duplicate long"):
            OptionSchema(
                specs=(
                    OptionSpec(Action.TIMESTAMP, "t", "debug"),
                    OptionSpec(Action.DEBUG, "d", "debug"),
                )
            )

    def test_duplicate_action(self) -> None:
        with pytest.raises(OptionSchemaError, match="duplicate action"):
            OptionSchema(
                specs=(
                    OptionSpec(Action.DEBUG, "d", "debug"),
                    OptionSpec(Action.DEBUG, "D", "verbose"),
                )
            )

    @pytest.mark.parametrize("short", ["", "ab", "-", "="])
    def test_bad_short_form(self, short: str) -> None:
        with pytest.raises(OptionSchemaError, match="invalid short"):
            OptionSchema(specs=(OptionSpec(Action.DEBUG, short, "debug"),))

    @pytest.mark.parametrize("long", ["", "-debug", "de=bug"])
    def test_bad_long_form(self, long: str) -> None:
        with pytest.raises(OptionSchemaError, match="invalid long"):
            OptionSchema(specs=(OptionSpec(Action.DEBUG, "d", long),))

    def test_nameless_option(self) -> None:
        with pytest.raises(OptionSchemaError, match="no short or long"):
            OptionSchema(specs=(OptionSpec(Action.DEBUG, None, None),))

    def test_valued_option_needs_metavar(self) -> None:
        with pytest.raises(OptionSchemaError, match="metavar"):
            OptionSchema(specs=(OptionSpec(Action.PID, "p", "pid", Arity.REQUIRED),))

    def test_flag_must_not_have_metavar(self) -> None:
        with pytest.raises(OptionSchemaError, match="metavar"):
            OptionSchema(specs=(OptionSpec(Action.DEBUG, "d", "debug", Arity.NONE, "x"),))

    def test_short_only_and_long_only(self) -> None:
        schema = OptionSchema(
            specs=(
                OptionSpec(Action.DEBUG, "d", None),
                OptionSpec(Action.TIMESTAMP, None, "timestamp"),
            )
        )
        assert schema.find_short("d") is not None
        assert schema.match_long("timestamp")[0].display_name == "--timestamp"
        assert schema.find_short("d").display_name == "-d"  # type: ignore[union-attr]
