"""
Tests for literal parsing and string interpolation.
"""

import math
import pytest

from booklang import Environment, LiteralError, parse_literal
from booklang.runtime import (
    ValueKind, NOTHING,
    int_val, float_val, string_val, bool_val,
    interpolate, is_bare_literal,
)


@pytest.fixture
def env():
    env = Environment()
    env.declare("name", string_val("World"))
    env.declare("n", int_val(3))
    env.declare("ratio", float_val(0.5))
    env.declare("flag", bool_val(True))
    env.declare("empty", NOTHING)
    return env


class TestKeywordLiterals:
    """Test true, false and nothing."""

    def test_true(self):
        assert parse_literal("true") == bool_val(True)

    def test_false(self):
        assert parse_literal("false") == bool_val(False)

    def test_nothing(self):
        assert parse_literal("nothing") is NOTHING

    def test_surrounding_whitespace(self):
        assert parse_literal("  true  ") == bool_val(True)

    def test_keywords_are_case_sensitive(self):
        with pytest.raises(LiteralError):
            parse_literal("True")


class TestSingleQuoted:
    """Test single-quoted strings."""

    def test_simple(self):
        assert parse_literal("'x'") == string_val("x")

    def test_empty(self):
        assert parse_literal("''") == string_val("")

    def test_no_interpolation(self, env):
        """Braces are kept verbatim in single quotes."""
        assert parse_literal("'{name}'", env) == string_val("{name}")

    def test_inner_quotes_kept(self):
        assert parse_literal("'it's'") == string_val("it's")

    def test_lone_quote_is_not_a_string(self):
        with pytest.raises(LiteralError):
            parse_literal("'")


class TestDoubleQuoted:
    """Test double-quoted strings with interpolation."""

    def test_plain(self):
        assert parse_literal('"hello"') == string_val("hello")

    def test_interpolation(self, env):
        assert parse_literal('"Hello, {name}!"', env) == string_val("Hello, World!")

    def test_interpolation_trims_name(self, env):
        assert parse_literal('"{ name }"', env) == string_val("World")

    def test_interpolates_display_text(self, env):
        text = parse_literal('"{n} {ratio} {flag} {empty}"', env)
        assert text == string_val("3 0.5 true nothing")

    def test_unknown_name_marker(self, env):
        """Unknown placeholders become a visible marker, not an error."""
        assert parse_literal('"{missing}"', env) == string_val("{UNKNOWN:missing}")

    def test_unknown_without_environment(self):
        assert parse_literal('"{name}"') == string_val("{UNKNOWN:name}")

    def test_unterminated_placeholder_runs_to_end(self, env):
        assert parse_literal('"Hi {name"', env) == string_val("Hi World")
        assert parse_literal('"Hi {nope"', env) == string_val("Hi {UNKNOWN:nope}")

    def test_multiple_placeholders(self, env):
        assert parse_literal('"{name}{name}"', env) == string_val("WorldWorld")

    def test_lone_closing_brace_kept(self, env):
        assert parse_literal('"a}b"', env) == string_val("a}b")

    def test_interpolate_directly(self, env):
        assert interpolate("x={n}", env) == "x=3"


class TestNumbers:
    """Test integer and float literals."""

    def test_integer(self):
        assert parse_literal("42") == int_val(42)

    def test_negative_integer(self):
        assert parse_literal("-7") == int_val(-7)

    def test_int64_bounds(self):
        assert parse_literal(str(2 ** 63 - 1)).kind is ValueKind.INTEGER
        assert parse_literal(str(-(2 ** 63))).kind is ValueKind.INTEGER

    def test_integer_overflow_becomes_float(self):
        v = parse_literal(str(2 ** 63))
        assert v.kind is ValueKind.FLOAT
        assert v.data == float(2 ** 63)

    def test_float(self):
        assert parse_literal("3.5") == float_val(3.5)

    def test_float_forms(self):
        assert parse_literal("5.0") == float_val(5.0)
        assert parse_literal("-0.25") == float_val(-0.25)
        assert parse_literal("1e3") == float_val(1000.0)
        assert parse_literal(".5") == float_val(0.5)
        assert parse_literal("+2") == float_val(2.0)

    def test_float_specials(self):
        assert parse_literal("inf").data == math.inf
        assert math.isnan(parse_literal("NaN").data)

    @pytest.mark.parametrize("token", ["1_000", "0x10", "1.2.3", "5 6", "abc", ""])
    def test_rejected(self, token):
        with pytest.raises(LiteralError) as exc_info:
            parse_literal(token)
        assert exc_info.value.code == "E101"


class TestBareLiteral:
    """Test detection of unquoted literals."""

    @pytest.mark.parametrize("token", ["5", "-1", "2.5", "true", "false", "nothing"])
    def test_literals(self, token):
        assert is_bare_literal(token)

    @pytest.mark.parametrize("token", ["x", "count", "'x'", ""])
    def test_not_literals(self, token):
        assert not is_bare_literal(token)
