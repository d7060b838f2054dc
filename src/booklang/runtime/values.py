"""
Runtime values for the booklang interpreter.

A Value is a closed tagged union: the `kind` field selects exactly one
variant and the `data` field holds the matching Python object. Coercions
happen on demand and never change a stored value's kind.
"""

import math
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any

from ..errors import error_not_a_number

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


class ValueKind(Enum):
    """Variant tags for runtime values."""
    INTEGER = "integer"
    FLOAT = "float"
    STR = "string"
    BOOL = "bool"
    NOTHING = "nothing"


@dataclass(frozen=True)
class Value:
    """
    A runtime value with its variant tag.

    Every operation that inspects a value branches on `kind`, never on the
    Python type of `data` (a bool is an int in Python, but not here).
    """
    kind: ValueKind
    data: Any = None

    def __repr__(self) -> str:
        if self.kind is ValueKind.NOTHING:
            return "Value(nothing)"
        return f"Value({self.kind.value}, {self.data!r})"

    def to_bool(self) -> bool:
        """Truth value of this value. Never fails."""
        kind = self.kind
        if kind is ValueKind.BOOL:
            return self.data
        if kind is ValueKind.INTEGER:
            return self.data != 0
        if kind is ValueKind.FLOAT:
            return self.data != 0.0
        if kind is ValueKind.STR:
            return len(self.data) > 0
        if kind is ValueKind.NOTHING:
            return False
        raise AssertionError(f"unhandled value kind {kind}")

    def to_number(self) -> float:
        """Numeric value as a float; non-numeric kinds raise ValueTypeError."""
        kind = self.kind
        if kind is ValueKind.INTEGER:
            return float(self.data)
        if kind is ValueKind.FLOAT:
            return self.data
        if kind in (ValueKind.STR, ValueKind.BOOL, ValueKind.NOTHING):
            raise error_not_a_number(self.to_display_text(), kind.value)
        raise AssertionError(f"unhandled value kind {kind}")

    def to_display_text(self) -> str:
        """Human-readable rendering used by print, interpolation and equality."""
        kind = self.kind
        if kind is ValueKind.INTEGER:
            return str(self.data)
        if kind is ValueKind.FLOAT:
            return format_float(self.data)
        if kind is ValueKind.STR:
            return self.data
        if kind is ValueKind.BOOL:
            return "true" if self.data else "false"
        if kind is ValueKind.NOTHING:
            return "nothing"
        raise AssertionError(f"unhandled value kind {kind}")

    def __str__(self) -> str:
        return self.to_display_text()


def format_float(x: float) -> str:
    """
    Positional decimal text for a float, never in exponent form.

    Whole numbers keep a trailing ".0", so 5.0 renders differently from 5.
    """
    if not math.isfinite(x):
        return repr(x)
    text = format(Decimal(repr(x)), "f")
    if "." not in text:
        text += ".0"
    return text


# Convenience constructors

def int_val(n: int) -> Value:
    """Create an integer value; must fit in a signed 64-bit integer."""
    n = int(n)
    if not INT64_MIN <= n <= INT64_MAX:
        raise OverflowError(f"{n} does not fit in a 64-bit integer")
    return Value(ValueKind.INTEGER, n)


def float_val(x: float) -> Value:
    """Create a float value."""
    return Value(ValueKind.FLOAT, float(x))


def string_val(s: str) -> Value:
    """Create a string value."""
    return Value(ValueKind.STR, str(s))


def bool_val(b: bool) -> Value:
    """Create a boolean value."""
    return Value(ValueKind.BOOL, bool(b))


NOTHING = Value(ValueKind.NOTHING)


def nothing_val() -> Value:
    """The absence-of-value sentinel."""
    return NOTHING
