"""
Literal and interpolation parser.

Turns a single token of source text into a Value. Double-quoted strings
substitute `{name}` placeholders with the display text of the named
variable; unknown names become a visible `{UNKNOWN:name}` marker instead of
an error.
"""

import re
from typing import Optional

from .environment import Environment
from .values import (
    Value, INT64_MIN, INT64_MAX,
    int_val, float_val, string_val, bool_val, NOTHING,
)
from ..errors import error_unrecognized_literal

KEYWORD_LITERALS = {
    "true": bool_val(True),
    "false": bool_val(False),
    "nothing": NOTHING,
}

INTEGER_RE = re.compile(r"-?[0-9]+")
FLOAT_RE = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*(?:[eE][+-]?[0-9]+)?"
    r"|\.[0-9]+(?:[eE][+-]?[0-9]+)?"
    r"|inf|infinity|nan)",
    re.IGNORECASE,
)


def is_quoted(token: str, quote: str) -> bool:
    """Check if a token is wrapped in a pair of the given quote character."""
    return len(token) >= 2 and token.startswith(quote) and token.endswith(quote)


def interpolate(text: str, env: Optional[Environment]) -> str:
    """
    Replace `{name}` placeholders in text.

    A `{` without a closing `}` takes the rest of the text as the name.
    Braces do not nest and cannot be escaped.
    """
    out = []
    pos = 0
    while pos < len(text):
        start = text.find("{", pos)
        if start < 0:
            out.append(text[pos:])
            break
        out.append(text[pos:start])
        close = text.find("}", start + 1)
        if close < 0:
            name = text[start + 1:]
            pos = len(text)
        else:
            name = text[start + 1:close]
            pos = close + 1
        value = env.get(name.strip()) if env is not None else None
        if value is None:
            out.append(f"{{UNKNOWN:{name}}}")
        else:
            out.append(value.to_display_text())
    return "".join(out)


def parse_integer(token: str) -> Optional[Value]:
    if not INTEGER_RE.fullmatch(token):
        return None
    n = int(token)
    if not INT64_MIN <= n <= INT64_MAX:
        return None
    return int_val(n)


def parse_float(token: str) -> Optional[Value]:
    if not FLOAT_RE.fullmatch(token):
        return None
    return float_val(float(token))


def is_bare_literal(token: str) -> bool:
    """Check if an unquoted token is a keyword or numeric literal."""
    token = token.strip()
    return (token in KEYWORD_LITERALS
            or INTEGER_RE.fullmatch(token) is not None
            or FLOAT_RE.fullmatch(token) is not None)


def parse_literal(token: str, env: Optional[Environment] = None) -> Value:
    """
    Parse a literal token into a Value.

    Args:
        token: The literal text; surrounding whitespace is ignored
        env: Bindings used for interpolation (read only)

    Returns:
        The parsed Value

    Raises:
        LiteralError: If the token is not a recognized literal
    """
    t = token.strip()

    if t in KEYWORD_LITERALS:
        return KEYWORD_LITERALS[t]

    if is_quoted(t, "'"):
        return string_val(t[1:-1])

    if is_quoted(t, '"'):
        return string_val(interpolate(t[1:-1], env))

    value = parse_integer(t)
    if value is not None:
        return value

    value = parse_float(t)
    if value is not None:
        return value

    raise error_unrecognized_literal(t)
