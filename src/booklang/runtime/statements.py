"""
Single-line statement forms.

Statements are recognized by keyword and separator text, tried in a fixed
order. Parsing only splits the line; literals are decoded at execution time.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..config import InterpreterConfig
from ..errors import error_unrecognized_statement

PRINT_PREFIX = "call print with "


class StatementKind(Enum):
    NOOP = "noop"
    LET = "let"
    CONSTANT = "constant"
    BECOMES = "becomes"
    PRINT = "print"


@dataclass(frozen=True)
class Statement:
    """A parsed statement: its kind, target name and unparsed argument text."""
    kind: StatementKind
    name: str = ""
    argument: str = ""


NOOP = Statement(StatementKind.NOOP)


def _split_declaration(line: str, keyword: str, separator: str) -> Statement:
    rest = line[len(keyword):]
    name, found, literal = rest.partition(separator)
    name = name.strip()
    if not found or not name:
        raise error_unrecognized_statement(
            line, f"expected '{keyword}<name>{separator}<value>'")
    kind = StatementKind.LET if keyword == "let " else StatementKind.CONSTANT
    return Statement(kind, name, literal.strip())


def _stray_marker_hint(line: str) -> Optional[str]:
    if line == "end" or line == "else" or line.startswith("else if "):
        keyword = "else if" if line.startswith("else if ") else line
        return f"'{keyword}' without a matching 'if'"
    return None


def parse_statement(line: str, config: Optional[InterpreterConfig] = None) -> Statement:
    """
    Recognize a single (non-block) statement.

    Raises:
        StatementSyntaxError: If the line matches no statement form
    """
    config = config or InterpreterConfig()
    line = line.strip()

    if not line or config.is_comment(line):
        return NOOP

    if line.startswith("let "):
        return _split_declaration(line, "let ", " be ")

    if line.startswith("constant "):
        return _split_declaration(line, "constant ", " is ")

    if " becomes " in line:
        name, _, literal = line.partition(" becomes ")
        return Statement(StatementKind.BECOMES, name.strip(), literal.strip())

    if line.startswith(PRINT_PREFIX):
        return Statement(StatementKind.PRINT, argument=line[len(PRINT_PREFIX):].strip())

    raise error_unrecognized_statement(line, _stray_marker_hint(line))
