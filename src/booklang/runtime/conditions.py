"""
Condition evaluation for if / else if branches.

A condition is one or more clauses joined by " and ". Each clause compares a
variable (left) with a literal (right) using one of four operators, tried in
a fixed order so that "is greater than" wins over the plain "is".
"""

import logging
from typing import Callable, List, Tuple

from .environment import Environment
from .literals import parse_literal
from .values import Value
from ..errors import error_unparseable_condition

logger = logging.getLogger(__name__)

CONJUNCTION = " and "


def _greater_than(lhs: Value, rhs: Value) -> bool:
    return lhs.to_number() > rhs.to_number()


def _less_than(lhs: Value, rhs: Value) -> bool:
    return lhs.to_number() < rhs.to_number()


def _not_equal(lhs: Value, rhs: Value) -> bool:
    return lhs.to_display_text() != rhs.to_display_text()


def _equal(lhs: Value, rhs: Value) -> bool:
    return lhs.to_display_text() == rhs.to_display_text()


# Order matters: the first operator found in a clause is used.
OPERATORS: List[Tuple[str, Callable[[Value, Value], bool]]] = [
    (" is greater than ", _greater_than),
    (" is less than ", _less_than),
    (" is not ", _not_equal),
    (" is ", _equal),
]


def split_clauses(condition: str) -> List[str]:
    return [clause.strip() for clause in condition.split(CONJUNCTION)]


def evaluate_clause(clause: str, env: Environment) -> bool:
    """Evaluate one `<name> <operator> <literal>` comparison."""
    for operator, compare in OPERATORS:
        if operator in clause:
            name, _, literal = clause.partition(operator)
            lhs = env.lookup(name.strip())
            rhs = parse_literal(literal, env)
            return compare(lhs, rhs)
    raise error_unparseable_condition(clause)


def evaluate_condition(condition: str, env: Environment) -> bool:
    """
    Evaluate a conjunction of clauses.

    Clauses are evaluated left to right and evaluation stops at the first
    false clause, so errors in later clauses are not reported.
    """
    for clause in split_clauses(condition):
        if not evaluate_clause(clause, env):
            logger.debug("condition %r failed at clause %r", condition, clause)
            return False
    return True
