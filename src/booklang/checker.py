"""
Structure checker for booklang programs.

Reports problems that can be found without running the program: unbalanced
blocks, stray else/end markers, unrecognized statements and condition
clauses with no operator. Values and variables are not checked, since the
language is dynamically typed.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .config import InterpreterConfig
from .errors import (
    BookError, Diagnostic, ErrorSeverity,
    error_missing_end, error_unparseable_condition, warning_duplicate_else,
)
from .runtime.blocks import (
    ELSE, END, IF_PREFIX, ELSE_IF_PREFIX,
    is_if, is_else_if, condition_text,
)
from .runtime.conditions import OPERATORS, split_clauses
from .runtime.statements import parse_statement
from .source import SourceProgram


@dataclass
class _OpenBlock:
    index: int
    seen_else: bool = False


@dataclass
class CheckResult:
    """Diagnostics found in a program."""
    diagnostics: List[Diagnostic] = field(default_factory=list)

    @property
    def errors(self) -> List[Diagnostic]:
        return [d for d in self.diagnostics if d.severity == ErrorSeverity.ERROR]

    @property
    def warnings(self) -> List[Diagnostic]:
        return [d for d in self.diagnostics if d.severity == ErrorSeverity.WARNING]

    @property
    def has_errors(self) -> bool:
        return len(self.errors) > 0

    def to_json(self) -> dict:
        return {
            "diagnostics": [d.to_json() for d in self.diagnostics],
            "error_count": len(self.errors),
            "warning_count": len(self.warnings),
        }


def _check_condition(text: str) -> Optional[BookError]:
    for clause in split_clauses(text):
        if not any(operator in clause for operator, _ in OPERATORS):
            return error_unparseable_condition(clause)
    return None


def check_program(program: SourceProgram,
                  config: Optional[InterpreterConfig] = None) -> CheckResult:
    """Check the structure of a program without executing it."""
    config = config or InterpreterConfig()
    result = CheckResult()
    stack: List[_OpenBlock] = []

    def report(error: BookError, index: int) -> None:
        error.at(program.location(index), program[index])
        result.diagnostics.append(error.diagnostic)

    for index in range(len(program)):
        line = program[index].strip()

        if is_if(line) or (is_else_if(line) and stack):
            prefix = IF_PREFIX if is_if(line) else ELSE_IF_PREFIX
            error = _check_condition(condition_text(line, prefix))
            if error is not None:
                report(error, index)
            if is_if(line):
                stack.append(_OpenBlock(index))
            continue

        if line == ELSE and stack:
            if stack[-1].seen_else:
                result.diagnostics.append(
                    warning_duplicate_else(program.location(index), program[index]))
            stack[-1].seen_else = True
            continue

        if line == END and stack:
            stack.pop()
            continue

        try:
            parse_statement(line, config)
        except BookError as e:
            report(e, index)

    for block in stack:
        report(error_missing_end(program[block.index].strip()), block.index)

    return result
