"""
Statement and block executor for booklang.

Executes a program line by line. Conditional blocks are handled by
recursing over line ranges: running the line at index i returns the index
of the first line after whatever construct was consumed.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional, Union

from .blocks import (
    BlockRegion, IF_PREFIX, ELSE_IF_PREFIX,
    is_if, condition_text, scan_block,
)
from .conditions import evaluate_condition
from .environment import Environment
from .literals import is_bare_literal, parse_literal
from .statements import Statement, StatementKind, parse_statement
from .values import Value
from ..config import InterpreterConfig
from ..errors import BookError, Diagnostic
from ..source import SourceProgram, as_program

logger = logging.getLogger(__name__)

OutputSink = Callable[[str], None]


@dataclass
class ExecutionResult:
    """Result of running a program."""
    success: bool
    output: List[str] = field(default_factory=list)
    error: Optional[BookError] = None

    @property
    def diagnostic(self) -> Optional[Diagnostic]:
        if self.error:
            return self.error.diagnostic
        return None

    @property
    def error_message(self) -> Optional[str]:
        if self.error:
            return self.error.diagnostic.message
        return None


class Interpreter:
    """
    Executes booklang programs against a single global environment.

    Printed lines are collected in `output` and, when given, passed to the
    `sink` callable as they are produced. An Interpreter is not thread-safe.
    """

    def __init__(self, config: Optional[InterpreterConfig] = None,
                 sink: Optional[OutputSink] = None):
        self.config = config or InterpreterConfig()
        self.env = Environment(allow_redeclaration=self.config.allow_redeclaration)
        self.output: List[str] = []
        self.sink = sink

    def run(self, source: Union[str, Iterable[str], SourceProgram]) -> List[str]:
        """
        Run a whole program to completion.

        Returns:
            The lines printed by the program

        Raises:
            BookError: On the first fatal error, located at the failing line
        """
        program = as_program(source)
        index = 0
        while index < len(program):
            index = self.run_lines(program, index)
        return self.output

    def run_lines(self, program: SourceProgram, index: int) -> int:
        """Run the statement or block at index; return the next index to run."""
        line = program[index].strip()
        if is_if(line):
            return self._run_block(program, index)
        logger.debug("%s: %s", program.location(index), line)
        try:
            self.execute_statement(parse_statement(line, self.config))
        except BookError as e:
            raise e.at(program.location(index), program[index])
        return index + 1

    def _run_range(self, program: SourceProgram, start: int, stop: int) -> None:
        index = start
        while index < stop:
            index = self.run_lines(program, index)

    def _condition_holds(self, program: SourceProgram, index: int, prefix: str) -> bool:
        try:
            return evaluate_condition(condition_text(program[index].strip(), prefix), self.env)
        except BookError as e:
            raise e.at(program.location(index), program[index])

    def _run_block(self, program: SourceProgram, start: int) -> int:
        try:
            region = scan_block(program, start)
        except BookError as e:
            raise e.at(program.location(start), program[start])

        branch = self._select_branch(program, region)
        if branch is not None:
            logger.debug("%s: taking branch at %s",
                         program.location(start), program.location(branch))
            self._run_range(program, branch + 1, region.body_stop(branch))
        else:
            logger.debug("%s: no branch taken", program.location(start))
        return region.end + 1

    def _select_branch(self, program: SourceProgram, region: BlockRegion) -> Optional[int]:
        """Index of the marker line whose body runs, or None."""
        if self._condition_holds(program, region.start, IF_PREFIX):
            return region.start
        for index in region.else_ifs:
            if self._condition_holds(program, index, ELSE_IF_PREFIX):
                return index
        return region.else_index

    def execute_statement(self, statement: Statement) -> None:
        """Execute one parsed statement."""
        kind = statement.kind
        if kind is StatementKind.NOOP:
            return
        if kind is StatementKind.LET:
            self.env.declare(statement.name, parse_literal(statement.argument, self.env))
        elif kind is StatementKind.CONSTANT:
            self.env.declare(statement.name, parse_literal(statement.argument, self.env),
                             constant=True)
        elif kind is StatementKind.BECOMES:
            self.env.check_assignable(statement.name)
            self.env.assign(statement.name, parse_literal(statement.argument, self.env))
        elif kind is StatementKind.PRINT:
            self.print_value(self.resolve_print_argument(statement.argument))
        else:
            raise AssertionError(f"unhandled statement kind {kind}")

    def resolve_print_argument(self, argument: str) -> Value:
        """Quoted and bare literals print as themselves; anything else is a variable."""
        if argument.startswith(("\"", "'")) or is_bare_literal(argument):
            return parse_literal(argument, self.env)
        return self.env.lookup(argument)

    def print_value(self, value: Value) -> None:
        text = value.to_display_text()
        self.output.append(text)
        if self.sink is not None:
            self.sink(text)


def execute(source: Union[str, Iterable[str], SourceProgram],
            config: Optional[InterpreterConfig] = None,
            sink: Optional[OutputSink] = None) -> ExecutionResult:
    """
    Run a program and report the outcome instead of raising.

    Args:
        source: Program text, a sequence of lines, or a SourceProgram
        config: Interpreter options (defaults if omitted)
        sink: Optional callable receiving each printed line as it is produced

    Returns:
        ExecutionResult with the printed lines and, on failure, the error
    """
    interpreter = Interpreter(config, sink)
    try:
        interpreter.run(source)
    except BookError as e:
        logger.debug("execution stopped: %s", e.diagnostic.message)
        return ExecutionResult(success=False, output=interpreter.output, error=e)
    return ExecutionResult(success=True, output=interpreter.output)
