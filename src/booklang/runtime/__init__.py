"""
booklang runtime - line-oriented statement and block execution.

This module provides:
- Value: Tagged runtime values and their coercions
- Environment: The global binding table
- parse_literal: Literal and interpolation parsing
- evaluate_condition: The condition sublanguage used by if / else if
- Interpreter: Executes programs line by line
"""

from .values import (
    Value,
    ValueKind,
    NOTHING,
    int_val,
    float_val,
    string_val,
    bool_val,
    nothing_val,
)

from .environment import (
    Binding,
    Environment,
)

from .literals import (
    parse_literal,
    interpolate,
    is_bare_literal,
)

from .conditions import (
    evaluate_condition,
    evaluate_clause,
)

from .statements import (
    Statement,
    StatementKind,
    parse_statement,
)

from .blocks import (
    BlockRegion,
    scan_block,
)

from .interpreter import (
    Interpreter,
    ExecutionResult,
    execute,
)

__all__ = [
    # Values
    'Value',
    'ValueKind',
    'NOTHING',
    'int_val',
    'float_val',
    'string_val',
    'bool_val',
    'nothing_val',

    # Environment
    'Binding',
    'Environment',

    # Parsing
    'parse_literal',
    'interpolate',
    'is_bare_literal',
    'Statement',
    'StatementKind',
    'parse_statement',

    # Conditions and blocks
    'evaluate_condition',
    'evaluate_clause',
    'BlockRegion',
    'scan_block',

    # Interpreter
    'Interpreter',
    'ExecutionResult',
    'execute',
]
