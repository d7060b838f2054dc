"""
booklang - an English-like, line-oriented scripting language.

A program is a sequence of lines:

    let name be 'World'
    constant greeting is "Hello, {name}!"
    call print with greeting
    let x be 5
    if x is greater than 3 and x is less than 10 then
        call print with 'in range'
    else
        call print with 'out of range'
    end

Usage:
    from booklang import execute, Interpreter

    result = execute(source)
    if result.success:
        print("\\n".join(result.output))
    else:
        print(result.error)

    # Or raise on the first error
    output = Interpreter().run(source)
"""

from .source import (
    SourceLocation,
    SourceProgram,
)

from .errors import (
    ErrorSeverity,
    Diagnostic,
    BookError,
    LiteralError,
    NameLookupError,
    MutabilityError,
    DuplicateDeclarationError,
    StatementSyntaxError,
    BlockStructureError,
    ValueTypeError,
    ConditionSyntaxError,
    ConfigError,
)

from .config import (
    InterpreterConfig,
    load_config,
    resolve_config,
)

from .runtime import (
    Value,
    ValueKind,
    Environment,
    parse_literal,
    evaluate_condition,
    Interpreter,
    ExecutionResult,
    execute,
)

from .checker import (
    CheckResult,
    check_program,
)

__version__ = "0.1.0"

__all__ = [
    # Source
    'SourceLocation',
    'SourceProgram',

    # Errors
    'ErrorSeverity',
    'Diagnostic',
    'BookError',
    'LiteralError',
    'NameLookupError',
    'MutabilityError',
    'DuplicateDeclarationError',
    'StatementSyntaxError',
    'BlockStructureError',
    'ValueTypeError',
    'ConditionSyntaxError',
    'ConfigError',

    # Config
    'InterpreterConfig',
    'load_config',
    'resolve_config',

    # Runtime
    'Value',
    'ValueKind',
    'Environment',
    'parse_literal',
    'evaluate_condition',
    'Interpreter',
    'ExecutionResult',
    'execute',

    # Checker
    'CheckResult',
    'check_program',
]
