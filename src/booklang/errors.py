"""
Interpreter exceptions and diagnostics.

Every error in booklang is fatal: execution stops at the first one. The only
lenient lookup is string interpolation, which never raises.

Error code ranges:
- E1xx: Literal errors
- E2xx: Lookup errors
- E3xx: Mutability errors
- E4xx: Declaration errors
- E5xx: Statement and block syntax errors
- E6xx: Type errors
- E7xx: Condition syntax errors
- E8xx: Configuration errors
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import List, Optional

from .source import SourceLocation


class ErrorSeverity(Enum):
    """Severity levels for diagnostics."""
    ERROR = "error"
    WARNING = "warning"


@dataclass
class Diagnostic:
    """A single diagnostic message (error or warning)."""
    code: str                       # E101, E201, etc.
    message: str                    # Human-readable message
    severity: ErrorSeverity = ErrorSeverity.ERROR
    location: Optional[SourceLocation] = None
    source_line: Optional[str] = None   # The offending line of source code
    hints: List[str] = field(default_factory=list)

    def format(self, show_source: bool = True) -> str:
        """Format the diagnostic for display."""
        parts = []

        header = f"{self.severity.value}[{self.code}]: {self.message}"
        if self.location is not None:
            header = f"{self.location}: {header}"
        parts.append(header)

        if show_source and self.source_line is not None and self.location is not None:
            parts.append("  |")
            parts.append(f"{self.location.line:>3} | {self.source_line}")

        for hint in self.hints:
            parts.append(f"    = hint: {hint}")

        return "\n".join(parts)

    def to_json(self) -> dict:
        """Convert to JSON-serializable dict for tooling integration."""
        return {
            "code": self.code,
            "message": self.message,
            "severity": self.severity.value,
            "line": self.location.line if self.location else None,
            "file": self.location.filename if self.location else None,
            "source": self.source_line,
            "hints": self.hints,
        }


class BookError(Exception):
    """Base exception for fatal interpreter errors."""

    def __init__(self, diagnostic: Diagnostic):
        self.diagnostic = diagnostic
        super().__init__(diagnostic.message)

    @property
    def code(self) -> str:
        return self.diagnostic.code

    def at(self, location: SourceLocation, source_line: str) -> "BookError":
        """Attach a source location unless one is already present."""
        if self.diagnostic.location is None:
            self.diagnostic = replace(self.diagnostic, location=location, source_line=source_line)
        return self

    def __str__(self) -> str:
        return self.diagnostic.format()


class LiteralError(BookError):
    """Unrecognized literal syntax (E1xx)."""
    pass


class NameLookupError(BookError):
    """Reference to an undeclared variable (E2xx)."""
    pass


class MutabilityError(BookError):
    """Reassignment of a constant (E3xx)."""
    pass


class DuplicateDeclarationError(BookError):
    """Redeclaration of an existing name (E4xx)."""
    pass


class StatementSyntaxError(BookError):
    """Line matching no statement form (E501)."""
    pass


class BlockStructureError(StatementSyntaxError):
    """Malformed if/else if/else/end block (E502)."""
    pass


class ValueTypeError(BookError):
    """Numeric operation on a non-numeric value (E6xx)."""
    pass


class ConditionSyntaxError(BookError):
    """Condition clause matching no operator (E7xx)."""
    pass


class ConfigError(BookError):
    """Invalid interpreter configuration (E8xx)."""
    pass


# --- Literal errors ---

def error_unrecognized_literal(token: str) -> LiteralError:
    """E101: Unrecognized literal."""
    diag = Diagnostic(
        code="E101",
        message=f"unrecognized literal '{token}'",
        hints=["literals are 'text', \"text with {name}\", numbers, true, false or nothing"],
    )
    return LiteralError(diag)


# --- Lookup errors ---

def error_undeclared_variable(name: str) -> NameLookupError:
    """E201: Undeclared variable."""
    diag = Diagnostic(
        code="E201",
        message=f"unknown variable '{name}'",
        hints=[f"declare it first with 'let {name} be <value>'"],
    )
    return NameLookupError(diag)


# --- Mutability errors ---

def error_constant_reassignment(name: str) -> MutabilityError:
    """E301: Reassignment of a constant."""
    diag = Diagnostic(
        code="E301",
        message=f"cannot reassign constant '{name}'",
    )
    return MutabilityError(diag)


# --- Declaration errors ---

def error_duplicate_declaration(name: str) -> DuplicateDeclarationError:
    """E401: Name declared twice."""
    diag = Diagnostic(
        code="E401",
        message=f"'{name}' is already declared",
        hints=[f"use '{name} becomes <value>' to change a variable"],
    )
    return DuplicateDeclarationError(diag)


# --- Statement errors ---

def error_unrecognized_statement(line: str, hint: Optional[str] = None) -> StatementSyntaxError:
    """E501: Unrecognized statement."""
    diag = Diagnostic(
        code="E501",
        message=f"unrecognized statement '{line}'",
        hints=[hint] if hint else [],
    )
    return StatementSyntaxError(diag)


def error_missing_end(line: str) -> BlockStructureError:
    """E502: If block without a matching end."""
    diag = Diagnostic(
        code="E502",
        message=f"'{line}' has no matching 'end'",
    )
    return BlockStructureError(diag)


# --- Type errors ---

def error_not_a_number(text: str, kind: str) -> ValueTypeError:
    """E601: Numeric comparison on a non-number."""
    diag = Diagnostic(
        code="E601",
        message=f"cannot compare {kind} value '{text}' as a number",
    )
    return ValueTypeError(diag)


# --- Condition errors ---

def error_unparseable_condition(clause: str) -> ConditionSyntaxError:
    """E701: Condition clause with no recognized operator."""
    diag = Diagnostic(
        code="E701",
        message=f"cannot parse condition '{clause}'",
        hints=["use 'is', 'is not', 'is greater than' or 'is less than'"],
    )
    return ConditionSyntaxError(diag)


# --- Configuration errors ---

def error_invalid_config(message: str, filename: Optional[str] = None) -> ConfigError:
    """E801: Invalid configuration."""
    diag = Diagnostic(
        code="E801",
        message=f"invalid configuration: {message}",
        location=SourceLocation(1, filename) if filename else None,
    )
    return ConfigError(diag)


# --- Warnings ---

def warning_duplicate_else(location: SourceLocation, source_line: str) -> Diagnostic:
    """W001: Second else in the same block is never reached."""
    return Diagnostic(
        code="W001",
        message="duplicate 'else' in block; only the first one is used",
        severity=ErrorSeverity.WARNING,
        location=location,
        source_line=source_line,
    )
