"""
Binding environment for the booklang interpreter.

There is a single global scope: blocks do not introduce new bindings, and a
binding lives until the end of the run. The environment is not safe to
share between threads without external locking.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, Optional

from .values import Value
from ..errors import (
    error_constant_reassignment,
    error_duplicate_declaration,
    error_undeclared_variable,
)

logger = logging.getLogger(__name__)


@dataclass
class Binding:
    """A value and whether it may be reassigned."""
    value: Value
    is_constant: bool = False


@dataclass
class Environment:
    """
    Mapping from case-sensitive variable names to bindings.

    Set `allow_redeclaration` to let `let`/`constant` replace an existing
    binding instead of raising a DuplicateDeclarationError.
    """
    bindings: Dict[str, Binding] = field(default_factory=dict)
    allow_redeclaration: bool = False

    def __contains__(self, name: str) -> bool:
        return name in self.bindings

    def __iter__(self) -> Iterator[str]:
        return iter(self.bindings)

    def __len__(self) -> int:
        return len(self.bindings)

    def get(self, name: str) -> Optional[Value]:
        """Look up a variable, returning None if it is not declared."""
        binding = self.bindings.get(name)
        if binding is None:
            return None
        return binding.value

    def lookup(self, name: str) -> Value:
        """Look up a variable, raising NameLookupError if it is not declared."""
        binding = self.bindings.get(name)
        if binding is None:
            raise error_undeclared_variable(name)
        return binding.value

    def is_constant(self, name: str) -> bool:
        binding = self.bindings.get(name)
        return binding is not None and binding.is_constant

    def declare(self, name: str, value: Value, constant: bool = False) -> None:
        """Create a new binding."""
        if name in self.bindings:
            if not self.allow_redeclaration:
                raise error_duplicate_declaration(name)
            logger.debug("redeclaring %r", name)
        self.bindings[name] = Binding(value, constant)
        logger.debug("declared %s %r = %r", "constant" if constant else "variable", name, value)

    def check_assignable(self, name: str) -> Binding:
        """Return the binding for name, or raise if it cannot be reassigned."""
        binding = self.bindings.get(name)
        if binding is None:
            raise error_undeclared_variable(name)
        if binding.is_constant:
            raise error_constant_reassignment(name)
        return binding

    def assign(self, name: str, value: Value) -> None:
        """Replace the value of an existing, non-constant binding."""
        binding = self.check_assignable(name)
        binding.value = value
        logger.debug("assigned %r = %r", name, value)
