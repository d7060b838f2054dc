"""
Source programs for the booklang interpreter.

A program is an immutable, 0-indexed sequence of text lines. Block matching
needs full lookahead, so the whole program is materialized before execution.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, TextIO, Tuple, Union


@dataclass(frozen=True)
class SourceLocation:
    """Represents a line in a source program."""
    line: int                       # 1-indexed line number
    filename: Optional[str] = None

    def __str__(self) -> str:
        if self.filename:
            return f"{self.filename}:{self.line}"
        return f"line {self.line}"


@dataclass(frozen=True)
class SourceProgram:
    """An ordered, immutable sequence of source lines."""
    lines: Tuple[str, ...]
    filename: Optional[str] = None

    def __len__(self) -> int:
        return len(self.lines)

    def __getitem__(self, index: int) -> str:
        return self.lines[index]

    def location(self, index: int) -> SourceLocation:
        """Location of the line at a 0-based index."""
        return SourceLocation(index + 1, self.filename)

    @classmethod
    def from_lines(cls, lines: Iterable[str], filename: Optional[str] = None) -> "SourceProgram":
        return cls(tuple(line.rstrip("\r\n") for line in lines), filename)

    @classmethod
    def from_text(cls, text: str, filename: Optional[str] = None) -> "SourceProgram":
        return cls(tuple(text.splitlines()), filename)

    @classmethod
    def from_stream(cls, stream: TextIO, filename: Optional[str] = None) -> "SourceProgram":
        """Read a stream to exhaustion."""
        return cls.from_lines(stream, filename)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "SourceProgram":
        path = Path(path)
        return cls.from_text(path.read_text(encoding="utf-8"), str(path))


def as_program(source: Union[str, Iterable[str], SourceProgram]) -> SourceProgram:
    """Coerce program text, a line sequence, or a SourceProgram to a SourceProgram."""
    if isinstance(source, SourceProgram):
        return source
    if isinstance(source, str):
        return SourceProgram.from_text(source)
    return SourceProgram.from_lines(source)
