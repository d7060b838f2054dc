"""
Block matching for if / else if / else / end.

Blocks are not parsed into a tree. For an `if` at line i the matching `end`
is found by a forward scan with a depth counter, and the same-depth
`else if` / `else` markers partition the lines in between into bodies.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ..errors import error_missing_end

IF_PREFIX = "if "
ELSE_IF_PREFIX = "else if "
ELSE = "else"
END = "end"
THEN_SUFFIX = " then"


def is_if(line: str) -> bool:
    return line.startswith(IF_PREFIX)


def is_else_if(line: str) -> bool:
    return line.startswith(ELSE_IF_PREFIX)


def condition_text(line: str, prefix: str) -> str:
    """Strip the keyword prefix and an optional trailing ' then'."""
    text = line[len(prefix):]
    if text.endswith(THEN_SUFFIX):
        text = text[:-len(THEN_SUFFIX)]
    return text.strip()


@dataclass
class BlockRegion:
    """Line indices of one if construct; all indices are 0-based."""
    start: int                          # the `if` line
    end: int                            # the matching `end` line
    else_ifs: List[int] = field(default_factory=list)
    else_index: Optional[int] = None
    extra_elses: List[int] = field(default_factory=list)   # ignored duplicates

    @property
    def markers(self) -> List[int]:
        """Same-depth else if / else lines in source order."""
        found = self.else_ifs + self.extra_elses
        if self.else_index is not None:
            found.append(self.else_index)
        return sorted(found)

    def body_stop(self, marker: int) -> int:
        """End (exclusive) of the body that starts after the given line."""
        for index in self.markers:
            if index > marker:
                return index
        return self.end


def scan_block(lines: Sequence[str], start: int) -> BlockRegion:
    """
    Find the matching end and same-depth branches of the `if` at start.

    Raises:
        BlockStructureError: If the `if` has no matching `end`
    """
    depth = 1
    region = BlockRegion(start=start, end=-1)
    for index in range(start + 1, len(lines)):
        line = lines[index].strip()
        if is_if(line):
            depth += 1
        elif line == END:
            depth -= 1
            if depth == 0:
                region.end = index
                return region
        elif depth == 1 and is_else_if(line):
            region.else_ifs.append(index)
        elif depth == 1 and line == ELSE:
            if region.else_index is None:
                region.else_index = index
            else:
                region.extra_elses.append(index)
    raise error_missing_end(lines[start].strip())
