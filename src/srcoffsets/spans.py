from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Position:
    """A location as reported by a parser.

    Lines are 1-based. Columns are 0-based and count code points, not bytes.
    """

    line: int
    column: int

    def format(self) -> str:
        return f"{self.line}:{self.column}"


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open span [start, end) in a single file."""

    file: str
    start: Position
    end: Position

    def format(self) -> str:
        return f"{self.file}:{self.start.line}:{self.start.column}"
