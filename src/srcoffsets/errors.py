from __future__ import annotations

from dataclasses import dataclass

from .spans import Position, Span


@dataclass(slots=True)
class PositionError(Exception):
    """A position that does not belong to the table's text."""

    position: Position
    message: str
    hint: str | None = None
    line_count: int | None = None

    def __str__(self) -> str:
        base = f"{self.position.format()}: {self.message}"
        if self.hint:
            return f"{base}\nhint: {self.hint}"
        return base


@dataclass(slots=True)
class LexError(Exception):
    span: Span
    message: str
    hint: str | None = None

    def __str__(self) -> str:
        base = f"{self.span.format()}: {self.message}"
        if self.hint:
            return f"{base}\nhint: {self.hint}"
        return base
