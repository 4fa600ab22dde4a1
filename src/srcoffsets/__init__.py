from __future__ import annotations

from .api import build_table, load_table, offset_of, token_offsets
from .errors import LexError, PositionError
from .lexer import tokenize
from .offsets import OffsetCursor, OffsetTable
from .spans import Position, Span

__all__ = [
    "LexError",
    "OffsetCursor",
    "OffsetTable",
    "Position",
    "PositionError",
    "Span",
    "build_table",
    "load_table",
    "offset_of",
    "token_offsets",
    "tokenize",
]
