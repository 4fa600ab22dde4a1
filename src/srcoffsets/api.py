from __future__ import annotations

from pathlib import Path

from .lexer import tokenize
from .offsets import OffsetCursor, OffsetTable
from .spans import Position
from .tokens import Token


def build_table(text: str | bytes) -> OffsetTable:
    return OffsetTable.build(text)


def load_table(path: str | Path) -> OffsetTable:
    # Read bytes so \r and \r\n survive exactly as written.
    p = Path(path).expanduser().resolve()
    return OffsetTable.build(p.read_bytes())


def offset_of(text: str | bytes, line: int, column: int) -> int:
    return OffsetTable.build(text).offset(Position(line=line, column=column))


def token_offsets(
    src: str, *, file: str = "<memory>", table: OffsetTable | None = None
) -> list[tuple[Token, int, int]]:
    """Tokenize `src` and resolve every token span to (start, end) byte offsets."""
    toks = tokenize(src, file=file)
    cursor = OffsetCursor(table if table is not None else OffsetTable.build(src))
    out: list[tuple[Token, int, int]] = []
    for tok in toks:
        start, end = cursor.span_offsets(tok.span)
        out.append((tok, start, end))
    return out
