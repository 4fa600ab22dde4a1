from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from .errors import PositionError
from .spans import Position, Span


LOGGER = logging.getLogger(__name__)

# \r\n must come before \r so a Windows line ending counts once.
# U+2028 and U+2029 are E2 80 A8 / E2 80 A9 in UTF-8.
_TERMINATOR_RE = re.compile(rb"\r\n|\r|\n|\xe2\x80[\xa8\xa9]")

_LF = 0x0A
_CR = 0x0D
_E2 = 0xE2


def _terminator_at(data: bytes, i: int) -> bool:
    b = data[i]
    if b == _LF or b == _CR:
        return True
    return b == _E2 and data[i + 1 : i + 3] in (b"\x80\xa8", b"\x80\xa9")


def _char_width(lead: int) -> int:
    """Width in bytes of the UTF-8 sequence starting with `lead`."""
    if lead < 0x80:
        return 1
    if lead < 0xE0:
        return 2
    if lead < 0xF0:
        return 3
    return 4


def _as_bytes(text: str | bytes | bytearray | memoryview) -> bytes:
    if isinstance(text, str):
        return text.encode("utf-8")
    return bytes(text)


@dataclass(frozen=True, slots=True)
class OffsetTable:
    """Maps parser positions to byte offsets in one UTF-8 text.

    `line_starts[i]` is the byte offset where line i + 1 begins. The table
    never changes after `build()`, so it can be shared freely.
    """

    text: bytes
    line_starts: tuple[int, ...]

    @classmethod
    def build(cls, text: str | bytes | bytearray | memoryview) -> "OffsetTable":
        data = _as_bytes(text)
        starts = [0]
        starts.extend(m.end() for m in _TERMINATOR_RE.finditer(data))
        LOGGER.debug("built offset table: %d lines, %d bytes", len(starts), len(data))
        return cls(text=data, line_starts=tuple(starts))

    @property
    def line_count(self) -> int:
        return len(self.line_starts)

    def __len__(self) -> int:
        return len(self.line_starts)

    def line_start(self, line: int) -> int:
        self._check(Position(line=line, column=0))
        return self.line_starts[line - 1]

    def offset(self, pos: Position) -> int:
        """Byte offset of `pos`.

        Columns at or past the end of a line stop on the first byte of the
        line terminator, or on len(text) for the last line.
        """
        self._check(pos)
        offset, _ = self._walk(self.line_starts[pos.line - 1], 0, pos.column)
        return offset

    def offset_at(self, line: int, column: int) -> int:
        return self.offset(Position(line=line, column=column))

    def span_offsets(self, span: Span) -> tuple[int, int]:
        return self.offset(span.start), self.offset(span.end)

    def _check(self, pos: Position) -> None:
        if pos.line < 1 or pos.line > len(self.line_starts):
            raise PositionError(
                position=pos,
                message=f"line {pos.line} out of range",
                hint=f"text has {len(self.line_starts)} line(s); was the table built from the same text?",
                line_count=len(self.line_starts),
            )
        if pos.column < 0:
            raise PositionError(
                position=pos,
                message=f"negative column {pos.column}",
                line_count=len(self.line_starts),
            )

    def _walk(self, i: int, column: int, target: int) -> tuple[int, int]:
        # Returns (offset, column reached). The column reached is less than
        # target when the walk hit a terminator or the end of the text.
        data = self.text
        n = len(data)
        while column < target and i < n:
            if _terminator_at(data, i):
                break
            i += _char_width(data[i])
            column += 1
        return min(i, n), column


class OffsetCursor:
    """Caller-owned memo over an OffsetTable for mostly increasing queries.

    Positions produced by a left-to-right walk usually land on the same line
    at growing columns; the cursor resumes from the previous answer instead
    of rescanning from the line start. Results always equal table.offset().
    """

    __slots__ = ("table", "_line", "_column", "_offset")

    def __init__(self, table: OffsetTable) -> None:
        self.table = table
        self.reset()

    def reset(self) -> None:
        self._line = 0
        self._column = 0
        self._offset = 0

    def offset(self, pos: Position) -> int:
        table = self.table
        table._check(pos)
        if pos.line == self._line and pos.column >= self._column:
            start, column = self._offset, self._column
        else:
            start, column = table.line_starts[pos.line - 1], 0
        offset, column = table._walk(start, column, pos.column)
        self._line, self._column, self._offset = pos.line, column, offset
        return offset

    def span_offsets(self, span: Span) -> tuple[int, int]:
        return self.offset(span.start), self.offset(span.end)
