from __future__ import annotations

import re
from dataclasses import dataclass

from .errors import LexError
from .spans import Position, Span
from .tokens import KEYWORDS, Token, TokenKind


_IDENT_RE = re.compile(r"(?:[^\W\d]|\$)(?:\w|\$)*")
_NUMBER_RE = re.compile(
    r"(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
)

_TERMINATORS = "\n\r\u2028\u2029"
_WHITESPACE = " \t\v\f\xa0\ufeff" + _TERMINATORS

_PUNCT = {
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    "[": TokenKind.LBRACKET,
    "]": TokenKind.RBRACKET,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "<": TokenKind.LANGLE,
    ">": TokenKind.RANGLE,
    ";": TokenKind.SEMI,
    ",": TokenKind.COMMA,
    ".": TokenKind.DOT,
    "=": TokenKind.EQ,
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    ":": TokenKind.COLON,
    "!": TokenKind.BANG,
}


@dataclass(slots=True)
class _Cursor:
    file: str
    src: str
    i: int = 0
    line: int = 1
    col: int = 0

    def eof(self) -> bool:
        return self.i >= len(self.src)

    def peek(self, n: int = 0) -> str:
        j = self.i + n
        if j >= len(self.src):
            return ""
        return self.src[j]

    def advance(self, n: int = 1) -> None:
        for _ in range(n):
            if self.eof():
                return
            ch = self.src[self.i]
            self.i += 1
            if ch == "\r" and self.peek() == "\n":
                # first half of \r\n; the \n ends the line
                continue
            if ch in _TERMINATORS:
                self.line += 1
                self.col = 0
            else:
                self.col += 1

    def pos(self) -> Position:
        return Position(line=self.line, column=self.col)


def tokenize(src: str, *, file: str = "<memory>") -> list[Token]:
    """Split `src` into tokens.

    Token spans use the usual parser convention: lines start at 1, columns
    start at 0 and count code points, and `end` points just past the token.
    """
    cur = _Cursor(file=file, src=src)
    tokens: list[Token] = []

    def make_span(start: Position, end: Position) -> Span:
        return Span(file=file, start=start, end=end)

    def emit(kind: TokenKind, start: Position, start_i: int) -> None:
        tokens.append(Token(kind, src[start_i : cur.i], make_span(start, cur.pos())))

    def error_at(start: Position, msg: str, hint: str | None = None) -> LexError:
        return LexError(span=make_span(start, cur.pos()), message=msg, hint=hint)

    while not cur.eof():
        ch = cur.peek()

        if ch in _WHITESPACE:
            cur.advance()
            continue

        # line comment //
        if ch == "/" and cur.peek(1) == "/":
            cur.advance(2)
            while not cur.eof() and cur.peek() not in _TERMINATORS:
                cur.advance()
            continue

        # block comment /* ... */
        if ch == "/" and cur.peek(1) == "*":
            start = cur.pos()
            cur.advance(2)
            while not cur.eof():
                if cur.peek() == "*" and cur.peek(1) == "/":
                    cur.advance(2)
                    break
                cur.advance()
            else:
                raise error_at(start, "unterminated block comment", hint="add closing */")
            continue

        start = cur.pos()
        start_i = cur.i

        # strings: "..." or '...'
        if ch in "\"'":
            quote = ch
            cur.advance()
            while not cur.eof():
                c = cur.peek()
                if c == quote:
                    cur.advance()
                    emit(TokenKind.STRING, start, start_i)
                    break
                if c in _TERMINATORS:
                    raise error_at(start, "unterminated string literal", hint="close the quote")
                if c == "\\":
                    esc = cur.peek(1)
                    if esc == "" or esc in _TERMINATORS:
                        raise error_at(start, "unterminated string escape")
                    cur.advance(2)
                    continue
                cur.advance()
            else:
                raise error_at(start, "unterminated string literal", hint="close the quote")
            continue

        m = _NUMBER_RE.match(src, cur.i)
        if m:
            cur.advance(len(m.group(0)))
            emit(TokenKind.NUMBER, start, start_i)
            continue

        # identifiers / keywords
        m = _IDENT_RE.match(src, cur.i)
        if m:
            lex = m.group(0)
            cur.advance(len(lex))
            emit(KEYWORDS.get(lex, TokenKind.IDENT), start, start_i)
            continue

        k = _PUNCT.get(ch)
        if k is not None:
            cur.advance()
            emit(k, start, start_i)
            continue

        raise error_at(
            start,
            f"unexpected character {ch!r}",
            hint="remove the character or replace it with valid syntax",
        )

    eof_pos = cur.pos()
    tokens.append(Token(TokenKind.EOF, "", Span(file=file, start=eof_pos, end=eof_pos)))
    return tokens
