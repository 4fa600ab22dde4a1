from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .spans import Span


class TokenKind(str, Enum):
    # Identifiers and literals
    IDENT = "IDENT"
    NUMBER = "NUMBER"
    STRING = "STRING"

    # Punctuation / operators
    LBRACE = "{"
    RBRACE = "}"
    LBRACKET = "["
    RBRACKET = "]"
    LPAREN = "("
    RPAREN = ")"
    LANGLE = "<"
    RANGLE = ">"
    SEMI = ";"
    COMMA = ","
    DOT = "."
    EQ = "="
    PLUS = "+"
    MINUS = "-"
    STAR = "*"
    SLASH = "/"
    COLON = ":"
    BANG = "!"

    # Keywords
    CONST = "const"
    LET = "let"
    VAR = "var"
    FUNCTION = "function"
    RETURN = "return"
    IF = "if"
    ELSE = "else"
    NULL = "null"

    # Constants / booleans
    TRUE = "true"
    FALSE = "false"

    EOF = "EOF"


KEYWORDS: dict[str, TokenKind] = {
    k.value: k
    for k in (
        TokenKind.CONST,
        TokenKind.LET,
        TokenKind.VAR,
        TokenKind.FUNCTION,
        TokenKind.RETURN,
        TokenKind.IF,
        TokenKind.ELSE,
        TokenKind.NULL,
        TokenKind.TRUE,
        TokenKind.FALSE,
    )
}


@dataclass(frozen=True, slots=True)
class Token:
    kind: TokenKind
    lexeme: str  # raw source text, quotes included for strings
    span: Span

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.lexeme!r}, {self.span.format()})"
