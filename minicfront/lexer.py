"""Tokenizer for the MiniC expression language."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass
from enum import IntEnum


class TokenKind(IntEnum):
    """Kinds of token produced by :func:`tokenize`."""

    EOF = -1
    T_L_PAREN = 1
    T_R_PAREN = 2
    T_SEMICOLON = 3
    T_L_BRACE = 4
    T_R_BRACE = 5
    T_ASSIGN = 6
    T_COMMA = 7
    T_ADD = 8
    T_SUB = 9
    T_MUL = 10
    T_DIV = 11
    T_MOD = 12
    T_RETURN = 13
    T_INT = 14
    T_VOID = 15
    T_ID = 16
    T_HEX = 17
    T_OCTAL = 18
    T_DECIMAL = 19
    WS = 20
    COMMENT = 21
    LINE_COMMENT = 22

    @property
    def display(self) -> str:
        """The quoted literal text of a fixed token, or its symbolic name."""
        literal = _LITERALS.get(self)
        return f"'{literal}'" if literal is not None else self.name


_LITERALS: dict[TokenKind, str] = {
    TokenKind.T_L_PAREN: "(",
    TokenKind.T_R_PAREN: ")",
    TokenKind.T_SEMICOLON: ";",
    TokenKind.T_L_BRACE: "{",
    TokenKind.T_R_BRACE: "}",
    TokenKind.T_ASSIGN: "=",
    TokenKind.T_COMMA: ",",
    TokenKind.T_ADD: "+",
    TokenKind.T_SUB: "-",
    TokenKind.T_MUL: "*",
    TokenKind.T_DIV: "/",
    TokenKind.T_MOD: "%",
    TokenKind.T_RETURN: "return",
    TokenKind.T_INT: "int",
    TokenKind.T_VOID: "void",
}

# Lexer rules in declaration order; on equal match length the earlier rule wins.
_RULES: list[tuple[TokenKind, re.Pattern[str]]] = [
    *((kind, re.compile(re.escape(text))) for kind, text in _LITERALS.items()),
    (TokenKind.T_ID, re.compile(r"[A-Za-z_][A-Za-z0-9_]*")),
    (TokenKind.T_HEX, re.compile(r"0[xX][0-9a-fA-F]+")),
    (TokenKind.T_OCTAL, re.compile(r"0[0-7]+")),
    (TokenKind.T_DECIMAL, re.compile(r"0|[1-9][0-9]*")),
    (TokenKind.WS, re.compile(r"[ \t\r\n]+")),
    (TokenKind.COMMENT, re.compile(r"/\*.*?\*/", re.DOTALL)),
    (TokenKind.LINE_COMMENT, re.compile(r"//[^\r\n]*")),
]

_SKIPPED = frozenset({TokenKind.WS, TokenKind.COMMENT, TokenKind.LINE_COMMENT})


@dataclass(frozen=True)
class Token:
    """A lexical token with its 1-based line and 0-based column."""

    kind: TokenKind
    text: str
    line: int
    column: int


class LexError(ValueError):
    """Raised when the input holds a character no rule accepts."""

    def __init__(self, char: str, line: int, column: int) -> None:
        super().__init__(f"line {line}:{column} token recognition error at: {char!r}")
        self.char = char
        self.line = line
        self.column = column


def _longest_match(source: str, pos: int) -> tuple[TokenKind, str] | None:
    best: tuple[TokenKind, str] | None = None
    for kind, pattern in _RULES:
        match = pattern.match(source, pos)
        if match and (best is None or len(match.group()) > len(best[1])):
            best = (kind, match.group())
    return best


def _scan(source: str) -> Iterator[Token]:
    pos = 0
    line = 1
    line_start = 0
    while pos < len(source):
        found = _longest_match(source, pos)
        column = pos - line_start
        if found is None:
            raise LexError(source[pos], line, column)
        kind, text = found
        if kind not in _SKIPPED:
            yield Token(kind, text, line, column)
        newlines = text.count("\n")
        if newlines:
            line += newlines
            line_start = pos + text.rfind("\n") + 1
        pos += len(text)
    yield Token(TokenKind.EOF, "<EOF>", line, pos - line_start)


def tokenize(source: str) -> list[Token]:
    """Split source text into tokens, dropping whitespace and comments.

    The returned list always ends with a single EOF token.
    """
    return list(_scan(source))