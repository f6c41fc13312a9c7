"""Literal tokenization: strings, chars, numbers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .tokens import TokenType

if TYPE_CHECKING:
    from .lexer import Lexer


def read_string(lex: Lexer):
    """Read a double-quoted string literal, quotes included."""
    _read_quoted(lex, '"', TokenType.STRING_LIT)


def read_char(lex: Lexer):
    """Read a single-quoted char literal, quotes included."""
    _read_quoted(lex, "'", TokenType.CHAR_LIT)


def _read_quoted(lex: Lexer, quote: str, token_type: TokenType):
    start = lex.pos
    lex._advance()  # opening quote
    while not lex._at_end():
        ch = lex._advance()
        if ch == '\\':
            # A backslash escapes exactly one character
            if not lex._at_end():
                lex._advance()
            continue
        if ch == quote:
            break
    # Unterminated literals run to the end of input
    lex._emit(token_type, lex.source[start:lex.pos])


def read_number(lex: Lexer):
    """Read a hex run or a decimal with optional fraction and exponent."""
    start = lex.pos

    # Hex prefix: 0x...
    if lex._peek() == '0' and lex._peek(1) in ('x', 'X'):
        lex._advance()  # 0
        lex._advance()  # x
        while not lex._at_end() and _is_hex_digit(lex._peek()):
            lex._advance()
        lex._emit(TokenType.NUMBER, lex.source[start:lex.pos])
        return

    # Decimal digits
    while not lex._at_end() and is_digit(lex._peek()):
        lex._advance()

    # Fraction
    if lex._peek() == '.':
        lex._advance()
        while not lex._at_end() and is_digit(lex._peek()):
            lex._advance()

    # Exponent
    if lex._peek() in ('e', 'E'):
        lex._advance()
        if lex._peek() in ('+', '-'):
            lex._advance()
        while not lex._at_end() and is_digit(lex._peek()):
            lex._advance()

    lex._emit(TokenType.NUMBER, lex.source[start:lex.pos])


def is_digit(ch: str) -> bool:
    return '0' <= ch <= '9'


def _is_hex_digit(ch: str) -> bool:
    return is_digit(ch) or ch.lower() in ('a', 'b', 'c', 'd', 'e', 'f')
