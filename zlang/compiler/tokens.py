"""Token definitions for the zlang language.

Tokens are a flat tagged variant: a TokenType plus the exact text that was
matched. NEWLINE and EOF carry no text. Token lists are the only
representation shared between passes.
"""

from enum import Enum, auto
from dataclasses import dataclass


class TokenType(Enum):
    IDENTIFIER = auto()
    NUMBER = auto()
    STRING_LIT = auto()
    CHAR_LIT = auto()
    SYMBOL = auto()      # operators and punctuation, multi-char when listed below
    COMMENT = auto()     # // ... or /* ... */, kept verbatim
    NEWLINE = auto()
    EOF = auto()


@dataclass
class Token:
    type: TokenType
    value: str = ""

    def __repr__(self):
        if self.type in (TokenType.NEWLINE, TokenType.EOF):
            return f"Token({self.type.name})"
        return f"Token({self.type.name}, {self.value!r})"

    @property
    def text(self) -> str:
        """Source text of the token as it appears in generated code."""
        if self.type == TokenType.NEWLINE:
            return "\n"
        return self.value


# Multi-character operators, matched longest first. Anything else becomes a
# single-character SYMBOL.
OPERATORS: tuple[str, ...] = (
    ">>=", "<<=",
    "==", "!=", "<=", ">=", "->", "++", "--", "&&", "||",
    "+=", "-=", "*=", "/=", "%=", "&=", "|=", "^=",
    "<<", ">>", "::", "=>",
)


def ident(value: str) -> Token:
    return Token(TokenType.IDENTIFIER, value)


def symbol(value: str) -> Token:
    return Token(TokenType.SYMBOL, value)


def is_symbol(tok: Token, *values: str) -> bool:
    """True if tok is a SYMBOL, optionally one of the given spellings."""
    if tok.type != TokenType.SYMBOL:
        return False
    return not values or tok.value in values


def is_ident(tok: Token, *values: str) -> bool:
    """True if tok is an IDENTIFIER, optionally one of the given names."""
    if tok.type != TokenType.IDENTIFIER:
        return False
    return not values or tok.value in values


def token_at(tokens: list[Token], index: int) -> Token:
    """Bounds-safe lookup; past the end reads as EOF."""
    if 0 <= index < len(tokens):
        return tokens[index]
    return Token(TokenType.EOF)
