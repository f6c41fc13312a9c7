"""Lexer for the zlang language.

Longest-match and total: every input produces a token list ending in a
single EOF. Bytes that start no known token become one-character symbols,
so malformed input flows through to later passes unchanged.
"""

import logging

from .lexer_literals import is_digit, read_char, read_number, read_string
from .tokens import OPERATORS, Token, TokenType

logger = logging.getLogger(__name__)


class Lexer:
    def __init__(self, source: str):
        self.source = source
        self.pos = 0
        self.tokens: list[Token] = []

        # Operator trie for longest-match tokenization
        self._op_trie = _build_trie(OPERATORS)

    def tokenize(self) -> list[Token]:
        while self.pos < len(self.source):
            ch = self.source[self.pos]

            if ch == '\n':
                self._advance()
                self._emit(TokenType.NEWLINE, "")
            elif ch.isspace():
                self._advance()
            elif ch == '/' and self._peek(1) == '/':
                self._read_line_comment()
            elif ch == '/' and self._peek(1) == '*':
                self._read_block_comment()
            elif ch == '"':
                self._read_string()
            elif ch == "'":
                self._read_char()
            elif is_digit(ch) or (ch == '.' and is_digit(self._peek(1))):
                self._read_number()
            elif _is_ident_start(ch):
                self._read_identifier()
            else:
                self._read_operator()

        self._emit(TokenType.EOF, "")
        logger.debug("lexed %d characters into %d tokens",
                     len(self.source), len(self.tokens))
        return self.tokens

    # --- Character helpers ---

    def _peek(self, offset: int = 0) -> str:
        pos = self.pos + offset
        if pos < len(self.source):
            return self.source[pos]
        return '\0'

    def _advance(self) -> str:
        ch = self.source[self.pos]
        self.pos += 1
        return ch

    def _at_end(self) -> bool:
        return self.pos >= len(self.source)

    def _emit(self, token_type: TokenType, value: str):
        self.tokens.append(Token(token_type, value))

    # --- Comments (kept as tokens so they survive into the output) ---

    def _read_line_comment(self):
        start = self.pos
        while not self._at_end() and self._peek() != '\n':
            self._advance()
        self._emit(TokenType.COMMENT, self.source[start:self.pos])

    def _read_block_comment(self):
        start = self.pos
        self._advance()  # /
        self._advance()  # *
        while not self._at_end():
            if self._peek() == '*' and self._peek(1) == '/':
                self._advance()
                self._advance()
                break
            self._advance()
        # Unterminated comments run to the end of input
        self._emit(TokenType.COMMENT, self.source[start:self.pos])

    # --- Literals (delegated to lexer_literals.py) ---

    def _read_string(self):
        read_string(self)

    def _read_char(self):
        read_char(self)

    def _read_number(self):
        read_number(self)

    # --- Identifier ---

    def _read_identifier(self):
        start = self.pos
        while not self._at_end() and _is_ident_char(self._peek()):
            self._advance()
        self._emit(TokenType.IDENTIFIER, self.source[start:self.pos])

    # --- Operators and punctuation (trie-based longest match) ---

    def _read_operator(self):
        node = self._op_trie
        best_len = 0
        i = 0
        while self.pos + i < len(self.source):
            ch = self.source[self.pos + i]
            if ch not in node:
                break
            node = node[ch]
            i += 1
            if '' in node:  # terminal marker
                best_len = i

        # Single-character fallback
        length = best_len or 1
        value = self.source[self.pos:self.pos + length]
        self.pos += length
        self._emit(TokenType.SYMBOL, value)


def tokenize(source: str) -> list[Token]:
    return Lexer(source).tokenize()


def _is_ident_start(ch: str) -> bool:
    return ch == '_' or ('a' <= ch <= 'z') or ('A' <= ch <= 'Z')


def _is_ident_char(ch: str) -> bool:
    return _is_ident_start(ch) or is_digit(ch)


def _build_trie(operators: tuple[str, ...]) -> dict:
    """Build a trie from operator strings for longest-match tokenization.

    Each node is a dict mapping character -> child node.
    Terminal nodes have a '' -> operator entry.
    """
    root: dict = {}
    for op in operators:
        node = root
        for ch in op:
            if ch not in node:
                node[ch] = {}
            node = node[ch]
        node[''] = op  # terminal marker
    return root
