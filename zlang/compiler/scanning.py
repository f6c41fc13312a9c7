"""Depth-counting helpers shared by the structural passes.

None of the passes parse C. Blocks are found by counting braces and
parentheses, and namespaces are tracked by remembering the brace depth at
which each one was opened.
"""

from __future__ import annotations

from .tokens import Token, is_ident, is_symbol, token_at


def capture_braced(tokens: list[Token], open_index: int) -> tuple[list[Token], int]:
    """Collect the tokens between the '{' at open_index and its matching '}'.

    Returns (body, index just past the closing brace). The closing brace is
    not part of the body. An unterminated block runs to the end of tokens.
    """
    return _capture(tokens, open_index, "{", "}")


def capture_parens(tokens: list[Token], open_index: int) -> tuple[list[Token], int]:
    """Like capture_braced, for a '(' ... ')' group."""
    return _capture(tokens, open_index, "(", ")")


def _capture(tokens: list[Token], open_index: int,
             opener: str, closer: str) -> tuple[list[Token], int]:
    depth = 1
    body: list[Token] = []
    i = open_index + 1
    while i < len(tokens) and depth > 0:
        tok = tokens[i]
        if is_symbol(tok, opener):
            depth += 1
        elif is_symbol(tok, closer):
            depth -= 1
        if depth > 0:
            body.append(tok)
        i += 1
    return body, i


def find_symbol(tokens: list[Token], start: int, value: str,
                stop: tuple[str, ...] = ()) -> int | None:
    """Index of the first `value` symbol at or after start.

    Returns None if a symbol from `stop` comes first or tokens run out.
    """
    i = start
    while i < len(tokens):
        tok = tokens[i]
        if is_symbol(tok, value):
            return i
        if stop and is_symbol(tok, *stop):
            return None
        i += 1
    return None


def namespace_at(tokens: list[Token], i: int) -> str | None:
    """Name of the namespace if `namespace Name {` starts at i."""
    if (is_ident(token_at(tokens, i), "namespace")
            and is_ident(token_at(tokens, i + 1))
            and is_symbol(token_at(tokens, i + 2), "{")):
        return tokens[i + 1].value
    return None


def class_at(tokens: list[Token], i: int) -> str | None:
    """Name of the class if `class Name` starts at i."""
    if is_ident(token_at(tokens, i), "class") and is_ident(token_at(tokens, i + 1)):
        return tokens[i + 1].value
    return None


class NamespaceTracker:
    """Follows `namespace Name { ... }` groupings during a linear scan.

    Namespaces are a name plus a brace grouping: a namespace ends at the
    brace that brings the depth back to where it was opened. Classes get the
    innermost active name; there is no nesting of prefixes.
    """

    def __init__(self):
        self.depth = 0
        self._open: list[tuple[str, int]] = []  # (name, depth inside its braces)

    @property
    def current(self) -> str | None:
        if self._open:
            return self._open[-1][0]
        return None

    def enter(self, tokens: list[Token], i: int) -> int | None:
        """If a namespace opens at i, enter it and return the index after '{'."""
        name = namespace_at(tokens, i)
        if name is None:
            return None
        self.depth += 1
        self._open.append((name, self.depth))
        return i + 3

    def observe(self, tok: Token) -> bool:
        """Update depth for a brace token. True if it closed a namespace."""
        if is_symbol(tok, "{"):
            self.depth += 1
        elif is_symbol(tok, "}"):
            closed = bool(self._open) and self._open[-1][1] == self.depth
            if closed:
                self._open.pop()
            self.depth = max(self.depth - 1, 0)
            return closed
        return False
