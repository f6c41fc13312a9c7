"""Token list → text.

Spacing between two tokens is decided by a fixed table (needs_space), never
by the layout of the input. Generated snippets are printed and re-lexed
through this same printer, so the table has to keep adjacent tokens apart
wherever fusing them would change the token stream.
"""

from .tokens import Token, TokenType

# Symbol/symbol pairs: no space after these...
_TIGHT_AFTER = frozenset({"(", "[", ".", "->", "<", ";", ","})
# ...and no space before these.
_TIGHT_BEFORE = frozenset({")", "]", ".", "->", ">", ";", ","})

# Identifier followed by one of these symbols: no space
_IDENT_TIGHT_BEFORE = frozenset({"(", ")", "[", "]", ".", "->", ";", ",", ">"})

# Number followed by one of these symbols: no space
_NUMBER_TIGHT_BEFORE = frozenset({"(", ")", "[", "]", ".", "->", ";", ",", ">"})

# Opening / prefix-like symbols that bind to a following identifier or number
_PREFIX_SYMBOLS = frozenset({"(", "[", ".", "->", "!", "~", "*", "&", "+", "-", "<"})

_WORDS = (TokenType.IDENTIFIER, TokenType.NUMBER)


def needs_space(prev: Token, cur: Token) -> bool:
    """Whether a single space separates prev and cur in printed output."""
    if prev.type == TokenType.NEWLINE or cur.type == TokenType.NEWLINE:
        return False
    if prev.type == TokenType.COMMENT:
        return False

    if prev.type == TokenType.SYMBOL and cur.type == TokenType.SYMBOL:
        return not (prev.value in _TIGHT_AFTER or cur.value in _TIGHT_BEFORE)
    if prev.type == TokenType.IDENTIFIER and cur.type == TokenType.SYMBOL:
        return cur.value not in _IDENT_TIGHT_BEFORE
    if prev.type == TokenType.SYMBOL and cur.type in _WORDS:
        return prev.value not in _PREFIX_SYMBOLS
    if prev.type == TokenType.NUMBER and cur.type == TokenType.SYMBOL:
        return cur.value not in _NUMBER_TIGHT_BEFORE

    # Identifier/number adjacency, string and char literals, comments
    return True


def detokenize(tokens: list[Token]) -> str:
    parts: list[str] = []
    prev: Token | None = None
    for tok in tokens:
        if tok.type == TokenType.EOF:
            continue
        if prev is not None and needs_space(prev, tok):
            parts.append(" ")
        parts.append(tok.text)
        prev = tok
    return "".join(parts)
