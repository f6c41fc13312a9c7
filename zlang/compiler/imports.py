"""Import resolver for `#import <path>` directives.

Each target is read relative to the working directory and compiled with the
importer's CompileContext, so classes registered while compiling it stay
visible to the importer and to later imports. The compiled C text is re-lexed
and spliced over the whole directive. Targets are neither cached nor checked
for cycles: importing a file twice compiles it twice.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .lexer import tokenize
from .tokens import Token, TokenType, is_ident, is_symbol, token_at

if TYPE_CHECKING:
    from .driver import CompileContext

logger = logging.getLogger(__name__)


class ImportResolutionError(Exception):
    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read import file '{path}': {reason}")


def match_import(tokens: list[Token], i: int) -> tuple[str, int] | None:
    """Match `# import < payload >` at i.

    The payload is the text of every identifier and symbol up to '>'. Any
    other token ends the match. Returns (path, index past '>') or None.
    """
    if not (is_symbol(token_at(tokens, i), "#")
            and is_ident(token_at(tokens, i + 1), "import")
            and is_symbol(token_at(tokens, i + 2), "<")):
        return None

    parts: list[str] = []
    j = i + 3
    while j < len(tokens):
        tok = tokens[j]
        if is_symbol(tok, ">"):
            return "".join(parts), j + 1
        if tok.type not in (TokenType.IDENTIFIER, TokenType.SYMBOL):
            break
        parts.append(tok.value)
        j += 1
    return None


def read_import(path: str) -> str:
    try:
        with open(path, "r") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ImportResolutionError(path, str(e)) from e


def resolve_imports(tokens: list[Token], context: CompileContext) -> list[Token]:
    """Replace every import directive with the compiled, re-lexed target."""
    from .driver import compile_with_context

    out: list[Token] = []
    i = 0
    while i < len(tokens):
        matched = match_import(tokens, i)
        if matched is None:
            out.append(tokens[i])
            i += 1
            continue

        path, end = matched
        logger.debug("importing %s (depth %d)", path, context.depth + 1)
        source = read_import(path)
        context.imports.append(path)
        context.depth += 1
        try:
            compiled = compile_with_context(source, context)
        finally:
            context.depth -= 1
        out.extend(tok for tok in tokenize(compiled) if tok.type != TokenType.EOF)
        i = end
    return out
