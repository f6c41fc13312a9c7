"""Compilation driver: one source text in, one C text out.

    lex → register classes → resolve imports → collect classes
        → lower call sites → emit class blocks → detokenize
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .detokenizer import detokenize
from .emitter import replace_class_blocks
from .imports import resolve_imports
from .lexer import tokenize
from .lowering import collect_variable_types, lower_calls
from .registry import collect_classes, register_class_names

logger = logging.getLogger(__name__)


@dataclass
class CompileContext:
    """State shared by a top-level compile and all of its imports."""
    # short class name -> canonical name; last writer wins
    registry: dict[str, str] = field(default_factory=dict)
    # every import compiled so far, in the order it was read
    imports: list[str] = field(default_factory=list)
    depth: int = 0


def compile(source: str) -> str:
    """Compile a source text with a fresh context."""
    return compile_with_context(source, CompileContext())


def compile_with_context(source: str, context: CompileContext) -> str:
    tokens = tokenize(source)

    # This file's classes go in before its imports are compiled
    register_class_names(tokens, context.registry)
    logger.debug("known classes before imports: %s", context.registry)

    tokens = resolve_imports(tokens, context)

    classes = collect_classes(tokens)
    logger.debug("%d classes defined in this file", len(classes))

    variables = collect_variable_types(tokens)
    tokens = lower_calls(tokens, context.registry, variables)
    tokens = replace_class_blocks(tokens, classes)
    return detokenize(tokens)
