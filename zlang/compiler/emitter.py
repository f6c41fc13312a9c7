"""Class definition emitter: class blocks → C structs and functions.

Each Class is printed as C text and re-lexed, and the tokens replace the
`class Name { ... }` span in the already-lowered stream. `namespace N { ... }`
wrappers are dropped; their contents are kept and processed the same way.
Method bodies come from the class body as it was captured before lowering.
"""

from __future__ import annotations

import logging

from .lexer import tokenize
from .model import Class, Function, OperatorOverload
from .scanning import capture_braced, class_at, namespace_at
from .tokens import Token, TokenType, is_symbol, token_at

logger = logging.getLogger(__name__)


def _body_text(tokens: list[Token]) -> str:
    return " ".join(tok.text for tok in tokens if tok.type != TokenType.EOF)


def _param_list(owner: str, params: list[str]) -> str:
    if params:
        return f"{owner} self, " + ", ".join(params)
    return f"{owner} self"


def emit_function(fn: Function) -> str:
    """`Ret Owner_name(Owner self, params){body}`"""
    owner = fn.owner
    return (f"{fn.return_type} {owner}_{fn.name}"
            f"({_param_list(owner, fn.params)}){{{_body_text(fn.body_tokens)}}}")


def emit_operator(op: OperatorOverload) -> str:
    """`Ret Owner_operator_suffix(Owner self, params){body}`"""
    owner = op.owner
    return (f"{op.return_type} {owner}_operator_{op.suffix}"
            f"({_param_list(owner, op.params)}){{{_body_text(op.body_tokens)}}}")


def emit_class(cls: Class) -> str:
    """C text for a class: one struct typedef, then methods, then operators."""
    fields = "".join(str(var) for var in cls.variables)
    parts = [f"typedef struct {{ {fields} }} {cls.full_name};\n"]
    parts.extend(emit_function(fn) for fn in cls.functions)
    parts.extend(emit_operator(op) for op in cls.operators)
    return "".join(parts)


def replace_class_blocks(tokens: list[Token], classes: list[Class],
                         namespace: str | None = None) -> list[Token]:
    """Substitute generated C for every class block that has a Class entity."""
    out: list[Token] = []
    i = 0
    while i < len(tokens):
        ns_name = namespace_at(tokens, i)
        if ns_name is not None:
            content, end = capture_braced(tokens, i + 2)
            logger.debug("flattening namespace %s", ns_name)
            out.extend(replace_class_blocks(content, classes, ns_name))
            i = end
            continue

        name = class_at(tokens, i)
        if name is not None and is_symbol(token_at(tokens, i + 2), "{"):
            cls = _find_class(classes, name, namespace)
            if cls is not None:
                _, end = capture_braced(tokens, i + 2)
                logger.debug("emitting class %s", cls.full_name)
                out.extend(tok for tok in tokenize(emit_class(cls))
                           if tok.type != TokenType.EOF)
                i = end
                continue

        out.append(tokens[i])
        i += 1
    return out


def _find_class(classes: list[Class], name: str,
                namespace: str | None) -> Class | None:
    for cls in classes:
        if cls.name == name and cls.namespace == namespace:
            return cls
    for cls in classes:
        if cls.name == name:
            return cls
    return None
