"""Class body parser: fields, methods and operator overloads.

Works on the token slice between a class's braces. Each member form is a
fixed token pattern; anything that does not match is skipped one token at a
time. Nothing here raises.
"""

from __future__ import annotations

import logging

from .model import Class, Function, OperatorOverload, Variable
from .scanning import capture_braced, find_symbol
from .tokens import Token, is_ident, is_symbol, token_at

logger = logging.getLogger(__name__)


def parse_class_body(tokens: list[Token], class_name: str,
                     namespace: str | None = None) -> Class:
    """Collect the members of one class body.

    Fields are taken from member-level declarations only: a method body is
    consumed whole once its header matches, so locals like `Vec r;` and
    statements like `return r;` never become struct fields. A header whose
    `;` comes before any `{` is a prototype and is passed over.
    """
    cls = Class(name=class_name, namespace=namespace)
    i = 0
    while i < len(tokens):
        # Operators first, so a method literally named `operator` is never
        # taken for a plain function.
        parsed_op = parse_operator_overload(tokens, i, class_name, namespace)
        if parsed_op is not None:
            op, i = parsed_op
            cls.operators.append(op)
            continue

        parsed_fn = parse_function(tokens, i, class_name, namespace)
        if parsed_fn is not None:
            fn, i = parsed_fn
            cls.functions.append(fn)
            continue

        parsed_var = parse_variable(tokens, i)
        if parsed_var is not None:
            var, i = parsed_var
            cls.variables.append(var)
            continue

        i += 1

    logger.debug("class %s: %d fields, %d methods, %d operators",
                 cls.full_name, len(cls.variables), len(cls.functions),
                 len(cls.operators))
    return cls


def parse_operator_overload(tokens: list[Token], i: int, class_name: str,
                            namespace: str | None) -> tuple[OperatorOverload, int] | None:
    """`Ret operator SYM ( params ) { body }` at i.

    Returns (overload, index past the body) or None.
    """
    if not (is_ident(token_at(tokens, i))
            and is_ident(token_at(tokens, i + 1), "operator")
            and is_symbol(token_at(tokens, i + 2))):
        return None

    op = tokens[i + 2].value
    paren = i + 3
    if op == "[" and is_symbol(token_at(tokens, i + 3), "]"):
        op = "[]"
        paren = i + 4
    if not is_symbol(token_at(tokens, paren), "("):
        return None

    params, p = parse_params(tokens, paren + 1)
    brace = find_symbol(tokens, p, "{", stop=(";",))
    if brace is None:
        return None
    body, end = capture_braced(tokens, brace)

    logger.debug("found operator overload %s operator%s", tokens[i].value, op)
    overload = OperatorOverload(
        class_name=class_name,
        namespace=namespace,
        operator=op,
        return_type=tokens[i].value,
        params=params,
        body_tokens=body,
    )
    return overload, end


def parse_function(tokens: list[Token], i: int, class_name: str,
                   namespace: str | None) -> tuple[Function, int] | None:
    """`Ret name ( params ) { body }` at i."""
    if not (is_ident(token_at(tokens, i))
            and is_ident(token_at(tokens, i + 1))
            and is_symbol(token_at(tokens, i + 2), "(")):
        return None

    params, p = parse_params(tokens, i + 3)
    brace = find_symbol(tokens, p, "{", stop=(";",))
    if brace is None:
        return None
    body, end = capture_braced(tokens, brace)

    logger.debug("found method %s %s", tokens[i].value, tokens[i + 1].value)
    fn = Function(
        class_name=class_name,
        namespace=namespace,
        name=tokens[i + 1].value,
        return_type=tokens[i].value,
        params=params,
        body_tokens=body,
    )
    return fn, end


def parse_params(tokens: list[Token], start: int) -> tuple[list[str], int]:
    """Collect `Type name` pairs up to the closing ')'.

    Commas are separators; tokens that do not form a pair are skipped one at
    a time. Returns (["Type name", ...], index past ')').
    """
    params: list[str] = []
    p = start
    while p < len(tokens):
        tok = tokens[p]
        if is_symbol(tok, ")"):
            return params, p + 1
        if is_symbol(tok, ","):
            p += 1
            continue
        if is_ident(tok) and is_ident(token_at(tokens, p + 1)):
            params.append(f"{tok.value} {tokens[p + 1].value}")
            p += 2
            continue
        p += 1
    return params, p


def parse_variable(tokens: list[Token], i: int) -> tuple[Variable, int] | None:
    """`Type name ;` or `Type name = ... ;` at i.

    Only the (type, name) pair is kept; initializer tokens are dropped.
    """
    if not (is_ident(token_at(tokens, i)) and is_ident(token_at(tokens, i + 1))):
        return None
    var = Variable(name=tokens[i + 1].value, type=tokens[i].value)
    follow = token_at(tokens, i + 2)
    if is_symbol(follow, ";"):
        return var, i + 3
    if is_symbol(follow, "="):
        semi = find_symbol(tokens, i + 3, ";")
        end = len(tokens) if semi is None else semi + 1
        return var, end
    return None
