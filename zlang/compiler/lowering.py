"""Call-site lowering: object syntax → flat C calls.

One greedy left-to-right pass over the whole unit. Whether an identifier is
an object is decided by a flat variable -> type table built from every
`Type name ;` / `Type name = ... ;` in the unit, with no scoping: a name
declared anywhere is typed everywhere, and the first declaration wins.
Declared types are resolved to canonical names through the registry; types
missing from it (primitives included) are used unchanged.

Rewrites, tried in this order at each position:

    ns :: name            → ns_name
    v OP rhs              → T_operator_<op>(v, rhs)    rhs is one token
    v++ / v--             → T_operator_increment(v) / T_operator_decrement(v)
    v . m ( args )        → T_m(v, args)               args copied verbatim
    ++v / --v             → T_operator_increment(v) / T_operator_decrement(v)
"""

from __future__ import annotations

import logging

from .class_parser import parse_variable
from .model import operator_name
from .scanning import capture_parens
from .tokens import Token, ident, is_ident, is_symbol, symbol, token_at

logger = logging.getLogger(__name__)

BINARY_OPERATORS = frozenset({
    "+", "-", "*", "/", "==", "!=", "<", ">", "<=", ">=",
    "+=", "-=", "*=", "/=",
})

STEP_OPERATORS = frozenset({"++", "--"})


def collect_variable_types(tokens: list[Token]) -> dict[str, str]:
    """Flat name -> declared type table for a whole unit."""
    types: dict[str, str] = {}
    i = 0
    while i < len(tokens):
        parsed = parse_variable(tokens, i)
        if parsed is None:
            i += 1
            continue
        var, i = parsed
        if var.name not in types:
            types[var.name] = var.type
            logger.debug("variable %s has type %s", var.name, var.type)
    return types


def lower_calls(tokens: list[Token], registry: dict[str, str],
                variables: dict[str, str] | None = None) -> list[Token]:
    """Rewrite method calls, operator uses and `ns::name` references."""
    if variables is None:
        variables = collect_variable_types(tokens)
    return _Lowering(tokens, registry, variables).run()


class _Lowering:
    def __init__(self, tokens: list[Token], registry: dict[str, str],
                 variables: dict[str, str]):
        self.tokens = tokens
        self.registry = registry
        self.variables = variables
        self.out: list[Token] = []

    def run(self) -> list[Token]:
        tokens = self.tokens
        i = 0
        while i < len(tokens):
            nxt = (self._scope_resolution(i)
                   or self._object_use(i)
                   or self._prefix_step(i))
            if nxt is not None:
                i = nxt
                continue
            self.out.append(tokens[i])
            i += 1
        logger.debug("lowering: %d tokens in, %d out", len(tokens), len(self.out))
        return self.out

    # --- helpers ---

    def _class_of(self, name: str) -> str | None:
        """Canonical class of a typed variable, or None if untyped."""
        declared = self.variables.get(name)
        if declared is None:
            return None
        return self.registry.get(declared, declared)

    def _emit_call(self, callee: str, args: list[Token]):
        self.out.append(ident(callee))
        self.out.append(symbol("("))
        self.out.extend(args)
        self.out.append(symbol(")"))

    # --- rules; each returns the index after what it consumed, or None ---

    def _scope_resolution(self, i: int) -> int | None:
        first = token_at(self.tokens, i)
        if not (is_ident(first)
                and is_symbol(token_at(self.tokens, i + 1), "::")
                and is_ident(token_at(self.tokens, i + 2))):
            return None
        flat = f"{first.value}_{self.tokens[i + 2].value}"
        logger.debug("namespace reference %s::%s -> %s",
                     first.value, self.tokens[i + 2].value, flat)
        self.out.append(ident(flat))
        return i + 3

    def _object_use(self, i: int) -> int | None:
        tokens = self.tokens
        var = token_at(tokens, i)
        if not is_ident(var):
            return None
        cls = self._class_of(var.value)
        if cls is None:
            return None

        op = token_at(tokens, i + 1)
        if i + 2 < len(tokens) and is_symbol(op):
            if op.value in BINARY_OPERATORS:
                rhs = tokens[i + 2]
                callee = f"{cls}_operator_{operator_name(op.value)}"
                logger.debug("operator %s %s %s -> %s", var.value, op.value,
                             rhs.value, callee)
                self._emit_call(callee, [var, symbol(","), rhs])
                return i + 3
            if op.value in STEP_OPERATORS:
                callee = f"{cls}_operator_{operator_name(op.value)}"
                logger.debug("postfix %s%s -> %s", var.value, op.value, callee)
                self._emit_call(callee, [var])
                return i + 2

        if (i + 3 < len(tokens)
                and is_symbol(op, ".")
                and is_ident(tokens[i + 2])
                and is_symbol(tokens[i + 3], "(")):
            method = tokens[i + 2].value
            args, end = capture_parens(tokens, i + 3)
            callee = f"{cls}_{method}"
            logger.debug("method call %s.%s -> %s", var.value, method, callee)
            call_args = [var]
            if args:
                call_args.append(symbol(","))
                call_args.extend(args)
            self._emit_call(callee, call_args)
            return end

        return None

    def _prefix_step(self, i: int) -> int | None:
        op = token_at(self.tokens, i)
        var = token_at(self.tokens, i + 1)
        if not (is_symbol(op, *STEP_OPERATORS) and is_ident(var)):
            return None
        cls = self._class_of(var.value)
        if cls is None:
            return None
        callee = f"{cls}_operator_{operator_name(op.value)}"
        logger.debug("prefix %s%s -> %s", op.value, var.value, callee)
        self._emit_call(callee, [var])
        return i + 2
