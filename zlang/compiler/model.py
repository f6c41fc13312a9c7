"""Structured class entities built from a class body.

These are the only structures kept besides token lists. They are built once
per file by the registry builder and turned back into C text by the emitter.
"""

from __future__ import annotations
from dataclasses import dataclass, field

from .tokens import Token

# Operator symbol -> suffix used in generated function names
OPERATOR_NAMES: dict[str, str] = {
    "+": "add",
    "-": "sub",
    "*": "mul",
    "/": "div",
    "==": "eq",
    "!=": "neq",
    "<": "lt",
    ">": "gt",
    "<=": "le",
    ">=": "ge",
    "+=": "add_assign",
    "-=": "sub_assign",
    "*=": "mul_assign",
    "/=": "div_assign",
    "++": "increment",
    "--": "decrement",
    "[]": "index",
}

UNKNOWN_OPERATOR = "unknown_op"


def operator_name(op: str) -> str:
    return OPERATOR_NAMES.get(op, UNKNOWN_OPERATOR)


def full_name(name: str, namespace: str | None) -> str:
    """Canonical C name: namespace_name, or name outside a namespace."""
    if namespace:
        return f"{namespace}_{name}"
    return name


@dataclass
class Variable:
    name: str
    type: str

    def __str__(self):
        return f"{self.type} {self.name};"


@dataclass
class Function:
    class_name: str
    namespace: str | None
    name: str
    return_type: str
    params: list[str] = field(default_factory=list)
    body_tokens: list[Token] = field(default_factory=list)

    @property
    def owner(self) -> str:
        return full_name(self.class_name, self.namespace)


@dataclass
class OperatorOverload:
    class_name: str
    namespace: str | None
    operator: str
    return_type: str
    params: list[str] = field(default_factory=list)
    body_tokens: list[Token] = field(default_factory=list)

    @property
    def owner(self) -> str:
        return full_name(self.class_name, self.namespace)

    @property
    def suffix(self) -> str:
        return operator_name(self.operator)


@dataclass
class Class:
    name: str
    namespace: str | None = None
    variables: list[Variable] = field(default_factory=list)
    functions: list[Function] = field(default_factory=list)
    operators: list[OperatorOverload] = field(default_factory=list)

    @property
    def full_name(self) -> str:
        return full_name(self.name, self.namespace)
