"""Namespace and class registry builder.

Two linear scans over a file's tokens:

* register_class_names (pass 1, before imports) seeds the shared registry
  with short name -> canonical name for every `class Name` in the file.
* collect_classes (pass 2, after imports) builds a Class entity for every
  `class Name { ... }` block still present in the stream. Imported classes
  are plain C by then and are not seen again.
"""

from __future__ import annotations

import logging

from .class_parser import parse_class_body
from .model import Class, full_name
from .scanning import NamespaceTracker, capture_braced, class_at
from .tokens import Token, is_symbol, token_at

logger = logging.getLogger(__name__)

Registry = dict[str, str]


def register_class_names(tokens: list[Token], registry: Registry) -> Registry:
    """Pass 1: record every class of this file in the registry.

    A later class with the same short name overwrites the earlier entry.
    """
    ns = NamespaceTracker()
    i = 0
    while i < len(tokens):
        content = ns.enter(tokens, i)
        if content is not None:
            logger.debug("entering namespace %s", ns.current)
            i = content
            continue
        if ns.observe(tokens[i]):
            i += 1
            continue

        name = class_at(tokens, i)
        if name is not None:
            canonical = full_name(name, ns.current)
            previous = registry.get(name)
            if previous is not None and previous != canonical:
                logger.debug("registry: %s now refers to %s (was %s)",
                             name, canonical, previous)
            registry[name] = canonical
            logger.debug("registered class %s as %s", name, canonical)
        i += 1
    return registry


def collect_classes(tokens: list[Token]) -> list[Class]:
    """Pass 2: build Class entities for the class blocks in tokens."""
    classes: list[Class] = []
    ns = NamespaceTracker()
    i = 0
    while i < len(tokens):
        content = ns.enter(tokens, i)
        if content is not None:
            i = content
            continue
        if ns.observe(tokens[i]):
            i += 1
            continue

        name = class_at(tokens, i)
        if name is not None and is_symbol(token_at(tokens, i + 2), "{"):
            body, end = capture_braced(tokens, i + 2)
            logger.debug("class %s (namespace %s): %d body tokens",
                         name, ns.current, len(body))
            classes.append(parse_class_body(body, name, ns.current))
            i = end
            continue
        i += 1
    return classes
