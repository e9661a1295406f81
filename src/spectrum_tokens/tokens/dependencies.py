"""
Dependency extraction.

Two narrow parsers:
- parse_alias reads the placeholder syntax of raw token values,
  alias ::= "{" key "}", and nothing else.
- extract_dependencies walks an expression tree and lists the token keys
  it references. The runtime dark-mode flag is never a dependency: the
  theming runtime supplies it, so it must not be scheduled by the sorter.
"""

from __future__ import annotations

import re
from typing import Any

from spectrum_tokens.constants import DARK_MODE_KEY
from spectrum_tokens.models.expression import (
    ColorLiteral,
    DarkModeConditional,
    Expression,
    FontReference,
    NumberLiteral,
    Reference,
    ScaledPixel,
)

ALIAS_PATTERN = re.compile(r"\{([^\s{}]+)\}")


def parse_alias(raw: Any) -> str | None:
    """
    Get the key an alias value points to.

    Args:
        raw: Raw token value

    Returns:
        The referenced key for '{key}', None for anything else
    """
    if not isinstance(raw, str):
        return None
    match = ALIAS_PATTERN.fullmatch(raw)
    if match is None:
        return None
    return match.group(1)


def iter_references(expr: Expression) -> list[Reference]:
    """All Reference nodes of an expression, depth-first, left to right."""
    if isinstance(expr, Reference):
        return [expr]
    if isinstance(expr, DarkModeConditional):
        # Rendered as "flag ? dark : light", so references appear in that order
        return iter_references(expr.flag) + iter_references(expr.dark) + iter_references(expr.light)
    if isinstance(expr, (ColorLiteral, NumberLiteral, ScaledPixel, FontReference)):
        return []
    raise TypeError(f"Unknown expression node: {type(expr).__name__}")


def extract_dependencies(expr: Expression, dark_mode_key: str = DARK_MODE_KEY) -> tuple[str, ...]:
    """
    Keys an expression depends on.

    Args:
        expr: Transformed token value
        dark_mode_key: Runtime flag key to leave out

    Returns:
        Referenced keys in order of first appearance, without duplicates
    """
    deps: dict[str, None] = {}
    for ref in iter_references(expr):
        if ref.key == dark_mode_key:
            continue
        deps.setdefault(ref.key, None)
    return tuple(deps)
