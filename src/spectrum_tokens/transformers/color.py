"""
Color transformer.

    rgb(255, 0, 128)     -> ColorLiteral("#FF0080")
    {gray-100}           -> Reference("gray-100")
    sets: light / dark   -> DarkModeConditional(dark, light)
"""

from __future__ import annotations

import re
from typing import Any

from spectrum_tokens.constants import DARK_MODE_KEY, ErrorMessages
from spectrum_tokens.errors import InvalidColorFormat
from spectrum_tokens.models.expression import (
    ColorLiteral,
    DarkModeConditional,
    Expression,
    Reference,
)
from spectrum_tokens.tokens.dependencies import parse_alias
from spectrum_tokens.transformers.entries import entry_value, has_sets, set_value

RGB_PATTERN = re.compile(r"\s*rgb\s*\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*\)\s*")


def rgb_to_hex(raw: Any) -> Expression:
    """
    Transform a single color value.

    Args:
        raw: An 'rgb(r, g, b)' literal or a '{key}' alias

    Returns:
        ColorLiteral or Reference

    Raises:
        InvalidColorFormat: For anything else, including channels above 255
    """
    alias = parse_alias(raw)
    if alias is not None:
        return Reference(alias)

    match = RGB_PATTERN.fullmatch(raw) if isinstance(raw, str) else None
    if match is None:
        raise InvalidColorFormat(ErrorMessages.INVALID_COLOR.format(value=raw))

    red, green, blue = (int(g) for g in match.groups())
    try:
        return ColorLiteral.from_rgb(red, green, blue)
    except ValueError as e:
        raise InvalidColorFormat(ErrorMessages.INVALID_COLOR.format(value=raw)) from e


def transform_color(key: str, entry: Any, dark_mode_key: str = DARK_MODE_KEY) -> Expression:
    """
    Transform a color token entry.

    Set entries become a light/dark conditional; variants other than
    'light' and 'dark' (e.g. 'wireframe') are ignored.
    """
    if has_sets(entry):
        light = rgb_to_hex(set_value(key, entry, "light"))
        dark = rgb_to_hex(set_value(key, entry, "dark"))
        return DarkModeConditional(dark=dark, light=light, flag=Reference(dark_mode_key))

    return rgb_to_hex(entry_value(key, entry))
