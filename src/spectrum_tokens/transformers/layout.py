"""
Layout transformer.

    16px                 -> ScaledPixel(16)
    -4px                 -> ScaledPixel(-4)
    1.5                  -> NumberLiteral("1.5")
    {spacing-100}        -> Reference("spacing-100")
    {heading-font-size}  -> Reference("heading-font-size")
    {font-family-sans}   -> InvalidSizeFormat
    sets: desktop        -> the desktop value, other profiles ignored
"""

from __future__ import annotations

import json
import re
from typing import Any

from spectrum_tokens.constants import (
    FONT_KEY_MARKER,
    FONT_SIZE_KEY_MARKER,
    LAYOUT_PROFILE,
    ErrorMessages,
)
from spectrum_tokens.errors import InvalidSizeFormat
from spectrum_tokens.models.expression import (
    Expression,
    NumberLiteral,
    Reference,
    ScaledPixel,
)
from spectrum_tokens.tokens.dependencies import parse_alias
from spectrum_tokens.transformers.entries import entry_value, has_sets, set_value

PIXEL_PATTERN = re.compile(r"(-?\d+)px")
NUMBER_PATTERN = re.compile(r"-?(?:\d+(?:\.\d*)?|\.\d+)")


def is_size_alias(key: str) -> bool:
    """
    Check whether a layout value may alias this key.

    Font tokens are created by the runtime and referenced directly, so the
    only typography values a size can point at are font sizes.
    """
    if FONT_KEY_MARKER in key:
        return FONT_SIZE_KEY_MARKER in key
    return True


def value_to_size(raw: Any) -> Expression:
    """
    Transform a single size value.

    Args:
        raw: 'Npx', a bare number (string or JSON number) or a '{key}' alias

    Returns:
        ScaledPixel, NumberLiteral or Reference

    Raises:
        InvalidSizeFormat: For anything else, or an alias to a non-size font key
    """
    alias = parse_alias(raw)
    if alias is not None:
        if not is_size_alias(alias):
            raise InvalidSizeFormat(ErrorMessages.INVALID_SIZE.format(value=raw))
        return Reference(alias)

    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return NumberLiteral(json.dumps(raw))

    if isinstance(raw, str):
        match = PIXEL_PATTERN.fullmatch(raw)
        if match is not None:
            return ScaledPixel(int(match.group(1)))
        if NUMBER_PATTERN.fullmatch(raw):
            return NumberLiteral(raw)

    raise InvalidSizeFormat(ErrorMessages.INVALID_SIZE.format(value=raw))


def transform_layout(key: str, entry: Any, dark_mode_key: str | None = None) -> Expression:
    """
    Transform a layout token entry.

    dark_mode_key is accepted for a uniform transformer signature; layout
    values have no light/dark variants.
    """
    if has_sets(entry):
        return value_to_size(set_value(key, entry, LAYOUT_PROFILE))
    return value_to_size(entry_value(key, entry))
