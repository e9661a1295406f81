"""
Value transformers - turn one raw JSON token entry into an expression.

Each transformer takes (key, entry, dark_mode_key) and returns an
Expression, None for keys it ignores, or raises a TokenError subclass for
values it cannot represent.
"""

from collections.abc import Callable
from typing import Any

from spectrum_tokens.constants import TokenCategory
from spectrum_tokens.models.expression import Expression
from spectrum_tokens.transformers.color import rgb_to_hex, transform_color
from spectrum_tokens.transformers.font import transform_font
from spectrum_tokens.transformers.layout import transform_layout, value_to_size

Transformer = Callable[[str, Any, str], "Expression | None"]

TRANSFORMERS: dict[TokenCategory, Transformer] = {
    TokenCategory.COLOR: transform_color,
    TokenCategory.LAYOUT: transform_layout,
    TokenCategory.FONT: transform_font,
}

__all__ = [
    "TRANSFORMERS",
    "Transformer",
    "rgb_to_hex",
    "transform_color",
    "transform_font",
    "transform_layout",
    "value_to_size",
]
