"""
Typography transformer.

The only typography values of use to the runtime are font objects and
sizing/spacing metrics. A font object becomes a get-or-create-font call;
its family and size are names the runtime resolves at initialization, e.g.
var(sans-serif-font-family) "Segoe UI", because the proprietary Spectrum
fonts are replaced by the best available system font. Metrics follow the
layout rules; every other key is ignored.
"""

from __future__ import annotations

from fnmatch import fnmatchcase
from typing import Any

from spectrum_tokens.constants import FONT_METRIC_PATTERNS, ErrorMessages
from spectrum_tokens.errors import MalformedTokenEntry
from spectrum_tokens.models.expression import Expression, FontReference
from spectrum_tokens.tokens.dependencies import parse_alias
from spectrum_tokens.transformers.layout import transform_layout


def is_font_object(entry: Any) -> bool:
    """Check whether an entry's value describes a font."""
    return (
        isinstance(entry, dict)
        and isinstance(entry.get("value"), dict)
        and "fontFamily" in entry["value"]
    )


def is_font_metric(key: str) -> bool:
    """Check whether a typography key names a size-like metric."""
    lowered = key.lower()
    return any(fnmatchcase(lowered, pattern) for pattern in FONT_METRIC_PATTERNS)


def _font_name(raw: Any) -> str:
    """A family or size as the runtime name it is looked up by."""
    alias = parse_alias(raw)
    if alias is not None:
        return alias
    return str(raw)


def font_reference(key: str, font: dict[str, Any]) -> FontReference:
    """Build the get-or-create-font call for a font object."""
    for field in ("fontSize", "fontWeight"):
        if field not in font:
            raise MalformedTokenEntry(ErrorMessages.INCOMPLETE_FONT.format(key=key, field=field))

    return FontReference(
        family=_font_name(font["fontFamily"]),
        size=_font_name(font["fontSize"]),
        bold="bold" in str(font["fontWeight"]),
    )


def transform_font(key: str, entry: Any, dark_mode_key: str | None = None) -> Expression | None:
    """
    Transform a typography token entry.

    Returns:
        FontReference, a layout expression for metric keys, or None when
        the key contributes nothing
    """
    if is_font_object(entry):
        return font_reference(key, entry["value"])
    if is_font_metric(key):
        return transform_layout(key, entry)
    return None
