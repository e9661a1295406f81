"""
Token value expressions - the intermediate representation between raw JSON
and generated code.

Transformers build these trees; only the emitter's renderers know how a
node is spelled in the target runtime. Every node is immutable so trees can
be shared, hashed and compared in tests.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from spectrum_tokens.constants import DARK_MODE_KEY


@dataclass(frozen=True)
class ColorLiteral:
    """A concrete color, always '#RRGGBB' in uppercase."""

    hex: str

    @classmethod
    def from_rgb(cls, red: int, green: int, blue: int) -> ColorLiteral:
        """Create from 0-255 channel values."""
        for channel in (red, green, blue):
            if not 0 <= channel <= 255:
                raise ValueError(f"Color channel must be 0-255, got {channel}")
        return cls(f"#{red:02X}{green:02X}{blue:02X}")


@dataclass(frozen=True)
class NumberLiteral:
    """A bare number, kept exactly as written in the token file."""

    text: str


@dataclass(frozen=True)
class Reference:
    """A reference to another token (or to a runtime-supplied variable)."""

    key: str


@dataclass(frozen=True)
class DarkModeConditional:
    """Selects the dark or light value depending on the runtime flag."""

    dark: Expression
    light: Expression
    flag: Reference = field(default_factory=lambda: Reference(DARK_MODE_KEY))


@dataclass(frozen=True)
class ScaledPixel:
    """
    A CSS pixel count converted by the runtime's scale_pixel operation.

    scale_pixel(px) = floor(display_scale_factor * px * 72/96)
    """

    pixels: int


@dataclass(frozen=True)
class FontReference:
    """
    A get-or-create-font call.

    family and size are names the runtime resolves itself (for example
    'sans-serif-font-family' and 'font-size-100'), not graph dependencies.
    """

    family: str
    size: str
    bold: bool


Expression = Union[
    ColorLiteral,
    NumberLiteral,
    Reference,
    DarkModeConditional,
    ScaledPixel,
    FontReference,
]
