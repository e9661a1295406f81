"""
Models for the token compiler.

This module provides:
- Expression nodes: the value IR built by transformers
- Token / TokenTable: transformed tokens in discovery order
- Diagnostic: why a token was dropped
- CompilerConfig: run settings
"""

from spectrum_tokens.models.config import CompilerConfig
from spectrum_tokens.models.expression import (
    ColorLiteral,
    DarkModeConditional,
    Expression,
    FontReference,
    NumberLiteral,
    Reference,
    ScaledPixel,
)
from spectrum_tokens.models.token import Diagnostic, Token, TokenTable

__all__ = [
    "ColorLiteral",
    "CompilerConfig",
    "DarkModeConditional",
    "Diagnostic",
    "Expression",
    "FontReference",
    "NumberLiteral",
    "Reference",
    "ScaledPixel",
    "Token",
    "TokenTable",
]
