"""
Spectrum token compiler.

Turns Adobe Spectrum design tokens (colors, layout metrics, typography)
into dependency-ordered variable initialization code for a Tk theme.
"""

from spectrum_tokens.compiler import CompileResult, TokenCompiler, compile_tokens
from spectrum_tokens.config import load_config
from spectrum_tokens.models import CompilerConfig, Token, TokenTable

__version__ = "0.1.0"

__all__ = [
    "CompileResult",
    "CompilerConfig",
    "Token",
    "TokenCompiler",
    "TokenTable",
    "compile_tokens",
    "load_config",
]
