"""
Token Compiler - compiles a token directory to initialization code.

This is the central compilation pipeline:
    token JSON files → TokenTable → dependency order → generated code

The compiler:
1. Loads every token file, transforming values and dropping bad tokens
2. Sorts the table so each token follows its dependencies
3. Drops tokens whose dependencies cannot be resolved
4. Renders the ordered tokens for the target runtime
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from spectrum_tokens.compiler.emitter import Emitter, get_renderer
from spectrum_tokens.compiler.sorter import topological_sort
from spectrum_tokens.constants import ErrorMessages
from spectrum_tokens.models.config import CompilerConfig
from spectrum_tokens.models.token import Diagnostic, Token
from spectrum_tokens.tokens.loader import TokenLoader

logger = logging.getLogger(__name__)


@dataclass
class CompileResult:
    """Result of compiling a token directory."""

    tokens: list[Token]
    output: str
    diagnostics: list[Diagnostic] = field(default_factory=list)
    keys_read: int = 0

    @property
    def dropped(self) -> list[str]:
        """Keys that did not make it into the output."""
        return [d.key for d in self.diagnostics]


class TokenCompiler:
    """
    Compiles a spectrum token directory.

    The compiler orchestrates the full pipeline from token files to
    generated code. Nothing is kept between runs.
    """

    def __init__(self, config: CompilerConfig | None = None):
        """
        Initialize the compiler.

        Args:
            config: Run configuration
        """
        self.config = config or CompilerConfig()
        self.emitter = Emitter(
            get_renderer(self.config.output_format, self.config.namespace),
            generator_name=self.config.generator_name,
        )

    def compile(self, token_dir: Path | str, generated_at: datetime | None = None) -> CompileResult:
        """
        Compile a token directory.

        Args:
            token_dir: Directory with the token JSON files
            generated_at: Header timestamp (defaults to now)

        Returns:
            CompileResult with ordered tokens, output and diagnostics

        Raises:
            TokenFileError: If a required token file cannot be parsed
        """
        loaded = TokenLoader(token_dir, self.config).load()
        table = loaded.table
        diagnostics = list(loaded.diagnostics)

        sorted_keys = topological_sort(table.graph())
        for key, dep in sorted_keys.skipped.items():
            diagnostics.append(
                Diagnostic(
                    key=key,
                    message=ErrorMessages.MISSING_DEPENDENCY.format(key=key, dep=dep),
                    source=table[key].source,
                )
            )

        tokens = [table[key] for key in sorted_keys.order]
        logger.info(f"Emitting {len(tokens)} tokens ({len(sorted_keys.skipped)} unresolved)")

        return CompileResult(
            tokens=tokens,
            output=self.emitter.emit(tokens, generated_at),
            diagnostics=diagnostics,
            keys_read=loaded.keys_read,
        )


def compile_tokens(
    token_dir: Path | str,
    config: CompilerConfig | None = None,
    output_path: Path | str | None = None,
) -> CompileResult:
    """
    Convenience function to compile a token directory.

    Args:
        token_dir: Directory with the token JSON files
        config: Run configuration
        output_path: Optional path to save the generated code

    Returns:
        CompileResult with generated output
    """
    compiler = TokenCompiler(config)
    result = compiler.compile(token_dir)

    if output_path:
        Path(output_path).write_text(result.output + "\n", encoding="utf-8")

    return result
