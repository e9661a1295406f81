"""
Token loader - reads the token files and builds the token table.

Files are processed in the configured order: colors, then layout, then
typography. Within a file keys are visited in cmpkeys order. Later files
overwrite earlier tokens with the same key.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from spectrum_tokens.constants import ErrorMessages, TokenCategory
from spectrum_tokens.errors import TokenError, TokenFileError
from spectrum_tokens.models.config import CompilerConfig
from spectrum_tokens.models.token import Diagnostic, Token, TokenTable
from spectrum_tokens.tokens.dependencies import extract_dependencies
from spectrum_tokens.tokens.ordering import sort_keys
from spectrum_tokens.transformers import TRANSFORMERS

logger = logging.getLogger(__name__)


def read_token_file(path: Path) -> dict[str, Any]:
    """
    Parse one token file.

    Raises:
        TokenFileError: If the file is missing, unreadable, not JSON or
            not a JSON object
    """
    if not path.is_file():
        raise TokenFileError(ErrorMessages.FILE_NOT_FOUND.format(path=path))

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise TokenFileError(ErrorMessages.FILE_MALFORMED.format(path=path, reason=e)) from e
    except (OSError, UnicodeDecodeError) as e:
        raise TokenFileError(ErrorMessages.FILE_UNREADABLE.format(path=path, reason=e)) from e

    if not isinstance(data, dict):
        raise TokenFileError(ErrorMessages.FILE_NOT_OBJECT.format(path=path))

    return data


@dataclass
class LoadResult:
    """Tokens read from a token directory."""

    table: TokenTable
    diagnostics: list[Diagnostic] = field(default_factory=list)
    keys_read: int = 0


class TokenLoader:
    """
    Loads a spectrum token directory.

    Every file in the plan must exist. A token whose value cannot be
    transformed is dropped with a diagnostic; the run continues.
    """

    def __init__(self, token_dir: Path | str, config: CompilerConfig | None = None):
        """
        Initialize the loader.

        Args:
            token_dir: Directory holding the token JSON files
            config: Run configuration (defaults to the stock file set)
        """
        self.token_dir = Path(token_dir)
        self.config = config or CompilerConfig()

    def load(self) -> LoadResult:
        """
        Read and transform all token files.

        Raises:
            TokenFileError: If any required file cannot be parsed
        """
        # All files are parsed before any token is transformed
        files = [
            (name, category, read_token_file(self.token_dir / name))
            for name, category in self.config.file_plan()
        ]

        result = LoadResult(table=TokenTable())
        for name, category, data in files:
            self._load_file(name, category, data, result)

        logger.info(
            f"Loaded {len(result.table)} tokens from {len(files)} files "
            f"({len(result.diagnostics)} dropped)"
        )
        return result

    def _load_file(
        self,
        name: str,
        category: TokenCategory,
        data: dict[str, Any],
        result: LoadResult,
    ) -> None:
        """Transform every key of one parsed file into the result."""
        transformer = TRANSFORMERS[category]
        dark_mode_key = self.config.dark_mode_key

        for key in sort_keys(data):
            result.keys_read += 1
            entry = data[key]
            try:
                value = transformer(key, entry, dark_mode_key)
            except TokenError as e:
                result.diagnostics.append(Diagnostic(key=key, message=str(e), source=name))
                logger.debug(f"{e} ({name}: {key})")
                continue

            if value is None:
                continue

            result.table.add(
                Token(
                    key=key,
                    value=value,
                    category=category,
                    raw_value=entry,
                    source=name,
                    dependencies=extract_dependencies(value, dark_mode_key),
                )
            )
