"""
Token model - named design values and the ordered table they live in.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from spectrum_tokens.constants import TokenCategory
from spectrum_tokens.models.expression import Expression


@dataclass(frozen=True)
class Token:
    """
    A design token after transformation.

    The token is built once by the loader and read-only afterwards.
    dependencies holds the keys referenced by value, in order of first
    appearance, without the runtime dark-mode flag.
    """

    key: str
    value: Expression
    category: TokenCategory
    raw_value: Any = field(default=None, compare=False)
    source: str | None = field(default=None, compare=False)
    dependencies: tuple[str, ...] = ()


@dataclass(frozen=True)
class Diagnostic:
    """Why a token was dropped from the output."""

    key: str
    message: str
    source: str | None = None

    def __str__(self) -> str:
        return self.message


class TokenTable:
    """
    Ordered key -> Token mapping for one compiler run.

    Iteration follows discovery order. Adding a key that already exists
    replaces its token (last write wins) but keeps its first position.
    """

    def __init__(self, tokens: list[Token] | None = None) -> None:
        self._tokens: dict[str, Token] = {}
        for token in tokens or []:
            self.add(token)

    def add(self, token: Token) -> None:
        """Add or replace a token."""
        self._tokens[token.key] = token

    def get(self, key: str) -> Token | None:
        """Get a token by key."""
        return self._tokens.get(key)

    def keys(self) -> list[str]:
        """Keys in discovery order."""
        return list(self._tokens)

    def graph(self) -> dict[str, list[str]]:
        """Adjacency map key -> dependency keys, in discovery order."""
        return {key: list(token.dependencies) for key, token in self._tokens.items()}

    def __getitem__(self, key: str) -> Token:
        return self._tokens[key]

    def __contains__(self, key: object) -> bool:
        return key in self._tokens

    def __iter__(self) -> Iterator[Token]:
        return iter(self._tokens.values())

    def __len__(self) -> int:
        return len(self._tokens)
