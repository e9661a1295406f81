"""
Token discovery - reading token files, ordering keys, finding references.
"""

from spectrum_tokens.tokens.dependencies import extract_dependencies, parse_alias
from spectrum_tokens.tokens.ordering import cmpkeys, sort_keys, split_key


def __getattr__(name: str):
    """Lazy imports for the loader to avoid circular dependencies."""
    if name in ("LoadResult", "TokenLoader", "read_token_file"):
        from spectrum_tokens.tokens.loader import LoadResult, TokenLoader, read_token_file

        return {
            "LoadResult": LoadResult,
            "TokenLoader": TokenLoader,
            "read_token_file": read_token_file,
        }[name]
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    # Loader (lazy loaded)
    "LoadResult",
    "TokenLoader",
    "read_token_file",
    # Ordering and references
    "cmpkeys",
    "extract_dependencies",
    "parse_alias",
    "sort_keys",
    "split_key",
]
