"""
Compilation pipeline - transforms a token table to initialization code.

The pipeline:
    Token files → TokenTable (transformed values, discovery order)
    → dependency order (topological sort)
    → generated declaration block
"""

# Import sorter and emitter first (no circular dependencies)
from spectrum_tokens.compiler.emitter import (
    Emitter,
    PythonRenderer,
    Renderer,
    TclRenderer,
    get_renderer,
)
from spectrum_tokens.compiler.sorter import (
    SortContext,
    SortResult,
    sort_tokens,
    topological_sort,
)


def __getattr__(name: str):
    """Lazy imports for the pipeline to avoid circular dependencies."""
    if name in ("CompileResult", "TokenCompiler", "compile_tokens"):
        from spectrum_tokens.compiler.pipeline import (
            CompileResult,
            TokenCompiler,
            compile_tokens,
        )

        return {
            "CompileResult": CompileResult,
            "TokenCompiler": TokenCompiler,
            "compile_tokens": compile_tokens,
        }[name]
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    # Pipeline (lazy loaded)
    "CompileResult",
    "TokenCompiler",
    "compile_tokens",
    # Sorting
    "SortContext",
    "SortResult",
    "sort_tokens",
    "topological_sort",
    # Emitting
    "Emitter",
    "PythonRenderer",
    "Renderer",
    "TclRenderer",
    "get_renderer",
]
