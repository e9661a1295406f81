#!/usr/bin/env python3
"""
Example: Compiling a token directory.

Builds a small spectrum-tokens directory in a temp folder, compiles it to
Tcl and to Python, and shows which tokens were dropped along the way.

Usage:
    python examples/compile_tokens.py
"""

import json
import tempfile
from pathlib import Path

from spectrum_tokens import CompilerConfig, TokenCompiler
from spectrum_tokens.constants import COLOR_FILES, LAYOUT_FILES, TYPOGRAPHY_FILES

TOKENS = {
    "color-palette.json": {
        "gray-50": {"value": "rgb(255, 255, 255)"},
        "gray-900": {
            "sets": {
                "light": {"value": "rgb(29, 29, 29)"},
                "dark": {"value": "rgb(255, 255, 255)"},
            }
        },
        "blue-500": {"value": "rgb(20, 115, 230)"},
        "overlay-color": {"value": "rgba(0, 0, 0, 0.4)"},
    },
    "semantic-color-palette.json": {
        "accent-color-100": {"value": "{blue-500}"},
    },
    "color-aliases.json": {
        "background-base-color": {
            "sets": {
                "light": {"value": "{gray-50}"},
                "dark": {"value": "{gray-900}"},
            }
        },
    },
    "layout.json": {
        "spacing-100": {"value": "8px"},
        "font-size-100": {"value": "14px"},
        "line-height-100": {"value": "1.3"},
    },
    "layout-component.json": {
        "button-height": {"value": "{spacing-100}"},
    },
    "typography.json": {
        "body-size-m": {"value": "{font-size-100}"},
        "component-m-bold": {
            "value": {
                "fontFamily": "{sans-serif-font-family}",
                "fontSize": "{font-size-100}",
                "fontWeight": "{bold-font-weight}",
            }
        },
    },
}


def write_tokens(token_dir: Path) -> None:
    """Write every expected file, empty where the demo has no tokens."""
    for name in (*COLOR_FILES, *LAYOUT_FILES, *TYPOGRAPHY_FILES):
        (token_dir / name).write_text(json.dumps(TOKENS.get(name, {}), indent=2))


def main() -> None:
    """Demonstrate token compilation."""
    print("Spectrum Token Compiler Demo")
    print("=" * 40)
    print()

    with tempfile.TemporaryDirectory() as tmp:
        token_dir = Path(tmp)
        write_tokens(token_dir)

        # Tcl output (the default)
        result = TokenCompiler().compile(token_dir)
        print(f"Read {result.keys_read} keys, emitted {len(result.tokens)} tokens")
        print()
        print(result.output)
        print()

        # Dropped tokens
        print("Dropped tokens:")
        for diagnostic in result.diagnostics:
            print(f"  {diagnostic.key}: {diagnostic.message}")
        print()

        # Same tokens, Python output in a custom namespace
        config = CompilerConfig(output_format="python", namespace="::demo")
        result = TokenCompiler(config).compile(token_dir)
        print(result.output)


if __name__ == "__main__":
    main()
