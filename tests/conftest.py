"""
Pytest configuration and shared fixtures.
"""

import json
import tempfile
from pathlib import Path
from typing import Any

import pytest

from spectrum_tokens.constants import COLOR_FILES, LAYOUT_FILES, TYPOGRAPHY_FILES

SAMPLE_TOKENS: dict[str, dict[str, Any]] = {
    "color-palette.json": {
        "gray-900": {
            "sets": {
                "light": {"value": "rgb(29, 29, 29)"},
                "dark": {"value": "rgb(255, 255, 255)"},
                "wireframe": {"value": "rgb(0, 0, 0)"},
            }
        },
        "gray-50": {"value": "rgb(255, 255, 255)"},
        "gray-100": {"value": "rgb(248, 248, 248)"},
        "blue-500": {"value": "rgb(20, 115, 230)"},
        "transparent-black-300": {"value": "rgba(0, 0, 0, 0.4)"},
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
        "dangling-color": {"value": "{no-such-token}"},
    },
    "color-component.json": {
        "focus-indicator-color": {"value": "{accent-color-100}"},
    },
    "icons.json": {
        "icon-color-primary-default": {"value": "{gray-900}"},
    },
    "layout.json": {
        "spacing-100": {"value": "8px"},
        "font-size-100": {"value": "14px"},
        "line-height-100": {"value": "1.3"},
        "border-width-100": {
            "sets": {
                "desktop": {"value": "1px"},
                "mobile": {"value": "2px"},
            }
        },
    },
    "layout-component.json": {
        "button-height": {"value": "{spacing-100}"},
        "bad-layout": {"value": "{sans-serif-font-family}"},
    },
    "typography.json": {
        "component-m-regular": {
            "value": {
                "fontFamily": "{sans-serif-font-family}",
                "fontSize": "{font-size-100}",
                "fontWeight": "{regular-font-weight}",
            }
        },
        "component-m-bold": {
            "value": {
                "fontFamily": "{sans-serif-font-family}",
                "fontSize": "{font-size-100}",
                "fontWeight": "{bold-font-weight}",
            }
        },
        "body-size-m": {"value": "{font-size-100}"},
        "heading-margin-top-multiplier": {"value": "0.88"},
        "regular-font-weight": {"value": "regular"},
    },
}

ALL_FILES = (*COLOR_FILES, *LAYOUT_FILES, *TYPOGRAPHY_FILES)


def write_token_dir(path: Path, files: dict[str, Any] | None = None) -> Path:
    """
    Write a token directory.

    Every required file is created (empty object by default); files maps
    file name -> JSON data, or -> str for raw file contents.
    """
    path.mkdir(parents=True, exist_ok=True)
    files = files or {}
    for name in ALL_FILES:
        data = files.get(name, {})
        text = data if isinstance(data, str) else json.dumps(data, indent=2)
        (path / name).write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def token_dir(temp_dir: Path) -> Path:
    """A token directory holding the sample tokens."""
    return write_token_dir(temp_dir / "tokens", SAMPLE_TOKENS)


@pytest.fixture
def make_token_dir(temp_dir: Path):
    """Factory writing a token directory with the given files."""

    def factory(files: dict[str, Any] | None = None, name: str = "tokens") -> Path:
        return write_token_dir(temp_dir / name, files)

    return factory


@pytest.fixture
def sample_tokens() -> dict[str, dict[str, Any]]:
    """The sample token files, as JSON data."""
    return SAMPLE_TOKENS
