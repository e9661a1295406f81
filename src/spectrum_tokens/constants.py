"""
Constants and enums for the token compiler.

No magic strings - use enums and Literal types for constrained values.
"""

from enum import Enum
from typing import Literal


class TokenCategory(str, Enum):
    """
    Transformer category applied to a token file.

    Each input file is read with exactly one category.
    """

    COLOR = "color"  # rgb() literals, aliases, light/dark sets
    LAYOUT = "layout"  # px values, numbers, font-size aliases
    FONT = "font"  # typography: font objects plus size-like metrics


class VisitState(str, Enum):
    """Per-key state of one topological sort invocation."""

    PENDING = "pending"
    VISITED = "visited"
    SKIPPED = "skipped"


# Output targets understood by the emitter
OutputFormat = Literal["tcl", "python"]

# Key of the runtime flag consulted by light/dark conditionals.
# Supplied by the theming runtime, never a graph dependency.
DARK_MODE_KEY = "darkmode"

# Namespace the generated Tcl block is evaluated in
DEFAULT_NAMESPACE = "::spectrum"

# Name recorded in the generated header
GENERATOR_NAME = "spectrum-tokens"

# Input files, in processing order. Order determines discovery order and
# therefore the tie-breaks of the final output.
COLOR_FILES: tuple[str, ...] = (
    "color-palette.json",
    "semantic-color-palette.json",
    "color-aliases.json",
    "color-component.json",
    "icons.json",
)

LAYOUT_FILES: tuple[str, ...] = (
    "layout.json",
    "layout-component.json",
)

TYPOGRAPHY_FILES: tuple[str, ...] = ("typography.json",)

# Typography keys without a font object are kept only when they look like
# a metric (matched case-insensitively).
FONT_METRIC_PATTERNS: tuple[str, ...] = (
    "*size*",
    "*height*",
    "*margin*",
    "*color*",
    "*spacing*",
)

# Layout aliases into the typography namespace must target a font size.
# Fonts are created by the runtime and referenced directly.
FONT_KEY_MARKER = "font"
FONT_SIZE_KEY_MARKER = "font-size"

# Only the desktop profile of a layout set is consulted
LAYOUT_PROFILE = "desktop"

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class ErrorMessages:
    """Standardized error messages."""

    INVALID_COLOR = "Invalid RGB format: {value}"
    INVALID_SIZE = "Invalid size format: {value}"
    MISSING_VALUE = "Token '{key}' has no value"
    MISSING_SET = "Token '{key}' has no '{name}' set"
    NOT_AN_OBJECT = "Token '{key}' is not an object"
    INCOMPLETE_FONT = "Font token '{key}' is missing '{field}'"
    MISSING_DEPENDENCY = "Skipping \"{key}\" due to missing dependency \"{dep}\""
    FILE_NOT_FOUND = "Token file not found: {path}"
    FILE_UNREADABLE = "Cannot read token file {path}: {reason}"
    FILE_MALFORMED = "Malformed JSON in {path}: {reason}"
    FILE_NOT_OBJECT = "Token file {path} must contain a JSON object"
    NOT_A_DIRECTORY = '"{path}" must be a valid directory'
