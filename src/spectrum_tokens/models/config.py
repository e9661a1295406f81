"""
Compiler configuration model.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from spectrum_tokens.constants import (
    COLOR_FILES,
    DARK_MODE_KEY,
    DEFAULT_NAMESPACE,
    GENERATOR_NAME,
    LAYOUT_FILES,
    TYPOGRAPHY_FILES,
    OutputFormat,
    TokenCategory,
)


class CompilerConfig(BaseModel):
    """
    Settings for one compiler run.

    The defaults describe a stock spectrum-tokens checkout; a YAML file
    only needs the fields it changes.
    """

    namespace: str = Field(
        default=DEFAULT_NAMESPACE,
        description="Namespace the generated variables live in",
    )
    dark_mode_key: str = Field(
        default=DARK_MODE_KEY,
        description="Runtime flag consulted by light/dark conditionals",
    )
    output_format: OutputFormat = Field(
        default="tcl",
        description="Target syntax of the generated block",
    )
    generator_name: str = Field(
        default=GENERATOR_NAME,
        description="Name recorded in the generated header",
    )
    color_files: list[str] = Field(default_factory=lambda: list(COLOR_FILES))
    layout_files: list[str] = Field(default_factory=lambda: list(LAYOUT_FILES))
    typography_files: list[str] = Field(default_factory=lambda: list(TYPOGRAPHY_FILES))

    model_config = {"frozen": True, "extra": "forbid"}

    @field_validator("namespace", "dark_mode_key", "generator_name")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Names end up in generated code and must not be empty."""
        if not v.strip():
            raise ValueError("must not be blank")
        return v

    def file_plan(self) -> list[tuple[str, TokenCategory]]:
        """Input files paired with their category, in processing order."""
        return (
            [(name, TokenCategory.COLOR) for name in self.color_files]
            + [(name, TokenCategory.LAYOUT) for name in self.layout_files]
            + [(name, TokenCategory.FONT) for name in self.typography_files]
        )
