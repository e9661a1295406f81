"""
Emitter - renders sorted tokens as variable initialization code.

Renderers are the only place that knows a target runtime's syntax:

    tcl     set var(gray-100) "#F8F8F8"       (sourced by the Tk theme)
    python  var["gray-100"] = "#F8F8F8"       (called by a tkinter theme)

Output is deterministic for identical tokens except the timestamp line.
"""

from __future__ import annotations

import json
from datetime import UTC, datetime

from spectrum_tokens.constants import (
    DEFAULT_NAMESPACE,
    GENERATOR_NAME,
    TIMESTAMP_FORMAT,
    OutputFormat,
)
from spectrum_tokens.models.expression import (
    ColorLiteral,
    DarkModeConditional,
    Expression,
    FontReference,
    NumberLiteral,
    Reference,
    ScaledPixel,
)
from spectrum_tokens.models.token import Token

HEADER = """\
# This file is generated from Adobe Spectrum design tokens.
# Source: https://github.com/adobe/spectrum-tokens
# Copyright 2017 Adobe Systems Incorporated
# Licensed under Apache License 2.0
# Generated by {generator} on {date}"""


class Renderer:
    """Base class for target syntaxes."""

    name: str = ""

    def __init__(self, namespace: str = DEFAULT_NAMESPACE):
        self.namespace = namespace

    def render(self, expr: Expression) -> str:
        """Render one expression."""
        if isinstance(expr, ColorLiteral):
            return self.color(expr)
        if isinstance(expr, NumberLiteral):
            return self.number(expr)
        if isinstance(expr, Reference):
            return self.reference(expr)
        if isinstance(expr, DarkModeConditional):
            return self.conditional(expr)
        if isinstance(expr, ScaledPixel):
            return self.scaled_pixel(expr)
        if isinstance(expr, FontReference):
            return self.font(expr)
        raise TypeError(f"Unknown expression node: {type(expr).__name__}")

    def color(self, expr: ColorLiteral) -> str:
        return f'"{expr.hex}"'

    def number(self, expr: NumberLiteral) -> str:
        return expr.text

    def reference(self, expr: Reference) -> str:
        raise NotImplementedError

    def conditional(self, expr: DarkModeConditional) -> str:
        raise NotImplementedError

    def scaled_pixel(self, expr: ScaledPixel) -> str:
        raise NotImplementedError

    def font(self, expr: FontReference) -> str:
        raise NotImplementedError

    def statement(self, token: Token) -> str:
        """Render the declaration of one token."""
        raise NotImplementedError

    def document(self, header: str, statements: list[str]) -> str:
        """Wrap the declarations into a complete file."""
        raise NotImplementedError


class TclRenderer(Renderer):
    """Tcl for a Tk theme, evaluated inside a namespace holding 'var'."""

    name = "tcl"

    def reference(self, expr: Reference) -> str:
        return f"$var({expr.key})"

    def conditional(self, expr: DarkModeConditional) -> str:
        flag = self.render(expr.flag)
        return f"[expr {{{flag} ? {self.render(expr.dark)} : {self.render(expr.light)}}}]"

    def scaled_pixel(self, expr: ScaledPixel) -> str:
        return f"[scale_pixel {expr.pixels}]"

    def font(self, expr: FontReference) -> str:
        bold = 1 if expr.bold else 0
        return f"[{self.namespace}::priv::get_or_create_font {{{expr.family}}} {{{expr.size}}} {bold}]"

    def statement(self, token: Token) -> str:
        return f"set var({token.key}) {self.render(token.value)}"

    def document(self, header: str, statements: list[str]) -> str:
        body = "\n".join(statements)
        return f"{header}\n\nnamespace eval {self.namespace} {{\n{body}\n}}"


class PythonRenderer(Renderer):
    """Python module exposing initialize(var, scale_pixel, get_or_create_font)."""

    name = "python"

    def number(self, expr: NumberLiteral) -> str:
        try:
            return str(int(expr.text))
        except ValueError:
            return repr(float(expr.text))

    def reference(self, expr: Reference) -> str:
        return f"var[{json.dumps(expr.key)}]"

    def conditional(self, expr: DarkModeConditional) -> str:
        flag = self.render(expr.flag)
        return f"({self.render(expr.dark)} if {flag} else {self.render(expr.light)})"

    def scaled_pixel(self, expr: ScaledPixel) -> str:
        return f"scale_pixel({expr.pixels})"

    def font(self, expr: FontReference) -> str:
        return (
            f"get_or_create_font({json.dumps(expr.family)}, "
            f"{json.dumps(expr.size)}, {expr.bold})"
        )

    def statement(self, token: Token) -> str:
        return f"    var[{json.dumps(token.key)}] = {self.render(token.value)}"

    def document(self, header: str, statements: list[str]) -> str:
        body = "\n".join(statements) if statements else "    pass"
        return (
            f"{header}\n"
            "\n\n"
            "def initialize(var, scale_pixel, get_or_create_font):\n"
            f"{body}"
        )


RENDERERS: dict[str, type[Renderer]] = {
    TclRenderer.name: TclRenderer,
    PythonRenderer.name: PythonRenderer,
}


def get_renderer(output_format: OutputFormat, namespace: str = DEFAULT_NAMESPACE) -> Renderer:
    """Create the renderer for an output format."""
    try:
        renderer_cls = RENDERERS[output_format]
    except KeyError:
        raise ValueError(f"Unknown output format: {output_format}") from None
    return renderer_cls(namespace)


class Emitter:
    """Serializes an ordered token list into one declaration block."""

    def __init__(self, renderer: Renderer | None = None, generator_name: str = GENERATOR_NAME):
        """
        Initialize the emitter.

        Args:
            renderer: Target syntax (defaults to Tcl in the spectrum namespace)
            generator_name: Tool name recorded in the header
        """
        self.renderer = renderer or TclRenderer()
        self.generator_name = generator_name

    def emit(self, tokens: list[Token], generated_at: datetime | None = None) -> str:
        """
        Render tokens in list order.

        Args:
            tokens: Tokens, already dependency sorted
            generated_at: Timestamp for the header (defaults to now, UTC)

        Returns:
            The generated file contents
        """
        date = (generated_at or datetime.now(UTC)).strftime(TIMESTAMP_FORMAT)
        header = HEADER.format(generator=self.generator_name, date=date)
        statements = [self.renderer.statement(token) for token in tokens]
        return self.renderer.document(header, statements)
