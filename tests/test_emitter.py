"""
Tests for the emitter and its renderers.
"""

import re
from datetime import UTC, datetime, timedelta

import pytest

from spectrum_tokens.compiler import Emitter, PythonRenderer, TclRenderer, get_renderer
from spectrum_tokens.constants import TokenCategory
from spectrum_tokens.models.expression import (
    ColorLiteral,
    DarkModeConditional,
    FontReference,
    NumberLiteral,
    Reference,
    ScaledPixel,
)
from spectrum_tokens.models.token import Token

GENERATED_AT = datetime(2025, 1, 2, 3, 4, 5)


def make_tokens() -> list[Token]:
    """A small dependency-ordered token list."""
    return [
        Token("gray-50", ColorLiteral("#FFFFFF"), TokenCategory.COLOR),
        Token(
            "background",
            DarkModeConditional(dark=ColorLiteral("#1D1D1D"), light=Reference("gray-50")),
            TokenCategory.COLOR,
            dependencies=("gray-50",),
        ),
        Token("spacing-100", ScaledPixel(8), TokenCategory.LAYOUT),
        Token("line-height-100", NumberLiteral("1.3"), TokenCategory.LAYOUT),
        Token(
            "component-m-bold",
            FontReference("sans-serif-font-family", "font-size-100", True),
            TokenCategory.FONT,
        ),
    ]


class TestTclRenderer:
    """Tests for Tcl output."""

    @pytest.fixture
    def renderer(self) -> TclRenderer:
        return TclRenderer()

    def test_color(self, renderer: TclRenderer) -> None:
        assert renderer.render(ColorLiteral("#FF0080")) == '"#FF0080"'

    def test_number(self, renderer: TclRenderer) -> None:
        assert renderer.render(NumberLiteral("1.5")) == "1.5"

    def test_number_text_unchanged(self, renderer: TclRenderer) -> None:
        """Tcl keeps the token text as written."""
        assert renderer.render(NumberLiteral("007")) == "007"

    def test_reference(self, renderer: TclRenderer) -> None:
        assert renderer.render(Reference("gray-100")) == "$var(gray-100)"

    def test_scaled_pixel(self, renderer: TclRenderer) -> None:
        assert renderer.render(ScaledPixel(16)) == "[scale_pixel 16]"
        assert renderer.render(ScaledPixel(-4)) == "[scale_pixel -4]"

    def test_conditional(self, renderer: TclRenderer) -> None:
        expr = DarkModeConditional(dark=Reference("gray-900"), light=ColorLiteral("#FFFFFF"))
        assert renderer.render(expr) == '[expr {$var(darkmode) ? $var(gray-900) : "#FFFFFF"}]'

    def test_font(self, renderer: TclRenderer) -> None:
        expr = FontReference("sans-serif-font-family", "font-size-100", False)
        assert renderer.render(expr) == (
            "[::spectrum::priv::get_or_create_font {sans-serif-font-family} {font-size-100} 0]"
        )

    def test_font_uses_namespace(self) -> None:
        """The font helper lives in the configured namespace."""
        expr = FontReference("serif-font-family", "font-size-200", True)
        assert TclRenderer("::mytheme").render(expr) == (
            "[::mytheme::priv::get_or_create_font {serif-font-family} {font-size-200} 1]"
        )

    def test_unknown_node(self, renderer: TclRenderer) -> None:
        with pytest.raises(TypeError):
            renderer.render("not an expression")


class TestPythonRenderer:
    """Tests for Python output."""

    @pytest.fixture
    def renderer(self) -> PythonRenderer:
        return PythonRenderer()

    def test_reference(self, renderer: PythonRenderer) -> None:
        assert renderer.render(Reference("gray-100")) == 'var["gray-100"]'

    def test_conditional(self, renderer: PythonRenderer) -> None:
        expr = DarkModeConditional(dark=Reference("gray-900"), light=ColorLiteral("#FFFFFF"))
        assert renderer.render(expr) == '(var["gray-900"] if var["darkmode"] else "#FFFFFF")'

    def test_scaled_pixel(self, renderer: PythonRenderer) -> None:
        assert renderer.render(ScaledPixel(-4)) == "scale_pixel(-4)"

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("1.3", "1.3"),
            ("007", "7"),
            ("-007", "-7"),
            ("5.", "5.0"),
            ("-.5", "-0.5"),
            ("1e-05", "1e-05"),
        ],
    )
    def test_number_is_python_literal(
        self, renderer: PythonRenderer, text: str, expected: str
    ) -> None:
        """Numbers are written in Python literal syntax."""
        assert renderer.render(NumberLiteral(text)) == expected

    def test_font(self, renderer: PythonRenderer) -> None:
        expr = FontReference("sans-serif-font-family", "font-size-100", True)
        assert renderer.render(expr) == (
            'get_or_create_font("sans-serif-font-family", "font-size-100", True)'
        )


class TestGetRenderer:
    """Tests for renderer selection."""

    def test_known_formats(self) -> None:
        assert isinstance(get_renderer("tcl"), TclRenderer)
        assert isinstance(get_renderer("python", "::x"), PythonRenderer)
        assert get_renderer("python", "::x").namespace == "::x"

    def test_unknown_format(self) -> None:
        with pytest.raises(ValueError, match="Unknown output format"):
            get_renderer("css")


class TestEmitter:
    """Tests for the complete emitted block."""

    def test_tcl_document(self) -> None:
        """Declarations in list order inside the namespace block."""
        output = Emitter().emit(make_tokens(), GENERATED_AT)
        lines = output.splitlines()

        assert "# Generated by spectrum-tokens on 2025-01-02 03:04:05" in lines
        start = lines.index("namespace eval ::spectrum {")
        assert lines[start + 1 :] == [
            'set var(gray-50) "#FFFFFF"',
            'set var(background) [expr {$var(darkmode) ? "#1D1D1D" : $var(gray-50)}]',
            "set var(spacing-100) [scale_pixel 8]",
            "set var(line-height-100) 1.3",
            "set var(component-m-bold) "
            "[::spectrum::priv::get_or_create_font {sans-serif-font-family} {font-size-100} 1]",
            "}",
        ]

    def test_python_document(self) -> None:
        """The Python target defines an initialize function."""
        emitter = Emitter(PythonRenderer(), generator_name="theme-build")
        output = emitter.emit(make_tokens(), GENERATED_AT)

        assert "# Generated by theme-build on 2025-01-02 03:04:05" in output
        assert "def initialize(var, scale_pixel, get_or_create_font):" in output
        assert '    var["gray-50"] = "#FFFFFF"' in output
        assert output.endswith(
            '    var["component-m-bold"] = '
            'get_or_create_font("sans-serif-font-family", "font-size-100", True)'
        )

    def test_python_document_is_valid_python(self) -> None:
        """The generated module compiles and initializes a dict."""
        output = Emitter(PythonRenderer()).emit(make_tokens(), GENERATED_AT)
        namespace: dict = {}
        exec(compile(output, "<generated>", "exec"), namespace)

        var = {"darkmode": False}
        namespace["initialize"](var, lambda px: px * 2, lambda family, size, bold: (family, size, bold))
        assert var["background"] == "#FFFFFF"
        assert var["spacing-100"] == 16
        assert var["line-height-100"] == 1.3
        assert var["component-m-bold"] == ("sans-serif-font-family", "font-size-100", True)

    def test_empty_python_document(self) -> None:
        """An empty token list still yields a valid function."""
        output = Emitter(PythonRenderer()).emit([], GENERATED_AT)
        assert output.endswith("def initialize(var, scale_pixel, get_or_create_font):\n    pass")

    def test_deterministic_apart_from_timestamp(self) -> None:
        """Same tokens and timestamp give the same text."""
        emitter = Emitter()
        assert emitter.emit(make_tokens(), GENERATED_AT) == emitter.emit(make_tokens(), GENERATED_AT)

    def test_default_timestamp(self) -> None:
        """Without a timestamp the current time is used."""
        output = Emitter().emit([])
        assert re.search(r"Generated by spectrum-tokens on \d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}", output)

    def test_default_timestamp_is_utc(self) -> None:
        """The default timestamp is the current UTC time."""
        output = Emitter().emit([])
        match = re.search(r"on (\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2})", output)
        stamped = datetime.strptime(match.group(1), "%Y-%m-%d %H:%M:%S").replace(tzinfo=UTC)
        assert abs(datetime.now(UTC) - stamped) < timedelta(minutes=1)

    def test_python_document_has_no_namespace(self) -> None:
        """The Python target carries no Tcl namespace."""
        output = Emitter(PythonRenderer("::theme")).emit(make_tokens(), GENERATED_AT)
        assert "::theme" not in output
        assert "Namespace" not in output
