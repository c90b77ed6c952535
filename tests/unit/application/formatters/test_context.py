"""Tests for formatters/context.py."""

from smellreport.application.formatters.context import FormatContext


class TestFormatContext:
    """Tests for FormatContext."""

    def test_color_enabled_by_default(self) -> None:
        assert FormatContext().color is True

    def test_paint_without_color_returns_text(self) -> None:
        assert FormatContext(color=False).paint("4 total warnings", "red") == "4 total warnings"

    def test_paint_red(self) -> None:
        assert FormatContext().paint("x", "red") == "\x1b[31mx\x1b[0m"

    def test_paint_keeps_newline_inside_codes(self) -> None:
        painted = FormatContext().paint("0 total warnings\n", "green")
        assert painted == "\x1b[32m0 total warnings\n\x1b[0m"

    def test_paint_empty_text(self) -> None:
        assert FormatContext().paint("", "cyan") == ""


class TestFormatContextFromEnv:
    """Tests for FormatContext.from_env()."""

    def test_no_color_set_disables(self) -> None:
        assert FormatContext.from_env({"NO_COLOR": "1"}).color is False

    def test_no_color_empty_keeps_color(self) -> None:
        assert FormatContext.from_env({"NO_COLOR": ""}).color is True

    def test_no_color_absent_keeps_color(self) -> None:
        assert FormatContext.from_env({}).color is True
