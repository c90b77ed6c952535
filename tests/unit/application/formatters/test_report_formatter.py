"""Tests for formatters/report_formatter.py."""

import pytest

from smellreport.application.formatters.context import FormatContext
from smellreport.application.formatters.report_formatter import ReportFormatter
from smellreport.application.formatters.warning import SimpleWarningFormatter
from tests.factories import make_examiner, make_smelly_examiner, make_warning

PLAIN = FormatContext(color=False)
COLOR = FormatContext(color=True)


class TestHeader:
    """Tests for ReportFormatter.header()."""

    def test_plain_header(self) -> None:
        header = ReportFormatter().header(make_smelly_examiner(), PLAIN)
        assert header == "string -- 2 warnings"

    @pytest.mark.parametrize(
        ("count", "expected"),
        [(0, "0 warnings"), (1, "1 warning"), (2, "2 warnings"), (11, "11 warnings")],
    )
    def test_pluralization(self, count: int, expected: str) -> None:
        examiner = make_examiner(*(["FeatureEnvy"] * count))
        header = ReportFormatter().header(examiner, PLAIN)
        assert header.endswith(f" -- {expected}")

    def test_colored_header(self) -> None:
        header = ReportFormatter().header(make_smelly_examiner(), COLOR)
        assert header == "\x1b[36mstring -- \x1b[0m\x1b[33m2 warning\x1b[0m\x1b[33ms\x1b[0m"

    def test_colored_header_singular(self) -> None:
        header = ReportFormatter().header(make_examiner("FeatureEnvy"), COLOR)
        assert header == "\x1b[36mstring -- \x1b[0m\x1b[33m1 warning\x1b[0m"


class TestFormatList:
    """Tests for ReportFormatter.format_list()."""

    def test_empty(self) -> None:
        assert ReportFormatter().format_list([], SimpleWarningFormatter()) == ""

    def test_indents_and_joins(self) -> None:
        warnings = [make_warning("A", context="x"), make_warning("B", context="y")]
        result = ReportFormatter().format_list(warnings, SimpleWarningFormatter())
        assert result == (
            "  x refers to a more than self (A)\n"
            "  y refers to a more than self (B)"
        )


class TestSummarize:
    """Tests for ReportFormatter.summarize()."""

    def test_clean_examiner_is_header_only(self) -> None:
        result = ReportFormatter().summarize(make_examiner(), SimpleWarningFormatter(), PLAIN)
        assert result == "string -- 0 warnings"

    def test_smelly_examiner_lists_warnings(self) -> None:
        result = ReportFormatter().summarize(make_smelly_examiner(), SimpleWarningFormatter(), PLAIN)
        header, body = result.split(":\n", 1)
        assert header == "string -- 2 warnings"
        assert "UncommunicativeParameterName" in body
        assert "FeatureEnvy" in body
        assert all(line.startswith("  ") for line in body.splitlines())


class TestTotalCountMessage:
    """Tests for ReportFormatter.total_count_message()."""

    def test_plain(self) -> None:
        assert ReportFormatter().total_count_message(4, PLAIN) == "4 total warnings\n"

    def test_singular(self) -> None:
        assert ReportFormatter().total_count_message(1, PLAIN) == "1 total warning\n"

    def test_zero_is_green(self) -> None:
        assert ReportFormatter().total_count_message(0, COLOR) == "\x1b[32m0 total warnings\n\x1b[0m"

    def test_nonzero_is_red(self) -> None:
        assert ReportFormatter().total_count_message(4, COLOR) == "\x1b[31m4 total warnings\n\x1b[0m"
