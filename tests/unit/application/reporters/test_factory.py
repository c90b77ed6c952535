"""Tests for reporters/factory.py."""

import io
from pathlib import Path

import pytest

from smellreport.application.reporters.factory import ReportFormat, create_report
from smellreport.application.reporters.strategies import ReportStrategy
from smellreport.domain.exceptions import UnsupportedReportFormatError
from tests.factories import make_examiner


class TestReportFormat:
    """Tests for ReportFormat.from_name()."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("text", ReportFormat.TEXT),
            ("yaml", ReportFormat.YAML),
            ("structured", ReportFormat.YAML),
            ("HTML", ReportFormat.HTML),
        ],
    )
    def test_known_names(self, name: str, expected: ReportFormat) -> None:
        assert ReportFormat.from_name(name) is expected

    def test_unknown_name_raises(self) -> None:
        with pytest.raises(UnsupportedReportFormatError) as exc_info:
            ReportFormat.from_name("pdf")
        assert exc_info.value.format_name == "pdf"
        assert exc_info.value.supported == ("text", "yaml", "html")


class TestCreateReport:
    """Tests for create_report()."""

    def test_default_is_text(self) -> None:
        output = io.StringIO()
        report = create_report(output=output)
        assert report.config.strategy is ReportStrategy.SHOW_FLAGGED_ONLY
        report.add_examiner(make_examiner()).add_examiner(make_examiner()).show()
        assert output.getvalue().endswith("0 total warnings\n\x1b[0m")

    def test_yaml(self) -> None:
        output = io.StringIO()
        report = create_report("yaml", output=output)
        report.add_examiner(make_examiner()).show()
        assert output.getvalue() == "--- []\n"

    def test_html(self, tmp_path: Path) -> None:
        output = io.StringIO()
        path = tmp_path / "reek.html"
        report = create_report("html", output=output, html_path=path)
        report.add_examiner(make_examiner()).show()
        assert "0 total warnings" in path.read_text(encoding="utf-8")

    def test_unsupported_format_produces_no_output(self, tmp_path: Path) -> None:
        output = io.StringIO()
        with pytest.raises(UnsupportedReportFormatError):
            create_report("pdf", output=output, html_path=tmp_path / "reek.html")
        assert output.getvalue() == ""
        assert list(tmp_path.iterdir()) == []
