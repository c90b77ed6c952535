"""Format selection: format name → Report bound to a renderer."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, TextIO

from smellreport.application.reporters.html_reporter import HtmlRenderer
from smellreport.application.reporters.report import Report
from smellreport.application.reporters.text_reporter import TextRenderer
from smellreport.application.reporters.yaml_reporter import YamlRenderer
from smellreport.domain.exceptions.format import UnsupportedReportFormatError

if TYPE_CHECKING:
    from pathlib import Path

    from smellreport.application.reporters.protocol import ReportRenderer
    from smellreport.application.reporters.report import ReportConfig


class ReportFormat(Enum):
    """Supported output formats."""

    TEXT = "text"
    YAML = "yaml"
    HTML = "html"

    @classmethod
    def from_name(cls, name: str) -> ReportFormat:
        """Parse format name (case-insensitive). "structured" = YAML.

        Raises:
            UnsupportedReportFormatError: Unknown name.
        """
        key = name.strip().lower()
        if key == "structured":
            return cls.YAML
        for fmt in cls:
            if fmt.value == key:
                return fmt
        raise UnsupportedReportFormatError(name, tuple(f.value for f in cls))


DEFAULT_FORMAT = ReportFormat.TEXT


def create_renderer(
    fmt: ReportFormat,
    *,
    output: TextIO | None = None,
    html_path: Path | None = None,
) -> ReportRenderer:
    """Build the renderer for a format."""
    match fmt:
        case ReportFormat.TEXT:
            return TextRenderer(output)
        case ReportFormat.YAML:
            return YamlRenderer(output)
        case ReportFormat.HTML:
            return HtmlRenderer(html_path, output)


def create_report(
    format_name: str = DEFAULT_FORMAT.value,
    config: ReportConfig | None = None,
    *,
    output: TextIO | None = None,
    html_path: Path | None = None,
) -> Report:
    """Create an empty report for an output format.

    Args:
        format_name: text, yaml (alias structured), or html.
        config: Report configuration. Uses defaults if None.
        output: Stream for text/yaml output and html confirmation.
        html_path: HTML destination file (default: reek.html).

    Returns:
        Report ready for add_examiner() calls.

    Raises:
        UnsupportedReportFormatError: Unknown format, nothing is written.
        TemplateLoadError: HTML template cannot be loaded.
    """
    fmt = ReportFormat.from_name(format_name)
    renderer = create_renderer(fmt, output=output, html_path=html_path)
    return Report(config, renderer)
