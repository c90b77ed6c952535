"""Reporters for smell analysis results.

Report aggregates examiners; one renderer per output format
(text, YAML, HTML) writes the result.
"""

from smellreport.application.reporters.factory import ReportFormat, create_renderer, create_report
from smellreport.application.reporters.html_reporter import HtmlRenderer
from smellreport.application.reporters.protocol import ReportRenderer
from smellreport.application.reporters.report import Report, ReportConfig
from smellreport.application.reporters.strategies import ReportStrategy, gather_results
from smellreport.application.reporters.text_reporter import TextRenderer
from smellreport.application.reporters.yaml_reporter import YamlRenderer

__all__ = [
    "HtmlRenderer",
    "Report",
    "ReportConfig",
    "ReportFormat",
    "ReportRenderer",
    "ReportStrategy",
    "TextRenderer",
    "YamlRenderer",
    "create_renderer",
    "create_report",
    "gather_results",
]
