"""Text renderer: colorized summaries on a text stream."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from smellreport.application.reporters.report import Report
    from smellreport.application.reporters.strategies import ReportStrategy


class TextRenderer:
    """Human-readable report.

    Uses the report's configured strategy. Examiner summaries are
    followed by a total count footer when more than one examiner
    was added.
    """

    def __init__(self, output: TextIO | None = None) -> None:
        """Initialize renderer.

        Args:
            output: Output stream (default: sys.stdout)
        """
        self._output = output if output is not None else sys.stdout

    @property
    def forced_strategy(self) -> ReportStrategy | None:
        """Text output works with any strategy."""
        return None

    def show(self, report: Report) -> None:
        """Write summaries and footer to the output stream."""
        if report.has_smells():
            report.sort_examiners()
        self._display_summary(report)
        self._display_total_smell_count(report)

    def _display_summary(self, report: Report) -> None:
        formatter = report.config.warning_formatter
        # FLATTEN_RAW yields warnings: one formatted line each
        lines = [
            entry if isinstance(entry, str) else formatter.format(entry)
            for entry in report.smells()
        ]
        self._output.write("\n".join(line for line in lines if line))

    def _display_total_smell_count(self, report: Report) -> None:
        if len(report.examiners) > 1:
            config = report.config
            self._output.write("\n")
            self._output.write(
                config.report_formatter.total_count_message(report.total_smell_count, config.context),
            )
