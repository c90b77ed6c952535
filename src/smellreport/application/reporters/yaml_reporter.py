"""YAML renderer: flat list of warning records.

An empty report is written as an empty YAML list, never null.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO, cast

import yaml

from smellreport.application.reporters.strategies import ReportStrategy
from smellreport.domain.model.smell_warning import warning_record

if TYPE_CHECKING:
    from smellreport.application.reporters.report import Report
    from smellreport.domain.model.smell_warning import WarningProtocol


class YamlRenderer:
    """Machine-readable report for other tools."""

    def __init__(self, output: TextIO | None = None) -> None:
        """Initialize renderer.

        Args:
            output: Output stream (default: sys.stdout)
        """
        self._output = output if output is not None else sys.stdout

    @property
    def forced_strategy(self) -> ReportStrategy:
        """Records are built from raw warnings."""
        return ReportStrategy.FLATTEN_RAW

    def show(self, report: Report) -> None:
        """Write all warnings as a YAML document."""
        self._output.write(self.render(report))

    def render(self, report: Report) -> str:
        """Serialize all warnings as a YAML document string."""
        warnings = cast("list[WarningProtocol]", report.smells())
        return yaml.safe_dump(
            [warning_record(w) for w in warnings],
            explicit_start=True,
            allow_unicode=True,
            sort_keys=False,
            default_flow_style=False,
        )
