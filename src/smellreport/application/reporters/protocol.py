"""Renderer protocol: contract for all output formats."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from smellreport.application.reporters.report import Report
    from smellreport.application.reporters.strategies import ReportStrategy


class ReportRenderer(Protocol):
    """Protocol for report renderers.

    One implementation per output format. A new format adds a
    renderer, the Report aggregator stays unchanged.

    Attributes:
        forced_strategy: Strategy the format requires. None = use config.
    """

    @property
    def forced_strategy(self) -> ReportStrategy | None: ...

    def show(self, report: Report) -> None:
        """Render report and write it to the renderer's destination.

        Args:
            report: Aggregated examiners with configuration.
        """
        ...
