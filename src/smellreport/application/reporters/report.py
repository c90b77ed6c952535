"""Report aggregator: collects examiners and dispatches rendering."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from smellreport.application.formatters.context import FormatContext
from smellreport.application.formatters.report_formatter import ReportFormatter
from smellreport.application.formatters.warning import SimpleWarningFormatter
from smellreport.application.reporters.strategies import ReportStrategy, gather_results

if TYPE_CHECKING:
    from smellreport.application.formatters.report_formatter import ReportFormatterProtocol
    from smellreport.application.formatters.warning import WarningFormatter
    from smellreport.application.reporters.protocol import ReportRenderer
    from smellreport.domain.model.examiner import ExaminerProtocol
    from smellreport.domain.model.smell_warning import WarningProtocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ReportConfig:
    """Configuration for a report.

    All fields have defaults. Immutable (frozen dataclass):
    a report keeps its configuration for its whole life.

    Attributes:
        strategy: Result gathering policy. Renderers may force another.
        warning_formatter: Formatter for single warnings.
        report_formatter: Formatter for headers, lists, and totals.
        sort_by_issue_count: Text output lists smelliest examiners first.
        context: Color settings for this report.
    """

    strategy: ReportStrategy = ReportStrategy.SHOW_FLAGGED_ONLY
    warning_formatter: WarningFormatter = field(default_factory=SimpleWarningFormatter)
    report_formatter: ReportFormatterProtocol = field(default_factory=ReportFormatter)
    sort_by_issue_count: bool = False
    context: FormatContext = field(default_factory=FormatContext)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.strategy, ReportStrategy):
            raise TypeError(f"strategy must be ReportStrategy, got {type(self.strategy).__name__}")
        if self.warning_formatter is None:
            raise TypeError("warning_formatter must not be None")
        if self.report_formatter is None:
            raise TypeError("report_formatter must not be None")
        if not isinstance(self.context, FormatContext):
            raise TypeError(f"context must be FormatContext, got {type(self.context).__name__}")


class Report:
    """Smells and smell counts collected across examiners.

    Examiners keep insertion order. The running total is updated
    on every add and always equals the sum of examiner counts.

    Example:
        report = Report().add_examiner(first).add_examiner(second)
        report.show()
    """

    def __init__(
        self,
        config: ReportConfig | None = None,
        renderer: ReportRenderer | None = None,
    ) -> None:
        """Initialize report.

        Args:
            config: Report configuration. Uses defaults if None.
            renderer: Output format. Plain text on stdout if None.
        """
        if renderer is None:
            from smellreport.application.reporters.text_reporter import TextRenderer

            renderer = TextRenderer()

        config = config or ReportConfig()
        if renderer.forced_strategy is not None:
            config = replace(config, strategy=renderer.forced_strategy)

        self._config = config
        self._renderer = renderer
        self._examiners: list[ExaminerProtocol] = []
        self._total_smell_count = 0

    @property
    def config(self) -> ReportConfig:
        """Effective configuration (after the renderer's forced strategy)."""
        return self._config

    @property
    def examiners(self) -> tuple[ExaminerProtocol, ...]:
        """Examiners in report order."""
        return tuple(self._examiners)

    @property
    def total_smell_count(self) -> int:
        """Sum of smells_count over all added examiners."""
        return self._total_smell_count

    def add_examiner(self, examiner: ExaminerProtocol) -> Report:
        """Add examiner and update the running total.

        Returns:
            self, for chained calls.
        """
        self._total_smell_count += examiner.smells_count
        self._examiners.append(examiner)
        logger.debug(
            "added examiner %s (%d smells, %d total)",
            examiner.description,
            examiner.smells_count,
            self._total_smell_count,
        )
        return self

    def has_smells(self) -> bool:
        """Check if any added examiner has warnings."""
        return self._total_smell_count > 0

    def smells(self) -> list[str] | list[WarningProtocol]:
        """Gather results with the configured strategy.

        Recomputed on each call; reflects examiners added so far.
        """
        return gather_results(
            self._config.strategy,
            self._examiners,
            self._config.report_formatter,
            self._config.warning_formatter,
            self._config.context,
        )

    def sort_examiners(self) -> None:
        """Order examiners by smell count, descending, if configured.

        Sort is stable: equal counts keep insertion order.
        """
        if self._config.sort_by_issue_count:
            self._examiners.sort(key=lambda e: e.smells_count, reverse=True)

    def show(self) -> None:
        """Render with this report's output format."""
        self._renderer.show(self)
