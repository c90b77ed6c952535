"""Report strategies: which examiners appear in a report, and in what form.

ReportStrategy is a plain enum. gather_results() dispatches on it;
every branch is pure and keeps no state between calls.

- SHOW_ALL: summary for every examiner, smelly or not
- SHOW_FLAGGED_ONLY: summary for smelly examiners only
- FLATTEN_RAW: raw warnings of all examiners, no formatting
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from smellreport.domain.exceptions.format import UnsupportedStrategyError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from smellreport.application.formatters.context import FormatContext
    from smellreport.application.formatters.report_formatter import ReportFormatterProtocol
    from smellreport.application.formatters.warning import WarningFormatter
    from smellreport.domain.model.examiner import ExaminerProtocol
    from smellreport.domain.model.smell_warning import WarningProtocol


class ReportStrategy(Enum):
    """Result gathering policy."""

    SHOW_ALL = "verbose"
    SHOW_FLAGGED_ONLY = "quiet"
    FLATTEN_RAW = "normal"

    @classmethod
    def from_name(cls, name: str) -> ReportStrategy:
        """Parse strategy name (case-insensitive).

        Accepts the enum value or its alias: all, flagged, raw.

        Raises:
            UnsupportedStrategyError: Unknown name.
        """
        key = name.strip().lower()
        for strategy in cls:
            if key in (strategy.value, strategy.name.lower()):
                return strategy
        if key in _ALIASES:
            return _ALIASES[key]
        raise UnsupportedStrategyError(name)


_ALIASES: dict[str, ReportStrategy] = {
    "all": ReportStrategy.SHOW_ALL,
    "flagged": ReportStrategy.SHOW_FLAGGED_ONLY,
    "raw": ReportStrategy.FLATTEN_RAW,
}


def summarize_all(
    examiners: Sequence[ExaminerProtocol],
    report_formatter: ReportFormatterProtocol,
    warning_formatter: WarningFormatter,
    context: FormatContext,
) -> list[str]:
    """One summary per examiner, in examiner order."""
    return [report_formatter.summarize(e, warning_formatter, context) for e in examiners]


def summarize_flagged(
    examiners: Sequence[ExaminerProtocol],
    report_formatter: ReportFormatterProtocol,
    warning_formatter: WarningFormatter,
    context: FormatContext,
) -> list[str]:
    """One summary per smelly examiner, in examiner order."""
    return [
        report_formatter.summarize(e, warning_formatter, context) for e in examiners if e.smelly
    ]


def flatten(examiners: Sequence[ExaminerProtocol]) -> list[WarningProtocol]:
    """All warnings: examiner order, then warning order within examiner."""
    return [warning for examiner in examiners for warning in examiner.smells]


def gather_results(
    strategy: ReportStrategy,
    examiners: Sequence[ExaminerProtocol],
    report_formatter: ReportFormatterProtocol,
    warning_formatter: WarningFormatter,
    context: FormatContext,
) -> list[str] | list[WarningProtocol]:
    """Gather report results according to strategy.

    Args:
        strategy: Gathering policy.
        examiners: Examiners in report order.
        report_formatter: Header/list formatter (ignored by FLATTEN_RAW).
        warning_formatter: Per-warning formatter (ignored by FLATTEN_RAW).
        context: Color settings (ignored by FLATTEN_RAW).

    Returns:
        Rendered summaries, or raw warnings for FLATTEN_RAW.
    """
    match strategy:
        case ReportStrategy.SHOW_ALL:
            return summarize_all(examiners, report_formatter, warning_formatter, context)
        case ReportStrategy.SHOW_FLAGGED_ONLY:
            return summarize_flagged(examiners, report_formatter, warning_formatter, context)
        case ReportStrategy.FLATTEN_RAW:
            return flatten(examiners)
