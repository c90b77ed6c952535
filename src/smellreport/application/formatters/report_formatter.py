"""Report formatter: examiner header, warning list, and totals."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Iterable

    from smellreport.application.formatters.context import FormatContext
    from smellreport.application.formatters.warning import WarningFormatter
    from smellreport.domain.model.examiner import ExaminerProtocol
    from smellreport.domain.model.smell_warning import WarningProtocol

DESCRIPTION_COLOR = "cyan"
COUNT_COLOR = "yellow"
NO_WARNINGS_COLOR = "green"
WARNINGS_COLOR = "red"


class ReportFormatterProtocol(Protocol):
    """Protocol for header and list rendering used by report strategies."""

    def header(self, examiner: ExaminerProtocol, context: FormatContext) -> str: ...

    def format_list(
        self,
        warnings: Iterable[WarningProtocol],
        warning_formatter: WarningFormatter,
    ) -> str: ...

    def summarize(
        self,
        examiner: ExaminerProtocol,
        warning_formatter: WarningFormatter,
        context: FormatContext,
    ) -> str: ...

    def total_count_message(self, total: int, context: FormatContext) -> str: ...


def _plural(count: int) -> str:
    """Suffix for "warning": empty only for exactly one."""
    return "" if count == 1 else "s"


@dataclass(frozen=True, slots=True)
class ReportFormatter:
    """Default report formatter.

    Pure: every method depends only on its arguments.
    """

    def header(self, examiner: ExaminerProtocol, context: FormatContext) -> str:
        """Build "<description> -- <N> warning[s]".

        Description part is cyan, count part is yellow.
        The plural "s" is painted separately.
        """
        count = examiner.smells_count
        result = context.paint(f"{examiner.description} -- ", DESCRIPTION_COLOR)
        result += context.paint(f"{count} warning", COUNT_COLOR)
        suffix = _plural(count)
        if suffix:
            result += context.paint(suffix, COUNT_COLOR)
        return result

    def format_list(
        self,
        warnings: Iterable[WarningProtocol],
        warning_formatter: WarningFormatter,
    ) -> str:
        """Format warnings one per line, indented by two spaces."""
        return "\n".join(f"  {warning_formatter.format(w)}" for w in warnings)

    def summarize(
        self,
        examiner: ExaminerProtocol,
        warning_formatter: WarningFormatter,
        context: FormatContext,
    ) -> str:
        """Header alone, or header + ":" + warning list when smelly."""
        result = self.header(examiner, context)
        if examiner.smelly:
            result += ":\n" + self.format_list(examiner.smells, warning_formatter)
        return result

    def total_count_message(self, total: int, context: FormatContext) -> str:
        """Footer line: green when clean, red otherwise."""
        color = NO_WARNINGS_COLOR if total == 0 else WARNINGS_COLOR
        return context.paint(f"{total} total warning{_plural(total)}\n", color)
