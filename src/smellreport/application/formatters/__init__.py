"""Formatters: warnings and examiner summaries → strings.

FormatContext carries the color switch explicitly.
No module-level state is read while formatting.
"""

from smellreport.application.formatters.context import FormatContext
from smellreport.application.formatters.report_formatter import ReportFormatter, ReportFormatterProtocol
from smellreport.application.formatters.warning import (
    SimpleWarningFormatter,
    SingleLineWarningFormatter,
    WarningFormatter,
    WarningFormatterWithLineNumbers,
)

__all__ = [
    "FormatContext",
    "ReportFormatter",
    "ReportFormatterProtocol",
    "SimpleWarningFormatter",
    "SingleLineWarningFormatter",
    "WarningFormatter",
    "WarningFormatterWithLineNumbers",
]
