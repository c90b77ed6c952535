"""Domain exceptions."""

from smellreport.domain.exceptions.base import SmellReportError
from smellreport.domain.exceptions.format import UnsupportedReportFormatError, UnsupportedStrategyError
from smellreport.domain.exceptions.template import TemplateLoadError

__all__ = [
    "SmellReportError",
    "UnsupportedReportFormatError",
    "UnsupportedStrategyError",
    "TemplateLoadError",
]
