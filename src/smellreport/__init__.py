"""smellreport - code smell reports as colorized text, YAML, or HTML."""

__version__ = "0.1.0"

from smellreport.application.reporters.factory import create_report
from smellreport.application.reporters.report import Report, ReportConfig
from smellreport.domain.model.examiner import Examiner
from smellreport.domain.model.smell_warning import SmellWarning

__all__ = ["Examiner", "Report", "ReportConfig", "SmellWarning", "create_report", "__version__"]
