"""Domain model: immutable analysis results consumed by reporters."""

from smellreport.domain.model.examiner import Examiner, ExaminerProtocol
from smellreport.domain.model.smell_warning import SmellWarning, WarningProtocol, warning_record

__all__ = [
    "Examiner",
    "ExaminerProtocol",
    "SmellWarning",
    "WarningProtocol",
    "warning_record",
]
