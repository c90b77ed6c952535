"""Template loading exceptions."""

from smellreport.domain.exceptions.base import SmellReportError


class TemplateLoadError(SmellReportError):
    """HTML template asset could not be loaded.

    Fatal: raised when the HTML renderer is built, never per report.

    Attributes:
        template_name: Asset name that failed to load
        reason: Why loading failed
    """

    def __init__(self, template_name: str, reason: str) -> None:
        # FAIL-FIRST validation
        if not template_name:
            raise ValueError("template_name must not be empty")
        if not reason:
            raise ValueError("reason must not be empty")

        self.template_name = template_name
        self.reason = reason
        super().__init__(f"Failed to load template '{template_name}': {reason}")
