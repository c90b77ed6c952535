"""Base exceptions for smellreport."""


class SmellReportError(Exception):
    """Root exception for all smellreport errors.

    All domain exceptions inherit from this.
    Allows catching all smellreport-specific errors.
    """
