"""Report selection exceptions."""

from smellreport.domain.exceptions.base import SmellReportError


class UnsupportedReportFormatError(SmellReportError):
    """Requested output format is not known.

    Raised when the report is selected, before anything is written.

    Attributes:
        format_name: Rejected format selector
        supported: Known format names
    """

    def __init__(self, format_name: str, supported: tuple[str, ...]) -> None:
        # FAIL-FIRST: validate required parameters
        if format_name is None:
            raise TypeError("format_name must not be None")
        if not supported:
            raise ValueError("supported must not be empty")

        self.format_name = format_name
        self.supported = supported
        super().__init__(
            f"Unsupported report format '{format_name}', expected one of: {', '.join(supported)}",
        )


class UnsupportedStrategyError(SmellReportError):
    """Requested report strategy is not known.

    Attributes:
        strategy_name: Rejected strategy name
    """

    def __init__(self, strategy_name: str) -> None:
        if strategy_name is None:
            raise TypeError("strategy_name must not be None")

        self.strategy_name = strategy_name
        super().__init__(f"Unsupported report strategy '{strategy_name}'")
