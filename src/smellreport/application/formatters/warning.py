"""Warning formatters: warning → single line of text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from smellreport.domain.model.smell_warning import WarningProtocol


class WarningFormatter(Protocol):
    """Protocol for warning formatters.

    One formatter is used for a whole render, never mixed.
    """

    def format(self, warning: WarningProtocol) -> str:
        """Format one warning.

        Args:
            warning: Warning to format.

        Returns:
            Single-line representation.
        """
        ...


@dataclass(frozen=True, slots=True)
class SimpleWarningFormatter:
    """Format as: context message (subclass)."""

    def format(self, warning: WarningProtocol) -> str:
        return f"{warning.context} {warning.message} ({warning.subclass})"


@dataclass(frozen=True, slots=True)
class WarningFormatterWithLineNumbers:
    """Format as: [lines]:context message (subclass)."""

    def format(self, warning: WarningProtocol) -> str:
        simple = SimpleWarningFormatter().format(warning)
        return f"{list(warning.lines)}:{simple}"


@dataclass(frozen=True, slots=True)
class SingleLineWarningFormatter:
    """Format as: source:first_line: context message (subclass).

    Editor-friendly location prefix. A warning without line
    numbers gets "source: " only.
    """

    def format(self, warning: WarningProtocol) -> str:
        simple = SimpleWarningFormatter().format(warning)
        if not warning.lines:
            return f"{warning.source}: {simple}"
        return f"{warning.source}:{warning.lines[0]}: {simple}"
