"""Smell warning value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence


class WarningProtocol(Protocol):
    """Read-only view of a detected smell.

    Formatters and renderers depend on this Protocol only.
    """

    @property
    def context(self) -> str: ...

    @property
    def message(self) -> str: ...

    @property
    def subclass(self) -> str: ...

    @property
    def lines(self) -> Sequence[int]: ...

    @property
    def source(self) -> str: ...


def warning_record(warning: WarningProtocol) -> dict[str, object]:
    """Convert any warning to a plain record for serializers and templates."""
    return {
        "context": warning.context,
        "message": warning.message,
        "subclass": warning.subclass,
        "lines": list(warning.lines),
        "source": warning.source,
    }


@dataclass(frozen=True, slots=True)
class SmellWarning:
    """One detected code smell.

    Produced by the analysis engine, never mutated afterwards.

    Attributes:
        context: Where the smell was found (class, method, module name)
        message: Human-readable description
        subclass: Smell kind, e.g. "FeatureEnvy"
        lines: Line numbers involved (1-based, in report order)
        source: Originating unit (file name or "string")
    """

    context: str
    message: str
    subclass: str
    lines: tuple[int, ...] = ()
    source: str = "string"

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.message:
            raise ValueError("message must not be empty")
        if not self.subclass:
            raise ValueError("subclass must not be empty")
        if isinstance(self.lines, str | bytes):
            raise TypeError(f"lines must be a sequence of int, got {type(self.lines).__name__}")
        # frozen: normalize any sequence to tuple
        object.__setattr__(self, "lines", tuple(self.lines))
        for line in self.lines:
            if line <= 0:
                raise ValueError(f"line numbers must be > 0, got {line}")

    def to_dict(self) -> dict[str, object]:
        """Convert to a plain record for serializers and templates."""
        return warning_record(self)
