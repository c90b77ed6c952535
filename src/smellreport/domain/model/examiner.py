"""Examiner: analysis result for one source unit."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence

    from smellreport.domain.model.smell_warning import SmellWarning, WarningProtocol


class ExaminerProtocol(Protocol):
    """Read-only view of an examined unit.

    Reporters depend on this Protocol only. Callers may pass
    their own objects as long as they expose these members.
    """

    @property
    def description(self) -> str: ...

    @property
    def smells(self) -> Sequence[WarningProtocol]: ...

    @property
    def smells_count(self) -> int: ...

    @property
    def smelly(self) -> bool: ...


@dataclass(frozen=True, slots=True)
class Examiner:
    """Analyzed unit with its warnings.

    Attributes:
        description: Display name of the unit
        smells: Warnings in the order the analysis attached them
    """

    description: str
    smells: tuple[SmellWarning, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.description:
            raise ValueError("description must not be empty")
        if isinstance(self.smells, str | bytes):
            raise TypeError(f"smells must be a sequence of warnings, got {type(self.smells).__name__}")
        # frozen: normalize any sequence to tuple
        object.__setattr__(self, "smells", tuple(self.smells))

    @property
    def smells_count(self) -> int:
        """Number of warnings."""
        return len(self.smells)

    @property
    def smelly(self) -> bool:
        """Check if the unit has at least one warning."""
        return len(self.smells) > 0
