"""Formatting context: explicit color switch for one render."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING

from rich.color import ColorSystem
from rich.style import Style

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True, slots=True)
class FormatContext:
    """Display settings passed to every header/footer rendering call.

    Immutable, so one render always sees the same setting.

    Attributes:
        color: Emit ANSI color codes. False = plain text.
    """

    color: bool = True

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> FormatContext:
        """Build context from environment.

        Color is disabled when NO_COLOR is set to a non-empty value.

        Args:
            environ: Environment mapping (default: os.environ)

        Returns:
            FormatContext for current environment.
        """
        env = os.environ if environ is None else environ
        return cls(color=not env.get("NO_COLOR"))

    def paint(self, text: str, style: str) -> str:
        """Apply a rich style to text as ANSI codes.

        Args:
            text: Text to color.
            style: Rich style definition, e.g. "red" or "bold cyan".

        Returns:
            text wrapped in SGR codes, or text unchanged when color is off.
        """
        if not self.color:
            return text
        return Style.parse(style).render(text, color_system=ColorSystem.STANDARD)
