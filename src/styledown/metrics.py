"""Text measurement for indent calculation.

List indentation aligns wrapped lines with the text after the bullet,
which needs the rendered width of the bullet string. TextMetrics is the
capability for that; MonospaceMetrics is a deterministic headless
implementation.

Example:
    >>> from styledown.attributes import Font
    >>> MonospaceMetrics().measure_width("• ", Font(size=10.0))
    12.0

"""

from __future__ import annotations

import unicodedata
from typing import Protocol, runtime_checkable

from styledown.attributes import Font


@runtime_checkable
class TextMetrics(Protocol):
    """Protocol for measuring rendered text width."""

    def measure_width(self, text: str, font: Font) -> float:
        """Return the width of ``text`` rendered in ``font``, in points."""
        ...


def _cell_width(char: str) -> int:
    # Combining marks and zero-width formatting occupy no cell
    if unicodedata.combining(char) or unicodedata.category(char) == "Cf":
        return 0
    if unicodedata.east_asian_width(char) in ("W", "F"):
        return 2
    return 1


class MonospaceMetrics:
    """Fixed-advance approximation of text width.

    Every cell advances ``advance_ratio * font.size`` points; wide East
    Asian characters take two cells, combining marks none.
    """

    __slots__ = ("advance_ratio",)

    def __init__(self, advance_ratio: float = 0.6) -> None:
        if advance_ratio <= 0:
            raise ValueError(f"advance_ratio must be positive, got {advance_ratio}")
        self.advance_ratio = advance_ratio

    def measure_width(self, text: str, font: Font) -> float:
        cells = sum(_cell_width(char) for char in text)
        return cells * self.advance_ratio * font.size


__all__ = [
    "MonospaceMetrics",
    "TextMetrics",
]
