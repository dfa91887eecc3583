"""Half-open text ranges.

Provides TextRange, the span type used for buffer edits, attribute
runs, and match capture groups.

Thread Safety:
TextRange is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TextRange:
    """Half-open span ``[start, end)`` of buffer positions.

    Attributes:
        start: First position covered (0-indexed)
        end: Position one past the last covered character

    Examples:
        >>> r = TextRange(2, 5)
        >>> r.length
        3
        >>> r.contains(4), r.contains(5)
        (True, False)

    """

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid range [{self.start}, {self.end})")

    @classmethod
    def of_length(cls, start: int, length: int) -> TextRange:
        """Create a range from a start position and a length."""
        return cls(start, start + length)

    @property
    def length(self) -> int:
        return self.end - self.start

    @property
    def is_empty(self) -> bool:
        return self.start == self.end

    def contains(self, index: int) -> bool:
        """Check whether ``index`` falls inside the range."""
        return self.start <= index < self.end

    def overlaps(self, other: TextRange) -> bool:
        """Check whether two ranges share at least one position."""
        return self.start < other.end and other.start < self.end

    def shifted(self, delta: int) -> TextRange:
        """Return the same span moved by ``delta`` positions."""
        return TextRange(self.start + delta, self.end + delta)

    def __str__(self) -> str:
        return f"[{self.start}, {self.end})"
