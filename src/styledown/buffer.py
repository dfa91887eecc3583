"""Mutable styled text: characters plus an interval-attribute store.

StyledTextBuffer holds a string and a set of (range, key, value) spans.
Every edit re-expresses the stored spans in post-edit coordinates, so no
span ever references deleted text or stale offsets.

Edit semantics:
    Each edit replaces ``[start, end)`` with new text (a delete replaces
    with "", an insert replaces an empty range). For every stored span:

    - A span wholly before the edit is unchanged.
    - A span wholly after the edit shifts by the net length delta.
    - The edit's *anchor* is its first replaced character, or for a pure
      insert the character before the insertion point (position 0 when
      inserting at the start). A span containing the anchor absorbs the
      new text: replacement content inherits its attributes, and any part
      of the span past the edit is kept and shifted.
    - A span starting inside the replaced region keeps only its tail past
      the edit. A span wholly inside the region, not containing the anchor,
      disappears.

    Spans that become empty are dropped.

Thread Safety:
Not thread-safe. A buffer has a single mutator for the duration of an
element pass.

"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from styledown.errors import BufferRangeError
from styledown.ranges import TextRange


@dataclass(frozen=True, slots=True)
class AttributeSpan:
    """One attribute value over one range."""

    range: TextRange
    key: str
    value: Any


def _map_position(position: int, edit: TextRange, inserted: int) -> int:
    """Map a span boundary that does not contain the edit anchor."""
    delta = inserted - edit.length
    if position < edit.start:
        return position
    if position >= edit.end and (position > edit.start or edit.is_empty):
        return position + delta
    if position == edit.start:
        return position
    return edit.start + inserted


def _map_span(span: TextRange, edit: TextRange, inserted: int, anchor: int) -> TextRange | None:
    delta = inserted - edit.length
    if span.contains(anchor):
        start = span.start
        end = max(span.end, edit.end) + delta
    else:
        start = _map_position(span.start, edit, inserted)
        end = _map_position(span.end, edit, inserted)
    if end <= start:
        return None
    return TextRange(start, end)


class StyledTextBuffer:
    """Mutable character sequence with attributes over ranges.

    For any attribute key, stored spans never overlap: setting a key over
    a range clips whatever value that key had there before.

    Usage:
        >>> buf = StyledTextBuffer("[text](example.com)")
        >>> buf.delete(TextRange(0, 1))
        >>> buf.text
        'text](example.com)'
        >>> buf.add_attribute("color", "blue", TextRange(0, 4))
        >>> buf.attribute("color", 3)
        'blue'

    """

    __slots__ = ("_spans", "_text")

    def __init__(self, text: str = "", attributes: Mapping[str, Any] | None = None) -> None:
        """Initialize buffer.

        Args:
            text: Initial characters
            attributes: Attributes applied over the whole initial text
        """
        self._text = text
        self._spans: list[AttributeSpan] = []
        if attributes and text:
            self.add_attributes(attributes, TextRange(0, len(text)))

    @property
    def text(self) -> str:
        """Current characters."""
        return self._text

    def __len__(self) -> int:
        return len(self._text)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"StyledTextBuffer({self._text!r}, spans={len(self._spans)})"

    def copy(self) -> StyledTextBuffer:
        """Return an independent buffer with the same text and spans."""
        clone = StyledTextBuffer(self._text)
        clone._spans = list(self._spans)
        return clone

    def substring(self, range: TextRange) -> str:
        """Return the characters covered by ``range``."""
        self._check(range)
        return self._text[range.start : range.end]

    # =========================================================================
    # Attributes
    # =========================================================================

    def add_attribute(self, key: str, value: Any, range: TextRange) -> None:
        """Set ``key`` to ``value`` over ``range``, preserving other keys."""
        self._check(range)
        if range.is_empty:
            return
        self._clip(key, range)
        self._spans.append(AttributeSpan(range, key, value))

    def add_attributes(self, attributes: Mapping[str, Any], range: TextRange) -> None:
        """Set several attributes over ``range``."""
        self._check(range)
        for key, value in attributes.items():
            self.add_attribute(key, value, range)

    def remove_attribute(self, key: str, range: TextRange) -> None:
        """Remove ``key`` from every position in ``range``."""
        self._check(range)
        if not range.is_empty:
            self._clip(key, range)

    def attributes_at(self, index: int) -> dict[str, Any]:
        """Return all attributes in effect at ``index``."""
        if not 0 <= index < len(self._text):
            raise BufferRangeError(index, index + 1, len(self._text))
        return {span.key: span.value for span in self._spans if span.range.contains(index)}

    def attribute(self, key: str, index: int) -> Any | None:
        """Return the value of ``key`` at ``index``, or None."""
        return self.attributes_at(index).get(key)

    def attribute_runs(self, key: str) -> list[tuple[TextRange, Any]]:
        """Return ``(range, value)`` runs for ``key`` in buffer order.

        Adjacent runs carrying equal values are merged.
        """
        runs: list[tuple[TextRange, Any]] = []
        for span in sorted(
            (s for s in self._spans if s.key == key), key=lambda s: s.range.start
        ):
            if runs and runs[-1][0].end == span.range.start and runs[-1][1] == span.value:
                runs[-1] = (TextRange(runs[-1][0].start, span.range.end), span.value)
            else:
                runs.append((span.range, span.value))
        return runs

    def spans(self) -> tuple[AttributeSpan, ...]:
        """Return every stored span, ordered by position then key."""
        return tuple(sorted(self._spans, key=lambda s: (s.range.start, s.range.end, s.key)))

    # =========================================================================
    # Edits
    # =========================================================================

    def insert(self, index: int, text: str) -> None:
        """Insert ``text`` before position ``index``."""
        if not 0 <= index <= len(self._text):
            raise BufferRangeError(index, index, len(self._text))
        self.replace(TextRange(index, index), text)

    def delete(self, range: TextRange) -> None:
        """Delete the characters covered by ``range``."""
        self.replace(range, "")

    def replace(self, range: TextRange, text: str) -> None:
        """Replace the characters covered by ``range`` with ``text``.

        Raises:
            BufferRangeError: If ``range`` extends past the buffer end.
                Nothing is modified in that case.
        """
        self._check(range)
        if range.is_empty and not text:
            return

        anchor = range.start if not range.is_empty else max(range.start - 1, 0)
        spans: list[AttributeSpan] = []
        for span in self._spans:
            mapped = _map_span(span.range, range, len(text), anchor)
            if mapped is not None:
                spans.append(AttributeSpan(mapped, span.key, span.value))

        self._text = self._text[: range.start] + text + self._text[range.end :]
        self._spans = spans

    # =========================================================================
    # Internals
    # =========================================================================

    def _check(self, range: TextRange) -> None:
        if range.end > len(self._text):
            raise BufferRangeError(range.start, range.end, len(self._text))

    def _clip(self, key: str, range: TextRange) -> None:
        kept: list[AttributeSpan] = []
        for span in self._spans:
            if span.key != key or not span.range.overlaps(range):
                kept.append(span)
                continue
            if span.range.start < range.start:
                kept.append(AttributeSpan(TextRange(span.range.start, range.start), key, span.value))
            if span.range.end > range.end:
                kept.append(AttributeSpan(TextRange(range.end, span.range.end), key, span.value))
        self._spans = kept


__all__ = [
    "AttributeSpan",
    "StyledTextBuffer",
]
