"""Nesting-level markup elements.

A level element's pattern has two groups: a run of marker characters and
the line content. The run length sets the nesting level, which drives
both styling and the replacement text for the markers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from styledown.elements.base import PatternElement
from styledown.ranges import TextRange
from styledown.utils.logger import get_logger

if TYPE_CHECKING:
    from styledown.buffer import StyledTextBuffer
    from styledown.matcher import Match

logger = get_logger(__name__)


class LevelElement(PatternElement):
    """Element whose styling depends on a marker-count nesting level.

    Processing order per match:

    1. ``add_attributes`` styles the whole matched line (markers + content).
    2. ``format_text`` rewrites the marker prefix (markers + separating
       whitespace). The buffer's anchor rule makes the new prefix inherit
       the attributes applied in step 1.

    Styling first matters: after the rewrite, the match offsets no longer
    describe the line.
    """

    def level_for(self, marker_count: int) -> int:
        """Map a marker run length to a zero-based nesting level."""
        return max(marker_count - 1, 0)

    def attributes_for_level(self, level: int) -> dict[str, Any]:
        """Attributes for a line at ``level``. Override to vary by depth."""
        return self.attributes

    def add_attributes(self, buffer: StyledTextBuffer, range: TextRange, level: int) -> None:
        buffer.add_attributes(self.attributes_for_level(level), range)

    def format_text(self, buffer: StyledTextBuffer, range: TextRange, level: int) -> None:
        """Rewrite the marker prefix covered by ``range``. No-op by default."""

    def match(self, match: Match, buffer: StyledTextBuffer) -> None:
        markers = match.group(1)
        content = match.group(2)
        if (
            markers is None
            or content is None
            or markers.is_empty
            or content.start < markers.end
            or match.range.end > len(buffer)
        ):
            logger.debug("Skipping malformed %s match at %s", type(self).__name__, match.range)
            return

        level = self.level_for(markers.length)
        self.add_attributes(buffer, match.range, level)
        self.format_text(buffer, TextRange(markers.start, content.start), level)
