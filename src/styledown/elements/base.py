"""Base class for pattern-driven markup elements.

PatternElement compiles the element's pattern up front and then drives
a single forward pass: find the first match at or after the resume
position in the buffer's current text, let the element rewrite it, and
resume after the match corrected by the net length change.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

from styledown.attributes import COLOR, FONT, Color, Font
from styledown.matcher import PatternMatcher, PatternOptions, RegexMatcher
from styledown.utils.logger import get_logger

if TYPE_CHECKING:
    from styledown.buffer import StyledTextBuffer
    from styledown.matcher import Match

logger = get_logger(__name__)


class PatternElement:
    """Shared matching loop and attribute plumbing for elements.

    Subclasses provide ``regex`` and ``match``; ``font`` and ``color``
    feed the default ``attributes``.
    """

    options: ClassVar[PatternOptions] = PatternOptions.NONE

    def __init__(self, *, matcher: PatternMatcher | None = None) -> None:
        """Initialize element.

        Args:
            matcher: Pattern engine (defaults to RegexMatcher)
        """
        self._matcher: PatternMatcher = matcher or RegexMatcher()

    @property
    def regex(self) -> str:
        raise NotImplementedError

    @property
    def font(self) -> Font | None:
        return None

    @property
    def color(self) -> Color | None:
        return None

    @property
    def attributes(self) -> dict[str, Any]:
        """Base styling attributes for matched text."""
        attributes: dict[str, Any] = {}
        if self.font is not None:
            attributes[FONT] = self.font
        if self.color is not None:
            attributes[COLOR] = self.color
        return attributes

    def regular_expression(self) -> str:
        """Return the validated pattern.

        Raises:
            PatternCompileError: If the pattern does not compile
        """
        pattern = self.regex
        self._matcher.compile(pattern, self.options)
        return pattern

    def parse(self, buffer: StyledTextBuffer) -> int:
        pattern = self.regular_expression()
        location = 0
        count = 0
        while location <= len(buffer):
            found = self._matcher.first_match(pattern, buffer.text, location, self.options)
            if found is None:
                break
            old_length = len(buffer)
            self.match(found, buffer)
            count += 1
            location = found.range.end + len(buffer) - old_length
            if found.range.is_empty:
                location += 1
        logger.debug("%s processed %d match(es)", type(self).__name__, count)
        return count

    def match(self, match: Match, buffer: StyledTextBuffer) -> None:
        raise NotImplementedError
