"""Bulleted list items.

Rewrites lines such as ``- item`` or ``** nested`` into bullet text
(``• item``, ``  • nested``) and attaches paragraph styling whose head
indent lines wrapped continuation lines up with the item text.

Syntax:
    One or more of ``*``, ``+``, ``-`` at the start of a line, then
    whitespace, then the item content. One marker is level 0, each extra
    marker nests one level deeper, so ``-- item`` is level 1 and gets a
    single ``paragraph_prefix`` before the indicator. Override
    ``level_for`` to count levels differently.

Example:
    >>> buf = StyledTextBuffer("- milk\\n-- oat")
    >>> ListElement().parse(buf)
    2
    >>> buf.text
    '• milk\\n  • oat'

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from styledown.attributes import DEFAULT_FONT, PARAGRAPH_STYLE, Color, Font, ParagraphStyle
from styledown.config import ListConfig
from styledown.elements.level import LevelElement
from styledown.matcher import PatternOptions
from styledown.metrics import MonospaceMetrics, TextMetrics

if TYPE_CHECKING:
    from styledown.buffer import StyledTextBuffer
    from styledown.matcher import PatternMatcher
    from styledown.ranges import TextRange

LIST_PATTERN = r"^([*+\-]{1,%s})[ \t]+(.+)$"


class ListElement(LevelElement):
    """Markup element for bulleted list lines."""

    options = PatternOptions.MULTILINE

    def __init__(
        self,
        config: ListConfig | None = None,
        *,
        matcher: PatternMatcher | None = None,
        metrics: TextMetrics | None = None,
    ) -> None:
        """Initialize list element.

        Args:
            config: List configuration (defaults to ListConfig())
            matcher: Pattern engine (defaults to RegexMatcher)
            metrics: Width measurement for indents (defaults to MonospaceMetrics)
        """
        super().__init__(matcher=matcher)
        self.config = config or ListConfig()
        self.metrics: TextMetrics = metrics or MonospaceMetrics()

    @property
    def regex(self) -> str:
        level = str(self.config.max_level) if self.config.max_level > 0 else ""
        return LIST_PATTERN % level

    @property
    def font(self) -> Font | None:
        return self.config.font

    @property
    def color(self) -> Color | None:
        return self.config.color

    def bullet_text(self, level: int) -> str:
        """Prefix repeated once per level, then indicator and suffix."""
        config = self.config
        return f"{config.paragraph_prefix * level}{config.indicator}{config.paragraph_suffix}"

    def paragraph_style(self, level: int) -> ParagraphStyle:
        """Spacing and head indent for a line at ``level``."""
        font = self.font or DEFAULT_FONT
        spacing = self.config.paragraph_spacing
        if spacing is None:
            spacing = font.size / 3
        return ParagraphStyle(
            spacing_before=max(spacing, 0.0),
            head_indent=self.metrics.measure_width(self.bullet_text(level), font),
        )

    def add_attributes(self, buffer: StyledTextBuffer, range: TextRange, level: int) -> None:
        attributes: dict[str, Any] = dict(self.attributes_for_level(level))
        attributes[PARAGRAPH_STYLE] = self.paragraph_style(level)
        buffer.add_attributes(attributes, range)

    def format_text(self, buffer: StyledTextBuffer, range: TextRange, level: int) -> None:
        buffer.replace(range, self.bullet_text(level))
