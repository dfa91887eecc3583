"""
Styledown: lightweight markup to styled text

Finds inline links and bulleted list items in a text buffer, strips the
markup syntax in place, and attaches styling attributes to the surviving
character ranges. Attribute ranges stay consistent with buffer positions
across every edit.

Quick Start:
    >>> from styledown import LinkElement, ListElement, StyledTextBuffer
    >>> buf = StyledTextBuffer("- see [docs](example.com)")
    >>> ListElement().parse(buf)
    1
    >>> LinkElement().parse(buf)
    1
    >>> buf.text
    '• see docs'
    >>> buf.attribute("link", 6)
    'https://example.com'

Configuration:
    >>> from styledown import Font, ListConfig
    >>> ListElement(ListConfig(indicator="◦", font=Font(size=12.0)))
"""

from styledown.attributes import (
    COLOR,
    DEFAULT_FONT,
    FONT,
    LINK,
    PARAGRAPH_STYLE,
    Font,
    ParagraphStyle,
)
from styledown.buffer import AttributeSpan, StyledTextBuffer
from styledown.config import LinkConfig, ListConfig
from styledown.elements import (
    LevelElement,
    LinkElement,
    ListElement,
    MarkupElement,
    PatternElement,
)
from styledown.errors import BufferRangeError, PatternCompileError, StyledownError
from styledown.matcher import Match, PatternMatcher, PatternOptions, RegexMatcher
from styledown.metrics import MonospaceMetrics, TextMetrics
from styledown.ranges import TextRange

__version__ = "0.1.0"

__all__ = [  # noqa: RUF022 - grouped by category
    # Version
    "__version__",
    # Buffer
    "AttributeSpan",
    "StyledTextBuffer",
    "TextRange",
    # Attributes
    "COLOR",
    "DEFAULT_FONT",
    "FONT",
    "LINK",
    "PARAGRAPH_STYLE",
    "Font",
    "ParagraphStyle",
    # Elements
    "LevelElement",
    "LinkElement",
    "ListElement",
    "MarkupElement",
    "PatternElement",
    # Configuration
    "LinkConfig",
    "ListConfig",
    # Matching
    "Match",
    "PatternMatcher",
    "PatternOptions",
    "RegexMatcher",
    # Measurement
    "MonospaceMetrics",
    "TextMetrics",
    # Errors
    "BufferRangeError",
    "PatternCompileError",
    "StyledownError",
]
