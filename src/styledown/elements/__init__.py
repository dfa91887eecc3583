"""Markup elements: pattern-driven buffer rewriting and styling.

Provides:
- MarkupElement: protocol every element satisfies
- PatternElement: shared forward scan-and-rewrite pass
- LevelElement: base for marker-count nesting elements
- LinkElement: ``[label](target)`` links
- ListElement: bulleted list lines
"""

from styledown.elements.base import PatternElement
from styledown.elements.level import LevelElement
from styledown.elements.link import LinkElement
from styledown.elements.list import ListElement
from styledown.elements.protocol import MarkupElement

__all__ = [
    "LevelElement",
    "LinkElement",
    "ListElement",
    "MarkupElement",
    "PatternElement",
]
