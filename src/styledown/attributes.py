"""Attribute keys and style values attached to buffer ranges.

Attribute maps are plain ``dict[str, object]`` keyed by the constants
below. Values are immutable so they can be shared between spans.

Thread Safety:
All value types are frozen dataclasses. DEFAULT_FONT is a module-level
constant, never mutated.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# Attribute keys
FONT = "font"
COLOR = "color"
LINK = "link"
PARAGRAPH_STYLE = "paragraph_style"

# Colours are opaque to styledown: a name ("blue") or a hex string ("#0645ad").
Color = str

DEFAULT_LINK_COLOR: Color = "blue"


@dataclass(frozen=True, slots=True)
class Font:
    """Font description used for styling and text measurement.

    Attributes:
        family: Font family name
        size: Point size (must be positive)
        bold: Bold weight
        italic: Italic style

    """

    family: str = "system"
    size: float = 17.0
    bold: bool = False
    italic: bool = False

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise ValueError(f"Font size must be positive, got {self.size}")

    @classmethod
    def from_dict(cls, font_dict: dict[str, Any]) -> Font:
        """Create a Font from a dictionary, ignoring unknown keys."""
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        return cls(**{k: v for k, v in font_dict.items() if k in valid_fields})


DEFAULT_FONT: Font = Font()


@dataclass(frozen=True, slots=True)
class ParagraphStyle:
    """Paragraph-level layout attributes.

    Attributes:
        spacing_before: Space above the paragraph, in points
        head_indent: Indent of wrapped continuation lines, in points

    """

    spacing_before: float = 0.0
    head_indent: float = 0.0


__all__ = [
    "COLOR",
    "Color",
    "DEFAULT_FONT",
    "DEFAULT_LINK_COLOR",
    "FONT",
    "Font",
    "LINK",
    "PARAGRAPH_STYLE",
    "ParagraphStyle",
]
