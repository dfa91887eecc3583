"""Element configuration for Styledown.

Each markup element is configured once at construction with a frozen
config object, then reused across any number of matching passes.
There is no process-wide mutable default: the defaults below are
immutable module constants.

Usage:
    >>> from styledown import LinkElement, ListElement
    >>> link = LinkElement(LinkConfig(default_scheme="http://"))
    >>> lists = ListElement(ListConfig(indicator="-", max_level=3))

    # From plain data (e.g. a YAML/JSON theme file)
    >>> config = ListConfig.from_dict({"indicator": "◦", "font": {"size": 12}})

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from styledown.attributes import DEFAULT_LINK_COLOR, Color, Font

DEFAULT_SCHEME = "https://"
EMAIL_SCHEME = "mailto:"

DEFAULT_INDICATOR = "•"
DEFAULT_PARAGRAPH_PREFIX = "  "
DEFAULT_PARAGRAPH_SUFFIX = " "


def _filtered(cls: type, config_dict: dict[str, Any]) -> dict[str, Any]:
    valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
    filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
    font = filtered.get("font")
    if isinstance(font, dict):
        filtered["font"] = Font.from_dict(font)
    return filtered


@dataclass(frozen=True, slots=True)
class LinkConfig:
    """Immutable link element configuration.

    Attributes:
        font: Font applied to link labels (an enclosing font wins)
        color: Label colour
        default_scheme: Prefix for scheme-less, non-email targets.
            None means "https://".

    """

    font: Font | None = None
    color: Color | None = DEFAULT_LINK_COLOR
    default_scheme: str | None = None

    @property
    def scheme(self) -> str:
        """Default scheme, falling back to https."""
        return self.default_scheme or DEFAULT_SCHEME

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> LinkConfig:
        """Create LinkConfig from a dictionary.

        Unknown keys are silently ignored; a ``font`` dict becomes a Font.

        Example:
            >>> LinkConfig.from_dict({"default_scheme": "http://", "extra": 1}).scheme
            'http://'

        """
        return cls(**_filtered(cls, config_dict))


@dataclass(frozen=True, slots=True)
class ListConfig:
    """Immutable list element configuration.

    Attributes:
        max_level: Maximum marker count recognised; 0 or less is unbounded
        indicator: Bullet glyph
        paragraph_prefix: String repeated once per nesting level before the
            indicator
        paragraph_suffix: String between the indicator and item content
        paragraph_spacing: Space before each item; None means font size / 3.
            Negative values are treated as 0.
        font: Item font, also used to measure the bullet indent
        color: Item colour

    """

    max_level: int = 0
    indicator: str = DEFAULT_INDICATOR
    paragraph_prefix: str = DEFAULT_PARAGRAPH_PREFIX
    paragraph_suffix: str = DEFAULT_PARAGRAPH_SUFFIX
    paragraph_spacing: float | None = None
    font: Font | None = None
    color: Color | None = None

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> ListConfig:
        """Create ListConfig from a dictionary.

        Unknown keys are silently ignored; a ``font`` dict becomes a Font.
        """
        return cls(**_filtered(cls, config_dict))


__all__ = [
    "DEFAULT_INDICATOR",
    "DEFAULT_PARAGRAPH_PREFIX",
    "DEFAULT_PARAGRAPH_SUFFIX",
    "DEFAULT_SCHEME",
    "EMAIL_SCHEME",
    "LinkConfig",
    "ListConfig",
]
