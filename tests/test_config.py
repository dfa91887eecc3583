"""Tests for frozen element configuration."""

import pytest

from styledown.attributes import DEFAULT_FONT, Font
from styledown.config import (
    DEFAULT_INDICATOR,
    DEFAULT_PARAGRAPH_PREFIX,
    DEFAULT_PARAGRAPH_SUFFIX,
    DEFAULT_SCHEME,
    LinkConfig,
    ListConfig,
)


class TestLinkConfig:
    """LinkConfig defaults and construction."""

    def test_default_values(self) -> None:
        config = LinkConfig()
        assert config.font is None
        assert config.color == "blue"
        assert config.default_scheme is None
        assert config.scheme == DEFAULT_SCHEME == "https://"

    def test_custom_scheme(self) -> None:
        assert LinkConfig(default_scheme="http://").scheme == "http://"

    def test_empty_scheme_falls_back(self) -> None:
        assert LinkConfig(default_scheme="").scheme == "https://"

    def test_immutability(self) -> None:
        config = LinkConfig()
        with pytest.raises(AttributeError):
            config.color = "red"  # type: ignore[misc]

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = LinkConfig.from_dict({"default_scheme": "ftp://", "unknown_key": "ignored"})
        assert config.scheme == "ftp://"

    def test_from_dict_builds_font(self) -> None:
        config = LinkConfig.from_dict({"font": {"family": "mono", "size": 11, "weight": 400}})
        assert config.font == Font(family="mono", size=11)


class TestListConfig:
    """ListConfig defaults and construction."""

    def test_default_values(self) -> None:
        config = ListConfig()
        assert config.max_level == 0
        assert config.indicator == DEFAULT_INDICATOR == "•"
        assert config.paragraph_prefix == DEFAULT_PARAGRAPH_PREFIX == "  "
        assert config.paragraph_suffix == DEFAULT_PARAGRAPH_SUFFIX == " "
        assert config.paragraph_spacing is None
        assert config.font is None
        assert config.color is None

    def test_immutability(self) -> None:
        config = ListConfig()
        with pytest.raises(AttributeError):
            config.indicator = "-"  # type: ignore[misc]

    def test_from_dict(self) -> None:
        config = ListConfig.from_dict(
            {"indicator": "◦", "max_level": 3, "paragraph_spacing": 2.5, "theme": "dark"}
        )
        assert config.indicator == "◦"
        assert config.max_level == 3
        assert config.paragraph_spacing == 2.5

    def test_from_dict_keeps_font_instance(self) -> None:
        font = Font(size=9.0)
        assert ListConfig.from_dict({"font": font}).font is font


class TestFont:
    """Font value type."""

    def test_default_font(self) -> None:
        assert DEFAULT_FONT == Font()
        assert DEFAULT_FONT.size == 17.0

    @pytest.mark.parametrize("size", [0, -1.0])
    def test_non_positive_size_rejected(self, size: float) -> None:
        with pytest.raises(ValueError, match="positive"):
            Font(size=size)

    def test_hashable(self) -> None:
        assert len({Font(), Font(), Font(bold=True)}) == 2
