"""Tests for the element protocol and shared matching loop."""

from styledown import LevelElement, LinkElement, ListElement, MarkupElement, PatternElement
from styledown.buffer import StyledTextBuffer
from styledown.matcher import Match
from styledown.ranges import TextRange


class Shout(PatternElement):
    """Upper-cases ``!word`` and drops the bang."""

    regex = r"!(\w+)"

    def match(self, match: Match, buffer: StyledTextBuffer) -> None:
        word = match.group(1)
        assert word is not None
        buffer.replace(match.range, buffer.substring(word).upper())
        buffer.add_attribute("bold", True, TextRange.of_length(match.range.start, word.length))


class TestProtocol:
    """Built-in elements satisfy MarkupElement."""

    def test_builtin_elements(self) -> None:
        assert isinstance(LinkElement(), MarkupElement)
        assert isinstance(ListElement(), MarkupElement)

    def test_custom_element(self) -> None:
        assert isinstance(Shout(), MarkupElement)


class TestMatchingLoop:
    """Forward scan resumes on the mutated text."""

    def test_resumes_after_shrinking_edits(self) -> None:
        buf = StyledTextBuffer("!a !bb !ccc")
        assert Shout().parse(buf) == 3
        assert buf.text == "A BB CCC"
        assert [(r.start, r.end) for r, _ in buf.attribute_runs("bold")] == [(0, 1), (2, 4), (5, 8)]

    def test_rewritten_text_not_rescanned(self) -> None:
        class Doubler(PatternElement):
            regex = "a"

            def match(self, match: Match, buffer: StyledTextBuffer) -> None:
                buffer.replace(match.range, "aa")

        buf = StyledTextBuffer("a-a")
        assert Doubler().parse(buf) == 2
        assert buf.text == "aa-aa"

    def test_default_attributes_empty(self) -> None:
        assert Shout().attributes == {}

    def test_level_element_default_levels(self) -> None:
        element = LevelElement()
        assert element.level_for(1) == 0
        assert element.level_for(3) == 2
        assert element.attributes_for_level(5) == {}
