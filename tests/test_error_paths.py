"""Error-path and malformed input tests.

Exercise error construction, the exception hierarchy, and the guarantee
that failures never leave a buffer half-edited.
"""

import pytest

from styledown.buffer import StyledTextBuffer
from styledown.elements.base import PatternElement
from styledown.elements.link import LinkElement
from styledown.elements.list import ListElement
from styledown.errors import BufferRangeError, PatternCompileError, StyledownError
from styledown.ranges import TextRange

# =========================================================================
# Error construction and formatting
# =========================================================================


class TestPatternCompileError:
    """Verify PatternCompileError formatting and hierarchy."""

    def test_with_position(self) -> None:
        err = PatternCompileError("a(b", "missing )", position=1)
        assert "'a(b'" in str(err)
        assert "position 1" in str(err)
        assert "missing )" in str(err)

    def test_without_position(self) -> None:
        err = PatternCompileError("x", "bad")
        assert err.position is None
        assert "position" not in str(err)

    def test_is_styledown_error(self) -> None:
        assert isinstance(PatternCompileError("x", "y"), StyledownError)


class TestBufferRangeError:
    """Verify BufferRangeError formatting and hierarchy."""

    def test_format(self) -> None:
        err = BufferRangeError(2, 9, 4)
        assert "[2, 9)" in str(err)
        assert "length 4" in str(err)

    def test_is_index_error(self) -> None:
        assert isinstance(BufferRangeError(0, 1, 0), IndexError)


class TestTextRange:
    """TextRange validation."""

    @pytest.mark.parametrize(("start", "end"), [(-1, 2), (3, 1)])
    def test_invalid_range(self, start: int, end: int) -> None:
        with pytest.raises(ValueError, match="Invalid range"):
            TextRange(start, end)

    def test_helpers(self) -> None:
        r = TextRange.of_length(2, 3)
        assert r == TextRange(2, 5)
        assert r.length == 3
        assert r.contains(2) and not r.contains(5)
        assert r.overlaps(TextRange(4, 8))
        assert not r.overlaps(TextRange(5, 8))
        assert r.shifted(-2) == TextRange(0, 3)
        assert str(r) == "[2, 5)"
        assert TextRange(1, 1).is_empty


# =========================================================================
# Element failures
# =========================================================================


class TestElementErrors:
    """Errors from elements propagate; skipped matches change nothing."""

    def test_compile_error_propagates_before_mutation(self) -> None:
        class Broken(LinkElement):
            @property
            def regex(self) -> str:
                return "(["

        buf = StyledTextBuffer("[a](b.org)")
        with pytest.raises(PatternCompileError):
            Broken().parse(buf)
        assert buf.text == "[a](b.org)"

    def test_base_element_requires_regex(self) -> None:
        with pytest.raises(NotImplementedError):
            PatternElement().parse(StyledTextBuffer("x"))

    def test_malformed_list_match_skipped(self) -> None:
        class NoContentGroup(ListElement):
            @property
            def regex(self) -> str:
                return r"^([*+\-]+) (?:x)?(y)?$"

        buf = StyledTextBuffer("- ")
        assert NoContentGroup().parse(buf) == 1
        assert buf.text == "- "
        assert buf.spans() == ()

    def test_unresolvable_target_is_not_an_error(self) -> None:
        buf = StyledTextBuffer("[a](http://]bad) [b](ok.org)")
        assert LinkElement().parse(buf) == 2
        assert buf.text == "a b"
        assert [v for _, v in buf.attribute_runs("link")] == ["https://ok.org"]
