"""MarkupElement protocol for pattern-driven styling.

A markup element owns one pattern and the buffer transformation applied
to each of its matches. Implement the protocol to add element types.

Thread Safety:
Elements hold only immutable configuration. The buffer they mutate is
owned by a single caller for the duration of a pass.

Example:
    >>> class Strikeout(PatternElement):
    ...     regex = r"~~(.+?)~~"
    ...
    ...     def match(self, match, buffer):
    ...         ...

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from styledown.buffer import StyledTextBuffer
    from styledown.matcher import Match, PatternOptions


@runtime_checkable
class MarkupElement(Protocol):
    """Protocol for markup element implementations.

    Attributes:
        regex: Pattern source matched against the buffer text
        options: Pattern options used when compiling ``regex``

    """

    @property
    def regex(self) -> str: ...

    @property
    def options(self) -> PatternOptions: ...

    def parse(self, buffer: StyledTextBuffer) -> int:
        """Run one forward scan-and-rewrite pass over ``buffer``.

        Returns:
            Number of matches handed to ``match``

        Raises:
            PatternCompileError: If ``regex`` is not a valid pattern
        """
        ...

    def match(self, match: Match, buffer: StyledTextBuffer) -> None:
        """Rewrite and style a single match.

        ``match`` offsets are valid for the buffer as it is on entry.
        A match that cannot be applied must leave the buffer untouched.
        """
        ...
