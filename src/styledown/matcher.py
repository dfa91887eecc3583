"""Pattern matching over buffer text.

Defines the narrow capability elements need from a pattern engine:
compile a pattern, find the first match at or after a position, and
lazily iterate non-overlapping matches left to right.

RegexMatcher implements it with the standard ``re`` module. Compiled
patterns are cached per (pattern, options); matches never are, since
the text they describe changes with every edit.

Example:
    >>> matcher = RegexMatcher()
    >>> [m.group_text("x-1 y-2", 1) for m in matcher.find_all(r"(\\w)-\\d", "x-1 y-2")]
    ['x', 'y']

"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Flag, auto
from typing import Protocol, runtime_checkable

from styledown.errors import PatternCompileError
from styledown.ranges import TextRange


class PatternOptions(Flag):
    """Engine-independent pattern options."""

    NONE = 0
    DOTALL = auto()
    MULTILINE = auto()
    IGNORECASE = auto()


_RE_FLAGS = {
    PatternOptions.DOTALL: re.DOTALL,
    PatternOptions.MULTILINE: re.MULTILINE,
    PatternOptions.IGNORECASE: re.IGNORECASE,
}


@dataclass(frozen=True, slots=True)
class Match:
    """A located pattern occurrence.

    Offsets refer to the text as it was when the match was produced and
    become stale after the next buffer mutation.

    Attributes:
        range: Overall matched span
        groups: Capture group spans, index 0 is group 1. None for a group
            that did not participate in the match.

    """

    range: TextRange
    groups: tuple[TextRange | None, ...] = ()

    def group(self, index: int) -> TextRange | None:
        """Return the span of capture group ``index`` (0 is the whole match)."""
        if index == 0:
            return self.range
        if not 0 < index <= len(self.groups):
            return None
        return self.groups[index - 1]

    def group_text(self, text: str, index: int) -> str | None:
        """Return the characters captured by group ``index`` in ``text``."""
        span = self.group(index)
        if span is None:
            return None
        return text[span.start : span.end]


@runtime_checkable
class PatternMatcher(Protocol):
    """Capability for locating pattern matches in text.

    Implementations must raise PatternCompileError for invalid patterns
    rather than returning no matches.
    """

    def compile(self, pattern: str, options: PatternOptions = PatternOptions.NONE) -> None:
        """Validate ``pattern``, raising PatternCompileError if invalid."""
        ...

    def first_match(
        self,
        pattern: str,
        text: str,
        pos: int = 0,
        options: PatternOptions = PatternOptions.NONE,
    ) -> Match | None:
        """Return the leftmost match starting at or after ``pos``."""
        ...

    def find_all(
        self,
        pattern: str,
        text: str,
        pos: int = 0,
        options: PatternOptions = PatternOptions.NONE,
    ) -> Iterator[Match]:
        """Lazily yield non-overlapping matches, left to right."""
        ...


def _to_match(m: re.Match[str]) -> Match:
    groups = tuple(
        TextRange(m.start(i), m.end(i)) if m.start(i) >= 0 else None
        for i in range(1, m.re.groups + 1)
    )
    return Match(TextRange(m.start(), m.end()), groups)


class RegexMatcher:
    """PatternMatcher backed by the standard ``re`` engine.

    Line anchors are evaluated against the whole text, so ``^`` only
    matches at ``pos`` when ``pos`` starts a line.
    """

    __slots__ = ("_compiled",)

    def __init__(self) -> None:
        self._compiled: dict[tuple[str, PatternOptions], re.Pattern[str]] = {}

    def _regex(self, pattern: str, options: PatternOptions) -> re.Pattern[str]:
        key = (pattern, options)
        compiled = self._compiled.get(key)
        if compiled is None:
            flags = 0
            for option, flag in _RE_FLAGS.items():
                if option in options:
                    flags |= flag
            try:
                compiled = re.compile(pattern, flags)
            except re.error as e:
                raise PatternCompileError(pattern, e.msg, e.pos) from e
            self._compiled[key] = compiled
        return compiled

    def compile(self, pattern: str, options: PatternOptions = PatternOptions.NONE) -> None:
        self._regex(pattern, options)

    def first_match(
        self,
        pattern: str,
        text: str,
        pos: int = 0,
        options: PatternOptions = PatternOptions.NONE,
    ) -> Match | None:
        m = self._regex(pattern, options).search(text, pos)
        return _to_match(m) if m is not None else None

    def find_all(
        self,
        pattern: str,
        text: str,
        pos: int = 0,
        options: PatternOptions = PatternOptions.NONE,
    ) -> Iterator[Match]:
        regex = self._regex(pattern, options)
        return (_to_match(m) for m in regex.finditer(text, pos))


__all__ = [
    "Match",
    "PatternMatcher",
    "PatternOptions",
    "RegexMatcher",
]
