"""Inline links.

Collapses ``[label](target)`` to ``label``, styles the label, and sets
the link attribute to a normalized target URL.

Syntax:
    [label](https://example.com)   -> https://example.com
    [label](example.com)           -> https://example.com (default scheme)
    [label](someone@example.com)   -> mailto:someone@example.com
    [label](tel:+15551234)         -> tel:+15551234 (kept as written)

Notes:
- Balanced parentheses stay in the URL: ``[x](a.org/f(b))`` targets
  ``https://a.org/f(b)``. The first unbalanced ``)`` ends it and
  whatever follows stays in the buffer as plain text.
- A target that cannot be made into a well-formed URL, even after
  percent-encoding, leaves the label styled but unlinked.
- A match without a ``(target)`` part is skipped, buffer untouched.
- Targets cannot contain ``[``, so bracketed IPv6 hosts are not linked.

"""

from __future__ import annotations

import re
import string
from typing import TYPE_CHECKING
from urllib.parse import quote as url_quote
from urllib.parse import urlsplit

from styledown.attributes import FONT, LINK, Color, Font
from styledown.config import EMAIL_SCHEME, LinkConfig
from styledown.elements.base import PatternElement
from styledown.matcher import PatternOptions
from styledown.ranges import TextRange
from styledown.utils.logger import get_logger

if TYPE_CHECKING:
    from styledown.buffer import StyledTextBuffer
    from styledown.matcher import Match, PatternMatcher

logger = get_logger(__name__)

# Group 1: "[" + label. Group 2: "](" + target. Neither part crosses a "[",
# so a failed attempt never rescans past the next opening bracket.
LINK_PATTERN = r"(\[[^\[\]]+)(\]\([^\s\[]+)?\)"

SCHEME_PATTERN = r"([a-z]{2,20}):\/\/"

# Schemes written without "//"
OPAQUE_SCHEME_PATTERN = r"(mailto|tel|sms):"

# RFC 5322 official standard email regex (https://emailregex.com/)
EMAIL_PATTERN = r"""^(?:[A-Za-z0-9!#$%&'*+/=?^_`{|}~-]+(?:\.[A-Za-z0-9!#$%&'*+/=?^_`{|}~-]+)*|"(?:[\x01-\x08\x0b\x0c\x0e-\x1f\x21\x23-\x5b\x5d-\x7f]|\\[\x01-\x09\x0b\x0c\x0e-\x7f])*")@(?:(?:[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?\.)+[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?|\[(?:(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)\.){3}(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?|[A-Za-z0-9-]*[A-Za-z0-9]:(?:[\x01-\x08\x0b\x0c\x0e-\x1f\x21-\x5a\x53-\x7f]|\\[\x01-\x09\x0b\x0c\x0e-\x7f])+)\])$"""

_SCHEME_RE = re.compile(SCHEME_PATTERN, re.IGNORECASE)
_OPAQUE_SCHEME_RE = re.compile(OPAQUE_SCHEME_PATTERN, re.IGNORECASE)
_EMAIL_RE = re.compile(EMAIL_PATTERN)

# RFC 3986 reserved + unreserved characters, plus "%" for escapes
_URL_SAFE = "/:?#[]@!$&'()*+,;=-_.~%"
_URL_CHARS = frozenset(string.ascii_letters + string.digits + _URL_SAFE)
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def has_scheme(url: str) -> bool:
    """Check for a ``scheme://`` or ``mailto:``-style prefix at the start of ``url``."""
    return _SCHEME_RE.match(url) is not None or _OPAQUE_SCHEME_RE.match(url) is not None


def is_email_address(value: str) -> bool:
    return _EMAIL_RE.match(value) is not None


def is_well_formed_url(url: str) -> bool:
    """Check that ``url`` has a scheme, a body, and only URL-legal characters."""
    if not url or any(char not in _URL_CHARS for char in url):
        return False
    if _BAD_ESCAPE_RE.search(url):
        return False
    try:
        parts = urlsplit(url)
    except ValueError:
        return False
    return bool(parts.scheme) and bool(parts.netloc or parts.path)


def balance_parentheses(url: str) -> str:
    """Truncate ``url`` before the first ``)`` that closes more than it opened.

    Examples:
        >>> balance_parentheses("a.org/f(b)")
        'a.org/f(b)'
        >>> balance_parentheses("a.org/f)x")
        'a.org/f'
    """
    opened = 0
    closed = 0
    for index, char in enumerate(url):
        if char == "(":
            opened += 1
        elif char == ")":
            closed += 1
            if closed > opened:
                return url[:index]
    return url


class LinkElement(PatternElement):
    """Markup element for ``[label](target)`` links."""

    options = PatternOptions.DOTALL

    def __init__(
        self,
        config: LinkConfig | None = None,
        *,
        matcher: PatternMatcher | None = None,
    ) -> None:
        """Initialize link element.

        Args:
            config: Link configuration (defaults to LinkConfig())
            matcher: Pattern engine (defaults to RegexMatcher)
        """
        super().__init__(matcher=matcher)
        self.config = config or LinkConfig()

    @property
    def regex(self) -> str:
        return LINK_PATTERN

    @property
    def font(self) -> Font | None:
        return self.config.font

    @property
    def color(self) -> Color | None:
        return self.config.color

    def link_target(self, url: str) -> str | None:
        """Normalize a raw target into a link URL.

        Scheme-less targets get ``mailto:`` when they are email addresses
        and the default scheme otherwise. Returns None when no well-formed
        URL can be built, even after percent-encoding.
        """
        if has_scheme(url):
            full = url
        elif is_email_address(url):
            full = f"{EMAIL_SCHEME}{url}"
        else:
            full = f"{self.config.scheme}{url}"

        if is_well_formed_url(full):
            return full
        # A "%" that does not start an escape is encoded as "%25"
        encoded = url_quote(_BAD_ESCAPE_RE.sub("%25", full), safe=_URL_SAFE)
        if is_well_formed_url(encoded):
            return encoded
        return None

    def add_attributes(self, buffer: StyledTextBuffer, range: TextRange) -> None:
        buffer.add_attributes(self.attributes, range)

    def format_text(self, buffer: StyledTextBuffer, range: TextRange, url: str) -> None:
        target = self.link_target(url)
        if target is None:
            logger.debug("Unresolvable link target %r at %s", url, range)
            return
        buffer.add_attribute(LINK, target, range)

    def match(self, match: Match, buffer: StyledTextBuffer) -> None:
        label = match.group(1)
        target = match.group(2)
        text = buffer.text
        # "[" at label.start, "](" at target.start, ")" closing the match
        if (
            label is None
            or target is None
            or label.length < 2
            or target.start != label.end
            or target.length < 2
            or match.range.end != target.end + 1
            or match.range.end > len(text)
            or text[label.start] != "["
            or text[target.start : target.start + 2] != "]("
            or text[target.end] != ")"
        ):
            logger.debug("Skipping malformed link match at %s", match.range)
            return

        url = balance_parentheses(text[target.start + 2 : target.end])

        # Opening bracket
        buffer.delete(TextRange.of_length(label.start, 1))
        # Closing bracket, now one position earlier
        buffer.delete(TextRange.of_length(target.start - 1, 1))
        # Opening parenthesis, now where the closing bracket was
        buffer.delete(TextRange.of_length(target.start - 1, 1))
        # URL plus the parenthesis that ended it
        buffer.delete(TextRange.of_length(target.start - 1, len(url) + 1))

        format_range = TextRange(label.start, target.start - 1)
        current_font = buffer.attribute(FONT, format_range.start)

        self.add_attributes(buffer, format_range)
        self.format_text(buffer, format_range, url)

        if current_font is not None:
            buffer.add_attribute(FONT, current_font, format_range)
