"""Exception classes for Styledown.

Provides standardized exceptions for error handling throughout Styledown.
"""

from __future__ import annotations


class StyledownError(Exception):
    """Base exception for all Styledown errors.

    Subclass this for specific error categories.
    """

    pass


class PatternCompileError(StyledownError):
    """Error compiling an element's match pattern.

    Raised when a static or level-substituted pattern is not a valid
    expression. Never swallowed: a broken pattern would otherwise match
    nothing and hide the configuration mistake.
    """

    def __init__(
        self,
        pattern: str,
        message: str,
        position: int | None = None,
    ) -> None:
        """Initialize compile error with the offending pattern.

        Args:
            pattern: The pattern source that failed to compile
            message: Error description from the pattern engine
            position: Offset into the pattern where the error was detected
        """
        self.pattern = pattern
        self.message = message
        self.position = position

        location = f" at position {position}" if position is not None else ""
        super().__init__(f"Invalid pattern {pattern!r}{location}: {message}")


class BufferRangeError(StyledownError, IndexError):
    """Edit or attribute range outside the buffer.

    Raised before any mutation happens, so the buffer is left untouched.
    """

    def __init__(self, start: int, end: int, length: int) -> None:
        """Initialize range error.

        Args:
            start: Requested range start
            end: Requested range end
            length: Buffer length at the time of the request
        """
        self.start = start
        self.end = end
        self.length = length
        super().__init__(f"Range [{start}, {end}) out of bounds for buffer of length {length}")
