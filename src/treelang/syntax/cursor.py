"""Immutable cursor infrastructure for line scanning.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
    - A cursor is bounded by the end of one line; it never crosses ``\\n``
    - Spans are built from the cursor's own line bookkeeping, so no
      line/column search is needed while scanning

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Callable
from dataclasses import dataclass

from treelang.diagnostics.codes import SourceSpan
from treelang.source.position import line_span

__all__ = ["Cursor"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable position inside one line of a source buffer.

    Attributes:
        source: Complete buffer text
        pos: Current offset into source
        end: Offset where the line's content ends (exclusive)
        line: 1-based line number
        line_start: Offset of the line's first character
        source_index: Registry index carried into every span

    Example:
        >>> cursor = Cursor.for_line("a b\\nc", 0, 3, line=1)
        >>> cursor.current
        'a'
        >>> cursor.advance().skip_whitespace().current
        'b'
        >>> cursor.advance(3).is_eof
        True
    """

    source: str
    pos: int
    end: int
    line: int
    line_start: int
    source_index: int | None = None

    @classmethod
    def for_line(
        cls, source: str, start: int, end: int, *, line: int, source_index: int | None = None
    ) -> "Cursor":
        """Cursor at the first character of a line spanning [start, end)."""
        return cls(source, start, end, line, start, source_index)

    @property
    def is_eof(self) -> bool:
        """True once the cursor reaches the end of its line."""
        return self.pos >= self.end

    @property
    def current(self) -> str:
        """Current character.

        Raises:
            EOFError: If at end of line
        """
        if self.is_eof:
            msg = f"Unexpected end of line {self.line} at position {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Character at pos + offset, or None past the end of the line."""
        target = self.pos + offset
        if target >= self.end:
            return None
        return self.source[target]

    def advance(self, count: int = 1) -> "Cursor":
        """New cursor moved forward by count, clamped to the line end."""
        return Cursor(
            self.source,
            min(self.pos + count, self.end),
            self.end,
            self.line,
            self.line_start,
            self.source_index,
        )

    def slice_to(self, end_pos: int) -> str:
        """Source text from the current position to end_pos."""
        return self.source[self.pos : end_pos]

    def rest(self) -> str:
        """Remaining text of the line."""
        return self.source[self.pos : self.end]

    def skip_whitespace(self) -> "Cursor":
        """Skip any whitespace characters (str.isspace) on this line."""
        c = self
        while not c.is_eof and c.current.isspace():
            c = c.advance()
        return c

    def take_while(self, predicate: Callable[[str], bool]) -> tuple[str, "Cursor"]:
        """Consume the maximal run of characters satisfying predicate.

        Returns:
            (matched text, cursor after the run); the text is empty when the
            current character does not match
        """
        c = self
        while not c.is_eof and predicate(c.current):
            c = c.advance()
        return self.slice_to(c.pos), c

    def span_to(self, end_pos: int) -> SourceSpan:
        """Span from the current position to end_pos on this line."""
        return line_span(
            self.source_index, self.pos, end_pos, line=self.line, line_start=self.line_start
        )

    def span_char(self) -> SourceSpan:
        """One-character span at the current position."""
        return self.span_to(min(self.pos + 1, max(self.end, self.pos)))
