"""Position utilities for registered source text.

Converts character offsets into line/column positions and SourceSpan
values for error reporting and tooling.

Line Ending Support:
    ``\\n`` is the line delimiter. CRLF input works because the ``\\n`` is
    still present; the ``\\r`` stays part of the line's text. CR-only input
    is read as a single line.
"""

from treelang.diagnostics.codes import SourceSpan

__all__ = [
    "LineOffsetCache",
    "column_offset",
    "line_bounds",
    "line_offset",
    "line_span",
]


def line_offset(source: str, pos: int) -> int:
    """Get 0-based line number from character offset.

    Args:
        source: Complete source text
        pos: Character offset in source

    Returns:
        0-based line number

    Example:
        >>> source = "line1\\nline2\\nline3"
        >>> line_offset(source, 0)
        0
        >>> line_offset(source, 6)
        1
    """
    if pos < 0:
        msg = f"Position must be >= 0, got {pos}"
        raise ValueError(msg)
    pos = min(pos, len(source))

    # O(1) memory: count in range instead of creating substring
    return source.count("\n", 0, pos)


def column_offset(source: str, pos: int) -> int:
    """Get 0-based column number from character offset.

    Args:
        source: Complete source text
        pos: Character offset in source

    Returns:
        0-based column number (characters from line start)

    Example:
        >>> column_offset("hello\\nworld", 10)  # 'd' in "world"
        4
    """
    if pos < 0:
        msg = f"Position must be >= 0, got {pos}"
        raise ValueError(msg)
    pos = min(pos, len(source))
    return pos - source.rfind("\n", 0, pos) - 1


def line_bounds(source: str, pos: int) -> tuple[int, int]:
    """Start and end offsets of the line containing pos.

    The end offset excludes the line's ``\\n``.

    Example:
        >>> line_bounds("abc\\ndef", 5)
        (4, 7)
    """
    pos = max(0, min(pos, len(source)))
    start = source.rfind("\n", 0, pos) + 1
    end = source.find("\n", pos)
    return start, len(source) if end == -1 else end


def line_span(
    source: int | None, start: int, end: int, *, line: int, line_start: int
) -> SourceSpan:
    """Build a span that lies within a single known line.

    Cheap path used by the parser, which already knows the line number and
    the offset at which the line starts.

    Args:
        source: Registry index (None for unregistered text)
        start: Start offset in the full text
        end: End offset in the full text (exclusive)
        line: 1-based line number
        line_start: Offset of the line's first character
    """
    return SourceSpan(
        source=source,
        start=start,
        end=end,
        line=line,
        column=start - line_start + 1,
        end_line=line,
        end_column=end - line_start + 1,
    )


class LineOffsetCache:
    """Cached line offset computation for efficient position lookups.

    Precomputes line start offsets in O(n) single pass, then provides
    O(log n) lookups using binary search.

    Example:
        >>> cache = LineOffsetCache("line1\\nline2\\nline3")
        >>> cache.get_line_col(8)   # Third char of line 2
        (2, 3)

    Thread Safety:
        Thread-safe. Internal state is only set during __init__.
    """

    __slots__ = ("_offsets", "_source_len")

    def __init__(self, source: str) -> None:
        offsets = [0]
        for i, char in enumerate(source):
            if char == "\n":
                offsets.append(i + 1)
        self._offsets: tuple[int, ...] = tuple(offsets)
        self._source_len = len(source)

    @property
    def line_count(self) -> int:
        """Number of lines (a trailing newline opens an empty last line)."""
        return len(self._offsets)

    def get_line_col(self, pos: int) -> tuple[int, int]:
        """Get line and column for position using binary search.

        Args:
            pos: Character position in source (0-indexed, clamped)

        Returns:
            (line, column) tuple (1-indexed, like text editors)
        """
        pos = max(0, min(pos, self._source_len))

        # Line number = index of largest offset <= pos
        left, right = 0, len(self._offsets) - 1
        while left < right:
            mid = (left + right + 1) // 2
            if self._offsets[mid] <= pos:
                left = mid
            else:
                right = mid - 1

        return (left + 1, pos - self._offsets[left] + 1)

    def span(self, start: int, end: int, source: int | None = None) -> SourceSpan:
        """Build a SourceSpan for an arbitrary, possibly multi-line range."""
        line, column = self.get_line_col(start)
        end_line, end_column = self.get_line_col(end)
        return SourceSpan(
            source=source,
            start=start,
            end=end,
            line=line,
            column=column,
            end_line=end_line,
            end_column=end_column,
        )
