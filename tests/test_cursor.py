"""Tests for the line-bounded immutable cursor."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from treelang.syntax.cursor import Cursor

# ============================================================================
# CURSOR BASIC TESTS
# ============================================================================


class TestCursorBasic:
    """Construction, bounds and immutability."""

    def test_for_line(self) -> None:
        cursor = Cursor.for_line("ab\ncd", 3, 5, line=2, source_index=7)

        assert cursor.pos == 3
        assert cursor.line_start == 3
        assert cursor.current == "c"
        assert cursor.source_index == 7

    def test_cursor_immutability(self) -> None:
        cursor = Cursor.for_line("hello", 0, 5, line=1)

        with pytest.raises(AttributeError):
            cursor.pos = 5  # type: ignore[misc]

    def test_eof_at_line_end_not_source_end(self) -> None:
        """The cursor stops at its line even though more text follows."""
        cursor = Cursor.for_line("ab\ncd", 0, 2, line=1).advance(2)

        assert cursor.is_eof
        assert cursor.peek() is None

    def test_current_at_eof_raises(self) -> None:
        cursor = Cursor.for_line("", 0, 0, line=1)

        with pytest.raises(EOFError, match="line 1"):
            _ = cursor.current

    def test_advance_is_clamped(self) -> None:
        cursor = Cursor.for_line("abc", 0, 3, line=1).advance(10)

        assert cursor.pos == 3


# ============================================================================
# NAVIGATION
# ============================================================================


class TestCursorNavigation:
    """peek(), skip_whitespace(), take_while() and slicing."""

    def test_peek(self) -> None:
        cursor = Cursor.for_line("abc", 0, 3, line=1)

        assert cursor.peek() == "a"
        assert cursor.peek(2) == "c"
        assert cursor.peek(3) is None

    def test_skip_whitespace_includes_tabs_and_cr(self) -> None:
        cursor = Cursor.for_line(" \t\r x", 0, 5, line=1).skip_whitespace()

        assert cursor.current == "x"

    def test_take_while(self) -> None:
        cursor = Cursor.for_line("abc def", 0, 7, line=1)

        text, rest = cursor.take_while(str.isalpha)

        assert text == "abc"
        assert rest.pos == 3
        assert cursor.pos == 0

    def test_take_while_no_match(self) -> None:
        text, rest = Cursor.for_line(" x", 0, 2, line=1).take_while(str.isalpha)

        assert text == ""
        assert rest.pos == 0

    def test_rest_and_slice_to(self) -> None:
        cursor = Cursor.for_line("ab cd\nef", 0, 5, line=1).advance(3)

        assert cursor.rest() == "cd"
        assert cursor.slice_to(4) == "c"


# ============================================================================
# SPANS
# ============================================================================


class TestCursorSpans:
    """Spans carry the line bookkeeping and the registry index."""

    def test_span_to(self) -> None:
        cursor = Cursor.for_line("x\n  abc", 2, 7, line=2, source_index=1).advance(2)

        span = cursor.span_to(7)

        assert (span.start, span.end) == (4, 7)
        assert (span.line, span.column, span.end_column) == (2, 3, 6)
        assert span.source == 1

    def test_span_char(self) -> None:
        span = Cursor.for_line("(a", 0, 2, line=1).span_char()

        assert (span.start, span.end, span.column) == (0, 1, 1)

    @given(text=st.text(alphabet="ab \t", max_size=40))
    def test_skip_whitespace_never_moves_backwards(self, text: str) -> None:
        """PROPERTY: skipping stops on a non-space character or the line end."""
        cursor = Cursor.for_line(text, 0, len(text), line=1)

        skipped = cursor.skip_whitespace()

        assert skipped.pos >= cursor.pos
        assert skipped.is_eof or not skipped.current.isspace()
