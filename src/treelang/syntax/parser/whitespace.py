"""Whitespace handling for line-oriented parsing.

Splits a physical line into its leading indentation and content, and
decides whether a line carries any content at all.
"""

from treelang.syntax.cursor import Cursor

__all__ = ["is_blank", "split_indentation"]


def split_indentation(cursor: Cursor) -> tuple[str, Cursor]:
    """Consume leading whitespace of a line.

    Any whitespace character is consumed, not just the indent unit, so that
    a stray tab in a space-indented file is reported as misaligned rather
    than scanned as content.

    Args:
        cursor: Cursor at the first character of the line

    Returns:
        (leading whitespace text, cursor at the first content character)
    """
    rest = cursor.skip_whitespace()
    return cursor.slice_to(rest.pos), rest


def is_blank(cursor: Cursor, comment: str | None) -> bool:
    """True if nothing but a comment (or nothing) remains on the line.

    Args:
        cursor: Cursor positioned after leading whitespace
        comment: Comment character, or None when comments are off
    """
    if cursor.is_eof:
        return True
    return comment is not None and cursor.current == comment
