"""Item scanner: turns one line's content into items.

Groups nest only within a line. Nesting is tracked with an explicit stack of
open groups instead of recursion, so the depth limit is a plain length
check and deeply nested input cannot exhaust the interpreter stack.

Top-level colons are recorded, not emitted: the line is split into
segments at each colon, and the classifier decides what the segments mean.
"""

from dataclasses import dataclass, field

from treelang.constants import DIRECTIVE_COLON, GROUP_CLOSE, GROUP_OPEN, MAX_DEPTH
from treelang.diagnostics import ErrorTemplate, TreeSyntaxError
from treelang.diagnostics.codes import SourceSpan
from treelang.enums import GroupKind
from treelang.syntax.ast import Group, Item
from treelang.syntax.cursor import Cursor
from treelang.syntax.parser.primitives import parse_word

__all__ = ["ScannedLine", "scan_items"]


@dataclass(frozen=True, slots=True)
class ScannedLine:
    """Items of one line, split at top-level colons.

    Attributes:
        segments: Item runs between colons; always len(colons) + 1 entries
        colons: Spans of the top-level colons in source order
        end: Offset just past the last item or colon
    """

    segments: tuple[tuple[Item, ...], ...]
    colons: tuple[SourceSpan, ...]
    end: int

    @property
    def items(self) -> tuple[Item, ...]:
        """All top-level items, ignoring colons."""
        return tuple(item for segment in self.segments for item in segment)


@dataclass(slots=True)
class _OpenGroup:
    kind: GroupKind
    start: Cursor
    items: list[Item] = field(default_factory=list)


def scan_items(
    cursor: Cursor,
    *,
    comment: str | None = None,
    max_nesting_depth: int = MAX_DEPTH,
) -> ScannedLine:
    """Scan items from cursor to the end of its line.

    Args:
        cursor: Cursor at the line's content (indentation already consumed)
        comment: Comment character that ends the content, or None
        max_nesting_depth: Maximum number of simultaneously open groups

    Returns:
        ScannedLine with items grouped into colon-separated segments

    Raises:
        TreeSyntaxError: UNTERMINATED_GROUP, MISMATCHED_DELIMITER or
            NESTING_DEPTH_EXCEEDED
    """
    segments: list[list[Item]] = [[]]
    colons: list[SourceSpan] = []
    stack: list[_OpenGroup] = []

    cursor = cursor.skip_whitespace()
    end = cursor.pos

    while not cursor.is_eof:
        char = cursor.current

        if char == comment:
            break

        if char in GROUP_OPEN:
            if len(stack) >= max_nesting_depth:
                raise TreeSyntaxError(
                    ErrorTemplate.nesting_depth_exceeded(cursor.span_char(), max_nesting_depth)
                )
            stack.append(_OpenGroup(GroupKind.from_open(char), cursor))
            cursor = cursor.advance()

        elif char in GROUP_CLOSE:
            if not stack:
                raise TreeSyntaxError(
                    ErrorTemplate.mismatched_delimiter(cursor.span_char(), char, None)
                )
            top = stack[-1]
            if char != top.kind.close:
                raise TreeSyntaxError(
                    ErrorTemplate.mismatched_delimiter(cursor.span_char(), char, top.kind.close)
                )
            stack.pop()
            cursor = cursor.advance()
            group = Group(kind=top.kind, items=tuple(top.items), span=top.start.span_to(cursor.pos))
            (stack[-1].items if stack else segments[-1]).append(group)

        elif char == DIRECTIVE_COLON and not stack:
            colons.append(cursor.span_char())
            segments.append([])
            cursor = cursor.advance()

        else:
            item, cursor = parse_word(cursor, in_group=bool(stack), comment=comment)
            (stack[-1].items if stack else segments[-1]).append(item)

        end = cursor.pos
        cursor = cursor.skip_whitespace()

    if stack:
        # Report the innermost group; it is the one the line ended inside.
        top = stack[-1]
        raise TreeSyntaxError(ErrorTemplate.unterminated_group(top.start.span_char(), top.kind.close))

    return ScannedLine(
        segments=tuple(tuple(segment) for segment in segments),
        colons=tuple(colons),
        end=end,
    )
