"""Line classifier: one physical line to a depth-tagged statement or directive."""

from dataclasses import dataclass

from treelang.constants import MAX_DEPTH
from treelang.diagnostics import ErrorTemplate, TreeSyntaxError
from treelang.diagnostics.codes import SourceSpan
from treelang.syntax.ast import Item
from treelang.syntax.cursor import Cursor
from treelang.syntax.indent import Indent
from treelang.syntax.parser.scanner import scan_items
from treelang.syntax.parser.whitespace import is_blank, split_indentation

__all__ = ["ClassifiedLine", "classify_line"]


@dataclass(frozen=True, slots=True)
class ClassifiedLine:
    """A content line, ready for the tree builder.

    Attributes:
        depth: Indentation depth in indent units
        items: Statement items, or the directive signature
        arguments: Directive arguments; None for statements
        span: Line content from the first item to the last item or colon
    """

    depth: int
    items: tuple[Item, ...]
    arguments: tuple[Item, ...] | None
    span: SourceSpan

    @property
    def is_directive(self) -> bool:
        return self.arguments is not None


def classify_line(
    cursor: Cursor,
    indent: Indent,
    *,
    comment: str | None = None,
    max_nesting_depth: int = MAX_DEPTH,
) -> ClassifiedLine | None:
    """Classify the line starting at cursor.

    Args:
        cursor: Cursor at the first character of the line
        indent: Indent unit used to measure depth
        comment: Comment character, or None when comments are off
        max_nesting_depth: Group nesting limit passed to the scanner

    Returns:
        ClassifiedLine, or None for blank and comment-only lines

    Raises:
        TreeSyntaxError: MISALIGNED_INDENTATION, AMBIGUOUS_DIRECTIVE,
            EMPTY_SIGNATURE, EMPTY_ITEM_SEQUENCE, or any scanner error
    """
    leading, content = split_indentation(cursor)
    if is_blank(content, comment):
        return None

    depth = indent.measure(leading)
    if depth is None:
        raise TreeSyntaxError(
            ErrorTemplate.misaligned_indentation(cursor.span_to(content.pos), indent.description)
        )

    scanned = scan_items(content, comment=comment, max_nesting_depth=max_nesting_depth)
    span = content.span_to(scanned.end)

    match scanned.colons:
        case ():
            items = scanned.segments[0]
            if not items:
                raise TreeSyntaxError(ErrorTemplate.empty_item_sequence(span))
            return ClassifiedLine(depth=depth, items=items, arguments=None, span=span)
        case (colon,):
            signature, arguments = scanned.segments
            if not signature:
                raise TreeSyntaxError(ErrorTemplate.empty_signature(colon))
            return ClassifiedLine(depth=depth, items=signature, arguments=arguments, span=span)
        case _:
            raise TreeSyntaxError(ErrorTemplate.ambiguous_directive(scanned.colons[1]))
