"""Tree builder: assembles classified lines into nested nodes.

Keeps an explicit stack of open frames, one per nesting level from the
root down to the most recent line. A frame stays open while lines may
still be added beneath it; closing a frame freezes its node into the
parent frame (or the top-level output). Nesting depth therefore costs
list entries, not interpreter stack.

Invariant: frame depths are 0, 1, ..., n from bottom to top.
"""

from dataclasses import dataclass, field

from treelang.diagnostics import ErrorTemplate, TreeSyntaxError
from treelang.syntax.ast import Directive, Node, Statement
from treelang.syntax.parser.classifier import ClassifiedLine

__all__ = ["TreeBuilder"]


@dataclass(slots=True)
class _Frame:
    line: ClassifiedLine
    children: list[Node] = field(default_factory=list)

    @property
    def depth(self) -> int:
        return self.line.depth

    def freeze(self) -> Node:
        line = self.line
        if line.arguments is None:
            return Statement(items=line.items, depth=line.depth, span=line.span)
        return Directive(
            signature=line.items,
            arguments=line.arguments,
            children=tuple(self.children),
            depth=line.depth,
            span=line.span,
        )


class TreeBuilder:
    """Incremental tree builder fed one classified line at a time.

    Example:
        >>> builder = TreeBuilder()
        >>> for line in lines:
        ...     builder.feed(line)
        >>> nodes = builder.finish()

    A builder is single-use: after finish() it rejects further input.
    """

    __slots__ = ("_finished", "_frames", "_roots")

    def __init__(self) -> None:
        self._frames: list[_Frame] = []
        self._roots: list[Node] = []
        self._finished = False

    @property
    def depth(self) -> int | None:
        """Depth of the most recent line, or None before the first line."""
        return self._frames[-1].depth if self._frames else None

    def feed(self, line: ClassifiedLine) -> None:
        """Add the next content line.

        Raises:
            TreeSyntaxError: BASE_INDENTATION, INCONSISTENT_INDENTATION,
                NESTING_UNDER_STATEMENT or UNMATCHED_DEDENT
            RuntimeError: If called after finish()
        """
        if self._finished:
            msg = "TreeBuilder.feed() called after finish()"
            raise RuntimeError(msg)

        depth = line.depth
        # Frames only run empty before the first line; a depth-0 sibling
        # replaces the bottom frame instead of emptying the stack.
        if not self._frames:
            if depth != 0:
                raise TreeSyntaxError(ErrorTemplate.base_indentation(line.span, depth))
            self._frames.append(_Frame(line))
            return

        top = self._frames[-1]
        if depth > top.depth + 1:
            allowed = top.depth + 1 if top.line.is_directive else top.depth
            raise TreeSyntaxError(ErrorTemplate.inconsistent_indentation(line.span, depth, allowed))

        if depth == top.depth + 1:
            if not top.line.is_directive:
                raise TreeSyntaxError(ErrorTemplate.nesting_under_statement(line.span))
            self._frames.append(_Frame(line))
            return

        while self._frames and self._frames[-1].depth > depth:
            self._close()
        if not self._frames or self._frames[-1].depth != depth:
            raise TreeSyntaxError(ErrorTemplate.unmatched_dedent(line.span, depth))
        # The previous line at this depth is a finished sibling.
        self._close()
        self._frames.append(_Frame(line))

    def finish(self) -> tuple[Node, ...]:
        """Close every open frame and return the top-level nodes."""
        while self._frames:
            self._close()
        self._finished = True
        return tuple(self._roots)

    def _close(self) -> None:
        node = self._frames.pop().freeze()
        if self._frames:
            self._frames[-1].children.append(node)
        else:
            self._roots.append(node)
