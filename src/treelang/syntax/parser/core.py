"""Core tree parser implementation.

This module provides the TreeParser class that orchestrates parsing of a
registered source buffer into the Tree structure defined in
:mod:`treelang.syntax.ast`.

Architecture:
    Parsing is a single forward pass over physical lines:

    - :func:`~treelang.syntax.parser.classifier.classify_line` measures the
      indentation and scans the items of one line
      (:func:`~treelang.syntax.parser.scanner.scan_items`)
    - :class:`~treelang.syntax.parser.builder.TreeBuilder` nests the
      classified lines by depth

    Each line is read through an immutable, line-bounded
    :class:`~treelang.syntax.cursor.Cursor`.

Error Model:
    The first error aborts the parse with
    :class:`~treelang.diagnostics.TreeSyntaxError`. There is no recovery and
    no partial tree.

Security:
    Includes configurable input size and group nesting limits.

See Also:
    - :mod:`treelang.syntax.ast` - Tree node type definitions
    - :mod:`treelang.source.registry` - Buffer registration
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from treelang.constants import (
    DEFAULT_INDENT_WIDTH,
    MAX_DEPTH,
    MAX_SOURCE_SIZE,
    STRUCTURAL_CHARS,
)
from treelang.diagnostics import TreeSyntaxError
from treelang.source.origin import Origin
from treelang.source.position import LineOffsetCache
from treelang.source.registry import SourceInput, SourceMap
from treelang.syntax.ast import Tree
from treelang.syntax.cursor import Cursor
from treelang.syntax.indent import Indent
from treelang.syntax.parser.builder import TreeBuilder
from treelang.syntax.parser.classifier import classify_line

__all__ = ["ParsedSource", "TreeParser", "parse", "parse_source"]

logger = logging.getLogger(__name__)


def _iter_lines(text: str, source_index: int | None) -> Iterator[Cursor]:
    """Yield one line-bounded cursor per physical line.

    Lines are split on ``\\n`` only; a trailing ``\\r`` is whitespace to the
    scanner. Empty text still yields one (empty) line.
    """
    start = 0
    number = 1
    size = len(text)
    while True:
        end = text.find("\n", start)
        if end == -1:
            end = size
        yield Cursor.for_line(text, start, end, line=number, source_index=source_index)
        if end == size:
            return
        start = end + 1
        number += 1


@dataclass(frozen=True, slots=True)
class ParsedSource:
    """Result of parse_source(): the tree plus the map that owns its text.

    Attributes:
        tree: Parsed tree; its spans refer to source_map
        source_map: Registry holding the parsed text
        source_input: The registered buffer the tree was parsed from
    """

    tree: Tree
    source_map: SourceMap
    source_input: SourceInput


class TreeParser:
    """Indentation-structured text parser.

    Design:
    - Line-bounded immutable cursor; no scan can run past its line
    - Explicit stacks for both group nesting and block nesting
    - First error wins; errors carry a Diagnostic with a precise span

    Security:
    - Configurable max_source_size rejects oversized input up front
    - Default limit: 10 MB
    - Configurable max_nesting_depth bounds group nesting on one line

    Attributes:
        indent: Indent unit that defines one nesting level
        comment: Line comment character, or None when comments are off
        max_source_size: Maximum allowed source size in characters
        max_nesting_depth: Maximum allowed group nesting depth
    """

    __slots__ = ("_comment", "_indent", "_max_nesting_depth", "_max_source_size")

    def __init__(
        self,
        indent: Indent | None = None,
        *,
        comment: str | None = None,
        max_source_size: int | None = None,
        max_nesting_depth: int | None = None,
    ) -> None:
        """Initialize parser.

        Args:
            indent: Indent unit (default: Indent.spaces(2))
            comment: Character that starts a line comment outside groups.
                     None (default) disables comments.
            max_source_size: Maximum source size (default: 10 MB).
                            Set to 0 to disable the limit (not recommended).
            max_nesting_depth: Maximum group nesting depth (default: 100).

        Raises:
            ValueError: If comment is not a single non-whitespace,
                non-structural character
        """
        if comment is not None and (
            len(comment) != 1 or comment.isspace() or comment in STRUCTURAL_CHARS
        ):
            msg = (
                "Comment character must be a single non-whitespace character "
                f"other than {''.join(sorted(STRUCTURAL_CHARS))!r}, got {comment!r}"
            )
            raise ValueError(msg)

        self._indent = indent if indent is not None else Indent.spaces(DEFAULT_INDENT_WIDTH)
        self._comment = comment
        self._max_source_size = (
            max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
        )
        self._max_nesting_depth = (
            max_nesting_depth if max_nesting_depth is not None else MAX_DEPTH
        )

    @property
    def indent(self) -> Indent:
        """Indent unit that defines one nesting level."""
        return self._indent

    @property
    def comment(self) -> str | None:
        """Line comment character, or None."""
        return self._comment

    @property
    def max_source_size(self) -> int:
        """Maximum allowed source size in characters."""
        return self._max_source_size

    @property
    def max_nesting_depth(self) -> int:
        """Maximum allowed group nesting depth."""
        return self._max_nesting_depth

    def parse(self, source_input: SourceInput) -> Tree:
        """Parse a registered buffer into a Tree.

        Args:
            source_input: Buffer obtained from SourceMap.input()

        Returns:
            Tree whose spans all carry source_input.index

        Raises:
            ValueError: If the text exceeds max_source_size
            TreeSyntaxError: On the first syntax or indentation error

        Example:
            >>> source_map = SourceMap()
            >>> index = source_map.add(Origin.named("inline"), "a:\\n  b 1")
            >>> tree = TreeParser().parse(source_map.input(index))
            >>> tree[0].children[0].items[1].value
            1
        """
        text = source_input.text
        if self._max_source_size > 0 and len(text) > self._max_source_size:
            msg = (
                f"Source size ({len(text):,} characters) exceeds maximum "
                f"({self._max_source_size:,} characters). "
                "Configure max_source_size in TreeParser constructor to increase limit."
            )
            raise ValueError(msg)

        builder = TreeBuilder()
        try:
            for cursor in _iter_lines(text, source_input.index):
                line = classify_line(
                    cursor,
                    self._indent,
                    comment=self._comment,
                    max_nesting_depth=self._max_nesting_depth,
                )
                if line is not None:
                    builder.feed(line)
        except TreeSyntaxError as error:
            origin = str(source_input.origin)
            logger.warning("Failed to parse %s: %s", origin, error.diagnostic)
            raise error.with_origin(origin) from None

        nodes = builder.finish()
        span = LineOffsetCache(text).span(0, len(text), source=source_input.index)
        logger.debug(
            "Parsed %s: %d top-level nodes from %d characters",
            source_input.origin,
            len(nodes),
            len(text),
        )
        return Tree(nodes=nodes, span=span)

    def parse_source(
        self,
        text: str,
        *,
        origin: Origin | None = None,
        source_map: SourceMap | None = None,
    ) -> ParsedSource:
        """Register text and parse it in one step.

        Args:
            text: Source text
            origin: Identity for the text (default: a fresh anonymous origin)
            source_map: Registry to add the text to (default: a new map)

        Raises:
            DuplicateOriginError: If origin is already in source_map
            ValueError: If the text exceeds max_source_size
            TreeSyntaxError: On the first syntax or indentation error
        """
        if source_map is None:
            source_map = SourceMap()
        if origin is None:
            origin = Origin.anonymous()
        source_input = source_map.input(source_map.add(origin, text))
        return ParsedSource(
            tree=self.parse(source_input), source_map=source_map, source_input=source_input
        )


def parse(source_input: SourceInput, indent: Indent) -> Tree:
    """Parse a registered buffer with the default grammar.

    Convenience wrapper around ``TreeParser(indent).parse(source_input)``.

    Raises:
        TreeSyntaxError: On the first syntax or indentation error
    """
    return TreeParser(indent).parse(source_input)


def parse_source(
    text: str,
    *,
    indent: Indent | None = None,
    origin: Origin | None = None,
    source_map: SourceMap | None = None,
) -> ParsedSource:
    """Register text in a SourceMap and parse it.

    Example:
        >>> result = parse_source("server:\\n  port 8080")
        >>> result.source_map.span_text(result.tree[0].children[0].span)
        'port 8080'
    """
    return TreeParser(indent).parse_source(text, origin=origin, source_map=source_map)
