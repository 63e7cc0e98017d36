"""Syntax tree node definitions.

Items are the units found on one line (numbers, words, groups); nodes are
whole lines (statements and directives); a Tree is the parse result for one
input. All types are frozen, slotted dataclasses holding tuples, so a
finished tree is immutable and can be shared across threads.

Items and nodes are closed unions: consumers match on the concrete classes::

    match node:
        case Directive(signature=signature, children=children):
            ...
        case Statement(items=items):
            ...

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TypeIs

from treelang.diagnostics.codes import SourceSpan
from treelang.enums import GroupKind

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Items
    "Number",
    "Word",
    "Group",
    # Nodes
    "Statement",
    "Directive",
    # Result
    "Tree",
    # Type aliases
    "Item",
    "Node",
]

# ============================================================================
# ITEMS
# ============================================================================


@dataclass(frozen=True, slots=True)
class Number:
    """Numeric literal.

    ``value`` is an int for integer literals (``23``, ``-7``) and a float for
    literals with a decimal point or exponent (``2.5``, ``1e3``).

    Attributes:
        text: Literal text as written
        value: Parsed value
        span: Location of the literal
    """

    text: str
    value: int | float
    span: SourceSpan

    @property
    def is_integer(self) -> bool:
        return isinstance(self.value, int)

    @property
    def is_float(self) -> bool:
        return isinstance(self.value, float)

    @staticmethod
    def guard(item: object) -> TypeIs["Number"]:
        """Type guard for Number."""
        return isinstance(item, Number)


@dataclass(frozen=True, slots=True)
class Word:
    """Run of non-whitespace, non-structural characters.

    Examples: ``abc``, ``a-b``, ``$x$``, ``23abc``, ``+``
    """

    text: str
    span: SourceSpan

    @staticmethod
    def guard(item: object) -> TypeIs["Word"]:
        """Type guard for Word."""
        return isinstance(item, Word)


@dataclass(frozen=True, slots=True)
class Group:
    """Delimited sequence of items on one line.

    Example:
        ``(a [b c] {})`` is a parentheses Group holding a Word, a brackets
        Group and an empty braces Group.

    Attributes:
        kind: Delimiter kind
        items: Nested items in source order
        span: From the opening through the closing delimiter
    """

    kind: GroupKind
    items: tuple["Item", ...]
    span: SourceSpan

    @staticmethod
    def guard(item: object) -> TypeIs["Group"]:
        """Type guard for Group."""
        return isinstance(item, Group)

    def __len__(self) -> int:
        return len(self.items)


# ============================================================================
# NODES
# ============================================================================


@dataclass(frozen=True, slots=True)
class Statement:
    """Line without a top-level colon. Never has children.

    Example:
        statement x 23
    """

    items: tuple["Item", ...]
    depth: int
    span: SourceSpan

    @property
    def children(self) -> tuple["Node", ...]:
        """Always empty; lets callers walk nodes without matching first."""
        return ()

    @staticmethod
    def guard(node: object) -> TypeIs["Statement"]:
        """Type guard for Statement."""
        return isinstance(node, Statement)


@dataclass(frozen=True, slots=True)
class Directive:
    """Line with one top-level colon, plus the block indented under it.

    Example:
        directive a: b
          first:
            statement x 23

    Attributes:
        signature: Items before the colon (never empty)
        arguments: Items after the colon (may be empty)
        children: Nodes one level deeper, in source order
        depth: Indentation depth of the directive line
        span: Location of the directive line's content
    """

    signature: tuple["Item", ...]
    arguments: tuple["Item", ...]
    children: tuple["Node", ...]
    depth: int
    span: SourceSpan

    @staticmethod
    def guard(node: object) -> TypeIs["Directive"]:
        """Type guard for Directive."""
        return isinstance(node, Directive)


# ============================================================================
# RESULT
# ============================================================================


@dataclass(frozen=True, slots=True)
class Tree:
    """Top-level nodes of one parsed input.

    Attributes:
        nodes: Top-level nodes in source order
        span: Span of the whole input
    """

    nodes: tuple["Node", ...]
    span: SourceSpan

    def __len__(self) -> int:
        return len(self.nodes)

    def __getitem__(self, index: int) -> "Node":
        return self.nodes[index]

    def __iter__(self) -> Iterator["Node"]:
        return iter(self.nodes)

    @property
    def source(self) -> int | None:
        """Registry index of the parsed input."""
        return self.span.source


# ============================================================================
# TYPE ALIASES
# ============================================================================

type Item = Number | Word | Group
type Node = Statement | Directive
