"""Tree syntax package.

Provides the indent unit, parser, tree definitions and traversal.
Separate from source so that buffers can be registered and addressed
without parsing.

Python 3.13+.
"""

from .ast import (
    Directive,
    Group,
    Item,
    Node,
    Number,
    Statement,
    Tree,
    Word,
)
from .cursor import Cursor
from .indent import Indent
from .parser import ParsedSource, TreeParser, parse, parse_source
from .visitor import NodeVisitor, walk, walk_items

__all__ = [
    "Cursor",
    "Directive",
    "Group",
    "Indent",
    "Item",
    "Node",
    "NodeVisitor",
    "Number",
    "ParsedSource",
    "Statement",
    "Tree",
    "TreeParser",
    "Word",
    "parse",
    "parse_source",
    "walk",
    "walk_items",
]
