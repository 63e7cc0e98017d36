"""Hypothesis strategies for treelang property-based testing.

Usage:
    from tests.strategies import tree_documents, tree_items
    from tests.strategies.tree import GeneratedDocument

Event-Emitting Strategies:
    These strategies emit hypothesis.event() calls so runs report coverage
    of interesting shapes:
    - tree_floats (literal shape)
    - directive_lines (with or without arguments)
    - tree_documents (maximum depth reached)
"""

from .tree import (
    GROUP_DELIMITERS,
    GeneratedDocument,
    directive_lines,
    margin_literals,
    statement_lines,
    tree_documents,
    tree_floats,
    tree_integers,
    tree_item_sequences,
    tree_items,
    tree_numbers,
    tree_words,
)

__all__ = [
    "GROUP_DELIMITERS",
    "GeneratedDocument",
    "directive_lines",
    "margin_literals",
    "statement_lines",
    "tree_documents",
    "tree_floats",
    "tree_integers",
    "tree_item_sequences",
    "tree_items",
    "tree_numbers",
    "tree_words",
]
