"""Tree parser module.

This module provides the main TreeParser class and the line-level parsing
stages organized into focused submodules.

Module Organization:
- core.py: TreeParser class and parse()/parse_source() entry points
- classifier.py: Line classification (depth, statement or directive)
- scanner.py: Item scanning with an explicit group stack
- builder.py: Depth-driven nesting of classified lines
- primitives.py: Word and number literals
- whitespace.py: Indentation splitting and blank line detection

Public API:
    TreeParser: Main parser class
    ParsedSource: Result of parse_source()
    TreeBuilder, ClassifiedLine, classify_line, scan_items: Stages, for
        tools that drive parsing line by line
"""

from treelang.syntax.parser.builder import TreeBuilder
from treelang.syntax.parser.classifier import ClassifiedLine, classify_line
from treelang.syntax.parser.core import ParsedSource, TreeParser, parse, parse_source
from treelang.syntax.parser.scanner import ScannedLine, scan_items

__all__ = [
    "ClassifiedLine",
    "ParsedSource",
    "ScannedLine",
    "TreeBuilder",
    "TreeParser",
    "classify_line",
    "parse",
    "parse_source",
    "scan_items",
]
