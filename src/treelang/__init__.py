"""treelang - indentation-structured configuration text to typed trees.

Parses line-oriented text where indentation expresses nesting: lines ending
a signature with ``:`` are directives that own the block indented beneath
them, all other lines are statements. Items on a line are numbers, words,
or bracketed groups. Every item and node carries a span into a registry of
source buffers, so errors and tooling can point back at the exact text.

Public API:
    SourceMap - Registry of source buffers
    Origin - Identity of a source buffer (named, file, anonymous)
    Indent - Indent unit (spaces(n) or tabs())
    TreeParser - Configurable parser
    parse - Parse a registered buffer
    parse_source - Register and parse text in one step
    normalize - Strip margins from embedded multi-line literals
    walk - Depth-first iteration over tree nodes

Exceptions:
    TreelangError - Base exception class
    TreeSyntaxError - Parse errors
    DuplicateOriginError - Origin registered twice (strict registration)
    InvalidIndentUnitError - Indent unit width <= 0
    AmbiguousMarginError - Margin marker missing on a non-blank line
    SourceLookupError - Unknown registry index

Submodules:
    treelang.syntax.ast - Tree node types (Tree, Directive, Statement, items)
    treelang.syntax.parser - Line-level parsing stages
    treelang.source - Registry, origins, positions, margins
    treelang.diagnostics - Diagnostic codes, templates and formatting
"""

# Essential Public API - Minimal exports for clean namespace
from .diagnostics import (
    AmbiguousMarginError,
    DuplicateOriginError,
    InvalidIndentUnitError,
    SourceLookupError,
    TreelangError,
    TreeSyntaxError,
)
from .source import Origin, SourceMap, normalize
from .syntax import Indent, NodeVisitor, ParsedSource, TreeParser, parse, parse_source, walk

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("treelang")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "AmbiguousMarginError",
    "DuplicateOriginError",
    "Indent",
    "InvalidIndentUnitError",
    "NodeVisitor",
    "Origin",
    "ParsedSource",
    "SourceLookupError",
    "SourceMap",
    "TreeParser",
    "TreeSyntaxError",
    "TreelangError",
    "__version__",
    "normalize",
    "parse",
    "parse_source",
    "walk",
]
