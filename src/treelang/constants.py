"""Shared constants for treelang.

This module provides centralized configuration constants used across
the source, syntax and diagnostics packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Structural characters: Characters the item scanner treats specially
- Indentation: Defaults for the indent unit
- Margins: Defaults for margin normalization
- Limits: Recursion and input size protection

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Structural characters
    "DIRECTIVE_COLON",
    "GROUP_OPEN",
    "GROUP_CLOSE",
    "STRUCTURAL_CHARS",
    # Indentation
    "DEFAULT_INDENT_WIDTH",
    # Margins
    "DEFAULT_MARGIN_MARKER",
    # Limits
    "MAX_DEPTH",
    "MAX_SOURCE_SIZE",
]

# ============================================================================
# STRUCTURAL CHARACTERS
# ============================================================================

# Separates a directive's signature from its arguments.
# Only structural outside groups; inside a group it is word content.
DIRECTIVE_COLON: str = ":"

# Group delimiters, keyed by opening character.
GROUP_OPEN: dict[str, str] = {"(": ")", "[": "]", "{": "}"}

# Reverse lookup used to report mismatched closes.
GROUP_CLOSE: dict[str, str] = {close: open_ for open_, close in GROUP_OPEN.items()}

# Characters that can never be part of a word outside a group.
STRUCTURAL_CHARS: frozenset[str] = frozenset(
    (DIRECTIVE_COLON, *GROUP_OPEN.keys(), *GROUP_OPEN.values())
)

# ============================================================================
# INDENTATION
# ============================================================================

# Spaces per nesting level used by parse_source() when no Indent is given.
DEFAULT_INDENT_WIDTH: int = 2

# ============================================================================
# MARGINS
# ============================================================================

# Marker that ends the incidental margin of embedded multi-line literals:
#
#     source = normalize('''
#         |server:
#         |  port 8080
#     ''')
DEFAULT_MARGIN_MARKER: str = "|"

# ============================================================================
# LIMITS
# ============================================================================

# Maximum group nesting depth on a single line.
# Groups are scanned with an explicit stack, so this is not a recursion guard;
# 100 levels of ((((...)))) on one line is almost certainly malformed input.
MAX_DEPTH: int = 100

# Default maximum source size in characters (10 MB).
# Prevents unbounded memory allocation from oversized inputs.
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024
