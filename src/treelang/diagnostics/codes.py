"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
    "SourceSpan",
]


class ErrorCategory(StrEnum):
    """Coarse grouping of diagnostic codes.

    Categories:
        SOURCE: Source registry failures (duplicate origin, unknown index)
        CONFIG: Invalid parser configuration (indent unit, margin)
        INDENTATION: Block structure failures detected by the tree builder
        SYNTAX: Line content failures detected by the scanner and classifier
    """

    SOURCE = "source"
    CONFIG = "config"
    INDENTATION = "indentation"
    SYNTAX = "syntax"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Source registry errors
        2000-2999: Configuration errors
        3000-3999: Indentation and block structure errors
        4000-4999: Line syntax errors
    """

    # Source registry errors (1000-1999)
    DUPLICATE_ORIGIN = 1001
    SOURCE_NOT_FOUND = 1002

    # Configuration errors (2000-2999)
    INVALID_INDENT_UNIT = 2001
    AMBIGUOUS_MARGIN = 2002

    # Indentation errors (3000-3999)
    MISALIGNED_INDENTATION = 3001
    BASE_INDENTATION = 3002
    UNMATCHED_DEDENT = 3003
    INCONSISTENT_INDENTATION = 3004
    NESTING_UNDER_STATEMENT = 3005

    # Syntax errors (4000-4999)
    UNTERMINATED_GROUP = 4001
    MISMATCHED_DELIMITER = 4002
    AMBIGUOUS_DIRECTIVE = 4003
    EMPTY_SIGNATURE = 4004
    EMPTY_ITEM_SEQUENCE = 4005
    NESTING_DEPTH_EXCEEDED = 4006

    @property
    def category(self) -> ErrorCategory:
        """Category derived from the code's numeric range."""
        match self.value // 1000:
            case 1:
                return ErrorCategory.SOURCE
            case 2:
                return ErrorCategory.CONFIG
            case 3:
                return ErrorCategory.INDENTATION
            case _:
                return ErrorCategory.SYNTAX


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Located range inside a registered source buffer.

    Note:
        Python strings measure positions in characters (Unicode code points),
        not bytes. For multi-byte UTF-8 characters, character offset differs
        from byte offset.

    Attributes:
        source: Registry index of the buffer (None for unregistered text)
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Start line number (1-indexed)
        column: Start column number (1-indexed)
        end_line: End line number (1-indexed)
        end_column: End column number (1-indexed, exclusive)
    """

    source: int | None
    start: int
    end: int
    line: int
    column: int
    end_line: int
    end_column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, or a line or
                column is less than 1 (both are 1-indexed).
        """
        if self.source is not None and self.source < 0:
            msg = f"SourceSpan.source must be >= 0, got {self.source}"
            raise ValueError(msg)
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1 or self.end_line < self.line:
            msg = f"SourceSpan lines must satisfy 1 <= {self.line} <= {self.end_line}"
            raise ValueError(msg)
        if self.column < 1 or self.end_column < 1:
            msg = f"SourceSpan columns must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)

    def __len__(self) -> int:
        return self.end - self.start

    def cover(self, other: "SourceSpan") -> "SourceSpan":
        """Smallest span covering both self and other.

        Both spans must come from the same buffer.
        """
        if other.source != self.source:
            msg = f"Cannot cover spans from sources {self.source} and {other.source}"
            raise ValueError(msg)
        first = self if self.start <= other.start else other
        last = self if self.end >= other.end else other
        return SourceSpan(
            source=self.source,
            start=first.start,
            end=last.end,
            line=first.line,
            column=first.column,
            end_line=last.end_line,
            end_column=last.end_column,
        )


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Source location (None when no source text is involved)
        hint: Suggestion for fixing the error
        origin: Display name of the source buffer, when known
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    origin: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[UNTERMINATED_GROUP]: Missing closing ')' for group opened here
              --> config.tree:3:7
              = help: Close the group on the same line it was opened

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
