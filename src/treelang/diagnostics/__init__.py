"""Diagnostic system for treelang errors.

Provides structured error diagnostics with codes, spans and hints.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory, SourceSpan
from .errors import (
    AmbiguousMarginError,
    DuplicateOriginError,
    InvalidIndentUnitError,
    SourceLookupError,
    TreelangError,
    TreeSyntaxError,
)
from .formatter import DiagnosticFormatter, OutputFormat, render_section
from .templates import ErrorTemplate

__all__ = [
    "AmbiguousMarginError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "DuplicateOriginError",
    "ErrorCategory",
    "ErrorTemplate",
    "InvalidIndentUnitError",
    "OutputFormat",
    "SourceLookupError",
    "SourceSpan",
    "TreeSyntaxError",
    "TreelangError",
    "render_section",
]
