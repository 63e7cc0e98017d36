"""treelang exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import replace

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = [
    "AmbiguousMarginError",
    "DuplicateOriginError",
    "InvalidIndentUnitError",
    "SourceLookupError",
    "TreeSyntaxError",
    "TreelangError",
]


class TreelangError(Exception):
    """Base exception for all treelang errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize TreelangError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)

    @property
    def kind(self) -> DiagnosticCode | None:
        """Diagnostic code of the failure, if a diagnostic is attached."""
        return self.diagnostic.code if self.diagnostic is not None else None

    @property
    def span(self) -> SourceSpan | None:
        """Source location of the failure, if known."""
        return self.diagnostic.span if self.diagnostic is not None else None


class TreeSyntaxError(TreelangError):
    """Parse failure.

    Raised for the first error found in the input; parsing stops there and
    no partial tree is returned. ``kind`` tells which rule was violated.
    """

    def __init__(self, diagnostic: Diagnostic) -> None:
        super().__init__(diagnostic)
        self._parse_diagnostic = diagnostic

    @property
    def kind(self) -> DiagnosticCode:
        return self._parse_diagnostic.code

    def with_origin(self, origin: str) -> "TreeSyntaxError":
        """Copy of this error whose diagnostic names the input it came from."""
        return TreeSyntaxError(replace(self._parse_diagnostic, origin=origin))


class DuplicateOriginError(TreelangError):
    """Origin already registered in a SourceMap.

    Only raised by callers that opt into treating re-registration as fatal
    (SourceMap.add, Conflict.into_error); SourceMap.insert returns a Conflict.

    Attributes:
        existing_index: Index that already owns the origin
    """

    def __init__(self, message: str | Diagnostic, existing_index: int) -> None:
        super().__init__(message)
        self.existing_index = existing_index


class InvalidIndentUnitError(TreelangError, ValueError):
    """Indent unit constructed with a zero or negative width."""


class AmbiguousMarginError(TreelangError, ValueError):
    """Margin normalization found a non-blank line without the marker."""


class SourceLookupError(TreelangError, LookupError):
    """Registry index is out of range or was never assigned."""
