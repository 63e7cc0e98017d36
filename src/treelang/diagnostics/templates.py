"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every error case in one place.
    """

    # ------------------------------------------------------------------
    # Source registry
    # ------------------------------------------------------------------

    @staticmethod
    def duplicate_origin(origin: str, existing_index: int) -> Diagnostic:
        """Origin inserted twice into the same SourceMap.

        Args:
            origin: Display name of the origin
            existing_index: Index that already owns the origin

        Returns:
            Diagnostic for DUPLICATE_ORIGIN
        """
        msg = f"Origin {origin} is already registered at index {existing_index}"
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_ORIGIN,
            message=msg,
            hint="Use a distinct origin per buffer, or look up the existing index",
            origin=origin,
        )

    @staticmethod
    def source_not_found(index: int, size: int) -> Diagnostic:
        """Registry index that was never assigned.

        Args:
            index: Requested index
            size: Number of registered sources

        Returns:
            Diagnostic for SOURCE_NOT_FOUND
        """
        msg = f"No source registered at index {index} (registry holds {size})"
        return Diagnostic(code=DiagnosticCode.SOURCE_NOT_FOUND, message=msg)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @staticmethod
    def invalid_indent_unit(width: int) -> Diagnostic:
        """Indent unit with a non-positive width.

        Args:
            width: Rejected width

        Returns:
            Diagnostic for INVALID_INDENT_UNIT
        """
        msg = f"Indent unit must be at least 1 character wide, got {width}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_INDENT_UNIT,
            message=msg,
            hint="Use Indent.spaces(n) with n > 0, or Indent.tabs()",
        )

    @staticmethod
    def ambiguous_margin(span: SourceSpan, marker: str) -> Diagnostic:
        """Non-blank line without the margin marker.

        Args:
            span: Location of the line's first non-whitespace character
            marker: Expected margin marker

        Returns:
            Diagnostic for AMBIGUOUS_MARGIN
        """
        msg = f"Line {span.line} does not start with margin marker '{marker}'"
        return Diagnostic(
            code=DiagnosticCode.AMBIGUOUS_MARGIN,
            message=msg,
            span=span,
            hint=f"Prefix every non-blank line with '{marker}' after its indentation",
        )

    # ------------------------------------------------------------------
    # Indentation
    # ------------------------------------------------------------------

    @staticmethod
    def misaligned_indentation(span: SourceSpan, description: str) -> Diagnostic:
        """Leading whitespace is not a whole number of indent units.

        Args:
            span: Location of the leading whitespace
            description: Indent unit description (e.g. "2 spaces")

        Returns:
            Diagnostic for MISALIGNED_INDENTATION
        """
        msg = f"Indentation on line {span.line} is not a multiple of {description}"
        return Diagnostic(
            code=DiagnosticCode.MISALIGNED_INDENTATION,
            message=msg,
            span=span,
            hint=f"Indent with {description} per level and no other whitespace",
        )

    @staticmethod
    def base_indentation(span: SourceSpan, depth: int) -> Diagnostic:
        """First line of input is indented.

        Args:
            span: Location of the line content
            depth: Measured depth of the line

        Returns:
            Diagnostic for BASE_INDENTATION
        """
        msg = f"First line must not be indented, found depth {depth} on line {span.line}"
        return Diagnostic(
            code=DiagnosticCode.BASE_INDENTATION,
            message=msg,
            span=span,
            hint="Start the input at column 1",
        )

    @staticmethod
    def unmatched_dedent(span: SourceSpan, depth: int) -> Diagnostic:
        """Dedent to a depth that matches no open block.

        Args:
            span: Location of the line content
            depth: Measured depth of the line

        Returns:
            Diagnostic for UNMATCHED_DEDENT
        """
        msg = f"Dedent to depth {depth} on line {span.line} matches no enclosing block"
        return Diagnostic(
            code=DiagnosticCode.UNMATCHED_DEDENT,
            message=msg,
            span=span,
            hint="Align the line with one of the enclosing directives",
        )

    @staticmethod
    def inconsistent_indentation(span: SourceSpan, depth: int, allowed: int) -> Diagnostic:
        """Line indented more than one level past its context.

        Args:
            span: Location of the line content
            depth: Measured depth of the line
            allowed: Deepest depth the context permits

        Returns:
            Diagnostic for INCONSISTENT_INDENTATION
        """
        msg = f"Line {span.line} is at depth {depth}, but at most depth {allowed} is allowed here"
        return Diagnostic(
            code=DiagnosticCode.INCONSISTENT_INDENTATION,
            message=msg,
            span=span,
            hint="Indent children exactly one level deeper than their directive",
        )

    @staticmethod
    def nesting_under_statement(span: SourceSpan) -> Diagnostic:
        """Child line indented under a statement.

        Args:
            span: Location of the child line content

        Returns:
            Diagnostic for NESTING_UNDER_STATEMENT
        """
        msg = f"Line {span.line} is indented under a statement, which cannot have children"
        return Diagnostic(
            code=DiagnosticCode.NESTING_UNDER_STATEMENT,
            message=msg,
            span=span,
            hint="End the parent line with ':' to make it a directive",
        )

    # ------------------------------------------------------------------
    # Line syntax
    # ------------------------------------------------------------------

    @staticmethod
    def unterminated_group(span: SourceSpan, missing: str) -> Diagnostic:
        """Group opened without a matching close on the same line.

        Args:
            span: Location of the opening character
            missing: Closing character that was expected

        Returns:
            Diagnostic for UNTERMINATED_GROUP
        """
        msg = f"Missing closing '{missing}' for group opened on line {span.line}"
        return Diagnostic(
            code=DiagnosticCode.UNTERMINATED_GROUP,
            message=msg,
            span=span,
            hint="Close the group on the same line it was opened",
        )

    @staticmethod
    def mismatched_delimiter(span: SourceSpan, found: str, expected: str | None) -> Diagnostic:
        """Close character of the wrong kind, or with no open group.

        Args:
            span: Location of the offending close character
            found: The close character found
            expected: Close character of the innermost open group, if any

        Returns:
            Diagnostic for MISMATCHED_DELIMITER
        """
        if expected is None:
            msg = f"Unexpected '{found}' on line {span.line} with no open group"
        else:
            msg = f"Expected '{expected}' but found '{found}' on line {span.line}"
        return Diagnostic(
            code=DiagnosticCode.MISMATCHED_DELIMITER,
            message=msg,
            span=span,
        )

    @staticmethod
    def nesting_depth_exceeded(span: SourceSpan, max_depth: int) -> Diagnostic:
        """Groups nested deeper than the configured limit.

        Args:
            span: Location of the opening character past the limit
            max_depth: Configured maximum nesting depth

        Returns:
            Diagnostic for NESTING_DEPTH_EXCEEDED
        """
        msg = f"Group nesting on line {span.line} exceeds maximum depth of {max_depth}"
        return Diagnostic(
            code=DiagnosticCode.NESTING_DEPTH_EXCEEDED,
            message=msg,
            span=span,
            hint="Configure max_nesting_depth in TreeParser to raise the limit",
        )

    @staticmethod
    def ambiguous_directive(span: SourceSpan) -> Diagnostic:
        """More than one top-level colon on a line.

        Args:
            span: Location of the second colon

        Returns:
            Diagnostic for AMBIGUOUS_DIRECTIVE
        """
        msg = f"Line {span.line} contains more than one directive ':'"
        return Diagnostic(
            code=DiagnosticCode.AMBIGUOUS_DIRECTIVE,
            message=msg,
            span=span,
            hint="Wrap colons that are part of a value in a group, e.g. (a:b)",
        )

    @staticmethod
    def empty_signature(span: SourceSpan) -> Diagnostic:
        """Directive with nothing before its colon.

        Args:
            span: Location of the colon

        Returns:
            Diagnostic for EMPTY_SIGNATURE
        """
        msg = f"Directive on line {span.line} has an empty signature"
        return Diagnostic(
            code=DiagnosticCode.EMPTY_SIGNATURE,
            message=msg,
            span=span,
            hint="Name the directive before the ':'",
        )

    @staticmethod
    def empty_item_sequence(span: SourceSpan) -> Diagnostic:
        """Statement line without any items.

        Args:
            span: Location of the line content

        Returns:
            Diagnostic for EMPTY_ITEM_SEQUENCE
        """
        msg = f"Line {span.line} has no items"
        return Diagnostic(code=DiagnosticCode.EMPTY_ITEM_SEQUENCE, message=msg, span=span)
