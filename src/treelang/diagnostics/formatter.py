"""Diagnostic formatting service.

Centralizes diagnostic output formatting with configurable options.
Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from .codes import Diagnostic

if TYPE_CHECKING:
    from treelang.source.registry import SourceMap

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
    "render_section",
]


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Rust compiler-style output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Attributes:
        output_format: Output style (rust, simple, json)
        sanitize: Truncate content to prevent information leakage
        color: Enable ANSI color codes (for terminal output)
        max_content_length: Maximum content length when sanitizing
        context_lines: Source lines shown before the offending line

    Example:
        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(diagnostic))
        UNTERMINATED_GROUP: Missing closing ')' for group opened on line 1
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    color: bool = False
    max_content_length: int = 100
    context_lines: int = 1

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format multiple diagnostics separated by blank lines."""
        return "\n\n".join(self.format(d) for d in diagnostics)

    def format_with_context(self, diagnostic: Diagnostic, source_map: "SourceMap") -> str:
        """Format diagnostic followed by the source section it points at.

        Shows up to ``context_lines`` preceding lines, the offending line, and
        a caret marker under the span. Falls back to plain formatting when
        the diagnostic has no registered span.

        Example:
            >>> print(formatter.format_with_context(error.diagnostic, source_map))
            error[UNTERMINATED_GROUP]: Missing closing ')' for group opened on line 2
              --> config:2:8
              = help: Close the group on the same line it was opened
             1 | server:
             2 |   port (8080
               |        ^
        """
        header = self.format(diagnostic)
        span = diagnostic.span
        if span is None or span.source is None:
            return header
        text = source_map.input(span.source).text
        return f"{header}\n{render_section(text, span.start, span.end, self.context_lines)}"

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in Rust compiler style.

        Example output:
            error[EMPTY_SIGNATURE]: Directive on line 3 has an empty signature
              --> config:3:1
              = help: Name the directive before the ':'
        """
        severity = diagnostic.severity if diagnostic.severity == "warning" else "error"

        if self.color:
            if severity == "error":
                severity_str = f"\033[1;31m{severity}\033[0m"  # Bold red
            else:
                severity_str = f"\033[1;33m{severity}\033[0m"  # Bold yellow
        else:
            severity_str = severity

        message = self._maybe_sanitize(diagnostic.message)
        parts = [f"{severity_str}[{diagnostic.code.name}]: {message}"]

        if diagnostic.span is not None:
            where = diagnostic.origin or "line"
            parts.append(f"  --> {where}:{diagnostic.span.line}:{diagnostic.span.column}")
        elif diagnostic.origin:
            parts.append(f"  --> {diagnostic.origin}")

        if diagnostic.hint:
            parts.append(f"  = help: {self._maybe_sanitize(diagnostic.hint)}")

        return "\n".join(parts)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in single-line format.

        Example output:
            EMPTY_SIGNATURE: Directive on line 3 has an empty signature
        """
        message = self._maybe_sanitize(diagnostic.message)
        return f"{diagnostic.code.name}: {message}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic as JSON.

        Example output:
            {"code": "EMPTY_SIGNATURE", "code_value": 4004, "message": "...", ...}
        """
        data: dict[str, str | int | None] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "category": diagnostic.code.category.value,
            "message": self._maybe_sanitize(diagnostic.message),
            "severity": diagnostic.severity,
        }

        if diagnostic.span is not None:
            data["source"] = diagnostic.span.source
            data["line"] = diagnostic.span.line
            data["column"] = diagnostic.span.column
            data["start"] = diagnostic.span.start
            data["end"] = diagnostic.span.end

        if diagnostic.origin:
            data["origin"] = diagnostic.origin

        if diagnostic.hint:
            data["hint"] = self._maybe_sanitize(diagnostic.hint)

        return json.dumps(data, ensure_ascii=False)

    def _maybe_sanitize(self, text: str) -> str:
        """Truncate text if sanitization is enabled."""
        if self.sanitize and len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text


def render_section(text: str, start: int, end: int, context_lines: int = 1) -> str:
    """Render the line holding ``start`` with a gutter and caret highlight.

    Preceding lines are included up to ``context_lines``; an elided marker
    ``...`` is shown when earlier lines exist. Tabs in front of the span are
    kept so that the caret lines up in terminals.

    Args:
        text: Complete source text
        start: Start offset of the highlighted span
        end: End offset of the highlighted span (exclusive)
        context_lines: Number of lines to show before the offending line

    Returns:
        Multi-line section, without trailing newline

    Example:
        >>> print(render_section("abc:\\n  d (e", 9, 10))
         1 | abc:
         2 |   d (e
           |     ^
    """
    lines = text.split("\n")
    line_index = text.count("\n", 0, start)
    line_start = text.rfind("\n", 0, start) + 1
    line = lines[line_index]

    first_index = max(0, line_index - context_lines)
    width = len(str(line_index + 1))

    out: list[str] = []
    if first_index > 0:
        out.append(f" {first_index:>{width}} | ...")
    for i in range(first_index, line_index + 1):
        out.append(f" {i + 1:>{width}} | {lines[i]}")

    lead = "".join("\t" if c == "\t" else " " for c in line[: start - line_start])
    highlight = max(1, min(end, line_start + len(line)) - start)
    out.append(f" {'':>{width}} | {lead}{'^' * highlight}")
    return "\n".join(out)
