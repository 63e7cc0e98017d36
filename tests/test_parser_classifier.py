"""Tests for the line classifier."""

from __future__ import annotations

import pytest

from treelang import Indent, TreeSyntaxError
from treelang.diagnostics import DiagnosticCode
from treelang.syntax.cursor import Cursor
from treelang.syntax.parser.classifier import ClassifiedLine, classify_line


def _classify(
    text: str, indent: Indent | None = None, **options: object
) -> ClassifiedLine | None:
    cursor = Cursor.for_line(text, 0, len(text), line=1, source_index=0)
    return classify_line(cursor, indent or Indent.spaces(2), **options)  # type: ignore[arg-type]


def _words(items: tuple[object, ...]) -> list[str]:
    return [item.text for item in items]  # type: ignore[attr-defined]


class TestBlankLines:
    """Blank and comment-only lines produce no node."""

    @pytest.mark.parametrize("text", ["", "   ", "\t", " \r"])
    def test_whitespace_only(self, text: str) -> None:
        assert _classify(text) is None

    def test_blank_line_is_not_checked_for_alignment(self) -> None:
        assert _classify("   ") is None

    def test_comment_only(self) -> None:
        assert _classify("    ;comment", comment=";") is None

    def test_comment_char_is_content_when_comments_off(self) -> None:
        line = _classify(";comment")

        assert line is not None
        assert _words(line.items) == [";comment"]


class TestStatementsAndDirectives:
    """Zero colons make a statement, one colon a directive."""

    def test_statement(self) -> None:
        line = _classify("abc 23")

        assert line is not None
        assert not line.is_directive
        assert line.arguments is None
        assert line.depth == 0
        assert _words(line.items) == ["abc", "23"]

    def test_directive_with_arguments(self) -> None:
        line = _classify("abc def: ghi jkl")

        assert line is not None
        assert line.is_directive
        assert _words(line.items) == ["abc", "def"]
        assert _words(line.arguments or ()) == ["ghi", "jkl"]

    def test_directive_without_arguments(self) -> None:
        line = _classify("first:")

        assert line is not None
        assert line.is_directive
        assert line.arguments == ()

    def test_depth(self) -> None:
        line = _classify("      x")

        assert line is not None
        assert line.depth == 3

    def test_tab_indentation(self) -> None:
        line = _classify("\t\tx", Indent.tabs())

        assert line is not None
        assert line.depth == 2

    def test_span_covers_content_only(self) -> None:
        text = "  abc (d e)   "
        line = _classify(text)

        assert line is not None
        assert text[line.span.start : line.span.end] == "abc (d e)"
        assert line.span.column == 3

    def test_span_excludes_comment(self) -> None:
        text = "def:ghi;comment"
        line = _classify(text, comment=";")

        assert line is not None
        assert text[line.span.start : line.span.end] == "def:ghi"


class TestClassifierErrors:
    """Misalignment and malformed directives."""

    @pytest.mark.parametrize("text", ["   abc", " abc", "\tabc", "  \tabc"])
    def test_misaligned(self, text: str) -> None:
        with pytest.raises(TreeSyntaxError) as exc_info:
            _classify(text)

        error = exc_info.value
        assert error.kind is DiagnosticCode.MISALIGNED_INDENTATION
        assert error.span is not None
        assert error.span.start == 0
        assert error.span.end == text.index("a")
        assert "2 spaces" in str(error)

    def test_two_colons(self) -> None:
        with pytest.raises(TreeSyntaxError) as exc_info:
            _classify("abc: def: ghi")

        error = exc_info.value
        assert error.kind is DiagnosticCode.AMBIGUOUS_DIRECTIVE
        assert error.span is not None
        assert error.span.start == 8

    def test_empty_signature(self) -> None:
        with pytest.raises(TreeSyntaxError) as exc_info:
            _classify("  :def")

        error = exc_info.value
        assert error.kind is DiagnosticCode.EMPTY_SIGNATURE
        assert error.span is not None
        assert error.span.start == 2

    def test_colon_inside_group_keeps_statement(self) -> None:
        line = _classify("url (http://example.com)")

        assert line is not None
        assert not line.is_directive
