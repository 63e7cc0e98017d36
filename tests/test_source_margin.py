"""Tests for margin normalization of embedded multi-line literals."""

from __future__ import annotations

import pytest
from hypothesis import given

from tests.strategies import margin_literals
from treelang import AmbiguousMarginError, normalize
from treelang.diagnostics import DiagnosticCode


class TestNormalize:
    """normalize() strips margins and surrounding blank lines."""

    def test_strips_margin_and_blank_edges(self) -> None:
        text = """
            |abc:
            |  def
        """

        assert normalize(text) == "abc:\n  def"

    def test_inner_blank_lines_become_empty(self) -> None:
        text = "\n    |a:\n        \n    |  b\n  "

        assert normalize(text) == "a:\n\n  b"

    def test_whitespace_after_marker_is_kept(self) -> None:
        assert normalize("|    deep") == "    deep"

    def test_only_one_blank_line_trimmed_at_each_end(self) -> None:
        text = "\n\n  |a\n\n  "

        assert normalize(text) == "\na\n"

    def test_custom_marker(self) -> None:
        assert normalize("\n  >a\n  >b\n", marker=">") == "a\nb"

    def test_text_without_markers_is_unchanged(self) -> None:
        text = "abc:\n  def\n"

        assert normalize(text) == text

    def test_empty_text(self) -> None:
        assert normalize("") == ""

    def test_missing_marker_raises(self) -> None:
        text = "\n  |abc:\n    def\n"

        with pytest.raises(AmbiguousMarginError) as exc_info:
            normalize(text)

        error = exc_info.value
        assert error.kind is DiagnosticCode.AMBIGUOUS_MARGIN
        assert error.span is not None
        assert error.span.source is None
        assert (error.span.line, error.span.column) == (3, 5)
        assert text[error.span.start] == "d"

    def test_ambiguous_margin_is_value_error(self) -> None:
        with pytest.raises(ValueError, match="margin marker"):
            normalize("|a\nb")

    @pytest.mark.parametrize("marker", ["", "||", " ", "\t"])
    def test_invalid_marker(self, marker: str) -> None:
        with pytest.raises(ValueError, match="single non-whitespace"):
            normalize("|a", marker=marker)


class TestNormalizeProperties:
    """Property tests for normalize()."""

    @given(case=margin_literals())
    def test_margin_literal_round_trip(self, case: tuple[str, str]) -> None:
        """PROPERTY: an indented literal normalizes to its body."""
        literal, expected = case

        assert normalize(literal) == expected

    @given(case=margin_literals())
    def test_idempotent(self, case: tuple[str, str]) -> None:
        """PROPERTY: normalized text without markers is returned unchanged."""
        literal, _ = case
        once = normalize(literal)

        if not any(line.lstrip().startswith("|") for line in once.split("\n")):
            assert normalize(once) == once
