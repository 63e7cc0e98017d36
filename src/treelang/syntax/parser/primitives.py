"""Primitive item parsing: words and numeric literals.

A word is a maximal run of characters that are neither whitespace nor
structural. Once the run is cut, its text is classified: runs that match
the numeric grammar become Number items, everything else stays a Word.

Numeric grammar (ASCII digits only)::

    integer ::= [+-]? [0-9]+
    float   ::= [+-]? ([0-9]+ "." [0-9]* | "." [0-9]+ | [0-9]+) exponent?
    exponent::= [eE] [+-]? [0-9]+

A float needs a decimal point or an exponent. ``inf``, ``nan``, ``1_000``
and ``23abc`` are words. Integer literals of any length are Numbers.
"""

import re
from decimal import Decimal

from treelang.constants import DIRECTIVE_COLON, STRUCTURAL_CHARS
from treelang.diagnostics.codes import SourceSpan
from treelang.syntax.ast import Number, Word
from treelang.syntax.cursor import Cursor

__all__ = [
    "classify_word",
    "is_word_char",
    "parse_number_value",
    "parse_word",
]

# ASCII digits only. str.isdigit() accepts Unicode digits like ² which int()
# rejects, so the patterns spell the range out.
_INTEGER_PATTERN: re.Pattern[str] = re.compile(r"[+-]?[0-9]+")

_FLOAT_PATTERN: re.Pattern[str] = re.compile(
    r"[+-]?(?:[0-9]+\.[0-9]*|\.[0-9]+|[0-9]+)(?:[eE][+-]?[0-9]+)?"
)

# Characters that end a word inside a group. The colon is word content there.
_GROUP_STRUCTURAL_CHARS: frozenset[str] = STRUCTURAL_CHARS - {DIRECTIVE_COLON}


def parse_number_value(text: str) -> int | float | None:
    """Parse numeric literal text.

    Args:
        text: Candidate literal

    Returns:
        int for integer literals, float for literals with a decimal point or
        exponent, None if text is not a numeric literal
    """
    if _INTEGER_PATTERN.fullmatch(text):
        # Decimal is exempt from sys.get_int_max_str_digits().
        return int(Decimal(text))
    if _FLOAT_PATTERN.fullmatch(text):
        return float(text)
    return None


def classify_word(text: str, span: SourceSpan) -> Number | Word:
    """Build a Number if text is a numeric literal, else a Word."""
    value = parse_number_value(text)
    if value is None:
        return Word(text=text, span=span)
    return Number(text=text, value=value, span=span)


def is_word_char(char: str, *, in_group: bool, comment: str | None) -> bool:
    """Check whether char may continue a word.

    Args:
        char: Character under the cursor
        in_group: True when scanning inside at least one open group
        comment: Comment character, or None when comments are off
    """
    if char.isspace() or char == comment:
        return False
    structural = _GROUP_STRUCTURAL_CHARS if in_group else STRUCTURAL_CHARS
    return char not in structural


def parse_word(
    cursor: Cursor, *, in_group: bool, comment: str | None
) -> tuple[Number | Word, Cursor]:
    """Consume one word at cursor and classify it.

    The caller guarantees that cursor.current is a word character, so the
    returned item is never empty.
    """
    text, end = cursor.take_while(
        lambda char: is_word_char(char, in_group=in_group, comment=comment)
    )
    return classify_word(text, cursor.span_to(end.pos)), end
