"""Margin normalization for embedded multi-line literals.

Lets example snippets be indented along with the host code without the
incidental indentation becoming part of the parsed structure::

    source = normalize('''
        |server:
        |  port 8080
    ''')
    assert source == "server:\\n  port 8080"
"""

from treelang.constants import DEFAULT_MARGIN_MARKER
from treelang.diagnostics import AmbiguousMarginError, ErrorTemplate
from treelang.source.position import line_span

__all__ = ["normalize"]


def normalize(text: str, marker: str = DEFAULT_MARGIN_MARKER) -> str:
    """Strip the margin up to and including ``marker`` from every line.

    A single blank first line and a single blank (whitespace-only) last line
    are dropped. Blank lines in between become empty lines. Text in which no
    line starts with the marker is returned unchanged, so normalizing
    already-normalized text is a no-op.

    Args:
        text: Literal text whose lines start with optional whitespace and marker
        marker: Single non-whitespace margin character

    Returns:
        Text with margins removed, lines joined with ``\\n``

    Raises:
        AmbiguousMarginError: If a non-blank line lacks the marker after its
            leading whitespace
        ValueError: If marker is not a single non-whitespace character
    """
    if len(marker) != 1 or marker.isspace():
        msg = f"Margin marker must be a single non-whitespace character, got {marker!r}"
        raise ValueError(msg)

    lines = text.split("\n")
    if not any(line.lstrip().startswith(marker) for line in lines):
        return text

    first, last = 0, len(lines)
    if last - first > 1 and not lines[first].strip():
        first += 1
    if last - first > 1 and not lines[last - 1].strip():
        last -= 1

    line_start = sum(len(line) + 1 for line in lines[:first])
    result: list[str] = []
    for number in range(first, last):
        line = lines[number]
        content = line.lstrip()
        if not content:
            result.append("")
        elif content.startswith(marker):
            result.append(content[len(marker) :])
        else:
            start = line_start + len(line) - len(content)
            span = line_span(None, start, start + 1, line=number + 1, line_start=line_start)
            raise AmbiguousMarginError(ErrorTemplate.ambiguous_margin(span, marker))
        line_start += len(line) + 1

    return "\n".join(result)
