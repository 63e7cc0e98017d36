"""Indent unit: how much leading whitespace makes one nesting level."""

from dataclasses import dataclass

from treelang.diagnostics import ErrorTemplate, InvalidIndentUnitError

__all__ = ["Indent"]

_UNIT_CHARS: frozenset[str] = frozenset((" ", "\t"))


@dataclass(frozen=True, slots=True)
class Indent:
    """Indentation setting for parsing.

    Use ``Indent.spaces(n)`` or ``Indent.tabs()`` rather than the
    constructor.

    Attributes:
        char: Unit character (space or tab)
        width: Unit characters per nesting level (always > 0)

    Example:
        >>> Indent.spaces(2).measure("    ")
        2
        >>> Indent.spaces(2).measure("   ") is None
        True
    """

    char: str
    width: int

    def __post_init__(self) -> None:
        if self.char not in _UNIT_CHARS:
            msg = f"Indent character must be a space or a tab, got {self.char!r}"
            raise ValueError(msg)
        if not isinstance(self.width, int) or isinstance(self.width, bool):
            msg = f"Indent width must be an int, got {type(self.width).__name__}"
            raise TypeError(msg)
        if self.width <= 0:
            raise InvalidIndentUnitError(ErrorTemplate.invalid_indent_unit(self.width))

    @classmethod
    def spaces(cls, count: int) -> "Indent":
        """Indentation by ``count`` spaces per level.

        Raises:
            InvalidIndentUnitError: If count is zero or negative
        """
        return cls(" ", count)

    @classmethod
    def tabs(cls) -> "Indent":
        """Indentation by a single tab per level."""
        return cls("\t", 1)

    @property
    def description(self) -> str:
        """Human-readable unit, used in diagnostics ("2 spaces", "1 tab")."""
        noun = "space" if self.char == " " else "tab"
        return f"{self.width} {noun}{'s' if self.width != 1 else ''}"

    def measure(self, leading: str) -> int | None:
        """Nesting depth for a line's leading whitespace.

        Args:
            leading: The whitespace in front of the line's content

        Returns:
            Number of whole units, or None if leading contains any other
            whitespace character or a partial unit
        """
        count = len(leading)
        if leading.count(self.char) != count or count % self.width:
            return None
        return count // self.width
