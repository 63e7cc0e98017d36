"""Enumerations for treelang type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class GroupKind(StrEnum):
    """Delimiter kind of a Group item.

    StrEnum provides automatic string conversion: str(GroupKind.BRACKETS) == "brackets"
    """

    PARENTHESES = "parentheses"
    """Parenthesized group: (a b)"""

    BRACKETS = "brackets"
    """Bracketed group: [a b]"""

    BRACES = "braces"
    """Braced group: {a b}"""

    @property
    def open(self) -> str:
        """Opening delimiter character."""
        return _DELIMITERS[self][0]

    @property
    def close(self) -> str:
        """Closing delimiter character."""
        return _DELIMITERS[self][1]

    @classmethod
    def from_open(cls, char: str) -> "GroupKind":
        """Look up the kind opened by char.

        Raises:
            KeyError: If char is not an opening delimiter
        """
        return _BY_OPEN[char]


class OriginKind(StrEnum):
    """Kind of source buffer identity.

    StrEnum provides automatic string conversion: str(OriginKind.FILE) == "file"
    """

    NAMED = "named"
    """Buffer identified by a caller-chosen name."""

    FILE = "file"
    """Buffer read from a file path."""

    ANONYMOUS = "anonymous"
    """Buffer with no external identity; unique per Origin.anonymous() call."""


_DELIMITERS: dict[GroupKind, tuple[str, str]] = {
    GroupKind.PARENTHESES: ("(", ")"),
    GroupKind.BRACKETS: ("[", "]"),
    GroupKind.BRACES: ("{", "}"),
}

_BY_OPEN: dict[str, GroupKind] = {open_: kind for kind, (open_, _) in _DELIMITERS.items()}


__all__ = [
    "GroupKind",
    "OriginKind",
]
