"""Source buffer identity.

An Origin names where a buffer came from. Origins are plain values: two
origins built from the same name (or path) are equal and hash alike, which
is what lets a SourceMap detect re-registration of the same buffer.
"""

import itertools
import os
from dataclasses import dataclass

from treelang.enums import OriginKind

__all__ = ["Origin"]

# Serials for anonymous origins. itertools.count.__next__ is atomic under
# the GIL, so concurrent Origin.anonymous() calls never share a serial.
_anonymous_serials = itertools.count(1)


@dataclass(frozen=True, slots=True)
class Origin:
    """Identity of one source buffer.

    Use the constructors rather than building instances directly.

    Attributes:
        kind: Named, file-associated, or anonymous
        name: Caller-chosen name or file path (empty for anonymous)
        serial: Process-unique number for anonymous origins (0 otherwise)

    Example:
        >>> Origin.named("config") == Origin.named("config")
        True
        >>> Origin.anonymous() == Origin.anonymous()
        False
    """

    kind: OriginKind
    name: str = ""
    serial: int = 0

    @classmethod
    def named(cls, name: str) -> "Origin":
        """Origin identified by a caller-chosen name."""
        if not name:
            msg = "Origin name must be a non-empty string"
            raise ValueError(msg)
        return cls(OriginKind.NAMED, name)

    @classmethod
    def file(cls, path: str | os.PathLike[str]) -> "Origin":
        """Origin identified by a file path.

        The path is stored as given (no resolution against the working
        directory), so ``a/b.tree`` and ``./a/b.tree`` are distinct origins.
        """
        name = os.fspath(path)
        if not name:
            msg = "Origin path must be non-empty"
            raise ValueError(msg)
        return cls(OriginKind.FILE, name)

    @classmethod
    def anonymous(cls) -> "Origin":
        """Fresh origin unequal to every other anonymous origin."""
        return cls(OriginKind.ANONYMOUS, serial=next(_anonymous_serials))

    @property
    def is_anonymous(self) -> bool:
        return self.kind is OriginKind.ANONYMOUS

    def __str__(self) -> str:
        match self.kind:
            case OriginKind.NAMED | OriginKind.FILE:
                return self.name
            case OriginKind.ANONYMOUS:
                return f"<anonymous-{self.serial}>"
