"""Source registry: the single owner of parsed text buffers.

A SourceMap stores each buffer under a stable, insertion-order index. Spans
produced by the parser refer to buffers by that index only, so one map can
serve diagnostics for many independent inputs.

Thread Safety:
    insert() and add() serialize the check-origin-then-store step with a
    lock, so the same origin can never be stored twice. Stored text is never
    mutated, so input() and the position helpers read without locking.

Python 3.13+.
"""

import logging
import threading
from collections.abc import Iterator
from dataclasses import dataclass

from treelang.diagnostics import (
    DuplicateOriginError,
    ErrorTemplate,
    SourceLookupError,
    SourceSpan,
)
from treelang.source.origin import Origin
from treelang.source.position import LineOffsetCache, line_bounds

__all__ = ["Conflict", "InsertResult", "Inserted", "SourceInput", "SourceMap"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SourceInput:
    """Read-only view of one registered buffer.

    This is what the parser consumes: the text plus the index that every
    produced span will carry.
    """

    index: int
    origin: Origin
    text: str

    def __len__(self) -> int:
        return len(self.text)


@dataclass(frozen=True, slots=True)
class Inserted:
    """Successful registration."""

    index: int

    @property
    def inserted(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Conflict:
    """Rejected registration: the origin already owns ``index``."""

    index: int
    origin: Origin

    @property
    def inserted(self) -> bool:
        return False

    def into_error(self) -> DuplicateOriginError:
        """Error for callers that treat re-registration as fatal."""
        diagnostic = ErrorTemplate.duplicate_origin(str(self.origin), self.index)
        return DuplicateOriginError(diagnostic, existing_index=self.index)


type InsertResult = Inserted | Conflict


class SourceMap:
    """Mapping from Origin to registered text with stable indices.

    Example:
        >>> source_map = SourceMap()
        >>> result = source_map.insert(Origin.named("config"), "server:\\n  port 80")
        >>> result
        Inserted(index=0)
        >>> source_map.insert(Origin.named("config"), "other text")
        Conflict(index=0, origin=Origin(kind=<OriginKind.NAMED: 'named'>, name='config', serial=0))
        >>> source_map.input(0).text
        'server:\\n  port 80'
    """

    __slots__ = ("_by_origin", "_entries", "_lock")

    def __init__(self) -> None:
        self._entries: list[SourceInput] = []
        self._by_origin: dict[Origin, int] = {}
        self._lock = threading.Lock()

    def insert(self, origin: Origin, text: str, /) -> InsertResult:
        """Register text under origin.

        Args:
            origin: Identity of the buffer
            text: Buffer content, stored verbatim

        Returns:
            Inserted with the new index, or Conflict naming the index that
            already owns origin (the map is left unchanged)

        Raises:
            TypeError: If origin is not an Origin or text is not a str
        """
        if not isinstance(origin, Origin):
            msg = f"origin must be an Origin, got {type(origin).__name__}"
            raise TypeError(msg)
        if not isinstance(text, str):
            msg = f"text must be a str, got {type(text).__name__}"
            raise TypeError(msg)

        with self._lock:
            existing = self._by_origin.get(origin)
            if existing is not None:
                logger.debug("Origin %s already registered at index %d", origin, existing)
                return Conflict(existing, origin)
            index = len(self._entries)
            self._entries.append(SourceInput(index, origin, text))
            self._by_origin[origin] = index

        logger.debug("Registered %s at index %d (%d chars)", origin, index, len(text))
        return Inserted(index)

    def add(self, origin: Origin, text: str, /) -> int:
        """Register text under origin, raising on conflict.

        Returns:
            The new index

        Raises:
            DuplicateOriginError: If origin is already registered
        """
        match self.insert(origin, text):
            case Inserted(index=index):
                return index
            case Conflict() as conflict:
                raise conflict.into_error()

    def input(self, index: int) -> SourceInput:
        """View of the buffer registered at index.

        Raises:
            TypeError: If index is not an int (bools are rejected)
            SourceLookupError: If no buffer was registered at index
        """
        if not isinstance(index, int) or isinstance(index, bool):
            msg = f"Source index must be an int, got {type(index).__name__}"
            raise TypeError(msg)
        entries = self._entries
        if not 0 <= index < len(entries):
            raise SourceLookupError(ErrorTemplate.source_not_found(index, len(entries)))
        return entries[index]

    def index_of(self, origin: Origin) -> int | None:
        """Index owning origin, or None if it was never registered."""
        return self._by_origin.get(origin)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[SourceInput]:
        return iter(tuple(self._entries))

    def __contains__(self, origin: object) -> bool:
        return origin in self._by_origin

    # ------------------------------------------------------------------
    # Position helpers
    # ------------------------------------------------------------------

    def span(self, index: int, start: int, end: int) -> SourceSpan:
        """Build a span for an offset range of the buffer at index."""
        text = self.input(index).text
        return LineOffsetCache(text).span(start, end, source=index)

    def span_text(self, span: SourceSpan) -> str:
        """Text covered by span."""
        return self._text_for(span)[span.start : span.end]

    def line_text(self, span: SourceSpan) -> str:
        """Full text of the line on which span starts."""
        text = self._text_for(span)
        start, end = line_bounds(text, span.start)
        return text[start:end]

    def column_of(self, span: SourceSpan) -> int:
        """0-based character offset of span's start within its line."""
        return span.column - 1

    def origin_of(self, span: SourceSpan) -> Origin | None:
        """Origin of the buffer span points into."""
        if span.source is None:
            return None
        return self.input(span.source).origin

    def _text_for(self, span: SourceSpan) -> str:
        if span.source is None:
            msg = "Span does not refer to a registered source"
            raise SourceLookupError(msg)
        return self.input(span.source).text
