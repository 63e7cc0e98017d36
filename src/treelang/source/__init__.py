"""Source buffers: identity, registration, positions and margins.

Separate from syntax so that tooling can register and address text without
parsing it.

Python 3.13+.
"""

from .margin import normalize
from .origin import Origin
from .position import LineOffsetCache, column_offset, line_offset
from .registry import Conflict, InsertResult, Inserted, SourceInput, SourceMap

__all__ = [
    "Conflict",
    "InsertResult",
    "Inserted",
    "LineOffsetCache",
    "Origin",
    "SourceInput",
    "SourceMap",
    "column_offset",
    "line_offset",
    "normalize",
]
