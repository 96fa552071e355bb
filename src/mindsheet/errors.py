"""Error kinds raised by the mind map model.

Lookups that must produce a value raise; tolerant deletes do not. The
classes also derive from the builtin exception a caller would expect
(KeyError for missing identifiers, ValueError for rejected structure), so
``except KeyError`` keeps working for code that does not know this module.
"""

from __future__ import annotations


class MindmapError(Exception):
    """Base class for all mind map model errors."""


class NotFoundError(MindmapError, KeyError):
    """An identifier does not resolve to a live sheet, topic or relationship."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return str(self.args[0]) if self.args else ""


class NoParentError(MindmapError, ValueError):
    """A structural operation needs a parent the topic does not have."""


class CycleRejectedError(MindmapError, ValueError):
    """Reparenting would make a topic its own ancestor."""


class EmptyDocumentError(MindmapError, LookupError):
    """The document has no sheets left."""


class ConfigError(MindmapError, ValueError):
    """Configuration could not be parsed or has the wrong shape."""


__all__ = [
    "MindmapError",
    "NotFoundError",
    "NoParentError",
    "CycleRejectedError",
    "EmptyDocumentError",
    "ConfigError",
]
