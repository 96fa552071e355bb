"""
mindsheet - In-memory document model for a mind-mapping editor

A document holds sheets; each sheet holds a topic tree, floating topics
and named relationships between topics.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("mindsheet")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"  # Not installed
__license__ = "MIT"

from mindsheet.config import MindmapConfig, load_config
from mindsheet.errors import (
    CycleRejectedError,
    EmptyDocumentError,
    MindmapError,
    NoParentError,
    NotFoundError,
)
from mindsheet.files import NullFileManager, SheetFileManager, Status
from mindsheet.model import Document, Position, Relationship, Sheet, Topic

__all__ = [
    "__version__",
    "Document",
    "Sheet",
    "Topic",
    "Relationship",
    "Position",
    "MindmapConfig",
    "load_config",
    "Status",
    "SheetFileManager",
    "NullFileManager",
    "MindmapError",
    "NotFoundError",
    "NoParentError",
    "CycleRejectedError",
    "EmptyDocumentError",
]
