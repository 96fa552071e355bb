"""Test helpers for black-box model testing.

Factories and string conversion helpers that let tests assert on the
observable shape of a sheet rather than on internal state.
"""

from __future__ import annotations

from typing import Any

from mindsheet.config import MindmapConfig
from mindsheet.files import Status
from mindsheet.model import Document, Sheet, Topic
from mindsheet.model.ids import IdAllocator


# === Factories ===


def make_config(**overrides: Any) -> MindmapConfig:
    """Build a config from nested override dicts merged over the defaults."""
    return MindmapConfig.from_dict(overrides)


def make_document(**overrides: Any) -> Document:
    """Fresh document with its own allocator and optional config overrides."""
    return Document(config=make_config(**overrides), ids=IdAllocator())


def make_topic(text: str = "Topic") -> Topic:
    """Parentless topic with default style."""
    return Topic.new(text, IdAllocator(), MindmapConfig.default())


# === String helpers ===


def texts(topics) -> list[str]:
    """Texts of topics, in order."""
    return [t.text for t in topics]


def children_string(topic: Topic) -> str:
    """Comma-separated texts of direct children."""
    return ", ".join(texts(topic.iter_children()))


def tree_string(topic: Topic) -> str:
    """Indented outline of a subtree, one topic per line."""
    return "\n".join("  " * (t.depth - topic.depth) + t.text for t in topic.walk())


def floating_string(sheet: Sheet) -> str:
    return ", ".join(texts(sheet.floating_topics))


# === Collaborators ===


class RecordingFileManager:
    """File manager that records calls and answers with a fixed status."""

    def __init__(self, status: Status = Status.SUCCESS) -> None:
        self.status = status
        self.calls: list[tuple] = []

    def import_sheet(self, source: str) -> Status:
        self.calls.append(("import_sheet", source))
        return self.status

    def export_sheet(self, sheet_id: str, fmt: str) -> Status:
        self.calls.append(("export_sheet", sheet_id, fmt))
        return self.status

    def save_sheet_as(self, sheet_id: str, destination: str) -> Status:
        self.calls.append(("save_sheet_as", sheet_id, destination))
        return self.status
