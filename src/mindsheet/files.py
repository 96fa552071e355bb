"""Sheet file manager boundary.

Import, export and "save as" are delegated to a collaborator that reports
only success or failure. The model never inspects file contents.
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol, runtime_checkable


class Status(Enum):
    """Outcome reported by a file manager."""

    SUCCESS = "success"
    FAILURE = "failure"

    def __bool__(self) -> bool:
        return self is Status.SUCCESS


@runtime_checkable
class SheetFileManager(Protocol):
    """Collaborator that moves sheets in and out of files."""

    def import_sheet(self, source: str) -> Status: ...

    def export_sheet(self, sheet_id: str, fmt: str) -> Status: ...

    def save_sheet_as(self, sheet_id: str, destination: str) -> Status: ...


class NullFileManager:
    """File manager that accepts every request without touching files."""

    def import_sheet(self, source: str) -> Status:
        return Status.SUCCESS

    def export_sheet(self, sheet_id: str, fmt: str) -> Status:
        return Status.SUCCESS

    def save_sheet_as(self, sheet_id: str, destination: str) -> Status:
        return Status.SUCCESS


__all__ = ["Status", "SheetFileManager", "NullFileManager"]
