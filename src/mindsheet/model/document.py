"""Document - the top-level container of sheets.

The document owns the identifier allocator, the configuration used to
populate new sheets, and the file manager collaborator.
"""

from __future__ import annotations

import logging
from typing import Iterator

from mindsheet.config import MindmapConfig
from mindsheet.errors import EmptyDocumentError, NotFoundError
from mindsheet.files import NullFileManager, SheetFileManager, Status
from mindsheet.model.ids import IdAllocator
from mindsheet.model.sheet import Sheet

logger = logging.getLogger(__name__)


class Document:
    """An ordered collection of sheets.

    A new document always starts with one populated sheet, "Sheet 1".
    Sheets may later be deleted down to none; ``get_first_sheet`` then
    raises EmptyDocumentError.

    Example:
        >>> doc = Document()
        >>> doc.get_first_sheet().name
        'Sheet 1'
        >>> doc.add_new_sheet().name
        'Sheet 2'
    """

    def __init__(
        self,
        config: MindmapConfig | None = None,
        file_manager: SheetFileManager | None = None,
        ids: IdAllocator | None = None,
    ) -> None:
        """Create a document with one default sheet.

        Args:
            config: Defaults for new sheets and topics (built-in defaults if None).
            file_manager: Import/export collaborator (NullFileManager if None).
            ids: Identifier allocator (a fresh one if None).
        """
        self.config = config if config is not None else MindmapConfig.default()
        self.file_manager = file_manager if file_manager is not None else NullFileManager()
        self.ids = ids if ids is not None else IdAllocator()
        self._sheets: list[Sheet] = []
        self._sheets.append(Sheet.new("Sheet 1", self.ids, self.config))

    @classmethod
    def new(
        cls,
        config: MindmapConfig | None = None,
        file_manager: SheetFileManager | None = None,
        ids: IdAllocator | None = None,
    ) -> Document:
        return cls(config=config, file_manager=file_manager, ids=ids)

    @property
    def sheets(self) -> tuple[Sheet, ...]:
        """Sheets in order (read-only snapshot)."""
        return tuple(self._sheets)

    def iter_sheets(self) -> Iterator[Sheet]:
        yield from self._sheets

    def sheet_count(self) -> int:
        return len(self._sheets)

    def find_sheet(self, sheet_id: str) -> Sheet | None:
        """Find a sheet by identifier.

        Returns:
            The matching Sheet, or None if not found.
        """
        return next((s for s in self._sheets if s.id == sheet_id), None)

    def get_first_sheet(self) -> Sheet:
        """Return the first sheet.

        Raises:
            EmptyDocumentError: If every sheet has been deleted.
        """
        if not self._sheets:
            raise EmptyDocumentError("Document has no sheets")
        return self._sheets[0]

    def add_new_sheet(self) -> Sheet:
        """Append a default-populated sheet named after the current count.

        With n sheets present the new sheet is "Sheet {n+1}"; names can
        repeat after deletions.
        """
        sheet = Sheet.new(f"Sheet {len(self._sheets) + 1}", self.ids, self.config)
        self._sheets.append(sheet)
        logger.debug("Added sheet %s (%s)", sheet.id, sheet.name)
        return sheet

    def delete_sheet(self, sheet_id: str) -> None:
        """Remove a sheet by identifier. No-op if absent."""
        remaining = [s for s in self._sheets if s.id != sheet_id]
        if len(remaining) != len(self._sheets):
            logger.debug("Deleted sheet %s", sheet_id)
        self._sheets = remaining

    def duplicate_sheet(self, sheet_id: str) -> Sheet:
        """Append a deep copy of a sheet.

        Returns:
            The copy, named "<name> - Copy".

        Raises:
            NotFoundError: If sheet_id does not resolve.
        """
        sheet = self.find_sheet(sheet_id)
        if sheet is None:
            raise NotFoundError(f"Sheet '{sheet_id}' not found")
        copy = sheet.clone()
        self._sheets.append(copy)
        return copy

    # ─────────────────────────────────────────────────────────────────────────
    # File manager passthrough
    # ─────────────────────────────────────────────────────────────────────────

    def import_sheet(self, source: str) -> Status:
        return self.file_manager.import_sheet(source)

    def export_sheet(self, sheet_id: str, fmt: str) -> Status:
        return self.file_manager.export_sheet(sheet_id, fmt)

    def save_sheet_as(self, sheet_id: str, destination: str) -> Status:
        return self.file_manager.save_sheet_as(sheet_id, destination)

    def __repr__(self) -> str:
        return f"Document(sheets={[s.name for s in self._sheets]!r})"
