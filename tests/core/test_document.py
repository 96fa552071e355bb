"""Tests for Document sheet lifecycle and file manager passthrough."""

import pytest

from mindsheet.errors import EmptyDocumentError, NotFoundError
from mindsheet.files import NullFileManager, Status
from mindsheet.model import Document, ownership_violations
from mindsheet.model.ids import IdAllocator

from tests.core.model_test_helpers import RecordingFileManager, make_document


class TestDocumentConstruction:
    """A new document has exactly one populated sheet."""

    def test_sheet_creation(self, document):
        assert document.sheet_count() == 1
        assert len(document.sheets) == 1

    def test_first_sheet_is_populated(self, document):
        sheet = document.get_first_sheet()

        assert sheet.name == "Sheet 1"
        assert sheet.root_topic.text == "Central Topic"
        assert sheet.root_topic.child_count() == 4
        assert sheet.floating_topics == ()
        assert sheet.relationships == ()

    def test_new_classmethod(self):
        doc = Document.new()
        assert doc.get_first_sheet().name == "Sheet 1"

    def test_default_collaborators(self):
        doc = Document()
        assert isinstance(doc.file_manager, NullFileManager)
        assert doc.config.root_topic_name == "Central Topic"

    def test_injected_allocator_is_used(self):
        ids = IdAllocator(start=500)
        doc = Document(ids=ids)

        assert doc.ids is ids
        assert doc.get_first_sheet().id == "sheet-500"

    def test_documents_do_not_share_identifiers_state(self):
        first = Document()
        second = Document()
        assert first.get_first_sheet().id == second.get_first_sheet().id

    def test_fresh_document_is_sound(self, document):
        assert ownership_violations(document) == []


class TestSheetLifecycle:
    """Tests for add, delete, duplicate and first-sheet access."""

    def test_add_new_sheet_numbering(self, document):
        second = document.add_new_sheet()
        third = document.add_new_sheet()

        assert second.name == "Sheet 2"
        assert third.name == "Sheet 3"
        assert document.sheet_count() == 3

    def test_new_sheet_is_populated(self, document):
        sheet = document.add_new_sheet()
        assert sheet.root_topic.text == "Central Topic"
        assert sheet.root_topic.child_count() == 4

    def test_numbering_follows_current_count(self, document):
        """Names come from the sheet count, not a separate counter."""
        second = document.add_new_sheet()
        document.delete_sheet(second.id)
        again = document.add_new_sheet()

        assert again.name == "Sheet 2"
        assert again.id != second.id

    def test_delete_sheet(self, document):
        document.delete_sheet(document.get_first_sheet().id)
        assert document.sheet_count() == 0

    def test_delete_unknown_sheet_is_noop(self, document):
        document.delete_sheet("sheet-9999")
        assert document.sheet_count() == 1

    def test_get_first_sheet_on_empty_document(self, document):
        document.delete_sheet(document.get_first_sheet().id)

        with pytest.raises(EmptyDocumentError, match="no sheets"):
            document.get_first_sheet()

    def test_empty_document_error_is_a_lookup_error(self, document):
        document.delete_sheet(document.get_first_sheet().id)
        with pytest.raises(LookupError):
            document.get_first_sheet()

    def test_add_after_emptying(self, document):
        document.delete_sheet(document.get_first_sheet().id)
        sheet = document.add_new_sheet()

        assert sheet.name == "Sheet 1"
        assert document.get_first_sheet() is sheet

    def test_duplicate_sheet_name(self, document):
        sheet = document.add_new_sheet()
        copy = document.duplicate_sheet(sheet.id)

        assert copy.name == "Sheet 2 - Copy"
        assert document.sheets[-1] is copy
        assert document.sheet_count() == 3

    def test_duplicate_unknown_sheet(self, document):
        with pytest.raises(NotFoundError, match="Sheet 'sheet-9999' not found"):
            document.duplicate_sheet("sheet-9999")
        assert document.sheet_count() == 1

    def test_find_sheet(self, document):
        sheet = document.add_new_sheet()
        assert document.find_sheet(sheet.id) is sheet
        assert document.find_sheet("sheet-9999") is None

    def test_iter_sheets_in_order(self, document):
        document.add_new_sheet()
        document.add_new_sheet()
        assert [s.name for s in document.iter_sheets()] == ["Sheet 1", "Sheet 2", "Sheet 3"]

    def test_sheets_is_a_snapshot(self, document):
        snapshot = document.sheets
        document.add_new_sheet()
        assert len(snapshot) == 1


class TestFileManagerPassthrough:
    """The document forwards file operations and returns the status unchanged."""

    def test_null_file_manager_succeeds(self, document):
        sheet_id = document.get_first_sheet().id

        assert document.import_sheet("file.xmind") is Status.SUCCESS
        assert document.export_sheet(sheet_id, "pdf") is Status.SUCCESS
        assert document.save_sheet_as(sheet_id, "file.xmind") is Status.SUCCESS

    def test_calls_are_forwarded(self):
        manager = RecordingFileManager()
        doc = Document(file_manager=manager)
        sheet_id = doc.get_first_sheet().id

        doc.import_sheet("in.xmind")
        doc.export_sheet(sheet_id, "png")
        doc.save_sheet_as(sheet_id, "out.xmind")

        assert manager.calls == [
            ("import_sheet", "in.xmind"),
            ("export_sheet", sheet_id, "png"),
            ("save_sheet_as", sheet_id, "out.xmind"),
        ]

    def test_failure_is_forwarded(self):
        doc = Document(file_manager=RecordingFileManager(Status.FAILURE))
        sheet_id = doc.get_first_sheet().id

        assert doc.export_sheet(sheet_id, "pdf") is Status.FAILURE
        assert doc.save_sheet_as(sheet_id, "out.xmind") is Status.FAILURE
        assert doc.import_sheet("broken.xmind") is Status.FAILURE

    def test_file_operations_do_not_touch_model(self):
        doc = make_document()
        doc.import_sheet("file.xmind")
        assert doc.sheet_count() == 1
