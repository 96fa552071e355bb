"""
Tests for the top-level mindsheet package.
"""


class TestPackageExports:
    """The package root re-exports the public model API."""

    def test_version(self):
        import mindsheet

        assert isinstance(mindsheet.__version__, str)
        assert mindsheet.__version__

    def test_public_names(self):
        import mindsheet

        for name in mindsheet.__all__:
            assert hasattr(mindsheet, name), name

    def test_error_hierarchy(self):
        from mindsheet import (
            CycleRejectedError,
            EmptyDocumentError,
            MindmapError,
            NoParentError,
            NotFoundError,
        )

        for error in (CycleRejectedError, EmptyDocumentError, NoParentError, NotFoundError):
            assert issubclass(error, MindmapError)
        assert issubclass(NotFoundError, KeyError)
        assert issubclass(NoParentError, ValueError)
        assert issubclass(CycleRejectedError, ValueError)
        assert issubclass(EmptyDocumentError, LookupError)

    def test_not_found_message_is_unquoted(self):
        from mindsheet import NotFoundError

        assert str(NotFoundError("Sheet 'sheet-1' not found")) == "Sheet 'sheet-1' not found"

    def test_quick_start(self):
        from mindsheet import Document

        doc = Document()
        sheet = doc.get_first_sheet()
        a, b = sheet.root_topic.sub_topics[:2]
        sheet.create_relationship(a.id, b.id)
        a.change_parent_topic(b)
        copy = doc.duplicate_sheet(sheet.id)

        assert copy.root_topic.sub_topics[0].sub_topics[0].text == "Main Topic 1"
