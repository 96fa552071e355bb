"""Pytest fixtures for core tests."""

import pytest


@pytest.fixture
def document():
    """Fresh document with default configuration."""
    from tests.core.model_test_helpers import make_document

    return make_document()


@pytest.fixture
def sheet(document):
    """The default sheet: Central Topic with four main topics."""
    return document.get_first_sheet()


@pytest.fixture
def root(sheet):
    """Root topic of the default sheet."""
    return sheet.root_topic


@pytest.fixture
def nested_sheet(sheet):
    """Default sheet with a second and third level under the first main topic.

    Central Topic
      Main Topic 1
        Child A
          Grandchild
        Child B
      Main Topic 2
      Main Topic 3
      Main Topic 4
    """
    first = sheet.root_topic.sub_topics[0]
    child_a = first.create_sub_topic("Child A")
    first.create_sub_topic("Child B")
    child_a.create_sub_topic("Grandchild")
    return sheet
