"""Model module - Document, sheets, topics and relationships.

Exports:
- IdAllocator: Identifier source owned by a document
- Shape, CustomText, Position: Topic style value objects
- Topic: Node of a sheet's topic tree
- Relationship: Named link between two topic identifiers
- Sheet: Root topic, floating topics and relationships
- Document: Ordered collection of sheets
- DanglingRelationship: Relationship endpoint that no longer resolves
"""

from mindsheet.model.document import Document
from mindsheet.model.ids import IdAllocator
from mindsheet.model.integrity import (
    DanglingRelationship,
    find_dangling_relationships,
    ownership_violations,
    prune_dangling_relationships,
)
from mindsheet.model.relations import Relationship
from mindsheet.model.sheet import Sheet
from mindsheet.model.style import CustomText, Position, Shape
from mindsheet.model.topic import Topic

__all__ = [
    "IdAllocator",
    "Shape",
    "CustomText",
    "Position",
    "Topic",
    "Relationship",
    "Sheet",
    "Document",
    "DanglingRelationship",
    "find_dangling_relationships",
    "prune_dangling_relationships",
    "ownership_violations",
]
