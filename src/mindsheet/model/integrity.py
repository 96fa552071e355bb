"""Integrity checks layered on top of the model.

The model does not cascade topic deletion into relationships, and nothing
here runs implicitly. Embedders call these helpers when they want to detect
(or prune) dangling relationships, or to assert that a document's ownership
structure is sound.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mindsheet.model.document import Document
    from mindsheet.model.sheet import Sheet


@dataclass(frozen=True)
class DanglingRelationship:
    """A relationship endpoint that names no topic on its sheet.

    Attributes:
        relationship_id: ID of the relationship holding the reference.
        topic_id: Topic ID that was referenced but doesn't exist.
        endpoint: Which end is missing ("from" or "to").
    """

    relationship_id: str
    topic_id: str
    endpoint: str

    def __str__(self) -> str:
        """Human-readable representation."""
        return f"{self.relationship_id} --[{self.endpoint}]--> {self.topic_id} (missing)"


def find_dangling_relationships(sheet: Sheet) -> list[DanglingRelationship]:
    """List every relationship endpoint that does not resolve on the sheet."""
    live = {t.id for t in sheet.iter_topics()}
    dangling = []
    for relationship in sheet.relationships:
        if relationship.from_topic_id not in live:
            dangling.append(
                DanglingRelationship(relationship.id, relationship.from_topic_id, "from")
            )
        if relationship.to_topic_id not in live:
            dangling.append(DanglingRelationship(relationship.id, relationship.to_topic_id, "to"))
    return dangling


def prune_dangling_relationships(sheet: Sheet) -> list[str]:
    """Delete relationships with at least one missing endpoint.

    Returns:
        IDs of the deleted relationships, in sheet order.
    """
    doomed = list(dict.fromkeys(d.relationship_id for d in find_dangling_relationships(sheet)))
    for relationship_id in doomed:
        sheet.delete_relationship(relationship_id)
    return doomed


def ownership_violations(document: Document) -> list[str]:
    """Check the ownership structure and identifier uniqueness of a document.

    Verified:
    - every topic reachable from a sheet appears in exactly one place
      (a root slot, a floating list, or one parent's children);
    - each child's parent reference points at the topic listing it;
    - roots and floating topics have no parent;
    - no two topics, sheets or relationships share an identifier.

    Returns:
        Human-readable violations; an empty list means the document is sound.
    """
    problems: list[str] = []
    placements: Counter[int] = Counter()
    topics_by_key = {}
    ids: Counter[str] = Counter()

    for sheet in document.iter_sheets():
        ids[sheet.id] += 1
        for relationship in sheet.relationships:
            ids[relationship.id] += 1

        tops = [("root", sheet.root_topic)] + [("floating", t) for t in sheet.floating_topics]
        for slot, top in tops:
            placements[id(top)] += 1
            topics_by_key[id(top)] = top
            if top.parent is not None:
                problems.append(f"{slot} topic '{top.id}' on sheet '{sheet.id}' has a parent")
            for topic in top.walk():
                for child in topic.iter_children():
                    placements[id(child)] += 1
                    topics_by_key[id(child)] = child
                    if child.parent is not topic:
                        problems.append(
                            f"topic '{child.id}' is listed under '{topic.id}' "
                            f"but its parent is {child.parent.id if child.parent else None!r}"
                        )

    for key, count in placements.items():
        if count > 1:
            problems.append(f"topic '{topics_by_key[key].id}' is owned {count} times")

    for topic in topics_by_key.values():
        ids[topic.id] += 1
    for identifier, count in ids.items():
        if count > 1:
            problems.append(f"identifier '{identifier}' is used {count} times")

    return problems
