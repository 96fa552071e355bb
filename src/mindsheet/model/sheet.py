"""Sheet - one mind map canvas.

A sheet owns exactly one root topic, an ordered list of floating topics and
an ordered list of relationships. It is the registry that resolves topic and
relationship identifiers for the operations that work across the tree.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterator

from mindsheet.errors import NotFoundError
from mindsheet.model.relations import Relationship
from mindsheet.model.topic import Topic

if TYPE_CHECKING:
    from mindsheet.config import MindmapConfig
    from mindsheet.model.ids import IdAllocator

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Sheet:
    """Container for one topic tree, its floating topics and relationships.

    Attributes:
        id: Unique identifier allocated by the document.
        name: Display name (e.g. "Sheet 1").
        root_topic: The root of the topic tree; never absent.
        background_color: Canvas background.
    """

    id: str
    name: str
    root_topic: Topic
    background_color: str

    _ids: IdAllocator = field(repr=False)
    _config: MindmapConfig = field(repr=False)
    _floating_topics: list[Topic] = field(default_factory=list, repr=False)
    _relationships: list[Relationship] = field(default_factory=list, repr=False)

    @classmethod
    def new(cls, name: str, ids: IdAllocator, config: MindmapConfig) -> Sheet:
        """Create a sheet populated with the default root and main topics."""
        return cls(
            id=ids.sheet_id(),
            name=name,
            root_topic=_default_root(ids, config),
            background_color=config.sheet_background_color,
            _ids=ids,
            _config=config,
        )

    @property
    def floating_topics(self) -> tuple[Topic, ...]:
        """Floating topics, in creation order (read-only snapshot)."""
        return tuple(self._floating_topics)

    @property
    def relationships(self) -> tuple[Relationship, ...]:
        """Relationships, in creation order (read-only snapshot)."""
        return tuple(self._relationships)

    def create_root_topic_default(self) -> Topic:
        """Replace the root with a freshly populated default root.

        The root gets the configured root name and one child per configured
        main topic name, in order.

        Returns:
            The new root topic.
        """
        self.root_topic = _default_root(self._ids, self._config)
        return self.root_topic

    def rename_sheet(self, name: str) -> None:
        self.name = name

    def change_background_color(self, color: str) -> None:
        self.background_color = color

    # ─────────────────────────────────────────────────────────────────────────
    # Topic registry
    # ─────────────────────────────────────────────────────────────────────────

    def iter_topics(self, order: str = "pre") -> Iterator[Topic]:
        """Iterate every topic on the sheet: root subtree, then floating subtrees."""
        yield from self.root_topic.walk(order)
        for floating in self._floating_topics:
            yield from floating.walk(order)

    def find_topic(self, topic_id: str) -> Topic | None:
        """Find a topic anywhere on the sheet.

        Returns:
            The matching Topic, or None if not found.
        """
        return next((t for t in self.iter_topics() if t.id == topic_id), None)

    def has_topic(self, topic_id: str) -> bool:
        return self.find_topic(topic_id) is not None

    def topic_count(self) -> int:
        return sum(1 for _ in self.iter_topics())

    def create_floating_topic(self, name: str) -> Topic:
        """Create a parentless topic and register it as floating."""
        topic = Topic.new(name, self._ids, self._config)
        self._floating_topics.append(topic)
        return topic

    def delete_floating_topic(self, topic_id: str) -> None:
        """Remove a floating topic by identifier. No-op if absent."""
        self._floating_topics = [t for t in self._floating_topics if t.id != topic_id]

    def move_topic_to_floating_topic(self, topic_id: str) -> Topic:
        """Turn a direct child of the root into a floating topic.

        Only the root's direct children are considered. The topic keeps its
        subtree and is appended to the floating list.

        Returns:
            The moved topic.

        Raises:
            NotFoundError: If topic_id is not a direct child of the root.
        """
        topic = next((c for c in self.root_topic.iter_children() if c.id == topic_id), None)
        if topic is None:
            raise NotFoundError(f"Topic '{topic_id}' is not a direct child of the root")

        self.root_topic._detach_child(topic)
        self._floating_topics.append(topic)
        logger.debug("Topic %s is now floating on sheet %s", topic_id, self.id)
        return topic

    # ─────────────────────────────────────────────────────────────────────────
    # Relationships
    # ─────────────────────────────────────────────────────────────────────────

    def create_relationship(self, from_topic_id: str, to_topic_id: str) -> str:
        """Link two topics by identifier.

        Endpoints are not checked against the sheet; see
        ``mindsheet.model.integrity`` for detecting dangling links.

        Returns:
            The new relationship's identifier.
        """
        relationship = Relationship(
            id=self._ids.relationship_id(),
            from_topic_id=from_topic_id,
            to_topic_id=to_topic_id,
            name=self._config.default_relationship_name,
        )
        self._relationships.append(relationship)
        return relationship.id

    def delete_relationship(self, relationship_id: str) -> None:
        """Remove a relationship by identifier. No-op if absent."""
        self._relationships = [r for r in self._relationships if r.id != relationship_id]

    def find_relationship(self, relationship_id: str) -> Relationship | None:
        return next((r for r in self._relationships if r.id == relationship_id), None)

    def relationships_for(self, topic_id: str) -> Iterator[Relationship]:
        """Iterate relationships with ``topic_id`` at either end."""
        for relationship in self._relationships:
            if relationship.connects(topic_id):
                yield relationship

    # ─────────────────────────────────────────────────────────────────────────
    # Cloning
    # ─────────────────────────────────────────────────────────────────────────

    def clone(self) -> Sheet:
        """Create an independent deep copy of this sheet.

        Every topic and relationship in the copy gets a fresh identifier.
        Relationship endpoints are rewritten to the copied topics; endpoints
        that did not resolve on this sheet are kept as they are.

        Returns:
            A new Sheet named "<name> - Copy".
        """
        id_map: dict[str, str] = {}
        root = self.root_topic.copy_subtree(id_map)
        floating = [t.copy_subtree(id_map) for t in self._floating_topics]
        relationships = [
            Relationship(
                id=self._ids.relationship_id(),
                from_topic_id=id_map.get(r.from_topic_id, r.from_topic_id),
                to_topic_id=id_map.get(r.to_topic_id, r.to_topic_id),
                name=r.name,
            )
            for r in self._relationships
        ]
        copy = Sheet(
            id=self._ids.sheet_id(),
            name=f"{self.name} - Copy",
            root_topic=root,
            background_color=self.background_color,
            _ids=self._ids,
            _config=self._config,
            _floating_topics=floating,
            _relationships=relationships,
        )
        logger.debug("Cloned sheet %s as %s (%d topics)", self.id, copy.id, len(id_map))
        return copy


def _default_root(ids: IdAllocator, config: MindmapConfig) -> Topic:
    root = Topic.new(config.root_topic_name, ids, config)
    for name in config.main_topic_names:
        root.create_sub_topic(name)
    return root
