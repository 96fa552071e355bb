"""Topic - a node in a sheet's mind map tree.

A topic owns its ordered children and keeps a non-owning reference to its
structural parent. The parent reference is only used for navigation and to
find the list a topic must be removed from when it moves; ownership is
decided by children lists and by the sheet's floating list alone.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Callable, Iterator

from mindsheet.errors import CycleRejectedError, NoParentError, NotFoundError
from mindsheet.model.style import CustomText, Position, Shape

if TYPE_CHECKING:
    from mindsheet.config import MindmapConfig
    from mindsheet.model.ids import IdAllocator

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Topic:
    """A node in the mind map.

    Topics compare by identity. Use ``Topic.new`` (or the creation methods on
    Topic and Sheet) rather than the constructor so that identifiers and
    default style come from the owning document.

    Attributes:
        id: Unique identifier allocated by the document.
        shape: Outline style.
        custom_text: Text content and font attributes.
        position: Canvas coordinates.
    """

    id: str
    shape: Shape
    custom_text: CustomText
    position: Position

    # Internal storage (prefixed)
    _ids: IdAllocator = field(repr=False)
    _config: MindmapConfig = field(repr=False)
    _children: list[Topic] = field(default_factory=list, repr=False)
    _parent: Topic | None = field(default=None, repr=False)

    @classmethod
    def new(cls, text: str, ids: IdAllocator, config: MindmapConfig) -> Topic:
        """Create a parentless topic with default style attributes."""
        shape = config.default_shape
        font = config.default_text
        x, y = config.default_position
        return cls(
            id=ids.topic_id(),
            shape=Shape(fill_color=shape.fill_color, border=shape.border, length=shape.length),
            custom_text=CustomText(
                content=text,
                font_size=font.font_size,
                font_family=font.font_family,
                font_style=font.font_style,
                text_color=font.text_color,
            ),
            position=Position(x=x, y=y),
            _ids=ids,
            _config=config,
        )

    @property
    def text(self) -> str:
        """Text content of the topic."""
        return self.custom_text.content

    @property
    def parent(self) -> Topic | None:
        """Structural parent, or None for a root or floating topic."""
        return self._parent

    @property
    def sub_topics(self) -> tuple[Topic, ...]:
        """Direct children, in order (read-only snapshot)."""
        return tuple(self._children)

    # Iterator access
    def iter_children(self) -> Iterator[Topic]:
        """Iterate over direct children."""
        yield from self._children

    def child_count(self) -> int:
        """Return number of direct children."""
        return len(self._children)

    def has_child(self, topic: Topic) -> bool:
        """Check if topic is a direct child (by identity)."""
        return any(c is topic for c in self._children)

    @property
    def is_leaf(self) -> bool:
        """True if this topic has no children."""
        return not self._children

    @property
    def depth(self) -> int:
        """Number of ancestors (0 for roots and floating topics)."""
        return sum(1 for _ in self.ancestors())

    def _child_index(self, topic_id: str) -> int | None:
        for i, child in enumerate(self._children):
            if child.id == topic_id:
                return i
        return None

    # ─────────────────────────────────────────────────────────────────────────
    # Structure mutations
    # ─────────────────────────────────────────────────────────────────────────

    def create_sub_topic(self, text: str) -> Topic:
        """Append a new child topic with default style.

        Args:
            text: Text content of the new topic.

        Returns:
            The created child.
        """
        child = Topic.new(text, self._ids, self._config)
        child._parent = self
        self._children.append(child)
        return child

    def delete_sub_topic(self, topic_id: str) -> None:
        """Remove a direct child by identifier.

        Absent identifiers are ignored, so deleting twice is the same as
        deleting once. The removed topic keeps its own subtree, and
        relationships that name it are left as they are.
        """
        index = self._child_index(topic_id)
        if index is None:
            return
        removed = self._children.pop(index)
        removed._parent = None
        logger.debug("Deleted topic %s from %s", topic_id, self.id)

    def duplicate_sub_topic(self, topic_id: str) -> Topic:
        """Append a copy of a direct child as a new sibling.

        The copy gets the source text plus the configured duplicate suffix.
        Style is reset to defaults unless ``duplicate_copies_style`` is set.
        The source's children are not copied.

        Raises:
            NotFoundError: If topic_id is not a direct child.
        """
        index = self._child_index(topic_id)
        if index is None:
            raise NotFoundError(f"Topic '{topic_id}' not found under '{self.id}'")
        source = self._children[index]

        copy = self.create_sub_topic(source.text + self._config.duplicate_suffix)
        if self._config.duplicate_copies_style:
            copy.shape = replace(source.shape)
            copy.custom_text = replace(source.custom_text, content=copy.text)
            copy.position = replace(source.position)
        return copy

    def change_parent_topic(self, new_parent: Topic) -> None:
        """Move this topic (with its subtree) under ``new_parent``.

        The topic is appended as the last child of the new parent.

        Raises:
            NoParentError: If this topic is a root or floating topic.
            CycleRejectedError: If new_parent is this topic or a descendant.
        """
        old_parent = self._parent
        if old_parent is None:
            raise NoParentError(f"Topic '{self.id}' has no parent")
        if new_parent is self or new_parent.is_descendant_of(self):
            raise CycleRejectedError(
                f"Cannot move topic '{self.id}' under its own descendant '{new_parent.id}'"
            )

        old_parent._detach_child(self)
        new_parent._children.append(self)
        self._parent = new_parent
        logger.debug("Moved topic %s from %s to %s", self.id, old_parent.id, new_parent.id)

    def _detach_child(self, child: Topic) -> None:
        """Remove child from this topic's children and clear its parent."""
        self._children = [c for c in self._children if c is not child]
        child._parent = None

    # ─────────────────────────────────────────────────────────────────────────
    # Style setters
    # ─────────────────────────────────────────────────────────────────────────

    def move_to_new_position(self, position: Position) -> None:
        self.position = position

    def update_text_content(self, text: str) -> None:
        self.custom_text.content = text

    def update_text_color(self, color: str) -> None:
        self.custom_text.text_color = color

    def update_text_style(self, style: str) -> None:
        self.custom_text.font_style = style

    def update_text_size(self, size: int) -> None:
        self.custom_text.font_size = size

    def update_font_family(self, family: str) -> None:
        self.custom_text.font_family = family

    def change_shape_color(self, color: str) -> None:
        self.shape.fill_color = color

    def change_shape_length(self, length: int) -> None:
        self.shape.length = length

    def change_shape_border(self, border: str) -> None:
        self.shape.border = border

    # ─────────────────────────────────────────────────────────────────────────
    # Traversal
    # ─────────────────────────────────────────────────────────────────────────

    def walk(self, order: str = "pre") -> Iterator[Topic]:
        """Iterate over this topic and its descendants.

        Args:
            order: Traversal order:
                - "pre": Parent first (depth-first, pre-order)
                - "post": Children first (depth-first, post-order)
                - "level": Breadth-first (level order)

        Yields:
            Topic instances in the specified order.
        """
        if order == "pre":
            yield from self._walk_preorder()
        elif order == "post":
            yield from self._walk_postorder()
        elif order == "level":
            yield from self._walk_level()
        else:
            raise ValueError(f"Unknown traversal order: {order}")

    def _walk_preorder(self) -> Iterator[Topic]:
        stack: list[Topic] = [self]
        while stack:
            topic = stack.pop()
            yield topic
            stack.extend(reversed(topic._children))

    def _walk_postorder(self) -> Iterator[Topic]:
        # (topic, children already pushed)
        stack: list[tuple[Topic, bool]] = [(self, False)]
        while stack:
            topic, expanded = stack.pop()
            if expanded:
                yield topic
                continue
            stack.append((topic, True))
            stack.extend((child, False) for child in reversed(topic._children))

    def _walk_level(self) -> Iterator[Topic]:
        queue: deque[Topic] = deque([self])
        while queue:
            topic = queue.popleft()
            yield topic
            queue.extend(topic._children)

    def ancestors(self) -> Iterator[Topic]:
        """Iterate from the parent up to the top of the tree."""
        current = self._parent
        while current is not None:
            yield current
            current = current._parent

    def is_descendant_of(self, topic: Topic) -> bool:
        """True if ``topic`` is a proper ancestor of this topic."""
        return any(a is topic for a in self.ancestors())

    def find(self, predicate: Callable[[Topic], bool]) -> Iterator[Topic]:
        """Find all topics in this subtree (self included) matching predicate."""
        for topic in self.walk():
            if predicate(topic):
                yield topic

    def find_by_id(self, topic_id: str) -> Topic | None:
        """Find a topic in this subtree by identifier.

        Returns:
            The matching Topic, or None if not found.
        """
        return next(self.find(lambda t: t.id == topic_id), None)

    def copy_subtree(self, id_map: dict[str, str]) -> Topic:
        """Deep copy this subtree with fresh identifiers and copied style.

        Args:
            id_map: Filled with old-id -> new-id for every copied topic.

        Returns:
            The parentless copy of this topic.
        """
        copy = self._copy_node(id_map)
        stack: list[tuple[Topic, Topic]] = [(self, copy)]
        while stack:
            source, target = stack.pop()
            for child in source._children:
                child_copy = child._copy_node(id_map)
                child_copy._parent = target
                target._children.append(child_copy)
                stack.append((child, child_copy))
        return copy

    def _copy_node(self, id_map: dict[str, str]) -> Topic:
        copy = Topic(
            id=self._ids.topic_id(),
            shape=replace(self.shape),
            custom_text=replace(self.custom_text),
            position=replace(self.position),
            _ids=self._ids,
            _config=self._config,
        )
        id_map[self.id] = copy.id
        return copy
