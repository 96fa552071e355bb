"""Relations - named links between topics.

A relationship names two topics by identifier. It is independent of the
topic tree: moving or deleting a topic never touches relationships.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Relationship:
    """A named, directed link between two topic identifiers.

    Attributes:
        id: Unique identifier allocated by the document.
        from_topic_id: Identifier of the source topic.
        to_topic_id: Identifier of the target topic.
        name: Display name.
    """

    id: str
    from_topic_id: str
    to_topic_id: str
    name: str

    def rename_relationship(self, new_name: str) -> None:
        self.name = new_name

    @property
    def endpoints(self) -> tuple[str, str]:
        """(from_topic_id, to_topic_id)."""
        return (self.from_topic_id, self.to_topic_id)

    def connects(self, topic_id: str) -> bool:
        """True if either endpoint is ``topic_id``."""
        return topic_id in self.endpoints

    def __str__(self) -> str:
        return f"{self.from_topic_id} --[{self.name}]--> {self.to_topic_id}"
