"""Style value objects attached to every topic.

- Shape: fill color, border and length of the topic outline
- CustomText: text content and font attributes
- Position: canvas coordinates
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Shape:
    """Outline of a topic."""

    fill_color: str
    border: str
    length: int


@dataclass
class CustomText:
    """Text content of a topic and how it is drawn.

    ``content`` is the topic's text; Topic.text reads and writes it.
    """

    content: str
    font_size: int
    font_family: str
    font_style: str
    text_color: str


@dataclass
class Position:
    """Canvas coordinates of a topic."""

    x: float = 0
    y: float = 0

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"
