"""Typed view of the configuration consumed by the model.

The model never reads the raw mapping; Document, Sheet and Topic receive a
MindmapConfig built once by ``MindmapConfig.from_dict``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from mindsheet.config.defaults import DEFAULT_CONFIG
from mindsheet.config.loader import merge_configs
from mindsheet.errors import ConfigError


@dataclass(frozen=True)
class ShapeDefaults:
    fill_color: str
    border: str
    length: int


@dataclass(frozen=True)
class TextDefaults:
    font_size: int
    font_family: str
    font_style: str
    text_color: str


@dataclass(frozen=True)
class MindmapConfig:
    """Defaults used when populating sheets and creating topics.

    Attributes:
        sheet_background_color: Background of every new sheet.
        main_topic_names: Children created under a default root, in order.
        root_topic_name: Text of a default root topic.
        default_shape: Shape given to new topics.
        default_text: Font attributes given to new topics.
        default_position: (x, y) given to new topics.
        default_relationship_name: Name given to new relationships.
        duplicate_suffix: Appended to the text of a duplicated topic.
        duplicate_copies_style: Whether duplicates inherit the source style.
    """

    sheet_background_color: str
    main_topic_names: tuple[str, ...]
    root_topic_name: str
    default_shape: ShapeDefaults
    default_text: TextDefaults
    default_position: tuple[float, float]
    default_relationship_name: str
    duplicate_suffix: str = ""
    duplicate_copies_style: bool = False

    @classmethod
    def default(cls) -> MindmapConfig:
        return cls.from_dict(DEFAULT_CONFIG)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MindmapConfig:
        """Build a config from a (possibly partial) mapping.

        Missing keys fall back to DEFAULT_CONFIG.

        Raises:
            ConfigError: If a value has the wrong type.
        """
        merged = merge_configs(DEFAULT_CONFIG, data)
        main_topics = merged["main_topics"]
        if not isinstance(main_topics, (list, tuple)) or not all(isinstance(n, str) for n in main_topics):
            raise ConfigError("main_topics must be a list of strings")

        try:
            topic = merged["topic"]
            shape = topic["default_shape"]
            text = topic["default_text"]
            position = topic["default_position"]
            return cls(
                sheet_background_color=_str(merged["sheet"]["background_color"], "sheet.background_color"),
                main_topic_names=tuple(main_topics),
                root_topic_name=_str(merged["root_topic"]["name"], "root_topic.name"),
                default_shape=ShapeDefaults(
                    fill_color=_str(shape["fill_color"], "topic.default_shape.fill_color"),
                    border=_str(shape["border"], "topic.default_shape.border"),
                    length=int(shape["length"]),
                ),
                default_text=TextDefaults(
                    font_size=int(text["font_size"]),
                    font_family=_str(text["font_family"], "topic.default_text.font_family"),
                    font_style=_str(text["font_style"], "topic.default_text.font_style"),
                    text_color=_str(text["text_color"], "topic.default_text.text_color"),
                ),
                default_position=(float(position["x"]), float(position["y"])),
                default_relationship_name=_str(merged["relationship"]["name"], "relationship.name"),
                duplicate_suffix=_str(topic["duplicate_suffix"], "topic.duplicate_suffix"),
                duplicate_copies_style=_bool(
                    topic["duplicate_copies_style"], "topic.duplicate_copies_style"
                ),
            )
        except (TypeError, ValueError) as e:
            if isinstance(e, ConfigError):
                raise
            raise ConfigError(f"Invalid configuration value: {e}") from e


def _str(value: Any, key: str) -> str:
    if not isinstance(value, str):
        raise ConfigError(f"{key} must be a string, got {type(value).__name__}")
    return value


def _bool(value: Any, key: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigError(f"{key} must be a boolean, got {type(value).__name__}")
    return value
