"""Typed content nodes for Granola's rich-text documents."""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class NodeType(str, Enum):
    DOC = "doc"
    PARAGRAPH = "paragraph"
    HEADING = "heading"
    BULLET_LIST = "bulletList"
    ORDERED_LIST = "orderedList"
    LIST_ITEM = "listItem"
    TEXT = "text"
    HORIZONTAL_RULE = "horizontalRule"


LIST_NODE_TYPES = frozenset({NodeType.BULLET_LIST.value, NodeType.ORDERED_LIST.value})
KNOWN_NODE_TYPES = frozenset(member.value for member in NodeType)


class NodeAttrs(BaseModel):
    """Attribute bag attached to a node. Only ``level`` is interpreted."""

    level: int | None = None

    model_config = ConfigDict(extra="allow", frozen=True)

    @field_validator("level", mode="before")
    @classmethod
    def _positive_level(cls, value: Any) -> Any:
        # Anything but a positive integer falls back to the default heading depth.
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            return None
        return value


class ContentNode(BaseModel):
    """Immutable representation of one node in the document tree.

    ``type`` is kept as a plain string so that node kinds unknown to this
    package still validate; renderers decide what to do with them.
    """

    type: str
    content: tuple[ContentNode, ...] = Field(default_factory=tuple)
    attrs: NodeAttrs | None = None
    text: str | None = None

    model_config = ConfigDict(frozen=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _drop_unknown_payload(cls, data: Any) -> Any:
        # Fields of unrecognised kinds are never read, so they are not validated.
        if isinstance(data, Mapping):
            node_type = data.get("type")
            node_type = getattr(node_type, "value", node_type)
            if isinstance(node_type, str) and node_type not in KNOWN_NODE_TYPES:
                return {"type": node_type}
        return data

    @field_validator("type", mode="before")
    @classmethod
    def _coerce_type(cls, value: Any) -> Any:
        if isinstance(value, NodeType):
            return value.value
        return value

    @field_validator("content", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return () if value is None else value

    @property
    def node_type(self) -> NodeType | None:
        """Return the known ``NodeType`` or ``None`` for unrecognised kinds."""
        try:
            return NodeType(self.type)
        except ValueError:
            return None

    @property
    def is_list(self) -> bool:
        return self.type in LIST_NODE_TYPES

    def children(self) -> list[ContentNode]:
        return list(self.content)

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> ContentNode:
        return cls.model_validate(payload)

    @classmethod
    def from_json(cls, payload: str | bytes) -> ContentNode:
        return cls.model_validate_json(payload)


ContentNode.model_rebuild()


__all__ = ["ContentNode", "KNOWN_NODE_TYPES", "LIST_NODE_TYPES", "NodeAttrs", "NodeType"]
