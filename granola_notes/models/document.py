"""Top-level document shapes accepted by the renderers."""

from __future__ import annotations

import json
from typing import Any, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field

from .nodes import ContentNode, NodeType


class Attachment(BaseModel):
    """Legacy attachment wrapping a JSON-encoded node tree."""

    content: str

    model_config = ConfigDict(frozen=True, extra="ignore")

    def parse(self) -> ContentNode:
        # Raises pydantic.ValidationError on malformed JSON.
        return ContentNode.from_json(self.content)


class LegacyDocument(BaseModel):
    """Older envelope holding one or more serialized node trees."""

    attachments: tuple[Attachment, ...] = Field(default_factory=tuple)

    model_config = ConfigDict(frozen=True, extra="ignore")


DocumentStructure = Union[ContentNode, LegacyDocument]


def parse_document_structure(payload: Any) -> DocumentStructure | None:
    """Coerce a raw payload into one of the supported document shapes.

    - ``None`` stays ``None``.
    - Strings and bytes are decoded as JSON first.
    - A mapping with ``type == "doc"`` becomes a ``ContentNode``.
    - A mapping whose ``attachments`` is a list becomes a ``LegacyDocument``.
    - Anything else yields ``None``.
    """
    if payload is None:
        return None
    if isinstance(payload, (ContentNode, LegacyDocument)):
        return payload
    if isinstance(payload, (str, bytes, bytearray)):
        payload = json.loads(payload)
    if not isinstance(payload, Mapping):
        return None

    if payload.get("type") == NodeType.DOC.value:
        return ContentNode.from_dict(payload)
    if isinstance(payload.get("attachments"), (list, tuple)):
        return LegacyDocument.model_validate(payload)
    return None


__all__ = ["Attachment", "DocumentStructure", "LegacyDocument", "parse_document_structure"]
