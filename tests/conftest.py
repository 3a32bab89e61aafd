from __future__ import annotations

from typing import Any, Callable

import pytest

from granola_notes.models import ContentNode


@pytest.fixture
def node_factory() -> Callable[..., ContentNode]:
    def _factory(
        node_type: str,
        *children: ContentNode,
        text: str | None = None,
        attrs: dict[str, Any] | None = None,
    ) -> ContentNode:
        payload: dict[str, Any] = {"type": node_type, "content": list(children)}
        if text is not None:
            payload["text"] = text
        if attrs is not None:
            payload["attrs"] = attrs
        return ContentNode.model_validate(payload)

    return _factory


@pytest.fixture
def text_paragraph(node_factory) -> Callable[[str], ContentNode]:
    def _paragraph(value: str) -> ContentNode:
        return node_factory("paragraph", node_factory("text", text=value))

    return _paragraph


@pytest.fixture
def list_item(node_factory, text_paragraph) -> Callable[..., ContentNode]:
    def _item(value: str, *nested: ContentNode) -> ContentNode:
        return node_factory("listItem", text_paragraph(value), *nested)

    return _item
