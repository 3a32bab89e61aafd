"""Renderer interfaces and per-call rendering state."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Protocol

from granola_notes.models import ContentNode


class ListType(str, Enum):
    BULLET = "bullet"
    ORDERED = "ordered"


@dataclass(frozen=True, slots=True)
class RenderOptions:
    max_depth: int | None = None


@dataclass(frozen=True, slots=True)
class RenderContext:
    """Immutable state threaded through one branch of the recursion.

    ``depth`` counts list nesting, ``tree_depth`` counts node nesting and is
    only consulted by the optional depth guard.
    """

    depth: int = 0
    list_type: ListType | None = None
    item_index: int | None = None
    tree_depth: int = 0

    @property
    def indent(self) -> str:
        return "  " * self.depth

    def for_item(self, list_type: ListType, index: int) -> RenderContext:
        return replace(self, list_type=list_type, item_index=index)

    def nested_list(self, list_type: ListType) -> RenderContext:
        return replace(self, depth=self.depth + 1, list_type=list_type, item_index=None)

    def deeper(self) -> RenderContext:
        return replace(self, tree_depth=self.tree_depth + 1)


class Renderer(Protocol):
    def render_node(
        self,
        node: ContentNode | None,
        ctx: RenderContext | None = None,
    ) -> str:
        ...

    def render_document(self, structure: Any) -> str:
        ...


class RendererComponent(Protocol):
    def render(
        self,
        node: ContentNode,
        *,
        engine: Renderer,
        ctx: RenderContext,
    ) -> str:
        ...


__all__ = ["ListType", "RenderContext", "RenderOptions", "Renderer", "RendererComponent"]
