"""Renderer entry-point wiring Markdown components."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from granola_notes.models import ContentNode, LegacyDocument, parse_document_structure
from granola_notes.renderers.base import RenderContext, RenderOptions, Renderer, RendererComponent

from .components import DEFAULT_COMPONENTS, EmptyComponent

logger = logging.getLogger(__name__)

ATTACHMENT_SEPARATOR = " \n\n "


class RenderDepthError(RuntimeError):
    """Raised when a tree nests deeper than ``RenderOptions.max_depth``."""


def _default_components() -> dict[str, RendererComponent]:
    return dict(DEFAULT_COMPONENTS)


@dataclass(slots=True)
class MarkdownRenderer(Renderer):
    options: RenderOptions = field(default_factory=RenderOptions)
    _components: dict[str, RendererComponent] = field(default_factory=dict)
    _fallback_component: RendererComponent | None = None

    def __post_init__(self) -> None:
        if not self._components:
            self._components = _default_components()
        if self._fallback_component is None:
            self._fallback_component = EmptyComponent()

    def register(self, node_type: str, component: RendererComponent) -> None:
        self._components[str(getattr(node_type, "value", node_type))] = component

    def render_node(
        self,
        node: ContentNode | None,
        ctx: RenderContext | None = None,
    ) -> str:
        if node is None:
            return ""
        ctx = ctx or RenderContext()
        max_depth = self.options.max_depth
        if max_depth is not None and ctx.tree_depth > max_depth:
            raise RenderDepthError(f"Document nesting exceeds max_depth={max_depth}")

        component = self._components.get(node.type, self._fallback_component)
        assert component is not None, "Fallback component must be configured"
        return component.render(node, engine=self, ctx=ctx)

    def render_child(self, node: ContentNode, ctx: RenderContext) -> str:
        return self.render_node(node, ctx.deeper())

    def render_document(self, structure: Any) -> str:
        document = parse_document_structure(structure)
        if document is None:
            return ""
        if isinstance(document, ContentNode):
            if document.type != "doc":
                return ""
            return self.render_node(document, RenderContext())
        if isinstance(document, LegacyDocument):
            logger.debug("Rendering legacy document with %d attachments", len(document.attachments))
            # A bad attachment fails the whole call.
            trees = [attachment.parse() for attachment in document.attachments]
            return ATTACHMENT_SEPARATOR.join(self.render_node(tree, RenderContext()) for tree in trees)
        return ""


_DEFAULT_RENDERER = MarkdownRenderer()


def render_node(node: ContentNode | None, ctx: RenderContext | None = None) -> str:
    """Render a single node with the default renderer."""
    return _DEFAULT_RENDERER.render_node(node, ctx)


def render_document(structure: Any) -> str:
    """Render a document payload (model, mapping, or JSON string) to Markdown."""
    return _DEFAULT_RENDERER.render_document(structure)


__all__ = [
    "ATTACHMENT_SEPARATOR",
    "MarkdownRenderer",
    "RenderDepthError",
    "render_document",
    "render_node",
]
