"""Markdown renderer component implementations."""

from __future__ import annotations

from typing import TYPE_CHECKING

from granola_notes.models import ContentNode, NodeType
from granola_notes.renderers.base import ListType, RenderContext, RendererComponent

if TYPE_CHECKING:  # pragma: no cover - type checking only
    from .renderer import MarkdownRenderer


# ---------------------------------------------------------------------------
# Base component


class BaseComponent(RendererComponent):
    def render(
        self,
        node: ContentNode,
        *,
        engine: "MarkdownRenderer",
        ctx: RenderContext,
    ) -> str:
        return self.render_node(node, engine, ctx)

    def render_node(
        self,
        node: ContentNode,
        engine: "MarkdownRenderer",
        ctx: RenderContext,
    ) -> str:  # pragma: no cover - abstract
        raise NotImplementedError

    @staticmethod
    def render_inline(node: ContentNode, engine: "MarkdownRenderer", ctx: RenderContext) -> str:
        return "".join(engine.render_child(child, ctx) for child in node.children())


# ---------------------------------------------------------------------------
# Component implementations


class DocComponent(BaseComponent):
    def render_node(self, node: ContentNode, engine: "MarkdownRenderer", ctx: RenderContext) -> str:
        return self.render_inline(node, engine, ctx)


class ParagraphComponent(BaseComponent):
    def render_node(self, node: ContentNode, engine: "MarkdownRenderer", ctx: RenderContext) -> str:
        text = self.render_inline(node, engine, ctx)
        # List items own their line breaks.
        if ctx.list_type:
            return text
        return f"{text}\n\n"


class HeadingComponent(BaseComponent):
    def render_node(self, node: ContentNode, engine: "MarkdownRenderer", ctx: RenderContext) -> str:
        level = (node.attrs.level if node.attrs else None) or 1
        text = self.render_inline(node, engine, ctx)
        return f"{'#' * level} {text}\n\n"


class ListComponent(BaseComponent):
    def __init__(self, list_type: ListType) -> None:
        self.list_type = list_type

    def render_node(self, node: ContentNode, engine: "MarkdownRenderer", ctx: RenderContext) -> str:
        result = "".join(
            engine.render_child(item, ctx.for_item(self.list_type, index))
            for index, item in enumerate(node.children())
        )
        # Nested lists end on the enclosing item's newline.
        return f"{result}\n" if ctx.depth == 0 else result


class ListItemComponent(BaseComponent):
    def render_node(self, node: ContentNode, engine: "MarkdownRenderer", ctx: RenderContext) -> str:
        prefix = list_item_prefix(ctx)
        parts: list[str] = []
        for child in node.children():
            if child.is_list:
                nested_ctx = ctx.nested_list(list_type_for(child))
                parts.append("\n" + engine.render_child(child, nested_ctx))
            else:
                parts.append(engine.render_child(child, ctx))
        return f"{ctx.indent}{prefix}{''.join(parts)}\n"


class TextComponent(BaseComponent):
    def render_node(self, node: ContentNode, engine: "MarkdownRenderer", ctx: RenderContext) -> str:
        return node.text or ""


class HorizontalRuleComponent(BaseComponent):
    def render_node(self, node: ContentNode, engine: "MarkdownRenderer", ctx: RenderContext) -> str:
        return "---\n\n"


class EmptyComponent(BaseComponent):
    """Fallback for node kinds without a registered component."""

    def render_node(self, node: ContentNode, engine: "MarkdownRenderer", ctx: RenderContext) -> str:
        return ""


# Helper utilities -----------------------------------------------------------


def list_item_prefix(ctx: RenderContext) -> str:
    if ctx.list_type is ListType.ORDERED:
        return f"{(ctx.item_index or 0) + 1}. "
    return "- "


def list_type_for(node: ContentNode) -> ListType:
    if node.node_type is NodeType.ORDERED_LIST:
        return ListType.ORDERED
    return ListType.BULLET


DEFAULT_COMPONENTS: dict[str, RendererComponent] = {
    NodeType.DOC.value: DocComponent(),
    NodeType.PARAGRAPH.value: ParagraphComponent(),
    NodeType.HEADING.value: HeadingComponent(),
    NodeType.BULLET_LIST.value: ListComponent(ListType.BULLET),
    NodeType.ORDERED_LIST.value: ListComponent(ListType.ORDERED),
    NodeType.LIST_ITEM.value: ListItemComponent(),
    NodeType.TEXT.value: TextComponent(),
    NodeType.HORIZONTAL_RULE.value: HorizontalRuleComponent(),
}


__all__ = [
    "BaseComponent",
    "DEFAULT_COMPONENTS",
    "DocComponent",
    "EmptyComponent",
    "HeadingComponent",
    "HorizontalRuleComponent",
    "ListComponent",
    "ListItemComponent",
    "ParagraphComponent",
    "TextComponent",
    "list_item_prefix",
    "list_type_for",
]
