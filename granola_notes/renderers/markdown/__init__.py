"""Markdown rendering for Granola document trees."""

from .components import DEFAULT_COMPONENTS, BaseComponent, EmptyComponent
from .renderer import (
    ATTACHMENT_SEPARATOR,
    MarkdownRenderer,
    RenderDepthError,
    render_document,
    render_node,
)

__all__ = [
    "ATTACHMENT_SEPARATOR",
    "BaseComponent",
    "DEFAULT_COMPONENTS",
    "EmptyComponent",
    "MarkdownRenderer",
    "RenderDepthError",
    "render_document",
    "render_node",
]
