"""Renderer implementations and helpers."""

from .base import ListType, RenderContext, RenderOptions, Renderer, RendererComponent
from .markdown import MarkdownRenderer, RenderDepthError, render_document, render_node

__all__ = [
    "ListType",
    "MarkdownRenderer",
    "RenderContext",
    "RenderDepthError",
    "RenderOptions",
    "Renderer",
    "RendererComponent",
    "render_document",
    "render_node",
]
