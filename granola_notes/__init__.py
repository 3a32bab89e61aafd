"""Top-level package for rendering Granola notes as Markdown."""

__version__ = "0.1.0"

from .renderers import MarkdownRenderer, render_document, render_node  # noqa: E402

__all__ = ["__version__", "MarkdownRenderer", "render_document", "render_node"]
