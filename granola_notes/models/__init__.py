"""Document and node model exports."""

from .document import Attachment, DocumentStructure, LegacyDocument, parse_document_structure
from .nodes import LIST_NODE_TYPES, ContentNode, NodeAttrs, NodeType

__all__ = [
    "Attachment",
    "ContentNode",
    "DocumentStructure",
    "LIST_NODE_TYPES",
    "LegacyDocument",
    "NodeAttrs",
    "NodeType",
    "parse_document_structure",
]
