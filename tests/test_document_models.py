from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from granola_notes.models import (
    ContentNode,
    LegacyDocument,
    NodeType,
    parse_document_structure,
)


def test_content_node_defaults():
    node = ContentNode.from_dict({"type": "paragraph"})

    assert node.content == ()
    assert node.attrs is None
    assert node.text is None
    assert node.node_type is NodeType.PARAGRAPH


def test_content_node_accepts_null_content_and_extra_keys():
    node = ContentNode.from_dict(
        {"type": "text", "content": None, "text": "bold", "marks": [{"type": "bold"}]}
    )

    assert node.content == ()
    assert node.text == "bold"


def test_unknown_type_is_preserved_without_payload():
    node = ContentNode.from_dict(
        {"type": "taskList", "attrs": {"checked": True, "level": "high"}, "text": 5, "content": "cells"}
    )

    assert node.type == "taskList"
    assert node.node_type is None
    assert node.attrs is None
    assert node.text is None
    assert node.content == ()


@pytest.mark.parametrize("level", [-2, 0, 1.5, "high", True, None])
def test_heading_level_must_be_positive_integer(level):
    node = ContentNode.from_dict({"type": "heading", "attrs": {"level": level}})

    assert node.attrs is not None
    assert node.attrs.level is None


def test_heading_level_keeps_valid_values():
    node = ContentNode.from_dict({"type": "heading", "attrs": {"level": 4, "id": "h"}})

    assert node.attrs is not None
    assert node.attrs.level == 4
    assert node.attrs.model_extra == {"id": "h"}


def test_enum_type_is_normalised_to_string():
    node = ContentNode(type=NodeType.BULLET_LIST)

    assert node.type == "bulletList"
    assert node.is_list


def test_content_node_is_frozen():
    node = ContentNode.from_dict({"type": "text", "text": "a"})

    with pytest.raises(ValidationError):
        node.text = "b"


def test_from_json_builds_nested_tree():
    payload = {
        "type": "doc",
        "content": [
            {"type": "heading", "attrs": {"level": 3}, "content": [{"type": "text", "text": "H"}]},
        ],
    }

    node = ContentNode.from_json(json.dumps(payload))

    heading = node.children()[0]
    assert heading.attrs is not None and heading.attrs.level == 3
    assert heading.children()[0].text == "H"


def test_from_json_rejects_malformed_input():
    with pytest.raises(ValidationError):
        ContentNode.from_json("{")


def test_parse_document_structure_dispatch():
    assert parse_document_structure(None) is None
    assert parse_document_structure({"type": "paragraph"}) is None
    assert parse_document_structure({"attachments": None}) is None

    doc = parse_document_structure({"type": "doc", "content": []})
    assert isinstance(doc, ContentNode)

    legacy = parse_document_structure('{"attachments": [{"content": "{}"}]}')
    assert isinstance(legacy, LegacyDocument)
    assert legacy.attachments[0].content == "{}"


def test_doc_type_wins_over_attachments():
    structure = parse_document_structure({"type": "doc", "attachments": [{"content": "x"}]})

    assert isinstance(structure, ContentNode)


def test_attachment_parse_is_lazy():
    legacy = LegacyDocument.model_validate({"attachments": [{"content": "not json"}]})

    with pytest.raises(ValidationError):
        legacy.attachments[0].parse()
