"""Identifier annotation tests."""

from __future__ import annotations

from swagger_schema_docs.configuration.runtime_settings import IdentifierSettings
from swagger_schema_docs.doc_transformation.identifier_annotations import (
    annotate_identifier,
    is_identifier_property,
)


def test_identifier_property_requires_string_type() -> None:
    settings = IdentifierSettings()

    assert is_identifier_property("_id", {"type": "string"}, settings)
    assert is_identifier_property("_id", {"type": ["string", "null"]}, settings)
    assert not is_identifier_property("_id", {"type": "object"}, settings)
    assert not is_identifier_property("_id", True, settings)
    assert not is_identifier_property("id", {"type": "string"}, settings)


def test_annotation_fills_missing_metadata_only() -> None:
    settings = IdentifierSettings()
    node = {"type": "string", "examples": ["5f0c3c5f1c9d440000a1b2c3"]}

    annotated = annotate_identifier(node, settings)

    assert annotated == {
        "type": "string",
        "examples": ["5f0c3c5f1c9d440000a1b2c3"],
        "pattern": settings.pattern,
        "description": settings.description,
    }
    assert node == {"type": "string", "examples": ["5f0c3c5f1c9d440000a1b2c3"]}


def test_annotation_is_stable_when_reapplied() -> None:
    settings = IdentifierSettings()
    once = annotate_identifier({"type": "string"}, settings)

    assert annotate_identifier(once, settings) == once
