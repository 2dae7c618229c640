"""Document identifier annotation rules."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from swagger_schema_docs.configuration.runtime_settings import IdentifierSettings


def is_identifier_property(name: str, node: Any, settings: IdentifierSettings) -> bool:
    """Tell whether a response property is the string document identifier."""
    if not settings.annotate or name != settings.field or not isinstance(node, Mapping):
        return False
    node_type = node.get("type")
    if isinstance(node_type, list):
        return "string" in node_type
    return node_type == "string"


def annotate_identifier(node: Mapping[str, Any], settings: IdentifierSettings) -> dict[str, Any]:
    """Return a copy of the identifier node carrying example, pattern and description.

    Metadata already present on the node is kept as is.
    """
    annotated = dict(node)
    annotated.setdefault("examples", [settings.example])
    annotated.setdefault("pattern", settings.pattern)
    annotated.setdefault("description", settings.description)
    return annotated
