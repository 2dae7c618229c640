"""Structural checks for schema nodes and route schemas."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .schema_models import JSON_SCHEMA_TYPES, REQUEST_SECTIONS, RESPONSE_SECTION

COMBINATOR_KEYWORDS: tuple[str, ...] = ("allOf", "anyOf", "oneOf")
SUBSCHEMA_MAP_KEYWORDS: tuple[str, ...] = (
    "patternProperties",
    "dependentSchemas",
    "definitions",
    "$defs",
)


class SchemaError(Exception):
    """Raised for malformed schema nodes or route schemas."""


def declared_types(node: Mapping[str, Any], path: str) -> tuple[str, ...]:
    """Return the declared JSON-Schema types of a node, validating their names."""
    node_type = node.get("type")
    if node_type is None:
        return ()
    candidates = node_type if isinstance(node_type, list) else [node_type]
    if not candidates:
        raise SchemaError(f"{_label(path)} declares an empty type list.")
    for candidate in candidates:
        if not isinstance(candidate, str) or candidate not in JSON_SCHEMA_TYPES:
            raise SchemaError(f"{_label(path)} declares unsupported type {candidate!r}.")
    return tuple(candidates)


def check_schema_node(node: Any, path: str) -> Mapping[str, Any]:
    """Validate the keywords of a single node and return it as a mapping.

    Only the node itself is checked; callers recurse into children.
    """
    if not isinstance(node, Mapping):
        raise SchemaError(f"{_label(path)} must be an object, got {type(node).__name__}.")

    node_types = declared_types(node, path)
    if "properties" in node:
        _require_object_type(node_types, "properties", path)
        if not isinstance(node["properties"], Mapping):
            raise SchemaError(f"{_label(path)} properties must be an object.")
    if "patternProperties" in node:
        _require_object_type(node_types, "patternProperties", path)
        pattern_properties = node["patternProperties"]
        if not isinstance(pattern_properties, Mapping):
            raise SchemaError(f"{_label(path)} patternProperties must be an object.")
        for pattern, value in pattern_properties.items():
            if not isinstance(pattern, str):
                raise SchemaError(f"{_label(path)} patternProperties keys must be strings.")
            if not isinstance(value, (bool, Mapping)):
                raise SchemaError(
                    f"{_label(path)} patternProperties[{pattern!r}] must be a boolean or schema."
                )
    if "additionalProperties" in node and not isinstance(
        node["additionalProperties"], (bool, Mapping)
    ):
        raise SchemaError(f"{_label(path)} additionalProperties must be a boolean or schema.")
    if "items" in node:
        if node_types and "array" not in node_types:
            raise SchemaError(f"{_label(path)} declares items on a non-array node.")
        if not isinstance(node["items"], (bool, Mapping, list)):
            raise SchemaError(f"{_label(path)} items must be a schema or list of schemas.")
    for keyword in (*COMBINATOR_KEYWORDS, "prefixItems"):
        if keyword in node and not isinstance(node[keyword], list):
            raise SchemaError(f"{_label(path)} {keyword} must be a list of schemas.")
    for keyword in SUBSCHEMA_MAP_KEYWORDS:
        if keyword in node and not isinstance(node[keyword], Mapping):
            raise SchemaError(f"{_label(path)} {keyword} must be an object.")
    return node


def check_route_schema(schema: Any) -> Mapping[str, Any]:
    """Validate the section layout of a route schema."""
    if not isinstance(schema, Mapping):
        raise SchemaError("Route schema must be an object.")
    for section in REQUEST_SECTIONS:
        if section in schema and not isinstance(schema[section], (Mapping, bool)):
            raise SchemaError(f"Route section '{section}' must be an object.")
    if RESPONSE_SECTION in schema:
        response = schema[RESPONSE_SECTION]
        if not isinstance(response, Mapping):
            raise SchemaError("Route section 'response' must map status codes to schemas.")
        seen_codes: set[str] = set()
        for status_code in response:
            if isinstance(status_code, bool) or not isinstance(status_code, (str, int)):
                raise SchemaError(f"Invalid response status code: {status_code!r}")
            # 200 and "200" collapse to the same documented status code.
            if str(status_code) in seen_codes:
                raise SchemaError(f"Duplicate response status code: {status_code!r}")
            seen_codes.add(str(status_code))
    return schema


def _require_object_type(node_types: tuple[str, ...], keyword: str, path: str) -> None:
    if node_types and "object" not in node_types:
        raise SchemaError(
            f"{_label(path)} declares {keyword} on a node of type {', '.join(node_types)}."
        )


def _label(path: str) -> str:
    return f"Schema node '{path}'" if path else "Schema root"
