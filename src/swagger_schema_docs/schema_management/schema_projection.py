"""Route schema loading and flattening service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .schema_models import FlattenedField, RouteSchema
from .schema_validation import SchemaError, check_route_schema, declared_types

ARRAY_ITEM_MARKER = "[]"


def load_route_schema(input_path: Path | str, url: str) -> RouteSchema:
    """Read a single route schema file (YAML or JSON)."""
    schema = check_route_schema(_load_document(Path(input_path)))
    return RouteSchema(schema=schema, url=url)


def load_route_catalog(input_path: Path | str) -> list[RouteSchema]:
    """Read a route catalog mapping each URL to its route schema."""
    path = Path(input_path)
    catalog = _load_document(path)
    if not isinstance(catalog, Mapping):
        raise SchemaError(f"Route catalog must map URLs to route schemas: {path}")
    routes: list[RouteSchema] = []
    for url, schema in catalog.items():
        if not isinstance(url, str) or not url.strip():
            raise SchemaError(f"Route catalog keys must be non-empty URLs, got {url!r}.")
        routes.append(RouteSchema(schema=check_route_schema(schema), url=url))
    return routes


def _load_document(path: Path) -> Any:
    if not path.exists():
        raise SchemaError(f"Schema file not found: {path}")
    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise SchemaError(f"Invalid schema file {path}: {exc}") from exc
    if parsed is None:
        raise SchemaError(f"Schema file is empty: {path}")
    return parsed


def flatten_schema(node: Any, prefix: str = "") -> list[FlattenedField]:
    """Return deterministic flattened fields of a (public) schema node."""
    fields: list[FlattenedField] = []
    seen_paths: set[str] = set()
    _flatten_json_schema(node, prefix=prefix, fields=fields, seen_paths=seen_paths)
    return fields


def _flatten_json_schema(
    node: Any, *, prefix: str, fields: list[FlattenedField], seen_paths: set[str]
) -> None:
    if isinstance(node, bool):
        if prefix:
            _register_field(prefix, node, fields, seen_paths)
        return
    if not isinstance(node, Mapping):
        raise SchemaError("JSON schema nodes must be objects.")

    node_types = declared_types(node, prefix)
    properties = node.get("properties")
    if isinstance(properties, Mapping) and properties:
        for key, child in properties.items():
            child_path = key if not prefix else f"{prefix}.{key}"
            _flatten_json_schema(child, prefix=child_path, fields=fields, seen_paths=seen_paths)
        return

    if "array" in node_types:
        if prefix:
            _register_field(prefix, node, fields, seen_paths)
        items = node.get("items")
        if isinstance(items, Mapping) and isinstance(items.get("properties"), Mapping):
            _flatten_json_schema(
                items,
                prefix=f"{prefix}{ARRAY_ITEM_MARKER}",
                fields=fields,
                seen_paths=seen_paths,
            )
        return

    if prefix:
        _register_field(prefix, node, fields, seen_paths)


def _register_field(
    path: str, definition: Any, fields: list[FlattenedField], seen_paths: set[str]
) -> None:
    if not path:
        raise SchemaError("Cannot register a field without a path.")
    if path in seen_paths:
        raise SchemaError(f"Duplicate flattened field detected: {path}")
    seen_paths.add(path)
    fields.append(FlattenedField(path=path, definition=definition))
