"""Schema management entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

JSON_SCHEMA_TYPES: frozenset[str] = frozenset(
    {"object", "array", "string", "number", "integer", "boolean", "null"}
)

REQUEST_SECTIONS: tuple[str, ...] = ("params", "querystring", "body", "headers")
RESPONSE_SECTION = "response"


@dataclass(frozen=True)
class RouteSchema:
    """Route validation schema paired with the URL it is registered on."""

    schema: Mapping[str, Any]
    url: str | None


@dataclass(frozen=True)
class FlattenedField:
    """Flattened schema field definition."""

    path: str
    definition: Any
