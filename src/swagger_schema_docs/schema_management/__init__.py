"""Schema management exports."""

from .schema_models import (
    JSON_SCHEMA_TYPES,
    REQUEST_SECTIONS,
    RESPONSE_SECTION,
    FlattenedField,
    RouteSchema,
)
from .schema_projection import flatten_schema, load_route_catalog, load_route_schema
from .schema_validation import SchemaError, check_route_schema, check_schema_node

__all__ = [
    "JSON_SCHEMA_TYPES",
    "REQUEST_SECTIONS",
    "RESPONSE_SECTION",
    "FlattenedField",
    "RouteSchema",
    "SchemaError",
    "check_route_schema",
    "check_schema_node",
    "flatten_schema",
    "load_route_catalog",
    "load_route_schema",
]
