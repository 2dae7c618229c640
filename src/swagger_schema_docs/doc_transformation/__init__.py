"""Documentation transformation exports."""

from .documentation_builder import build_documentation, build_swagger_definition
from .identifier_annotations import annotate_identifier, is_identifier_property
from .swagger_transformer import (
    SchemaDocTransformer,
    transform_route_schema,
    transform_schema,
    transform_schema_for_swagger,
)

__all__ = [
    "SchemaDocTransformer",
    "annotate_identifier",
    "build_documentation",
    "build_swagger_definition",
    "is_identifier_property",
    "transform_route_schema",
    "transform_schema",
    "transform_schema_for_swagger",
]
