"""Documentation document assembly."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from swagger_schema_docs.configuration.runtime_settings import (
    Configuration,
    DocumentationSettings,
)
from swagger_schema_docs.schema_management.schema_models import RouteSchema

from .swagger_transformer import SchemaDocTransformer


def build_swagger_definition(settings: DocumentationSettings) -> dict[str, Any]:
    """Header handed to the documentation generator."""
    return {
        "openApiSpecification": settings.open_api_specification,
        "info": {
            "title": settings.title,
            "description": settings.description,
            "version": settings.version,
        },
    }


def build_documentation(
    routes: Sequence[RouteSchema], configuration: Configuration
) -> dict[str, Any]:
    """Transform every route of a catalog and attach the documentation header."""
    transformer = SchemaDocTransformer(configuration.transformation)
    document = build_swagger_definition(configuration.documentation)
    document["routes"] = {
        route.url: transformer.transform_route(route).schema for route in routes
    }
    return document
