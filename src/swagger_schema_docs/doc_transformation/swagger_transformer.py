"""Projection of internal route schemas onto public documentation schemas."""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from typing import Any

from swagger_schema_docs.configuration.runtime_settings import TransformSettings
from swagger_schema_docs.schema_management.schema_models import (
    REQUEST_SECTIONS,
    RESPONSE_SECTION,
    RouteSchema,
)
from swagger_schema_docs.schema_management.schema_validation import (
    COMBINATOR_KEYWORDS,
    SUBSCHEMA_MAP_KEYWORDS,
    SchemaError,
    check_route_schema,
    check_schema_node,
)

from .identifier_annotations import annotate_identifier, is_identifier_property

_LOGGER = logging.getLogger(__name__)
_LOGGER.addHandler(logging.NullHandler())

_SINGLE_SUBSCHEMA_KEYWORDS: tuple[str, ...] = (
    "additionalProperties",
    "additionalItems",
    "unevaluatedProperties",
    "unevaluatedItems",
    "propertyNames",
    "contains",
    "contentSchema",
    "not",
    "if",
    "then",
    "else",
)
_SUBSCHEMA_LIST_KEYWORDS: tuple[str, ...] = ("items", "prefixItems", *COMBINATOR_KEYWORDS)


class SchemaDocTransformer:
    """Strip internal keywords and annotate response identifiers.

    The transformer never mutates its input: every call builds a fresh tree,
    so one instance can be shared between callers.
    """

    def __init__(self, settings: TransformSettings | None = None) -> None:
        self._settings = settings or TransformSettings()

    @property
    def settings(self) -> TransformSettings:
        return self._settings

    def transform_route(self, route: RouteSchema) -> RouteSchema:
        """Transform a route schema, keeping the URL it is registered on."""
        return RouteSchema(schema=self.transform(route.schema), url=route.url)

    def transform(self, schema: Mapping[str, Any]) -> dict[str, Any]:
        """Transform the sections of a route schema.

        Route metadata outside the request and response sections (summary,
        tags, the route operationId, ...) is copied unchanged.
        """
        check_route_schema(schema)
        transformed: dict[str, Any] = {}
        for key, value in schema.items():
            if key in REQUEST_SECTIONS:
                transformed[key] = self.transform_node(value, path=key)
            elif key == RESPONSE_SECTION:
                # Status codes are emitted as strings, as in the serialized document.
                transformed[key] = {
                    str(status_code): self.transform_node(
                        node, path=f"{RESPONSE_SECTION}.{status_code}", in_response=True
                    )
                    for status_code, node in value.items()
                }
            else:
                transformed[key] = copy.deepcopy(value)
        return transformed

    def transform_node(self, node: Any, *, path: str = "", in_response: bool = False) -> Any:
        """Transform a single schema node and everything below it."""
        if isinstance(node, bool):
            return node
        checked = check_schema_node(node, path)
        transformed: dict[str, Any] = {}
        for key, value in checked.items():
            if key in self._settings.internal_keywords:
                _LOGGER.debug("Removed internal keyword %s from %s", key, path or "<root>")
                continue
            child_path = f"{path}.{key}" if path else key
            if key == "properties":
                transformed[key] = self._transform_properties(
                    value, path=child_path, in_response=in_response
                )
            elif key in SUBSCHEMA_MAP_KEYWORDS:
                transformed[key] = {
                    name: self.transform_node(
                        child, path=f"{child_path}.{name}", in_response=in_response
                    )
                    for name, child in value.items()
                }
            elif key in _SINGLE_SUBSCHEMA_KEYWORDS:
                transformed[key] = self.transform_node(
                    value, path=child_path, in_response=in_response
                )
            elif key in _SUBSCHEMA_LIST_KEYWORDS:
                transformed[key] = self._transform_subschemas(
                    value, path=child_path, in_response=in_response
                )
            else:
                transformed[key] = copy.deepcopy(value)
        return transformed

    def _transform_properties(
        self, properties: Mapping[str, Any], *, path: str, in_response: bool
    ) -> dict[str, Any]:
        transformed: dict[str, Any] = {}
        identifier = self._settings.identifier
        for name, child in properties.items():
            node = self.transform_node(child, path=f"{path}.{name}", in_response=in_response)
            if in_response and is_identifier_property(name, node, identifier):
                _LOGGER.debug("Annotated identifier %s.%s", path, name)
                node = annotate_identifier(node, identifier)
            transformed[name] = node
        return transformed

    def _transform_subschemas(self, value: Any, *, path: str, in_response: bool) -> Any:
        if isinstance(value, list):
            return [
                self.transform_node(child, path=f"{path}.{index}", in_response=in_response)
                for index, child in enumerate(value)
            ]
        return self.transform_node(value, path=path, in_response=in_response)


def transform_schema(
    schema: Mapping[str, Any], settings: TransformSettings | None = None
) -> dict[str, Any]:
    """Return the public documentation projection of a route schema."""
    return SchemaDocTransformer(settings).transform(schema)


def transform_route_schema(
    route: RouteSchema, settings: TransformSettings | None = None
) -> RouteSchema:
    """Documentation hook: transform ``route.schema`` and hand back the same URL."""
    return SchemaDocTransformer(settings).transform_route(route)


def transform_schema_for_swagger(
    payload: Mapping[str, Any], settings: TransformSettings | None = None
) -> dict[str, Any]:
    """Transform a ``{"schema": ..., "url": ...}`` payload as passed by doc generators."""
    if not isinstance(payload, Mapping) or "schema" not in payload:
        raise SchemaError("Swagger transform payload must provide a schema.")
    # The url is handed back as received, even when absent.
    url = payload.get("url")
    route = transform_route_schema(RouteSchema(schema=payload["schema"], url=url), settings)
    return {"schema": route.schema, "url": route.url}
