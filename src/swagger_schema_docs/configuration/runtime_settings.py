"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_INTERNAL_KEYWORDS: tuple[str, ...] = ("operationId",)
DEFAULT_IDENTIFIER_FIELD = "_id"
DEFAULT_IDENTIFIER_EXAMPLE = "000000000000000000000000"
DEFAULT_IDENTIFIER_PATTERN = "^[a-fA-F\\d]{24}$"
DEFAULT_IDENTIFIER_DESCRIPTION = "Hexadecimal identifier of the document in the collection"

OPEN_API_SPECIFICATIONS: tuple[str, ...] = ("swagger", "openapi")


@dataclass(frozen=True)
class IdentifierSettings:
    """Metadata attached to document identifiers returned by responses."""

    field: str = DEFAULT_IDENTIFIER_FIELD
    annotate: bool = True
    example: str = DEFAULT_IDENTIFIER_EXAMPLE
    pattern: str = DEFAULT_IDENTIFIER_PATTERN
    description: str = DEFAULT_IDENTIFIER_DESCRIPTION


@dataclass(frozen=True)
class TransformSettings:
    """Rules applied when projecting route schemas for documentation."""

    internal_keywords: tuple[str, ...] = DEFAULT_INTERNAL_KEYWORDS
    identifier: IdentifierSettings = field(default_factory=IdentifierSettings)


@dataclass(frozen=True)
class DocumentationSettings:
    """Header of the generated documentation."""

    open_api_specification: str = "swagger"
    title: str = "Crud Service"
    description: str = ""
    version: str = "0.0.0"


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path | None = None
    documentation: DocumentationSettings = field(default_factory=DocumentationSettings)
    transformation: TransformSettings = field(default_factory=TransformSettings)
