"""Configuration loader service."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import (
    DEFAULT_INTERNAL_KEYWORDS,
    OPEN_API_SPECIFICATIONS,
    Configuration,
    DocumentationSettings,
    IdentifierSettings,
    TransformSettings,
)


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str | None) -> Configuration:
    """Load and validate the configuration file.

    Without a path every setting takes its default value.
    """
    if config_path is None:
        return Configuration()

    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:  # pragma: no cover - exercised indirectly
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    return Configuration(
        path=path,
        documentation=_parse_documentation_section(parsed.get("documentation")),
        transformation=_parse_transformation_section(parsed.get("transformation")),
    )


def _parse_documentation_section(value: Any) -> DocumentationSettings:
    section = _optional_mapping(value, "documentation")
    defaults = DocumentationSettings()
    specification = _require_non_empty_string(
        section.get("open_api_specification", defaults.open_api_specification),
        "documentation.open_api_specification",
    ).lower()
    if specification not in OPEN_API_SPECIFICATIONS:
        raise ConfigurationError(
            "documentation.open_api_specification must be one of: "
            + ", ".join(OPEN_API_SPECIFICATIONS)
        )
    return DocumentationSettings(
        open_api_specification=specification,
        title=_require_non_empty_string(section.get("title", defaults.title), "documentation.title"),
        description=_optional_string(section.get("description"), "documentation.description")
        or defaults.description,
        version=_require_version(section.get("version", defaults.version)),
    )


def _parse_transformation_section(value: Any) -> TransformSettings:
    section = _optional_mapping(value, "transformation")
    internal_keywords = _normalize_string_sequence(
        section.get("internal_keywords", list(DEFAULT_INTERNAL_KEYWORDS)),
        "transformation.internal_keywords",
    )
    identifier = _parse_identifier_section(section.get("identifier"))
    return TransformSettings(internal_keywords=internal_keywords, identifier=identifier)


def _parse_identifier_section(value: Any) -> IdentifierSettings:
    section = _optional_mapping(value, "transformation.identifier")
    defaults = IdentifierSettings()
    annotate = section.get("annotate", defaults.annotate)
    if not isinstance(annotate, bool):
        raise ConfigurationError("transformation.identifier.annotate must be a boolean.")
    pattern = _require_non_empty_string(
        section.get("pattern", defaults.pattern), "transformation.identifier.pattern"
    )
    try:
        re.compile(pattern)
    except re.error as exc:
        raise ConfigurationError(
            f"transformation.identifier.pattern is not a valid regular expression: {exc}"
        ) from exc
    example = _require_non_empty_string(
        section.get("example", defaults.example), "transformation.identifier.example"
    )
    if not re.search(pattern, example):
        raise ConfigurationError(
            "transformation.identifier.example must match transformation.identifier.pattern."
        )
    return IdentifierSettings(
        field=_require_non_empty_string(
            section.get("field", defaults.field), "transformation.identifier.field"
        ),
        annotate=annotate,
        example=example,
        pattern=pattern,
        description=_require_non_empty_string(
            section.get("description", defaults.description),
            "transformation.identifier.description",
        ),
    )


def _normalize_string_sequence(value: Any, field_name: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        stripped = value.strip()
        return (stripped,) if stripped else ()
    if isinstance(value, Sequence):
        normalized = []
        for item in value:
            if not isinstance(item, str):
                raise ConfigurationError(f"{field_name} entries must be strings.")
            stripped = item.strip()
            if stripped and stripped not in normalized:
                normalized.append(stripped)
        return tuple(normalized)
    raise ConfigurationError(f"{field_name} must be a string or list of strings.")


def _require_version(value: Any) -> str:
    # YAML reads unquoted versions such as 1.0 as floats.
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return _require_non_empty_string(value, "documentation.version")


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None
