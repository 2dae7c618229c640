"""Configuration loader tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from swagger_schema_docs.configuration.loader import ConfigurationError, load_configuration
from swagger_schema_docs.configuration.runtime_settings import (
    Configuration,
    IdentifierSettings,
)


def _write_file(path: Path, contents: str) -> Path:
    path.write_text(contents, encoding="utf-8")
    return path


def test_missing_path_yields_defaults() -> None:
    configuration = load_configuration(None)

    assert configuration == Configuration()
    assert configuration.transformation.internal_keywords == ("operationId",)
    assert configuration.transformation.identifier == IdentifierSettings()


def test_loads_yaml_configuration_with_overrides(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "config.yaml",
        """
documentation:
  open_api_specification: OpenAPI
  title: Books Service
  version: 1.0
transformation:
  internal_keywords: [operationId, "$comment", operationId]
  identifier:
    field: id
    annotate: false
""",
    )

    configuration = load_configuration(config_path)

    assert configuration.path == config_path
    assert configuration.documentation.open_api_specification == "openapi"
    assert configuration.documentation.title == "Books Service"
    assert configuration.documentation.version == "1.0"
    assert configuration.documentation.description == ""
    assert configuration.transformation.internal_keywords == ("operationId", "$comment")
    assert configuration.transformation.identifier.field == "id"
    assert configuration.transformation.identifier.annotate is False
    assert configuration.transformation.identifier.pattern == "^[a-fA-F\\d]{24}$"


def test_empty_file_yields_defaults(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "config.yaml", "")

    configuration = load_configuration(config_path)

    assert configuration.documentation.open_api_specification == "swagger"
    assert configuration.transformation.internal_keywords == ("operationId",)


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="not found"):
        load_configuration(tmp_path / "missing.yaml")


@pytest.mark.parametrize(
    ("contents", "message"),
    [
        ("- a\n- b\n", "root must be a mapping"),
        ("documentation: []\n", "'documentation' must be a mapping"),
        ("documentation:\n  open_api_specification: raml\n", "must be one of"),
        ("documentation:\n  title: ''\n", "documentation.title must not be empty"),
        ("transformation:\n  internal_keywords: [1]\n", "entries must be strings"),
        ("transformation:\n  identifier:\n    annotate: 'yes'\n", "must be a boolean"),
        ("transformation:\n  identifier:\n    pattern: '['\n", "not a valid regular expression"),
        (
            "transformation:\n  identifier:\n    example: 'abc'\n",
            "example must match",
        ),
    ],
)
def test_invalid_configuration_values_raise(tmp_path: Path, contents: str, message: str) -> None:
    config_path = _write_file(tmp_path / "config.yaml", contents)

    with pytest.raises(ConfigurationError, match=message):
        load_configuration(config_path)
