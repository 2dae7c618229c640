"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "swagger-docs.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Documentation configuration for swagger-schema-docs.
# Every key is optional; remove the ones you do not need to override.

documentation:
  # Choose the documentation flavour (swagger or openapi).
  open_api_specification: "swagger"
  title: "Crud Service"
  description: ""
  version: "0.0.0"

transformation:
  # Schema keywords that are internal to the service and never documented.
  internal_keywords:
    - "operationId"
  # Document identifier returned by responses.
  identifier:
    field: "_id"
    annotate: true
    example: "000000000000000000000000"
    pattern: "^[a-fA-F\\\\d]{24}$"
    description: "Hexadecimal identifier of the document in the collection"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template populated with the default settings."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
