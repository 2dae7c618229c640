"""Shared field inventory constants."""

from __future__ import annotations

FIELDS_SHEET_NAME = "Fields"
DOCUMENT_SHEET_NAME = "Document"

LOCATION_COLUMNS: tuple[str, ...] = ("Route", "Section")
FIELD_COLUMNS: tuple[str, ...] = ("Path", "Type", "Description", "Example")
