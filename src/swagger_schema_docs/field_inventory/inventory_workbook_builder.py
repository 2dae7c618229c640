"""Excel field inventory generation service."""

from __future__ import annotations

import hashlib
import json
from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import Any

from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from swagger_schema_docs.schema_management.schema_models import (
    REQUEST_SECTIONS,
    RESPONSE_SECTION,
)
from swagger_schema_docs.schema_management.schema_projection import flatten_schema

from .constants import DOCUMENT_SHEET_NAME, FIELD_COLUMNS, FIELDS_SHEET_NAME, LOCATION_COLUMNS

_InventoryRow = tuple[str, str, str, str, str | None, str | None]


def generate_inventory_workbook(document: Mapping[str, Any], output_path: Path | str) -> int:
    """Write one row per documented field of every route; return the row count."""
    workbook = Workbook()
    sheet = workbook.active
    if sheet is None:
        raise RuntimeError("Workbook active sheet is not available.")
    assert isinstance(sheet, Worksheet)
    sheet.title = FIELDS_SHEET_NAME

    all_columns = list(LOCATION_COLUMNS + FIELD_COLUMNS)
    _write_group_headers(sheet, len(LOCATION_COLUMNS), len(FIELD_COLUMNS))
    for column_index, name in enumerate(all_columns, start=1):
        sheet.cell(row=2, column=column_index, value=name)
        sheet.column_dimensions[get_column_letter(column_index)].width = 24

    row_count = 0
    for row_index, row in enumerate(_inventory_rows(document.get("routes") or {}), start=3):
        for column_index, value in enumerate(row, start=1):
            sheet.cell(row=row_index, column=column_index, value=value)
        row_count += 1

    _write_document_sheet(workbook, document)

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(output_path)
    return row_count


def _inventory_rows(routes: Mapping[str, Any]) -> Iterator[_InventoryRow]:
    for url, schema in routes.items():
        for section, node in _route_sections(schema):
            for field in flatten_schema(node):
                yield (
                    url,
                    section,
                    field.path,
                    _describe_type(field.definition),
                    _definition_text(field.definition, "description"),
                    _example_text(field.definition),
                )


def _route_sections(schema: Mapping[str, Any]) -> Iterator[tuple[str, Any]]:
    for section in REQUEST_SECTIONS:
        if section in schema:
            yield section, schema[section]
    for status_code, node in (schema.get(RESPONSE_SECTION) or {}).items():
        yield f"{RESPONSE_SECTION}.{status_code}", node


def _describe_type(definition: Any) -> str:
    if isinstance(definition, bool):
        return "any" if definition else "never"
    node_type = definition.get("type")
    if isinstance(node_type, list):
        return " | ".join(str(item) for item in node_type)
    return str(node_type) if node_type else "any"


def _definition_text(definition: Any, key: str) -> str | None:
    if not isinstance(definition, Mapping):
        return None
    value = definition.get(key)
    return None if value is None else str(value)


def _example_text(definition: Any) -> str | None:
    if not isinstance(definition, Mapping):
        return None
    examples = definition.get("examples")
    if isinstance(examples, list) and examples:
        example = examples[0]
        return example if isinstance(example, str) else json.dumps(example)
    return None


def _write_group_headers(sheet, location_count: int, field_count: int) -> None:
    groups = [
        ("Location", 1, location_count),
        ("Field", location_count + 1, field_count),
    ]
    for label, start_column, count in groups:
        end_column = start_column + count - 1
        start_letter = get_column_letter(start_column)
        end_letter = get_column_letter(end_column)
        sheet.merge_cells(f"{start_letter}1:{end_letter}1")
        sheet[f"{start_letter}1"].value = label
        sheet[f"{start_letter}1"].style = "Headline 1"


def _write_document_sheet(workbook: Workbook, document: Mapping[str, Any]) -> None:
    sheet = workbook.create_sheet(DOCUMENT_SHEET_NAME)
    info = document.get("info") or {}
    document_hash = hashlib.sha256(
        json.dumps(document, sort_keys=True, default=str).encode("utf-8")
    ).hexdigest()
    entries = [
        ("open_api_specification", document.get("openApiSpecification", "")),
        ("title", info.get("title", "")),
        ("version", info.get("version", "")),
        ("route_count", len(document.get("routes") or {})),
        ("document_hash", document_hash),
    ]
    for row_index, (key, value) in enumerate(entries, start=1):
        sheet.cell(row=row_index, column=1, value=key)
        sheet.cell(row=row_index, column=2, value=value)
