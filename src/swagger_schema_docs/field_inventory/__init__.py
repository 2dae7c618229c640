"""Field inventory exports."""

from .constants import DOCUMENT_SHEET_NAME, FIELD_COLUMNS, FIELDS_SHEET_NAME, LOCATION_COLUMNS
from .inventory_workbook_builder import generate_inventory_workbook

__all__ = [
    "FIELDS_SHEET_NAME",
    "DOCUMENT_SHEET_NAME",
    "LOCATION_COLUMNS",
    "FIELD_COLUMNS",
    "generate_inventory_workbook",
]
