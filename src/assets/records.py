"""Field-name mapping between persisted records and in-memory assets.

Records on the wire carry the persisted column names (``serial_number``,
``assigned_to``). Request bodies and the client's in-memory assets use the
compound camelCase names (``serialNumber``, ``assignedTo``). Both directions
live here so the endpoint and the client agree on one table.
"""

from datetime import date, datetime
from decimal import Decimal

# in-memory name -> persisted column name
FIELD_COLUMNS = {
    "id": "id",
    "name": "name",
    "category": "category",
    "serialNumber": "serial_number",
    "status": "status",
    "assignedTo": "assigned_to",
    "price": "price",
    "purchaseDate": "purchase_date",
    "location": "location",
    "quantity": "quantity",
    "kind": "kind",
}

COLUMN_FIELDS = {column: field for field, column in FIELD_COLUMNS.items()}

# Accepted in request bodies in place of the canonical name
FIELD_ALIASES = {
    "type": "kind",
}


def _wire_value(value):
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return value


def to_record(asset) -> dict:
    """Serialise a stored asset to a persisted-name record."""
    return {
        column: _wire_value(getattr(asset, column))
        for column in FIELD_COLUMNS.values()
    }


def from_record(record: dict) -> dict:
    """Map a persisted-name record to the in-memory field names.

    Unknown keys are dropped. Missing text fields come back as empty
    strings so that search can treat every field as text.
    """
    asset = {}
    for column, field in COLUMN_FIELDS.items():
        value = record.get(column, record.get(field))
        if value is None and field in ("serialNumber", "assignedTo"):
            value = ""
        asset[field] = value
    return asset


def normalize_payload(payload: dict) -> dict:
    """Map a request body to persisted column names.

    Accepts camelCase names, persisted snake_case names, and the
    aliases in ``FIELD_ALIASES``. Keys that name no known field are
    dropped; a key that is present with an empty value is kept, since
    presence matters to update-mode selection.
    """
    normalized = {}
    for key, value in payload.items():
        key = FIELD_ALIASES.get(key, key)
        if key in FIELD_COLUMNS:
            normalized[FIELD_COLUMNS[key]] = value
        elif key in COLUMN_FIELDS:
            normalized[key] = value
    return normalized


def to_payload(fields: dict) -> dict:
    """Map in-memory fields to a request body, dropping unknown keys."""
    return {
        key: _wire_value(value)
        for key, value in fields.items()
        if key in FIELD_COLUMNS or key == "mode"
    }
