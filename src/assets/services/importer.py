"""Bulk import of stock lines from comma-separated text.

Two row shapes are understood. A header with a ``Group name`` column
means one stock line per asset group; any other header is read as one
stock line per item. Cells are split on bare commas: quoted commas and
quoted newlines are not supported.
"""

import logging
import random
import re
import time
from dataclasses import dataclass, field
from datetime import date

from ..choices import DEFAULT_LOCATION, KIND_STOCK

logger = logging.getLogger(__name__)

SHAPE_GROUP = "group"
SHAPE_ITEM = "item"

GROUP_NAME_COLUMN = "Group name"
GROUP_QUANTITY_COLUMNS = ("Asset stock quantity",)
ITEM_NAME_COLUMNS = ("Name", "Item name", "Asset name")
ITEM_COST_COLUMNS = ("Cost", "Price")
ITEM_QUANTITY_COLUMNS = (
    "Quantity",
    "Stock quantity",
    "Asset stock quantity",
)
ITEM_CATEGORY = "General"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_LEADING_FLOAT = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+))")


@dataclass
class ParsedImport:
    """Rows ready for submission plus the lines that were dropped."""

    shape: str
    rows: list = field(default_factory=list)
    skipped: list = field(default_factory=list)


@dataclass
class ImportResult:
    imported: int = 0
    failed: list = field(default_factory=list)
    skipped: list = field(default_factory=list)


def split_line(line: str) -> list[str]:
    return [cell.strip().strip('"').strip() for cell in line.split(",")]


def parse_int(text) -> int:
    """Leading integer of ``text``; anything unparseable is 0."""
    match = _LEADING_INT.match(text or "")
    return int(match.group(1)) if match else 0


def parse_float(text) -> float:
    """Leading decimal number of ``text``; anything unparseable is 0."""
    match = _LEADING_FLOAT.match(text or "")
    return float(match.group(1)) if match else 0.0


def _column(headers, candidates):
    wanted = {c.lower() for c in candidates}
    for index, header in enumerate(headers):
        if header.lower() in wanted:
            return index
    return None


def _cell(cells, index):
    if index is None or index >= len(cells):
        return ""
    return cells[index]


def detect_shape(headers) -> str:
    if _column(headers, (GROUP_NAME_COLUMN,)) is not None:
        return SHAPE_GROUP
    return SHAPE_ITEM


def parse_import(text: str, today=None, rng=None) -> ParsedImport:
    """Parse delimited text into create-ready asset payloads.

    Rows without a name, or with a quantity of zero or less, are
    recorded in ``skipped`` as ``(line_number, reason)`` and not
    returned for submission.
    """
    today = today or date.today()
    rng = rng or random.Random()
    lines = (text or "").splitlines()
    if not lines:
        return ParsedImport(shape=SHAPE_ITEM)

    headers = split_line(lines[0])
    shape = detect_shape(headers)
    if shape == SHAPE_GROUP:
        name_col = _column(headers, (GROUP_NAME_COLUMN,))
        qty_col = _column(headers, GROUP_QUANTITY_COLUMNS)
        cost_col = None
    else:
        name_col = _column(headers, ITEM_NAME_COLUMNS)
        qty_col = _column(headers, ITEM_QUANTITY_COLUMNS)
        cost_col = _column(headers, ITEM_COST_COLUMNS)

    parsed = ParsedImport(shape=shape)
    for line_number, line in enumerate(lines[1:], start=2):
        if not line.strip():
            continue
        cells = split_line(line)
        name = _cell(cells, name_col)
        quantity = parse_int(_cell(cells, qty_col))
        if not name:
            parsed.skipped.append((line_number, "missing name"))
            continue
        if quantity <= 0:
            parsed.skipped.append(
                (line_number, f"{name}: quantity {quantity}")
            )
            continue
        price = 0
        if cost_col is not None:
            price = parse_float(_cell(cells, cost_col))
        parsed.rows.append(
            {
                "name": name,
                "category": name if shape == SHAPE_GROUP else ITEM_CATEGORY,
                "quantity": quantity,
                "kind": KIND_STOCK,
                "location": DEFAULT_LOCATION,
                "price": price,
                "purchaseDate": today.isoformat(),
                "serialNumber": f"STOCK-{rng.randrange(10000)}",
            }
        )
    return parsed


def run_import(rows, submit, delay=0.0, sleep=None) -> ImportResult:
    """Submit each row through ``submit`` independently.

    ``submit`` receives one payload and returns the created record, or
    None when the store could not be reached. A failing row is logged
    and the batch carries on. ``delay`` seconds are waited between
    consecutive submissions.
    """
    sleep = sleep or time.sleep
    result = ImportResult()
    for index, row in enumerate(rows):
        if index and delay:
            sleep(delay)
        try:
            record = submit(row)
        except Exception as exc:
            logger.warning("Failed to import %s: %s", row.get("name"), exc)
            result.failed.append(f"{row.get('name')}: {exc}")
            continue
        if record is None:
            logger.warning(
                "Failed to import %s: no response", row.get("name")
            )
            result.failed.append(f"{row.get('name')}: no response")
            continue
        result.imported += 1
        logger.info(
            "Imported: %s (Qty: %s)", row.get("name"), row.get("quantity")
        )
    return result


def import_text(text: str, submit, delay=0.0, sleep=None) -> ImportResult:
    """Parse ``text`` and submit every importable row."""
    parsed = parse_import(text)
    for line_number, reason in parsed.skipped:
        logger.info("Skipped line %s (%s)", line_number, reason)
    result = run_import(parsed.rows, submit, delay=delay, sleep=sleep)
    result.skipped = parsed.skipped
    return result
