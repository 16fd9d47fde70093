# utils/row_extractor.py
# ===================================================================
# Turns the data rows of one table into validated Records.
# Rows that fail validation are dropped without raising.
# ===================================================================
import re
from typing import List, Optional, Sequence

from bs4 import Tag

from ..models import FIELD_ACTOR, FIELD_DATE, FIELD_LOCATION, FIELD_VALUE, HeaderMapping, Record
from .header_classifier import is_complete
from .html_scanner import get_cell_texts, get_table_rows
from .shared_logger import log_trace, logger

# First number in the cell; anything before it (signs included) is ignored.
LEADING_NUMBER_RE = re.compile(r"\d+(?:\.\d+)?")


def parse_leading_number(text: str) -> float:
    """
    Return the first decimal number in ``text``, or 0.0 when there is none.

    >>> parse_leading_number("2.06 m (6 ft 9 in)")
    2.06
    """
    match = LEADING_NUMBER_RE.search(text or "")
    if not match:
        return 0.0
    return float(match.group(0))


def _cell(cells: Sequence[str], idx: int) -> str:
    if 0 <= idx < len(cells):
        return (cells[idx] or "").strip()
    return ""


def build_record(cells: Sequence[str], mapping: HeaderMapping) -> Optional[Record]:
    """Record for one row of cell texts, or None if the row fails validation."""
    value = parse_leading_number(_cell(cells, mapping[FIELD_VALUE]))
    actor = _cell(cells, mapping[FIELD_ACTOR])
    observed_at = _cell(cells, mapping[FIELD_DATE])
    location = _cell(cells, mapping[FIELD_LOCATION])
    if value > 0 and actor and observed_at and location:
        return Record(observed_value=value, actor=actor, observed_at=observed_at, location=location)
    log_trace(f"[ROW EXTRACTOR] Dropped row {list(cells)}")
    return None


def extract_from_cells(rows: Sequence[Sequence[str]], mapping: HeaderMapping) -> List[Record]:
    """Validated Records from already-read data rows, in order."""
    if not is_complete(mapping):
        return []
    records = []
    for cells in rows:
        record = build_record(cells, mapping)
        if record is not None:
            records.append(record)
    return records


def extract(table: Tag, mapping: HeaderMapping, header_row_index: int = 0) -> List[Record]:
    """
    Extract Records from every row after ``header_row_index``.

    An incomplete mapping yields an empty list without touching the rows.
    """
    if not is_complete(mapping):
        logger.debug(f"[ROW EXTRACTOR] Incomplete header mapping {mapping}; skipping table.")
        return []
    rows = get_table_rows(table)[header_row_index + 1:]
    records = extract_from_cells([get_cell_texts(row) for row in rows], mapping)
    logger.debug(f"[ROW EXTRACTOR] Kept {len(records)} of {len(rows)} data row(s).")
    return records
