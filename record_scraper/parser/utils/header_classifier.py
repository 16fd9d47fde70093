# utils/header_classifier.py
# ===================================================================
# Maps a table's header cells to record fields by keyword substring.
# ===================================================================
from typing import Mapping, Optional, Sequence, Tuple

from ..models import RECORD_FIELDS, HeaderMapping
from .keyword_library import DEFAULT_FIELD_KEYWORDS
from .shared_logger import log_trace


def classify(header_cells: Sequence[str], field_keywords: Optional[Mapping[str, Tuple[str, ...]]] = None) -> HeaderMapping:
    """
    Build a field -> column index mapping from header cell text.

    Args:
        header_cells: Text of each header cell, left to right.
        field_keywords: Keyword substrings per field. Defaults to DEFAULT_FIELD_KEYWORDS.

    Returns:
        HeaderMapping: Only fields whose keyword appears in some cell. The
        lowest matching index wins; later duplicates are ignored.
    """
    keywords = field_keywords or DEFAULT_FIELD_KEYWORDS
    mapping: HeaderMapping = {}
    for idx, cell in enumerate(header_cells):
        text = (cell or "").strip().lower()
        if not text:
            continue
        for field in RECORD_FIELDS:
            if field in mapping:
                continue
            if any(kw and kw.lower() in text for kw in keywords.get(field, ())):
                mapping[field] = idx
    log_trace(f"[HEADER CLASSIFIER] {list(header_cells)} -> {mapping}")
    return mapping


def is_complete(mapping: HeaderMapping) -> bool:
    return all(field in mapping for field in RECORD_FIELDS)
