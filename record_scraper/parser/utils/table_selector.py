"""
table_selector.py

Picks the table on a page that yields the most Records.

Every candidate table (matching the marker class) is classified and
extracted in document order; the largest result wins, and the earliest
table wins a tie. A page with no usable table returns an empty list.
"""

from typing import List, Mapping, Optional, Sequence, Tuple, Union

from bs4 import BeautifulSoup, Tag

from ..config import HEADER_ROW_STRATEGY, MAX_TABLES, TABLE_MARKER
from ..models import HeaderMapping, Record
from .header_classifier import classify, is_complete
from .html_scanner import find_candidate_tables, get_cell_texts, get_table_rows, load_document
from .row_extractor import extract
from .shared_logger import log_debug, logger

HEADER_STRATEGIES = ("first", "detect")


def locate_header(rows: Sequence[Sequence[str]], field_keywords=None, strategy: str = "first") -> Tuple[int, HeaderMapping]:
    """
    Choose the header row of a table.

    "first" always uses row 0. "detect" uses the first row whose
    classification covers every field, falling back to row 0.
    """
    if not rows:
        return 0, {}
    if strategy == "detect":
        for idx, cells in enumerate(rows):
            mapping = classify(cells, field_keywords)
            if is_complete(mapping):
                return idx, mapping
    return 0, classify(rows[0], field_keywords)


def evaluate_table(table: Tag, field_keywords=None, header_strategy: str = "first") -> List[Record]:
    """Classify and extract a single candidate table."""
    rows = [get_cell_texts(row) for row in get_table_rows(table)]
    header_idx, mapping = locate_header(rows, field_keywords, header_strategy)
    if not is_complete(mapping):
        logger.debug(f"[TABLE SELECTOR] Header {rows[header_idx] if rows else []} maps only {sorted(mapping)}.")
        return []
    return extract(table, mapping, header_idx)


def select_best(
    document: Union[str, bytes, BeautifulSoup],
    table_marker: Optional[str] = TABLE_MARKER,
    field_keywords: Optional[Mapping[str, Tuple[str, ...]]] = None,
    header_strategy: str = HEADER_ROW_STRATEGY,
    max_tables: Optional[int] = MAX_TABLES,
) -> List[Record]:
    """
    Return the Records of the best candidate table, or [] if none yields any.

    Args:
        document: Parsed document or raw HTML.
        table_marker: CSS class identifying candidate tables; empty means all tables.
        field_keywords: Keyword sets per field (see keyword_library).
        header_strategy: "first" or "detect".
        max_tables: Optional cap on the number of candidate tables evaluated.

    Raises:
        DocumentParseError: If raw HTML cannot be parsed.
    """
    if header_strategy not in HEADER_STRATEGIES:
        raise ValueError(f"Unknown header strategy '{header_strategy}'. Expected one of {HEADER_STRATEGIES}.")
    soup = load_document(document)
    tables = find_candidate_tables(soup, table_marker)
    if max_tables:
        tables = tables[:max_tables]

    best: List[Record] = []
    best_idx = None
    for idx, table in enumerate(tables):
        records = evaluate_table(table, field_keywords, header_strategy)
        log_debug(f"[TABLE SELECTOR] Table {idx}: {len(records)} valid record(s).")
        if len(records) > len(best):
            best, best_idx = records, idx

    if best_idx is None:
        logger.info(f"[TABLE SELECTOR] No table among {len(tables)} candidate(s) yielded records.")
    else:
        logger.info(f"[TABLE SELECTOR] Selected table {best_idx} of {len(tables)} with {len(best)} record(s).")
    return best
