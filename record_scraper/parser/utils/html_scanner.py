"""
html_scanner.py

DOM helpers for the record extraction pipeline.

This module owns every direct touch of BeautifulSoup:
- Parsing raw HTML into a document (the only place a parse failure is raised)
- Enumerating candidate tables by their structural marker class
- Walking a table's own rows and reading normalized cell text

Header classification, row extraction and table selection work on the
plain strings returned from here.
"""

import re
from typing import List, Optional, Union

from bs4 import BeautifulSoup, Comment, NavigableString, Tag
from bs4.builder import ParserRejectedMarkup

from ..config import HTML_PARSER
from .shared_logger import log_trace, logger

FOOTNOTE_RE = re.compile(r"\[\s*(?:\d+|[a-z]|[ivx]+|note\s*\d+|nb\s*\d+|citation needed)\s*\]", re.IGNORECASE)
WHITESPACE_RE = re.compile(r"\s+")
SKIPPED_TAGS = {"script", "style", "template"}


class DocumentParseError(ValueError):
    """Raised when the input cannot be parsed as an HTML document at all."""
    pass


def load_document(html: Union[str, bytes, BeautifulSoup], parser: Optional[str] = None) -> BeautifulSoup:
    """
    Parse raw HTML into a BeautifulSoup document.
    An already-parsed document is returned unchanged. Empty markup is a valid,
    empty document; only unusable input raises DocumentParseError.
    """
    if isinstance(html, BeautifulSoup):
        return html
    if not isinstance(html, (str, bytes)):
        raise DocumentParseError(f"Expected HTML text, got {type(html).__name__}.")
    try:
        return BeautifulSoup(html, parser or HTML_PARSER)
    except ParserRejectedMarkup as e:
        logger.error(f"[HTML SCANNER] Parser rejected markup: {e}")
        raise DocumentParseError(str(e)) from e


def find_candidate_tables(soup: BeautifulSoup, marker: Optional[str]) -> List[Tag]:
    """Return every <table> carrying the marker class, in document order. An empty marker matches all tables."""
    if not marker:
        tables = soup.find_all("table")
    else:
        tables = soup.find_all("table", class_=marker)
    logger.debug(f"[HTML SCANNER] Found {len(tables)} candidate table(s) for marker '{marker or '*'}'.")
    return tables


def get_table_rows(table: Tag) -> List[Tag]:
    """Rows belonging to this table, skipping rows of nested tables."""
    return [row for row in table.find_all("tr") if row.find_parent("table") is table]


def _is_hidden(node: Tag, stop: Tag) -> bool:
    for parent in node.parents:
        if parent is stop or parent is None:
            return False
        if parent.name in SKIPPED_TAGS:
            return True
        if parent.name == "sup" and "reference" in (parent.get("class") or []):
            return True
        style = (parent.get("style") or "").replace(" ", "").lower()
        if "display:none" in style:
            return True
    return False


def clean_cell_text(cell: Tag) -> str:
    """
    Visible text of a cell with footnote markers removed and whitespace collapsed.
    Reads the tree without modifying it.
    """
    parts = []
    for node in cell.descendants:
        if not isinstance(node, NavigableString) or isinstance(node, Comment):
            continue
        if _is_hidden(node, cell):
            continue
        parts.append(str(node))
    text = FOOTNOTE_RE.sub("", "".join(parts))
    return WHITESPACE_RE.sub(" ", text).strip()


def get_cell_texts(row: Tag) -> List[str]:
    """Cleaned text of each <th>/<td> directly inside the row, left to right."""
    cells = [clean_cell_text(cell) for cell in row.find_all(["th", "td"], recursive=False)]
    log_trace(f"[HTML SCANNER] Row cells: {cells}")
    return cells
