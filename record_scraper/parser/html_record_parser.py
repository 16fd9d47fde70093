# ============================================================
# Record Progression Scraper: HTML Record Parser Pipeline
# ============================================================
#
# Fetches a page, picks the table that yields the most records and
# converts its rows into Records. Also the command-line entry point:
#
#   record-scraper https://en.wikipedia.org/wiki/Men%27s_high_jump_world_record_progression
#
# With no URL arguments the URLs are read from urls.txt.
# ============================================================

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config import HEADER_ROW_STRATEGY, MAX_TABLES, OUTPUT_DIR, TABLE_MARKER, URL_LIST_FILE
from .models import RECORD_FIELDS, Record
from .utils.download_utils import fetch_page
from .utils.keyword_library import load_field_keywords
from .utils.output_utils import write_records_csv
from .utils.shared_logger import log_error, log_info, log_warning
from .utils.table_selector import select_best

console = Console()


def scrape_html(html, table_marker=TABLE_MARKER, field_keywords=None, header_strategy=HEADER_ROW_STRATEGY, max_tables=MAX_TABLES) -> List[Record]:
    """Records from raw HTML. Keyword sets default to the configured library."""
    if field_keywords is None:
        field_keywords = load_field_keywords()
    return select_best(
        html,
        table_marker=table_marker,
        field_keywords=field_keywords,
        header_strategy=header_strategy,
        max_tables=max_tables,
    )


def scrape_url(url, timeout=None, **options) -> List[Record]:
    """
    Fetch ``url`` and extract its records.
    FetchError and DocumentParseError propagate; an empty list means no usable table.
    """
    html = fetch_page(url, timeout=timeout)
    records = scrape_html(html, **options)
    if records:
        log_info(f"[PARSER] {len(records)} record(s) extracted from {url}")
    else:
        log_warning(f"[PARSER] No records found on {url}")
    return records


# --- Utility: Load URLs from file ---
def load_urls(path=URL_LIST_FILE) -> List[str]:
    path = Path(path)
    if not path.exists():
        return []
    urls = []
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if line and not line.startswith("#"):
            urls.append(line)
    return urls


def render_records(url, records: List[Record], limit=20):
    table = Table(title=f"{len(records)} record(s) from {url}", show_lines=False)
    for field in RECORD_FIELDS:
        table.add_column(field, justify="right" if field == "observed_value" else "left")
    for record in records[:limit]:
        table.add_row(f"{record.observed_value:g}", escape(record.actor), escape(record.observed_at), escape(record.location))
    if len(records) > limit:
        table.caption = f"... {len(records) - limit} more row(s)"
    console.print(table)


def build_arg_parser():
    parser = argparse.ArgumentParser(
        prog="record-scraper",
        description="Extract record-progression tables (value, athlete, date, venue) from web pages.",
    )
    parser.add_argument("urls", nargs="*", help="Page URLs. Defaults to the entries in urls.txt.")
    parser.add_argument("--marker", default=TABLE_MARKER, help="CSS class of candidate tables ('' for all tables).")
    parser.add_argument("--detect-header", action="store_true", help="Use the first fully-matching row as header instead of row 0.")
    parser.add_argument("--keywords", default=None, help="JSON file with extra header keywords per field.")
    parser.add_argument("--output-dir", default=OUTPUT_DIR, help="Folder for CSV output.")
    parser.add_argument("--no-csv", action="store_true", help="Print records without writing CSV files.")
    parser.add_argument("--workers", type=int, default=2, help="Pages fetched in parallel.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    from .web_pipeline import scrape_urls

    args = build_arg_parser().parse_args(argv)
    urls = args.urls or load_urls()
    if not urls:
        log_error("[PARSER] No URLs given and urls.txt is empty or missing.")
        return 1

    options = {
        "table_marker": args.marker,
        "field_keywords": load_field_keywords(args.keywords) if args.keywords else None,
        "header_strategy": "detect" if args.detect_header else HEADER_ROW_STRATEGY,
    }
    results = scrape_urls(urls, output_callback=lambda line: console.print(line, markup=False), max_workers=args.workers, **options)

    succeeded = 0
    for url in urls:
        records = results.get(url)
        if records is None:
            continue
        succeeded += 1
        if not records:
            continue
        render_records(url, records)
        if not args.no_csv:
            write_records_csv(records, url, output_dir=args.output_dir)
    return 0 if succeeded else 1


if __name__ == "__main__":
    sys.exit(main())
