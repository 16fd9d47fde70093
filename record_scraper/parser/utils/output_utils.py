import csv
import io
import os
from datetime import datetime
from urllib.parse import unquote, urlparse

from ..config import OUTPUT_DIR
from ..models import FIELD_DATE, FIELD_VALUE, RECORD_FIELDS
from .shared_logger import rprint


def safe_join(base, *paths):
    """
    Safely join paths and ensure the result is inside base.
    Prevents path traversal and path-injection.
    """
    base = os.path.abspath(base)
    path = os.path.abspath(os.path.join(base, *paths))
    if os.path.commonpath([base, path]) != base:
        raise ValueError("Unsafe path detected.")
    return path

def safe_filename(s):
    return "".join(c if c.isalnum() or c in "_-" else "_" for c in str(s)).strip("_") or "results"

def format_timestamp(fmt="%Y%m%d_%H%M%S"):
    return datetime.now().strftime(fmt)

def records_to_rows(records):
    return [record.to_dict() for record in records]

def records_to_csv(records):
    """CSV text with a header row of the record field names."""
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=list(RECORD_FIELDS), lineterminator="\n")
    writer.writeheader()
    for row in records_to_rows(records):
        writer.writerow(row)
    return buffer.getvalue()

def records_to_chart_series(records):
    """Category labels (observed_at) and plotted values (observed_value), in record order."""
    return {
        "labels": [record.observed_at for record in records],
        "values": [record.observed_value for record in records],
        "fields": {"label": FIELD_DATE, "value": FIELD_VALUE},
    }

def output_name_for_url(url):
    """File stem derived from the last path segment of a page URL."""
    parsed = urlparse(url or "")
    segment = unquote(parsed.path.rstrip("/").rsplit("/", 1)[-1]) if parsed.path else ""
    return safe_filename(segment or parsed.netloc or "results")

def write_records_csv(records, url, output_dir=None, timestamp=None):
    """
    Write records to <output_dir>/<page>_<timestamp>.csv and return the path.
    """
    output_root = output_dir or OUTPUT_DIR
    os.makedirs(output_root, exist_ok=True)
    filename = f"{output_name_for_url(url)}_{timestamp or format_timestamp()}.csv"
    filepath = safe_join(output_root, filename)
    with open(filepath, "w", newline="", encoding="utf-8") as f:
        f.write(records_to_csv(records))
    rprint(f"[bold green][OUTPUT][/bold green] Wrote [bold]{len(records)}[/bold] rows to:\n  [cyan]{filepath}[/cyan]")
    return filepath
