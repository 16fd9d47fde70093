import csv
import io
import os

import pytest

from record_scraper.parser.models import Record
from record_scraper.parser.utils.output_utils import (
    output_name_for_url,
    records_to_chart_series,
    records_to_csv,
    records_to_rows,
    safe_join,
    write_records_csv,
)

RECORDS = [
    Record(1.46, "Jane Doe", "12 June 1932", "Los Angeles"),
    Record(1.48, "Ann, Lee", "3 May 1934", "Paris"),
]


def test_rows_use_field_names():
    assert records_to_rows(RECORDS)[0] == {
        "observed_value": 1.46,
        "actor": "Jane Doe",
        "observed_at": "12 June 1932",
        "location": "Los Angeles",
    }


def test_csv_has_header_and_quotes_commas():
    rows = list(csv.reader(io.StringIO(records_to_csv(RECORDS))))
    assert rows[0] == ["observed_value", "actor", "observed_at", "location"]
    assert rows[2] == ["1.48", "Ann, Lee", "3 May 1934", "Paris"]


def test_csv_of_no_records_is_header_only():
    assert records_to_csv([]) == "observed_value,actor,observed_at,location\n"


def test_chart_series_keeps_order():
    series = records_to_chart_series(RECORDS)
    assert series["labels"] == ["12 June 1932", "3 May 1934"]
    assert series["values"] == [1.46, 1.48]


def test_output_name_for_url():
    url = "https://en.wikipedia.org/wiki/Women%27s_high_jump_world_record_progression"
    assert output_name_for_url(url) == "Women_s_high_jump_world_record_progression"
    assert output_name_for_url("https://example.org/") == "example_org"


def test_write_records_csv(tmp_path):
    path = write_records_csv(RECORDS, "https://example.org/wiki/Page", output_dir=str(tmp_path), timestamp="20240101_000000")
    assert os.path.basename(path) == "Page_20240101_000000.csv"
    with open(path, encoding="utf-8") as f:
        assert f.read() == records_to_csv(RECORDS)


def test_safe_join_rejects_traversal(tmp_path):
    with pytest.raises(ValueError):
        safe_join(str(tmp_path), "..", "escape.csv")
