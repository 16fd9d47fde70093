import itertools

import pytest
from bs4 import BeautifulSoup

from conftest import HEADER
from record_scraper.parser.models import FIELD_ACTOR, FIELD_DATE, FIELD_LOCATION, FIELD_VALUE, Record
from record_scraper.parser.utils.header_classifier import classify
from record_scraper.parser.utils.row_extractor import build_record, extract, parse_leading_number

MAPPING = {FIELD_VALUE: 0, FIELD_ACTOR: 1, FIELD_DATE: 2, FIELD_LOCATION: 3}


@pytest.mark.parametrize("text, expected", [
    ("2.06 m (6 ft 9 in)", 2.06),
    ("1.46", 1.46),
    ("1.46 m (4 ft 9+1⁄4 in)", 1.46),
    ("≈ 2 m", 2.0),
    ("no data", 0.0),
    ("", 0.0),
    ("0.00 m", 0.0),
    ("-1.5 m", 1.5),
    ("−2.06 m", 2.06),
])
def test_parse_leading_number(text, expected):
    assert parse_leading_number(text) == pytest.approx(expected)


def test_end_to_end_row(soup_table):
    table = soup_table(HEADER, [["1.46 m (4 ft 9+1⁄4 in)", "Jane Doe", "12 June 1932", "Los Angeles"]])
    records = extract(table, classify(HEADER))
    assert records == [Record(1.46, "Jane Doe", "12 June 1932", "Los Angeles")]


def test_incomplete_mapping_returns_empty(soup_table):
    table = soup_table(HEADER, [["1.46 m", "Jane Doe", "12 June 1932", "Los Angeles"]])
    mapping = dict(MAPPING)
    del mapping[FIELD_LOCATION]
    assert extract(table, mapping) == []


def test_row_zero_is_always_skipped(soup_table):
    # A header row that happens to parse as a valid row must not become a record.
    table = soup_table(["1.00 mark", "athlete x", "date y", "venue z"], [["2.00", "B", "1990", "Rome"]])
    records = extract(table, MAPPING)
    assert [r.actor for r in records] == ["B"]


def test_short_rows_are_dropped(soup_table):
    table = soup_table(HEADER, [["2.00 m", "A", "1990"], ["2.01 m", "B", "1991", "Rome"]])
    assert [r.actor for r in extract(table, MAPPING)] == ["B"]


def test_document_order_preserved_without_dedup(soup_table):
    rows = [["2.01", "B", "1991", "Rome"], ["2.00", "A", "1990", "Oslo"], ["2.01", "B", "1991", "Rome"]]
    records = extract(soup_table(HEADER, rows), MAPPING)
    assert [r.observed_value for r in records] == [2.01, 2.00, 2.01]


def test_cells_are_trimmed(soup_table):
    table = soup_table(HEADER, [["  1.80 m ", "  Ann  Lee ", "\n 1 May 1950 ", " Paris\n"]])
    assert extract(table, MAPPING) == [Record(1.80, "Ann Lee", "1 May 1950", "Paris")]


def test_header_row_index_moves_start(soup_table):
    table = soup_table(HEADER, [["note row"], ["2.00", "A", "1990", "Oslo"]])
    assert len(extract(table, MAPPING, header_row_index=1)) == 1


def test_nested_tables_do_not_contribute_rows():
    html = (
        '<table class="wikitable"><tr><th>Mark</th><th>Athlete</th><th>Date</th><th>Venue</th></tr>'
        '<tr><td>2.00</td><td>A</td><td>1990</td><td><table><tr><td>9.99</td><td>X</td><td>Y</td><td>Z</td></tr></table>Oslo</td></tr>'
        "</table>"
    )
    table = BeautifulSoup(html, "html.parser").find("table")
    records = extract(table, MAPPING)
    assert len(records) == 1
    assert records[0].actor == "A"


VALUES = ["2.00 m", "0.00 m", "-1.5", "no data", ""]
TEXTS = ["Someone", "", "   "]


@pytest.mark.parametrize("value, actor, date, venue", list(itertools.product(VALUES, TEXTS, TEXTS, TEXTS)))
def test_filter_correctness(value, actor, date, venue):
    record = build_record([value, actor, date, venue], MAPPING)
    expected = parse_leading_number(value) > 0 and all(t.strip() for t in (actor, date, venue))
    assert (record is not None) == expected
    if record is not None:
        assert record.observed_value > 0
        assert record.actor == actor.strip()


def test_record_is_immutable():
    record = Record(1.0, "A", "B", "C")
    with pytest.raises(AttributeError):
        record.actor = "Z"
