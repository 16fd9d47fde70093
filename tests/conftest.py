import pytest
from bs4 import BeautifulSoup

HEADER = ["Mark", "Athlete", "Date", "Venue"]


def table_html(headers, rows, marker="wikitable", header_tag="th"):
    head = "".join(f"<{header_tag}>{h}</{header_tag}>" for h in headers)
    body = "".join("<tr>" + "".join(f"<td>{c}</td>" for c in row) + "</tr>" for row in rows)
    cls = f' class="{marker}"' if marker else ""
    return f"<table{cls}><tr>{head}</tr>{body}</table>"


def page_html(*tables):
    return "<html><body>" + "".join(tables) + "</body></html>"


def valid_rows(n, start=1.0):
    return [[f"{start + i / 100:.2f} m", f"Athlete {i}", f"{i + 1} June 1932", f"City {i}"] for i in range(n)]


@pytest.fixture
def soup_table():
    def _build(headers, rows):
        return BeautifulSoup(table_html(headers, rows), "html.parser").find("table")
    return _build
