import pytest
import requests

from record_scraper.parser.utils.download_utils import FetchError, InvalidURLError, fetch_page, validate_url


class FakeResponse:
    def __init__(self, status_code=200, text="<html></html>"):
        self.status_code = status_code
        self.text = text
        self.content = text.encode("utf-8")

    @property
    def ok(self):
        return 200 <= self.status_code < 400


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def get(self, url, headers=None, timeout=None):
        self.calls.append((url, headers, timeout))
        if self.error:
            raise self.error
        return self.response


def test_fetch_page_returns_text_and_sends_user_agent():
    session = FakeSession(FakeResponse(text="<table></table>"))
    assert fetch_page("https://example.org/wiki/Page", timeout=3, session=session) == "<table></table>"
    url, headers, timeout = session.calls[0]
    assert url == "https://example.org/wiki/Page"
    assert headers["User-Agent"].startswith("Mozilla/5.0")
    assert timeout == 3


def test_non_2xx_raises_with_status():
    with pytest.raises(FetchError) as excinfo:
        fetch_page("https://example.org/missing", session=FakeSession(FakeResponse(status_code=404)))
    assert excinfo.value.status_code == 404


def test_network_error_raises_fetch_error():
    session = FakeSession(error=requests.ConnectionError("refused"))
    with pytest.raises(FetchError) as excinfo:
        fetch_page("https://example.org/", session=session)
    assert excinfo.value.status_code is None
    assert not isinstance(excinfo.value, InvalidURLError)


@pytest.mark.parametrize("url", ["", "ftp://example.org/x", "example.org/page", None])
def test_invalid_urls_rejected_before_request(url):
    session = FakeSession(FakeResponse())
    with pytest.raises(InvalidURLError):
        fetch_page(url, session=session)
    assert session.calls == []


def test_validate_url_strips_whitespace():
    assert validate_url("  https://example.org/a ") == "https://example.org/a"
