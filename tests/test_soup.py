"""Tests for Soup construction: strings, streams and HTTP."""

import gc
import io
from unittest.mock import Mock

import pytest
import requests

from htmlsoup import Config, FetchError, Soup
from htmlsoup.utils.network import create_session, declared_encoding, fetch

EXPECTED_TEXT = (
    "The Dormouse's story\n"
    "\n"
    "The Dormouse's story\n"
    "\n"
    "Once upon a time there were three little sisters; and their names were\n"
    "Elsie,\n"
    "Lacie and\n"
    "Tillie;\n"
    "and they lived at the bottom of a well.\n"
    "\n"
    "...\n"
)


def make_response(content=b"<html><body><p>hi</p></body></html>", status_code=200,
                  content_type="text/html; charset=utf-8", url="http://example.com/"):
    response = Mock(spec=requests.Response)
    response.status_code = status_code
    response.content = content
    response.headers = {"Content-Type": content_type}
    response.encoding = "utf-8" if "charset" in content_type else "ISO-8859-1"
    response.url = url
    if status_code >= 400:
        error = requests.HTTPError(f"{status_code} Client Error", response=response)
        response.raise_for_status.side_effect = error
    return response


def make_session(response=None, error=None):
    session = Mock(spec=requests.Session)
    if error is not None:
        session.get.side_effect = error
    else:
        session.get.return_value = response
    return session


class TestSoup:

    def test_whole_document_text(self, soup):
        assert soup.text == EXPECTED_TEXT

    def test_str_renders_the_document(self):
        soup = Soup("<p>x</p>")
        assert str(soup) == "<html><head></head><body><p>x</p></body></html>"

    def test_empty_input(self):
        soup = Soup("")
        assert soup.text == ""
        assert [node.name for node in soup.tag(True).find_all()] == ["html", "head", "body"]

    def test_document_is_the_query_root(self, soup):
        assert soup.find() is soup.document
        assert soup.document.parent is None

    def test_repr(self):
        assert repr(Soup("", url="http://example.com/")) == "<Soup url='http://example.com/'>"

    def test_parents_live_as_long_as_the_soup(self):
        soup = Soup("<div><b>x</b></div>")
        b = soup.tag("b").find()
        assert b.parent.name == "div"

        del soup
        gc.collect()
        assert b.parent is None
        assert b.text == "x"


class TestFromReader:

    def test_binary_stream_with_encoding(self):
        reader = io.BytesIO("<p>café</p>".encode("latin-1"))
        soup = Soup.from_reader(reader, encoding="latin-1")
        assert soup.tag("p").find().text == "café"

    def test_text_stream(self, three_sisters_html):
        soup = Soup.from_reader(io.StringIO(three_sisters_html))
        assert soup.text == EXPECTED_TEXT

    def test_read_errors_propagate(self):
        reader = Mock()
        reader.read.side_effect = OSError("disk gone")
        with pytest.raises(OSError, match="disk gone"):
            Soup.from_reader(reader)


class TestFromUrl:

    def test_fetches_and_parses(self):
        session = make_session(make_response())
        soup = Soup.from_url("http://example.com/", session=session)

        session.get.assert_called_once_with("http://example.com/", timeout=30)
        assert soup.tag("p").find().text == "hi"
        assert soup.document.url == "http://example.com/"

    def test_timeout_from_config(self):
        session = make_session(make_response())
        config = Config(overrides={"http": {"timeout": 5}})
        Soup.from_url("http://example.com/", session=session, config=config)
        session.get.assert_called_once_with("http://example.com/", timeout=5)

    def test_final_url_after_redirect(self):
        response = make_response(url="http://example.com/final")
        soup = Soup.from_url("http://example.com/start", session=make_session(response))
        assert soup.document.url == "http://example.com/final"

    def test_http_error(self):
        session = make_session(make_response(status_code=404))
        with pytest.raises(FetchError) as excinfo:
            Soup.from_url("http://example.com/missing", session=session)
        assert excinfo.value.status_code == 404
        assert excinfo.value.url == "http://example.com/missing"
        assert isinstance(excinfo.value.__cause__, requests.HTTPError)

    def test_connection_error(self):
        error = requests.ConnectionError("refused")
        session = make_session(error=error)
        with pytest.raises(FetchError) as excinfo:
            Soup.from_url("http://example.com/", session=session)
        assert excinfo.value.status_code is None
        assert excinfo.value.__cause__ is error


class TestNetwork:

    def test_create_session(self):
        session = create_session()
        adapter = session.get_adapter("https://example.com/")
        assert adapter.max_retries.total == 3
        assert session.headers["User-Agent"].startswith("htmlsoup/")

    def test_create_session_from_config(self):
        config = Config(overrides={"http": {"retries": 1, "user_agent": "test-agent"}})
        session = create_session(config)
        assert session.get_adapter("http://example.com/").max_retries.total == 1
        assert session.headers["User-Agent"] == "test-agent"

    def test_declared_encoding(self):
        assert declared_encoding(make_response()) == "utf-8"
        assert declared_encoding(make_response(content_type="text/html")) is None

    def test_fetch_result(self):
        result = fetch("http://example.com/", session=make_session(make_response()))
        assert result.status_code == 200
        assert result.encoding == "utf-8"
        assert result.content.startswith(b"<html>")
