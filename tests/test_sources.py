"""URL source reading tests."""

import io

import pytest

from titlefetch.errors import InputError
from titlefetch.sources import load_urls, parse_urls, read_source


def test_blank_and_whitespace_lines_are_dropped():
    contents = "\nhttp://a.test\n   \n\t\nhttp://b.test\n\n  http://c.test  \n"
    assert parse_urls(contents) == ["http://a.test", "http://b.test", "http://c.test"]


def test_duplicates_and_order_are_kept():
    contents = "http://b.test\nhttp://a.test\nhttp://b.test\n"
    assert parse_urls(contents) == ["http://b.test", "http://a.test", "http://b.test"]


def test_crlf_line_endings():
    assert parse_urls("http://a.test\r\nhttp://b.test\r\n") == ["http://a.test", "http://b.test"]


def test_empty_input():
    assert parse_urls("") == []
    assert parse_urls("\n \n") == []


def test_read_file(tmp_path):
    path = tmp_path / "urls.txt"
    path.write_text("http://a.test\n\nhttp://b.test\n", encoding="utf-8")
    assert load_urls(path) == ["http://a.test", "http://b.test"]


def test_read_stdin_when_no_path():
    assert load_urls(None, stdin=io.StringIO("http://a.test\n")) == ["http://a.test"]


def test_dash_means_stdin():
    assert read_source("-", stdin=io.StringIO("x")) == "x"


def test_missing_file_raises_input_error(tmp_path):
    missing = tmp_path / "nope.txt"
    with pytest.raises(InputError) as excinfo:
        read_source(missing)
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)
    assert "nope.txt" in str(excinfo.value)


def test_undecodable_file_raises_input_error(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_bytes(b"http://a.test\n\xff\xfe\xfa\n")
    with pytest.raises(InputError) as excinfo:
        read_source(path)
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)


def test_directory_raises_input_error(tmp_path):
    with pytest.raises(InputError):
        read_source(tmp_path)
