import io

import pytest

from gemparse import FrameTooLargeError, NewLineError, RequestReader
from gemparse.gemini import parser
from gemparse.utils import logging


@pytest.fixture
def stderr(monkeypatch):
	stream = io.StringIO()
	monkeypatch.setattr(logging, "ERR", stream)
	monkeypatch.setattr(parser, "LOG_ERRORS", True)
	return stream


def test_feed_in_chunks():
	reader = RequestReader()
	assert reader.feed(b"gemini://exa") is None
	assert reader.feed(b"mple.com/\r") is None
	req = reader.feed(b"\n")
	assert req is not None
	assert req.url is not None
	assert req.url.host == "example.com"
	assert req.url.path == "/"
	assert reader.remaining == b""


def test_feed_keeps_trailing_bytes():
	reader = RequestReader()
	req = reader.feed(b"gemini://a.com/\r\ngemini://b")
	assert req is not None and req.url is not None
	assert req.url.host == "a.com"
	assert reader.remaining == b"gemini://b"
	req = reader.feed(b".com/\n")
	assert req is not None and req.url is not None
	assert req.url.host == "b.com"


def test_limit(stderr):
	reader = RequestReader(limit=16)
	assert reader.feed(b"gemini://") is None
	with pytest.raises(FrameTooLargeError) as e:
		reader.feed(b"a" * 20)
	assert e.value.limit == 16
	assert "Request exceeds buffer limit" in stderr.getvalue()


def test_limit_applies_to_incomplete_requests_only():
	reader = RequestReader(limit=16)
	req = reader.feed(b"gemini://a.com/\n" + b"x" * 4)
	assert req is not None
	assert reader.remaining == b"xxxx"


def test_malformed_is_logged(stderr):
	reader = RequestReader()
	with pytest.raises(NewLineError):
		reader.feed(b"gemini://a.com\r\x00")
	output = stderr.getvalue()
	assert "Malformed request" in output
	assert "NewLineError" in output


def test_parsed_requests_are_logged(stderr, monkeypatch):
	monkeypatch.setattr(parser, "LOG_REQUESTS", True)
	RequestReader().feed(b"gemini://a.com/\r\n")
	output = stderr.getvalue()
	assert "Request parsed" in output
	assert "gemini://a.com/" in output


def test_reset():
	reader = RequestReader()
	reader.feed(b"gemini://a")
	assert reader.reset().remaining == b""


# EOF
