import pytest

from gemparse.gemini.lines import nextLine, nextLineLimit, skipEmptyLines
from gemparse.gemini.model import Complete, NewLineError, Partial
from gemparse.utils.io import Bytes


def test_skip_empty_lines_only_blank():
	bytes = Bytes(b"\r\n\r\n")
	assert skipEmptyLines(bytes) is Partial
	assert bytes.pos == 4


def test_skip_empty_lines_mixed_terminators():
	bytes = Bytes(b"\n\r\n\ngemini://a.com\r\n")
	assert skipEmptyLines(bytes) == Complete(None)
	assert bytes.pos == 4


def test_skip_empty_lines_content_first():
	bytes = Bytes(b"gemini://a.com")
	assert skipEmptyLines(bytes) == Complete(None)
	assert bytes.pos == 0


def test_skip_empty_lines_partial():
	assert skipEmptyLines(Bytes(b"")) is Partial
	assert skipEmptyLines(Bytes(b"\r")) is Partial
	assert skipEmptyLines(Bytes(b"\r\n\r")) is Partial


def test_skip_empty_lines_bad_terminator():
	with pytest.raises(NewLineError):
		skipEmptyLines(Bytes(b"\r\x00"))
	with pytest.raises(NewLineError):
		skipEmptyLines(Bytes(b"\r\n\rgemini://a.com\r\n"))


def test_next_line():
	bytes = Bytes(b"gemini://a.com\r\n")
	assert nextLine(bytes) == Complete(14)
	assert bytes.pos == 16

	bytes = Bytes(b"gemini://a.com\nrest")
	assert nextLine(bytes) == Complete(14)
	assert bytes.pos == 15

	bytes = Bytes(b"\r\n")
	assert nextLine(bytes) == Complete(0)


def test_next_line_partial():
	assert nextLine(Bytes(b"gemini://a.com")) is Partial
	assert nextLine(Bytes(b"gemini://a.com\r")) is Partial
	assert nextLine(Bytes(b"")) is Partial


def test_next_line_bad_terminator():
	with pytest.raises(NewLineError):
		nextLine(Bytes(b"gemini://a.com\r\x00"))
	with pytest.raises(NewLineError):
		nextLine(Bytes(b"a\r\r\n"))


def test_next_line_starts_at_cursor():
	bytes = Bytes(b"20 meta\r\n")
	bytes.pos = 3
	assert nextLine(bytes) == Complete(7)


def test_next_line_limit():
	with pytest.raises(NewLineError):
		nextLineLimit(Bytes(b"text\r"), 3)
	with pytest.raises(NewLineError):
		nextLineLimit(Bytes(b"abcd"), 3)
	assert nextLineLimit(Bytes(b"abc\r\n"), 3) == Complete(3)
	assert nextLineLimit(Bytes(b"abc\n"), 3) == Complete(3)
	assert nextLineLimit(Bytes(b"abc"), 3) is Partial
	assert nextLineLimit(Bytes(b"abc\r"), 3) is Partial


def test_next_line_limit_is_relative_to_start():
	bytes = Bytes(b"20 abc\r\n")
	bytes.pos = 3
	assert nextLineLimit(bytes, 3) == Complete(6)


# EOF
