from gemparse.utils.io import Bytes


def test_peek_does_not_advance():
	bytes = Bytes(b"ab")
	assert bytes.peek() == ord("a")
	assert bytes.peek() == ord("a")
	assert bytes.pos == 0


def test_next_and_bump():
	bytes = Bytes(b"ab")
	assert bytes.next() == ord("a")
	assert bytes.pos == 1
	bytes.bump()
	assert bytes.pos == 2
	assert bytes.peek() is None
	assert bytes.next() is None
	# Reaching the end does not move the cursor
	assert bytes.pos == 2
	assert bytes.remaining == 0


def test_iteration():
	bytes = Bytes(b"gem")
	assert list(bytes) == [ord("g"), ord("e"), ord("m")]
	assert bytes.pos == 3
	assert len(bytes) == 3


def test_slicing_does_not_copy():
	view = memoryview(b"gemini://a.com\r\n")
	bytes = Bytes(view)
	line = bytes[0:6]
	assert isinstance(line, memoryview)
	assert line.obj is view.obj
	assert bytes[0] == ord("g")


# EOF
