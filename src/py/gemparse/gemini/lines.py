"""Line scanning over a `Bytes` cursor. Lines end with either `CRLF` or a
bare `LF`; a `CR` followed by anything else is an error. Running out of
bytes is never an error, it yields `Partial`."""

from ..utils.io import Bytes, CR, LF
from .model import Complete, NewLineError, Partial, Status


def skipEmptyLines(bytes: Bytes) -> Status[None]:
	"""Skips blank lines, returning `Complete` once the cursor is at the
	first byte of a content line."""
	while True:
		b = bytes.peek()
		if b == CR:
			bytes.bump()
			c = bytes.next()
			if c is None:
				return Partial
			elif c != LF:
				raise NewLineError(f"Expected LF after CR at {bytes.pos - 1}, got {c!r}")
		elif b == LF:
			bytes.bump()
		elif b is None:
			return Partial
		else:
			return Complete(None)


def nextLine(bytes: Bytes) -> Status[int]:
	return nextLineInner(bytes, None)


def nextLineLimit(bytes: Bytes, limit: int) -> Status[int]:
	return nextLineInner(bytes, limit)


def nextLineInner(bytes: Bytes, limit: int | None) -> Status[int]:
	"""Scans up to and including the next line terminator, returning the
	offset at which the line's content ends. The content length, excluding
	the terminator, may not exceed `limit`."""
	start = bytes.pos
	while True:
		b = bytes.peek()
		if b == CR:
			bytes.bump()
			c = bytes.next()
			if c is None:
				return Partial
			elif c == LF:
				return Complete(bytes.pos - 2)
			else:
				raise NewLineError(f"Expected LF after CR at {bytes.pos - 1}, got {c!r}")
		elif b == LF:
			bytes.bump()
			return Complete(bytes.pos - 1)
		elif b is None:
			return Partial
		else:
			if limit is not None and bytes.pos - start + 1 > limit:
				raise NewLineError(f"Line exceeds maximum length of {limit} bytes")
			bytes.bump()


# EOF
