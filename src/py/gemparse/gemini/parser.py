from ..config import LOG_ERRORS, LOG_REQUESTS, META_MAX_LENGTH, REQUEST_LIMIT
from ..utils.io import DEFAULT_ENCODING, EOL, SP, Bytes, TBuffer
from ..utils.logging import debug, error, warning
from ..utils.uri import URI, URIError, uri
from .lines import nextLine, nextLineLimit, skipEmptyLines
from .model import (
	Complete,
	EncodingError,
	FrameTooLargeError,
	ParseError,
	Partial,
	PartialStatus,
	ResponseHeaderError,
	Status,
	StatusCategory,
	StatusError,
	URLError,
)

DIGIT_0: int = 0x30
DIGIT_9: int = 0x39


def parseDigit(bytes: Bytes) -> Status[int]:
	b = bytes.next()
	if b is None:
		return Partial
	elif DIGIT_0 <= b <= DIGIT_9:
		return Complete(b - DIGIT_0)
	else:
		raise StatusError(f"Expected status digit at {bytes.pos - 1}, got {b!r}")


def parseStatus(bytes: Bytes) -> Status[int]:
	"""Parses a two-digit status code, in the [0, 99] range."""
	tens = parseDigit(bytes)
	if isinstance(tens, PartialStatus):
		return Partial
	ones = parseDigit(bytes)
	if isinstance(ones, PartialStatus):
		return Partial
	return Complete(tens.value * 10 + ones.value)


def decode(data: TBuffer, what: str) -> str:
	try:
		return str(data, DEFAULT_ENCODING)
	except UnicodeDecodeError as e:
		raise EncodingError(f"Invalid UTF-8 in {what}: {e}", e) from e


class Request:
	"""A request frame: an absolute URL on a single line."""

	__slots__ = ["url"]

	def __init__(self, url: "URI|str|None" = None) -> None:
		self.url: URI | None = None if url is None else uri(url)

	def parse(self, buffer: TBuffer) -> Status[int]:
		"""Parses the request from the start of `buffer`, returning the number
		of bytes the frame spans once complete. The request is only updated
		when the whole frame is valid."""
		bytes = Bytes(buffer)
		if isinstance(skipEmptyLines(bytes), PartialStatus):
			return Partial
		start = bytes.pos
		end = nextLine(bytes)
		if isinstance(end, PartialStatus):
			return Partial
		text = decode(bytes[start : end.value], "request line")
		try:
			self.url = URI.Parse(text)
		except URIError as e:
			raise URLError(f"Invalid request URL: {e}", e) from e
		return Complete(bytes.pos)

	def format(self) -> bytes:
		if self.url is None:
			raise ValueError("Request has no URL")
		return str(self.url).encode(DEFAULT_ENCODING) + EOL

	def __eq__(self, other: object) -> bool:
		return isinstance(other, Request) and other.url == self.url

	def __repr__(self) -> str:
		return f"Request({self.url!r})"


class Response:
	"""A response header: a two-digit status and its meta."""

	__slots__ = ["status", "meta"]

	def __init__(self, status: int | None = None, meta: str | None = None) -> None:
		self.status: int | None = status
		self.meta: str | None = meta

	@property
	def category(self) -> StatusCategory | None:
		return None if self.status is None else StatusCategory.FromStatus(self.status)

	def parse(self, buffer: TBuffer) -> Status[None]:
		"""Parses the response header from the start of `buffer`. Status and
		meta are only updated when the whole header is valid."""
		bytes = Bytes(buffer)
		status = parseStatus(bytes)
		if isinstance(status, PartialStatus):
			return Partial
		b = bytes.next()
		if b is None:
			return Partial
		elif b != SP:
			raise ResponseHeaderError(
				f"Expected space after status {status.value:02d}, got {b!r}"
			)
		start = bytes.pos
		end = nextLineLimit(bytes, META_MAX_LENGTH)
		if isinstance(end, PartialStatus):
			return Partial
		meta = decode(bytes[start : end.value], "response meta")
		self.status = status.value
		self.meta = meta
		return Complete(None)

	def format(self) -> bytes:
		if self.status is None or self.meta is None:
			raise ValueError("Response has no status or meta")
		return f"{self.status:02d} {self.meta}".encode(DEFAULT_ENCODING) + EOL

	def __eq__(self, other: object) -> bool:
		return (
			isinstance(other, Response)
			and other.status == self.status
			and other.meta == self.meta
		)

	def __repr__(self) -> str:
		return f"Response({self.status}, {self.meta!r})"


class RequestReader:
	"""Accumulates chunks read from a connection until a request can be
	parsed. Each `feed` re-parses the whole buffer, which is capped at
	`limit` bytes as the request line itself is unbounded."""

	__slots__ = ["buffer", "limit"]

	def __init__(self, limit: int = REQUEST_LIMIT) -> None:
		self.buffer: bytearray = bytearray()
		self.limit: int = limit

	@property
	def remaining(self) -> bytes:
		return bytes(self.buffer)

	def reset(self) -> "RequestReader":
		self.buffer.clear()
		return self

	def feed(self, chunk: bytes) -> Request | None:
		"""Feeds a chunk, returning the request once complete. Consumed bytes
		are dropped from the buffer, anything after the request is kept."""
		self.buffer += chunk
		request = Request()
		try:
			res = request.parse(self.buffer)
		except ParseError as e:
			if LOG_ERRORS:
				warning(
					"Malformed request",
					Error=e.__class__.__name__,
					Reason=e.message,
					Read=len(self.buffer),
				)
			raise
		if isinstance(res, PartialStatus):
			if len(self.buffer) > self.limit:
				if LOG_ERRORS:
					error("Request exceeds buffer limit", 59, Limit=self.limit)
				raise FrameTooLargeError(
					f"Request exceeds {self.limit} bytes without a terminator",
					self.limit,
				)
			return None
		del self.buffer[: res.value]
		if LOG_REQUESTS:
			debug("Request parsed", URL=str(request.url), Read=res.value)
		return request


# EOF
