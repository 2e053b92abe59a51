from enum import Enum
from typing import Generic, TypeAlias, TypeVar, Union

from ..utils.uri import URIError

T = TypeVar("T")

# -----------------------------------------------------------------------------
#
# STATUS
#
# -----------------------------------------------------------------------------


class Complete(Generic[T]):
	"""Enough bytes were available and the grammar matched, `value` holds
	the parsed value."""

	__slots__ = ["value"]

	def __init__(self, value: T):
		self.value: T = value

	def __eq__(self, other: object) -> bool:
		return isinstance(other, Complete) and other.value == self.value

	def __hash__(self) -> int:
		return hash((Complete, self.value))

	def __repr__(self) -> str:
		return f"Complete({self.value!r})"


class PartialStatus:
	"""Not enough bytes were available yet. This is not an error: the
	caller is expected to read more and parse again."""

	__slots__: list[str] = []

	def __repr__(self) -> str:
		return "Partial"

	def __bool__(self) -> bool:
		return False


Partial = PartialStatus()

Status: TypeAlias = Union[Complete[T], PartialStatus]

# -----------------------------------------------------------------------------
#
# ERRORS
#
# -----------------------------------------------------------------------------


class ParseError(Exception):
	"""Base class for malformed frames. All parse errors are terminal, the
	connection should be aborted."""

	def __init__(self, message: str):
		super().__init__(message)
		self.message: str = message


class NewLineError(ParseError):
	"""A carriage return was not followed by a line feed, or a line
	exceeded its length limit."""


class EncodingError(ParseError):
	def __init__(self, message: str, error: UnicodeDecodeError):
		super().__init__(message)
		self.error: UnicodeDecodeError = error


class URLError(ParseError):
	def __init__(self, message: str, error: URIError):
		super().__init__(message)
		self.error: URIError = error


class ResponseHeaderError(ParseError):
	"""The status code was not followed by a space."""


class StatusError(ParseError):
	"""The status code was not made of two ASCII digits."""


class FrameTooLargeError(ParseError):
	"""The buffered bytes exceeded the reader's limit before a frame
	could complete."""

	def __init__(self, message: str, limit: int):
		super().__init__(message)
		self.limit: int = limit


# -----------------------------------------------------------------------------
#
# STATUS CODES
#
# -----------------------------------------------------------------------------


class StatusCategory(Enum):
	"""Response status categories, given by the first digit of the code."""

	Unknown = 0
	Input = 1
	Success = 2
	Redirect = 3
	TemporaryFailure = 4
	PermanentFailure = 5
	ClientCertificate = 6

	@classmethod
	def FromStatus(cls, status: int) -> "StatusCategory":
		tens = status // 10
		return cls(tens) if 1 <= tens <= 6 else cls.Unknown


# EOF
