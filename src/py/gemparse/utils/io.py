from typing import Iterator, overload
from mypy_extensions import i64

DEFAULT_ENCODING: str = "utf8"

CR: int = 0x0D
LF: int = 0x0A
SP: int = 0x20
EOL: bytes = b"\r\n"

TBuffer = bytes | bytearray | memoryview


class Bytes:
	"""A cursor over a borrowed buffer. The buffer itself is never copied,
	slicing the cursor slices the underlying buffer."""

	__slots__ = ["slice", "pos"]

	def __init__(self, slice: TBuffer) -> None:
		self.slice: TBuffer = slice
		self.pos: i64 = 0

	def peek(self) -> int | None:
		return self.slice[self.pos] if self.pos < len(self.slice) else None

	def bump(self) -> None:
		# NOTE: Only call after `peek()` returned a byte
		assert self.pos < len(self.slice), "Cursor bumped past end of buffer"
		self.pos += 1

	def next(self) -> int | None:
		if self.pos < len(self.slice):
			b = self.slice[self.pos]
			self.pos += 1
			return b
		else:
			return None

	@property
	def remaining(self) -> int:
		return len(self.slice) - self.pos

	@overload
	def __getitem__(self, index: int) -> int: ...

	@overload
	def __getitem__(self, index: slice) -> TBuffer: ...

	def __getitem__(self, index: int | slice) -> "int | TBuffer":
		return self.slice[index]

	def __len__(self) -> int:
		return len(self.slice)

	def __iter__(self) -> Iterator[int]:
		return self

	def __next__(self) -> int:
		b = self.next()
		if b is None:
			raise StopIteration
		return b

	def __repr__(self) -> str:
		return f"Bytes(pos={self.pos}, len={len(self.slice)})"


# EOF
