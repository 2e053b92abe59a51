from __future__ import annotations

from typing import Any
from urllib.parse import urlsplit


class URIError(ValueError):
	"""Raised when a text can't be parsed as an absolute URI."""


class URI:
	__slots__ = (
		"scheme",
		"user",
		"host",
		"port",
		"path",
		"query",
		"fragment",
	)

	@classmethod
	def Parse(cls, link: "URI|str") -> "URI":
		"""Parses the given text as an absolute URI, raising an `URIError`
		when the text is relative or malformed."""
		if isinstance(link, URI):
			return link
		for c in link:
			if c <= " " or c == "\x7f":
				raise URIError(f"Invalid character {c!r} in URI: {link!r}")
		try:
			res = urlsplit(link)
			port = res.port
		except ValueError as e:
			raise URIError(f"Malformed URI {link!r}: {e}") from e
		if not res.scheme:
			raise URIError(f"Relative URI without a scheme: {link!r}")
		user: str | None = None
		if res.netloc and "@" in res.netloc:
			user = res.netloc.rsplit("@", 1)[0]
		# `urlsplit` gives empty strings for both missing and empty parts, we
		# look at the text so that `?`, `#` and `//` survive formatting. An empty
		# authority, as in `file:///`, has an empty host.
		authority = link[len(res.scheme) + 1 :].startswith("//")
		hasFragment = "#" in link
		hasQuery = "?" in link.split("#", 1)[0]
		return URI(
			scheme=res.scheme,
			user=user,
			host=res.hostname or ("" if authority else None),
			port=port,
			path=res.path,
			query=res.query if hasQuery else None,
			fragment=res.fragment if hasFragment else None,
		)

	def __init__(
		self,
		*,
		scheme: str | None = None,
		user: str | None = None,
		host: str | None = None,
		port: int | None = None,
		path: str | None = None,
		query: str | None = None,
		fragment: str | None = None,
	):
		self.scheme = scheme
		self.user = user
		self.host = host
		self.port = port
		self.path = path
		self.query = query
		self.fragment = fragment

	@property
	def isLocal(self) -> bool:
		return not self.host

	def asDict(self) -> dict[str, Any]:
		return {
			k: v
			for k, v in dict(
				scheme=self.scheme,
				user=self.user,
				host=self.host,
				port=self.port,
				path=self.path,
				query=self.query,
				fragment=self.fragment,
			).items()
			if v is not None
		}

	def __eq__(self, other: Any) -> bool:
		if isinstance(other, str):
			return str(self) == other
		elif isinstance(other, URI):
			return self.asDict() == other.asDict()
		else:
			return False

	def __hash__(self) -> int:
		return hash(str(self))

	def __repr__(self) -> str:
		return f"URI({' '.join(f'{k}={v}' for k, v in self.asDict().items() if v)})"

	def __str__(self) -> str:
		res: list[str] = []
		if self.scheme:
			res.append(self.scheme)
			res.append(":")
		if self.host is not None:
			res.append("//")
			if self.user:
				res.append(self.user)
				res.append("@")
			# IPv6 addresses need to be bracketed back
			res.append(f"[{self.host}]" if ":" in self.host else self.host)
			if self.port is not None:
				res.append(f":{self.port}")
		if self.path:
			res.append(self.path)
		if self.query is not None:
			res.append("?")
			res.append(self.query)
		if self.fragment is not None:
			res.append("#")
			res.append(self.fragment)
		return "".join(res)


def uri(value: str | URI) -> URI:
	return value if isinstance(value, URI) else URI.Parse(value)


# EOF
