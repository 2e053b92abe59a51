"""
Fetches a Gemini URL and prints the response header.

This demonstrates the caller side of `Response.parse`: the whole buffer
received so far is parsed again after each read, until the header is
complete.

Usage:
    python fetch.py gemini://geminiprotocol.net/
"""

import asyncio
import ssl
import sys

from gemparse import ParseError, Partial, Request, Response
from gemparse.config import META_MAX_LENGTH
from gemparse.utils.logging import error, exception, info, warning

PORT: int = 1965


async def fetch(url: str) -> Response | None:
	request = Request(url)
	if request.url is None or not request.url.host:
		return None
	# Gemini servers use self-signed certificates, trusted on first use
	context = ssl.create_default_context()
	context.check_hostname = False
	context.verify_mode = ssl.CERT_NONE  # nosec: B501
	info("Connecting", Host=request.url.host, Port=request.url.port or PORT)
	reader, writer = await asyncio.open_connection(
		request.url.host, request.url.port or PORT, ssl=context
	)
	try:
		writer.write(request.format())
		await writer.drain()
		response = Response()
		buffer = bytearray()
		while len(buffer) < META_MAX_LENGTH + 5:
			chunk = await reader.read(1024)
			if not chunk:
				warning("Connection closed before header", Read=len(buffer))
				return None
			buffer += chunk
			if response.parse(buffer) is not Partial:
				info("Received header", Status=response.status, Meta=response.meta)
				return response
		return None
	finally:
		writer.close()


if __name__ == "__main__":
	url = sys.argv[1] if len(sys.argv) > 1 else "gemini://geminiprotocol.net/"
	try:
		res = asyncio.run(fetch(url))
	except (OSError, ParseError) as e:
		exception(e, f"Could not fetch {url}")
		raise SystemExit(1) from e
	if res is None:
		error("No response", None)
	else:
		print(res.status, res.category, res.meta)

# EOF
