from .gemini.model import (
	Complete,
	Partial,
	Status,
	StatusCategory,
	ParseError,
	NewLineError,
	EncodingError,
	URLError,
	ResponseHeaderError,
	StatusError,
	FrameTooLargeError,
)  # NOQA: F401
from .gemini.parser import Request, Response, RequestReader  # NOQA: F401
from .utils.uri import URI, URIError  # NOQA: F401

__version__ = "0.1.0"

# EOF
