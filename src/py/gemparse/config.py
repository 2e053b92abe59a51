from os import getenv

# Maximum length in bytes of a response header's meta, as defined by the
# protocol. This is not configurable.
META_MAX_LENGTH: int = 1024

# The core parser does not bound the request line, readers cap their
# buffer to this many bytes instead.
REQUEST_LIMIT: int = int(getenv("GEMPARSE_REQUEST_LIMIT", 2048))

LOG_ERRORS: bool = getenv("GEMPARSE_LOG_ERRORS", "1") == "1"

LOG_REQUESTS: bool = getenv("GEMPARSE_LOG_REQUESTS", "0") == "1"

# EOF
