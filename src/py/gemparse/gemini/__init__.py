from .model import Complete, Partial, PartialStatus, Status  # NOQA: F401
from .lines import skipEmptyLines, nextLine, nextLineLimit  # NOQA: F401
from .parser import parseStatus, Request, Response, RequestReader  # NOQA: F401

# EOF
