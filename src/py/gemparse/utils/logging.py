import os
import sys
import time
from enum import Enum
from typing import NamedTuple, Any, TextIO
from contextvars import ContextVar

ERR: TextIO = sys.stderr

# SEE: https://no-color.org/
NO_COLOR: bool = "NO_COLOR" in os.environ
FORCE_COLOR: bool = "FORCE_COLOR" in os.environ
COLOR: bool = FORCE_COLOR or NO_COLOR is False

BOLD: str = "\033[1m" if COLOR else ""
RESET: str = "\033[0m" if COLOR else ""

LogOrigin: ContextVar[str] = ContextVar("LogOrigin", default="gemparse")

TContext = str | int | float | bool | bytes | None


class LogLevel(Enum):
	Debug = 0
	Info = 10
	Warning = 30  # A recoverable or client-side problem
	Error = 40  # A managed error


LOG_LEVEL_COLOR: dict[LogLevel, int] = {
	LogLevel.Debug: 31,
	LogLevel.Info: 75,
	LogLevel.Warning: 202,
	LogLevel.Error: 160,
}


class LogEntry(NamedTuple):
	origin: str
	time: float
	level: LogLevel = LogLevel.Info
	message: str | None = None
	code: int | str | None = None
	context: dict[str, TContext] | None = None


def color(code: int) -> str:
	return f"\033[0;38;5;{code}m" if COLOR else ""


def formatData(value: Any) -> str:
	if value is None or value == () or value == [] or value == {}:
		return "◌"
	elif isinstance(value, dict):
		return " ".join(f"{BOLD}{k}{RESET}={formatData(v)}" for k, v in value.items())
	elif isinstance(value, (list, tuple)):
		return ",".join(formatData(v) for v in value)
	elif isinstance(value, str):
		return repr(value) if " " in value else value
	elif isinstance(value, (bytes, bytearray, memoryview)):
		# Frames are mostly text, we keep escapes visible
		return repr(bytes(value))
	elif isinstance(value, bool):
		return "✓" if value else "✗"
	elif isinstance(value, float):
		return f"{value:0.2f}"
	else:
		return str(value)


def send(entry: LogEntry) -> LogEntry:
	clr: str = color(LOG_LEVEL_COLOR[entry.level])
	code: str = f" [{entry.code}]" if entry.code is not None else ""
	ERR.write(
		f"{clr}{BOLD}[{entry.origin}]{RESET}{clr}{code} {entry.message} {formatData(entry.context)}{RESET}\n"
	)
	ERR.flush()
	return entry


def entry(
	message: str,
	*,
	level: LogLevel = LogLevel.Info,
	code: int | str | None = None,
	origin: str | None = None,
	at: float | None = None,
	context: dict[str, TContext],
) -> LogEntry:
	return LogEntry(
		origin=origin or LogOrigin.get(),
		time=time.time() if at is None else at,
		level=level,
		message=message,
		code=code,
		context=context,
	)


def debug(message: str, *, origin: str | None = None, **context: TContext) -> LogEntry:
	return send(entry(message, level=LogLevel.Debug, origin=origin, context=context))


def info(message: str, *, origin: str | None = None, **context: TContext) -> LogEntry:
	return send(entry(message, origin=origin, context=context))


def warning(
	message: str, *, origin: str | None = None, **context: TContext
) -> LogEntry:
	return send(entry(message, level=LogLevel.Warning, origin=origin, context=context))


def error(
	message: str,
	code: int | str | None,
	*,
	origin: str | None = None,
	**context: TContext,
) -> LogEntry:
	return send(
		entry(message, level=LogLevel.Error, code=code, origin=origin, context=context)
	)


def exception(exception: BaseException, message: str | None = None) -> BaseException:
	"""Dumps the exception and its traceback to stderr, returning the exception
	so that it can be used as `raise exception(error)`."""
	try:
		label = f"[{exception.__class__.__name__}] {exception}"
		ERR.write(f"!!! EXCP {f'{message}: {label}' if message else label}\n")
		tb = exception.__traceback__
		while tb:
			code = tb.tb_frame.f_code
			ERR.write(
				f"... in {code.co_name:15s} at {tb.tb_lineno:4d} in {code.co_filename}\n"
			)
			tb = tb.tb_next
		ERR.flush()
	except Exception:  # nosec: B110
		# May be called from within an exception handler, it must not raise
		pass
	return exception


# EOF
