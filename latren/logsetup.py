"""Logging setup with compact ``%``-flag output patterns."""

from __future__ import annotations

import logging
import os
import re
import sys
import threading
import time
from enum import Enum, auto

DEFAULT_PATTERN = "[%T] %^%-10l%$ %v"

_FLAG_RE = re.compile(r"%(-?)(\d*)(.)")

_TIME_FLAGS = {
    "T": "%H:%M:%S",
    "D": "%m/%d/%y",
    "H": "%H",
    "M": "%M",
    "S": "%S",
    "Y": "%Y",
    "y": "%y",
    "m": "%m",
    "d": "%d",
}


class LogLevel(Enum):
    DEFAULT = auto()
    DEBUG = auto()


class _PatternFormatter(logging.Formatter):
    """Formats records from a pattern of ``%`` flags.

    Supported flags: ``%v`` message, ``%l`` level name, ``%L`` level
    initial, ``%n`` logger name, ``%t`` thread id, ``%P`` process id,
    ``%e`` milliseconds, time flags ``%T %D %H %M %S %Y %y %m %d`` and
    ``%%``.  ``%^`` and ``%$`` (colour range markers) produce nothing.  A
    width pads the field on the left, or on the right when preceded by ``-``.
    """

    def __init__(self, pattern: str) -> None:
        super().__init__()
        self.pattern = pattern
        self._parts: list[str | tuple[bool, int, str]] = []
        pos = 0
        for match in _FLAG_RE.finditer(pattern):
            if match.start() > pos:
                self._parts.append(pattern[pos:match.start()])
            left, width, flag = match.groups()
            self._parts.append((bool(left), int(width) if width else 0, flag))
            pos = match.end()
        if pos < len(pattern):
            self._parts.append(pattern[pos:])

    def _field(self, flag: str, record: logging.LogRecord, message: str) -> str:
        if flag == "v":
            return message
        if flag == "l":
            return record.levelname.lower()
        if flag == "L":
            return record.levelname[:1].upper()
        if flag == "n":
            return record.name
        if flag == "t":
            return str(record.thread if record.thread is not None else threading.get_ident())
        if flag == "P":
            return str(record.process if record.process is not None else os.getpid())
        if flag == "e":
            return f"{int(record.msecs):03d}"
        if flag in _TIME_FLAGS:
            return time.strftime(_TIME_FLAGS[flag], time.localtime(record.created))
        if flag == "%":
            return "%"
        if flag in "^$":
            return ""
        return "%" + flag

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        if record.exc_info and not record.exc_text:
            record.exc_text = self.formatException(record.exc_info)
        if record.exc_text:
            message = f"{message}\n{record.exc_text}"
        pieces = []
        for part in self._parts:
            if isinstance(part, str):
                pieces.append(part)
                continue
            left, width, flag = part
            value = self._field(flag, record, message)
            pieces.append(value.ljust(width) if left else value.rjust(width))
        return "".join(pieces)


_installed: logging.Handler | None = None


def init_logging(pattern: str = DEFAULT_PATTERN, level: LogLevel = LogLevel.DEFAULT) -> logging.Handler:
    """Send log output to standard output formatted by ``pattern``.

    Replaces the handler installed by an earlier call.  With
    ``LogLevel.DEBUG`` the root logger's level is lowered to debug; the
    default level leaves it as it is.
    """
    global _installed
    root = logging.getLogger()
    if _installed is not None:
        root.removeHandler(_installed)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(_PatternFormatter(pattern))
    root.addHandler(handler)
    _installed = handler
    if level is LogLevel.DEBUG:
        root.setLevel(logging.DEBUG)
    return handler