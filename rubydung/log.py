"""Levelled logging to the console and to a timestamped log file."""

from __future__ import annotations

import datetime
import inspect
import os
import sys
from enum import IntEnum, IntFlag
from pathlib import Path
from types import FrameType
from typing import IO, Optional, Union


class LogLevel(IntEnum):
    NONE = 0
    INFO = 1
    WARN = 2
    ERROR = 3
    FATAL = 4
    DEBUG = 5
    TRACE = 6


class LogTarget(IntFlag):
    STDOUT = 1 << 1
    FILE = 1 << 2


class ConsoleColor(IntEnum):
    BLACK = 0
    BLUE = 1
    GREEN = 2
    CYAN = 3
    RED = 4
    MAGENTA = 5
    YELLOW = 6
    INTENSITY = 7


_BRIGHT = 8

# label, background colour, foreground colour
_PREFIXES = {
    LogLevel.INFO: ("info", ConsoleColor.BLACK, ConsoleColor.BLUE),
    LogLevel.WARN: ("warn", ConsoleColor.BLACK, ConsoleColor.YELLOW),
    LogLevel.ERROR: ("ERROR", ConsoleColor.BLACK, ConsoleColor.RED),
    LogLevel.FATAL: ("FATAL", ConsoleColor.RED, ConsoleColor.INTENSITY),
    LogLevel.DEBUG: ("debug", ConsoleColor.BLACK, ConsoleColor.GREEN),
    LogLevel.TRACE: ("trace", ConsoleColor.CYAN + _BRIGHT, ConsoleColor.INTENSITY),
}

_ANSI_BASE = {0: 0, 1: 4, 2: 2, 3: 6, 4: 1, 5: 5, 6: 3, 7: 7}
_ANSI_RESET = "\x1b[0m"


def _ansi(background: int, foreground: int) -> str:
    def code(color: int, normal: int, bright: int) -> int:
        base = _ANSI_BASE[color & 7]
        return (bright if color & _BRIGHT else normal) + base

    return f"\x1b[{code(background, 40, 100)};{code(foreground, 30, 90)}m"


class _LogState:
    def __init__(self) -> None:
        self.flags = LogTarget(0)
        self.level = LogLevel.NONE
        self.file: Optional[IO[str]] = None


_state = _LogState()


def init(flags: Union[LogTarget, int], directory: Union[str, os.PathLike, None] = None) -> Optional[Path]:
    """Select output targets; with FILE, open a new timestamped log file and return its path."""
    close()
    _state.flags = LogTarget(flags)
    if not _state.flags & LogTarget.FILE:
        return None
    name = datetime.datetime.now().strftime("%Y-%m-%d_%H-%M-%S") + ".log"
    path = Path(directory if directory is not None else ".") / name
    try:
        _state.file = open(path, "a", encoding="utf-8")
    except OSError:
        sys.stderr.write(f'[ERROR] could not find log file "{name}"')
        raise
    return path


def close() -> None:
    """Close the log file, if one is open."""
    if _state.file is not None:
        _state.file.close()
        _state.file = None


def get_level() -> int:
    """Return the current threshold level."""
    return _state.level


def set_level(level: Union[LogLevel, int]) -> None:
    """Set the threshold; messages above it are dropped."""
    _state.level = level


def _write(level: int, message: str, frame: Optional[FrameType]) -> None:
    if level > _state.level:
        return
    if frame is not None:
        location = f"{os.path.basename(frame.f_code.co_filename)}:{frame.f_lineno}"
    else:
        location = "?:0"
    timestamp = datetime.datetime.now().strftime("[%Y-%m-%d %H:%M:%S]")
    head = f"{timestamp} [{location}] "
    if not message.endswith("\n"):
        message += "\n"

    prefix = _PREFIXES.get(level)
    plain = head
    colored = head
    if prefix is not None:
        label, background, foreground = prefix
        plain += f"[{label}] "
        colored += f"[{_ansi(background, foreground)}{label}{_ANSI_RESET}] "

    if _state.flags & LogTarget.FILE and _state.file is not None:
        _state.file.write(plain + message)
        _state.file.flush()
    if _state.flags & LogTarget.STDOUT:
        stream = sys.stderr
        use_color = hasattr(stream, "isatty") and stream.isatty()
        stream.write((colored if use_color else plain) + message)


def log(level: Union[LogLevel, int], message: str) -> None:
    """Write ``message`` at ``level`` if the threshold allows it."""
    _write(level, message, inspect.currentframe().f_back)


def info(message: str) -> None:
    _write(LogLevel.INFO, message, inspect.currentframe().f_back)


def warn(message: str) -> None:
    _write(LogLevel.WARN, message, inspect.currentframe().f_back)


def error(message: str) -> None:
    _write(LogLevel.ERROR, message, inspect.currentframe().f_back)


def fatal(message: str) -> None:
    _write(LogLevel.FATAL, message, inspect.currentframe().f_back)


def debug(message: str) -> None:
    _write(LogLevel.DEBUG, message, inspect.currentframe().f_back)


def trace(message: str) -> None:
    _write(LogLevel.TRACE, message, inspect.currentframe().f_back)