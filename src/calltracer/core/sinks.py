"""Log sinks: where rendered trace lines go."""

from __future__ import annotations

import logging
import sys
import threading
from collections.abc import Callable
from typing import Protocol, TextIO, runtime_checkable

from rich.console import Console, ConsoleOptions, RenderResult
from rich.segment import Segment


@runtime_checkable
class LogSink(Protocol):
    """Protocol for recording a fully formatted trace line.

    Lines arrive already terminated by a newline. The tracer adds no
    timestamps or levels; richer sinks may add their own.
    """

    def write_line(self, line: str) -> None: ...


class StreamSink:
    """Writes lines verbatim to a text stream.

    With no stream, the current ``sys.stderr`` is looked up on every write so
    redirection after construction is honoured.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self._lock = threading.Lock()

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stderr

    def write_line(self, line: str) -> None:
        with self._lock:
            stream = self.stream
            stream.write(line)
            stream.flush()


class LoggingSink:
    """Forwards lines to a stdlib logger at debug severity."""

    def __init__(self, logger: logging.Logger | None = None, level: int = logging.DEBUG) -> None:
        self.logger = logger or logging.getLogger("calltracer")
        self.level = level

    def write_line(self, line: str) -> None:
        # logging adds its own terminator; drop only ours
        self.logger.log(self.level, "%s", line[:-1] if line.endswith("\n") else line)


class _RawLine:
    """Renderable that hands its text to the console untouched."""

    def __init__(self, text: str) -> None:
        self.text = text

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        yield Segment(self.text)


class RichConsoleSink:
    """Prints lines through a rich Console (stderr by default).

    Lines are written as raw segments: no markup, emoji codes, highlighting,
    tab expansion or cropping is applied to the trace text.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(
            stderr=True,
            markup=False,
            emoji=False,
            highlight=False,
            soft_wrap=True,
        )

    def write_line(self, line: str) -> None:
        self.console.print(_RawLine(line), end="", crop=False, emoji=False, markup=False, highlight=False)


class MemorySink:
    """In-memory sink. Good for tests and short-lived scripts."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def write_line(self, line: str) -> None:
        self.lines.append(line)

    def text(self) -> str:
        return "".join(self.lines)

    def clear(self) -> None:
        self.lines.clear()


class CallableSink:
    """Adapts a plain ``Callable[[str], None]`` to the sink protocol."""

    def __init__(self, func: Callable[[str], None]) -> None:
        self.func = func

    def write_line(self, line: str) -> None:
        self.func(line)
