"""calltracer: enter/exit call tracing with automatic caller names.

Convenience API (delegates to a default Tracer instance):
    calltracer.configure(...)   -> set up default tracer
    calltracer.enter(...)       -> log an enter line, returns the message
    calltracer.exit(message)    -> log the matching exit line
    calltracer.trace(...)       -> context manager pairing enter and exit
    calltracer.traced(...)      -> decorator for function-level tracing

DI API (construct your own Tracer):
    from calltracer.core import Tracer, TracerConfig
    tracer = Tracer(config=TracerConfig(spaces_per_indent=4))
    def work():
        with tracer.trace():
            ...
"""

from __future__ import annotations

import sys

from .core import (
    CallableSink,
    LoggingSink,
    LogSink,
    MemorySink,
    RichConsoleSink,
    StreamSink,
    TraceScope,
    Tracer,
    TracerConfig,
    get_default_tracer,
    set_default_tracer,
    traced,
)
from .exceptions import CalltracerError, TracerDepthError


def configure(
    *,
    tracing_enabled: bool = True,
    sink: str | LogSink = "stderr",
    show_depth_value: bool = True,
    spaces_per_indent: int = 0,
    enter_message: str = "",
    exit_message: str = "",
    nesting_disabled: bool = False,
) -> Tracer:
    """Configure and return the default global Tracer instance."""
    config = TracerConfig(
        tracing_enabled=tracing_enabled,
        sink=_resolve_sink(sink) if tracing_enabled else None,
        show_depth_value=show_depth_value,
        spaces_per_indent=spaces_per_indent,
        enter_message=enter_message,
        exit_message=exit_message,
        nesting_disabled=nesting_disabled,
    )
    tracer = Tracer(config=config)
    set_default_tracer(tracer)
    return tracer


def enter(*args: object) -> str:
    """Log an enter line on the default Tracer. Names the code calling this function."""
    return get_default_tracer()._enter(args, skip_frames=1)


def exit(message: str) -> None:  # noqa: A001
    """Log the exit line matching ``enter`` on the default Tracer."""
    get_default_tracer().exit(message)


def trace(*args: object) -> TraceScope:
    """Trace a ``with`` block using the default Tracer."""
    return get_default_tracer().trace(*args)


def _reset_default_tracer() -> None:
    """Reset the default tracer. Used by test fixtures."""
    set_default_tracer(None)


def _resolve_sink(sink: str | LogSink) -> LogSink:
    if not isinstance(sink, str):
        return sink
    if sink == "stderr":
        return StreamSink()
    if sink == "stdout":
        return StreamSink(sys.stdout)
    if sink == "logging":
        return LoggingSink()
    if sink == "rich":
        return RichConsoleSink()
    if sink == "memory":
        return MemorySink()
    raise ValueError(
        "Unsupported sink value. Use 'stderr', 'stdout', 'logging', 'rich', 'memory', "
        "or a LogSink instance."
    )


__all__ = [
    "CallableSink",
    "CalltracerError",
    "LogSink",
    "LoggingSink",
    "MemorySink",
    "RichConsoleSink",
    "StreamSink",
    "TraceScope",
    "Tracer",
    "TracerConfig",
    "TracerDepthError",
    "configure",
    "enter",
    "exit",
    "trace",
    "traced",
]
