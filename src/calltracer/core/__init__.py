"""Core tracing runtime."""

from .caller import (
    UNKNOWN_CALLER,
    CallerResolver,
    FrameCallerResolver,
    StaticCallerResolver,
    strip_qualifier,
)
from .decorators import traced
from .sinks import CallableSink, LoggingSink, LogSink, MemorySink, RichConsoleSink, StreamSink
from .tracer import TraceScope, Tracer, get_default_tracer, set_default_tracer
from .tracer_config import ResolvedConfig, TracerConfig, resolve_config

__all__ = [
    "UNKNOWN_CALLER",
    "CallableSink",
    "CallerResolver",
    "FrameCallerResolver",
    "LogSink",
    "LoggingSink",
    "MemorySink",
    "ResolvedConfig",
    "RichConsoleSink",
    "StaticCallerResolver",
    "StreamSink",
    "TraceScope",
    "Tracer",
    "TracerConfig",
    "get_default_tracer",
    "resolve_config",
    "set_default_tracer",
    "strip_qualifier",
    "traced",
]
