"""Configuration for a Tracer instance."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .sinks import LogSink, StreamSink

DEFAULT_ENTER_MESSAGE = "ENTER: "
DEFAULT_EXIT_MESSAGE = "EXIT: "
DEFAULT_SPACES_PER_INDENT = 2


class TracerConfig(BaseModel):
    """Validated configuration for a Tracer. Passed via DI at construction.

    Empty strings and a zero indent mean "unset" and are replaced by the
    defaults during resolution, so an empty enter/exit label cannot be
    requested.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    tracing_enabled: bool = True
    sink: LogSink | None = None
    show_depth_value: bool = True
    spaces_per_indent: int = Field(default=0, ge=0)
    enter_message: str = ""
    exit_message: str = ""
    nesting_disabled: bool = False


class ResolvedConfig(BaseModel):
    """Configuration with every default applied. Immutable."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    sink: LogSink
    show_depth_value: bool
    spaces_per_indent: int
    enter_message: str
    exit_message: str


def resolve_config(config: TracerConfig | None) -> ResolvedConfig | None:
    """Apply defaults to ``config``.

    Returns ``None`` when tracing is disabled; nothing else is resolved in
    that case, not even the default sink.
    """
    config = config or TracerConfig()
    if not config.tracing_enabled:
        return None

    sink = config.sink if config.sink is not None else StreamSink()
    enter_message = config.enter_message or DEFAULT_ENTER_MESSAGE
    exit_message = config.exit_message or DEFAULT_EXIT_MESSAGE

    if config.nesting_disabled:
        spaces_per_indent = 0
    else:
        spaces_per_indent = config.spaces_per_indent or DEFAULT_SPACES_PER_INDENT

    return ResolvedConfig(
        sink=sink,
        show_depth_value=config.show_depth_value,
        spaces_per_indent=spaces_per_indent,
        enter_message=enter_message,
        exit_message=exit_message,
    )
