"""Tracer: logs enter/exit lines around traced scopes."""

from __future__ import annotations

import warnings
from types import TracebackType

from ..exceptions import TracerDepthError
from .caller import CallerResolver, FrameCallerResolver
from .formatting import build_message, format_line, render_prefix
from .tracer_config import ResolvedConfig, TracerConfig, resolve_config


class Tracer:
    """Owns its resolved config and depth counter.

    Error-handling contract
    ----------------------
    - Construction never raises for a valid ``TracerConfig``; unset fields
      take their defaults.
    - ``exit`` without a matching ``enter`` raises ``TracerDepthError``. This
      is a bug in the instrumented code and is never clamped away.
    - A failing sink is reported with ``warnings.warn`` and the line is
      dropped, so the host application keeps running.

    The depth counter is plain instance state. Share a Tracer across threads
    only with external locking; otherwise give each thread its own Tracer.
    """

    def __init__(
        self,
        config: TracerConfig | None = None,
        resolver: CallerResolver | None = None,
    ) -> None:
        self.config: ResolvedConfig | None = resolve_config(config)
        self._resolver: CallerResolver = resolver or FrameCallerResolver()
        self._depth = 0

    @property
    def enabled(self) -> bool:
        return self.config is not None

    @property
    def depth(self) -> int:
        return self._depth

    def enter(self, *args: object) -> str:
        """Open a traced scope and return its message for the paired ``exit``."""
        return self._enter(args, skip_frames=1)

    def exit(self, message: str) -> None:
        """Close the innermost traced scope."""
        config = self.config
        if config is None:
            return
        if self._depth == 0:
            raise TracerDepthError(f"exit({message!r}) called without a matching enter")
        self._depth -= 1
        self._emit(config, config.exit_message, message)

    def trace(self, *args: object) -> TraceScope:
        """Trace a ``with`` block: ``enter`` on entry, ``exit`` however it ends."""
        return TraceScope(self, args)

    def _enter(
        self,
        args: tuple[object, ...],
        skip_frames: int,
        caller_name: str | None = None,
    ) -> str:
        """``skip_frames`` counts the public entry points between here and the caller."""
        config = self.config
        if config is None:
            return ""
        if caller_name is None:
            caller_name = self._resolver.resolve_caller_name(skip_frames + 1)
        message = build_message(args, caller_name)
        # depth only moves once the caller is guaranteed to get the message back
        self._emit(config, config.enter_message, message)
        self._depth += 1
        return message

    def _emit(self, config: ResolvedConfig, label: str, message: str) -> None:
        prefix = render_prefix(self._depth, config.spaces_per_indent, config.show_depth_value)
        line = format_line(prefix, label, message)
        try:
            config.sink.write_line(line)
        except Exception:
            warnings.warn(
                f"calltracer: sink failed to record line {line.rstrip()!r}. Line has been dropped.",
                stacklevel=2,
            )


class TraceScope:
    """Sync + async context manager pairing one ``enter`` with one ``exit``.

    The same scope may be re-entered while already open (e.g. reused in
    nested ``with`` blocks); every entry gets its own matching exit.
    """

    def __init__(self, tracer: Tracer, args: tuple[object, ...]) -> None:
        self._tracer = tracer
        self._args = args
        self._messages: list[str] = []

    @property
    def message(self) -> str | None:
        """Message of the innermost open entry, or None when not entered."""
        return self._messages[-1] if self._messages else None

    def __enter__(self) -> str:
        message = self._tracer._enter(self._args, skip_frames=1)
        self._messages.append(message)
        return message

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        if self._messages:
            self._tracer.exit(self._messages.pop())
        return False

    async def __aenter__(self) -> str:
        message = self._tracer._enter(self._args, skip_frames=1)
        self._messages.append(message)
        return message

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        return self.__exit__(exc_type, exc, tb)


_default_tracer: Tracer | None = None


def get_default_tracer() -> Tracer:
    """Return the default Tracer, creating one with default config if needed."""
    global _default_tracer
    if _default_tracer is None:
        _default_tracer = Tracer()
    return _default_tracer


def set_default_tracer(tracer: Tracer | None) -> None:
    global _default_tracer
    _default_tracer = tracer
