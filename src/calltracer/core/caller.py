"""Caller identity resolution via frame introspection."""

from __future__ import annotations

import inspect
from typing import Protocol

UNKNOWN_CALLER = "<unknown>"


def strip_qualifier(name: str) -> str:
    """Return everything after the last dot in ``name``."""
    return name.rpartition(".")[2]


class CallerResolver(Protocol):
    """Resolves the simple name of a function further up the call stack.

    ``skip_frames=0`` names the direct caller of ``resolve_caller_name``;
    each extra frame skips one more level of wrappers.
    """

    def resolve_caller_name(self, skip_frames: int) -> str: ...


class FrameCallerResolver:
    """Walks interpreter frames to find the caller's name."""

    def resolve_caller_name(self, skip_frames: int) -> str:
        frame = inspect.currentframe()
        try:
            # the first hop leaves this method
            for _ in range(skip_frames + 1):
                if frame is None:
                    return UNKNOWN_CALLER
                frame = frame.f_back
            if frame is None:
                return UNKNOWN_CALLER
            module = frame.f_globals.get("__name__", "")
            qualified = f"{module}.{frame.f_code.co_qualname}" if module else frame.f_code.co_qualname
            return strip_qualifier(qualified)
        finally:
            del frame


class StaticCallerResolver:
    """Deterministic resolver for tests. Records every requested skip count."""

    def __init__(self, name: str = UNKNOWN_CALLER) -> None:
        self.name = name
        self.requested_skips: list[int] = []

    def resolve_caller_name(self, skip_frames: int) -> str:
        self.requested_skips.append(skip_frames)
        return self.name
