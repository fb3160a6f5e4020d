"""Public exception types for calltracer."""

from __future__ import annotations


class CalltracerError(Exception):
    """Base class for all calltracer exceptions."""


class TracerDepthError(CalltracerError):
    """Raised when ``exit`` is called without a matching ``enter``.

    This signals unbalanced instrumentation in the calling code. The tracer
    does not clamp the depth back to zero, so the error repeats on every
    further unbalanced ``exit``.
    """
