"""Function decorators for enter/exit tracing."""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from functools import wraps
from typing import ParamSpec, TypeVar, cast

from .caller import strip_qualifier
from .tracer import Tracer, get_default_tracer

P = ParamSpec("P")
R = TypeVar("R")


def traced(
    tracer: Tracer | None = None,
    message: str | None = None,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Log enter/exit lines around every call of the decorated function.

    The caller identity is the function's own simple name, so ``message``
    may use ``$FN``. When ``tracer`` is None the default tracer is looked up
    on each call, which lets ``calltracer.configure()`` run after decoration.
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        fn_name = strip_qualifier(getattr(func, "__qualname__", None) or getattr(func, "__name__", "callable"))
        args = (message,) if message is not None else ()

        if inspect.iscoroutinefunction(func):
            async_func = cast(Callable[P, Awaitable[R]], func)

            @wraps(func)
            async def async_wrapper(*call_args: P.args, **call_kwargs: P.kwargs) -> R:
                active = tracer or get_default_tracer()
                trace_message = active._enter(args, skip_frames=0, caller_name=fn_name)
                try:
                    return await async_func(*call_args, **call_kwargs)
                finally:
                    active.exit(trace_message)

            return cast(Callable[P, R], async_wrapper)

        @wraps(func)
        def wrapper(*call_args: P.args, **call_kwargs: P.kwargs) -> R:
            active = tracer or get_default_tracer()
            trace_message = active._enter(args, skip_frames=0, caller_name=fn_name)
            try:
                return func(*call_args, **call_kwargs)
            finally:
                active.exit(trace_message)

        return wrapper

    return decorator
