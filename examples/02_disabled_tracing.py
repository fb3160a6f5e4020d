"""Example 2: Toggling tracing off without touching call sites."""

from __future__ import annotations

import os

from calltracer.core import RichConsoleSink, Tracer, TracerConfig

tracer = Tracer(
    config=TracerConfig(
        tracing_enabled=os.environ.get("TRACE") == "1",
        sink=RichConsoleSink(),
    )
)


def factorial(n: int) -> int:
    with tracer.trace("$FN(%d)", n):
        return 1 if n <= 1 else n * factorial(n - 1)


def main() -> None:
    print(factorial(5))


if __name__ == "__main__":
    main()
