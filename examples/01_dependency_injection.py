"""Example 1: Constructing your own Tracer.

A tracer per unit of work, logging through the stdlib ``logging`` module and
the ``traced`` decorator for whole functions.
"""

from __future__ import annotations

import logging

from calltracer.core import LoggingSink, Tracer, TracerConfig, traced

logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s %(message)s")

tracer = Tracer(
    config=TracerConfig(
        sink=LoggingSink(),
        show_depth_value=False,
        enter_message="-> ",
        exit_message="<- ",
    )
)


@traced(tracer)
def tokenize(text: str) -> list[str]:
    return text.split()


@traced(tracer, message="$FN (stop words removed)")
def filter_words(words: list[str]) -> list[str]:
    return [word for word in words if word not in {"the", "a"}]


@traced(tracer)
def pipeline(text: str) -> list[str]:
    return filter_words(tokenize(text))


def main() -> None:
    print(pipeline("the quick brown fox jumps over a lazy dog"))


if __name__ == "__main__":
    main()
