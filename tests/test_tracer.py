from __future__ import annotations

import asyncio

import pytest

from calltracer import configure, enter, exit, trace
from calltracer.core import MemorySink, StaticCallerResolver, Tracer, TracerConfig
from calltracer.exceptions import TracerDepthError


def test_enter_exit_lifecycle_with_defaults(sink: MemorySink) -> None:
    tracer = Tracer(TracerConfig(sink=sink))

    def load_user() -> None:
        message = tracer.enter()
        assert tracer.depth == 1
        tracer.exit(message)

    load_user()

    assert tracer.depth == 0
    assert sink.lines == ["[ 0]ENTER: load_user\n", "[ 0]EXIT: load_user\n"]


def test_nested_enters_render_increasing_depth(sink: MemorySink) -> None:
    tracer = Tracer(TracerConfig(sink=sink), resolver=StaticCallerResolver("fn"))

    messages = [tracer.enter("level %d", n) for n in range(3)]
    for message in reversed(messages):
        tracer.exit(message)

    assert sink.lines == [
        "[ 0]ENTER: level 0\n",
        "[ 1]  ENTER: level 1\n",
        "[ 2]    ENTER: level 2\n",
        "[ 2]    EXIT: level 2\n",
        "[ 1]  EXIT: level 1\n",
        "[ 0]EXIT: level 0\n",
    ]
    assert tracer.depth == 0


def test_indent_scenario_without_depth_value(sink: MemorySink) -> None:
    tracer = Tracer(TracerConfig(sink=sink, spaces_per_indent=4, show_depth_value=False))

    messages = [tracer.enter("step") for _ in range(3)]
    for message in reversed(messages):
        tracer.exit(message)

    widths = [len(line) - len(line.lstrip(" ")) for line in sink.lines]
    assert widths == [0, 4, 8, 8, 4, 0]


def test_depth_value_and_indent_at_depth_three(sink: MemorySink) -> None:
    tracer = Tracer(TracerConfig(sink=sink, spaces_per_indent=2), resolver=StaticCallerResolver("fn"))

    for _ in range(3):
        tracer.enter()
    tracer.enter("deep")

    assert sink.lines[-1] == "[ 3]      ENTER: deep\n"


def test_nesting_disabled_keeps_lines_flush(sink: MemorySink) -> None:
    tracer = Tracer(
        TracerConfig(sink=sink, nesting_disabled=True, spaces_per_indent=6),
        resolver=StaticCallerResolver("fn"),
    )

    outer = tracer.enter()
    inner = tracer.enter()
    tracer.exit(inner)
    tracer.exit(outer)

    assert sink.lines == ["[ 0]ENTER: fn\n", "[ 1]ENTER: fn\n", "[ 1]EXIT: fn\n", "[ 0]EXIT: fn\n"]


def test_custom_labels(sink: MemorySink) -> None:
    tracer = Tracer(
        TracerConfig(sink=sink, enter_message="-> ", exit_message="<- ", show_depth_value=False),
        resolver=StaticCallerResolver("fn"),
    )

    tracer.exit(tracer.enter())

    assert sink.lines == ["-> fn\n", "<- fn\n"]


def test_enter_returns_rendered_message(sink: MemorySink) -> None:
    tracer = Tracer(TracerConfig(sink=sink))

    def parse_header() -> str:
        return tracer.enter("$FN starting, size=%d", 10)

    assert parse_header() == "parse_header starting, size=10"


def test_enter_requests_caller_of_enter(sink: MemorySink) -> None:
    resolver = StaticCallerResolver("fn")
    tracer = Tracer(TracerConfig(sink=sink), resolver=resolver)

    tracer.enter()
    with tracer.trace():
        pass

    assert resolver.requested_skips == [2, 2]


def test_unbalanced_exit_is_fatal_every_time(sink: MemorySink) -> None:
    tracer = Tracer(TracerConfig(sink=sink))

    for _ in range(3):
        with pytest.raises(TracerDepthError):
            tracer.exit("orphan")

    assert tracer.depth == 0
    assert sink.lines == []


def test_extra_exit_after_balanced_pair_is_fatal(sink: MemorySink) -> None:
    tracer = Tracer(TracerConfig(sink=sink))
    message = tracer.enter("once")
    tracer.exit(message)

    with pytest.raises(TracerDepthError):
        tracer.exit(message)


def test_trace_context_manager_names_the_enclosing_function(sink: MemorySink) -> None:
    tracer = Tracer(TracerConfig(sink=sink))

    def handle_request() -> str:
        with tracer.trace() as message:
            assert tracer.depth == 1
            return message

    assert handle_request() == "handle_request"
    assert tracer.depth == 0
    assert sink.lines == ["[ 0]ENTER: handle_request\n", "[ 0]EXIT: handle_request\n"]


def test_trace_exits_when_block_raises(sink: MemorySink) -> None:
    tracer = Tracer(TracerConfig(sink=sink), resolver=StaticCallerResolver("fn"))

    with pytest.raises(RuntimeError, match="boom"), tracer.trace("failing"):
        raise RuntimeError("boom")

    assert tracer.depth == 0
    assert sink.lines[-1] == "[ 0]EXIT: failing\n"


@pytest.mark.asyncio
async def test_trace_async_context_manager(sink: MemorySink) -> None:
    tracer = Tracer(TracerConfig(sink=sink, show_depth_value=False))

    async def fetch_page() -> None:
        async with tracer.trace("$FN page=%d", 2):
            await asyncio.sleep(0)

    await fetch_page()

    assert sink.lines == ["ENTER: fetch_page page=2\n", "EXIT: fetch_page page=2\n"]


def test_disabled_tracer_is_a_no_op(sink: MemorySink) -> None:
    tracer = Tracer(TracerConfig(tracing_enabled=False, sink=sink))

    assert tracer.enabled is False
    assert tracer.config is None
    assert tracer.enter() == ""
    assert tracer.enter("x=%d", 1, object()) == ""
    tracer.exit("anything")
    tracer.exit("")
    with tracer.trace() as message:
        assert message == ""

    assert tracer.depth == 0
    assert sink.lines == []


def test_default_sink_writes_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    tracer = Tracer()

    def boot() -> None:
        tracer.exit(tracer.enter())

    boot()

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "[ 0]ENTER: boot\n[ 0]EXIT: boot\n"


def test_module_level_api_names_caller(sink: MemorySink) -> None:
    configure(sink=sink, show_depth_value=False)

    def reconcile() -> None:
        message = enter()
        with trace("inner of $FN"):
            pass
        exit(message)

    reconcile()

    assert sink.lines == [
        "ENTER: reconcile\n",
        "  ENTER: inner of reconcile\n",
        "  EXIT: inner of reconcile\n",
        "EXIT: reconcile\n",
    ]


def test_configure_rejects_unknown_sink_name() -> None:
    with pytest.raises(ValueError, match="Unsupported sink"):
        configure(sink="syslog")


def test_configure_disabled_skips_sink_resolution() -> None:
    tracer = configure(tracing_enabled=False, sink="syslog")

    assert tracer.enabled is False
    assert enter() == ""


def test_enter_with_unprintable_argument_never_raises(sink: MemorySink) -> None:
    class Unprintable:
        def __str__(self) -> str:
            raise RuntimeError("bad str")

        __repr__ = __str__

    tracer = Tracer(TracerConfig(sink=sink, show_depth_value=False), resolver=StaticCallerResolver("fn"))

    message = tracer.enter("obj=%s", Unprintable())
    tracer.exit(message)

    assert message == "obj=%s%!(EXTRA Unprintable=<Unprintable str failed>)"
    assert tracer.depth == 0
    assert len(sink.lines) == 2


def test_reused_scope_in_nested_blocks_stays_balanced(sink: MemorySink) -> None:
    tracer = Tracer(TracerConfig(sink=sink, show_depth_value=False), resolver=StaticCallerResolver("fn"))
    scope = tracer.trace("shared")

    with scope as outer:
        with scope as inner:
            assert tracer.depth == 2
            assert scope.message == inner
        assert scope.message == outer

    assert scope.message is None
    assert tracer.depth == 0
    assert sink.lines == [
        "ENTER: shared\n",
        "  ENTER: shared\n",
        "  EXIT: shared\n",
        "EXIT: shared\n",
    ]
