from __future__ import annotations

import calltracer


def reset_calltracer_config() -> None:
    """Reset the default tracer between tests."""
    calltracer._reset_default_tracer()


import pytest  # noqa: E402

from calltracer.core import MemorySink  # noqa: E402


@pytest.fixture(autouse=True)
def _reset_config() -> None:
    reset_calltracer_config()


@pytest.fixture
def sink() -> MemorySink:
    return MemorySink()
