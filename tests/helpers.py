"""Async helpers that stand in for real pending computations in tests."""

from __future__ import annotations

from collections.abc import Coroutine
from typing import Any

import anyio
import pytest


async def delayed[T](value: T, delay: float = 0.0) -> T:
    """Return ``value`` after ``delay`` seconds."""
    await anyio.sleep(delay)
    return value


async def failing(message: str, delay: float = 0.0, exc_type: type[Exception] = ValueError) -> None:
    """Raise ``exc_type(message)`` after ``delay`` seconds."""
    await anyio.sleep(delay)
    raise exc_type(message)


class Counter:
    """Counts how many times its computation actually runs."""

    def __init__(self) -> None:
        self.calls = 0

    async def run[T](self, value: T, delay: float = 0.0) -> T:
        self.calls += 1
        await anyio.sleep(delay)
        return value


def run_without_suspending(coro: Coroutine[Any, Any, Any]) -> Any:
    """Drive a coroutine one step and return its result; fail if it suspends."""
    try:
        coro.send(None)
    except StopIteration as stop:
        return stop.value
    coro.close()
    pytest.fail('coroutine suspended')
