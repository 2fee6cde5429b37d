"""Tests for Immediate/Deferred entries and lift()."""

from __future__ import annotations

import asyncio
from collections.abc import Generator
from typing import Any

import pytest
from asyncbag import Deferred, Immediate, lift
from hypothesis import given

from tests.helpers import delayed
from tests.strategies import plain_values


class AwaitableThing:
    """A non-coroutine object implementing __await__."""

    def __await__(self) -> Generator[Any, None, str]:
        return delayed('thing').__await__()


class TestLift:
    """Tests for lift()."""

    @given(plain_values)
    def test_plain_values_become_immediate(self, value: object) -> None:
        """Non-awaitable values are lifted to Immediate unchanged."""
        assert lift(value) == Immediate(value)

    def test_coroutine_becomes_deferred(self) -> None:
        """Coroutine objects are lifted to Deferred."""
        coro = delayed(1)
        entry = lift(coro)
        assert isinstance(entry, Deferred)
        assert entry.awaitable is coro
        coro.close()

    async def test_future_becomes_deferred(self) -> None:
        """Futures and tasks are lifted to Deferred."""
        future = asyncio.get_running_loop().create_future()
        task = asyncio.ensure_future(delayed(2))
        assert isinstance(lift(future), Deferred)
        assert isinstance(lift(task), Deferred)
        future.cancel()
        assert await task == 2

    def test_custom_awaitable_becomes_deferred(self) -> None:
        """Objects with __await__ are lifted to Deferred."""
        assert isinstance(lift(AwaitableThing()), Deferred)

    @pytest.mark.parametrize('entry', [Immediate(1), Immediate(None)])
    def test_immediate_passes_through(self, entry: Immediate[Any]) -> None:
        """Immediate entries are returned as-is."""
        assert lift(entry) is entry

    def test_deferred_passes_through(self) -> None:
        """Deferred entries are returned as-is."""
        coro = delayed(1)
        entry = Deferred(coro)
        assert lift(entry) is entry
        coro.close()

    def test_immediate_can_hold_an_awaitable(self) -> None:
        """An explicit Immediate keeps an awaitable as a plain value."""
        coro = delayed(1)
        entry = Immediate(coro)
        assert lift(entry) is entry
        coro.close()
