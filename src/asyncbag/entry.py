"""Input entries: Immediate | Deferred.

Every value in an input bag is lifted into one of two variants before
resolution. Callers can build entries explicitly, or pass raw values and let
``lift`` classify them once at the boundary.

Example:
    ```python
    bag = {
        'config': Immediate({'retries': 3}),
        'user': Deferred(fetch_user(1)),
        'orders': fetch_orders(1),  # lifted to Deferred
        'limit': 10,  # lifted to Immediate
    }
    ```
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable
from typing import Any

import msgspec

__all__ = ['Deferred', 'Entry', 'Immediate', 'lift']


class Immediate[T](msgspec.Struct, frozen=True):
    """An already available value; settles to ``Ok(value)`` without suspending."""

    value: T


class Deferred[T](msgspec.Struct, frozen=True):
    """A pending computation.

    Note:
        Coroutine objects can only be awaited once. A Deferred wrapping a
        coroutine is single-shot; wrap a Task or Future to share it between
        several bags.
    """

    awaitable: Awaitable[T]


type Entry[T] = Immediate[T] | Deferred[T]


def lift(value: Any) -> Entry[Any]:
    """Lift a raw bag value into an Entry.

    Entries pass through unchanged. Anything ``inspect.isawaitable`` accepts
    (coroutines, tasks, futures, objects with ``__await__``) becomes Deferred;
    every other value becomes Immediate.

    Examples:
        >>> lift(1)
        Immediate(value=1)
        >>> lift(Immediate(1))
        Immediate(value=1)
    """
    if isinstance(value, Immediate | Deferred):
        return value
    if inspect.isawaitable(value):
        return Deferred(value)
    return Immediate(value)
