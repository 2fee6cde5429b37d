"""Stateless bag resolution: resolve_bag and settle_bag.

Both take a mapping of raw values, entries or awaitables and return a new
dict with the same keys in the same order. Neither raises for a failing
entry; the failure takes that entry's place in the output.

Example:
    ```python
    async def main():
        out = await resolve_bag({
            'user': fetch_user(1),
            'orders': fetch_orders(1),
            'limit': 10,
        })
        if isinstance(out['orders'], Exception):
            ...
    ```
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from asyncbag._config import BagConfig
from asyncbag.entry import lift
from asyncbag.result import Result
from asyncbag.settle import settle_all

__all__ = ['resolve_bag', 'settle_bag']


async def settle_bag(
    bag: Mapping[str, Any],
    *,
    config: BagConfig | None = None,
    name: str | None = None,
) -> dict[str, Result[Any, BaseException]]:
    """Resolve every value of a bag into an Ok or Err.

    Args:
        bag: Mapping of key to value, awaitable, Immediate or Deferred.
        config: Overrides the process-wide config.
        name: Bag name bound as ``bag`` to log events.

    Returns:
        Dict with the keys of ``bag`` in order, each mapped to its Result.
    """
    return await settle_all({key: lift(value) for key, value in bag.items()}, config=config, name=name)


async def resolve_bag(
    bag: Mapping[str, Any],
    *,
    config: BagConfig | None = None,
    name: str | None = None,
) -> dict[str, Any]:
    """Resolve every value of a bag into its outcome.

    Awaitables are all started before any is awaited, and the call waits
    for all of them. The input mapping is not modified.

    Args:
        bag: Mapping of key to value, awaitable, Immediate or Deferred.
        config: Overrides the process-wide config.
        name: Bag name bound as ``bag`` to log events.

    Returns:
        Dict with the keys of ``bag`` in order. Each value is what the entry
        produced, or the exception it raised. Plain values pass through.

    Example:
        ```python
        out = await resolve_bag({'a': 1, 'b': ok_later(2), 'c': fail_later('boom')})
        # {'a': 1, 'b': 2, 'c': ValueError('boom')}
        ```
    """
    settled = await settle_bag(bag, config=config, name=name)
    return {key: result.outcome() for key, result in settled.items()}
