"""Settle primitives shared by resolve_bag and InitializableBag.

``settle`` waits for one awaitable and captures its failure as a value.
``settle_all`` fans a whole bag of entries out in one anyio task group and
waits for every entry to settle, whatever the others do.

Example:
    ```python
    results = await settle_all({'a': Immediate(1), 'b': Deferred(fetch())})
    # {'a': Ok(value=1), 'b': Err(error=TimeoutError(...))}
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Mapping
from typing import Any

import anyio

from asyncbag._config import BagConfig, get_config
from asyncbag._logging import get_logger
from asyncbag.entry import Deferred, Entry, Immediate
from asyncbag.result import Err, Ok, Result

__all__ = ['settle', 'settle_all']

logger = get_logger(__name__)


async def settle[T](
    awaitable: Awaitable[T],
    *,
    capture: tuple[type[BaseException], ...] = (Exception,),
) -> Result[T, BaseException]:
    """Wait for an awaitable and return its outcome as a Result.

    Args:
        awaitable: The pending computation.
        capture: Exception types turned into Err. Anything else propagates.

    Returns:
        Ok(value) on success, Err(exception) if one of ``capture`` was raised.

    Example:
        ```python
        async def boom() -> int:
            raise ValueError('boom')

        result = await settle(boom())
        assert result.is_err()
        ```
    """
    try:
        return Ok(await awaitable)
    except capture as e:
        return Err(e)


async def settle_all(
    entries: Mapping[str, Entry[Any]],
    *,
    config: BagConfig | None = None,
    name: str | None = None,
) -> dict[str, Result[Any, BaseException]]:
    """Settle every entry concurrently.

    Immediate entries settle on the spot. All Deferred entries are started
    in a single task group before any of them is awaited, and the call
    returns only once every one of them has settled. A failing entry never
    cancels its siblings.

    Note:
        If nothing is Deferred the call returns without suspending.

    Args:
        entries: Lifted bag entries, keyed by name.
        config: Overrides the process-wide config.
        name: Bag name bound as ``bag`` to every log event of this call.

    Returns:
        A new dict with the keys of ``entries``, in the same order, each
        mapped to its Result.
    """
    capture = (config or get_config()).capture
    results: dict[str, Any] = dict.fromkeys(entries)
    pending: list[tuple[str, Awaitable[Any]]] = []

    for key, entry in entries.items():
        match entry:
            case Immediate(value=value):
                results[key] = Ok(value)
            case Deferred(awaitable=awaitable):
                pending.append((key, awaitable))
            case _:
                msg = f'Expected Immediate or Deferred for {key!r}, got {type(entry).__name__}'
                raise TypeError(msg)

    if not pending:
        return results

    log = logger.bind(bag=name) if name is not None else logger
    log.debug('bag.fanout.start', entries=len(results), deferred=len(pending))
    failed: list[str] = []

    async def run_one(key: str, awaitable: Awaitable[Any]) -> None:
        result = await settle(awaitable, capture=capture)
        results[key] = result
        if isinstance(result, Err):
            failed.append(key)
            log.debug(
                'bag.entry.failed',
                key=key,
                error_type=type(result.error).__name__,
                error=str(result.error),
            )

    async with anyio.create_task_group() as tg:
        for key, awaitable in pending:
            tg.start_soon(run_one, key, awaitable)

    log.debug('bag.fanout.done', entries=len(results), failed=len(failed))
    return results
