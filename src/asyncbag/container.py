"""InitializableBag: a bag of pending computations resolved once, in place.

Example:
    ```python
    bag = InitializableBag({
        'user': fetch_user(1),
        'orders': fetch_orders(1),
    })
    bag.get('user')           # the coroutine, not yet resolved
    await bag.initialize()
    bag.is_initialized()      # True
    bag.get('user')           # the user, or the exception fetch_user raised
    ```
"""

from __future__ import annotations

from collections.abc import ItemsView, Iterator, KeysView, Mapping
from types import MappingProxyType
from typing import Any

import aiologic

from asyncbag._config import BagConfig
from asyncbag._logging import get_logger
from asyncbag.entry import lift
from asyncbag.errors import InitializeAborted, NotInitialized, UnknownKey
from asyncbag.result import Err, Ok, Result
from asyncbag.settle import settle_all

__all__ = ['InitializableBag']

logger = get_logger(__name__)


class InitializableBag:
    """Wraps a bag of pending computations and resolves it on demand.

    The bag keeps a shallow copy of the input mapping. ``initialize()``
    settles every entry concurrently, then replaces every key with its
    outcome in one step and marks the bag initialized. The transition
    happens once; later calls return the cached view without re-running
    anything.

    Note:
        Until ``initialize()`` has completed, ``get()`` returns the raw
        values that were passed in. If ``initialize()`` is cancelled, or an
        uncaptured exception escapes it, the bag keeps its raw values and
        refuses to initialize again, since some computations may already
        have been consumed.

    Attributes:
        _data: Raw values before initialization, outcomes afterwards.
        _results: Tagged outcomes, set together with _data.
        _initialized: Set once initialize() has completed.
        _aborted: Why an earlier initialize() did not complete, if it didn't.
        _lock: Serializes concurrent initialize() calls.
    """

    __slots__ = ('_aborted', '_config', '_data', '_initialized', '_lock', '_name', '_results', '_view')

    def __init__(
        self,
        bag: Mapping[str, Any],
        *,
        config: BagConfig | None = None,
        name: str | None = None,
    ) -> None:
        """Create a bag.

        Args:
            bag: Mapping of key to value, awaitable, Immediate or Deferred.
            config: Overrides the process-wide config during initialize().
            name: Bound as ``bag`` to the log events of this bag.
        """
        self._data: dict[str, Any] = dict(bag)
        self._results: dict[str, Result[Any, BaseException]] = {}
        self._initialized = False
        self._aborted: InitializeAborted | None = None
        self._lock = aiologic.Lock()
        self._config = config
        self._name = name
        self._view: Mapping[str, Any] = MappingProxyType(self._data)

    async def initialize(self) -> Mapping[str, Any]:
        """Resolve every entry and store the outcomes in place.

        Never raises for a failing entry: the exception becomes that key's
        outcome. Concurrent callers wait for the same resolution.

        Returns:
            A read-only live view of the bag's outcomes, keyed in input order.

        Raises:
            InitializeAbortedError: If an earlier initialize() was aborted.
        """
        if self._initialized:
            logger.debug('bag.initialize.cached', bag=self._name, entries=len(self._data))
            return self._view

        async with self._lock:
            if self._aborted is not None:
                raise self._aborted.to_exception()
            if self._initialized:
                logger.debug('bag.initialize.cached', bag=self._name, entries=len(self._data))
                return self._view

            entries = {key: lift(value) for key, value in self._data.items()}
            try:
                settled = await settle_all(entries, config=self._config, name=self._name)
            except BaseException as e:
                self._aborted = InitializeAborted(type(e).__name__)
                logger.warning('bag.initialize.aborted', bag=self._name, reason=self._aborted.reason)
                raise

            self._results = settled
            self._data.update((key, result.outcome()) for key, result in settled.items())
            self._initialized = True
        return self._view

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value currently stored for ``key``.

        Before initialization this is whatever was passed in; afterwards it
        is the outcome. Absent keys return ``default``.
        """
        return self._data.get(key, default)

    def is_initialized(self) -> bool:
        """Check whether initialize() has completed."""
        return self._initialized

    def result(self, key: str) -> Result[Any, BaseException]:
        """Return the tagged outcome for ``key``.

        Raises:
            UnknownKeyError: If ``key`` is not part of the bag.
            InitializeAbortedError: If initialize() was aborted.
            NotInitializedError: If initialize() has not completed.
        """
        if (error := self._misuse(key)) is not None:
            raise error.to_exception()
        return self._results[key]

    def try_get(self, key: str) -> Result[Any, NotInitialized | UnknownKey | InitializeAborted]:
        """Return ``Ok(outcome)`` for ``key``, or an Err describing why not.

        Unlike ``get()``, never hands back a raw pre-initialization value.
        """
        if (error := self._misuse(key)) is not None:
            return Err(error)
        return Ok(self._results[key].outcome())

    def _misuse(self, key: str) -> NotInitialized | UnknownKey | InitializeAborted | None:
        if key not in self._data:
            return UnknownKey(key)
        if self._aborted is not None:
            return self._aborted
        if not self._initialized:
            return NotInitialized(key)
        return None

    def keys(self) -> KeysView[str]:
        """Return the bag's keys in input order."""
        return self._data.keys()

    def items(self) -> ItemsView[str, Any]:
        """Return ``(key, current value)`` pairs in input order."""
        return self._data.items()

    def __iter__(self) -> Iterator[Any]:
        """Iterate over the current values, in key order."""
        return iter(self._data.values())

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __repr__(self) -> str:
        return f'InitializableBag(keys={list(self._data)!r}, initialized={self._initialized})'
