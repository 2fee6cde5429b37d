"""Container error types: dual struct+exception for Result and raise-based code."""

from __future__ import annotations

import msgspec

__all__ = [
    'InitializeAborted',
    'InitializeAbortedError',
    'NotInitialized',
    'NotInitializedError',
    'UnknownKey',
    'UnknownKeyError',
]


class NotInitialized(msgspec.Struct, frozen=True, gc=False):
    """Bag read strictly before initialize() completed - struct variant."""

    key: str | None = None

    def to_exception(self) -> NotInitializedError:
        """Convert to exception for raise-based code."""
        return NotInitializedError(self.key)


class NotInitializedError(Exception):
    """Bag read strictly before initialize() completed - exception variant."""

    def __init__(self, key: str | None = None) -> None:
        self.key = key
        msg = 'Bag not initialized. Await initialize() first.'
        if key is not None:
            msg = f"Cannot read '{key}': {msg}"
        super().__init__(msg)

    def to_struct(self) -> NotInitialized:
        """Convert to struct for Result-based code."""
        return NotInitialized(self.key)


class UnknownKey(msgspec.Struct, frozen=True, gc=False):
    """Key is not part of the bag - struct variant."""

    key: str

    def to_exception(self) -> UnknownKeyError:
        """Convert to exception for raise-based code."""
        return UnknownKeyError(self.key)


class UnknownKeyError(KeyError):
    """Key is not part of the bag - exception variant."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"Unknown bag key: '{self.key}'"

    def to_struct(self) -> UnknownKey:
        """Convert to struct for Result-based code."""
        return UnknownKey(self.key)


class InitializeAborted(msgspec.Struct, frozen=True, gc=False):
    """An earlier initialize() was cancelled or failed - struct variant."""

    reason: str | None = None

    def to_exception(self) -> InitializeAbortedError:
        """Convert to exception for raise-based code."""
        return InitializeAbortedError(self.reason)


class InitializeAbortedError(Exception):
    """An earlier initialize() was cancelled or failed - exception variant.

    Its pending computations may already have been consumed, so the bag
    cannot be resolved again.
    """

    def __init__(self, reason: str | None = None) -> None:
        self.reason = reason
        msg = 'Bag initialization was aborted and cannot be retried'
        if reason:
            msg = f'{msg}: {reason}'
        super().__init__(msg)

    def to_struct(self) -> InitializeAborted:
        """Convert to struct for Result-based code."""
        return InitializeAborted(self.reason)
