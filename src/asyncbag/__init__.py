"""asyncbag: settle a keyed bag of concurrent async computations.

Every entry of the bag runs concurrently; the call waits for all of them and
hands back the same keys with each value replaced by what it produced, or by
the exception it raised. The batch itself never fails.

Flat imports (preferred):
    from asyncbag import resolve_bag, settle_bag, InitializableBag
    from asyncbag import Immediate, Deferred, Ok, Err

Submodule imports (for organization):
    from asyncbag.resolve import resolve_bag
    from asyncbag.container import InitializableBag
    from asyncbag.settle import settle, settle_all
"""

# Config and logging
from asyncbag._config import BagConfig, get_config, init
from asyncbag._logging import configure_logging, get_logger

# Stateful container
from asyncbag.container import InitializableBag

# Entries
from asyncbag.entry import Deferred, Entry, Immediate, lift

# Errors
from asyncbag.errors import (
    InitializeAborted,
    InitializeAbortedError,
    NotInitialized,
    NotInitializedError,
    UnknownKey,
    UnknownKeyError,
)

# Resolution
from asyncbag.resolve import resolve_bag, settle_bag
from asyncbag.result import Err, Ok, Result
from asyncbag.settle import settle, settle_all

__all__ = [
    # Config
    'BagConfig',
    # Entries
    'Deferred',
    'Entry',
    # Result types
    'Err',
    'Immediate',
    # Container
    'InitializableBag',
    # Errors
    'InitializeAborted',
    'InitializeAbortedError',
    'NotInitialized',
    'NotInitializedError',
    'Ok',
    'Result',
    'UnknownKey',
    'UnknownKeyError',
    # Logging
    'configure_logging',
    'get_config',
    'get_logger',
    'init',
    'lift',
    # Resolution
    'resolve_bag',
    'settle',
    'settle_all',
    'settle_bag',
]
