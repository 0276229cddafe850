# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Asynchronous access to the synchronous entry model.

Every operation is offered once, synchronously. :func:`run_sync` runs any of
them on a worker thread, and :class:`AsyncEntry` applies it to every public
method of a file or folder handle.

Cancellation is cooperative and checked only before dispatch: once a call is
running on its worker thread it completes, so a mutation is never cut short.

Example usage::

    token = CancellationToken()
    folder = AsyncEntry(fs.root_folder(), cancellation=token)
    report = await folder.create_file("report.txt")
    await report.write_all("done")
"""

from __future__ import annotations

import asyncio
import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Final

from .entries import File, Folder, NullFile, NullFolder
from .errors import OperationCancelledError
from .logging import StructuredLogger, get_logger

__all__ = ["AsyncEntry", "CancellationToken", "run_sync"]

logger: StructuredLogger = get_logger(__name__, context={"component": "aio"})


@dataclass(slots=True)
class CancellationToken:
    """Flag shared between the caller and the calls it dispatches.

    ``run_sync`` consults the token before handing a call to a worker
    thread; a call already running is never interrupted.

    Example::

        token = CancellationToken()

        async def work() -> None:
            await run_sync(folder.delete, cancellation=token)

        token.cancel()  # work() now raises OperationCancelledError
    """

    _event: threading.Event = field(default_factory=threading.Event, repr=False)

    def cancel(self) -> None:
        self._event.set()

    def is_cancelled(self) -> bool:
        return self._event.is_set()

    def check(self) -> None:
        """Raise OperationCancelledError if cancelled."""
        if self._event.is_set():
            raise OperationCancelledError("Operation was cancelled before it started.")


async def run_sync[T](
    fn: Callable[..., T],
    *args: object,
    cancellation: CancellationToken | None = None,
    **kwargs: object,
) -> T:
    """Await ``fn(*args, **kwargs)`` executed on a worker thread.

    Raises:
        OperationCancelledError: ``cancellation`` was cancelled before the
            call was dispatched.
    """
    if cancellation is not None and cancellation.is_cancelled():
        logger.debug(
            "Call cancelled before dispatch.",
            event="aio.cancelled",
            context={"call": getattr(fn, "__qualname__", repr(fn))},
        )
        cancellation.check()
    return await asyncio.to_thread(fn, *args, **kwargs)


type _Handle = File | Folder | NullFile | NullFolder

# Properties whose getters stat or read the backend.
_BACKEND_PROPERTIES: Final = frozenset({"exists", "size", "encoding"})

_HANDLE_TYPES = (File, Folder, NullFile, NullFolder)


def _wrap(value: object, cancellation: CancellationToken | None) -> object:
    if isinstance(value, _HANDLE_TYPES):
        return AsyncEntry(value, cancellation=cancellation)
    if isinstance(value, list) and value and all(isinstance(v, _HANDLE_TYPES) for v in value):
        return [AsyncEntry(v, cancellation=cancellation) for v in value]
    return value


class AsyncEntry:
    """Awaitable view of a file or folder handle.

    Public methods of the wrapped handle become coroutines running through
    :func:`run_sync`; handles they return are wrapped again. Properties that
    query the backend (``exists``, ``size``, ``encoding``) are awaitables too,
    so ``await entry.exists`` never blocks the event loop. Path attributes
    are returned as-is.
    """

    __slots__ = ("_cancellation", "_entry")

    def __init__(self, entry: _Handle, *, cancellation: CancellationToken | None = None) -> None:
        self._entry = entry
        self._cancellation = cancellation

    @property
    def entry(self) -> _Handle:
        """The wrapped synchronous handle."""
        return self._entry

    async def fetch(self, attribute: str) -> Any:
        """Read ``attribute`` of the wrapped handle on a worker thread."""
        value = await run_sync(getattr, self._entry, attribute, cancellation=self._cancellation)
        return _wrap(value, self._cancellation)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        if name in _BACKEND_PROPERTIES:
            return self.fetch(name)
        target = getattr(self._entry, name)
        if not callable(target):
            return target

        async def call(*args: object, **kwargs: object) -> Any:
            result = await run_sync(target, *args, cancellation=self._cancellation, **kwargs)
            return _wrap(result, self._cancellation)

        call.__name__ = name
        call.__doc__ = getattr(target, "__doc__", None)
        return call

    def __bool__(self) -> bool:
        return bool(self._entry)

    def __repr__(self) -> str:
        return f"AsyncEntry({self._entry!r})"
