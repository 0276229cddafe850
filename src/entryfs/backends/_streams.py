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

"""Stream protocol and the in-memory stream implementation.

``Backend.open()`` returns an object satisfying :class:`Stream`: a seekable
binary stream compatible with :class:`io.TextIOWrapper`. ``HostBackend``
returns ordinary Python file objects; ``InMemoryBackend`` returns
:class:`MemoryStream`.
"""

from __future__ import annotations

import io
from collections.abc import Callable
from typing import Protocol, Self, override, runtime_checkable

__all__ = [
    "MemoryStream",
    "Stream",
]


@runtime_checkable
class Stream(Protocol):
    """Binary stream handed out by ``Backend.open()``.

    Example::

        with backend.open("data.bin", FileAccess.READ, FileMode.OPEN) as stream:
            header = stream.read(16)
    """

    @property
    def closed(self) -> bool:
        """True once the stream has been closed."""
        ...

    def read(self, size: int | None = -1, /) -> bytes:
        """Read up to ``size`` bytes; -1 reads to EOF."""
        ...

    def write(self, data: bytes, /) -> int:
        """Write ``data`` and return the number of bytes written."""
        ...

    def seek(self, offset: int, whence: int = 0, /) -> int:
        """Move to a new absolute position and return it."""
        ...

    def tell(self) -> int:
        """Current position in bytes."""
        ...

    def flush(self) -> None:
        """Push buffered writes to the backend."""
        ...

    def close(self) -> None:
        """Flush and release the stream. Safe to call more than once."""
        ...

    def readable(self) -> bool: ...

    def writable(self) -> bool: ...

    def seekable(self) -> bool: ...

    def __enter__(self) -> Self: ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None: ...


class MemoryStream(io.BytesIO):
    """Seekable stream over a copy of an in-memory file.

    Reads and writes operate on a private buffer. Every ``flush()`` (and the
    final ``close()``) hands the whole buffer to ``on_commit`` so the backend
    observes writes without the stream holding a reference into backend
    state.
    """

    def __init__(
        self,
        path: str,
        content: bytes = b"",
        *,
        readable: bool = True,
        writable: bool = True,
        append: bool = False,
        on_commit: Callable[[bytes], None] | None = None,
    ) -> None:
        super().__init__(content)
        self._path = path
        self._readable = readable
        self._writable = writable
        self._on_commit = on_commit
        self._dirty = False
        if append:
            _ = self.seek(0, io.SEEK_END)

    @property
    def path(self) -> str:
        """Path being streamed (relative to the backend root)."""
        return self._path

    @override
    def readable(self) -> bool:
        self._check_open()
        return self._readable

    @override
    def writable(self) -> bool:
        self._check_open()
        return self._writable

    @override
    def read(self, size: int | None = -1, /) -> bytes:
        self._require(self._readable, "read")
        return super().read(size)

    @override
    def read1(self, size: int | None = -1, /) -> bytes:
        self._require(self._readable, "read")
        return super().read1(size)

    @override
    def readline(self, size: int | None = -1, /) -> bytes:
        self._require(self._readable, "read")
        return super().readline(size)

    @override
    def write(self, data: bytes, /) -> int:  # type: ignore[override]
        self._require(self._writable, "write")
        written = super().write(data)
        self._dirty = True
        return written

    @override
    def truncate(self, size: int | None = None, /) -> int:
        self._require(self._writable, "truncate")
        result = super().truncate(size)
        self._dirty = True
        return result

    @override
    def flush(self) -> None:
        super().flush()
        if self._dirty and self._on_commit is not None:
            self._on_commit(self.getvalue())
            self._dirty = False

    @override
    def close(self) -> None:
        if not self.closed:
            self.flush()
        super().close()

    def _check_open(self) -> None:
        if self.closed:
            raise ValueError("I/O operation on closed file")

    def _require(self, allowed: bool, operation: str) -> None:
        self._check_open()
        if not allowed:
            raise io.UnsupportedOperation(f"Stream for {self._path!r} does not support {operation}")
