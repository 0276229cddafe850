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

"""Native backend protocol.

The ``Backend`` protocol is the narrow byte-level interface the entry model
consumes. Each platform provides one concrete implementation of the whole
protocol; there is no base class with partial defaults.

Implementations:

- ``entryfs.backends.HostBackend``: Sandboxed host directory access
- ``entryfs.backends.InMemoryBackend``: Dictionary-backed storage
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from ..enums import FileAccess, FileMode
from ._streams import Stream
from ._types import BackendEntry, EntryStat


@runtime_checkable
class Backend(Protocol):
    """Byte-level storage operations used by files and folders.

    All paths are normalized, ``/``-separated strings relative to the backend
    root, with the empty string naming the root itself. Backends report
    platform failures with the standard ``OSError`` subclasses and never
    translate them into return values.

    Example::

        def size_of(backend: Backend, path: str) -> int:
            stat = backend.stat(path)
            return stat.size if stat.is_file else 0
    """

    # --- Metadata ---

    @property
    def root(self) -> str:
        """Location of the backend root (a host directory or ``"/"``)."""
        ...

    @property
    def read_only(self) -> bool:
        """When True, every mutating operation raises ``PermissionError``."""
        ...

    @property
    def case_sensitive(self) -> bool:
        """Whether two paths differing only in case name different entries.

        This is a single fixed policy for the backend and drives entry
        equality.
        """
        ...

    # --- Queries ---

    def stat(self, path: str) -> EntryStat:
        """Return metadata for ``path``.

        Returns:
            ``EntryStat`` with ``exists=False`` when nothing is at ``path``.
            Never raises for a missing path.

        Raises:
            PermissionError: Path escapes the backend root or cannot be read.
        """
        ...

    def list(self, path: str = "") -> Sequence[BackendEntry]:
        """List the immediate children of a folder.

        Raises:
            FileNotFoundError: Path does not exist.
            NotADirectoryError: Path is a file.
        """
        ...

    def read_bytes(self, path: str) -> bytes:
        """Return the full content of a file.

        Raises:
            FileNotFoundError: Path does not exist.
            IsADirectoryError: Path is a folder.
        """
        ...

    # --- Mutations ---

    def open(self, path: str, file_access: FileAccess, file_mode: FileMode) -> Stream:
        """Open a binary stream on a file.

        Raises:
            FileNotFoundError: ``OPEN``/``TRUNCATE`` on a missing file, or the
                parent folder is missing.
            FileExistsError: ``CREATE_NEW`` on an existing file.
            IsADirectoryError: Path is a folder.
            PermissionError: Write access on a read-only backend.
        """
        ...

    def write_bytes(self, path: str, data: bytes, *, append: bool = False) -> int:
        """Write ``data`` to a file, creating it when missing.

        Returns:
            Number of bytes written.

        Raises:
            FileNotFoundError: Parent folder does not exist.
            IsADirectoryError: Path is a folder.
        """
        ...

    def create_file(self, path: str) -> None:
        """Create an empty file, truncating an existing one.

        Raises:
            FileNotFoundError: Parent folder does not exist.
            IsADirectoryError: Path is a folder.
        """
        ...

    def mkdir(self, path: str) -> None:
        """Create a folder and any missing parents. Existing folders are kept.

        Raises:
            FileExistsError: A file exists at ``path``.
        """
        ...

    def delete(self, path: str, *, recursive: bool = False) -> None:
        """Delete a file or folder.

        Raises:
            FileNotFoundError: Path does not exist.
            IsADirectoryError: Folder is not empty and ``recursive`` is False.
            PermissionError: Path is the backend root.
        """
        ...

    def move(self, source: str, destination: str) -> None:
        """Move a file or folder to a path that does not exist yet.

        Raises:
            FileNotFoundError: Source or destination parent is missing.
            FileExistsError: Destination already exists.
        """
        ...

    def copy(self, source: str, destination: str) -> None:
        """Copy a file or folder tree to a path that does not exist yet.

        Raises:
            FileNotFoundError: Source or destination parent is missing.
            FileExistsError: Destination already exists.
        """
        ...


__all__ = ["Backend"]
