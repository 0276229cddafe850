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

"""Metadata types returned by the ``Backend`` protocol.

All types are immutable frozen dataclasses.

- ``EntryStat``: result of ``Backend.stat()``; also describes missing paths
- ``BackendEntry``: one row of a ``Backend.list()`` directory listing
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Final

#: Timestamp reported for entries that do not exist.
MIN_DATETIME: Final[datetime] = datetime.min.replace(tzinfo=UTC)


@dataclass(slots=True, frozen=True)
class EntryStat:
    """Metadata for a path, whether or not it exists.

    ``Backend.stat()`` never raises for a missing path; it returns
    :meth:`EntryStat.missing` instead so existence checks stay cheap and
    exception-free.

    Attributes:
        path: Normalized path relative to the backend root.
        exists: True if something exists at the path.
        is_file: True if the path is a regular file.
        is_folder: True if the path is a directory.
        size: File size in bytes (0 for folders and missing paths).
        created: Creation time (UTC).
        last_accessed: Last access time (UTC).
        last_modified: Last modification time (UTC).

    Example::

        stat = backend.stat("src/main.py")
        if stat.is_file and stat.size > 0:
            data = backend.read_bytes(stat.path)
    """

    path: str
    exists: bool
    is_file: bool
    is_folder: bool
    size: int = 0
    created: datetime = MIN_DATETIME
    last_accessed: datetime = MIN_DATETIME
    last_modified: datetime = MIN_DATETIME

    @classmethod
    def missing(cls, path: str) -> EntryStat:
        """Stat result for a path that does not exist."""
        return cls(path=path, exists=False, is_file=False, is_folder=False)


@dataclass(slots=True, frozen=True)
class BackendEntry:
    """Directory listing row returned by ``Backend.list()``.

    Attributes:
        name: Entry name without its parent (e.g., "main.py").
        path: Full path relative to the backend root (e.g., "src/main.py").
        is_file: True if this entry is a regular file.
        is_folder: True if this entry is a directory.
    """

    name: str
    path: str
    is_file: bool
    is_folder: bool


def now() -> datetime:
    """Return the current UTC time truncated to milliseconds."""
    value = datetime.now(UTC)
    return value.replace(microsecond=value.microsecond - value.microsecond % 1000)


__all__ = [
    "MIN_DATETIME",
    "BackendEntry",
    "EntryStat",
    "now",
]
