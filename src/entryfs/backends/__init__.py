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

"""Native storage backends consumed by the entry model.

This module provides the `Backend` protocol that abstracts over storage
(a host directory or an in-memory tree) so files and folders can perform
their operations without coupling to a specific platform.

Example usage::

    from entryfs.backends import Backend, InMemoryBackend

    def total_size(backend: Backend, path: str) -> int:
        return sum(
            backend.stat(entry.path).size
            for entry in backend.list(path)
            if entry.is_file
        )

    total_size(InMemoryBackend(), "")

Implementations:

- ``InMemoryBackend``: Dictionary-backed storage
- ``HostBackend``: Sandboxed host directory access
"""

from __future__ import annotations

from ._host import HostBackend
from ._memory import InMemoryBackend
from ._path import combine_path, join_path, normalize_path, split_path, validate_name
from ._protocol import Backend
from ._streams import MemoryStream, Stream
from ._types import MIN_DATETIME, BackendEntry, EntryStat, now

__all__ = [
    "MIN_DATETIME",
    "Backend",
    "BackendEntry",
    "EntryStat",
    "HostBackend",
    "InMemoryBackend",
    "MemoryStream",
    "Stream",
    "combine_path",
    "join_path",
    "normalize_path",
    "now",
    "split_path",
    "validate_name",
]
