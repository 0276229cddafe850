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

"""Files, folders and entries over pluggable storage backends."""

from __future__ import annotations

from . import aio, backends, collision, entries, naming, traversal
from .backends import Backend, HostBackend, InMemoryBackend
from .config import DEFAULT_CONFIG, EntryFsConfig
from .entries import File, FileOps, Folder, FolderOps, NullFile, NullFolder
from .enums import (
    CollisionOption,
    EntryKind,
    ExistenceCheckResult,
    FileAccess,
    FileMode,
    OpenMode,
    SearchOption,
    WriteMode,
)
from .errors import (
    CannotGenerateUniqueNameError,
    EntryFsError,
    EntryNotFoundError,
    InvalidOpenModeError,
    OperationCancelledError,
)
from .filesystem import EntryFileSystem

__all__ = [
    "DEFAULT_CONFIG",
    "Backend",
    "CannotGenerateUniqueNameError",
    "CollisionOption",
    "EntryFileSystem",
    "EntryFsConfig",
    "EntryFsError",
    "EntryKind",
    "EntryNotFoundError",
    "ExistenceCheckResult",
    "File",
    "FileAccess",
    "FileMode",
    "FileOps",
    "Folder",
    "FolderOps",
    "HostBackend",
    "InMemoryBackend",
    "InvalidOpenModeError",
    "NullFile",
    "NullFolder",
    "OpenMode",
    "OperationCancelledError",
    "SearchOption",
    "WriteMode",
    "aio",
    "backends",
    "collision",
    "entries",
    "naming",
    "traversal",
]
