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

"""Null entries standing in for files and folders that are absent.

Lookups return ``File | NullFile`` and ``Folder | NullFolder`` so callers
see absence in the type. Null entries are falsy, report ``exists=False``,
and answer every operation with its failure value without raising.

Example::

    report = folder.get_file("report.txt")
    if not report:
        report = folder.create_file("report.txt")
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import datetime
from typing import ClassVar, Final, Self

from ..backends import MIN_DATETIME, join_path, normalize_path, split_path
from ..config import DEFAULT_CONFIG, EntryFsConfig
from ..enums import (
    CollisionOption,
    EntryKind,
    ExistenceCheckResult,
    FileAccess,
    FileMode,
    SearchOption,
    WriteMode,
)

__all__ = ["NullFile", "NullFolder"]

_TOP: Final[SearchOption] = SearchOption.TOP_DIRECTORY_ONLY
_ALL: Final[SearchOption] = SearchOption.ALL_DIRECTORIES


@dataclass(slots=True, frozen=True)
class _NullEntry:
    """Operations shared by both null variants."""

    path: str = ""
    config: EntryFsConfig = field(default=DEFAULT_CONFIG, compare=False, repr=False)

    kind: ClassVar[EntryKind]

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", normalize_path(self.path))

    def __bool__(self) -> bool:
        return False

    @property
    def parent_path(self) -> str:
        return self.path.rpartition("/")[0]

    @property
    def name(self) -> str:
        return self.path.rpartition("/")[2]

    @property
    def full_path(self) -> str:
        return self.path

    @property
    def exists(self) -> bool:
        return False

    @property
    def size(self) -> int:
        return 0

    def created_time(self, *, use_utc: bool = True) -> datetime:
        return MIN_DATETIME

    def last_accessed_time(self, *, use_utc: bool = True) -> datetime:
        return MIN_DATETIME

    def last_modified_time(self, *, use_utc: bool = True) -> datetime:
        return MIN_DATETIME

    def move(self, destination: str, collision: CollisionOption | None = None) -> bool:
        return False

    def rename(self, name: str, collision: CollisionOption | None = None) -> bool:
        return False

    def delete(self) -> bool:
        return False

    def dispose(self) -> None:
        return None

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        return None


@dataclass(slots=True, frozen=True)
class NullFile(_NullEntry):
    """Absent file."""

    kind: ClassVar[EntryKind] = EntryKind.FILE

    @property
    def name(self) -> str:
        return split_path(self.path)[1]

    @property
    def extension(self) -> str:
        return split_path(self.path)[2]

    @property
    def encoding(self) -> str:
        return self.config.default_encoding

    @property
    def stream(self) -> None:
        return None

    @property
    def is_open(self) -> bool:
        return False

    @property
    def file_access(self) -> FileAccess | None:
        return None

    @property
    def file_mode(self) -> FileMode | None:
        return None

    def set_encoding(self, encoding: str) -> bool:
        return False

    def open(
        self,
        file_access: FileAccess = FileAccess.READ_WRITE,
        file_mode: FileMode = FileMode.OPEN_OR_CREATE,
    ) -> None:
        return None

    def close(self) -> None:
        return None

    def read_all(self) -> str:
        return ""

    def read_all_lines(self) -> list[str]:
        return []

    def read_lines(self) -> Iterator[str]:
        return iter(())

    def read_bytes(self) -> bytes:
        return b""

    def write_all(self, text: str, write_mode: WriteMode = WriteMode.TRUNCATE) -> bool:
        return False

    def write_line(self, text: str, write_mode: WriteMode = WriteMode.TRUNCATE) -> bool:
        return False

    def write_bytes(self, data: bytes, write_mode: WriteMode = WriteMode.TRUNCATE) -> bool:
        return False

    def clear(self) -> bool:
        return False

    def stream_read(self, chars: int = -1) -> str | None:
        return None

    def stream_read_line(self) -> str | None:
        return None

    def stream_read_all(self) -> str | None:
        return None

    def stream_write(self, text: str) -> bool:
        return False

    def stream_write_line(self, text: str) -> bool:
        return False

    def stream_set_position(self, position: int) -> bool:
        return False

    def copy(self, destination: str, collision: CollisionOption | None = None) -> NullFile:
        return NullFile(destination, config=self.config)

    def change_extension(self, extension: str, collision: CollisionOption | None = None) -> bool:
        return False


@dataclass(slots=True, frozen=True)
class NullFolder(_NullEntry):
    """Absent folder."""

    kind: ClassVar[EntryKind] = EntryKind.FOLDER

    def create_file(self, name: str, collision: CollisionOption | None = None) -> NullFile:
        return NullFile(join_path(self.path, name), config=self.config)

    def create_folder(self, name: str, collision: CollisionOption | None = None) -> NullFolder:
        return NullFolder(join_path(self.path, name), config=self.config)

    def copy(self, destination: str, collision: CollisionOption | None = None) -> NullFolder:
        return NullFolder(destination, config=self.config)

    def delete_file(self, name: str) -> bool:
        return False

    def delete_folder(self, name: str) -> bool:
        return False

    def file_exists(
        self,
        name: str,
        search_option: SearchOption = _TOP,
        *,
        ignore_case: bool | None = None,
    ) -> bool:
        return False

    def folder_exists(
        self,
        name: str,
        search_option: SearchOption = _TOP,
        *,
        ignore_case: bool | None = None,
    ) -> bool:
        return False

    def item_exists(
        self,
        name: str,
        file_search_option: SearchOption = _TOP,
        folder_search_option: SearchOption = _TOP,
        *,
        ignore_case: bool | None = None,
    ) -> ExistenceCheckResult:
        return ExistenceCheckResult.NOT_FOUND

    def get_file(
        self,
        name: str,
        search_option: SearchOption = _TOP,
        *,
        ignore_case: bool | None = None,
    ) -> NullFile:
        return NullFile(join_path(self.path, name), config=self.config)

    def get_folder(
        self,
        name: str,
        search_option: SearchOption = _TOP,
        *,
        ignore_case: bool | None = None,
    ) -> NullFolder:
        return NullFolder(join_path(self.path, name), config=self.config)

    def get_entry(
        self,
        name: str,
        search_option: SearchOption = _TOP,
        *,
        prefer_file_over_folder: bool | None = None,
        ignore_case: bool | None = None,
    ) -> NullFile | NullFolder:
        prefer_file = (
            self.config.prefer_file_over_folder
            if prefer_file_over_folder is None
            else prefer_file_over_folder
        )
        path = join_path(self.path, name)
        if prefer_file:
            return NullFile(path, config=self.config)
        return NullFolder(path, config=self.config)

    def get_files(
        self,
        pattern: str = "*",
        search_option: SearchOption = _ALL,
        *,
        ignore_case: bool | None = None,
    ) -> list[NullFile]:
        return []

    def get_folders(
        self,
        pattern: str = "*",
        search_option: SearchOption = _ALL,
        *,
        ignore_case: bool | None = None,
    ) -> list[NullFolder]:
        return []

    def get_entries(
        self,
        pattern: str = "*",
        search_option: SearchOption = _ALL,
        *,
        ignore_case: bool | None = None,
    ) -> list[NullFile | NullFolder]:
        return []

    def get_file_names(
        self,
        pattern: str = "*",
        search_option: SearchOption = _ALL,
        *,
        ignore_case: bool | None = None,
    ) -> list[str]:
        return []

    def get_folder_names(
        self,
        pattern: str = "*",
        search_option: SearchOption = _ALL,
        *,
        ignore_case: bool | None = None,
    ) -> list[str]:
        return []

    def get_entry_names(
        self,
        pattern: str = "*",
        search_option: SearchOption = _ALL,
        *,
        ignore_case: bool | None = None,
    ) -> list[str]:
        return []
