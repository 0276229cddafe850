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

"""Capability protocols for files and folders.

``File``/``NullFile`` and ``Folder``/``NullFolder`` satisfy these protocols
structurally. Code that only needs the capability should annotate against
the protocol rather than a concrete class.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from datetime import datetime
from typing import Protocol, Self, runtime_checkable

from ..enums import (
    CollisionOption,
    EntryKind,
    ExistenceCheckResult,
    FileAccess,
    FileMode,
    SearchOption,
    WriteMode,
)

__all__ = ["EntryOps", "FileOps", "FolderOps"]


@runtime_checkable
class EntryOps(Protocol):
    """Operations shared by every file-system entry."""

    @property
    def kind(self) -> EntryKind: ...

    @property
    def name(self) -> str: ...

    @property
    def parent_path(self) -> str: ...

    @property
    def full_path(self) -> str: ...

    @property
    def exists(self) -> bool: ...

    @property
    def size(self) -> int: ...

    def created_time(self, *, use_utc: bool = True) -> datetime: ...

    def last_accessed_time(self, *, use_utc: bool = True) -> datetime: ...

    def last_modified_time(self, *, use_utc: bool = True) -> datetime: ...

    def move(self, destination: str, collision: CollisionOption | None = None) -> bool: ...

    def rename(self, name: str, collision: CollisionOption | None = None) -> bool: ...

    def delete(self) -> bool: ...

    def dispose(self) -> None: ...

    def __enter__(self) -> Self: ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None: ...


@runtime_checkable
class FileOps(EntryOps, Protocol):
    """Operations available on a file handle."""

    @property
    def extension(self) -> str: ...

    @property
    def encoding(self) -> str: ...

    @property
    def is_open(self) -> bool: ...

    @property
    def file_access(self) -> FileAccess | None: ...

    @property
    def file_mode(self) -> FileMode | None: ...

    def set_encoding(self, encoding: str) -> bool: ...

    def open(
        self,
        file_access: FileAccess = FileAccess.READ_WRITE,
        file_mode: FileMode = FileMode.OPEN_OR_CREATE,
    ) -> object: ...

    def close(self) -> None: ...

    def read_all(self) -> str: ...

    def read_all_lines(self) -> list[str]: ...

    def read_lines(self) -> Iterator[str]: ...

    def read_bytes(self) -> bytes: ...

    def write_all(self, text: str, write_mode: WriteMode = WriteMode.TRUNCATE) -> bool: ...

    def write_line(self, text: str, write_mode: WriteMode = WriteMode.TRUNCATE) -> bool: ...

    def write_bytes(self, data: bytes, write_mode: WriteMode = WriteMode.TRUNCATE) -> bool: ...

    def clear(self) -> bool: ...

    def stream_read(self, chars: int = -1) -> str | None: ...

    def stream_read_line(self) -> str | None: ...

    def stream_read_all(self) -> str | None: ...

    def stream_write(self, text: str) -> bool: ...

    def stream_write_line(self, text: str) -> bool: ...

    def stream_set_position(self, position: int) -> bool: ...

    def copy(self, destination: str, collision: CollisionOption | None = None) -> FileOps: ...

    def change_extension(
        self, extension: str, collision: CollisionOption | None = None
    ) -> bool: ...


@runtime_checkable
class FolderOps(EntryOps, Protocol):
    """Operations available on a folder handle."""

    def create_file(self, name: str, collision: CollisionOption | None = None) -> FileOps: ...

    def create_folder(
        self, name: str, collision: CollisionOption | None = None
    ) -> FolderOps: ...

    def copy(self, destination: str, collision: CollisionOption | None = None) -> FolderOps: ...

    def delete_file(self, name: str) -> bool: ...

    def delete_folder(self, name: str) -> bool: ...

    def file_exists(
        self,
        name: str,
        search_option: SearchOption = SearchOption.TOP_DIRECTORY_ONLY,
        *,
        ignore_case: bool | None = None,
    ) -> bool: ...

    def folder_exists(
        self,
        name: str,
        search_option: SearchOption = SearchOption.TOP_DIRECTORY_ONLY,
        *,
        ignore_case: bool | None = None,
    ) -> bool: ...

    def item_exists(
        self,
        name: str,
        file_search_option: SearchOption = SearchOption.TOP_DIRECTORY_ONLY,
        folder_search_option: SearchOption = SearchOption.TOP_DIRECTORY_ONLY,
        *,
        ignore_case: bool | None = None,
    ) -> ExistenceCheckResult: ...

    def get_file(
        self,
        name: str,
        search_option: SearchOption = SearchOption.TOP_DIRECTORY_ONLY,
        *,
        ignore_case: bool | None = None,
    ) -> FileOps: ...

    def get_folder(
        self,
        name: str,
        search_option: SearchOption = SearchOption.TOP_DIRECTORY_ONLY,
        *,
        ignore_case: bool | None = None,
    ) -> FolderOps: ...

    def get_entry(
        self,
        name: str,
        search_option: SearchOption = SearchOption.TOP_DIRECTORY_ONLY,
        *,
        prefer_file_over_folder: bool | None = None,
        ignore_case: bool | None = None,
    ) -> FileOps | FolderOps: ...

    def get_files(
        self,
        pattern: str = "*",
        search_option: SearchOption = SearchOption.ALL_DIRECTORIES,
        *,
        ignore_case: bool | None = None,
    ) -> Sequence[FileOps]: ...

    def get_folders(
        self,
        pattern: str = "*",
        search_option: SearchOption = SearchOption.ALL_DIRECTORIES,
        *,
        ignore_case: bool | None = None,
    ) -> Sequence[FolderOps]: ...

    def get_entries(
        self,
        pattern: str = "*",
        search_option: SearchOption = SearchOption.ALL_DIRECTORIES,
        *,
        ignore_case: bool | None = None,
    ) -> Sequence[FileOps | FolderOps]: ...

    def get_file_names(
        self,
        pattern: str = "*",
        search_option: SearchOption = SearchOption.ALL_DIRECTORIES,
        *,
        ignore_case: bool | None = None,
    ) -> list[str]: ...

    def get_folder_names(
        self,
        pattern: str = "*",
        search_option: SearchOption = SearchOption.ALL_DIRECTORIES,
        *,
        ignore_case: bool | None = None,
    ) -> list[str]: ...

    def get_entry_names(
        self,
        pattern: str = "*",
        search_option: SearchOption = SearchOption.ALL_DIRECTORIES,
        *,
        ignore_case: bool | None = None,
    ) -> list[str]: ...
