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

"""Value enumerations shared by the entry model, backends and facade."""

from __future__ import annotations

from enum import StrEnum


class EntryKind(StrEnum):
    """Kind of a file-system entry."""

    FILE = "file"
    FOLDER = "folder"


class CollisionOption(StrEnum):
    """Policy applied when a mutating operation's target already exists.

    Values:
        GENERATE_UNIQUE_NAME: Pick the lowest free ``"name - (n)"`` variant.
        REPLACE_EXISTING: Delete the existing target, then proceed.
        FAIL_IF_EXISTS: Report failure without touching the backend.
        OPEN_IF_EXISTS: Hand back the existing target instead of creating one.
    """

    GENERATE_UNIQUE_NAME = "generate_unique_name"
    REPLACE_EXISTING = "replace_existing"
    FAIL_IF_EXISTS = "fail_if_exists"
    OPEN_IF_EXISTS = "open_if_exists"


class SearchOption(StrEnum):
    """How far a traversal recurses beneath its starting folder."""

    ALL_DIRECTORIES = "all_directories"
    TOP_DIRECTORY_ONLY = "top_directory_only"
    SUB_DIRECTORIES_ONLY = "sub_directories_only"


class ExistenceCheckResult(StrEnum):
    """What exists under a name; a file and a folder may share one."""

    NOT_FOUND = "not_found"
    FILE_EXISTS = "file_exists"
    FOLDER_EXISTS = "folder_exists"
    FILE_AND_FOLDER_EXISTS = "file_and_folder_exists"

    @classmethod
    def from_flags(cls, *, file_exists: bool, folder_exists: bool) -> ExistenceCheckResult:
        """Combine independent file and folder checks into one result."""
        if file_exists and folder_exists:
            return cls.FILE_AND_FOLDER_EXISTS
        if file_exists:
            return cls.FILE_EXISTS
        if folder_exists:
            return cls.FOLDER_EXISTS
        return cls.NOT_FOUND

    @property
    def file_exists(self) -> bool:
        return self in {
            ExistenceCheckResult.FILE_EXISTS,
            ExistenceCheckResult.FILE_AND_FOLDER_EXISTS,
        }

    @property
    def folder_exists(self) -> bool:
        return self in {
            ExistenceCheckResult.FOLDER_EXISTS,
            ExistenceCheckResult.FILE_AND_FOLDER_EXISTS,
        }


class FileAccess(StrEnum):
    """Access requested when opening a file stream."""

    READ = "read"
    WRITE = "write"
    READ_WRITE = "read_write"

    @property
    def readable(self) -> bool:
        return self is not FileAccess.WRITE

    @property
    def writable(self) -> bool:
        return self is not FileAccess.READ


class FileMode(StrEnum):
    """How the backend opens or creates a file.

    Values:
        TRUNCATE: Open an existing file and empty it.
        CREATE: Create the file, emptying it if it exists.
        CREATE_NEW: Create the file, failing if it exists.
        APPEND: Open or create the file and position at its end.
        OPEN: Open an existing file, failing if it is missing.
        OPEN_OR_CREATE: Open the file, creating it when missing.
    """

    TRUNCATE = "truncate"
    CREATE = "create"
    CREATE_NEW = "create_new"
    APPEND = "append"
    OPEN = "open"
    OPEN_OR_CREATE = "open_or_create"


class OpenMode(StrEnum):
    """What a facade lookup does when the requested entry is missing."""

    CREATE_IF_DOES_NOT_EXIST = "create_if_does_not_exist"
    THROW_IF_DOES_NOT_EXIST = "throw_if_does_not_exist"
    RETURN_NULL_IF_DOES_NOT_EXIST = "return_null_if_does_not_exist"


class WriteMode(StrEnum):
    """Whole-file write behaviour."""

    TRUNCATE = "truncate"
    APPEND = "append"


def is_valid_mode_combination(file_access: FileAccess, file_mode: FileMode) -> bool:
    """Return True when ``file_mode`` can be used with ``file_access``.

    Read-only access cannot truncate or append.
    """
    if file_access is FileAccess.READ:
        return file_mode not in {FileMode.TRUNCATE, FileMode.APPEND}
    return True


__all__ = [
    "CollisionOption",
    "EntryKind",
    "ExistenceCheckResult",
    "FileAccess",
    "FileMode",
    "OpenMode",
    "SearchOption",
    "WriteMode",
    "is_valid_mode_combination",
]
