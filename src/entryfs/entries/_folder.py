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

"""Folder handles.

Children are never cached; every query lists the backend again.

Example usage::

    from entryfs.backends import InMemoryBackend
    from entryfs.entries import Folder

    root = Folder(InMemoryBackend())
    reports = root.create_folder("reports")
    reports.create_file("q1.csv")
    assert root.get_file_names() == ["reports/q1.csv"]
"""

from __future__ import annotations

from typing import ClassVar

from ..backends import BackendEntry, join_path, validate_name
from ..collision import OpenExisting, Proceed
from ..enums import CollisionOption, EntryKind, ExistenceCheckResult, SearchOption
from ..traversal import (
    check_existence,
    find_entry,
    find_file,
    find_folder,
    iter_entries,
    relative_path,
)
from ._entry import Entry
from ._file import File
from ._null import NullFile, NullFolder

__all__ = ["Folder"]


class Folder(Entry):
    """Handle on a folder path; the empty path is the backend root."""

    __slots__ = ()

    kind: ClassVar[EntryKind] = EntryKind.FOLDER

    @property
    def is_root(self) -> bool:
        return not self.full_path

    def child(self, entry: BackendEntry) -> File | Folder:
        """Wrap a listing row of this folder's backend in a handle."""
        if entry.is_folder:
            return Folder(self._backend, entry.path, config=self._config)
        return File(self._backend, entry.path, config=self._config)

    def _ignore_case(self, ignore_case: bool | None) -> bool:
        return self._config.ignore_case if ignore_case is None else ignore_case

    # --- Creation ---

    def create_file(self, name: str, collision: CollisionOption | None = None) -> File | NullFile:
        """Create an empty file named ``name`` in this folder.

        Returns:
            The new file, the existing one under ``OPEN_IF_EXISTS``, or a
            :class:`NullFile` when this folder is missing or the policy
            refuses.
        """
        validate_name(name)
        candidate = join_path(self.full_path, name)
        if not self.exists:
            return NullFile(candidate, config=self._config)

        match self._decide(candidate, collision, kind=EntryKind.FILE):
            case Proceed() as decision:
                path = self._claim(decision)
                self._backend.create_file(path)
                self._logger.debug(
                    "File created.", event="folder.create_file", context={"path": path}
                )
                return File(self._backend, path, config=self._config)
            case OpenExisting(path=path):
                existing = File(self._backend, path, config=self._config)
                return existing if existing.exists else NullFile(path, config=self._config)
            case _:
                return NullFile(candidate, config=self._config)

    def create_folder(
        self, name: str, collision: CollisionOption | None = None
    ) -> Folder | NullFolder:
        """Create a subfolder named ``name``; see :meth:`create_file`."""
        validate_name(name)
        candidate = join_path(self.full_path, name)
        if not self.exists:
            return NullFolder(candidate, config=self._config)

        match self._decide(candidate, collision):
            case Proceed() as decision:
                path = self._claim(decision)
                self._backend.mkdir(path)
                self._logger.debug(
                    "Folder created.", event="folder.create_folder", context={"path": path}
                )
                return Folder(self._backend, path, config=self._config)
            case OpenExisting(path=path):
                existing = Folder(self._backend, path, config=self._config)
                return existing if existing.exists else NullFolder(path, config=self._config)
            case _:
                return NullFolder(candidate, config=self._config)

    # --- Copy and deletion ---

    def copy(
        self, destination: str, collision: CollisionOption | None = None
    ) -> Folder | NullFolder:
        """Copy the folder tree to the full path ``destination``."""
        target = join_path(destination)
        if not target or not self.exists:
            return NullFolder(target, config=self._config)

        match self._decide(target, collision):
            case Proceed(path=path, replace_existing=True) if self._is_own_path(path):
                return self
            case Proceed(path=path) if self._is_nested_with(path):
                return NullFolder(path, config=self._config)
            case Proceed() as decision:
                path = self._claim(decision)
                self._backend.copy(self.full_path, path)
                self._logger.debug(
                    "Folder copied.",
                    event="folder.copy",
                    context={"source": self.full_path, "destination": path},
                )
                return Folder(self._backend, path, config=self._config)
            case OpenExisting(path=path):
                existing = Folder(self._backend, path, config=self._config)
                return existing if existing.exists else NullFolder(path, config=self._config)
            case _:
                return NullFolder(target, config=self._config)

    def delete_file(self, name: str) -> bool:
        """Delete the direct child file ``name``."""
        return self.get_file(name).delete()

    def delete_folder(self, name: str) -> bool:
        """Delete the direct child folder ``name`` and its contents."""
        return self.get_folder(name).delete()

    # --- Lookup by name ---

    def file_exists(
        self,
        name: str,
        search_option: SearchOption = SearchOption.TOP_DIRECTORY_ONLY,
        *,
        ignore_case: bool | None = None,
    ) -> bool:
        return bool(self.get_file(name, search_option, ignore_case=ignore_case))

    def folder_exists(
        self,
        name: str,
        search_option: SearchOption = SearchOption.TOP_DIRECTORY_ONLY,
        *,
        ignore_case: bool | None = None,
    ) -> bool:
        return bool(self.get_folder(name, search_option, ignore_case=ignore_case))

    def item_exists(
        self,
        name: str,
        file_search_option: SearchOption = SearchOption.TOP_DIRECTORY_ONLY,
        folder_search_option: SearchOption = SearchOption.TOP_DIRECTORY_ONLY,
        *,
        ignore_case: bool | None = None,
    ) -> ExistenceCheckResult:
        return check_existence(
            self,
            name,
            file_search_option=file_search_option,
            folder_search_option=folder_search_option,
            ignore_case=self._ignore_case(ignore_case),
        )

    def get_file(
        self,
        name: str,
        search_option: SearchOption = SearchOption.TOP_DIRECTORY_ONLY,
        *,
        ignore_case: bool | None = None,
    ) -> File | NullFile:
        """Find a file by name (or relative path) within the search scope."""
        found = find_file(self, name, search_option, ignore_case=self._ignore_case(ignore_case))
        if found is None:
            return NullFile(join_path(self.full_path, name), config=self._config)
        return found

    def get_folder(
        self,
        name: str,
        search_option: SearchOption = SearchOption.TOP_DIRECTORY_ONLY,
        *,
        ignore_case: bool | None = None,
    ) -> Folder | NullFolder:
        found = find_folder(self, name, search_option, ignore_case=self._ignore_case(ignore_case))
        if found is None:
            return NullFolder(join_path(self.full_path, name), config=self._config)
        return found

    def get_entry(
        self,
        name: str,
        search_option: SearchOption = SearchOption.TOP_DIRECTORY_ONLY,
        *,
        prefer_file_over_folder: bool | None = None,
        ignore_case: bool | None = None,
    ) -> File | Folder | NullFile | NullFolder:
        """Find a file or folder by name.

        When both exist, ``prefer_file_over_folder`` (default from the
        configuration) decides which one is returned. When neither exists the
        same preference picks the kind of null entry returned.
        """
        prefer_file = (
            self._config.prefer_file_over_folder
            if prefer_file_over_folder is None
            else prefer_file_over_folder
        )
        found = find_entry(
            self,
            name,
            search_option,
            prefer_file_over_folder=prefer_file,
            ignore_case=self._ignore_case(ignore_case),
        )
        if found is not None:
            return found
        path = join_path(self.full_path, name)
        if prefer_file:
            return NullFile(path, config=self._config)
        return NullFolder(path, config=self._config)

    # --- Enumeration ---

    def get_files(
        self,
        pattern: str = "*",
        search_option: SearchOption = SearchOption.ALL_DIRECTORIES,
        *,
        ignore_case: bool | None = None,
    ) -> list[File]:
        return [
            entry
            for entry in iter_entries(
                self,
                pattern,
                search_option,
                want_folders=False,
                ignore_case=self._ignore_case(ignore_case),
            )
            if isinstance(entry, File)
        ]

    def get_folders(
        self,
        pattern: str = "*",
        search_option: SearchOption = SearchOption.ALL_DIRECTORIES,
        *,
        ignore_case: bool | None = None,
    ) -> list[Folder]:
        return [
            entry
            for entry in iter_entries(
                self,
                pattern,
                search_option,
                want_files=False,
                ignore_case=self._ignore_case(ignore_case),
            )
            if isinstance(entry, Folder)
        ]

    def get_entries(
        self,
        pattern: str = "*",
        search_option: SearchOption = SearchOption.ALL_DIRECTORIES,
        *,
        ignore_case: bool | None = None,
    ) -> list[File | Folder]:
        return list(
            iter_entries(self, pattern, search_option, ignore_case=self._ignore_case(ignore_case))
        )

    def get_file_names(
        self,
        pattern: str = "*",
        search_option: SearchOption = SearchOption.ALL_DIRECTORIES,
        *,
        ignore_case: bool | None = None,
    ) -> list[str]:
        """Paths of matching files relative to this folder (``"sub/c.txt"``)."""
        return self._names(self.get_files(pattern, search_option, ignore_case=ignore_case))

    def get_folder_names(
        self,
        pattern: str = "*",
        search_option: SearchOption = SearchOption.ALL_DIRECTORIES,
        *,
        ignore_case: bool | None = None,
    ) -> list[str]:
        return self._names(self.get_folders(pattern, search_option, ignore_case=ignore_case))

    def get_entry_names(
        self,
        pattern: str = "*",
        search_option: SearchOption = SearchOption.ALL_DIRECTORIES,
        *,
        ignore_case: bool | None = None,
    ) -> list[str]:
        return self._names(self.get_entries(pattern, search_option, ignore_case=ignore_case))

    def _names(self, entries: list[File] | list[Folder] | list[File | Folder]) -> list[str]:
        return [relative_path(self.full_path, entry.full_path) for entry in entries]
