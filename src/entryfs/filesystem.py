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

"""Filesystem facade binding a backend and a configuration.

There is no process-wide filesystem object: create one
:class:`EntryFileSystem` per backend and pass it where it is needed.

Example usage::

    from entryfs import EntryFileSystem, InMemoryBackend, OpenMode

    fs = EntryFileSystem(InMemoryBackend())
    notes = fs.get_file("docs/notes.txt")  # created on demand
    notes.write_all("hello")
    missing = fs.get_file("nope.txt", OpenMode.RETURN_NULL_IF_DOES_NOT_EXIST)
    assert not missing
"""

from __future__ import annotations

from .backends import Backend, normalize_path, split_path
from .config import DEFAULT_CONFIG, EntryFsConfig
from .enums import CollisionOption, ExistenceCheckResult, OpenMode
from .entries import File, Folder, NullFile, NullFolder
from .errors import EntryNotFoundError
from .logging import StructuredLogger, get_logger
from .naming import generate_unique_name

__all__ = ["EntryFileSystem"]


class EntryFileSystem:
    """Hands out file and folder handles for one backend."""

    __slots__ = ("_backend", "_config", "_logger")

    def __init__(self, backend: Backend, config: EntryFsConfig = DEFAULT_CONFIG) -> None:
        self._backend = backend
        self._config = config
        self._logger: StructuredLogger = get_logger(
            __name__, context={"component": "filesystem", "root": backend.root}
        )

    @property
    def backend(self) -> Backend:
        return self._backend

    @property
    def config(self) -> EntryFsConfig:
        return self._config

    # --- Handles ---

    def root_folder(self) -> Folder:
        return Folder(self._backend, "", config=self._config)

    def file(self, path: str) -> File:
        """Handle on ``path`` whether or not a file exists there."""
        return File(self._backend, path, config=self._config)

    def folder(self, path: str) -> Folder:
        """Handle on ``path`` whether or not a folder exists there."""
        return Folder(self._backend, path, config=self._config)

    # --- Existence ---

    def exists(self, path: str) -> ExistenceCheckResult:
        stat = self._backend.stat(path)
        return ExistenceCheckResult.from_flags(
            file_exists=stat.is_file, folder_exists=stat.is_folder
        )

    def file_exists(self, path: str) -> bool:
        return self._backend.stat(path).is_file

    def folder_exists(self, path: str) -> bool:
        return self._backend.stat(path).is_folder

    # --- Lookups ---

    def get_file(
        self,
        path: str,
        open_mode: OpenMode = OpenMode.CREATE_IF_DOES_NOT_EXIST,
    ) -> File | NullFile:
        """Return the file at ``path``, handling absence per ``open_mode``.

        ``CREATE_IF_DOES_NOT_EXIST`` creates missing parent folders too.

        Raises:
            EntryNotFoundError: Missing file under ``THROW_IF_DOES_NOT_EXIST``.
        """
        file = self.file(path)
        if file.exists:
            return file

        match open_mode:
            case OpenMode.CREATE_IF_DOES_NOT_EXIST:
                self._backend.mkdir(file.parent_path)
                self._backend.create_file(file.full_path)
                self._logger.debug(
                    "File created on lookup.",
                    event="filesystem.get_file",
                    context={"path": file.full_path},
                )
                return file
            case OpenMode.THROW_IF_DOES_NOT_EXIST:
                raise EntryNotFoundError(file.full_path, kind="file")
            case OpenMode.RETURN_NULL_IF_DOES_NOT_EXIST:
                return NullFile(file.full_path, config=self._config)

    def get_folder(
        self,
        path: str,
        open_mode: OpenMode = OpenMode.CREATE_IF_DOES_NOT_EXIST,
    ) -> Folder | NullFolder:
        """Folder counterpart of :meth:`get_file`."""
        folder = self.folder(path)
        if folder.exists:
            return folder

        match open_mode:
            case OpenMode.CREATE_IF_DOES_NOT_EXIST:
                self._backend.mkdir(folder.full_path)
                self._logger.debug(
                    "Folder created on lookup.",
                    event="filesystem.get_folder",
                    context={"path": folder.full_path},
                )
                return folder
            case OpenMode.THROW_IF_DOES_NOT_EXIST:
                raise EntryNotFoundError(folder.full_path, kind="folder")
            case OpenMode.RETURN_NULL_IF_DOES_NOT_EXIST:
                return NullFolder(folder.full_path, config=self._config)

    # --- Creation ---

    def create_file(
        self, path: str, collision: CollisionOption | None = None
    ) -> File | NullFile:
        """Create a file at ``path`` under ``collision``, creating parents."""
        parent, name, extension = split_path(path)
        if not name and not extension:
            return NullFile(normalize_path(path), config=self._config)
        folder = self.get_folder(parent)
        return folder.create_file(f"{name}{extension}", collision)

    def create_folder(
        self, path: str, collision: CollisionOption | None = None
    ) -> Folder | NullFolder:
        """Create a folder at ``path`` under ``collision``, creating parents."""
        normalized = normalize_path(path)
        if not normalized:
            return self.root_folder()
        parent, _, name = normalized.rpartition("/")
        folder = self.get_folder(parent)
        return folder.create_folder(name, collision)

    # --- Unique names ---

    def generate_file_unique_name(self, directory: str, name: str) -> str:
        """Lowest free ``"stem - (n).ext"`` variant of ``name`` in ``directory``.

        Raises:
            CannotGenerateUniqueNameError: No free name within the configured
                iteration budget.
        """
        return generate_unique_name(
            normalize_path(directory),
            name,
            exists=self._taken,
            is_file=True,
            max_iterations=self._config.max_unique_name_iterations,
        )

    def generate_folder_unique_name(self, directory: str, name: str) -> str:
        """Lowest free ``"name - (n)"`` variant of ``name`` in ``directory``."""
        return generate_unique_name(
            normalize_path(directory),
            name,
            exists=self._taken,
            is_file=False,
            max_iterations=self._config.max_unique_name_iterations,
        )

    def _taken(self, path: str) -> bool:
        return self._backend.stat(path).exists

    def __repr__(self) -> str:
        return f"EntryFileSystem(backend={self._backend!r})"
