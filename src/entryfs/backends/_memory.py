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

"""In-memory backend.

Suitable for tests and for callers that need a scratch tree with the same
semantics as the host backend.

Example usage::

    from entryfs.backends import InMemoryBackend

    backend = InMemoryBackend()
    backend.mkdir("src")
    backend.write_bytes("src/main.py", b"print('hello')")
    assert backend.stat("src/main.py").size == 14
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime

from ..enums import FileAccess, FileMode
from ._path import normalize_path
from ._streams import MemoryStream, Stream
from ._types import BackendEntry, EntryStat, now

__all__ = ["InMemoryBackend"]


@dataclass(slots=True)
class _InMemoryFile:
    """Stored file: display path, raw bytes and timestamps."""

    path: str
    content: bytes
    created: datetime
    last_accessed: datetime
    last_modified: datetime


@dataclass(slots=True)
class _InMemoryFolder:
    path: str
    created: datetime


def _empty_files() -> dict[str, _InMemoryFile]:
    return {}


def _empty_folders() -> dict[str, _InMemoryFolder]:
    return {}


@dataclass(slots=True)
class InMemoryBackend:
    """Backend that keeps files and folders in dictionaries.

    Files and folders are keyed by their normalized path, case-folded when
    ``case_sensitive`` is False; the original spelling is kept for listings.
    Folders are always explicit: writing a file requires its parent folder to
    exist, as on a real disk.
    """

    _case_sensitive: bool = True
    _read_only: bool = False
    _files: dict[str, _InMemoryFile] = field(default_factory=_empty_files)
    _folders: dict[str, _InMemoryFolder] = field(default_factory=_empty_folders)

    def __post_init__(self) -> None:
        self._folders.setdefault("", _InMemoryFolder(path="", created=now()))

    @property
    def root(self) -> str:
        """Backend root path."""
        return "/"

    @property
    def read_only(self) -> bool:
        """True if write operations are disabled."""
        return self._read_only

    @property
    def case_sensitive(self) -> bool:
        """True if paths differing only in case are different entries."""
        return self._case_sensitive

    def _key(self, normalized: str) -> str:
        return normalized if self._case_sensitive else normalized.casefold()

    def _check_writable(self) -> None:
        if self._read_only:
            raise PermissionError("Backend is read-only")

    def _require_parent(self, normalized: str) -> None:
        parent = normalized.rpartition("/")[0]
        if self._key(parent) in self._files:
            raise NotADirectoryError(f"Not a directory: {parent}")
        if self._key(parent) not in self._folders:
            raise FileNotFoundError(f"Parent folder does not exist: {parent or '/'}")

    def _require_file_target(self, path: str, normalized: str) -> None:
        if not normalized or self._key(normalized) in self._folders:
            raise IsADirectoryError(f"Is a directory: {path}")
        self._require_parent(normalized)

    def _store(self, normalized: str, content: bytes) -> None:
        key = self._key(normalized)
        timestamp = now()
        existing = self._files.get(key)
        self._files[key] = _InMemoryFile(
            path=existing.path if existing is not None else normalized,
            content=content,
            created=existing.created if existing is not None else timestamp,
            last_accessed=timestamp,
            last_modified=timestamp,
        )

    def _descendant_keys(self, key: str) -> tuple[list[str], list[str]]:
        prefix = f"{key}/"
        files = [k for k in self._files if k.startswith(prefix)]
        folders = [k for k in self._folders if k.startswith(prefix)]
        return files, folders

    # --- Queries ---

    def stat(self, path: str) -> EntryStat:
        """Get metadata for a path; missing paths report ``exists=False``."""
        normalized = normalize_path(path)
        key = self._key(normalized)

        if (file := self._files.get(key)) is not None:
            return EntryStat(
                path=file.path,
                exists=True,
                is_file=True,
                is_folder=False,
                size=len(file.content),
                created=file.created,
                last_accessed=file.last_accessed,
                last_modified=file.last_modified,
            )

        if (folder := self._folders.get(key)) is not None:
            return EntryStat(
                path=folder.path,
                exists=True,
                is_file=False,
                is_folder=True,
                created=folder.created,
                last_accessed=folder.created,
                last_modified=folder.created,
            )

        return EntryStat.missing(normalized)

    def list(self, path: str = "") -> Sequence[BackendEntry]:
        """List the immediate children of a folder, sorted by name."""
        normalized = normalize_path(path)
        key = self._key(normalized)

        if key in self._files:
            raise NotADirectoryError(f"Not a directory: {path}")
        if key not in self._folders:
            raise FileNotFoundError(path)

        entries: list[BackendEntry] = []
        for file_key, file in self._files.items():
            if file_key.rpartition("/")[0] == key:
                name = file.path.rpartition("/")[2]
                entries.append(
                    BackendEntry(name=name, path=file.path, is_file=True, is_folder=False)
                )
        for folder_key, folder in self._folders.items():
            if folder_key and folder_key.rpartition("/")[0] == key:
                name = folder.path.rpartition("/")[2]
                entries.append(
                    BackendEntry(name=name, path=folder.path, is_file=False, is_folder=True)
                )
        entries.sort(key=lambda e: e.name)
        return entries

    def read_bytes(self, path: str) -> bytes:
        """Return the full content of a file."""
        normalized = normalize_path(path)
        key = self._key(normalized)

        if key in self._folders:
            raise IsADirectoryError(f"Is a directory: {path}")
        file = self._files.get(key)
        if file is None:
            raise FileNotFoundError(path)
        file.last_accessed = now()
        return file.content

    # --- Mutations ---

    def open(self, path: str, file_access: FileAccess, file_mode: FileMode) -> Stream:
        """Open a :class:`MemoryStream` on a file."""
        normalized = normalize_path(path)
        self._require_file_target(path, normalized)
        existing = self._files.get(self._key(normalized))

        creates = existing is None and file_mode not in {FileMode.OPEN, FileMode.TRUNCATE}
        empties = file_mode in {FileMode.CREATE, FileMode.TRUNCATE} or creates
        if file_access.writable or (empties and existing is not None) or creates:
            self._check_writable()

        if existing is None and file_mode in {FileMode.OPEN, FileMode.TRUNCATE}:
            raise FileNotFoundError(path)
        if existing is not None and file_mode is FileMode.CREATE_NEW:
            raise FileExistsError(f"File already exists: {path}")

        if empties:
            self._store(normalized, b"")
        content = b"" if empties or existing is None else existing.content

        def commit(data: bytes) -> None:
            self._store(normalized, data)

        return MemoryStream(
            normalized,
            content,
            readable=file_access.readable,
            writable=file_access.writable,
            append=file_mode is FileMode.APPEND,
            on_commit=commit,
        )

    def write_bytes(self, path: str, data: bytes, *, append: bool = False) -> int:
        """Write ``data`` to a file, creating it when missing."""
        self._check_writable()
        normalized = normalize_path(path)
        self._require_file_target(path, normalized)

        existing = self._files.get(self._key(normalized))
        content = existing.content + data if append and existing is not None else data
        self._store(normalized, content)
        return len(data)

    def create_file(self, path: str) -> None:
        """Create an empty file, truncating an existing one."""
        _ = self.write_bytes(path, b"")

    def mkdir(self, path: str) -> None:
        """Create a folder and any missing parents."""
        self._check_writable()
        normalized = normalize_path(path)
        if not normalized:
            return

        current = ""
        for segment in normalized.split("/"):
            current = f"{current}/{segment}" if current else segment
            key = self._key(current)
            if key in self._files:
                raise FileExistsError(f"A file exists at path: {current}")
            if key not in self._folders:
                self._folders[key] = _InMemoryFolder(path=current, created=now())

    def delete(self, path: str, *, recursive: bool = False) -> None:
        """Delete a file or folder."""
        self._check_writable()
        normalized = normalize_path(path)
        if not normalized:
            raise PermissionError("Cannot delete root folder")

        key = self._key(normalized)
        if key in self._files:
            del self._files[key]
            return
        if key not in self._folders:
            raise FileNotFoundError(path)

        files, folders = self._descendant_keys(key)
        if (files or folders) and not recursive:
            raise IsADirectoryError(f"Directory not empty: {path}")
        for file_key in files:
            del self._files[file_key]
        for folder_key in folders:
            del self._folders[folder_key]
        del self._folders[key]

    def move(self, source: str, destination: str) -> None:
        """Move a file or folder to a new path."""
        self._transfer(source, destination, remove_source=True)

    def copy(self, source: str, destination: str) -> None:
        """Copy a file or folder tree to a new path."""
        self._transfer(source, destination, remove_source=False)

    def _transfer(self, source: str, destination: str, *, remove_source: bool) -> None:
        self._check_writable()
        src = normalize_path(source)
        dst = normalize_path(destination)
        src_key = self._key(src)
        dst_key = self._key(dst)

        if src_key not in self._files and (not src or src_key not in self._folders):
            raise FileNotFoundError(source)
        if not dst or dst_key in self._files or dst_key in self._folders:
            raise FileExistsError(f"Destination already exists: {destination or '/'}")
        self._require_parent(dst)

        if src_key in self._files:
            file = self._files[src_key]
            if remove_source:
                del self._files[src_key]
            self._files[dst_key] = _InMemoryFile(
                path=dst,
                content=file.content,
                created=file.created if remove_source else now(),
                last_accessed=file.last_accessed,
                last_modified=file.last_modified,
            )
            return

        if dst_key.startswith(f"{src_key}/"):
            raise OSError(f"Cannot place a folder inside itself: {destination}")

        files, folders = self._descendant_keys(src_key)
        cut = len(src)
        moved_files = {k: self._files[k] for k in files}
        moved_folders = {k: self._folders[k] for k in [src_key, *folders]}
        if remove_source:
            for file_key in files:
                del self._files[file_key]
            for folder_key in moved_folders:
                del self._folders[folder_key]

        for folder in moved_folders.values():
            new_path = dst + folder.path[cut:]
            self._folders[self._key(new_path)] = _InMemoryFolder(
                path=new_path,
                created=folder.created if remove_source else now(),
            )
        for file in moved_files.values():
            new_path = dst + file.path[cut:]
            self._files[self._key(new_path)] = _InMemoryFile(
                path=new_path,
                content=file.content,
                created=file.created if remove_source else now(),
                last_accessed=file.last_accessed,
                last_modified=file.last_modified,
            )
