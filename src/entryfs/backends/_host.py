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

"""Host directory backend.

This module provides a backend implementation rooted at a host directory,
with path restrictions to prevent escaping the sandbox root.

Example usage::

    from entryfs.backends import HostBackend

    backend = HostBackend(_root="/path/to/workspace")
    backend.mkdir("src")
    backend.write_bytes("src/main.py", b"print('hello')")
    assert backend.read_bytes("src/main.py") == b"print('hello')"
"""

from __future__ import annotations

import os
import shutil
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path

from ..enums import FileAccess, FileMode
from ._path import normalize_path
from ._streams import Stream
from ._types import BackendEntry, EntryStat

__all__ = ["HostBackend"]

_ACCESS_FLAGS: dict[FileAccess, int] = {
    FileAccess.READ: os.O_RDONLY,
    FileAccess.WRITE: os.O_WRONLY,
    FileAccess.READ_WRITE: os.O_RDWR,
}

_MODE_FLAGS: dict[FileMode, int] = {
    FileMode.CREATE: os.O_CREAT | os.O_TRUNC,
    FileMode.CREATE_NEW: os.O_CREAT | os.O_EXCL,
    FileMode.OPEN: 0,
    FileMode.OPEN_OR_CREATE: os.O_CREAT,
    FileMode.TRUNCATE: os.O_TRUNC,
    FileMode.APPEND: os.O_CREAT,
}

_FDOPEN_MODES: dict[FileAccess, str] = {
    FileAccess.READ: "rb",
    FileAccess.WRITE: "wb",
    FileAccess.READ_WRITE: "r+b",
}


def _platform_case_sensitive() -> bool:
    return sys.platform not in {"win32", "darwin"}


def _timestamp(value: float) -> datetime:
    return datetime.fromtimestamp(value, tz=UTC)


@dataclass(slots=True)
class HostBackend:
    """Backend rooted at a host directory with path restrictions.

    All paths are resolved relative to the root and validated to ensure they
    cannot escape the sandbox via symlinks or path traversal.
    """

    _root: str
    _read_only: bool = False
    _case_sensitive: bool = field(default_factory=_platform_case_sensitive)

    @property
    def root(self) -> str:
        """Workspace root path."""
        return self._root

    @property
    def read_only(self) -> bool:
        """True if write operations are disabled."""
        return self._read_only

    @property
    def case_sensitive(self) -> bool:
        """True if paths differing only in case are different entries."""
        return self._case_sensitive

    def _check_writable(self) -> None:
        if self._read_only:
            raise PermissionError("Backend is read-only")

    def _resolve_path(self, path: str) -> Path:
        """Resolve a relative path to an absolute path within root.

        Raises:
            PermissionError: If resolved path escapes root directory.
        """
        root_path = Path(self._root).resolve()

        normalized = normalize_path(path)
        if not normalized:
            return root_path

        candidate = (root_path / normalized).resolve()

        try:
            _ = candidate.relative_to(root_path)
        except ValueError:
            msg = f"Path escapes root directory: {path}"
            raise PermissionError(msg) from None

        return candidate

    # --- Queries ---

    def stat(self, path: str) -> EntryStat:
        """Get metadata for a path; missing paths report ``exists=False``."""
        resolved = self._resolve_path(path)
        normalized = normalize_path(path)

        try:
            st = resolved.stat()
        except (FileNotFoundError, NotADirectoryError):
            return EntryStat.missing(normalized)

        is_dir = resolved.is_dir()
        created = getattr(st, "st_birthtime", st.st_ctime)
        return EntryStat(
            path=normalized,
            exists=True,
            is_file=not is_dir,
            is_folder=is_dir,
            size=st.st_size if not is_dir else 0,
            created=_timestamp(created),
            last_accessed=_timestamp(st.st_atime),
            last_modified=_timestamp(st.st_mtime),
        )

    def list(self, path: str = "") -> Sequence[BackendEntry]:
        """List directory contents, sorted by name."""
        resolved = self._resolve_path(path)

        if not resolved.exists():
            raise FileNotFoundError(path)

        if not resolved.is_dir():
            msg = f"Not a directory: {path}"
            raise NotADirectoryError(msg)

        entries: list[BackendEntry] = []
        base_path = normalize_path(path)

        for item in resolved.iterdir():
            is_dir = item.is_dir()
            rel_path = f"{base_path}/{item.name}" if base_path else item.name
            entries.append(
                BackendEntry(
                    name=item.name,
                    path=rel_path,
                    is_file=not is_dir,
                    is_folder=is_dir,
                )
            )

        entries.sort(key=lambda e: e.name)
        return entries

    def read_bytes(self, path: str) -> bytes:
        """Return the full content of a file."""
        resolved = self._resolve_path(path)

        if not resolved.exists():
            raise FileNotFoundError(path)

        if resolved.is_dir():
            msg = f"Is a directory: {path}"
            raise IsADirectoryError(msg)

        return resolved.read_bytes()

    # --- Mutations ---

    def open(self, path: str, file_access: FileAccess, file_mode: FileMode) -> Stream:
        """Open a host file object on a file."""
        resolved = self._resolve_path(path)

        if not normalize_path(path) or resolved.is_dir():
            msg = f"Is a directory: {path}"
            raise IsADirectoryError(msg)

        exists = resolved.exists()
        if file_access.writable or file_mode in {FileMode.CREATE, FileMode.TRUNCATE}:
            self._check_writable()
        elif not exists and file_mode not in {FileMode.OPEN, FileMode.TRUNCATE}:
            self._check_writable()

        flags = _ACCESS_FLAGS[file_access] | _MODE_FLAGS[file_mode]
        if flags & os.O_TRUNC and not file_access.writable:
            # O_TRUNC needs write access at the descriptor level.
            flags |= os.O_RDWR
        flags |= getattr(os, "O_BINARY", 0)

        try:
            fd = os.open(resolved, flags, 0o666)
        except FileExistsError:
            raise FileExistsError(f"File already exists: {path}") from None
        stream = os.fdopen(fd, _FDOPEN_MODES[file_access])
        if file_mode is FileMode.APPEND:
            _ = stream.seek(0, os.SEEK_END)
        return stream

    def write_bytes(self, path: str, data: bytes, *, append: bool = False) -> int:
        """Write raw bytes to a file, creating it when missing."""
        self._check_writable()

        normalized = normalize_path(path)
        resolved = self._resolve_path(path)
        if not normalized or resolved.is_dir():
            msg = f"Is a directory: {path}"
            raise IsADirectoryError(msg)

        if not resolved.parent.exists():
            raise FileNotFoundError(f"Parent directory does not exist: {resolved.parent}")

        with resolved.open("ab" if append else "wb") as handle:
            written = handle.write(data)
        return written

    def create_file(self, path: str) -> None:
        """Create an empty file, truncating an existing one."""
        _ = self.write_bytes(path, b"")

    def mkdir(self, path: str) -> None:
        """Create a directory and any missing parents."""
        self._check_writable()

        normalized = normalize_path(path)
        if not normalized:
            return  # Root always exists

        resolved = self._resolve_path(path)

        if resolved.exists():
            if resolved.is_file():
                raise FileExistsError(f"A file exists at path: {path}")
            return

        resolved.mkdir(parents=True, exist_ok=True)

    def delete(self, path: str, *, recursive: bool = False) -> None:
        """Delete a file or directory."""
        self._check_writable()

        normalized = normalize_path(path)
        if not normalized:
            msg = "Cannot delete root directory"
            raise PermissionError(msg)

        resolved = self._resolve_path(path)

        if not resolved.exists():
            raise FileNotFoundError(path)

        if resolved.is_file():
            resolved.unlink()
            return

        if any(resolved.iterdir()) and not recursive:
            msg = f"Directory not empty: {path}"
            raise IsADirectoryError(msg)

        if recursive:
            shutil.rmtree(resolved)
        else:
            resolved.rmdir()

    def move(self, source: str, destination: str) -> None:
        """Move a file or directory to a new path."""
        src, dst = self._prepare_transfer(source, destination)
        _ = shutil.move(src, dst)

    def copy(self, source: str, destination: str) -> None:
        """Copy a file or directory tree to a new path."""
        src, dst = self._prepare_transfer(source, destination)
        if src.is_dir():
            _ = shutil.copytree(src, dst)
        else:
            _ = shutil.copy2(src, dst)

    def _prepare_transfer(self, source: str, destination: str) -> tuple[Path, Path]:
        self._check_writable()

        src = self._resolve_path(source)
        dst = self._resolve_path(destination)

        if not normalize_path(source) or not src.exists():
            raise FileNotFoundError(source)
        if not normalize_path(destination) or dst.exists():
            raise FileExistsError(f"Destination already exists: {destination or '/'}")
        if not dst.parent.is_dir():
            raise FileNotFoundError(f"Parent directory does not exist: {dst.parent}")
        if src.is_dir() and dst.is_relative_to(src):
            raise OSError(f"Cannot place a folder inside itself: {destination}")

        return src, dst
