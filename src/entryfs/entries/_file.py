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

"""File handles.

Example usage::

    from entryfs.backends import InMemoryBackend
    from entryfs.entries import File

    backend = InMemoryBackend()
    report = File(backend, "report.txt")
    report.write_all("hello\\n")
    assert report.read_all_lines() == ["hello"]
"""

from __future__ import annotations

import codecs
import io
from collections.abc import Iterator
from typing import ClassVar, Final, override

from ..backends import Backend, Stream, join_path, split_path
from ..collision import OpenExisting, Proceed
from ..config import DEFAULT_CONFIG, EntryFsConfig
from ..enums import (
    CollisionOption,
    EntryKind,
    FileAccess,
    FileMode,
    WriteMode,
    is_valid_mode_combination,
)
from ..errors import InvalidOpenModeError
from ._entry import Entry
from ._null import NullFile

__all__ = ["File", "detect_encoding"]

# Longest marks first: the UTF-32-LE mark starts with the UTF-16-LE one.
_BOMS: Final[tuple[tuple[bytes, str], ...]] = (
    (codecs.BOM_UTF32_LE, "utf-32"),
    (codecs.BOM_UTF32_BE, "utf-32"),
    (codecs.BOM_UTF8, "utf-8-sig"),
    (codecs.BOM_UTF16_LE, "utf-16"),
    (codecs.BOM_UTF16_BE, "utf-16"),
)


def detect_encoding(head: bytes, default: str) -> str:
    """Return the codec named by the byte-order mark in ``head``.

    The returned codecs strip the mark on decode. Without a mark the
    ``default`` is returned.

    Examples:
        >>> detect_encoding(codecs.BOM_UTF8 + b"abc", "latin-1")
        'utf-8-sig'
        >>> detect_encoding(b"abc", "latin-1")
        'latin-1'
    """
    for bom, encoding in _BOMS:
        if head.startswith(bom):
            return encoding
    return default


class File(Entry):
    """Handle on a file path.

    A file owns at most one open stream at a time, created by :meth:`open`
    and released by :meth:`close` or :meth:`dispose`. While the stream is
    open, whole-file writes and relocations return False without touching
    the backend; the ``stream_*`` helpers operate on the open stream.
    """

    __slots__ = ("_encoding", "_extension", "_file_access", "_file_mode", "_stream", "_text")

    kind: ClassVar[EntryKind] = EntryKind.FILE

    def __init__(
        self,
        backend: Backend,
        path: str,
        *,
        config: EntryFsConfig = DEFAULT_CONFIG,
    ) -> None:
        self._extension = ""
        self._encoding: str | None = None
        self._stream: Stream | None = None
        self._text: io.TextIOWrapper | None = None
        self._file_access: FileAccess | None = None
        self._file_mode: FileMode | None = None
        super().__init__(backend, path, config=config)

    @override
    def _rebind(self, path: str) -> None:
        parent, name, extension = split_path(path)
        self._parent_path = parent
        self._name = name
        self._extension = extension

    @property
    def extension(self) -> str:
        """Extension including the leading dot, or ``""``."""
        return self._extension

    @property
    @override
    def leaf_name(self) -> str:
        return f"{self._name}{self._extension}"

    @override
    def _mutable(self) -> bool:
        return self._stream is None

    # --- Encoding ---

    @property
    def encoding(self) -> str:
        """Text encoding, detected from the byte-order mark on first use."""
        if self._encoding is None:
            default = self._config.default_encoding
            if self._existing_stat() is None:
                return default
            with self._backend.open(self.full_path, FileAccess.READ, FileMode.OPEN) as stream:
                head = stream.read(4)
            self._encoding = detect_encoding(head, default)
        return self._encoding

    def set_encoding(self, encoding: str) -> bool:
        """Switch the file to ``encoding``, re-encoding existing content.

        Returns False for an unknown codec or while a stream is open.
        """
        try:
            _ = codecs.lookup(encoding)
        except LookupError:
            return False
        if not self._mutable():
            return False
        if self.exists:
            text = self.read_all()
            _ = self._backend.write_bytes(self.full_path, text.encode(encoding))
        self._encoding = encoding
        self._logger.debug(
            "File encoding changed.",
            event="file.set_encoding",
            context={"path": self.full_path, "encoding": encoding},
        )
        return True

    # --- Stream lifecycle ---

    @property
    def stream(self) -> Stream | None:
        return self._stream

    @property
    def is_open(self) -> bool:
        return self._stream is not None

    @property
    def file_access(self) -> FileAccess | None:
        return self._file_access

    @property
    def file_mode(self) -> FileMode | None:
        return self._file_mode

    def open(
        self,
        file_access: FileAccess = FileAccess.READ_WRITE,
        file_mode: FileMode = FileMode.OPEN_OR_CREATE,
    ) -> Stream:
        """Open a binary stream on the file, closing any previous one.

        Raises:
            InvalidOpenModeError: ``file_access`` cannot be used with
                ``file_mode``.
        """
        if not is_valid_mode_combination(file_access, file_mode):
            msg = (
                f"File access {file_access.value!r} cannot be combined with "
                f"mode {file_mode.value!r}."
            )
            raise InvalidOpenModeError(msg)

        self.close()
        stream = self._backend.open(self.full_path, file_access, file_mode)
        self._stream = stream
        self._file_access = file_access
        self._file_mode = file_mode
        self._logger.debug(
            "File opened.",
            event="file.open",
            context={
                "path": self.full_path,
                "file_access": file_access.value,
                "file_mode": file_mode.value,
            },
        )
        return stream

    def close(self) -> None:
        """Flush and release the open stream, if any."""
        if self._stream is None:
            return
        if self._text is not None:
            self._text.close()
        else:
            self._stream.close()
        self._stream = None
        self._text = None
        self._file_access = None
        self._file_mode = None
        self._logger.debug("File closed.", event="file.close", context={"path": self.full_path})

    @override
    def dispose(self) -> None:
        self.close()

    # --- Whole-file reads ---

    def read_bytes(self) -> bytes:
        """Return the raw content of the file."""
        return self._backend.read_bytes(self.full_path)

    def read_all(self) -> str:
        """Return the decoded content of the file."""
        return self.read_bytes().decode(self.encoding)

    def read_all_lines(self) -> list[str]:
        return self.read_all().splitlines()

    def read_lines(self) -> Iterator[str]:
        """Lazily yield lines without their terminators."""
        encoding = self.encoding
        with (
            self._backend.open(self.full_path, FileAccess.READ, FileMode.OPEN) as stream,
            io.TextIOWrapper(stream, encoding=encoding, newline=None) as text,  # type: ignore[arg-type]
        ):
            for line in text:
                yield line.rstrip("\n")

    # --- Whole-file writes ---

    def write_bytes(self, data: bytes, write_mode: WriteMode = WriteMode.TRUNCATE) -> bool:
        """Write raw bytes; False while a stream is open."""
        if not self._mutable():
            return False
        _ = self._backend.write_bytes(
            self.full_path, data, append=write_mode is WriteMode.APPEND
        )
        self._logger.debug(
            "File written.",
            event="file.write",
            context={"path": self.full_path, "bytes": len(data), "mode": write_mode.value},
        )
        return True

    def write_all(self, text: str, write_mode: WriteMode = WriteMode.TRUNCATE) -> bool:
        """Write ``text`` in the file's encoding; False while a stream is open.

        Appending re-encodes the existing text together with ``text`` so a
        byte-order mark is only ever written at the start of the file.
        """
        if not self._mutable():
            return False
        if write_mode is WriteMode.APPEND and self.exists:
            text = self.read_all() + text
        return self.write_bytes(text.encode(self.encoding))

    def write_line(self, text: str, write_mode: WriteMode = WriteMode.TRUNCATE) -> bool:
        """Like :meth:`write_all` with a trailing newline."""
        return self.write_all(f"{text}\n", write_mode)

    def clear(self) -> bool:
        """Empty the file, keeping it in place."""
        return self.write_bytes(b"")

    # --- Streamed text I/O on the open stream ---

    def _text_stream(self) -> io.TextIOWrapper | None:
        if self._stream is None:
            return None
        if self._text is None:
            self._text = io.TextIOWrapper(
                self._stream,  # type: ignore[arg-type]
                encoding=self.encoding,
                newline="",
            )
        return self._text

    def stream_read(self, chars: int = -1) -> str | None:
        """Read up to ``chars`` characters; None when no stream is open."""
        text = self._text_stream()
        return text.read(chars) if text is not None else None

    def stream_read_line(self) -> str | None:
        """Read one line without its terminator; None at end or when closed."""
        text = self._text_stream()
        if text is None:
            return None
        line = text.readline()
        if not line:
            return None
        return line.rstrip("\r\n")

    def stream_read_all(self) -> str | None:
        return self.stream_read(-1)

    def stream_write(self, text: str) -> bool:
        """Write ``text`` to the open stream; False when no stream is open."""
        wrapper = self._text_stream()
        if wrapper is None:
            return False
        _ = wrapper.write(text)
        wrapper.flush()
        return True

    def stream_write_line(self, text: str) -> bool:
        return self.stream_write(f"{text}\n")

    def stream_set_position(self, position: int) -> bool:
        """Move the open stream to byte offset ``position``."""
        if self._stream is None:
            return False
        if self._text is not None:
            self._text.flush()
            # Detaching drops read-ahead so the next read starts at ``position``.
            _ = self._text.detach()
            self._text = None
        _ = self._stream.seek(position)
        return True

    # --- Copy and relocation ---

    def copy(self, destination: str, collision: CollisionOption | None = None) -> File | NullFile:
        """Copy the file to the full path ``destination``.

        Returns:
            A handle on the copy, the existing destination under
            ``OPEN_IF_EXISTS``, or a :class:`NullFile` when the source is
            missing or the policy refuses the copy.
        """
        target = join_path(destination)
        if not target or not self.exists:
            return NullFile(target, config=self._config)
        if self._text is not None:
            self._text.flush()
        if self._stream is not None:
            self._stream.flush()

        match self._decide(target, collision):
            case Proceed(path=path, replace_existing=True) if self._is_own_path(path):
                return self
            case Proceed(path=path) if self._is_nested_with(path):
                return NullFile(path, config=self._config)
            case Proceed() as decision:
                path = self._claim(decision)
                self._backend.copy(self.full_path, path)
                self._logger.debug(
                    "File copied.",
                    event="file.copy",
                    context={"source": self.full_path, "destination": path},
                )
                return self._sibling(path)
            case OpenExisting(path=path):
                existing = self._sibling(path)
                return existing if existing.exists else NullFile(path, config=self._config)
            case _:
                return NullFile(target, config=self._config)

    def change_extension(self, extension: str, collision: CollisionOption | None = None) -> bool:
        """Replace the extension; ``"txt"`` and ``".txt"`` are equivalent."""
        if extension and not extension.startswith("."):
            extension = f".{extension}"
        return self._relocate(
            join_path(self._parent_path, f"{self._name}{extension}"),
            collision,
            event="file.change_extension",
        )

    def _sibling(self, path: str) -> File:
        return File(self._backend, path, config=self._config)
