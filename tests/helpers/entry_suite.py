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

"""Reusable validation suite for the entry model over any backend.

The same file and folder behaviour must hold whichever backend stores the
data, so the suite runs once per backend::

    class TestEntriesOnMyBackend(EntryValidationSuite):
        @pytest.fixture
        def fs(self) -> EntryFileSystem:
            return EntryFileSystem(MyBackend())
"""

from __future__ import annotations

import codecs
from abc import abstractmethod

import pytest

from entryfs import (
    CollisionOption,
    EntryFileSystem,
    ExistenceCheckResult,
    File,
    FileAccess,
    FileMode,
    Folder,
    InvalidOpenModeError,
    NullFile,
    NullFolder,
    SearchOption,
    WriteMode,
)
from entryfs.backends import MIN_DATETIME


class EntryValidationSuite:
    """Abstract suite covering ``File`` and ``Folder`` semantics.

    Subclasses provide an ``fs`` fixture over an empty, writable backend.
    """

    @pytest.fixture
    @abstractmethod
    def fs(self) -> EntryFileSystem:
        """Provide a facade over a fresh, empty backend."""
        ...

    @pytest.fixture
    def text_file(self, fs: EntryFileSystem) -> File:
        file = fs.file("a.txt")
        assert file.write_all("alpha")
        return file

    # -------------------------------------------------------------------------
    # Identity and metadata
    # -------------------------------------------------------------------------

    def test_file_path_parts(self, fs: EntryFileSystem) -> None:
        """Files split their path into parent, name and extension."""
        file = fs.file("docs/report.final.pdf")
        assert file.parent_path == "docs"
        assert file.name == "report.final"
        assert file.extension == ".pdf"
        assert file.leaf_name == "report.final.pdf"
        assert file.full_path == "docs/report.final.pdf"

    def test_missing_file_metadata(self, fs: EntryFileSystem) -> None:
        """A handle on a missing file reports neutral metadata."""
        file = fs.file("missing.txt")
        assert file.exists is False
        assert file.size == 0
        assert file.created_time() == MIN_DATETIME
        assert file.last_modified_time(use_utc=False) == MIN_DATETIME

    def test_existing_file_metadata(self, text_file: File) -> None:
        """Existing files report size and aware timestamps."""
        assert text_file.exists is True
        assert text_file.size == 5
        assert text_file.created_time().tzinfo is not None
        assert text_file.last_accessed_time().tzinfo is not None
        assert text_file.last_modified_time(use_utc=False).tzinfo is not None

    def test_file_handle_is_not_folder(self, fs: EntryFileSystem, text_file: File) -> None:
        """Existence is checked against the handle's kind."""
        assert fs.folder("a.txt").exists is False
        assert text_file.exists is True

    # -------------------------------------------------------------------------
    # Whole-file I/O
    # -------------------------------------------------------------------------

    def test_write_all_then_read_all(self, text_file: File) -> None:
        """write_all() content should come back from read_all()."""
        assert text_file.read_all() == "alpha"
        assert text_file.read_bytes() == b"alpha"

    def test_write_all_append(self, text_file: File) -> None:
        """APPEND extends the existing text."""
        assert text_file.write_all(" beta", WriteMode.APPEND)
        assert text_file.read_all() == "alpha beta"

    def test_write_line_truncates_by_default(self, fs: EntryFileSystem) -> None:
        """write_line() replaces content unless asked to append."""
        file = fs.file("lines.txt")
        assert file.write_line("one")
        assert file.write_line("two")
        assert file.read_all() == "two\n"
        assert file.write_line("three", WriteMode.APPEND)
        assert file.read_all() == "two\nthree\n"

    def test_read_all_lines(self, fs: EntryFileSystem) -> None:
        """read_all_lines() drops terminators of every style."""
        file = fs.file("lines.txt")
        assert file.write_all("one\r\ntwo\nthree")
        assert file.read_all_lines() == ["one", "two", "three"]

    def test_read_lines_is_lazy(self, fs: EntryFileSystem) -> None:
        """read_lines() yields one line at a time."""
        file = fs.file("lines.txt")
        assert file.write_all("one\ntwo\n")
        lines = file.read_lines()
        assert next(lines) == "one"
        assert list(lines) == ["two"]

    def test_write_bytes_append(self, fs: EntryFileSystem) -> None:
        """write_bytes() honours the write mode."""
        file = fs.file("data.bin")
        assert file.write_bytes(b"\x00\x01")
        assert file.write_bytes(b"\x02", WriteMode.APPEND)
        assert file.read_bytes() == b"\x00\x01\x02"

    def test_clear_keeps_file(self, text_file: File) -> None:
        """clear() empties the file without deleting it."""
        assert text_file.clear()
        assert text_file.exists
        assert text_file.size == 0

    def test_write_below_missing_folder_raises(self, fs: EntryFileSystem) -> None:
        """Backend errors from a missing parent propagate."""
        with pytest.raises(FileNotFoundError):
            fs.file("missing/a.txt").write_all("x")

    def test_read_missing_file_raises(self, fs: EntryFileSystem) -> None:
        """Reading a missing file propagates the backend error."""
        with pytest.raises(FileNotFoundError):
            fs.file("missing.txt").read_all()

    # -------------------------------------------------------------------------
    # Encoding
    # -------------------------------------------------------------------------

    def test_missing_file_uses_default_encoding(self, fs: EntryFileSystem) -> None:
        """A missing file falls back to the configured default."""
        assert fs.file("missing.txt").encoding == fs.config.default_encoding

    def test_encoding_detected_after_file_appears(self, fs: EntryFileSystem) -> None:
        """Detection is not cached while the file is missing."""
        file = fs.file("late.txt")
        assert file.encoding == "utf-8"
        _ = fs.backend.write_bytes("late.txt", codecs.BOM_UTF8 + b"hi")
        assert file.encoding == "utf-8-sig"
        assert file.read_all() == "hi"

    def test_utf16_detected_from_bom(self, fs: EntryFileSystem) -> None:
        """UTF-16 files are decoded through their byte-order mark."""
        _ = fs.backend.write_bytes("wide.txt", "héllo".encode("utf-16"))
        file = fs.file("wide.txt")
        assert file.encoding == "utf-16"
        assert file.read_all() == "héllo"

    def test_set_encoding_transcodes(self, fs: EntryFileSystem) -> None:
        """set_encoding() rewrites existing content in the new codec."""
        file = fs.file("a.txt")
        assert file.write_all("héllo")
        assert file.set_encoding("utf-8-sig")
        assert file.read_bytes() == codecs.BOM_UTF8 + "héllo".encode()
        assert fs.file("a.txt").encoding == "utf-8-sig"
        assert fs.file("a.txt").read_all() == "héllo"

    def test_append_writes_bom_once(self, fs: EntryFileSystem) -> None:
        """Appending to a BOM-marked file keeps a single mark."""
        file = fs.file("a.txt")
        assert file.write_all("one")
        assert file.set_encoding("utf-8-sig")
        assert file.write_all("two", WriteMode.APPEND)
        data = file.read_bytes()
        assert data.count(codecs.BOM_UTF8) == 1
        assert file.read_all() == "onetwo"

    def test_set_encoding_unknown_codec(self, text_file: File) -> None:
        """Unknown codecs are refused without touching the file."""
        assert text_file.set_encoding("no-such-codec") is False
        assert text_file.read_all() == "alpha"

    def test_set_encoding_while_open(self, text_file: File) -> None:
        """Encoding cannot change under an open stream."""
        _ = text_file.open()
        try:
            assert text_file.set_encoding("utf-16") is False
        finally:
            text_file.close()

    # -------------------------------------------------------------------------
    # Streams
    # -------------------------------------------------------------------------

    def test_open_and_close(self, text_file: File) -> None:
        """open() records the access and mode until close()."""
        stream = text_file.open(FileAccess.READ, FileMode.OPEN)
        assert text_file.is_open
        assert text_file.stream is stream
        assert text_file.file_access is FileAccess.READ
        assert text_file.file_mode is FileMode.OPEN
        text_file.close()
        assert not text_file.is_open
        assert text_file.file_access is None
        assert text_file.file_mode is None
        assert stream.closed

    def test_open_invalid_combination(self, text_file: File) -> None:
        """Read-only access cannot truncate or append."""
        with pytest.raises(InvalidOpenModeError):
            _ = text_file.open(FileAccess.READ, FileMode.APPEND)
        with pytest.raises(ValueError):
            _ = text_file.open(FileAccess.READ, FileMode.TRUNCATE)
        assert not text_file.is_open

    def test_reopen_closes_previous_stream(self, text_file: File) -> None:
        """Only one stream is held at a time."""
        first = text_file.open(FileAccess.READ, FileMode.OPEN)
        second = text_file.open(FileAccess.READ_WRITE, FileMode.OPEN)
        try:
            assert first.closed
            assert text_file.stream is second
        finally:
            text_file.close()

    def test_stream_helpers_without_stream(self, text_file: File) -> None:
        """Stream helpers report failure when nothing is open."""
        assert text_file.stream_read() is None
        assert text_file.stream_read_line() is None
        assert text_file.stream_read_all() is None
        assert text_file.stream_write("x") is False
        assert text_file.stream_write_line("x") is False
        assert text_file.stream_set_position(0) is False

    def test_stream_write_then_read_lines(self, fs: EntryFileSystem) -> None:
        """Lines written to the stream can be read back after seeking."""
        file = fs.file("stream.txt")
        _ = file.open(FileAccess.READ_WRITE, FileMode.CREATE)
        try:
            assert file.stream_write_line("one")
            assert file.stream_write_line("two")
            assert file.stream_set_position(0)
            assert file.stream_read_line() == "one"
            assert file.stream_read_line() == "two"
            assert file.stream_read_line() is None
        finally:
            file.close()
        assert file.read_all() == "one\ntwo\n"

    def test_stream_read_chars_and_rest(self, text_file: File) -> None:
        """stream_read() honours the character count."""
        _ = text_file.open(FileAccess.READ, FileMode.OPEN)
        try:
            assert text_file.stream_read(2) == "al"
            assert text_file.stream_read_all() == "pha"
            assert text_file.stream_set_position(0)
            assert text_file.stream_read_all() == "alpha"
        finally:
            text_file.close()

    def test_stream_writes_visible_before_close(self, fs: EntryFileSystem) -> None:
        """stream_write() flushes through to the backend."""
        file = fs.file("live.txt")
        _ = file.open(FileAccess.WRITE, FileMode.CREATE)
        try:
            assert file.stream_write("partial")
            assert fs.backend.read_bytes("live.txt") == b"partial"
        finally:
            file.close()

    def test_context_manager_closes_stream(self, text_file: File) -> None:
        """Leaving the ``with`` block disposes of the stream."""
        with text_file as file:
            _ = file.open(FileAccess.READ, FileMode.OPEN)
            assert file.is_open
        assert not text_file.is_open
        text_file.dispose()

    def test_mutations_blocked_while_open(self, fs: EntryFileSystem, text_file: File) -> None:
        """Whole-file writes and relocations refuse to run under a stream."""
        _ = text_file.open(FileAccess.READ, FileMode.OPEN)
        try:
            assert text_file.write_all("other") is False
            assert text_file.write_bytes(b"other") is False
            assert text_file.clear() is False
            assert text_file.delete() is False
            assert text_file.move("moved.txt") is False
            assert text_file.rename("renamed.txt") is False
            assert text_file.change_extension(".md") is False
        finally:
            text_file.close()
        assert text_file.full_path == "a.txt"
        assert fs.backend.read_bytes("a.txt") == b"alpha"

    def test_copy_while_open_flushes(self, fs: EntryFileSystem) -> None:
        """Copying under an open stream includes unflushed writes."""
        file = fs.file("a.txt")
        _ = file.open(FileAccess.READ_WRITE, FileMode.CREATE)
        try:
            assert file.stream_write("hello")
            copy = file.copy("b.txt")
        finally:
            file.close()
        assert isinstance(copy, File)
        assert copy.read_all() == "hello"

    # -------------------------------------------------------------------------
    # File relocation
    # -------------------------------------------------------------------------

    def test_copy_file(self, fs: EntryFileSystem, text_file: File) -> None:
        """copy() leaves the source and returns a handle on the copy."""
        fs.backend.mkdir("backup")
        copy = text_file.copy("backup/a.txt")
        assert isinstance(copy, File)
        assert copy.full_path == "backup/a.txt"
        assert copy.read_all() == "alpha"
        assert text_file.read_all() == "alpha"

    def test_copy_missing_source(self, fs: EntryFileSystem) -> None:
        """Copying a missing file returns a null file."""
        copy = fs.file("missing.txt").copy("b.txt")
        assert isinstance(copy, NullFile)
        assert not copy
        assert fs.backend.stat("b.txt").exists is False

    def test_copy_collision_fail(self, fs: EntryFileSystem, text_file: File) -> None:
        """FAIL_IF_EXISTS keeps the destination untouched."""
        _ = fs.backend.write_bytes("b.txt", b"bravo")
        copy = text_file.copy("b.txt", CollisionOption.FAIL_IF_EXISTS)
        assert not copy
        assert fs.backend.read_bytes("b.txt") == b"bravo"

    def test_copy_collision_replace(self, fs: EntryFileSystem, text_file: File) -> None:
        """REPLACE_EXISTING overwrites the destination."""
        _ = fs.backend.write_bytes("b.txt", b"bravo")
        copy = text_file.copy("b.txt", CollisionOption.REPLACE_EXISTING)
        assert copy.full_path == "b.txt"
        assert fs.backend.read_bytes("b.txt") == b"alpha"

    def test_copy_collision_unique_name(self, fs: EntryFileSystem, text_file: File) -> None:
        """GENERATE_UNIQUE_NAME picks the lowest free suffix."""
        _ = fs.backend.write_bytes("b.txt", b"bravo")
        copy = text_file.copy("b.txt", CollisionOption.GENERATE_UNIQUE_NAME)
        assert copy.full_path == "b - (1).txt"
        assert copy.read_all() == "alpha"

    def test_copy_collision_open_existing(self, fs: EntryFileSystem, text_file: File) -> None:
        """OPEN_IF_EXISTS hands back the destination as it is."""
        _ = fs.backend.write_bytes("b.txt", b"bravo")
        copy = text_file.copy("b.txt", CollisionOption.OPEN_IF_EXISTS)
        assert isinstance(copy, File)
        assert copy.read_all() == "bravo"

    def test_copy_onto_itself_with_replace(self, text_file: File) -> None:
        """Replacing a file with itself is a no-op returning the same handle."""
        assert text_file.copy("a.txt", CollisionOption.REPLACE_EXISTING) is text_file
        assert text_file.read_all() == "alpha"

    def test_move_file(self, fs: EntryFileSystem, text_file: File) -> None:
        """move() relocates the file and rebinds the handle."""
        fs.backend.mkdir("sub")
        assert text_file.move("sub/moved.txt")
        assert text_file.full_path == "sub/moved.txt"
        assert text_file.name == "moved"
        assert text_file.read_all() == "alpha"
        assert fs.backend.stat("a.txt").exists is False

    def test_move_onto_own_path(self, text_file: File) -> None:
        """Moving a file onto itself reports failure."""
        assert text_file.move("a.txt", CollisionOption.REPLACE_EXISTING) is False
        assert text_file.exists

    def test_move_missing_file(self, fs: EntryFileSystem) -> None:
        """Moving a missing file reports failure."""
        assert fs.file("missing.txt").move("b.txt") is False

    def test_move_collision_fail(self, fs: EntryFileSystem, text_file: File) -> None:
        """Moves default to FAIL_IF_EXISTS."""
        _ = fs.backend.write_bytes("b.txt", b"bravo")
        assert text_file.move("b.txt") is False
        assert text_file.full_path == "a.txt"

    def test_move_collision_open_existing(self, fs: EntryFileSystem, text_file: File) -> None:
        """OPEN_IF_EXISTS cannot apply to a move and reports failure."""
        _ = fs.backend.write_bytes("b.txt", b"bravo")
        assert text_file.move("b.txt", CollisionOption.OPEN_IF_EXISTS) is False
        assert text_file.exists

    def test_move_collision_replace(self, fs: EntryFileSystem, text_file: File) -> None:
        """REPLACE_EXISTING removes the destination first."""
        _ = fs.backend.write_bytes("b.txt", b"bravo")
        assert text_file.move("b.txt", CollisionOption.REPLACE_EXISTING)
        assert fs.backend.read_bytes("b.txt") == b"alpha"
        assert fs.backend.stat("a.txt").exists is False

    def test_replace_refuses_own_parent_folder(self, fs: EntryFileSystem) -> None:
        """Replacing the folder that holds the file would destroy the source."""
        fs.backend.mkdir("a")
        _ = fs.backend.write_bytes("a/x.txt", b"keep")
        file = fs.file("a/x.txt")
        assert file.move("a", CollisionOption.REPLACE_EXISTING) is False
        assert isinstance(file.copy("a", CollisionOption.REPLACE_EXISTING), NullFile)
        assert file.full_path == "a/x.txt"
        assert fs.backend.read_bytes("a/x.txt") == b"keep"

    def test_unique_name_beside_own_parent_folder(self, fs: EntryFileSystem) -> None:
        """A generated name next to the parent folder is safe to use."""
        fs.backend.mkdir("a")
        _ = fs.backend.write_bytes("a/x.txt", b"keep")
        file = fs.file("a/x.txt")
        assert file.move("a", CollisionOption.GENERATE_UNIQUE_NAME)
        assert file.full_path == "a - (1)"
        assert fs.backend.read_bytes("a - (1)") == b"keep"

    def test_rename_file(self, fs: EntryFileSystem, text_file: File) -> None:
        """rename() stays within the parent folder."""
        assert text_file.rename("renamed.txt")
        assert text_file.full_path == "renamed.txt"
        assert fs.backend.read_bytes("renamed.txt") == b"alpha"

    def test_rename_unique_name(self, fs: EntryFileSystem, text_file: File) -> None:
        """rename() follows the collision policy."""
        _ = fs.backend.write_bytes("b.txt", b"bravo")
        assert text_file.rename("b.txt", CollisionOption.GENERATE_UNIQUE_NAME)
        assert text_file.full_path == "b - (1).txt"

    def test_rename_rejects_paths(self, text_file: File) -> None:
        """Names containing separators are rejected."""
        with pytest.raises(ValueError):
            _ = text_file.rename("sub/b.txt")

    def test_change_extension(self, fs: EntryFileSystem, text_file: File) -> None:
        """change_extension() accepts the extension with or without a dot."""
        assert text_file.change_extension("md")
        assert text_file.full_path == "a.md"
        assert text_file.change_extension(".rst")
        assert text_file.extension == ".rst"
        assert fs.backend.read_bytes("a.rst") == b"alpha"

    def test_delete_file(self, text_file: File) -> None:
        """delete() reports whether anything was removed."""
        assert text_file.delete()
        assert not text_file.exists
        assert text_file.delete() is False

    # -------------------------------------------------------------------------
    # Folder creation
    # -------------------------------------------------------------------------

    def test_create_folder_and_file(self, fs: EntryFileSystem) -> None:
        """Folders create direct children."""
        root = fs.root_folder()
        docs = root.create_folder("docs")
        assert isinstance(docs, Folder)
        report = docs.create_file("report.txt")
        assert isinstance(report, File)
        assert report.full_path == "docs/report.txt"
        assert report.exists
        assert report.size == 0

    def test_create_in_missing_folder(self, fs: EntryFileSystem) -> None:
        """A missing folder cannot create children."""
        missing = fs.folder("missing")
        assert isinstance(missing.create_file("a.txt"), NullFile)
        assert isinstance(missing.create_folder("sub"), NullFolder)
        assert fs.backend.stat("missing").exists is False

    def test_create_file_rejects_bad_names(self, fs: EntryFileSystem) -> None:
        """Names must be a single path segment."""
        root = fs.root_folder()
        for bad in ("", "..", "a/b", "a\\b"):
            with pytest.raises(ValueError):
                _ = root.create_file(bad)

    def test_create_file_default_fails_on_collision(self, fs: EntryFileSystem) -> None:
        """Without a policy, the configured FAIL_IF_EXISTS applies."""
        root = fs.root_folder()
        _ = fs.backend.write_bytes("a.txt", b"alpha")
        created = root.create_file("a.txt")
        assert isinstance(created, NullFile)
        assert fs.backend.read_bytes("a.txt") == b"alpha"

    def test_create_file_replace(self, fs: EntryFileSystem) -> None:
        """REPLACE_EXISTING leaves an empty file behind."""
        _ = fs.backend.write_bytes("a.txt", b"alpha")
        created = fs.root_folder().create_file("a.txt", CollisionOption.REPLACE_EXISTING)
        assert created.exists
        assert created.size == 0

    def test_create_file_replaces_folder(self, fs: EntryFileSystem) -> None:
        """REPLACE_EXISTING removes a folder of the same name."""
        fs.backend.mkdir("a.txt/inner")
        created = fs.root_folder().create_file("a.txt", CollisionOption.REPLACE_EXISTING)
        assert isinstance(created, File)
        assert fs.backend.stat("a.txt").is_file

    def test_create_file_open_existing(self, fs: EntryFileSystem) -> None:
        """OPEN_IF_EXISTS returns the file already there."""
        _ = fs.backend.write_bytes("a.txt", b"alpha")
        created = fs.root_folder().create_file("a.txt", CollisionOption.OPEN_IF_EXISTS)
        assert isinstance(created, File)
        assert created.read_all() == "alpha"

    def test_create_file_open_existing_of_other_kind(self, fs: EntryFileSystem) -> None:
        """OPEN_IF_EXISTS with a folder in the way yields a null file."""
        fs.backend.mkdir("a.txt")
        created = fs.root_folder().create_file("a.txt", CollisionOption.OPEN_IF_EXISTS)
        assert isinstance(created, NullFile)

    def test_create_file_unique_names(self, fs: EntryFileSystem) -> None:
        """Repeated creation walks the ``name - (n)`` sequence."""
        root = fs.root_folder()
        names = [
            root.create_file("a.txt", CollisionOption.GENERATE_UNIQUE_NAME).leaf_name
            for _ in range(3)
        ]
        assert names == ["a.txt", "a - (1).txt", "a - (2).txt"]

    def test_create_folder_unique_names(self, fs: EntryFileSystem) -> None:
        """Folder suffixes go after the whole name."""
        root = fs.root_folder()
        _ = root.create_folder("v1.0")
        second = root.create_folder("v1.0", CollisionOption.GENERATE_UNIQUE_NAME)
        assert second.full_path == "v1.0 - (1)"

    # -------------------------------------------------------------------------
    # Folder relocation and deletion
    # -------------------------------------------------------------------------

    def test_copy_folder_tree(self, fs: EntryFileSystem) -> None:
        """copy() duplicates the whole tree."""
        fs.backend.mkdir("src/pkg")
        _ = fs.backend.write_bytes("src/pkg/mod.py", b"pass")
        copy = fs.folder("src").copy("backup")
        assert isinstance(copy, Folder)
        assert copy.get_file_names() == ["pkg/mod.py"]
        assert fs.backend.read_bytes("src/pkg/mod.py") == b"pass"

    def test_copy_folder_collision_fail(self, fs: EntryFileSystem) -> None:
        """Folder copies respect FAIL_IF_EXISTS."""
        fs.backend.mkdir("src")
        fs.backend.mkdir("backup")
        assert not fs.folder("src").copy("backup")

    def test_folder_replace_refuses_descendant(self, fs: EntryFileSystem) -> None:
        """A folder cannot replace one of its own descendants."""
        fs.backend.mkdir("a/b")
        _ = fs.backend.write_bytes("a/b/x.txt", b"keep")
        folder = fs.folder("a")
        assert folder.move("a/b", CollisionOption.REPLACE_EXISTING) is False
        assert isinstance(folder.copy("a/b", CollisionOption.REPLACE_EXISTING), NullFolder)
        assert fs.backend.read_bytes("a/b/x.txt") == b"keep"
        assert folder.full_path == "a"

    def test_folder_replace_refuses_ancestor(self, fs: EntryFileSystem) -> None:
        """A folder cannot replace the folder that contains it."""
        fs.backend.mkdir("a/b")
        _ = fs.backend.write_bytes("a/b/x.txt", b"keep")
        folder = fs.folder("a/b")
        assert folder.move("a", CollisionOption.REPLACE_EXISTING) is False
        assert isinstance(folder.copy("a", CollisionOption.REPLACE_EXISTING), NullFolder)
        assert fs.backend.read_bytes("a/b/x.txt") == b"keep"

    def test_folder_cannot_move_into_itself(self, fs: EntryFileSystem) -> None:
        """Moving a folder below itself is refused without touching the tree."""
        fs.backend.mkdir("a")
        folder = fs.folder("a")
        assert folder.move("a/inner") is False
        assert fs.backend.stat("a/inner").exists is False

    def test_exists_below_file_is_false(self, fs: EntryFileSystem, text_file: File) -> None:
        """Paths that pass through a file simply do not exist."""
        assert fs.folder("a.txt/sub").exists is False
        assert fs.file("a.txt/sub/b.txt").exists is False
        assert fs.file_exists("a.txt/sub") is False

    def test_move_folder(self, fs: EntryFileSystem) -> None:
        """move() carries descendants and rebinds the handle."""
        fs.backend.mkdir("src/pkg")
        _ = fs.backend.write_bytes("src/pkg/mod.py", b"pass")
        folder = fs.folder("src")
        assert folder.move("lib")
        assert folder.full_path == "lib"
        assert folder.get_file_names() == ["pkg/mod.py"]
        assert fs.backend.stat("src").exists is False

    def test_rename_folder(self, fs: EntryFileSystem) -> None:
        """Folder renames keep the parent."""
        fs.backend.mkdir("a/b")
        folder = fs.folder("a/b")
        assert folder.rename("c")
        assert folder.full_path == "a/c"

    def test_delete_folder_recursively(self, fs: EntryFileSystem) -> None:
        """Deleting a folder removes its contents."""
        fs.backend.mkdir("docs/deep")
        _ = fs.backend.write_bytes("docs/deep/a.txt", b"")
        assert fs.folder("docs").delete()
        assert fs.backend.stat("docs/deep/a.txt").exists is False

    def test_root_cannot_be_removed(self, fs: EntryFileSystem) -> None:
        """The root folder refuses delete, move and rename."""
        root = fs.root_folder()
        assert root.is_root
        assert root.delete() is False
        assert root.move("elsewhere") is False
        assert root.rename("elsewhere") is False

    def test_delete_children_by_name(self, fs: EntryFileSystem) -> None:
        """delete_file() and delete_folder() act on direct children."""
        fs.backend.mkdir("docs")
        _ = fs.backend.write_bytes("a.txt", b"")
        root = fs.root_folder()
        assert root.delete_file("a.txt")
        assert root.delete_folder("docs")
        assert root.delete_file("a.txt") is False
        assert root.get_entries() == []

    # -------------------------------------------------------------------------
    # Folder lookups
    # -------------------------------------------------------------------------

    def test_lookups_are_top_level_by_default(self, fs: EntryFileSystem) -> None:
        """Name lookups only see direct children unless asked to recurse."""
        fs.backend.mkdir("sub")
        _ = fs.backend.write_bytes("sub/c.txt", b"c")
        root = fs.root_folder()
        assert root.file_exists("c.txt") is False
        assert root.file_exists("c.txt", SearchOption.ALL_DIRECTORIES)
        assert root.folder_exists("sub")
        found = root.get_file("sub/c.txt", SearchOption.ALL_DIRECTORIES)
        assert isinstance(found, File)
        assert found.full_path == "sub/c.txt"

    def test_get_file_missing_returns_null(self, fs: EntryFileSystem) -> None:
        """Missing lookups return falsy null entries."""
        root = fs.root_folder()
        assert isinstance(root.get_file("missing.txt"), NullFile)
        assert isinstance(root.get_folder("missing"), NullFolder)
        assert isinstance(root.get_entry("missing"), NullFile)
        missing = root.get_entry("missing", prefer_file_over_folder=False)
        assert isinstance(missing, NullFolder)
        assert not missing

    def test_item_exists(self, fs: EntryFileSystem) -> None:
        """item_exists() distinguishes files from folders."""
        fs.backend.mkdir("docs")
        _ = fs.backend.write_bytes("a.txt", b"")
        root = fs.root_folder()
        assert root.item_exists("docs") is ExistenceCheckResult.FOLDER_EXISTS
        assert root.item_exists("a.txt") is ExistenceCheckResult.FILE_EXISTS
        assert root.item_exists("none") is ExistenceCheckResult.NOT_FOUND

    def test_enumeration(self, fs: EntryFileSystem) -> None:
        """Enumeration recurses by default and reports relative names."""
        _ = fs.backend.write_bytes("a.txt", b"a")
        _ = fs.backend.write_bytes("b.log", b"b")
        fs.backend.mkdir("sub")
        _ = fs.backend.write_bytes("sub/c.txt", b"c")
        root = fs.root_folder()
        assert sorted(root.get_file_names()) == ["a.txt", "b.log", "sub/c.txt"]
        assert sorted(root.get_file_names("*.txt")) == ["a.txt", "sub/c.txt"]
        assert root.get_folder_names() == ["sub"]
        assert sorted(root.get_entry_names()) == ["a.txt", "b.log", "sub", "sub/c.txt"]
        assert all(isinstance(f, File) for f in root.get_files())
        assert all(isinstance(f, Folder) for f in root.get_folders())

    def test_folder_size_is_zero(self, fs: EntryFileSystem) -> None:
        """Folders report size 0 regardless of content."""
        fs.backend.mkdir("docs")
        _ = fs.backend.write_bytes("docs/a.txt", b"content")
        assert fs.folder("docs").size == 0

