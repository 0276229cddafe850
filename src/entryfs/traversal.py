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

"""Depth-first traversal of folder trees.

Traversal is lazy and restartable: every iteration queries the backend
afresh and nothing is cached between calls. Entries are produced in backend
enumeration order, parents' direct children before any descendant.

Example usage::

    from entryfs.traversal import iter_entries

    for file in iter_entries(folder, "*.csv", want_folders=False):
        print(file.full_path)
"""

from __future__ import annotations

from collections.abc import Iterator
from fnmatch import fnmatchcase
from typing import TYPE_CHECKING

from .enums import ExistenceCheckResult, SearchOption

if TYPE_CHECKING:
    from .entries import File, Folder

__all__ = [
    "check_existence",
    "find_entry",
    "find_file",
    "find_folder",
    "iter_entries",
    "matches_pattern",
    "relative_path",
]


def matches_pattern(name: str, pattern: str, *, ignore_case: bool = True) -> bool:
    """Return True when ``name`` matches the glob ``pattern``.

    Supports ``*``, ``?`` and ``[...]`` on a single name, never on paths.

    Examples:
        >>> matches_pattern("Report.CSV", "*.csv")
        True
        >>> matches_pattern("Report.CSV", "*.csv", ignore_case=False)
        False
    """
    if ignore_case:
        return fnmatchcase(name.lower(), pattern.lower())
    return fnmatchcase(name, pattern)


def relative_path(base: str, path: str) -> str:
    """Return ``path`` relative to the folder path ``base``.

    Examples:
        >>> relative_path("root", "root/sub/c.txt")
        'sub/c.txt'
        >>> relative_path("", "a.txt")
        'a.txt'
    """
    if not base:
        return path
    prefix = f"{base}/"
    if path.startswith(prefix):
        return path[len(prefix) :]
    # Case-insensitive backends may report a differently cased prefix.
    if path.casefold().startswith(prefix.casefold()):
        return path[len(prefix) :]
    return path


def iter_entries(
    folder: Folder,
    pattern: str = "*",
    search_option: SearchOption = SearchOption.ALL_DIRECTORIES,
    *,
    want_files: bool = True,
    want_folders: bool = True,
    ignore_case: bool = True,
) -> Iterator[File | Folder]:
    """Yield the entries under ``folder`` matching ``pattern``.

    Args:
        folder: Folder to search. A missing folder yields nothing.
        pattern: Glob applied to each entry's name.
        search_option: ``TOP_DIRECTORY_ONLY`` looks at direct children only,
            ``SUB_DIRECTORIES_ONLY`` skips them and searches every child
            folder's whole tree, ``ALL_DIRECTORIES`` does both.
        want_files: Include files.
        want_folders: Include folders.
        ignore_case: Match ``pattern`` case-insensitively.
    """
    if not folder.exists:
        return

    children = folder.backend.list(folder.full_path)

    if search_option is not SearchOption.SUB_DIRECTORIES_ONLY:
        for child in children:
            wanted = (child.is_file and want_files) or (child.is_folder and want_folders)
            if wanted and matches_pattern(child.name, pattern, ignore_case=ignore_case):
                yield folder.child(child)

    if search_option is not SearchOption.TOP_DIRECTORY_ONLY:
        for child in children:
            if child.is_folder:
                yield from iter_entries(
                    folder.child(child),  # type: ignore[arg-type]
                    pattern,
                    SearchOption.ALL_DIRECTORIES,
                    want_files=want_files,
                    want_folders=want_folders,
                    ignore_case=ignore_case,
                )


def _find(
    folder: Folder,
    name: str,
    search_option: SearchOption,
    *,
    want_files: bool,
    want_folders: bool,
    ignore_case: bool,
) -> File | Folder | None:
    wanted = name.casefold() if ignore_case else name
    for entry in iter_entries(
        folder,
        "*",
        search_option,
        want_files=want_files,
        want_folders=want_folders,
        ignore_case=ignore_case,
    ):
        for label in (entry.leaf_name, relative_path(folder.full_path, entry.full_path)):
            if (label.casefold() if ignore_case else label) == wanted:
                return entry
    return None


def find_file(
    folder: Folder,
    name: str,
    search_option: SearchOption = SearchOption.TOP_DIRECTORY_ONLY,
    *,
    ignore_case: bool = True,
) -> File | None:
    """Return the first file named ``name`` within the search scope.

    ``name`` is either a bare file name or a path relative to ``folder``.
    """
    return _find(  # type: ignore[return-value]
        folder,
        name,
        search_option,
        want_files=True,
        want_folders=False,
        ignore_case=ignore_case,
    )


def find_folder(
    folder: Folder,
    name: str,
    search_option: SearchOption = SearchOption.TOP_DIRECTORY_ONLY,
    *,
    ignore_case: bool = True,
) -> Folder | None:
    """Return the first folder named ``name`` within the search scope."""
    return _find(  # type: ignore[return-value]
        folder,
        name,
        search_option,
        want_files=False,
        want_folders=True,
        ignore_case=ignore_case,
    )


def find_entry(
    folder: Folder,
    name: str,
    search_option: SearchOption = SearchOption.TOP_DIRECTORY_ONLY,
    *,
    prefer_file_over_folder: bool = True,
    ignore_case: bool = True,
) -> File | Folder | None:
    """Return the file or folder named ``name``.

    When both a file and a folder match, ``prefer_file_over_folder`` picks
    which one is returned.
    """
    file = find_file(folder, name, search_option, ignore_case=ignore_case)
    found_folder = find_folder(folder, name, search_option, ignore_case=ignore_case)
    if file is not None and found_folder is not None:
        return file if prefer_file_over_folder else found_folder
    return file if file is not None else found_folder


def check_existence(
    folder: Folder,
    name: str,
    *,
    file_search_option: SearchOption = SearchOption.TOP_DIRECTORY_ONLY,
    folder_search_option: SearchOption = SearchOption.TOP_DIRECTORY_ONLY,
    ignore_case: bool = True,
) -> ExistenceCheckResult:
    """Report whether a file, a folder, or both are named ``name``."""
    return ExistenceCheckResult.from_flags(
        file_exists=find_file(folder, name, file_search_option, ignore_case=ignore_case)
        is not None,
        folder_exists=find_folder(folder, name, folder_search_option, ignore_case=ignore_case)
        is not None,
    )
