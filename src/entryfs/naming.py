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

"""Unique-name generation.

Candidates follow the ``"name - (n)"`` convention: files keep their extension
after the counter (``"report - (2).pdf"``), folders append the counter to the
whole name (``"archive - (2)"``).
"""

from __future__ import annotations

import posixpath
from collections.abc import Callable

from .backends import join_path, split_path
from .config import DEFAULT_MAX_UNIQUE_NAME_ITERATIONS
from .errors import CannotGenerateUniqueNameError

__all__ = ["candidate_name", "generate_unique_name", "unique_path"]


def candidate_name(base_name: str, index: int, *, is_file: bool = True) -> str:
    """Return the ``index``-th candidate for ``base_name`` (0 is the name itself).

    Examples:
        >>> candidate_name("a.txt", 2)
        'a - (2).txt'
        >>> candidate_name("notes", 1)
        'notes - (1)'
        >>> candidate_name("v1.0", 1, is_file=False)
        'v1.0 - (1)'
    """
    if index == 0:
        return base_name
    if is_file:
        stem, extension = posixpath.splitext(base_name)
        return f"{stem} - ({index}){extension}"
    return f"{base_name} - ({index})"


def generate_unique_name(
    directory: str,
    base_name: str,
    *,
    exists: Callable[[str], bool],
    is_file: bool = True,
    max_iterations: int = DEFAULT_MAX_UNIQUE_NAME_ITERATIONS,
) -> str:
    """Return the first candidate name not taken in ``directory``.

    ``exists`` receives the full candidate path (``directory`` joined with the
    candidate name). Iteration 0 tries ``base_name`` unchanged, then the
    suffixes ``1 .. max_iterations - 1`` in order, so the lowest free suffix
    wins.

    Raises:
        CannotGenerateUniqueNameError: Every candidate is taken.
    """
    for index in range(max_iterations):
        name = candidate_name(base_name, index, is_file=is_file)
        if not exists(join_path(directory, name)):
            return name
    raise CannotGenerateUniqueNameError(directory, base_name, max_iterations)


def unique_path(
    path: str,
    *,
    exists: Callable[[str], bool],
    is_file: bool = True,
    max_iterations: int = DEFAULT_MAX_UNIQUE_NAME_ITERATIONS,
) -> str:
    """Full-path form of :func:`generate_unique_name`."""
    parent, name, extension = split_path(path)
    unique = generate_unique_name(
        parent,
        f"{name}{extension}",
        exists=exists,
        is_file=is_file,
        max_iterations=max_iterations,
    )
    return join_path(parent, unique)
