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

"""Path normalization and decomposition.

All entryfs paths are backend-relative strings using ``/`` as the separator.
The backend root is the empty string. These helpers are pure string
functions and never touch a backend.

Functions:
    normalize_path: Canonical form of a path string
    join_path: Join normalized segments
    split_path: Decompose a path into parent, name and extension
    combine_path: Inverse of ``split_path``
    validate_name: Reject names that cannot be a single path segment
"""

from __future__ import annotations

import posixpath

__all__ = [
    "combine_path",
    "join_path",
    "normalize_path",
    "split_path",
    "validate_name",
]


def normalize_path(path: str) -> str:
    """Normalize a path to its canonical backend-relative form.

    This function:
    - Converts backslashes to forward slashes
    - Strips surrounding whitespace and leading/trailing slashes
    - Removes empty segments and "." entries
    - Resolves ".." segments against the segments seen so far

    Args:
        path: The path string to normalize.

    Returns:
        Normalized path joined by "/", or the empty string for the root.

    Examples:
        >>> normalize_path("/foo//bar/")
        'foo/bar'
        >>> normalize_path("foo\\\\..\\\\bar")
        'bar'
        >>> normalize_path(".")
        ''
    """
    if not path:
        return ""
    stripped = path.strip().replace("\\", "/").strip("/")
    result: list[str] = []
    for segment in stripped.split("/"):
        if not segment or segment == ".":
            continue
        if segment == "..":
            if result:
                _ = result.pop()
            continue
        result.append(segment)
    return "/".join(result)


def join_path(*parts: str) -> str:
    """Join path fragments and normalize the result.

    Examples:
        >>> join_path("reports", "2024/q1.csv")
        'reports/2024/q1.csv'
        >>> join_path("", "a.txt")
        'a.txt'
    """
    return normalize_path("/".join(part for part in parts if part))


def split_path(path: str) -> tuple[str, str, str]:
    """Split a path into ``(parent, name, extension)``.

    The extension is the last dotted suffix of the final segment, including
    the dot. A segment that only starts with a dot (``.bashrc``) has no
    extension. The path is normalized first.

    Examples:
        >>> split_path("docs/report.final.pdf")
        ('docs', 'report.final', '.pdf')
        >>> split_path("docs/README")
        ('docs', 'README', '')
        >>> split_path("")
        ('', '', '')
    """
    normalized = normalize_path(path)
    parent, _, final = normalized.rpartition("/")
    name, extension = posixpath.splitext(final)
    return parent, name, extension


def combine_path(parent: str, name: str, extension: str = "") -> str:
    """Recombine the output of :func:`split_path` into a normalized path."""
    return join_path(parent, f"{name}{extension}")


def validate_name(name: str) -> None:
    """Validate that ``name`` is usable as a single path segment.

    Raises:
        ValueError: Name is empty, "." or "..", or contains a separator.
    """
    if not name or not name.strip():
        raise ValueError("Name must not be empty.")
    if name in {".", ".."}:
        raise ValueError(f"Name must not be a relative reference: {name!r}")
    if "/" in name or "\\" in name:
        raise ValueError(f"Name must not contain a path separator: {name!r}")
