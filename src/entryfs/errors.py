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

"""Base exception hierarchy for :mod:`entryfs`.

Only conditions that indicate a systemic problem are raised as exceptions.
Expected outcomes (a missing entry, a collision under ``FAIL_IF_EXISTS``)
are reported through return values instead. Errors raised by a backend
(``PermissionError``, ``FileNotFoundError`` and the other ``OSError``
subclasses) propagate unchanged and are not wrapped here.
"""

from __future__ import annotations


class EntryFsError(Exception):
    """Base class for all entryfs exceptions.

    Lets callers catch every library-specific exception with a single
    handler while standard Python exceptions propagate normally.

    Example:
        Catch any entryfs-specific error::

            try:
                folder.create_file("report.txt", CollisionOption.GENERATE_UNIQUE_NAME)
            except EntryFsError as e:
                logger.error("entryfs error: %s", e)

    Note:
        Subclasses also inherit from a matching builtin exception type
        (``FileNotFoundError``, ``ValueError``, ``RuntimeError``) so generic
        handlers keep working.
    """


class EntryNotFoundError(EntryFsError, FileNotFoundError):
    """Raised when an operation requires an entry that does not exist.

    Query-style operations never raise this; they return ``False``, ``None``
    or a null entry. It is reserved for contracts that explicitly demand the
    target exist, such as ``OpenMode.THROW_IF_DOES_NOT_EXIST``.
    """

    def __init__(self, path: str, *, kind: str = "entry") -> None:
        self.path = path
        self.kind = kind
        super().__init__(f"{kind.capitalize()} does not exist: {path or '/'}")


class CannotGenerateUniqueNameError(EntryFsError, RuntimeError):
    """Raised when no free name is found within the iteration budget.

    This is the one collision-related condition surfaced as an exception:
    running out of candidates usually means ``max_iterations`` is too small
    for the directory, not an expected business outcome.

    Example::

        try:
            name = generate_unique_name("reports", "q1.csv", exists=fs_exists)
        except CannotGenerateUniqueNameError as e:
            logger.error("Gave up after %d attempts", e.max_iterations)
    """

    def __init__(self, directory: str, base_name: str, max_iterations: int) -> None:
        self.directory = directory
        self.base_name = base_name
        self.max_iterations = max_iterations
        super().__init__(
            f"Cannot generate a unique name for '{base_name}' in "
            f"'{directory or '/'}' within {max_iterations} iterations."
        )


class InvalidOpenModeError(EntryFsError, ValueError):
    """Raised when a file access and file mode cannot be combined.

    Read-only access cannot truncate or append to a file.
    """


class OperationCancelledError(EntryFsError, RuntimeError):
    """Raised when an asynchronous operation is cancelled before dispatch.

    Cancellation is only honoured before the synchronous call is handed to a
    worker thread. A call that has started always runs to completion, so a
    mutation is never interrupted halfway.
    """


__all__ = [
    "CannotGenerateUniqueNameError",
    "EntryFsError",
    "EntryNotFoundError",
    "InvalidOpenModeError",
    "OperationCancelledError",
]
