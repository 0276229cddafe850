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

"""Identity and lifecycle shared by :class:`File` and :class:`Folder`."""

from __future__ import annotations

from datetime import datetime
from typing import ClassVar, Self

from ..backends import (
    MIN_DATETIME,
    Backend,
    EntryStat,
    combine_path,
    join_path,
    normalize_path,
    validate_name,
)
from ..collision import CollisionDecision, Fail, Proceed, resolve_collision
from ..config import DEFAULT_CONFIG, EntryFsConfig
from ..enums import CollisionOption, EntryKind
from ..logging import StructuredLogger, get_logger
from ..naming import unique_path

__all__ = ["Entry"]


class Entry:
    """A handle on a path in a backend.

    The handle stores only the path. It is not invalidated when the object
    behind it disappears: queries then report that nothing exists. Only
    ``move``, ``rename`` and ``change_extension`` change the path a handle
    points at.

    Two entries are equal when their identity keys are equal. The key is the
    full path, case-folded when the backend is case-insensitive.
    """

    __slots__ = ("_backend", "_config", "_logger", "_name", "_parent_path")

    kind: ClassVar[EntryKind]

    def __init__(
        self,
        backend: Backend,
        path: str = "",
        *,
        config: EntryFsConfig = DEFAULT_CONFIG,
    ) -> None:
        self._backend = backend
        self._config = config
        self._parent_path = ""
        self._name = ""
        self._rebind(normalize_path(path))
        self._logger: StructuredLogger = get_logger(
            __name__, context={"component": self.kind.value}
        )

    @classmethod
    def from_parts(
        cls,
        backend: Backend,
        parent: str,
        name: str,
        extension: str = "",
        *,
        config: EntryFsConfig = DEFAULT_CONFIG,
    ) -> Self:
        """Build a handle from an explicit parent path, name and extension."""
        return cls(backend, combine_path(parent, name, extension), config=config)

    # --- Identity ---

    @property
    def backend(self) -> Backend:
        return self._backend

    @property
    def config(self) -> EntryFsConfig:
        return self._config

    @property
    def name(self) -> str:
        """Entry name; for files this excludes the extension."""
        return self._name

    @property
    def parent_path(self) -> str:
        return self._parent_path

    @property
    def leaf_name(self) -> str:
        """Final path segment (for files, name plus extension)."""
        return self._name

    @property
    def full_path(self) -> str:
        return join_path(self._parent_path, self.leaf_name)

    @property
    def identity_key(self) -> str:
        path = self.full_path
        return path if self._backend.case_sensitive else path.casefold()

    def _rebind(self, path: str) -> None:
        parent, _, name = path.rpartition("/")
        self._parent_path = parent
        self._name = name

    @property
    def exists(self) -> bool:
        """True when an object of this entry's kind is at ``full_path``."""
        return self._existing_stat() is not None

    def _mutable(self) -> bool:
        """Whether mutating operations may touch the backend right now."""
        return True

    # --- Metadata ---

    def _stat(self) -> EntryStat:
        return self._backend.stat(self.full_path)

    def _existing_stat(self) -> EntryStat | None:
        stat = self._stat()
        if self.kind is EntryKind.FILE and stat.is_file:
            return stat
        if self.kind is EntryKind.FOLDER and stat.is_folder:
            return stat
        return None

    @property
    def size(self) -> int:
        stat = self._existing_stat()
        return stat.size if stat is not None else 0

    def created_time(self, *, use_utc: bool = True) -> datetime:
        stat = self._existing_stat()
        return _localize(stat.created if stat is not None else MIN_DATETIME, use_utc)

    def last_accessed_time(self, *, use_utc: bool = True) -> datetime:
        stat = self._existing_stat()
        return _localize(stat.last_accessed if stat is not None else MIN_DATETIME, use_utc)

    def last_modified_time(self, *, use_utc: bool = True) -> datetime:
        stat = self._existing_stat()
        return _localize(stat.last_modified if stat is not None else MIN_DATETIME, use_utc)

    # --- Collision handling ---

    def _path_taken(self, path: str) -> bool:
        return self._backend.stat(path).exists

    def _is_own_path(self, path: str) -> bool:
        if self._backend.case_sensitive:
            return path == self.full_path
        return path.casefold() == self.full_path.casefold()

    def _is_nested_with(self, path: str) -> bool:
        """True when ``path`` is an ancestor or a descendant of this entry."""
        own = self.full_path
        if not self._backend.case_sensitive:
            path, own = path.casefold(), own.casefold()
        if not path or not own:
            return True
        return own.startswith(f"{path}/") or path.startswith(f"{own}/")

    def _decide(
        self,
        candidate: str,
        collision: CollisionOption | None,
        *,
        kind: EntryKind | None = None,
    ) -> CollisionDecision:
        """Run ``candidate`` through the collision policy.

        ``kind`` is the kind of object about to be placed at ``candidate``;
        it defaults to this entry's own kind.
        """
        target_kind = kind or self.kind
        option = collision or self._config.default_collision_option
        decision = resolve_collision(
            option,
            already_exists=self._path_taken(candidate),
            candidate=candidate,
            unique_name=lambda path: unique_path(
                path,
                exists=self._path_taken,
                is_file=target_kind is EntryKind.FILE,
                max_iterations=self._config.max_unique_name_iterations,
            ),
        )
        if isinstance(decision, Fail):
            self._logger.debug(
                "Target already exists.",
                event="collision.fail",
                context={"path": candidate, "option": option.value},
            )
        return decision

    def _claim(self, decision: Proceed) -> str:
        """Clear the way for ``decision`` and return the path to use."""
        if decision.replace_existing:
            self._backend.delete(decision.path, recursive=True)
            self._logger.debug(
                "Replaced existing target.",
                event="collision.replace",
                context={"path": decision.path},
            )
        return decision.path

    def _relocate(
        self,
        target: str,
        collision: CollisionOption | None,
        *,
        event: str,
    ) -> bool:
        """Move this entry to ``target`` under the collision policy."""
        if not self._mutable() or not self.full_path or not self.exists:
            return False

        target = normalize_path(target)
        if not target or self._is_own_path(target):
            return False

        match self._decide(target, collision):
            case Proceed(path=path) if self._is_nested_with(path):
                return False
            case Proceed() as decision:
                source = self.full_path
                destination = self._claim(decision)
                self._backend.move(source, destination)
                self._rebind(destination)
                self._logger.debug(
                    "Entry relocated.",
                    event=event,
                    context={"source": source, "destination": destination},
                )
                return True
            case _:
                return False

    def move(self, destination: str, collision: CollisionOption | None = None) -> bool:
        """Move the entry to the full path ``destination``."""
        return self._relocate(destination, collision, event=f"{self.kind.value}.move")

    def rename(self, name: str, collision: CollisionOption | None = None) -> bool:
        """Rename the entry within its parent folder."""
        validate_name(name)
        return self._relocate(
            join_path(self._parent_path, name),
            collision,
            event=f"{self.kind.value}.rename",
        )

    def delete(self) -> bool:
        """Delete the object behind the handle; folders go recursively.

        Returns False when nothing of this kind exists or the entry is the
        backend root.
        """
        if not self._mutable() or not self.full_path or not self.exists:
            return False
        self._backend.delete(self.full_path, recursive=self.kind is EntryKind.FOLDER)
        self._logger.debug(
            "Entry deleted.",
            event=f"{self.kind.value}.delete",
            context={"path": self.full_path},
        )
        return True

    # --- Lifecycle ---

    def dispose(self) -> None:
        """Release resources held by the handle. Safe to call repeatedly."""

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        self.dispose()

    # --- Dunder ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entry):
            return NotImplemented
        return self.identity_key == other.identity_key

    def __hash__(self) -> int:
        return hash(self.identity_key)

    def __str__(self) -> str:
        return self.full_path

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.full_path!r})"


def _localize(value: datetime, use_utc: bool) -> datetime:
    if use_utc or value == MIN_DATETIME:
        return value
    return value.astimezone()
