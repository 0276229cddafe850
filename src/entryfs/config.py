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

"""Library configuration.

Configuration is an explicit value handed to the facade and to entries; no
module reads it from global state. :meth:`EntryFsConfig.from_env` builds one
from ``ENTRYFS_*`` environment variables.

Example usage::

    from entryfs.config import EntryFsConfig

    config = EntryFsConfig.from_env()
    strict = config.update(prefer_file_over_folder=False)
"""

from __future__ import annotations

import codecs
import os
from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Final

from .enums import CollisionOption

DEFAULT_ENCODING_ENV: Final[str] = "ENTRYFS_DEFAULT_ENCODING"
MAX_UNIQUE_NAME_ITERATIONS_ENV: Final[str] = "ENTRYFS_MAX_UNIQUE_NAME_ITERATIONS"
IGNORE_CASE_ENV: Final[str] = "ENTRYFS_IGNORE_CASE"
PREFER_FILE_OVER_FOLDER_ENV: Final[str] = "ENTRYFS_PREFER_FILE_OVER_FOLDER"

DEFAULT_MAX_UNIQUE_NAME_ITERATIONS: Final[int] = 99

_TRUE_VALUES: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES: Final[frozenset[str]] = frozenset({"0", "false", "no", "off"})


@dataclass(slots=True, frozen=True)
class EntryFsConfig:
    """Settings shared by every entry created through one facade.

    Attributes:
        default_encoding: Text encoding used when a file is empty, missing or
            carries no byte-order mark.
        max_unique_name_iterations: Candidates tried by the unique-name
            generator before giving up.
        ignore_case: Default case handling for name lookups and patterns.
        prefer_file_over_folder: Which entry ``get_entry`` returns when a
            file and a folder share a name.
        default_collision_option: Policy used when a caller does not pass one.
    """

    default_encoding: str = "utf-8"
    max_unique_name_iterations: int = DEFAULT_MAX_UNIQUE_NAME_ITERATIONS
    ignore_case: bool = True
    prefer_file_over_folder: bool = True
    default_collision_option: CollisionOption = CollisionOption.FAIL_IF_EXISTS

    def __post_init__(self) -> None:
        try:
            _ = codecs.lookup(self.default_encoding)
        except LookupError as err:
            msg = f"Unknown encoding: {self.default_encoding!r}"
            raise ValueError(msg) from err
        if self.max_unique_name_iterations < 1:
            msg = "max_unique_name_iterations must be at least 1."
            raise ValueError(msg)

    def update(self, **changes: object) -> EntryFsConfig:
        """Return a copy with ``changes`` applied."""
        return replace(self, **changes)  # type: ignore[arg-type]

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> EntryFsConfig:
        """Build a configuration from ``ENTRYFS_*`` environment variables.

        Unset variables keep their defaults.

        Raises:
            ValueError: A variable holds a value that cannot be parsed.
        """
        env = os.environ if env is None else env
        values: dict[str, object] = {}

        if (encoding := env.get(DEFAULT_ENCODING_ENV)) is not None:
            values["default_encoding"] = encoding.strip()

        if (iterations := env.get(MAX_UNIQUE_NAME_ITERATIONS_ENV)) is not None:
            try:
                values["max_unique_name_iterations"] = int(iterations)
            except ValueError as err:
                msg = f"{MAX_UNIQUE_NAME_ITERATIONS_ENV} must be an integer, got {iterations!r}."
                raise ValueError(msg) from err

        if (ignore_case := env.get(IGNORE_CASE_ENV)) is not None:
            values["ignore_case"] = _parse_bool(IGNORE_CASE_ENV, ignore_case)

        if (prefer_file := env.get(PREFER_FILE_OVER_FOLDER_ENV)) is not None:
            values["prefer_file_over_folder"] = _parse_bool(
                PREFER_FILE_OVER_FOLDER_ENV, prefer_file
            )

        return cls(**values)  # type: ignore[arg-type]


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    msg = f"{name} must be a boolean flag, got {raw!r}."
    raise ValueError(msg)


DEFAULT_CONFIG: Final[EntryFsConfig] = EntryFsConfig()


__all__ = [
    "DEFAULT_CONFIG",
    "DEFAULT_ENCODING_ENV",
    "DEFAULT_MAX_UNIQUE_NAME_ITERATIONS",
    "IGNORE_CASE_ENV",
    "MAX_UNIQUE_NAME_ITERATIONS_ENV",
    "PREFER_FILE_OVER_FOLDER_ENV",
    "EntryFsConfig",
]
