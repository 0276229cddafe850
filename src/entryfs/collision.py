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

"""Collision resolution for create, copy, move and rename operations.

:func:`resolve_collision` is a pure decision table. It never touches a
backend: callers report whether the target exists and supply the unique-name
callback, then act on the returned decision.

Example usage::

    decision = resolve_collision(
        CollisionOption.GENERATE_UNIQUE_NAME,
        already_exists=True,
        candidate="docs/a.txt",
        unique_name=lambda path: unique_path(path, exists=exists),
    )
    match decision:
        case Proceed(path=path, replace_existing=replace):
            ...
        case OpenExisting(path=path):
            ...
        case Fail():
            ...
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .enums import CollisionOption

__all__ = [
    "CollisionDecision",
    "Fail",
    "OpenExisting",
    "Proceed",
    "resolve_collision",
]


@dataclass(slots=True, frozen=True)
class Proceed:
    """Materialize the new object at ``path``.

    When ``replace_existing`` is True the caller deletes the object already at
    ``path`` first.
    """

    path: str
    replace_existing: bool = False


@dataclass(slots=True, frozen=True)
class Fail:
    """Leave the backend untouched and report failure."""


@dataclass(slots=True, frozen=True)
class OpenExisting:
    """Hand back the object already at ``path``."""

    path: str


type CollisionDecision = Proceed | Fail | OpenExisting


def resolve_collision(
    option: CollisionOption,
    *,
    already_exists: bool,
    candidate: str,
    unique_name: Callable[[str], str],
) -> CollisionDecision:
    """Decide what a mutating operation does with its target ``candidate``.

    Args:
        option: The caller's collision policy.
        already_exists: Whether something already exists at ``candidate``.
        candidate: Target path the operation wants to use.
        unique_name: Returns a free variant of a path; only consulted for
            ``GENERATE_UNIQUE_NAME`` when the target exists.

    Raises:
        CannotGenerateUniqueNameError: Propagated from ``unique_name``.
    """
    if not already_exists:
        return Proceed(candidate)

    match option:
        case CollisionOption.FAIL_IF_EXISTS:
            return Fail()
        case CollisionOption.REPLACE_EXISTING:
            return Proceed(candidate, replace_existing=True)
        case CollisionOption.GENERATE_UNIQUE_NAME:
            return Proceed(unique_name(candidate))
        case CollisionOption.OPEN_IF_EXISTS:
            return OpenExisting(candidate)
