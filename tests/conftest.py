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

from __future__ import annotations

from pathlib import Path

import pytest

from entryfs import EntryFileSystem, Folder, HostBackend, InMemoryBackend


@pytest.fixture
def memory_backend() -> InMemoryBackend:
    """Return an empty case-sensitive in-memory backend."""
    return InMemoryBackend()


@pytest.fixture
def host_backend(tmp_path: Path) -> HostBackend:
    """Return a host backend rooted at a fresh temporary directory."""
    return HostBackend(_root=str(tmp_path))


@pytest.fixture
def fs(memory_backend: InMemoryBackend) -> EntryFileSystem:
    """Return a facade over the in-memory backend."""
    return EntryFileSystem(memory_backend)


@pytest.fixture
def root(fs: EntryFileSystem) -> Folder:
    """Return the root folder of ``fs``."""
    return fs.root_folder()


@pytest.fixture
def populated_root(memory_backend: InMemoryBackend, root: Folder) -> Folder:
    """Root folder holding ``a.txt``, ``b.txt`` and ``sub/c.txt``."""
    memory_backend.write_bytes("a.txt", b"a")
    memory_backend.write_bytes("b.txt", b"b")
    memory_backend.mkdir("sub")
    memory_backend.write_bytes("sub/c.txt", b"c")
    return root
