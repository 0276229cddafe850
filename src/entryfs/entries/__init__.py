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

"""Entry model: file and folder handles over a backend.

- ``File`` / ``Folder``: handles on a backend path
- ``NullFile`` / ``NullFolder``: falsy stand-ins returned for absent entries
- ``EntryOps`` / ``FileOps`` / ``FolderOps``: capability protocols that both
  the real and the null variants satisfy
"""

from __future__ import annotations

from ._entry import Entry
from ._file import File, detect_encoding
from ._folder import Folder
from ._null import NullFile, NullFolder
from ._protocols import EntryOps, FileOps, FolderOps

__all__ = [
    "Entry",
    "EntryOps",
    "File",
    "FileOps",
    "Folder",
    "FolderOps",
    "NullFile",
    "NullFolder",
    "detect_encoding",
]
