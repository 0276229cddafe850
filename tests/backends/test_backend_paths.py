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

"""Tests for path normalization helpers."""

from __future__ import annotations

import pytest
from hypothesis import given, strategies as st

from entryfs.backends import (
    combine_path,
    join_path,
    normalize_path,
    split_path,
    validate_name,
)

_segment = st.text(
    alphabet="abcxyzABCXYZ0189-_. ",
    min_size=1,
    max_size=12,
).filter(lambda s: s.strip() == s and s not in {".", ".."} and not s.endswith("."))


class TestNormalizePath:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("", ""),
            ("/", ""),
            (".", ""),
            ("a", "a"),
            ("/a/b/", "a/b"),
            ("a//b", "a/b"),
            ("a/./b", "a/b"),
            ("a/../b", "b"),
            ("../a", "a"),
            ("a\\b\\c.txt", "a/b/c.txt"),
            ("  a/b  ", "a/b"),
        ],
    )
    def test_normalize(self, raw: str, expected: str) -> None:
        assert normalize_path(raw) == expected

    @given(st.lists(_segment, max_size=5))
    def test_idempotent(self, segments: list[str]) -> None:
        """Normalizing twice changes nothing."""
        once = normalize_path("/".join(segments))
        assert normalize_path(once) == once


class TestJoinPath:
    def test_join_skips_empty_parts(self) -> None:
        assert join_path("", "a.txt") == "a.txt"
        assert join_path("docs", "", "a.txt") == "docs/a.txt"

    def test_join_normalizes(self) -> None:
        assert join_path("docs/", "/sub", "a.txt") == "docs/sub/a.txt"
        assert join_path("docs", "../a.txt") == "a.txt"


class TestSplitPath:
    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("docs/report.final.pdf", ("docs", "report.final", ".pdf")),
            ("docs/README", ("docs", "README", "")),
            ("a.txt", ("", "a", ".txt")),
            (".bashrc", ("", ".bashrc", "")),
            ("", ("", "", "")),
        ],
    )
    def test_split(self, path: str, expected: tuple[str, str, str]) -> None:
        assert split_path(path) == expected

    @given(st.lists(_segment, min_size=1, max_size=5))
    def test_combine_inverts_split(self, segments: list[str]) -> None:
        """combine_path(*split_path(p)) returns the normalized path."""
        path = "/".join(segments)
        assert combine_path(*split_path(path)) == normalize_path(path)


class TestValidateName:
    @pytest.mark.parametrize("name", ["a.txt", "archive", ".hidden", "v1.0 - (2)"])
    def test_valid_names(self, name: str) -> None:
        validate_name(name)

    @pytest.mark.parametrize("name", ["", "   ", ".", "..", "a/b", "a\\b"])
    def test_invalid_names(self, name: str) -> None:
        with pytest.raises(ValueError):
            validate_name(name)
