# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import pytest

from license_info_resolver.utils.file_matcher import (
    get_file_name,
    get_parent_dir,
    matches_glob,
)


@pytest.mark.parametrize(
    "pattern, path, expected",
    [
        ("LICENSE", "LICENSE", True),
        ("LICENSE", "./LICENSE", True),
        ("LICENSE", "sub/LICENSE", False),
        ("*.md", "docs/readme.md", False),
        ("**/*.md", "docs/readme.md", True),
        ("src/*.c", "src/a/b.c", False),
        ("**/*.c", "src/a/b.c", True),
        ("**/*.c", "a.c", True),
        ("src/?.c", "src/a.c", True),
        ("src?a.c", "src/a.c", False),
        ("src/[ab].c", "src/b.c", True),
        ("src/[!ab].c", "src/b.c", False),
        ("src/**/*.c", "src/vendor/zlib/inflate.c", True),
        ("tests/**", "tests", True),
        ("a+b.c", "a+b.c", True),
        ("src/*.c", "src/main.c", True),
        ("tests/**", "tests/unit/test_a.py", True),
        ("tests/**", "src/tests.py", False),
        ("**/test/**", "test/a.c", True),
        ("**/test/**", "src/test/a.c", True),
        ("**/test/**", "src/testing/a.c", False),
        ("**/LICENSE", "LICENSE", True),
    ],
)
def test_matches_glob(pattern: str, path: str, expected: bool) -> None:
    assert matches_glob(pattern, path) is expected


def test_matches_glob_is_case_sensitive_by_default() -> None:
    assert not matches_glob("license*", "LICENSE.txt")
    assert matches_glob("license*", "LICENSE.txt", ignore_case=True)


def test_get_file_name() -> None:
    assert get_file_name("a/b/LICENSE") == "LICENSE"
    assert get_file_name("LICENSE") == "LICENSE"


def test_get_parent_dir() -> None:
    assert get_parent_dir("a/b/LICENSE") == "a/b"
    assert get_parent_dir("a/LICENSE") == "a"
    assert get_parent_dir("LICENSE") == ""
