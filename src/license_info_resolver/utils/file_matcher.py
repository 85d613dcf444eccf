# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

# Glob matching of relative, forward slash separated paths

import re
from functools import lru_cache


@lru_cache(maxsize=None)
def _compile_glob(pattern: str) -> re.Pattern[str]:
    parts = []
    i = 0
    while i < len(pattern):
        if pattern.startswith("**/", i):
            parts.append("(?:[^/]*/)*")
            i += 3
        elif pattern.startswith("/**", i) and i + 3 == len(pattern):
            parts.append("(?:/.*)?")
            i += 3
        elif pattern.startswith("**", i):
            parts.append(".*")
            i += 2
        elif pattern[i] == "*":
            parts.append("[^/]*")
            i += 1
        elif pattern[i] == "?":
            parts.append("[^/]")
            i += 1
        elif pattern[i] == "[" and "]" in pattern[i + 2 :]:
            end = pattern.index("]", i + 2)
            char_class = pattern[i + 1 : end].replace("\\", "\\\\")
            if char_class.startswith("!"):
                char_class = "^" + char_class[1:]
            elif char_class.startswith("^"):
                char_class = "\\" + char_class
            parts.append(f"[{char_class}]")
            i = end + 1
        else:
            parts.append(re.escape(pattern[i]))
            i += 1
    return re.compile("".join(parts))


def matches_glob(pattern: str, path: str, ignore_case: bool = False) -> bool:
    """
    Check if a relative path matches a glob pattern.

    "*" and "?" never match "/", "**/" matches zero or more directories and a
    trailing "/**" matches everything below a directory. So "src/*.c" matches
    "src/a.c" but not "src/a/b.c", while "**/*.c" matches both.
    """
    if ignore_case:
        pattern = pattern.lower()
        path = path.lower()

    path = path.removeprefix("./")
    return _compile_glob(pattern).fullmatch(path) is not None


def get_file_name(path: str) -> str:
    return path.rsplit("/", 1)[-1]


def get_parent_dir(path: str) -> str:
    """Return the parent directory of a relative path, "" for the root."""
    if "/" not in path:
        return ""
    return path.rsplit("/", 1)[0]
