# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2024-present Datadog, Inc.

"""Here we collect a set of OS wrappers and adaptors to be easily replaced during testing and debugging."""

import os
import shutil
import tempfile
from typing import Iterator


def path_exists(file_path: str) -> bool:
    return os.path.exists(file_path)


def is_file(file_path: str) -> bool:
    return os.path.isfile(file_path)


def is_link(file_path: str) -> bool:
    return os.path.islink(file_path)


def create_dirs(path: str) -> None:
    os.makedirs(path, exist_ok=True)


def create_temp_dir(prefix: str) -> str:
    return tempfile.mkdtemp(prefix=prefix)


def remove_tree(path: str) -> None:
    shutil.rmtree(path, ignore_errors=True)


def remove_file(path: str) -> None:
    os.remove(path)


def remove_dir(path: str) -> None:
    os.rmdir(path)


def walk_directory(path: str) -> Iterator[tuple[str, list[str], list[str]]]:
    return os.walk(path)


def list_files_recursively(path: str) -> list[str]:
    """Return all regular files below path, relative to it with forward slashes."""
    files = []
    for root, _, file_names in walk_directory(path):
        for file_name in file_names:
            absolute_path = os.path.join(root, file_name)
            if not os.path.isfile(absolute_path) or os.path.islink(absolute_path):
                continue
            files.append(os.path.relpath(absolute_path, path).replace(os.sep, "/"))
    return files


def list_entries_recursively(path: str) -> list[str]:
    """Return every file, directory and symlink below path, each directory before its contents."""
    entries = []
    for root, dir_names, file_names in walk_directory(path):
        for name in dir_names + file_names:
            entries.append(os.path.relpath(os.path.join(root, name), path))
    return entries


def open_file(file_path: str) -> str:
    try:
        with open(file_path, "r", encoding="utf-8") as file:
            return file.read()
    except UnicodeDecodeError:
        try:
            with open(file_path, "r", encoding="utf-16") as file:
                return file.read()
        except UnicodeDecodeError:
            with open(file_path, "r", encoding=None) as file:
                return file.read()


def path_join(path: str, *paths: str) -> str:
    return os.path.join(path, *paths)
