# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import atexit
import logging
import threading

from license_info_resolver.adaptors.os import (
    is_file,
    is_link,
    path_exists,
    remove_dir,
    remove_file,
)

logger = logging.getLogger(__name__)


class DeferredDeletion:
    """
    Deletes registered files and directories, in reverse order of registration.

    Register a directory before the files in it, so that the files are deleted
    first and the then empty directory can be removed after them. Symlinks are
    unlinked, never followed. Directories that are not empty at deletion time
    are left in place.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._paths: list[str] = []

    def register(self, path: str) -> None:
        with self._lock:
            self._paths.append(path)

    def delete_all(self) -> None:
        with self._lock:
            paths = self._paths
            self._paths = []

        for path in reversed(paths):
            if not path_exists(path) and not is_link(path):
                continue
            try:
                if is_link(path) or is_file(path):
                    remove_file(path)
                else:
                    remove_dir(path)
            except OSError as e:
                logger.warning(f"Could not delete temporary path {path}: {e}")

    def __len__(self) -> int:
        with self._lock:
            return len(self._paths)


# deletes everything registered when the interpreter exits
on_exit = DeferredDeletion()
atexit.register(on_exit.delete_all)
