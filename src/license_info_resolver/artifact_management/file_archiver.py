# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import hashlib
import logging
import zipfile
from abc import ABC, abstractmethod

from license_info_resolver.adaptors.os import create_dirs, path_exists, path_join
from license_info_resolver.model.provenance import KnownProvenance

logger = logging.getLogger(__name__)

ARCHIVE_FILE_NAME = "archive.zip"


class FileArchiver(ABC):
    """Gives access to the archived source files of provenances."""

    @abstractmethod
    def unarchive(self, directory: str, provenance: KnownProvenance) -> bool:
        """Extract the archive of `provenance` into `directory`.

        Returns:
            True on success, False if there is no usable archive.
        """
        pass


class LocalFileArchiver(FileArchiver):
    """
    Stores one zip archive per provenance in a local directory.

    Archives live in `<storage_dir>/<sha1 of the provenance storage key>/archive.zip`.
    """

    def __init__(self, storage_dir: str) -> None:
        self.storage_dir = storage_dir
        if not path_exists(storage_dir):
            raise ValueError(f"Archive storage directory {storage_dir} does not exist")

    def _archive_dir(self, provenance: KnownProvenance) -> str:
        key = hashlib.sha1(provenance.storage_key().encode("utf-8")).hexdigest()
        return path_join(self.storage_dir, key)

    def _archive_path(self, provenance: KnownProvenance) -> str:
        return path_join(self._archive_dir(provenance), ARCHIVE_FILE_NAME)

    def has_archive(self, provenance: KnownProvenance) -> bool:
        return path_exists(self._archive_path(provenance))

    def archive(
        self, source_dir: str, relative_paths: list[str], provenance: KnownProvenance
    ) -> None:
        """Store the given files of `source_dir` as the archive of `provenance`."""
        create_dirs(self._archive_dir(provenance))
        archive_path = self._archive_path(provenance)
        with zipfile.ZipFile(archive_path, "w", zipfile.ZIP_DEFLATED) as zip_file:
            for relative_path in relative_paths:
                zip_file.write(path_join(source_dir, relative_path), relative_path)
        logger.debug(
            f"Archived {len(relative_paths)} file(s) of {provenance} to {archive_path}."
        )

    def unarchive(self, directory: str, provenance: KnownProvenance) -> bool:
        if not self.has_archive(provenance):
            logger.info(f"No archive found for {provenance}.")
            return False

        archive_path = self._archive_path(provenance)
        try:
            with zipfile.ZipFile(archive_path) as zip_file:
                zip_file.extractall(directory)
        except (zipfile.BadZipFile, OSError) as e:
            logger.error(
                f"Failed to extract archive {archive_path} for {provenance}: {e}"
            )
            return False

        logger.debug(f"Extracted archive of {provenance} to {directory}.")
        return True
