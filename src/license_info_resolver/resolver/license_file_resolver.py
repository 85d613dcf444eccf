# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import logging
from pathlib import Path

from license_info_resolver.adaptors.os import (
    create_temp_dir,
    list_entries_recursively,
    list_files_recursively,
    path_join,
    remove_tree,
)
from license_info_resolver.artifact_management.deferred_deletion import (
    DeferredDeletion,
    on_exit,
)
from license_info_resolver.artifact_management.file_archiver import FileArchiver
from license_info_resolver.matching.path_license_matcher import PathLicenseMatcher
from license_info_resolver.model.provenance import (
    KnownProvenance,
    RepositoryProvenance,
)
from license_info_resolver.model.resolved import (
    ResolvedLicenseFile,
    ResolvedLicenseFileInfo,
    ResolvedLicenseInfo,
)

logger = logging.getLogger(__name__)


class LicenseFileResolver:
    """Extracts the root license files of resolved packages from their archived sources."""

    def __init__(
        self,
        archiver: FileArchiver,
        path_license_matcher: PathLicenseMatcher,
        archive_dir_prefix: str,
        deferred_deletion: DeferredDeletion = on_exit,
    ) -> None:
        self.archiver = archiver
        self.path_license_matcher = path_license_matcher
        self.archive_dir_prefix = archive_dir_prefix
        self.deferred_deletion = deferred_deletion

    def _register_for_deletion(self, archive_dir: str) -> None:
        # directories come before their contents, so they are deleted after them
        self.deferred_deletion.register(archive_dir)
        for relative_path in list_entries_recursively(archive_dir):
            self.deferred_deletion.register(path_join(archive_dir, relative_path))

    def resolve(self, license_info: ResolvedLicenseInfo) -> ResolvedLicenseFileInfo:
        provenances = {
            location.provenance
            for resolved_license in license_info
            for location in resolved_license.locations
            if isinstance(location.provenance, KnownProvenance)
        }

        license_files: list[ResolvedLicenseFile] = []
        for provenance in provenances:
            archive_dir = create_temp_dir(self.archive_dir_prefix)

            if not self.archiver.unarchive(archive_dir, provenance):
                logger.warning(
                    f"Could not unarchive {provenance} for {license_info.id}, skipping its license files."
                )
                remove_tree(archive_dir)
                continue

            self._register_for_deletion(archive_dir)
            relative_paths = list_files_recursively(archive_dir)

            directory = ""
            if isinstance(provenance, RepositoryProvenance):
                directory = provenance.vcs_info.path.strip("/")

            root_license_files = (
                self.path_license_matcher.get_applicable_license_files_for_directory(
                    relative_paths, directory
                )
            )
            logger.debug(
                f"Found {len(root_license_files)} root license file(s) for {provenance} in '{directory}'."
            )

            for relative_path in sorted(root_license_files):
                license_files.append(
                    ResolvedLicenseFile(
                        provenance=provenance,
                        license_info=license_info.filter(provenance, relative_path),
                        relative_path=relative_path,
                        file=Path(archive_dir) / relative_path,
                    )
                )

        return ResolvedLicenseFileInfo(license_info.id, tuple(license_files))
