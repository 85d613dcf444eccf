# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from typing import Iterable

from license_info_resolver.config.cli_configs import (
    DEFAULT_LICENSE_FILE_PATTERNS,
    LicenseFilePatterns,
)
from license_info_resolver.utils.file_matcher import (
    get_file_name,
    get_parent_dir,
    matches_glob,
)


def _ancestor_dirs(directory: str) -> list[str]:
    """Return the directory followed by all its parents, ending with the root ""."""
    directory = directory.strip("/")
    result = [directory]
    while directory:
        directory = get_parent_dir(directory)
        result.append(directory)
    return result


class PathLicenseMatcher:
    """Finds the license files that apply to directories of a source tree.

    A license file applies to the directory it is in and to all directories
    below, unless a directory closer to them has a license file of its own.
    """

    def __init__(
        self, license_file_patterns: LicenseFilePatterns = DEFAULT_LICENSE_FILE_PATTERNS
    ) -> None:
        self.categories = [
            patterns
            for patterns in (
                license_file_patterns.license_filenames,
                license_file_patterns.patent_filenames,
                license_file_patterns.other_license_filenames,
            )
            if patterns
        ]

    @staticmethod
    def _matches_any(patterns: tuple[str, ...], path: str) -> bool:
        file_name = get_file_name(path)
        return any(
            matches_glob(pattern, file_name, ignore_case=True) for pattern in patterns
        )

    def get_applicable_license_files_for_directories(
        self, relative_file_paths: Iterable[str], directories: Iterable[str]
    ) -> dict[str, set[str]]:
        """
        Args:
            relative_file_paths: All files of the source tree, relative to its root.
            directories: The directories to find the applicable license files for.

        Returns:
            Mapping of each requested directory to the paths of its license files.
        """
        file_paths_by_dir: dict[str, set[str]] = {}
        for path in relative_file_paths:
            file_paths_by_dir.setdefault(get_parent_dir(path), set()).add(path)

        result: dict[str, set[str]] = {}
        for directory in directories:
            license_file_paths: set[str] = set()
            for patterns in self.categories:
                # the closest directory with a match wins, per category
                for ancestor in _ancestor_dirs(directory):
                    matching = {
                        path
                        for path in file_paths_by_dir.get(ancestor, set())
                        if self._matches_any(patterns, path)
                    }
                    if matching:
                        license_file_paths |= matching
                        break
            result[directory] = license_file_paths
        return result

    def get_applicable_license_files_for_directory(
        self, relative_file_paths: Iterable[str], directory: str
    ) -> set[str]:
        return self.get_applicable_license_files_for_directories(
            relative_file_paths, [directory]
        )[directory]
