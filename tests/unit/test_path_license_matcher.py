# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from license_info_resolver.config.cli_configs import (
    DEFAULT_LICENSE_FILE_PATTERNS,
    LicenseFilePatterns,
)
from license_info_resolver.matching.path_license_matcher import PathLicenseMatcher

FILES = [
    "LICENSE",
    "PATENTS",
    "README.md",
    "setup.py",
    "docs/readme.txt",
    "docs/index.md",
    "src/COPYING",
    "src/main.c",
    "src/lib/util.c",
]


def test_root_directory_gets_root_license_files() -> None:
    matcher = PathLicenseMatcher()

    assert matcher.get_applicable_license_files_for_directory(FILES, "") == {
        "LICENSE",
        "PATENTS",
        "README.md",
    }


def test_closest_license_file_wins_per_category() -> None:
    """The closest license file hides the root license, other categories still apply."""
    matcher = PathLicenseMatcher()

    assert matcher.get_applicable_license_files_for_directory(FILES, "src/lib") == {
        "src/COPYING",
        "PATENTS",
        "README.md",
    }
    assert matcher.get_applicable_license_files_for_directory(FILES, "docs") == {
        "LICENSE",
        "PATENTS",
        "docs/readme.txt",
    }


def test_without_other_license_filenames() -> None:
    matcher = PathLicenseMatcher(
        DEFAULT_LICENSE_FILE_PATTERNS.without_other_license_filenames()
    )

    assert matcher.get_applicable_license_files_for_directory(FILES, "") == {
        "LICENSE",
        "PATENTS",
    }


def test_license_file_names_are_case_insensitive() -> None:
    matcher = PathLicenseMatcher()
    files = ["license.TXT", "third_party/Foo.LICENSE", "third_party/foo.c"]

    assert matcher.get_applicable_license_files_for_directory(files, "third_party") == {
        "third_party/Foo.LICENSE"
    }
    assert matcher.get_applicable_license_files_for_directory(files, "") == {
        "license.TXT"
    }


def test_no_license_files() -> None:
    matcher = PathLicenseMatcher()

    assert matcher.get_applicable_license_files_for_directory(["src/a.c"], "src") == set()


def test_multiple_directories() -> None:
    matcher = PathLicenseMatcher(
        LicenseFilePatterns(
            license_filenames=("license*",),
            patent_filenames=(),
            other_license_filenames=(),
        )
    )
    files = ["LICENSE", "vendor/foo/LICENSE.md", "vendor/foo/a.go", "vendor/bar/b.go"]

    assert matcher.get_applicable_license_files_for_directories(
        files, ["vendor/foo", "vendor/bar"]
    ) == {"vendor/foo": {"vendor/foo/LICENSE.md"}, "vendor/bar": {"LICENSE"}}
