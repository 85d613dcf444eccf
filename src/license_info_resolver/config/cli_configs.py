# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2024-present Datadog, Inc.

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class LicenseFilePatterns:
    """Case insensitive glob patterns for file names of license related files."""

    license_filenames: tuple[str, ...]
    patent_filenames: tuple[str, ...]
    # files that may contain license information, but are not license files
    other_license_filenames: tuple[str, ...]

    def without_other_license_filenames(self) -> "LicenseFilePatterns":
        return replace(self, other_license_filenames=())


DEFAULT_LICENSE_FILE_PATTERNS = LicenseFilePatterns(
    license_filenames=(
        "copying*",
        "copyright",
        "licence*",  # I know it is misspelled, but it is common in the wild
        "license*",
        "*.licence",
        "*.license",
        "unlicence",
        "unlicense",
    ),
    patent_filenames=("patents",),
    other_license_filenames=("readme*",),
)

DEFAULT_ARCHIVE_DIR_PREFIX = "license-info-resolver-archive-"


@dataclass
class Config:
    preset_copyright_garbage: list[str]
    add_authors_to_copyrights: bool
    license_file_patterns: LicenseFilePatterns = DEFAULT_LICENSE_FILE_PATTERNS
    # lines between a license and a copyright finding to still consider them related
    tolerance_lines: int = 5
    expand_tolerance_lines: int = 2
    archive_dir_prefix: str = DEFAULT_ARCHIVE_DIR_PREFIX


default_config = Config(
    preset_copyright_garbage=[
        "Copyright (c) <year> <copyright holders>",
        "Copyright (c) [year] [fullname]",
        "Copyright [yyyy] [name of copyright owner]",
        "Copyright (C) <year> <name of author>",
        "copyright notice",
        "Copyright notice and this permission notice",
    ],
    add_authors_to_copyrights=False,
)
