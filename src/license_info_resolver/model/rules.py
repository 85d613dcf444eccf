# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

"""Rules configured per repository or package to correct raw findings."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from license_info_resolver.model.findings import CopyrightFinding, TextLocation
from license_info_resolver.utils.file_matcher import matches_glob

# concluded license of a curation that marks a finding as false positive
NONE_LICENSE = "NONE"


class LicenseFindingCurationReason(Enum):
    CODE = "CODE"
    DATA_OF = "DATA_OF"
    DOCUMENTATION_OF = "DOCUMENTATION_OF"
    INCORRECT = "INCORRECT"
    NOT_DETECTED = "NOT_DETECTED"
    REFERENCE = "REFERENCE"


@dataclass(frozen=True)
class LicenseFindingCuration:
    """
    A curation replacing the license of the findings it matches.

    A finding matches if its path matches the `path` glob and, when given, its
    start line is one of `start_lines`, it spans `line_count` lines, and its
    license equals `detected_license`.
    """

    path: str
    concluded_license: str
    reason: LicenseFindingCurationReason
    start_lines: tuple[int, ...] = ()
    line_count: int | None = None
    detected_license: str | None = None
    comment: str = ""

    @property
    def is_suppression(self) -> bool:
        return self.concluded_license == NONE_LICENSE


class PathExcludeReason(Enum):
    BUILD_TOOL_OF = "BUILD_TOOL_OF"
    DATA_FILE_OF = "DATA_FILE_OF"
    DOCUMENTATION_OF = "DOCUMENTATION_OF"
    EXAMPLE_OF = "EXAMPLE_OF"
    OPTIONAL_COMPONENT_OF = "OPTIONAL_COMPONENT_OF"
    OTHER = "OTHER"
    PROVIDED_BY = "PROVIDED_BY"
    TEST_OF = "TEST_OF"
    TEST_TOOL_OF = "TEST_TOOL_OF"


@dataclass(frozen=True)
class PathExclude:
    """Marks all findings below paths matching `pattern` as not relevant for compliance."""

    pattern: str
    reason: PathExcludeReason
    comment: str = ""

    def matches(self, path: str) -> bool:
        return matches_glob(self.pattern, path)


def matching_path_excludes(
    path_excludes: Iterable[PathExclude],
    location: TextLocation,
    relative_findings_path: str = "",
) -> tuple[PathExclude, ...]:
    """Return the excludes matching a location, in configured order.

    Excludes are configured relative to the root of the scanned tree, so the
    location is prefixed with the path the findings are relative to.
    """
    path = location.prepended_path(relative_findings_path)
    return tuple(
        path_exclude for path_exclude in path_excludes if path_exclude.matches(path)
    )


@dataclass(frozen=True)
class CopyrightGarbage:
    """Copyright statements known to be noise."""

    items: frozenset[str] = frozenset()

    def __contains__(self, statement: object) -> bool:
        return statement in self.items

    def partition(
        self, copyrights: Iterable[CopyrightFinding]
    ) -> tuple[set[CopyrightFinding], set[CopyrightFinding]]:
        """Split findings into (garbage, kept) by exact statement membership."""
        garbage: set[CopyrightFinding] = set()
        kept: set[CopyrightFinding] = set()
        for finding in copyrights:
            if finding.statement in self.items:
                garbage.add(finding)
            else:
                kept.add(finding)
        return garbage, kept
