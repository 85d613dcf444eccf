# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

"""Associates copyright findings with the license findings they belong to.

Copyrights are matched to license findings of the same file first, using the
distance in lines when a file has several license findings. Copyrights without
any license finding in their file are matched to the root license files that
apply to their directory.
"""

import logging
from dataclasses import dataclass
from typing import Iterable

from license_info_resolver.matching.path_license_matcher import PathLicenseMatcher
from license_info_resolver.model.findings import CopyrightFinding, LicenseFinding
from license_info_resolver.utils.file_matcher import get_parent_dir

logger = logging.getLogger(__name__)

DEFAULT_TOLERANCE_LINES = 5
DEFAULT_EXPAND_TOLERANCE_LINES = 2


@dataclass(frozen=True)
class FindingsMatcherResult:
    # every license finding passed in is a key, possibly without copyrights
    matched_findings: dict[LicenseFinding, set[CopyrightFinding]]
    unmatched_copyrights: set[CopyrightFinding]


def _group_by_path(findings: Iterable) -> dict:
    grouped: dict = {}
    for finding in findings:
        grouped.setdefault(finding.location.path, set()).add(finding)
    return grouped


class FindingsMatcher:
    def __init__(
        self,
        path_license_matcher: PathLicenseMatcher | None = None,
        tolerance_lines: int = DEFAULT_TOLERANCE_LINES,
        expand_tolerance_lines: int = DEFAULT_EXPAND_TOLERANCE_LINES,
    ) -> None:
        self.path_license_matcher = path_license_matcher or PathLicenseMatcher()
        self.tolerance_lines = tolerance_lines
        self.expand_tolerance_lines = expand_tolerance_lines

    def _closest_copyrights(
        self, license_finding: LicenseFinding, copyrights: set[CopyrightFinding]
    ) -> set[CopyrightFinding]:
        start_line = license_finding.location.start_line
        matched = {
            c
            for c in copyrights
            if abs(c.location.start_line - start_line) <= self.tolerance_lines
        }

        # copyright statements often come in blocks, grow the match along the block
        while True:
            matched_lines = {c.location.start_line for c in matched}
            expanded = {
                c
                for c in copyrights - matched
                if any(
                    abs(c.location.start_line - line) <= self.expand_tolerance_lines
                    for line in matched_lines
                )
            }
            if not expanded:
                return matched
            matched |= expanded

    def _match_file_findings(
        self, licenses: set[LicenseFinding], copyrights: set[CopyrightFinding]
    ) -> dict[LicenseFinding, set[CopyrightFinding]]:
        # a single license gets all copyrights of the file, no license gets none
        if len(licenses) <= 1:
            return {license_finding: set(copyrights) for license_finding in licenses}

        return {
            license_finding: self._closest_copyrights(license_finding, copyrights)
            for license_finding in licenses
        }

    def _match_with_root_licenses(
        self,
        license_findings: set[LicenseFinding],
        copyrights: set[CopyrightFinding],
    ) -> dict[LicenseFinding, set[CopyrightFinding]]:
        license_findings_by_path = _group_by_path(license_findings)
        directories = {get_parent_dir(c.location.path) for c in copyrights}
        license_files_by_dir = (
            self.path_license_matcher.get_applicable_license_files_for_directories(
                license_findings_by_path.keys(), directories
            )
        )

        result: dict[LicenseFinding, set[CopyrightFinding]] = {}
        for copyright_finding in copyrights:
            directory = get_parent_dir(copyright_finding.location.path)
            for license_file in license_files_by_dir[directory]:
                for license_finding in license_findings_by_path[license_file]:
                    result.setdefault(license_finding, set()).add(copyright_finding)
        return result

    def match(
        self,
        license_findings: Iterable[LicenseFinding],
        copyright_findings: Iterable[CopyrightFinding],
    ) -> FindingsMatcherResult:
        license_findings = set(license_findings)
        license_findings_by_path = _group_by_path(license_findings)
        copyright_findings_by_path = _group_by_path(copyright_findings)

        matched_findings: dict[LicenseFinding, set[CopyrightFinding]] = {}
        unmatched_copyrights: set[CopyrightFinding] = set()

        for path in license_findings_by_path.keys() | copyright_findings_by_path.keys():
            copyrights = copyright_findings_by_path.get(path, set())
            file_matches = self._match_file_findings(
                license_findings_by_path.get(path, set()), copyrights
            )
            for license_finding, matched in file_matches.items():
                matched_findings.setdefault(license_finding, set()).update(matched)
                copyrights = copyrights - matched
            unmatched_copyrights |= copyrights

        root_matches = self._match_with_root_licenses(
            license_findings, unmatched_copyrights
        )
        for license_finding, matched in root_matches.items():
            matched_findings.setdefault(license_finding, set()).update(matched)
            unmatched_copyrights -= matched

        logger.debug(
            f"Matched copyrights to {len(matched_findings)} license finding(s), {len(unmatched_copyrights)} copyright(s) left unmatched."
        )
        return FindingsMatcherResult(matched_findings, unmatched_copyrights)
