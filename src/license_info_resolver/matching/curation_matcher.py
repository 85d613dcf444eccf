# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from dataclasses import dataclass, replace
from typing import Iterable

from license_info_resolver.model.findings import LicenseFinding
from license_info_resolver.model.rules import LicenseFindingCuration
from license_info_resolver.utils.file_matcher import matches_glob


@dataclass(frozen=True)
class LicenseFindingCurationResult:
    """
    A curated finding, None if it was suppressed, with the original findings
    and the curations that turned them into it. An uncurated finding has no
    original findings.
    """

    curated_finding: LicenseFinding | None
    original_findings: tuple[tuple[LicenseFinding, LicenseFindingCuration], ...]


class FindingCurationMatcher:
    """Applies license finding curations to license findings."""

    def _is_path_matching(
        self,
        finding: LicenseFinding,
        curation: LicenseFindingCuration,
        relative_findings_path: str,
    ) -> bool:
        return matches_glob(
            curation.path, finding.location.prepended_path(relative_findings_path)
        )

    def matches(
        self,
        finding: LicenseFinding,
        curation: LicenseFindingCuration,
        relative_findings_path: str = "",
    ) -> bool:
        if not self._is_path_matching(finding, curation, relative_findings_path):
            return False
        if curation.start_lines and finding.location.start_line not in curation.start_lines:
            return False
        if (
            curation.line_count is not None
            and curation.line_count != finding.location.line_count
        ):
            return False
        if (
            curation.detected_license is not None
            and curation.detected_license != finding.license
        ):
            return False
        return True

    def apply(
        self,
        finding: LicenseFinding,
        curation: LicenseFindingCuration,
        relative_findings_path: str = "",
    ) -> LicenseFinding | None:
        """Return the curated finding, the finding itself if the curation does not match."""
        if not self.matches(finding, curation, relative_findings_path):
            return finding
        if curation.is_suppression:
            return None
        return replace(finding, license=curation.concluded_license)

    def apply_all(
        self,
        findings: Iterable[LicenseFinding],
        curations: Iterable[LicenseFindingCuration],
        relative_findings_path: str = "",
    ) -> list[LicenseFindingCurationResult]:
        """
        Apply the first matching curation, in the given order, to each finding.

        Findings curated to the same result are merged into one result listing
        all their originals. All suppressed findings end up in the single result
        with a None curated finding.
        """
        curations = list(curations)
        results: dict[
            LicenseFinding | None, list[tuple[LicenseFinding, LicenseFindingCuration]]
        ] = {}

        for finding in findings:
            curation = next(
                (c for c in curations if self.matches(finding, c, relative_findings_path)),
                None,
            )
            if curation is None:
                results.setdefault(finding, [])
                continue

            curated_finding = self.apply(finding, curation, relative_findings_path)
            results.setdefault(curated_finding, []).append((finding, curation))

        return [
            LicenseFindingCurationResult(curated_finding, tuple(original_findings))
            for curated_finding, original_findings in results.items()
        ]
