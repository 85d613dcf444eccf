# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

"""Merges the concluded, declared and detected license evidence of a component
into one resolved entry per single license."""

import logging
from dataclasses import replace
from typing import Iterable

from license_info_resolver.matching.curation_matcher import FindingCurationMatcher
from license_info_resolver.matching.findings_matcher import FindingsMatcher
from license_info_resolver.model.findings import (
    UNDEFINED_TEXT_LOCATION,
    CopyrightFinding,
    LicenseSource,
)
from license_info_resolver.model.license_info import DetectedLicenseInfo, LicenseInfo
from license_info_resolver.model.provenance import Provenance, UnknownProvenance
from license_info_resolver.model.resolved import (
    ResolvedCopyrightFinding,
    ResolvedLicense,
    ResolvedLicenseInfo,
    ResolvedLicenseLocation,
    ResolvedOriginalExpression,
)
from license_info_resolver.model.rules import (
    CopyrightGarbage,
    PathExclude,
    matching_path_excludes,
)
from license_info_resolver.utils.license_utils import decompose

logger = logging.getLogger(__name__)


class _ResolvedLicenseBuilder:
    def __init__(self, license: str) -> None:
        self.license = license
        self.original_declared_licenses: set[str] = set()
        self.original_expressions: set[ResolvedOriginalExpression] = set()
        self.locations: set[ResolvedLicenseLocation] = set()

    def build(self) -> ResolvedLicense:
        return ResolvedLicense(
            license=self.license,
            original_declared_licenses=frozenset(self.original_declared_licenses),
            original_expressions=frozenset(self.original_expressions),
            locations=frozenset(self.locations),
        )


def resolve_copyrights(
    copyright_findings: Iterable[CopyrightFinding],
    path_excludes: Iterable[PathExclude],
    relative_findings_path: str,
) -> frozenset[ResolvedCopyrightFinding]:
    path_excludes = tuple(path_excludes)
    return frozenset(
        ResolvedCopyrightFinding(
            statement=finding.statement,
            location=finding.location,
            matching_path_excludes=matching_path_excludes(
                path_excludes, finding.location, relative_findings_path
            ),
        )
        for finding in copyright_findings
    )


def resolve_copyright_from_authors(authors: Iterable[str]) -> ResolvedLicenseLocation:
    """Create a location without provenance holding a copyright for each author."""
    copyrights = frozenset(
        ResolvedCopyrightFinding(
            statement=(
                author if "copyright" in author.lower() else f"Copyright (C) {author}"
            ),
            location=UNDEFINED_TEXT_LOCATION,
        )
        for author in authors
    )
    return ResolvedLicenseLocation(
        provenance=UnknownProvenance,
        location=UNDEFINED_TEXT_LOCATION,
        applied_curation=None,
        matching_path_excludes=(),
        copyrights=copyrights,
    )


class LicenseAggregator:
    def __init__(
        self,
        copyright_garbage: CopyrightGarbage,
        add_authors_to_copyrights: bool,
        findings_matcher: FindingsMatcher | None = None,
        curation_matcher: FindingCurationMatcher | None = None,
    ) -> None:
        self.copyright_garbage = copyright_garbage
        self.add_authors_to_copyrights = add_authors_to_copyrights
        self.findings_matcher = findings_matcher or FindingsMatcher()
        self.curation_matcher = curation_matcher or FindingCurationMatcher()

    def aggregate(self, license_info: LicenseInfo) -> ResolvedLicenseInfo:
        builders: dict[str, _ResolvedLicenseBuilder] = {}

        def builder(license: str) -> _ResolvedLicenseBuilder:
            if license not in builders:
                builders[license] = _ResolvedLicenseBuilder(license)
            return builders[license]

        concluded = license_info.concluded_license_info.concluded_license
        declared_info = license_info.declared_license_info
        declared = declared_info.processed.spdx_expression

        author_location = None
        if self.add_authors_to_copyrights and declared_info.authors:
            author_location = resolve_copyright_from_authors(declared_info.authors)

        for license in decompose(concluded):
            license_builder = builder(license)
            license_builder.original_expressions.add(
                ResolvedOriginalExpression(str(concluded), LicenseSource.CONCLUDED)
            )
            if author_location is not None:
                license_builder.locations.add(author_location)

        for license in decompose(declared):
            license_builder = builder(license)
            license_builder.original_expressions.add(
                ResolvedOriginalExpression(str(declared), LicenseSource.DECLARED)
            )
            license_builder.original_declared_licenses.update(
                original
                for original, mapped in declared_info.processed.mapped.items()
                if mapped == license
            )
            if author_location is not None:
                license_builder.locations.add(author_location)

        copyright_garbage_findings: dict[Provenance, frozenset[CopyrightFinding]] = {}
        filtered_detected_license_info = self._filter_copyright_garbage(
            license_info.detected_license_info, copyright_garbage_findings
        )

        unmatched_copyrights: dict[Provenance, set[ResolvedCopyrightFinding]] = {}
        resolved_locations = self._resolve_locations(
            filtered_detected_license_info, unmatched_copyrights
        )
        detected_expressions = self._detected_expressions(
            license_info.detected_license_info
        )

        for license, locations in resolved_locations.items():
            license_builder = builder(license)
            license_builder.locations.update(locations)
            license_builder.original_expressions.update(
                ResolvedOriginalExpression(
                    expression, LicenseSource.DETECTED, is_detected_excluded
                )
                for expression, is_detected_excluded in detected_expressions.items()
                if license in decompose(expression)
            )

        logger.debug(
            f"Resolved {len(builders)} license(s) for {license_info.id.to_coordinates()}."
        )
        return ResolvedLicenseInfo(
            id=license_info.id,
            license_info=license_info,
            licenses=tuple(b.build() for b in builders.values()),
            copyright_garbage=copyright_garbage_findings,
            unmatched_copyrights={
                provenance: frozenset(findings)
                for provenance, findings in unmatched_copyrights.items()
            },
        )

    def _filter_copyright_garbage(
        self,
        detected_license_info: DetectedLicenseInfo,
        copyright_garbage_findings: dict[Provenance, frozenset[CopyrightFinding]],
    ) -> DetectedLicenseInfo:
        filtered_findings = []
        for findings in detected_license_info.findings:
            garbage, kept = self.copyright_garbage.partition(findings.copyrights)
            previous = copyright_garbage_findings.get(findings.provenance, frozenset())
            copyright_garbage_findings[findings.provenance] = previous | garbage
            filtered_findings.append(replace(findings, copyrights=frozenset(kept)))
        return DetectedLicenseInfo(tuple(filtered_findings))

    def _detected_expressions(
        self, detected_license_info: DetectedLicenseInfo
    ) -> dict[str, bool]:
        """Map each curated detected expression to whether all its findings are excluded."""
        excluded_by_expression: dict[str, bool] = {}
        for findings in detected_license_info.findings:
            curation_results = self.curation_matcher.apply_all(
                findings.licenses,
                findings.license_finding_curations,
                findings.relative_findings_path,
            )
            for result in curation_results:
                finding = result.curated_finding
                if finding is None:
                    continue
                is_excluded = bool(
                    matching_path_excludes(
                        findings.path_excludes,
                        finding.location,
                        findings.relative_findings_path,
                    )
                )
                excluded_by_expression[finding.license] = (
                    excluded_by_expression.get(finding.license, True) and is_excluded
                )
        return excluded_by_expression

    def _resolve_locations(
        self,
        detected_license_info: DetectedLicenseInfo,
        unmatched_copyrights: dict[Provenance, set[ResolvedCopyrightFinding]],
    ) -> dict[str, set[ResolvedLicenseLocation]]:
        resolved_locations: dict[str, set[ResolvedLicenseLocation]] = {}

        for findings in detected_license_info.findings:
            curation_results = {
                result.curated_finding: result
                for result in self.curation_matcher.apply_all(
                    findings.licenses,
                    findings.license_finding_curations,
                    findings.relative_findings_path,
                )
            }

            # findings curated to NONE contribute no location
            curated_license_findings = {
                finding for finding in curation_results if finding is not None
            }
            match_result = self.findings_matcher.match(
                curated_license_findings, findings.copyrights
            )

            for license_finding, copyright_findings in match_result.matched_findings.items():
                resolved_copyrights = resolve_copyrights(
                    copyright_findings,
                    findings.path_excludes,
                    findings.relative_findings_path,
                )

                # only the first curation is recorded, the other originals are ignored
                original_findings = curation_results[license_finding].original_findings
                applied_curation = original_findings[0][1] if original_findings else None

                location = ResolvedLicenseLocation(
                    provenance=findings.provenance,
                    location=license_finding.location,
                    applied_curation=applied_curation,
                    matching_path_excludes=matching_path_excludes(
                        findings.path_excludes,
                        license_finding.location,
                        findings.relative_findings_path,
                    ),
                    copyrights=resolved_copyrights,
                )
                for license in decompose(license_finding.license):
                    resolved_locations.setdefault(license, set()).add(location)

            unmatched_copyrights.setdefault(findings.provenance, set()).update(
                resolve_copyrights(
                    match_result.unmatched_copyrights,
                    findings.path_excludes,
                    findings.relative_findings_path,
                )
            )

        return resolved_locations
