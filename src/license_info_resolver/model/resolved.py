# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

"""Resolved license information, the canonical per license view of a component.

All classes are immutable. Path excludes only annotate resolved findings, it is
up to the consumer to decide whether excluded findings matter.
"""

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Iterator, Mapping

from license_info_resolver.model.findings import (
    CopyrightFinding,
    LicenseSource,
    TextLocation,
)
from license_info_resolver.model.identifier import Identifier
from license_info_resolver.model.license_info import LicenseInfo
from license_info_resolver.model.provenance import Provenance
from license_info_resolver.model.rules import LicenseFindingCuration, PathExclude


@dataclass(frozen=True)
class ResolvedCopyrightFinding:
    statement: str
    location: TextLocation
    matching_path_excludes: tuple[PathExclude, ...] = ()

    @property
    def is_excluded(self) -> bool:
        return len(self.matching_path_excludes) > 0


@dataclass(frozen=True)
class ResolvedLicenseLocation:
    """A place where a license was found, with the copyrights attributed to it."""

    provenance: Provenance
    location: TextLocation
    applied_curation: LicenseFindingCuration | None
    matching_path_excludes: tuple[PathExclude, ...]
    copyrights: frozenset[ResolvedCopyrightFinding]

    @property
    def is_excluded(self) -> bool:
        return len(self.matching_path_excludes) > 0


@dataclass(frozen=True)
class ResolvedOriginalExpression:
    expression: str  # as first encountered, may be compound
    source: LicenseSource
    # only meaningful for detected expressions: all their findings are excluded
    is_detected_excluded: bool = False


@dataclass(frozen=True)
class ResolvedLicense:
    license: str  # a single license, no operators
    original_declared_licenses: frozenset[str]
    original_expressions: frozenset[ResolvedOriginalExpression]
    locations: frozenset[ResolvedLicenseLocation]

    @property
    def sources(self) -> frozenset[LicenseSource]:
        return frozenset(expression.source for expression in self.original_expressions)

    @property
    def is_detected_excluded(self) -> bool:
        """True if the license was only detected, and only in excluded paths."""
        return self.sources == {LicenseSource.DETECTED} and all(
            expression.is_detected_excluded
            for expression in self.original_expressions
        )

    def filter(self, provenance: Provenance, path: str) -> "ResolvedLicense | None":
        locations = frozenset(
            location
            for location in self.locations
            if location.provenance == provenance and location.location.path == path
        )
        if not locations:
            return None
        return replace(self, locations=locations)

    def filter_excluded_copyrights(self) -> "ResolvedLicense":
        return replace(
            self,
            locations=frozenset(
                replace(
                    location,
                    copyrights=frozenset(
                        c for c in location.copyrights if not c.is_excluded
                    ),
                )
                for location in self.locations
            ),
        )

    def get_copyrights(self, omit_excluded: bool = True) -> set[str]:
        return {
            copyright_finding.statement
            for location in self.locations
            for copyright_finding in location.copyrights
            if not (omit_excluded and copyright_finding.is_excluded)
        }


@dataclass(frozen=True)
class ResolvedLicenseInfo:
    id: Identifier
    license_info: LicenseInfo
    licenses: tuple[ResolvedLicense, ...]
    copyright_garbage: Mapping[Provenance, frozenset[CopyrightFinding]]
    unmatched_copyrights: Mapping[Provenance, frozenset[ResolvedCopyrightFinding]]

    def __iter__(self) -> Iterator[ResolvedLicense]:
        return iter(self.licenses)

    def __len__(self) -> int:
        return len(self.licenses)

    def get(self, license: str) -> ResolvedLicense | None:
        return next(
            (
                resolved_license
                for resolved_license in self.licenses
                if resolved_license.license == license
            ),
            None,
        )

    def main_license(self) -> str | None:
        """The concluded license if there is one, otherwise the declared license."""
        concluded = self.license_info.concluded_license_info.concluded_license
        if concluded:
            return concluded
        return self.license_info.declared_license_info.processed.spdx_expression

    def filter(self, provenance: Provenance, path: str) -> "ResolvedLicenseInfo":
        """Keep only what was found in the file at `path` of `provenance`."""
        licenses = []
        for resolved_license in self.licenses:
            filtered = resolved_license.filter(provenance, path)
            if filtered is not None:
                licenses.append(filtered)

        return replace(
            self,
            licenses=tuple(licenses),
            copyright_garbage={
                provenance: frozenset(
                    f
                    for f in self.copyright_garbage.get(provenance, frozenset())
                    if f.location.path == path
                )
            },
            unmatched_copyrights={
                provenance: frozenset(
                    f
                    for f in self.unmatched_copyrights.get(provenance, frozenset())
                    if f.location.path == path
                )
            },
        )

    def filter_excluded(self) -> "ResolvedLicenseInfo":
        """Drop licenses only detected in excluded paths and all excluded copyrights."""
        return replace(
            self,
            licenses=tuple(
                resolved_license.filter_excluded_copyrights()
                for resolved_license in self.licenses
                if not resolved_license.is_detected_excluded
            ),
            unmatched_copyrights={
                provenance: frozenset(f for f in findings if not f.is_excluded)
                for provenance, findings in self.unmatched_copyrights.items()
            },
        )

    def get_copyrights(self, omit_excluded: bool = True) -> set[str]:
        statements: set[str] = set()
        for resolved_license in self.licenses:
            statements |= resolved_license.get_copyrights(omit_excluded)
        for findings in self.unmatched_copyrights.values():
            statements |= {
                f.statement for f in findings if not (omit_excluded and f.is_excluded)
            }
        return statements


@dataclass(frozen=True)
class ResolvedLicenseFile:
    provenance: Provenance
    license_info: ResolvedLicenseInfo  # restricted to this file
    relative_path: str
    file: Path  # the extracted file on disk, deleted when the process exits


@dataclass(frozen=True)
class ResolvedLicenseFileInfo:
    id: Identifier
    files: tuple[ResolvedLicenseFile, ...] = ()

    def __iter__(self) -> Iterator[ResolvedLicenseFile]:
        return iter(self.files)

    def __len__(self) -> int:
        return len(self.files)

    def filter_excluded(self) -> "ResolvedLicenseFileInfo":
        return replace(
            self,
            files=tuple(
                replace(f, license_info=f.license_info.filter_excluded())
                for f in self.files
            ),
        )
