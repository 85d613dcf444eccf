# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

"""Raw license evidence of one package or project, as handed to the resolver."""

from dataclasses import dataclass, field

from license_info_resolver.model.findings import CopyrightFinding, LicenseFinding
from license_info_resolver.model.identifier import Identifier
from license_info_resolver.model.provenance import Provenance
from license_info_resolver.model.rules import LicenseFindingCuration, PathExclude


@dataclass(frozen=True)
class ConcludedLicenseInfo:
    concluded_license: str | None = None  # set by a reviewer
    applied_curations: tuple[str, ...] = ()


@dataclass(frozen=True)
class ProcessedDeclaredLicense:
    spdx_expression: str | None = None
    # maps each raw declared license string to the license it was mapped onto
    mapped: dict[str, str] = field(default_factory=dict, hash=False)
    unmapped: frozenset[str] = frozenset()


@dataclass(frozen=True)
class DeclaredLicenseInfo:
    authors: frozenset[str] = frozenset()
    licenses: frozenset[str] = frozenset()  # as found in the package metadata
    processed: ProcessedDeclaredLicense = field(
        default_factory=ProcessedDeclaredLicense
    )


@dataclass(frozen=True)
class Findings:
    """All findings of one provenance together with the rules that apply to them."""

    provenance: Provenance
    licenses: frozenset[LicenseFinding] = frozenset()
    copyrights: frozenset[CopyrightFinding] = frozenset()
    license_finding_curations: tuple[LicenseFindingCuration, ...] = ()
    path_excludes: tuple[PathExclude, ...] = ()
    # offset of the findings within the scanned tree, e.g. for sub-repositories
    relative_findings_path: str = ""


@dataclass(frozen=True)
class DetectedLicenseInfo:
    findings: tuple[Findings, ...] = ()


@dataclass(frozen=True)
class LicenseInfo:
    id: Identifier
    concluded_license_info: ConcludedLicenseInfo = field(
        default_factory=ConcludedLicenseInfo
    )
    declared_license_info: DeclaredLicenseInfo = field(
        default_factory=DeclaredLicenseInfo
    )
    detected_license_info: DetectedLicenseInfo = field(
        default_factory=DetectedLicenseInfo
    )
