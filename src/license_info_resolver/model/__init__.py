# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from license_info_resolver.model.findings import (
    UNDEFINED_TEXT_LOCATION,
    UNKNOWN_LINE,
    CopyrightFinding,
    LicenseFinding,
    LicenseSource,
    TextLocation,
)
from license_info_resolver.model.identifier import Identifier, InvalidIdentifier
from license_info_resolver.model.license_info import (
    ConcludedLicenseInfo,
    DeclaredLicenseInfo,
    DetectedLicenseInfo,
    Findings,
    LicenseInfo,
    ProcessedDeclaredLicense,
)
from license_info_resolver.model.provenance import (
    ArtifactProvenance,
    KnownProvenance,
    Provenance,
    RemoteArtifact,
    RepositoryProvenance,
    UnknownProvenance,
    VcsInfo,
    VcsType,
)
from license_info_resolver.model.resolved import (
    ResolvedCopyrightFinding,
    ResolvedLicense,
    ResolvedLicenseFile,
    ResolvedLicenseFileInfo,
    ResolvedLicenseInfo,
    ResolvedLicenseLocation,
    ResolvedOriginalExpression,
)
from license_info_resolver.model.rules import (
    CopyrightGarbage,
    LicenseFindingCuration,
    LicenseFindingCurationReason,
    PathExclude,
    PathExcludeReason,
)

__all__ = [
    "UNDEFINED_TEXT_LOCATION",
    "UNKNOWN_LINE",
    "ArtifactProvenance",
    "ConcludedLicenseInfo",
    "CopyrightFinding",
    "CopyrightGarbage",
    "DeclaredLicenseInfo",
    "DetectedLicenseInfo",
    "Findings",
    "Identifier",
    "InvalidIdentifier",
    "KnownProvenance",
    "LicenseFinding",
    "LicenseFindingCuration",
    "LicenseFindingCurationReason",
    "LicenseInfo",
    "LicenseSource",
    "PathExclude",
    "PathExcludeReason",
    "ProcessedDeclaredLicense",
    "Provenance",
    "RemoteArtifact",
    "RepositoryProvenance",
    "ResolvedCopyrightFinding",
    "ResolvedLicense",
    "ResolvedLicenseFile",
    "ResolvedLicenseFileInfo",
    "ResolvedLicenseInfo",
    "ResolvedLicenseLocation",
    "ResolvedOriginalExpression",
    "TextLocation",
    "UnknownProvenance",
    "VcsInfo",
    "VcsType",
]
