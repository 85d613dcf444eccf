# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import json
from pathlib import Path

from license_info_resolver.model.findings import (
    CopyrightFinding,
    LicenseFinding,
    TextLocation,
)
from license_info_resolver.model.identifier import Identifier
from license_info_resolver.model.license_info import (
    ConcludedLicenseInfo,
    DetectedLicenseInfo,
    Findings,
    LicenseInfo,
)
from license_info_resolver.model.provenance import (
    ArtifactProvenance,
    RemoteArtifact,
    UnknownProvenance,
)
from license_info_resolver.model.resolved import (
    ResolvedLicenseFile,
    ResolvedLicenseFileInfo,
)
from license_info_resolver.model.rules import (
    CopyrightGarbage,
    PathExclude,
    PathExcludeReason,
)
from license_info_resolver.report_generator.writers.json_reporting_writer import (
    JSONReportingWriter,
    provenance_to_json,
)
from license_info_resolver.resolver.license_aggregator import LicenseAggregator

ID = Identifier("Crate", "", "serde", "1.0.188")
PROVENANCE = ArtifactProvenance(
    RemoteArtifact("https://crates.io/api/v1/crates/serde/1.0.188/download", "ab", "SHA-256")
)


def aggregator() -> LicenseAggregator:
    return LicenseAggregator(CopyrightGarbage(), False)


def test_write_license_info() -> None:
    findings = Findings(
        provenance=PROVENANCE,
        licenses=frozenset(
            {
                LicenseFinding("MIT", TextLocation("LICENSE-MIT", 1, 21)),
                LicenseFinding("Apache-2.0", TextLocation("LICENSE-APACHE", 1, 201)),
            }
        ),
        copyrights=frozenset(
            {
                CopyrightFinding(
                    "Copyright (c) 2014 The Rust Project Developers",
                    TextLocation("LICENSE-MIT", 1, 1),
                ),
                CopyrightFinding(
                    "Copyright 2018 Test", TextLocation("tests/data.rs", 1, 1)
                ),
            }
        ),
        path_excludes=(PathExclude("tests/**", PathExcludeReason.TEST_OF),),
    )
    resolved = aggregator().aggregate(
        LicenseInfo(
            ID,
            concluded_license_info=ConcludedLicenseInfo("MIT OR Apache-2.0"),
            detected_license_info=DetectedLicenseInfo((findings,)),
        )
    )

    report = json.loads(JSONReportingWriter().write_license_info(resolved))

    assert report["id"] == "Crate::serde:1.0.188"
    assert report["main_license"] == "MIT OR Apache-2.0"
    assert [entry["license"] for entry in report["licenses"]] == ["Apache-2.0", "MIT"]
    mit = report["licenses"][1]
    assert mit["sources"] == ["concluded", "detected"]
    assert mit["locations"][0]["provenance"]["type"] == "artifact"
    assert mit["locations"][0]["location"] == {
        "path": "LICENSE-MIT",
        "start_line": 1,
        "end_line": 21,
    }
    # copyrights of files without license findings go to the root license files
    assert mit["copyrights"] == [
        "Copyright (c) 2014 The Rust Project Developers",
        "Copyright 2018 Test",
    ]
    test_copyright = mit["locations"][0]["copyrights"][1]
    assert test_copyright["statement"] == "Copyright 2018 Test"
    assert test_copyright["matching_path_excludes"][0]["reason"] == "TEST_OF"
    assert report["unmatched_copyrights"] == []
    # excluded copyrights are not part of the summary
    assert report["copyrights"] == ["Copyright (c) 2014 The Rust Project Developers"]


def test_write_license_files() -> None:
    license_file_info = ResolvedLicenseFileInfo(
        ID,
        (
            ResolvedLicenseFile(
                provenance=PROVENANCE,
                license_info=aggregator().aggregate(LicenseInfo(ID)),
                relative_path="LICENSE-MIT",
                file=Path("/tmp/archive/LICENSE-MIT"),
            ),
        ),
    )

    report = json.loads(JSONReportingWriter().write_license_files(license_file_info))

    assert report == {
        "id": "Crate::serde:1.0.188",
        "files": [
            {
                "provenance": provenance_to_json(PROVENANCE),
                "relative_path": "LICENSE-MIT",
                "file": "/tmp/archive/LICENSE-MIT",
                "licenses": [],
                "copyrights": [],
            }
        ],
    }


def test_provenance_to_json_unknown() -> None:
    assert provenance_to_json(UnknownProvenance) == {"type": "unknown"}
