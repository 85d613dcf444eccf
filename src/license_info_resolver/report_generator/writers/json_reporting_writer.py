# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import io
import json
from typing import Any

from license_info_resolver.model.findings import TextLocation
from license_info_resolver.model.provenance import (
    ArtifactProvenance,
    Provenance,
    RepositoryProvenance,
)
from license_info_resolver.model.resolved import (
    ResolvedCopyrightFinding,
    ResolvedLicense,
    ResolvedLicenseFileInfo,
    ResolvedLicenseInfo,
    ResolvedLicenseLocation,
)
from license_info_resolver.model.rules import LicenseFindingCuration, PathExclude
from license_info_resolver.report_generator.writers.abstract_reporting_writer import (  # noqa: E501
    ReportingWriter,
)


def provenance_to_json(provenance: Provenance) -> dict[str, Any]:
    """Inverse of JsonConfigParser.parse_provenance."""
    if isinstance(provenance, ArtifactProvenance):
        return {
            "type": "artifact",
            "url": provenance.source_artifact.url,
            "hash_value": provenance.source_artifact.hash_value,
            "hash_algorithm": provenance.source_artifact.hash_algorithm,
        }
    if isinstance(provenance, RepositoryProvenance):
        return {
            "type": "repository",
            "vcs_info": {
                "type": provenance.vcs_info.type.value,
                "url": provenance.vcs_info.url,
                "revision": provenance.vcs_info.revision,
                "path": provenance.vcs_info.path,
            },
            "resolved_revision": provenance.resolved_revision,
        }
    return {"type": "unknown"}


def _location_to_json(location: TextLocation) -> dict[str, Any]:
    return {
        "path": location.path,
        "start_line": location.start_line,
        "end_line": location.end_line,
    }


def _path_excludes_to_json(path_excludes: tuple[PathExclude, ...]) -> list[dict]:
    return [
        {
            "pattern": path_exclude.pattern,
            "reason": path_exclude.reason.value,
            "comment": path_exclude.comment,
        }
        for path_exclude in path_excludes
    ]


def _curation_to_json(curation: LicenseFindingCuration | None) -> dict | None:
    if curation is None:
        return None
    return {
        "path": curation.path,
        "concluded_license": curation.concluded_license,
        "reason": curation.reason.value,
        "start_lines": list(curation.start_lines),
        "line_count": curation.line_count,
        "detected_license": curation.detected_license,
        "comment": curation.comment,
    }


def _copyright_to_json(copyright_finding: ResolvedCopyrightFinding) -> dict[str, Any]:
    return {
        "statement": copyright_finding.statement,
        "location": _location_to_json(copyright_finding.location),
        "matching_path_excludes": _path_excludes_to_json(
            copyright_finding.matching_path_excludes
        ),
    }


def _sorted_copyrights(copyrights: frozenset[ResolvedCopyrightFinding]) -> list:
    return sorted(
        copyrights,
        key=lambda c: (c.location.path, c.location.start_line, c.statement),
    )


def _license_location_to_json(location: ResolvedLicenseLocation) -> dict[str, Any]:
    return {
        "provenance": provenance_to_json(location.provenance),
        "location": _location_to_json(location.location),
        "applied_curation": _curation_to_json(location.applied_curation),
        "matching_path_excludes": _path_excludes_to_json(
            location.matching_path_excludes
        ),
        "copyrights": [
            _copyright_to_json(c) for c in _sorted_copyrights(location.copyrights)
        ],
    }


def _resolved_license_to_json(resolved_license: ResolvedLicense) -> dict[str, Any]:
    return {
        "license": resolved_license.license,
        "sources": sorted(source.value for source in resolved_license.sources),
        "original_declared_licenses": sorted(
            resolved_license.original_declared_licenses
        ),
        "original_expressions": sorted(
            (
                {
                    "expression": expression.expression,
                    "source": expression.source.value,
                    "is_detected_excluded": expression.is_detected_excluded,
                }
                for expression in resolved_license.original_expressions
            ),
            key=lambda e: (e["source"], e["expression"]),
        ),
        "locations": [
            _license_location_to_json(location)
            for location in sorted(
                resolved_license.locations,
                key=lambda loc: (loc.location.path, loc.location.start_line),
            )
        ],
        "copyrights": sorted(resolved_license.get_copyrights(omit_excluded=False)),
    }


class JSONReportingWriter(ReportingWriter):
    """
    Writes resolved license information as JSON.

    Sets are written as sorted lists, so the output of equal results is equal.
    """

    def _to_json_string(self, json_obj: Any) -> str:
        output = io.StringIO()
        json.dump(json_obj, output, indent=2)
        json_string = output.getvalue()
        output.close()
        return json_string

    def license_info_to_json(self, license_info: ResolvedLicenseInfo) -> dict[str, Any]:
        return {
            "id": license_info.id.to_coordinates(),
            "main_license": license_info.main_license(),
            "licenses": [
                _resolved_license_to_json(resolved_license)
                for resolved_license in sorted(license_info, key=lambda r: r.license)
            ],
            "unmatched_copyrights": [
                _copyright_to_json(c)
                for findings in license_info.unmatched_copyrights.values()
                for c in _sorted_copyrights(findings)
            ],
            "copyright_garbage": sorted(
                {
                    f.statement
                    for findings in license_info.copyright_garbage.values()
                    for f in findings
                }
            ),
            "copyrights": sorted(license_info.get_copyrights(omit_excluded=True)),
        }

    def write_license_info(self, license_info: ResolvedLicenseInfo) -> str:
        return self._to_json_string(self.license_info_to_json(license_info))

    def write_license_files(self, license_file_info: ResolvedLicenseFileInfo) -> str:
        return self._to_json_string(
            {
                "id": license_file_info.id.to_coordinates(),
                "files": [
                    {
                        "provenance": provenance_to_json(f.provenance),
                        "relative_path": f.relative_path,
                        "file": str(f.file),
                        "licenses": sorted(
                            resolved_license.license
                            for resolved_license in f.license_info
                        ),
                        "copyrights": sorted(
                            f.license_info.get_copyrights(omit_excluded=True)
                        ),
                    }
                    for f in license_file_info
                ],
            }
        )
