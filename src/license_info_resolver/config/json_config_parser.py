# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2024-present Datadog, Inc.

import json
import logging
from typing import Any

from license_info_resolver.adaptors.os import open_file
from license_info_resolver.model.findings import (
    CopyrightFinding,
    LicenseFinding,
    TextLocation,
)
from license_info_resolver.model.identifier import Identifier
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
    Provenance,
    RemoteArtifact,
    RepositoryProvenance,
    UnknownProvenance,
    VcsInfo,
    VcsType,
)
from license_info_resolver.model.rules import (
    LicenseFindingCuration,
    LicenseFindingCurationReason,
    PathExclude,
    PathExcludeReason,
)


class JsonConfigParser:
    """Parser for JSON configuration and evidence files used by license-info-resolver."""

    @staticmethod
    def parse_provenance(provenance_dict: dict[str, Any] | None) -> Provenance:
        """Parse a provenance.

        JSON formats:
            {"type": "unknown"}
            {"type": "artifact", "url": "...", "hash_value": "...", "hash_algorithm": "SHA-1"}
            {"type": "repository", "vcs_info": {"type": "Git", "url": "...", "revision": "...",
             "path": "..."}, "resolved_revision": "..."}

        Raises:
            ValueError: If the provenance type or VCS type is not recognized
        """
        if not provenance_dict or provenance_dict.get("type", "unknown") == "unknown":
            return UnknownProvenance

        provenance_type = provenance_dict["type"]
        if provenance_type == "artifact":
            return ArtifactProvenance(
                RemoteArtifact(
                    url=provenance_dict["url"],
                    hash_value=provenance_dict.get("hash_value", ""),
                    hash_algorithm=provenance_dict.get("hash_algorithm", ""),
                )
            )
        if provenance_type == "repository":
            vcs_info_dict = provenance_dict["vcs_info"]
            try:
                vcs_type = VcsType(vcs_info_dict.get("type", ""))
            except ValueError:
                raise ValueError(
                    f"Invalid VCS type: {vcs_info_dict.get('type')}. Valid types: {[t.value for t in VcsType]}"
                )
            vcs_info = VcsInfo(
                type=vcs_type,
                url=vcs_info_dict["url"],
                revision=vcs_info_dict.get("revision", ""),
                path=vcs_info_dict.get("path", ""),
            )
            return RepositoryProvenance(
                vcs_info=vcs_info,
                resolved_revision=provenance_dict.get(
                    "resolved_revision", vcs_info.revision
                ),
            )
        raise ValueError(
            f"Invalid provenance type: {provenance_type}. Valid types: ['unknown', 'artifact', 'repository']"
        )

    @staticmethod
    def parse_text_location(location_dict: dict[str, Any]) -> TextLocation:
        start_line = int(location_dict["start_line"])
        return TextLocation(
            path=location_dict["path"],
            start_line=start_line,
            end_line=int(location_dict.get("end_line", start_line)),
        )

    @staticmethod
    def parse_license_finding_curations(
        curations_json: list[dict[str, Any]],
    ) -> list[LicenseFindingCuration]:
        curations = []
        for curation in curations_json:
            try:
                reason = LicenseFindingCurationReason(curation["reason"])
            except ValueError:
                raise ValueError(
                    f"Invalid curation reason: {curation['reason']}. Valid reasons: {[r.value for r in LicenseFindingCurationReason]}"
                )
            line_count = curation.get("line_count")
            curations.append(
                LicenseFindingCuration(
                    path=curation["path"],
                    concluded_license=curation["concluded_license"],
                    reason=reason,
                    start_lines=tuple(int(line) for line in curation.get("start_lines", [])),
                    line_count=int(line_count) if line_count is not None else None,
                    detected_license=curation.get("detected_license"),
                    comment=curation.get("comment", ""),
                )
            )
        return curations

    @staticmethod
    def parse_path_excludes(excludes_json: list[dict[str, Any]]) -> list[PathExclude]:
        path_excludes = []
        for path_exclude in excludes_json:
            try:
                reason = PathExcludeReason(path_exclude["reason"])
            except ValueError:
                raise ValueError(
                    f"Invalid path exclude reason: {path_exclude['reason']}. Valid reasons: {[r.value for r in PathExcludeReason]}"
                )
            path_excludes.append(
                PathExclude(
                    pattern=path_exclude["pattern"],
                    reason=reason,
                    comment=path_exclude.get("comment", ""),
                )
            )
        return path_excludes

    @staticmethod
    def parse_findings(findings_dict: dict[str, Any]) -> Findings:
        return Findings(
            provenance=JsonConfigParser.parse_provenance(findings_dict.get("provenance")),
            licenses=frozenset(
                LicenseFinding(
                    license=finding["license"],
                    location=JsonConfigParser.parse_text_location(finding["location"]),
                    score=finding.get("score"),
                )
                for finding in findings_dict.get("licenses", [])
            ),
            copyrights=frozenset(
                CopyrightFinding(
                    statement=finding["statement"],
                    location=JsonConfigParser.parse_text_location(finding["location"]),
                )
                for finding in findings_dict.get("copyrights", [])
            ),
            license_finding_curations=tuple(
                JsonConfigParser.parse_license_finding_curations(
                    findings_dict.get("license_finding_curations", [])
                )
            ),
            path_excludes=tuple(
                JsonConfigParser.parse_path_excludes(
                    findings_dict.get("path_excludes", [])
                )
            ),
            relative_findings_path=findings_dict.get("relative_findings_path", ""),
        )

    @staticmethod
    def parse_license_info(
        license_info_dict: dict[str, Any], id: Identifier | None = None
    ) -> LicenseInfo:
        """Parse the license evidence of one package or project.

        The identifier is read from the "id" field unless given explicitly.
        Missing sections are treated as no evidence.
        """
        if id is None:
            id = Identifier.from_coordinates(license_info_dict["id"])

        declared_dict = license_info_dict.get("declared", {})
        processed_dict = declared_dict.get("processed", {})
        declared_license_info = DeclaredLicenseInfo(
            authors=frozenset(declared_dict.get("authors", [])),
            licenses=frozenset(declared_dict.get("licenses", [])),
            processed=ProcessedDeclaredLicense(
                spdx_expression=processed_dict.get("spdx_expression"),
                mapped=dict(processed_dict.get("mapped", {})),
                unmapped=frozenset(processed_dict.get("unmapped", [])),
            ),
        )

        return LicenseInfo(
            id=id,
            concluded_license_info=ConcludedLicenseInfo(
                concluded_license=license_info_dict.get("concluded_license"),
                applied_curations=tuple(license_info_dict.get("applied_curations", [])),
            ),
            declared_license_info=declared_license_info,
            detected_license_info=DetectedLicenseInfo(
                tuple(
                    JsonConfigParser.parse_findings(findings)
                    for findings in license_info_dict.get("detected", [])
                )
            ),
        )

    @staticmethod
    def load_license_info(license_info_file_path: str) -> LicenseInfo:
        """Load the license evidence of one package or project from a JSON file.

        Raises:
            FileNotFoundError: If the evidence file is not found
            json.JSONDecodeError: If the JSON file is invalid
            ValueError: If the evidence format is invalid
        """
        try:
            return JsonConfigParser.parse_license_info(
                json.loads(open_file(license_info_file_path))
            )
        except FileNotFoundError:
            logging.error(f"License info file not found: {license_info_file_path}")
            raise
        except json.JSONDecodeError:
            logging.error(f"Invalid JSON in license info file: {license_info_file_path}")
            raise
        except (KeyError, TypeError, AttributeError, ValueError) as e:
            logging.error(f"Invalid license info file {license_info_file_path}: {e}")
            raise ValueError(
                f"Invalid license info file {license_info_file_path}: {e}"
            ) from e

    @staticmethod
    def load_copyright_garbage(copyright_garbage_file_path: str) -> list[str]:
        """Load copyright garbage statements from a JSON file.

        JSON format: {"items": ["Copyright (c) <year> <owner>", ...]} or a plain list.

        Raises:
            FileNotFoundError: If the copyright garbage file is not found
            json.JSONDecodeError: If the JSON file is invalid
            ValueError: If the file does not contain a list of strings
        """
        try:
            garbage_json = json.loads(open_file(copyright_garbage_file_path))
        except FileNotFoundError:
            logging.error(
                f"Copyright garbage file not found: {copyright_garbage_file_path}"
            )
            raise
        except json.JSONDecodeError:
            logging.error(
                f"Invalid JSON in copyright garbage file: {copyright_garbage_file_path}"
            )
            raise

        if isinstance(garbage_json, dict):
            garbage_json = garbage_json.get("items", [])
        if not isinstance(garbage_json, list) or not all(
            isinstance(item, str) for item in garbage_json
        ):
            raise ValueError(
                f"Copyright garbage file {copyright_garbage_file_path} must contain a list of strings."
            )
        return garbage_json
