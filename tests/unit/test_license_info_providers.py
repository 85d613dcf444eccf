# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import json
from pathlib import Path

import pytest

from license_info_resolver.model.identifier import Identifier
from license_info_resolver.model.license_info import ConcludedLicenseInfo, LicenseInfo
from license_info_resolver.providers.json_license_info_provider import (
    JsonLicenseInfoProvider,
    evidence_file_name,
)
from license_info_resolver.providers.simple_license_info_provider import (
    SimpleLicenseInfoProvider,
)

ID = Identifier("NPM", "@types", "node", "20.1.0")


def test_simple_provider_returns_known_license_info() -> None:
    license_info = LicenseInfo(ID, concluded_license_info=ConcludedLicenseInfo("MIT"))
    provider = SimpleLicenseInfoProvider([license_info])

    assert provider.get(ID) is license_info


def test_simple_provider_returns_empty_license_info_for_unknown_id() -> None:
    other = Identifier("NPM", "", "lodash", "4.17.21")

    assert SimpleLicenseInfoProvider([]).get(other) == LicenseInfo(other)


def test_evidence_file_name() -> None:
    assert evidence_file_name(ID) == "NPM__types_node_20.1.0.json"


def test_json_provider_reads_evidence_file(tmp_path: Path) -> None:
    (tmp_path / evidence_file_name(ID)).write_text(
        json.dumps({"id": ID.to_coordinates(), "concluded_license": "MIT"})
    )
    provider = JsonLicenseInfoProvider(str(tmp_path))

    license_info = provider.get(ID)

    assert license_info.id == ID
    assert license_info.concluded_license_info.concluded_license == "MIT"


def test_json_provider_without_evidence_file(tmp_path: Path) -> None:
    provider = JsonLicenseInfoProvider(str(tmp_path))

    assert provider.get(ID) == LicenseInfo(ID)


def test_json_provider_ignores_evidence_of_other_id(tmp_path: Path) -> None:
    (tmp_path / evidence_file_name(ID)).write_text(
        json.dumps({"id": "NPM:@types:node:18.0.0", "concluded_license": "MIT"})
    )

    assert JsonLicenseInfoProvider(str(tmp_path)).get(ID) == LicenseInfo(ID)


def test_json_provider_missing_directory(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="does not exist"):
        JsonLicenseInfoProvider(str(tmp_path / "missing"))
