# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import time
from concurrent.futures import ThreadPoolExecutor
from unittest.mock import Mock

import pytest
import pytest_mock

from license_info_resolver.config.cli_configs import default_config
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
from license_info_resolver.model.provenance import UnknownProvenance
from license_info_resolver.model.rules import CopyrightGarbage
from license_info_resolver.providers.abstract_license_info_provider import (
    LicenseInfoProvider,
)
from license_info_resolver.resolver.license_info_resolver import LicenseInfoResolver

ID = Identifier("NPM", "", "left-pad", "1.3.0")


def create_provider(
    mocker: pytest_mock.MockFixture, license_info: LicenseInfo
) -> Mock:
    provider = mocker.Mock(spec_set=LicenseInfoProvider)
    provider.get.return_value = license_info
    return provider


def test_resolve_license_info_is_cached(
    mocker: pytest_mock.MockFixture,
) -> None:
    provider = create_provider(
        mocker, LicenseInfo(ID, concluded_license_info=ConcludedLicenseInfo("WTFPL"))
    )
    resolver = LicenseInfoResolver(provider, CopyrightGarbage(), False)

    first = resolver.resolve_license_info(ID)
    second = resolver.resolve_license_info(ID)

    assert first is second
    assert [r.license for r in first] == ["WTFPL"]
    provider.get.assert_called_once_with(ID)


def test_resolve_license_info_concurrently(
    mocker: pytest_mock.MockFixture,
) -> None:
    def slow_get(id: Identifier) -> LicenseInfo:
        time.sleep(0.05)
        return LicenseInfo(id, concluded_license_info=ConcludedLicenseInfo("MIT"))

    provider = mocker.Mock(spec_set=LicenseInfoProvider)
    provider.get.side_effect = slow_get
    resolver = LicenseInfoResolver(provider, CopyrightGarbage(), False)

    with ThreadPoolExecutor(max_workers=8) as executor:
        results = list(executor.map(resolver.resolve_license_info, [ID] * 8))

    assert all(result is results[0] for result in results)
    provider.get.assert_called_once_with(ID)


def test_resolve_license_info_failure_is_not_cached(
    mocker: pytest_mock.MockFixture,
) -> None:
    provider = mocker.Mock(spec_set=LicenseInfoProvider)
    provider.get.side_effect = [ValueError("Invalid evidence"), LicenseInfo(ID)]
    resolver = LicenseInfoResolver(provider, CopyrightGarbage(), False)

    with pytest.raises(ValueError, match="Invalid evidence"):
        resolver.resolve_license_info(ID)

    assert len(resolver.resolve_license_info(ID)) == 0
    assert provider.get.call_count == 2


def test_resolve_license_files_without_archiver_is_empty(
    mocker: pytest_mock.MockFixture,
) -> None:
    provider = create_provider(
        mocker, LicenseInfo(ID, concluded_license_info=ConcludedLicenseInfo("MIT"))
    )
    resolver = LicenseInfoResolver(provider, CopyrightGarbage(), False)

    license_files = resolver.resolve_license_files(ID)

    assert license_files.id == ID
    assert len(license_files) == 0
    assert resolver.resolve_license_files(ID) is license_files


def test_from_config_uses_preset_copyright_garbage(
    mocker: pytest_mock.MockFixture,
) -> None:
    garbage_statement = default_config.preset_copyright_garbage[0]
    findings = Findings(
        provenance=UnknownProvenance,
        licenses=frozenset({LicenseFinding("MIT", TextLocation("LICENSE", 1, 20))}),
        copyrights=frozenset(
            {
                CopyrightFinding(garbage_statement, TextLocation("LICENSE", 1, 1)),
                CopyrightFinding("Copyright 2016 Jane Doe", TextLocation("LICENSE", 2, 2)),
            }
        ),
    )
    provider = create_provider(
        mocker, LicenseInfo(ID, detected_license_info=DetectedLicenseInfo((findings,)))
    )
    resolver = LicenseInfoResolver.from_config(provider, default_config)

    resolved = resolver.resolve_license_info(ID)

    assert resolved.get_copyrights() == {"Copyright 2016 Jane Doe"}
    assert {f.statement for f in resolved.copyright_garbage[UnknownProvenance]} == {
        garbage_statement
    }
