# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from typing import Iterable

from license_info_resolver.model.identifier import Identifier
from license_info_resolver.model.license_info import LicenseInfo
from license_info_resolver.providers.abstract_license_info_provider import (
    LicenseInfoProvider,
)


class SimpleLicenseInfoProvider(LicenseInfoProvider):
    """Provides license evidence held in memory."""

    def __init__(self, license_infos: Iterable[LicenseInfo]) -> None:
        self.license_infos = {info.id: info for info in license_infos}

    def get(self, id: Identifier) -> LicenseInfo:
        return self.license_infos.get(id) or LicenseInfo(id=id)
