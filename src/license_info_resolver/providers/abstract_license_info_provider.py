# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from abc import ABC, abstractmethod

from license_info_resolver.model.identifier import Identifier
from license_info_resolver.model.license_info import LicenseInfo


class LicenseInfoProvider(ABC):
    """Provides the raw license evidence of packages and projects.

    Implementations must be deterministic and return an empty LicenseInfo for
    identifiers they know nothing about.
    """

    @abstractmethod
    def get(self, id: Identifier) -> LicenseInfo:
        raise NotImplementedError
