# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from abc import ABC, abstractmethod

from license_info_resolver.model.resolved import (
    ResolvedLicenseFileInfo,
    ResolvedLicenseInfo,
)


class ReportingWriter(ABC):
    @abstractmethod
    def write_license_info(self, license_info: ResolvedLicenseInfo) -> str:
        raise NotImplementedError

    @abstractmethod
    def write_license_files(self, license_file_info: ResolvedLicenseFileInfo) -> str:
        raise NotImplementedError
