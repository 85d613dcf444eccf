# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import logging
import re

from license_info_resolver.adaptors.os import path_exists, path_join
from license_info_resolver.config.json_config_parser import JsonConfigParser
from license_info_resolver.model.identifier import Identifier
from license_info_resolver.model.license_info import LicenseInfo
from license_info_resolver.providers.abstract_license_info_provider import (
    LicenseInfoProvider,
)

logger = logging.getLogger(__name__)


def evidence_file_name(id: Identifier) -> str:
    """File name of the evidence of `id`, e.g. "PyPI__requests_2.31.0.json"."""
    return re.sub(r"[^A-Za-z0-9._-]", "_", id.to_coordinates()) + ".json"


class JsonLicenseInfoProvider(LicenseInfoProvider):
    """Reads license evidence from one JSON file per identifier in a directory."""

    def __init__(self, evidence_dir: str) -> None:
        if not path_exists(evidence_dir):
            raise ValueError(f"Evidence directory {evidence_dir} does not exist")
        self.evidence_dir = evidence_dir

    def get(self, id: Identifier) -> LicenseInfo:
        evidence_path = path_join(self.evidence_dir, evidence_file_name(id))
        if not path_exists(evidence_path):
            logger.info(f"No license evidence found for {id} at {evidence_path}.")
            return LicenseInfo(id=id)

        license_info = JsonConfigParser.load_license_info(evidence_path)
        if license_info.id != id:
            logger.warning(
                f"Evidence file {evidence_path} is for {license_info.id}, expected {id}."
            )
            return LicenseInfo(id=id)
        return license_info
