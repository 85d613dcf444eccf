# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import logging

from license_info_resolver.artifact_management.file_archiver import FileArchiver
from license_info_resolver.config.cli_configs import (
    DEFAULT_ARCHIVE_DIR_PREFIX,
    DEFAULT_LICENSE_FILE_PATTERNS,
    Config,
    LicenseFilePatterns,
)
from license_info_resolver.matching.findings_matcher import (
    DEFAULT_EXPAND_TOLERANCE_LINES,
    DEFAULT_TOLERANCE_LINES,
    FindingsMatcher,
)
from license_info_resolver.matching.path_license_matcher import PathLicenseMatcher
from license_info_resolver.model.identifier import Identifier
from license_info_resolver.model.resolved import (
    ResolvedLicenseFileInfo,
    ResolvedLicenseInfo,
)
from license_info_resolver.model.rules import CopyrightGarbage
from license_info_resolver.providers.abstract_license_info_provider import (
    LicenseInfoProvider,
)
from license_info_resolver.resolver.license_aggregator import LicenseAggregator
from license_info_resolver.resolver.license_file_resolver import LicenseFileResolver
from license_info_resolver.utils.memoizing_cache import MemoizingCache

logger = logging.getLogger(__name__)


class LicenseInfoResolver:
    """
    Resolves the license information of packages and projects.

    Results are computed once per identifier on first request and cached for
    the lifetime of the resolver, which is safe to share between threads.
    Concurrent requests for an identifier that is being resolved wait for that
    resolution instead of starting another one.
    """

    def __init__(
        self,
        provider: LicenseInfoProvider,
        copyright_garbage: CopyrightGarbage,
        add_authors_to_copyrights: bool,
        archiver: FileArchiver | None = None,
        license_file_patterns: LicenseFilePatterns = DEFAULT_LICENSE_FILE_PATTERNS,
        tolerance_lines: int = DEFAULT_TOLERANCE_LINES,
        expand_tolerance_lines: int = DEFAULT_EXPAND_TOLERANCE_LINES,
        archive_dir_prefix: str = DEFAULT_ARCHIVE_DIR_PREFIX,
    ) -> None:
        self.provider = provider
        self.archiver = archiver
        self.aggregator = LicenseAggregator(
            copyright_garbage=copyright_garbage,
            add_authors_to_copyrights=add_authors_to_copyrights,
            findings_matcher=FindingsMatcher(
                PathLicenseMatcher(license_file_patterns),
                tolerance_lines=tolerance_lines,
                expand_tolerance_lines=expand_tolerance_lines,
            ),
        )
        self.license_file_resolver: LicenseFileResolver | None = None
        if archiver is not None:
            # only actual license files, no readme files, are reported as license files
            self.license_file_resolver = LicenseFileResolver(
                archiver,
                PathLicenseMatcher(license_file_patterns.without_other_license_filenames()),
                archive_dir_prefix,
            )
        self._resolved_license_info: MemoizingCache[Identifier, ResolvedLicenseInfo] = (
            MemoizingCache()
        )
        self._resolved_license_files: MemoizingCache[
            Identifier, ResolvedLicenseFileInfo
        ] = MemoizingCache()

    @classmethod
    def from_config(
        cls,
        provider: LicenseInfoProvider,
        config: Config,
        archiver: FileArchiver | None = None,
    ) -> "LicenseInfoResolver":
        return cls(
            provider=provider,
            copyright_garbage=CopyrightGarbage(frozenset(config.preset_copyright_garbage)),
            add_authors_to_copyrights=config.add_authors_to_copyrights,
            archiver=archiver,
            license_file_patterns=config.license_file_patterns,
            tolerance_lines=config.tolerance_lines,
            expand_tolerance_lines=config.expand_tolerance_lines,
            archive_dir_prefix=config.archive_dir_prefix,
        )

    def resolve_license_info(self, id: Identifier) -> ResolvedLicenseInfo:
        """Get the resolved license info of the project or package identified by `id`."""
        return self._resolved_license_info.get_or_compute(id, self._create_license_info)

    def resolve_license_files(self, id: Identifier) -> ResolvedLicenseFileInfo:
        """
        Get the license files of the project or package identified by `id`.

        Requires an archiver, without one the result is always empty.
        """
        return self._resolved_license_files.get_or_compute(
            id, self._create_license_file_info
        )

    def _create_license_info(self, id: Identifier) -> ResolvedLicenseInfo:
        logger.debug(f"Resolving license info of {id}.")
        return self.aggregator.aggregate(self.provider.get(id))

    def _create_license_file_info(self, id: Identifier) -> ResolvedLicenseFileInfo:
        if self.license_file_resolver is None:
            return ResolvedLicenseFileInfo(id)

        logger.debug(f"Resolving license files of {id}.")
        return self.license_file_resolver.resolve(self.resolve_license_info(id))
