# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from dataclasses import dataclass, replace
from typing import Iterable

from license_info_resolver.model.provenance import (
    Provenance,
    RepositoryProvenance,
    VcsInfo,
)


@dataclass(frozen=True)
class FileListEntry:
    path: str
    sha1: str


@dataclass(frozen=True)
class FileList:
    """The files contained in the source tree of one provenance."""

    provenance: Provenance
    files: frozenset[FileListEntry]


def _is_under(path: str, directory: str) -> bool:
    return not directory or path == directory or path.startswith(f"{directory}/")


def get_file_list(
    package_provenance: Provenance,
    file_lists: Iterable[FileList],
    sub_repositories: dict[str, VcsInfo] | None = None,
) -> FileList | None:
    """
    Assemble the file list of a package from the stored per provenance lists.

    File lists of repositories are stored for the whole repository, so the list
    of the package is looked up without VCS path and filtered to the VCS path
    afterwards. Files of sub-repositories are mounted at their path within the
    package repository.

    Args:
        package_provenance: Provenance of the package itself.
        file_lists: All available file lists.
        sub_repositories: Mapping of mount path to the VCS info of the
            sub-repository mounted there.

    Returns:
        The merged file list, or None if there is no list for the package.
    """
    file_lists_by_provenance = {
        file_list.provenance: file_list for file_list in file_lists
    }

    vcs_path = ""
    lookup_provenance = package_provenance
    if isinstance(package_provenance, RepositoryProvenance):
        vcs_path = package_provenance.vcs_info.path
        lookup_provenance = package_provenance.clear_vcs_path().align_revisions()

    package_file_list = file_lists_by_provenance.get(lookup_provenance)
    if package_file_list is None:
        return None

    entries = set(package_file_list.files)
    for mount_path, vcs_info in (sub_repositories or {}).items():
        sub_provenance = RepositoryProvenance(
            vcs_info=vcs_info, resolved_revision=vcs_info.revision
        )
        sub_file_list = file_lists_by_provenance.get(sub_provenance)
        if sub_file_list is None:
            continue
        entries.update(
            replace(entry, path=f"{mount_path}/{entry.path}")
            for entry in sub_file_list.files
        )

    return FileList(
        provenance=package_provenance,
        files=frozenset(entry for entry in entries if _is_under(entry.path, vcs_path)),
    )
