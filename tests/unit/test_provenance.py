# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import pytest

from license_info_resolver.model.provenance import (
    ArtifactProvenance,
    KnownProvenance,
    RemoteArtifact,
    RepositoryProvenance,
    VcsInfo,
    VcsType,
)

VCS_INFO = VcsInfo(VcsType.GIT, "https://github.com/example/module.git", "v1.0.0")


def test_known_provenance_is_abstract() -> None:
    with pytest.raises(TypeError):
        KnownProvenance()  # type: ignore[abstract]


def test_repository_storage_key_ignores_vcs_path() -> None:
    root = RepositoryProvenance(VCS_INFO, "0123456789abcdef")
    sub = RepositoryProvenance(
        VcsInfo(VCS_INFO.type, VCS_INFO.url, VCS_INFO.revision, "sub/pkg"),
        "0123456789abcdef",
    )

    assert root.storage_key() == sub.storage_key()
    assert root.storage_key() != RepositoryProvenance(VCS_INFO, "fedcba").storage_key()


def test_artifact_storage_key_includes_hash() -> None:
    artifact = ArtifactProvenance(RemoteArtifact("https://example.com/a.tgz", "abc"))
    other = ArtifactProvenance(RemoteArtifact("https://example.com/a.tgz", "def"))

    assert artifact.storage_key() != other.storage_key()


def test_clear_vcs_path_and_align_revisions() -> None:
    provenance = RepositoryProvenance(
        VcsInfo(VCS_INFO.type, VCS_INFO.url, "main", "sub/pkg"), "0123456789abcdef"
    )

    assert provenance.clear_vcs_path().vcs_info.path == ""
    assert provenance.align_revisions().vcs_info.revision == "0123456789abcdef"
