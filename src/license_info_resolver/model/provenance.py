# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

"""Provenances describe where a piece of evidence comes from."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from enum import Enum


class VcsType(Enum):
    GIT = "Git"
    MERCURIAL = "Mercurial"
    SUBVERSION = "Subversion"
    UNKNOWN = ""


@dataclass(frozen=True)
class VcsInfo:
    type: VcsType
    url: str
    revision: str
    path: str = ""  # sub directory of the repository the component lives in


@dataclass(frozen=True)
class RemoteArtifact:
    url: str
    hash_value: str = ""
    hash_algorithm: str = ""


class Provenance:
    """Base class of all provenances."""

    pass


@dataclass(frozen=True)
class _UnknownProvenance(Provenance):
    def __repr__(self) -> str:
        return "UnknownProvenance"


UnknownProvenance = _UnknownProvenance()


class KnownProvenance(Provenance, ABC):
    """A provenance from which source code can be retrieved."""

    @abstractmethod
    def storage_key(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True)
class ArtifactProvenance(KnownProvenance):
    source_artifact: RemoteArtifact

    def storage_key(self) -> str:
        return f"artifact|{self.source_artifact.url}|{self.source_artifact.hash_value}"


@dataclass(frozen=True)
class RepositoryProvenance(KnownProvenance):
    vcs_info: VcsInfo
    resolved_revision: str

    def clear_vcs_path(self) -> "RepositoryProvenance":
        return replace(self, vcs_info=replace(self.vcs_info, path=""))

    def align_revisions(self) -> "RepositoryProvenance":
        # the requested revision may be a branch or tag, the resolved one is stable
        return replace(
            self, vcs_info=replace(self.vcs_info, revision=self.resolved_revision)
        )

    def storage_key(self) -> str:
        # archives always contain the whole repository, whatever the VCS path is
        return f"repository|{self.vcs_info.type.value}|{self.vcs_info.url}|{self.resolved_revision}"
