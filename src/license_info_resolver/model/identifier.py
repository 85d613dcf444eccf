# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from dataclasses import dataclass


class InvalidIdentifier(ValueError):
    """Exception raised when identifier coordinates cannot be parsed."""

    pass


@dataclass(frozen=True)
class Identifier:
    """Names one package or project, used as key for all per component results."""

    type: str  # package manager or "project"
    namespace: str
    name: str
    version: str

    @classmethod
    def from_coordinates(cls, coordinates: str) -> "Identifier":
        """Parse coordinates of the form "type:namespace:name:version".

        Empty components are allowed, e.g. "PyPI::requests:2.31.0".
        """
        parts = coordinates.split(":", 3)
        if len(parts) != 4:
            raise InvalidIdentifier(
                f"Invalid identifier coordinates: {coordinates}. Expected format: 'type:namespace:name:version'"
            )
        return cls(*(part.strip() for part in parts))

    def to_coordinates(self) -> str:
        return f"{self.type}:{self.namespace}:{self.name}:{self.version}"

    def __str__(self) -> str:
        return self.to_coordinates()
