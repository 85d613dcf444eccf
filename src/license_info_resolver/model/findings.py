# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from dataclasses import dataclass
from enum import Enum

UNKNOWN_LINE = -1


class LicenseSource(Enum):
    """Where a license expression originated."""

    CONCLUDED = "concluded"
    DECLARED = "declared"
    DETECTED = "detected"


@dataclass(frozen=True)
class TextLocation:
    path: str
    start_line: int
    end_line: int

    def prepended_path(self, prefix: str) -> str:
        """Return the path of this location as seen from the parent of `prefix`."""
        if not prefix:
            return self.path
        return f"{prefix.rstrip('/')}/{self.path}"

    @property
    def line_count(self) -> int:
        return self.end_line - self.start_line + 1


UNDEFINED_TEXT_LOCATION = TextLocation(".", UNKNOWN_LINE, UNKNOWN_LINE)


@dataclass(frozen=True)
class LicenseFinding:
    license: str  # SPDX expression, may be compound
    location: TextLocation
    score: float | None = None


@dataclass(frozen=True)
class CopyrightFinding:
    statement: str
    location: TextLocation
