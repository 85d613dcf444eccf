# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import pytest

from license_info_resolver.model.identifier import Identifier, InvalidIdentifier


def test_identifier_from_coordinates() -> None:
    id = Identifier.from_coordinates("Maven:org.apache.commons:commons-lang3:3.12.0")

    assert id == Identifier("Maven", "org.apache.commons", "commons-lang3", "3.12.0")


def test_identifier_allows_empty_namespace() -> None:
    id = Identifier.from_coordinates("PyPI::requests:2.31.0")

    assert id.namespace == ""
    assert id.to_coordinates() == "PyPI::requests:2.31.0"


def test_identifier_version_may_contain_colons() -> None:
    id = Identifier.from_coordinates("Debian::libc6:2:2.36-9")

    assert id.version == "2:2.36-9"


def test_identifier_str_is_coordinates() -> None:
    assert str(Identifier("NPM", "@babel", "core", "7.0.0")) == "NPM:@babel:core:7.0.0"


@pytest.mark.parametrize("coordinates", ["", "PyPI:requests", "a:b:c"])
def test_identifier_from_invalid_coordinates(coordinates: str) -> None:
    with pytest.raises(InvalidIdentifier, match="Invalid identifier coordinates"):
        Identifier.from_coordinates(coordinates)


def test_invalid_identifier_is_value_error() -> None:
    with pytest.raises(ValueError):
        Identifier.from_coordinates("invalid")
