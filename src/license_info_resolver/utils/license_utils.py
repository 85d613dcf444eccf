# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

# Utility functions for license expression processing

import logging
from functools import lru_cache

from license_expression import ExpressionError, Licensing

logger = logging.getLogger(__name__)

_licensing = Licensing()


@lru_cache(maxsize=4096)
def decompose(expression: str | None) -> frozenset[str]:
    """
    Split a license expression into the single licenses it is made of.

    "MIT OR (Apache-2.0 AND BSD-3-Clause)" decomposes into MIT, Apache-2.0 and
    BSD-3-Clause. A license with an exception, like
    "GPL-2.0-only WITH Classpath-exception-2.0", is a single license and is not
    split further.

    Args:
        expression: The SPDX license expression, may be None or empty.

    Returns:
        The set of single license expressions, empty if there is no expression.
    """
    if expression is None or not expression.strip():
        return frozenset()

    try:
        parsed = _licensing.parse(expression)
    except ExpressionError as e:
        logger.warning(
            f"Could not parse license expression '{expression}', keeping it as a single license: {e}"
        )
        return frozenset([expression.strip()])

    if parsed is None:
        return frozenset()

    symbols = _licensing.license_symbols(parsed, unique=True, decompose=False)
    return frozenset(str(symbol) for symbol in symbols)


def is_single_license(expression: str) -> bool:
    return decompose(expression) == {expression.strip()}
