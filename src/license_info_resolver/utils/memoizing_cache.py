# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import logging
import threading
from concurrent.futures import Future
from typing import Callable, Generic, Hashable, TypeVar

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class MemoizingCache(Generic[K, V]):
    """
    A thread safe cache computing the value of each key at most once.

    The first caller of `get_or_compute` for a key runs the computation, callers
    asking for the same key in the meantime block until it is done and all get
    the same value. Computations for different keys run in parallel. There is no
    timeout, a computation that never finishes blocks every caller of its key.

    If the computation raises, the exception is passed to all waiting callers
    and nothing is cached, so the next call computes again.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: dict[K, Future[V]] = {}

    def get_or_compute(self, key: K, compute: Callable[[K], V]) -> V:
        with self._lock:
            future = self._entries.get(key)
            is_owner = future is None
            if future is None:
                future = Future()
                self._entries[key] = future

        if not is_owner:
            return future.result()

        logger.debug(f"Cache miss for {key}, computing value.")
        try:
            value = compute(key)
        except BaseException as e:
            with self._lock:
                del self._entries[key]
            future.set_exception(e)
            raise

        future.set_result(value)
        return value

    def get(self, key: K) -> V | None:
        """Return the value of a finished computation, None otherwise."""
        with self._lock:
            future = self._entries.get(key)
        if future is None or not future.done() or future.exception() is not None:
            return None
        return future.result()

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
