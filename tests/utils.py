from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from typing import Any, Iterable, Sequence


def datafile_abspath(relpath: str) -> str:
    test_root = os.path.dirname(__file__)
    return os.path.join(test_root, "data", relpath)


class TracebackHandler(logging.Handler):
    def __init__(self, *args, **kw):
        super().__init__(*args, **kw)
        self.collected = []

    def handle(self, record):
        self.collected.append(record)


@contextmanager
def assert_no_logs(level=logging.WARN):
    handler = TracebackHandler(level=level)
    try:
        root_logger = logging.getLogger()
        root_logger.addHandler(handler)
        yield
    finally:
        root_logger.removeHandler(handler)
    if handler.collected:
        raise AssertionError(f"{len(handler.collected)} unexpected loggings")


class Args:
    """
    Mock argparser namespace initialized with options from constructor
    """
    def __init__(self, **kw):
        self._args = kw

    def __getattr__(self, k):
        return self._args.get(k, None)


# Constraints used by most tests: F before C, F before A, and so on
EDGES = [
    ("F", "C"),
    ("F", "A"),
    ("E", "A"),
    ("E", "B"),
    ("C", "D"),
    ("D", "B"),
]


class OrderAssertMixin:
    def assertRespects(self, order: Sequence[Any], edges: Iterable[tuple[Any, Any]]):
        """
        Check that every constraint between keys found in order is respected
        """
        first: dict[Any, int] = {}
        last: dict[Any, int] = {}
        for idx, key in enumerate(order):
            first.setdefault(key, idx)
            last[key] = idx
        for v, w in edges:
            if v not in first or w not in first:
                continue
            if last[v] > first[w]:
                self.fail(f"{v!r} does not come before {w!r} in {order!r}")
