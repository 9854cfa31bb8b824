from __future__ import annotations

import logging
from collections import Counter
from typing import Any, Hashable, Iterable, Mapping, Optional, Sequence, TypeVar

log = logging.getLogger("merge")

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class CapacityError(ValueError):
    """
    Raised when sorting would emit more elements than the destination can
    hold
    """
    pass


def merge_mapping(order: Iterable[K], mapping: Mapping[K, V]) -> list[tuple[K, V]]:
    """
    Return the items of ``mapping`` as a list of ``(key, value)`` pairs,
    following ``order``.

    Keys in ``order`` that are not in the mapping are skipped. Keys of the
    mapping that are not in ``order`` are appended at the end, in the
    iteration order of the mapping: putting them first could break
    constraints added after they were inserted.
    """
    res: list[tuple[K, V]] = []
    # Keys already copied to res
    copied: set[K] = set()

    for key in order:
        if key in copied:
            continue
        if key not in mapping:
            log.debug("%r: constrained key not in container: skipped", key)
            continue
        res.append((key, mapping[key]))
        copied.add(key)

    for key, value in mapping.items():
        if key not in copied:
            copied.add(key)
            res.append((key, value))

    return res


def _emit_blocks(order: Iterable[K], items: Sequence[K]) -> Iterable[tuple[K, int]]:
    """
    Generate ``(key, count)`` blocks for the elements of items, constrained
    keys first in ``order``, then the rest in order of first appearance.

    All the occurrences of a key are grouped together in a single block.
    """
    counts = Counter(items)
    copied: set[K] = set()

    for key in order:
        if key in copied:
            continue
        copied.add(key)
        n = counts.get(key, 0)
        if n == 0:
            log.debug("%r: constrained key not in container: skipped", key)
            continue
        yield key, n

    for key in items:
        if key in copied:
            continue
        copied.add(key)
        yield key, counts[key]


def merge_sequence(order: Iterable[K], items: Sequence[K]) -> list[K]:
    """
    Return the elements of ``items`` following ``order``.

    Duplicates are preserved, and all the occurrences of a key are emitted
    together, at the position of that key in ``order``. Elements not in
    ``order`` follow, in their original relative order.
    """
    res: list[K] = []
    for key, n in _emit_blocks(order, items):
        res.extend([key] * n)
    return res


def merge_fixed(
        order: Iterable[K], items: Sequence[K],
        capacity: Optional[int] = None, fill: Any = None) -> list[Any]:
    """
    Same as merge_sequence, but writing into a preallocated list of
    ``capacity`` slots (by default, ``len(items)``).

    Raises CapacityError if the sorted elements do not fit. If there are
    fewer elements than slots, the remaining slots are set to ``fill``.
    """
    if capacity is None:
        capacity = len(items)
    res: list[Any] = [fill] * capacity

    index = 0
    for key, n in _emit_blocks(order, items):
        if index + n > capacity:
            raise CapacityError(
                f"{key!r}: writing {n} elements at position {index} exceeds capacity {capacity}")
        for i in range(n):
            res[index] = key
            index += 1

    return res
