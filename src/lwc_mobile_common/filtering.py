# SPDX-License-Identifier: MIT
"""Filtering helpers for mappings and sets.

Both helpers accept ``None`` in place of a container and return a new, empty
container of the same kind in that case.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Optional, TypeVar

K = TypeVar("K")
V = TypeVar("V")


def filter_mapping(
    mapping: Optional[Mapping[K, V]],
    predicate: Callable[[K, V], bool],
) -> dict[K, V]:
    """Return a new dict holding the entries of ``mapping`` accepted by ``predicate``.

    Only entries for which the predicate returns exactly ``True`` are kept.
    Insertion order of the surviving entries is preserved.
    """
    filtered: dict[K, V] = {}
    if mapping is None:
        return filtered

    for key, value in mapping.items():
        if predicate(key, value) is True:
            filtered[key] = value
    return filtered


def filter_set(
    items: Optional[Iterable[V]],
    predicate: Callable[[V], bool],
) -> set[V]:
    """Return a new set holding the elements of ``items`` accepted by ``predicate``."""
    if items is None:
        return set()
    return {item for item in items if predicate(item) is True}
