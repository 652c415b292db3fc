"""Helpers for mappings."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping
from typing import TypeVar

K = TypeVar("K")
V = TypeVar("V", bound=Hashable)


def invert_mapping(mapping: Mapping[K, Iterable[V]]) -> dict[V, K]:
    """Map every value found in the iterables back to the key holding it.

    When a value appears under several keys, the key seen last wins.
    """
    return {value: key for key, values in mapping.items() for value in values}