"""
Display ordering for each asset family and for the failure list.
"""

from __future__ import annotations

import re
from functools import cmp_to_key
from typing import List, Sequence, Tuple, TypeVar, Union

from shared.asset_configs import AssetCollection

T = TypeVar("T")

EVERGREEN_FIELD = "Evergreen"

_DIGITS = re.compile(r"(\d+)")


def natural_key(text: str) -> Tuple[Tuple[Union[str, int], ...], str]:
    """
    Sort key comparing digit runs numerically and letters case-insensitively.

    ``"Robot 2"`` therefore orders before ``"Robot 10"``. The raw text breaks
    ties so names differing only in case still order deterministically.
    """
    parts = _DIGITS.split(text)
    key = tuple(int(part) if index % 2 else part.casefold() for index, part in enumerate(parts))
    return key, text


def _by_name(record) -> str:
    return record.name


def _field2d_compare(a, b) -> int:
    if a.name == b.name:
        return 0
    if a.name == EVERGREEN_FIELD:
        return 1
    if b.name == EVERGREEN_FIELD:
        return -1
    return -1 if a.name < b.name else 1


def sort_field2ds(records: Sequence[T]) -> List[T]:
    """Ordinal ascending, with the Evergreen field always last."""
    return sorted(records, key=cmp_to_key(_field2d_compare))


def sort_field3ds(records: Sequence[T]) -> List[T]:
    return sorted(records, key=_by_name, reverse=True)


def sort_robots(records: Sequence[T]) -> List[T]:
    return sorted(records, key=lambda record: natural_key(record.name))


def sort_joysticks(records: Sequence[T]) -> List[T]:
    return sorted(records, key=_by_name, reverse=True)


def sort_failures(names: Sequence[str]) -> List[str]:
    return sorted(names, key=natural_key)


def sort_collection(collection: AssetCollection) -> AssetCollection:
    """Return a new collection with every list in its display order."""
    return AssetCollection(
        field2ds=sort_field2ds(collection.field2ds),
        field3ds=sort_field3ds(collection.field3ds),
        robots=sort_robots(collection.robots),
        joysticks=sort_joysticks(collection.joysticks),
        load_failures=sort_failures(collection.load_failures),
    )
