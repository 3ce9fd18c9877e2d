"""Helpers for lists of rows (lists of dicts) and nested containers.

The centrepiece is :func:`sort`, a stable multi-key sort. Each criterion is a
``SortCriterion(key, ascending, natural, case_sensitive)``; rows are compared
on the first criterion and ties fall through to the next one. The ordered
criteria live in a :class:`RowComparator` built for each call.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Any

from .arr import compare_value

# pylint: disable=too-few-public-methods


@dataclass(frozen=True)
class SortCriterion:
    """One column of a multi-key sort."""

    key: Hashable
    ascending: bool = True
    natural: bool = False
    case_sensitive: bool = False

    @classmethod
    def coerce(cls, raw: SortCriterion | Hashable | Sequence) -> SortCriterion:
        """Build a criterion from a key or a ``(key, asc, natural, case)`` sequence."""
        if isinstance(raw, SortCriterion):
            return raw
        if isinstance(raw, (list, tuple)):
            if not raw:
                raise ValueError("A sort criterion needs at least a key")
            return cls(*raw)
        return cls(raw)


class RowComparator:
    """Three-way comparator over rows, driven by an ordered list of criteria."""

    def __init__(self, criteria: Iterable[SortCriterion]) -> None:
        self._criteria = tuple(criteria)

    @property
    def criteria(self) -> tuple[SortCriterion, ...]:
        return self._criteria

    def __call__(self, row1: Mapping, row2: Mapping) -> int:
        for criterion in self._criteria:
            cmp = compare_value(
                row1.get(criterion.key),
                row2.get(criterion.key),
                natural=criterion.natural,
                case_sensitive=criterion.case_sensitive,
            )
            if cmp:
                return cmp if criterion.ascending else -cmp
        return 0

    def sort_key(self):
        """Return a key function suitable for ``sorted``/``list.sort``."""
        return cmp_to_key(self)


def _normalize_criteria(criteria: Any) -> list[SortCriterion]:
    if criteria is None:
        return []
    if isinstance(criteria, SortCriterion):
        return [criteria]
    if isinstance(criteria, (list, tuple)):
        if not criteria:
            return []
        # a flat (key, asc, natural, case) sequence describes a single criterion
        flags = criteria[1:]
        if not isinstance(criteria[0], (list, tuple, SortCriterion)) and all(
            isinstance(flag, bool) for flag in flags
        ):
            return [SortCriterion.coerce(criteria)]
        return [SortCriterion.coerce(raw) for raw in criteria]
    return [SortCriterion(criteria)]


def sort(rows: Iterable[Mapping], criteria: Any) -> list[Mapping]:
    """Sort rows by an ordered list of criteria.

    Args:
        rows: Rows to sort (dict-like).
        criteria: A key, a single ``(key, ascending, natural, case_sensitive)``
            sequence, a :class:`SortCriterion`, or a list of any of those.
            Missing flags default to ascending, non-natural, case-insensitive.

    Returns:
        A new sorted list. Rows equal on every criterion keep their input
        order; an empty criteria list returns the rows unchanged.

    Example:
        ``sort(people, [("last_name",), ("age", False)])`` sorts by last name
        then by age descending.
    """
    rows = list(rows)
    normalized = _normalize_criteria(criteria)
    if not normalized:
        return rows
    return sorted(rows, key=RowComparator(normalized).sort_key())


# ============================================================================
#                           Counting & retrieval
# ============================================================================


def count(values: Mapping | Iterable) -> int:
    """Count leaf values, descending into nested lists and dicts."""
    items = values.values() if isinstance(values, Mapping) else values
    total = 0
    for item in items:
        if isinstance(item, (list, tuple, Mapping)):
            total += count(item)
        else:
            total += 1
    return total


def _rows(rows: Mapping | Iterable) -> Iterable[tuple[Any, Any]]:
    if isinstance(rows, Mapping):
        return rows.items()
    return enumerate(rows)


def get_values_with_keys_by_key(rows: Mapping | Iterable[Mapping], key: Hashable) -> dict:
    """Return ``{row_key: row[key]}`` for rows holding a non-null ``key``."""
    return {
        row_key: row[key]
        for row_key, row in _rows(rows)
        if isinstance(row, Mapping) and row.get(key) is not None
    }


def get_values_by_key(rows: Mapping | Iterable[Mapping], key: Hashable) -> list:
    """Return ``row[key]`` for rows holding a non-null ``key``."""
    return list(get_values_with_keys_by_key(rows, key).values())


def add_key_and_value(rows: Iterable[Mapping], key: Hashable, value: Any) -> list[dict]:
    """Return copies of the rows with ``key`` set to ``value``."""
    return [{**row, key: value} for row in rows]


def get_value(rows: Iterable[Mapping], key: Hashable, value: Any) -> Mapping | None:
    """Return the first row whose ``key`` equals ``value``."""
    for row in rows:
        if row.get(key) is not None and row[key] == value:
            return row
    return None


def is_value_exist(rows: Iterable[Mapping], key: Hashable, value: Any) -> bool:
    return get_value(rows, key, value) is not None


def in_array_recursive(needle: Any, haystack: Mapping | Iterable, strict: bool = False) -> bool:
    """Search ``needle`` at any depth; strict mode also requires matching types."""
    items = haystack.values() if isinstance(haystack, Mapping) else haystack
    for item in items:
        if item == needle and (not strict or type(item) is type(needle)):
            return True
        if isinstance(item, (list, tuple, Mapping)) and in_array_recursive(
            needle, item, strict
        ):
            return True
    return False


def _key_order(key: Any) -> tuple[bool, Any]:
    # numeric keys first, in numeric order, then the rest as strings
    if isinstance(key, (int, float)) and not isinstance(key, bool):
        return (False, key)
    return (True, str(key))


def ksort_recursive(mapping: Mapping) -> dict:
    """Return a copy of ``mapping`` with keys sorted at every nesting level."""
    return {
        key: ksort_recursive(value) if isinstance(value, Mapping) else value
        for key, value in sorted(mapping.items(), key=lambda item: _key_order(item[0]))
    }
