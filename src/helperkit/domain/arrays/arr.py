"""General-purpose list and dict helpers.

Functions accept either a ``list`` (keys are positions) or a ``dict`` (keys
are the mapping keys) wherever the notion of a key matters. Rows are usually
dicts, but plain objects are supported through attribute access.
"""

from __future__ import annotations

import math
import re
import secrets
from collections.abc import Callable, Hashable, Iterable, Iterator, Mapping
from enum import Enum
from typing import Any, TypeVar

T = TypeVar("T")
E = TypeVar("E", bound=Enum)

KeyOrCallback = Hashable | Callable[[Any], Any]

_NATURAL_CHUNKS = re.compile(r"(\d+)")
_NUMERIC_STRING = re.compile(r"\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?\s*", re.ASCII)


# ============================================================================
#                           Internal helpers
# ============================================================================


def _items(values: Mapping | Iterable) -> Iterator[tuple[Any, Any]]:
    if isinstance(values, Mapping):
        return iter(values.items())
    return enumerate(values)


def _resolve(item: Any, key_or_callback: KeyOrCallback, default: Any = None) -> Any:
    """Read a key from a row, an attribute from an object, or call a callback."""
    if callable(key_or_callback):
        return key_or_callback(item)
    if isinstance(item, Mapping):
        return item.get(key_or_callback, default)
    if isinstance(item, (list, tuple)) and isinstance(key_or_callback, int):
        return item[key_or_callback] if -len(item) <= key_or_callback < len(item) else default
    return getattr(item, str(key_or_callback), default)


def is_numeric(value: Any) -> bool:
    """Return True for numbers and numeric strings (``"12"``, ``"-1.5e3"``).

    Spelled-out floats such as ``"nan"`` or ``"inf"`` and underscore
    separators are not numeric strings.
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return True
    if isinstance(value, str):
        return _NUMERIC_STRING.fullmatch(value) is not None
    return False


def _natural_key(value: str) -> list[Any]:
    parts = _NATURAL_CHUNKS.split(value)
    # even indices are text, odd indices are digit runs
    return [int(part) if index % 2 else part for index, part in enumerate(parts)]


def _sign(value: float) -> int:
    return (value > 0) - (value < 0)


# ============================================================================
#                           Creation
# ============================================================================


def get_array_with_same_values(value: T, count: int) -> list[T]:
    """Return a list holding ``count`` copies of ``value``."""
    return [value for _ in range(max(count, 0))]


def get_array_with_numeric_values(begin: int, finish: int, step: int = 1) -> list[int]:
    """Return ``begin..finish`` (inclusive) by ``step``."""
    if step <= 0:
        raise ValueError("step must be positive")
    return list(range(begin, finish + 1, step))


def get_array_with_nb_numeric_values(nb: int, begin: int = 1, step: int = 1) -> list[int]:
    """Return ``nb`` values starting at ``begin`` and increasing by ``step``."""
    return [begin + index * step for index in range(max(nb, 0))]


def wrap(value: Any) -> list:
    """Wrap a value in a list; ``None`` becomes an empty list."""
    if value is None:
        return []
    return value if isinstance(value, list) else [value]


def unwrap(values: list) -> Any:
    """Return the single element of a one-element list, else the list itself."""
    return values[0] if len(values) == 1 else values


# ============================================================================
#                           Search & filtering
# ============================================================================


def get_closest(
    search: float, values: Iterable[float], method: str = "default"
) -> float | None:
    """Return the value closest to ``search``.

    Args:
        search: Reference value.
        values: Candidate numbers.
        method: ``"higher"`` only considers values >= search, ``"lower"``
            only values <= search, anything else considers every value.

    Returns:
        The closest candidate (first one wins on ties), or None when no
        candidate qualifies.
    """
    closest = None
    for item in values:
        if method == "higher" and item < search:
            continue
        if method == "lower" and item > search:
            continue
        if closest is None or abs(search - closest) > abs(item - search):
            closest = item
    return closest


def search_by_callback(values: Mapping | Iterable, callback: Callable[[Any], Any]) -> Any:
    """Return the key of the first value for which ``callback`` is truthy."""
    for key, value in _items(values):
        if callback(value):
            return key
    return None


def search_by_values(values: Mapping | Iterable, needles: Iterable, strict: bool = True) -> Any:
    """Return the key of the first value found among ``needles`` (in needle order).

    In non-strict mode numeric strings match their numeric counterpart
    (``"1"`` matches ``1``).
    """
    pairs = list(_items(values))
    for needle in needles:
        for key, value in pairs:
            if value == needle and (not strict or type(value) is type(needle)):
                return key
            if not strict and is_numeric(value) and is_numeric(needle):
                if float(value) == float(needle):
                    return key
    return None


def first(
    values: Mapping | Iterable,
    callback: Callable[[Any], Any] | None = None,
    default: Any = None,
) -> Any:
    for _, value in _items(values):
        if callback is None or callback(value):
            return value
    return default


def last(
    values: Mapping | Iterable,
    callback: Callable[[Any], Any] | None = None,
    default: Any = None,
) -> Any:
    found = default
    for _, value in _items(values):
        if callback is None or callback(value):
            found = value
    return found


# ============================================================================
#                           Containment
# ============================================================================


def in_array_case_insensitive(needle: str, values: Iterable[str]) -> bool:
    lowered = needle.casefold()
    return any(str(value).casefold() == lowered for value in values)


def contains_any(needles: Iterable, haystack: Iterable) -> bool:
    """Return True if at least one needle is in the haystack."""
    pool = list(haystack)
    return any(needle in pool for needle in needles)


def contains_all(needles: Iterable, haystack: Iterable) -> bool:
    """Return True if every needle is in the haystack."""
    pool = list(haystack)
    return all(needle in pool for needle in needles)


# ============================================================================
#                           Transformation
# ============================================================================


def prepend_to_values(values: Mapping | list, prefix: str) -> Mapping | list:
    if isinstance(values, Mapping):
        return {key: f"{prefix}{value}" for key, value in values.items()}
    return [f"{prefix}{value}" for value in values]


def append_to_values(values: Mapping | list, suffix: str) -> Mapping | list:
    if isinstance(values, Mapping):
        return {key: f"{value}{suffix}" for key, value in values.items()}
    return [f"{value}{suffix}" for value in values]


def flatten(values: Mapping | Iterable, depth: float = math.inf) -> list:
    """Flatten nested lists/dicts (dict values only) up to ``depth`` levels."""
    result: list = []
    for _, item in _items(values):
        if isinstance(item, (list, tuple, Mapping)) and depth > 0:
            result.extend(flatten(item, depth - 1))
        else:
            result.append(item)
    return result


def pluck(
    rows: Mapping | Iterable,
    key_or_callback: KeyOrCallback,
    index_by: Hashable | None = None,
) -> list | dict:
    """Extract one field from every row.

    Args:
        rows: Rows (dicts or objects).
        key_or_callback: Field name, or a callable receiving the row.
        index_by: When set, return a dict keyed by this field of each row;
            rows without it are skipped.

    Returns:
        A list of extracted values, or a dict when ``index_by`` is given.
    """
    if index_by is None:
        return [_resolve(row, key_or_callback) for _, row in _items(rows)]

    result: dict = {}
    for _, row in _items(rows):
        index = _resolve(row, index_by)
        if index is not None:
            result[index] = _resolve(row, key_or_callback)
    return result


def key_by(rows: Mapping | Iterable, key_or_callback: KeyOrCallback) -> dict:
    """Index rows by a field (or callback result); later rows win on collision."""
    result: dict = {}
    for _, row in _items(rows):
        key = _resolve(row, key_or_callback)
        if key is not None:
            result[key] = row
    return result


def group_by(rows: Mapping | Iterable, key_or_callback: KeyOrCallback) -> dict[Any, list]:
    """Group rows by a field (or callback result); rows without it go under ``''``."""
    result: dict[Any, list] = {}
    for _, row in _items(rows):
        group = _resolve(row, key_or_callback, default="")
        if group is None:
            group = ""
        result.setdefault(group, []).append(row)
    return result


def partition(
    values: Mapping | Iterable, callback: Callable[[Any, Any], Any]
) -> tuple[list, list]:
    """Split values in two lists: those for which ``callback(value, key)`` is truthy, and the rest."""
    truthy: list = []
    falsy: list = []
    for key, value in _items(values):
        (truthy if callback(value, key) else falsy).append(value)
    return truthy, falsy


# ============================================================================
#                           Random selection
# ============================================================================


def get_random_value(values: Mapping | Iterable) -> Any:
    pool = [value for _, value in _items(values)]
    if not pool:
        return None
    return pool[secrets.randbelow(len(pool))]


def get_random_key(values: Mapping | Iterable) -> Any:
    keys = [key for key, _ in _items(values)]
    if not keys:
        return None
    return keys[secrets.randbelow(len(keys))]


# ============================================================================
#                           Parsing
# ============================================================================


def multi_explode(delimiters: list[str], string: str) -> list[str]:
    """Split ``string`` on any of the given delimiters."""
    if not delimiters:
        return [string]
    pattern = "|".join(re.escape(delimiter) for delimiter in delimiters)
    return re.split(pattern, string)


def string_to_keyed_array(string: str, delimiter: str = ",", kv: str = "=>") -> dict:
    """Parse ``"a=>1, b=>2, c"`` into ``{"a": "1", "b": "2", 0: "c"}``.

    Fragments without the key/value separator are appended under
    auto-incremented integer keys.
    """
    result: dict = {}
    next_index = 0
    for fragment in string.split(delimiter):
        if not fragment:
            continue
        position = fragment.find(kv)
        if position > 0:
            result[fragment[:position].strip()] = fragment[position + len(kv) :].strip()
        else:
            result[next_index] = fragment.strip()
            next_index += 1
    return result


def parse_list_by_callback(values: Iterable, callback: Callable[[Any], Any]) -> list:
    """Map ``callback`` over values and drop falsy results."""
    return [parsed for parsed in map(callback, values) if parsed]


def parse_enum_list(values: Iterable, enum_cls: type[E]) -> list[E]:
    """Convert raw values to ``enum_cls`` members, ignoring unknown values."""

    def _try_from(value: Any) -> E | None:
        try:
            return enum_cls(value)
        except ValueError:
            return None

    return [member for member in map(_try_from, values) if member is not None]


# ============================================================================
#                           Uniqueness
# ============================================================================


def unique_enums(values: Iterable[E]) -> list[E]:
    unique: dict[tuple[type, str], E] = {}
    for member in values:
        unique.setdefault((type(member), member.name), member)
    return list(unique.values())


def unique_by_callback(values: Iterable[T], callback: Callable[[T], Any]) -> list[T]:
    """Keep the first value for each distinct ``callback(value)``."""
    seen: list = []
    result: list[T] = []
    for value in values:
        marker = callback(value)
        if marker in seen:
            continue
        seen.append(marker)
        result.append(value)
    return result


# ============================================================================
#                           Extraction, maths, keys
# ============================================================================


def get_list_values_by_list_keys(
    mapping: Mapping, keys: Iterable[Hashable], default: Any = None
) -> dict:
    return {key: mapping[key] if mapping.get(key) is not None else default for key in keys}


def cumulative_sum(values: Iterable[float]) -> list[float]:
    total = 0
    result = []
    for value in values:
        total += value
        result.append(total)
    return result


def count_multi_arrays(*arrays: Mapping | list) -> int:
    """Return the total number of elements across all given lists/dicts."""
    return sum(len(array) for array in arrays)


def delete_list_keys(mapping: Mapping, keys: Iterable[Hashable]) -> dict:
    removed = set(keys)
    return {key: value for key, value in mapping.items() if key not in removed}


def delete_key(mapping: Mapping, key: Hashable) -> dict:
    return delete_list_keys(mapping, [key])


# ============================================================================
#                           Comparison
# ============================================================================


def compare_value(
    a: Any, b: Any, natural: bool = False, case_sensitive: bool = False
) -> int:
    """Three-way comparison used by sorts.

    Numbers (and numeric strings) compare numerically. Other values compare
    as strings, either lexicographically or in natural order (``"img2"`` <
    ``"img10"``). ``None`` sorts before anything else.

    Returns:
        -1, 0 or 1.
    """
    if a is None or b is None:
        return _sign((a is not None) - (b is not None))

    if is_numeric(a) and is_numeric(b):
        left_number, right_number = float(a), float(b)
        return (left_number > right_number) - (left_number < right_number)

    left, right = str(a), str(b)
    if not case_sensitive:
        left, right = left.casefold(), right.casefold()

    if natural:
        left_key, right_key = _natural_key(left), _natural_key(right)
        return (left_key > right_key) - (left_key < right_key)
    return (left > right) - (left < right)


# ============================================================================
#                           Permutations & combinations
# ============================================================================


def get_permutations(items: list[str]) -> list[str]:
    """Return every ordering of ``items``, each joined with a space.

    Lists with zero or one item are returned unchanged.
    """
    if len(items) <= 1:
        return list(items)

    result = []
    for index, head in enumerate(items):
        remaining = items[:index] + items[index + 1 :]
        result.extend(f"{head} {tail}" for tail in get_permutations(remaining))
    return result


def get_combinations(items: Iterable[str], size: int) -> list[str]:
    """Return the ``size``-item combinations of ``items``, each joined with a space."""
    pool = list(items)
    count = len(pool)

    if size <= 0 or size > count:
        return []
    if size == 1:
        return pool
    if size == count:
        return [" ".join(str(item) for item in pool)]

    result = []
    for index in range(count - size + 1):
        head = pool[index]
        result.extend(
            f"{head} {tail}" for tail in get_combinations(pool[index + 1 :], size - 1)
        )
    return result


def get_power_set(items: Iterable[T], include_empty: bool = True) -> list[list[T]]:
    """Return every subset of ``items``, ordered by bitmask (item ``j`` <-> bit ``j``)."""
    pool = list(items)
    result = []
    for mask in range(2 ** len(pool)):
        subset = [item for bit, item in enumerate(pool) if mask & (1 << bit)]
        if subset or include_empty:
            result.append(subset)
    return result
