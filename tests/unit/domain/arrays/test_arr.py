"""Unit tests for helperkit.domain.arrays.arr."""

from dataclasses import dataclass
from enum import Enum

import pytest

from helperkit.domain.arrays import arr


class Color(Enum):
    RED = "red"
    BLUE = "blue"


class Size(Enum):
    RED = "red"


@dataclass
class Person:
    name: str
    age: int


PEOPLE = [
    {"id": 1, "name": "Alice", "team": "a"},
    {"id": 2, "name": "Bob", "team": "b"},
    {"id": 3, "name": "Carol", "team": "a"},
    {"id": 4, "name": "Dan"},
]


# --- Creation ---


def test_array_with_same_values():
    assert arr.get_array_with_same_values("x", 3) == ["x", "x", "x"]
    assert arr.get_array_with_same_values("x", -1) == []


def test_numeric_ranges_are_inclusive():
    assert arr.get_array_with_numeric_values(1, 5) == [1, 2, 3, 4, 5]
    assert arr.get_array_with_numeric_values(0, 10, 5) == [0, 5, 10]
    assert arr.get_array_with_nb_numeric_values(3, begin=10, step=2) == [10, 12, 14]


def test_numeric_range_rejects_non_positive_step():
    with pytest.raises(ValueError):
        arr.get_array_with_numeric_values(1, 5, 0)


def test_wrap_and_unwrap():
    assert arr.wrap(None) == []
    assert arr.wrap(3) == [3]
    assert arr.wrap([1, 2]) == [1, 2]
    assert arr.unwrap([7]) == 7
    assert arr.unwrap([1, 2]) == [1, 2]


# --- Search ---


@pytest.mark.parametrize(
    ("method", "expected"),
    [("default", 9), ("higher", 12), ("lower", 9)],
)
def test_get_closest(method, expected):
    assert arr.get_closest(10, [1, 9, 12, 20], method) == expected


def test_get_closest_without_candidate():
    assert arr.get_closest(10, [1, 2], "higher") is None
    assert arr.get_closest(10, []) is None


def test_search_by_callback_returns_key():
    assert arr.search_by_callback([3, 8, 10], lambda value: value > 5) == 1
    assert arr.search_by_callback({"a": 1, "b": 6}, lambda value: value > 5) == "b"
    assert arr.search_by_callback([1], lambda value: value > 5) is None


def test_search_by_values_strictness():
    assert arr.search_by_values([1, 2, 3], ["2"]) is None
    assert arr.search_by_values([1, 2, 3], ["2"], strict=False) == 1
    # needle order wins over position
    assert arr.search_by_values(["a", "b"], ["b", "a"]) == 1


def test_first_and_last():
    assert arr.first([1, 2, 3, 4], lambda value: value % 2 == 0) == 2
    assert arr.last([1, 2, 3, 4], lambda value: value % 2 == 0) == 4
    assert arr.first([], default="none") == "none"
    assert arr.last({"a": 1, "b": 2}) == 2


def test_containment():
    assert arr.in_array_case_insensitive("PARIS", ["Lyon", "paris"])
    assert not arr.in_array_case_insensitive("Nice", ["Lyon"])
    assert arr.contains_any([5, 2], [1, 2, 3])
    assert not arr.contains_any([5], [1, 2, 3])
    assert arr.contains_all([1, 3], [1, 2, 3])
    assert not arr.contains_all([1, 4], [1, 2, 3])


def test_is_numeric():
    assert arr.is_numeric("12")
    assert arr.is_numeric("-1.5e3")
    assert arr.is_numeric(4.2)
    assert not arr.is_numeric(True)
    assert not arr.is_numeric("abc")
    assert not arr.is_numeric(" ")


@pytest.mark.parametrize("value", ["nan", "Nan", "inf", "-Infinity", "1_000", "١٢", "1e", "."])
def test_is_numeric_rejects_non_decimal_spellings(value):
    assert not arr.is_numeric(value)


# --- Transformation ---


def test_prepend_and_append_keep_keys():
    assert arr.prepend_to_values(["a", "b"], "x-") == ["x-a", "x-b"]
    assert arr.append_to_values({"k": "v"}, "!") == {"k": "v!"}


def test_flatten_respects_depth():
    nested = [1, [2, [3, 4]], {"a": 5}]
    assert arr.flatten(nested) == [1, 2, 3, 4, 5]
    assert arr.flatten(nested, depth=1) == [1, 2, [3, 4], 5]


def test_pluck_from_dicts_and_objects():
    assert arr.pluck(PEOPLE, "name") == ["Alice", "Bob", "Carol", "Dan"]
    assert arr.pluck(PEOPLE, "name", index_by="id")[3] == "Carol"
    people = [Person("Eve", 30), Person("Finn", 40)]
    assert arr.pluck(people, "age") == [30, 40]
    assert arr.pluck(people, lambda person: person.name.upper()) == ["EVE", "FINN"]


def test_key_by_and_group_by():
    assert arr.key_by(PEOPLE, "id")[2]["name"] == "Bob"
    groups = arr.group_by(PEOPLE, "team")
    assert [row["id"] for row in groups["a"]] == [1, 3]
    assert [row["id"] for row in groups[""]] == [4]


def test_partition_passes_value_and_key():
    evens, odds = arr.partition([1, 2, 3, 4], lambda value, key: value % 2 == 0)
    assert evens == [2, 4]
    assert odds == [1, 3]
    first_half, _ = arr.partition(["a", "b", "c"], lambda value, key: key < 2)
    assert first_half == ["a", "b"]
    kept, dropped = arr.partition({"x": 1, "y": 2}, lambda value, key: key == "y")
    assert kept == [2]
    assert dropped == [1]


def test_random_selection():
    values = {"a": 1, "b": 2}
    assert arr.get_random_value(values) in (1, 2)
    assert arr.get_random_key(values) in ("a", "b")
    assert arr.get_random_value([]) is None
    assert arr.get_random_key([]) is None


# --- Parsing ---


def test_multi_explode():
    assert arr.multi_explode([",", ";", "|"], "a,b;c|d") == ["a", "b", "c", "d"]
    assert arr.multi_explode([], "a,b") == ["a,b"]


def test_string_to_keyed_array():
    assert arr.string_to_keyed_array("a=>1, b=>2, c") == {"a": "1", "b": "2", 0: "c"}
    assert arr.string_to_keyed_array("x:1;y", delimiter=";", kv=":") == {"x": "1", 0: "y"}


def test_parse_enum_list_skips_unknown_values():
    assert arr.parse_enum_list(["red", "green", "blue"], Color) == [Color.RED, Color.BLUE]


def test_parse_list_by_callback_drops_falsy_results():
    assert arr.parse_list_by_callback(["1", "x", "3"], lambda v: int(v) if v.isdigit() else None) == [1, 3]


# --- Uniqueness ---


def test_unique_enums_distinguishes_enum_classes():
    assert arr.unique_enums([Color.RED, Color.RED, Size.RED, Color.BLUE]) == [
        Color.RED,
        Size.RED,
        Color.BLUE,
    ]


def test_unique_by_callback_keeps_first():
    words = ["apple", "avocado", "banana", "blueberry", "cherry"]
    assert arr.unique_by_callback(words, lambda word: word[0]) == ["apple", "banana", "cherry"]


# --- Extraction and maths ---


def test_get_list_values_by_list_keys_uses_default_for_missing_or_null():
    mapping = {"a": 1, "b": None}
    assert arr.get_list_values_by_list_keys(mapping, ["a", "b", "c"], 0) == {"a": 1, "b": 0, "c": 0}


def test_cumulative_sum_and_counts():
    assert arr.cumulative_sum([1, 2, 3, 4]) == [1, 3, 6, 10]
    assert arr.cumulative_sum([]) == []
    assert arr.count_multi_arrays([1, 2], {"a": 1}, []) == 3


def test_delete_keys():
    mapping = {"a": 1, "b": 2, "c": 3}
    assert arr.delete_list_keys(mapping, ["a", "c"]) == {"b": 2}
    assert arr.delete_key(mapping, "b") == {"a": 1, "c": 3}
    assert mapping == {"a": 1, "b": 2, "c": 3}


# --- Comparison ---


@pytest.mark.parametrize(
    ("a", "b", "kwargs", "expected"),
    [
        (2, 10, {}, -1),
        ("2", "10", {}, -1),
        ("img2", "img10", {}, 1),
        ("img2", "img10", {"natural": True}, -1),
        ("abc", "ABC", {}, 0),
        ("abc", "ABC", {"case_sensitive": True}, 1),
        (None, "a", {}, -1),
        ("a", None, {}, 1),
        (None, None, {}, 0),
        ("Nan", "Inf", {}, 1),
        ("1_000", "2", {}, -1),
    ],
)
def test_compare_value(a, b, kwargs, expected):
    assert arr.compare_value(a, b, **kwargs) == expected


# --- Combinatorics ---


def test_permutations():
    assert arr.get_permutations(["a", "b"]) == ["a b", "b a"]
    assert len(arr.get_permutations(["a", "b", "c"])) == 6
    assert arr.get_permutations(["solo"]) == ["solo"]


def test_combinations():
    assert arr.get_combinations(["a", "b", "c"], 2) == ["a b", "a c", "b c"]
    assert arr.get_combinations(["a", "b", "c"], 3) == ["a b c"]
    assert arr.get_combinations(["a", "b"], 3) == []
    assert arr.get_combinations(["a", "b"], 0) == []


def test_power_set():
    assert arr.get_power_set([1, 2]) == [[], [1], [2], [1, 2]]
    assert arr.get_power_set([1, 2], include_empty=False) == [[1], [2], [1, 2]]
