from typing import Any

import pytest

from docpath.document import (
    array_append,
    array_insert,
    array_length,
    array_pop,
    array_prepend,
    array_trim,
)
from docpath.errors import (
    IndexOutOfBoundsError,
    PathNotFoundError,
    TypeMismatchError,
)
from docpath.path import parse_path


@pytest.fixture
def doc() -> dict[str, Any]:
    return {"x": [1, 2, 3], "name": "docpath", "empty": [], "meta": None, "obj": {}}


def test_append_and_prepend(doc) -> None:
    array_append(doc, parse_path("x"), 4)
    array_prepend(doc, parse_path("x"), 0)

    assert doc["x"] == [0, 1, 2, 3, 4]


def test_append_stores_a_copy(doc) -> None:
    value = {"tags": ["a"]}
    array_append(doc, parse_path("x"), value)
    value["tags"].append("b")

    assert doc["x"][-1] == {"tags": ["a"]}


def test_append_creates_missing_array(doc) -> None:
    array_append(doc, parse_path("new.list"), "first")
    array_append(doc, parse_path("meta"), "m")
    array_prepend(doc, parse_path("obj"), "o")

    assert doc["new"] == {"list": ["first"]}
    assert doc["meta"] == ["m"]
    assert doc["obj"] == ["o"]


def test_append_on_null_document() -> None:
    assert array_append(None, (), 1) == [1]


def test_append_without_create_path(doc) -> None:
    with pytest.raises(PathNotFoundError):
        array_append(doc, parse_path("new.list"), 1, create_path=False)
    with pytest.raises(TypeMismatchError):
        array_append(doc, parse_path("meta"), 1, create_path=False)
    assert "new" not in doc
    assert doc["meta"] is None


def test_append_to_non_array_fails(doc) -> None:
    with pytest.raises(TypeMismatchError) as exc_info:
        array_append(doc, parse_path("name"), "x")

    assert exc_info.value.expected == "array"
    assert exc_info.value.actual == "string"
    assert doc["name"] == "docpath"


def test_failed_append_rolls_back_created_path(doc) -> None:
    with pytest.raises(TypeMismatchError):
        array_append(doc, parse_path("name.list"), 1)
    with pytest.raises(TypeMismatchError):
        array_append({"a": {"b": 1}}, parse_path("a.b"), 1)

    assert doc["name"] == "docpath"


def test_insert_positions(doc) -> None:
    array_insert(doc, parse_path("x"), 0, "start")
    array_insert(doc, parse_path("x"), 2, "middle")
    array_insert(doc, parse_path("x"), 5, "end")

    assert doc["x"] == ["start", 1, "middle", 2, 3, "end"]


def test_insert_minus_one_appends(doc) -> None:
    array_insert(doc, parse_path("x"), -1, 4)

    assert doc["x"] == [1, 2, 3, 4]


def test_insert_rejects_other_negative_indices(doc) -> None:
    with pytest.raises(IndexOutOfBoundsError) as exc_info:
        array_insert(doc, parse_path("x"), -2, 4)

    assert exc_info.value.index == -2
    assert exc_info.value.length == 3
    assert doc["x"] == [1, 2, 3]


def test_insert_past_end_fails(doc) -> None:
    with pytest.raises(IndexOutOfBoundsError):
        array_insert(doc, parse_path("x"), 4, "x")
    assert doc["x"] == [1, 2, 3]


def test_failed_insert_rolls_back_created_array(doc) -> None:
    with pytest.raises(IndexOutOfBoundsError):
        array_insert(doc, parse_path("created"), 3, "x")

    assert "created" not in doc


def test_pop_defaults_to_last(doc) -> None:
    assert array_pop(doc, parse_path("x")) == 3
    assert doc["x"] == [1, 2]


def test_pop_by_index(doc) -> None:
    assert array_pop(doc, parse_path("x"), 0) == 1
    assert array_pop(doc, parse_path("x"), -2) == 2
    assert doc["x"] == [3]


def test_pop_out_of_bounds(doc) -> None:
    with pytest.raises(IndexOutOfBoundsError):
        array_pop(doc, parse_path("x"), 3)
    with pytest.raises(IndexOutOfBoundsError):
        array_pop(doc, parse_path("x"), -4)
    with pytest.raises(IndexOutOfBoundsError):
        array_pop(doc, parse_path("empty"))
    assert doc["x"] == [1, 2, 3]


def test_pop_requires_existing_array(doc) -> None:
    with pytest.raises(PathNotFoundError):
        array_pop(doc, parse_path("missing"))
    with pytest.raises(TypeMismatchError):
        array_pop(doc, parse_path("name"))


@pytest.mark.parametrize(
    ("start", "stop", "expected"),
    [
        (0, 1, [1, 2]),
        (1, -1, [2, 3]),
        (-2, 10, [2, 3]),
        (-10, 0, [1]),
        (2, 1, []),
        (5, 10, []),
    ],
)
def test_trim(doc, start, stop, expected) -> None:
    assert array_trim(doc, parse_path("x"), start, stop) == len(expected)
    assert doc["x"] == expected


def test_trim_requires_array(doc) -> None:
    with pytest.raises(TypeMismatchError):
        array_trim(doc, parse_path("name"), 0, 1)


def test_length(doc) -> None:
    assert array_length(doc, parse_path("x")) == 3
    assert array_length(doc, parse_path("empty")) == 0
    with pytest.raises(TypeMismatchError):
        array_length(doc, parse_path("obj"))
    with pytest.raises(PathNotFoundError):
        array_length(doc, parse_path("missing"))


def test_append_to_string_node_is_a_type_mismatch() -> None:
    doc = {"n": "not-an-array"}

    with pytest.raises(TypeMismatchError):
        array_append(doc, parse_path("n"), 1)
    assert doc == {"n": "not-an-array"}
