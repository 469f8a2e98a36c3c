"""Tests for NamedTuple (core/named.py)."""

from __future__ import annotations

import copy
import pickle

import pytest

from ax_tuple import NamedTuple
from ax_tuple.exceptions import TupleTypeError


def _person() -> NamedTuple:
    return NamedTuple.of({"name": "John", "age": 30})


# ---------------------------------------------------------------------------
# Construction and size
# ---------------------------------------------------------------------------

class TestConstruction:
    def test_size(self) -> None:
        assert NamedTuple.of({}).size() == 0
        assert NamedTuple.of({"key1": "value1"}).size() == 1
        assert len(_person()) == 2

    def test_caller_mapping_is_copied(self) -> None:
        source: dict[str, object] = {"id": 1}
        nt = NamedTuple.of(source)
        before = hash(nt)

        source["id"] = 2
        source["extra"] = True

        assert nt.get_object("id") == 1
        assert nt.size() == 1
        assert hash(nt) == before

    def test_fields_are_read_only(self) -> None:
        nt = _person()
        with pytest.raises(TypeError):
            nt.fields["name"] = "Jane"  # type: ignore[index]

    def test_frozen(self) -> None:
        nt = _person()
        with pytest.raises(AttributeError):
            nt.fields = {}  # type: ignore[misc]

    def test_none_mapping_fails(self) -> None:
        with pytest.raises(TypeError):
            NamedTuple.of(None)  # type: ignore[arg-type]

    def test_key_protocol(self) -> None:
        nt = _person()
        assert "name" in nt
        assert "missing" not in nt
        assert list(nt) == ["name", "age"]
        assert set(nt.keys()) == {"name", "age"}
        assert dict(nt.items()) == {"name": "John", "age": 30}


# ---------------------------------------------------------------------------
# Accessors
# ---------------------------------------------------------------------------

class TestAccessors:
    def test_get_object(self) -> None:
        nt = _person()
        assert nt.get_object("name") == "John"
        assert nt.get_object("age") == 30

    def test_get_object_missing_returns_none(self) -> None:
        assert _person().get_object("nonexistent") is None

    def test_untyped_get(self) -> None:
        nt = _person()
        assert nt.get("name") == "John"
        assert nt.get("age") == 30
        assert nt.get("nonexistent") is None

    def test_typed_get(self) -> None:
        nt = _person()
        assert nt.get("name", str) == "John"
        assert nt.get("age", int) == 30

    def test_typed_get_missing_returns_none(self) -> None:
        assert _person().get("nonexistent", int) is None

    def test_typed_get_mismatch(self) -> None:
        with pytest.raises(TupleTypeError, match="key 'name' is str, not int"):
            _person().get("name", int)


# ---------------------------------------------------------------------------
# String form
# ---------------------------------------------------------------------------

class TestToString:
    def test_single_pair(self) -> None:
        nt = NamedTuple.of({"key": "value"})
        assert str(nt) == "{key=value}"
        assert nt.to_string() == "{key=value}"

    def test_insertion_order_is_kept_for_display(self) -> None:
        nt = NamedTuple.of({"Region": "North", "Year": 2023})
        assert str(nt) == "{Region=North, Year=2023}"

    def test_empty(self) -> None:
        assert str(NamedTuple.of({})) == "{}"


# ---------------------------------------------------------------------------
# Equality and hashing
# ---------------------------------------------------------------------------

class TestEqualityAndHash:
    def test_equal_content(self) -> None:
        nt1 = NamedTuple.of({"k1": "v1"})
        nt2 = NamedTuple.of({"k1": "v1"})
        assert nt1 == nt2
        assert hash(nt1) == hash(nt2)

    def test_different_value(self) -> None:
        assert NamedTuple.of({"k1": "v1"}) != NamedTuple.of({"k1": "v2"})

    def test_different_keys(self) -> None:
        assert NamedTuple.of({"k1": "v1"}) != NamedTuple.of({"k2": "v1"})

    def test_not_equal_to_other_types(self) -> None:
        nt = NamedTuple.of({"k1": "v1"})
        assert nt != None  # noqa: E711
        assert nt != object()
        assert nt != {"k1": "v1"}

    def test_insertion_order_is_irrelevant(self) -> None:
        first = NamedTuple.of({"Region": "North", "Year": 2023, "Product": "Widget A"})
        second = NamedTuple.of({"Product": "Widget A", "Year": 2023, "Region": "North"})
        assert list(first) != list(second)
        assert first == second
        assert hash(first) == hash(second)

    def test_unhashable_value(self) -> None:
        with pytest.raises(TypeError):
            hash(NamedTuple.of({"tags": ["a"]}))


class TestDictKeyUsage:
    def test_interchangeable_keys(self) -> None:
        table: dict[NamedTuple, str] = {}
        key1 = NamedTuple.of({"id": 1})
        key2 = NamedTuple.of({"id": 1})
        key3 = NamedTuple.of({"id": 2})

        table[key1] = "value1"
        assert key2 in table
        assert table[key2] == "value1"

        table[key2] = "value2"
        assert len(table) == 1
        assert table[key1] == "value2"
        assert key3 not in table


class TestCopyAndPickle:
    def test_deepcopy(self) -> None:
        nt = NamedTuple.of({"Region": "North", "Year": 2023})
        clone = copy.deepcopy(nt)
        assert clone == nt
        assert hash(clone) == hash(nt)
        assert clone.get("Year", int) == 2023

    def test_deepcopy_of_keyed_dict(self) -> None:
        table = {NamedTuple.of({"Region": "North"}): 1500.0}
        clone = copy.deepcopy(table)
        assert clone[NamedTuple.of({"Region": "North"})] == 1500.0

    def test_pickle_round_trip(self) -> None:
        nt = NamedTuple.of({"Region": "North", "Product": "Widget A"})
        restored = pickle.loads(pickle.dumps(nt))
        assert restored == nt
        assert str(restored) == str(nt)
        with pytest.raises(TypeError):
            restored.fields["Region"] = "South"  # type: ignore[index]


class TestInvalidTypeMarker:
    @pytest.mark.parametrize("key", ["present", "absent"])
    def test_parameterised_generic_rejected(self, key: str) -> None:
        nt = NamedTuple.of({"present": [1, 2]})
        with pytest.raises(TupleTypeError, match="Invalid type marker"):
            nt.get(key, list[int])  # type: ignore[arg-type]
