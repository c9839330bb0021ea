"""Tests for the Recordkit factory."""

from __future__ import annotations

import pytest

from recordkit import (
    ContainerKind,
    KeyedCollection,
    OrderedCollection,
    Recordkit,
    RecordStore,
)


class TestInferredKind:
    def test_mapping_gives_record(self):
        store = Recordkit.create({"name": "John"})
        assert type(store) is RecordStore
        assert store.get("name") == "John"

    def test_none_gives_empty_record(self):
        store = Recordkit.create()
        assert type(store) is RecordStore
        assert store.all() == {}

    def test_list_gives_collection(self):
        collection = Recordkit.create(["apple", "banana"], intake=str.upper)
        assert type(collection) is OrderedCollection
        assert collection.all() == ["APPLE", "BANANA"]

    def test_tuple_gives_collection(self):
        collection = Recordkit.create((1, 2))
        assert type(collection) is OrderedCollection
        assert collection.all() == [1, 2]

    def test_empty_mapping_marker_is_plain_data(self):
        collection = Recordkit.create([{}])
        assert type(collection) is OrderedCollection
        assert collection.all() == [{}]

    def test_records_in_a_list_stay_a_collection(self):
        assert type(Recordkit.create([{"city": "Paris"}])) is OrderedCollection

    def test_unsupported_payload(self):
        with pytest.raises(TypeError, match="explicit kind"):
            Recordkit.create(42)


class TestExplicitKind:
    def test_keyed(self):
        keyed = Recordkit.create(
            [{"city": "Paris"}], ContainerKind.KEYED, definitions={"country": "France"}
        )
        assert type(keyed) is KeyedCollection
        assert keyed.raw_all() == [{"city": "Paris", "country": "France"}]

    def test_kind_as_string(self):
        assert type(Recordkit.create(None, "keyed")) is KeyedCollection
        assert type(Recordkit.create([], "collection")) is OrderedCollection

    def test_record_kind(self):
        store = Recordkit.create({"a": 1}, kind=ContainerKind.RECORD, options={"readOnly": True})
        assert store.read_only

    def test_unknown_kind(self):
        with pytest.raises(ValueError):
            Recordkit.create([], "table")

    def test_options_forwarded(self):
        collection = Recordkit.create(
            [1],
            ContainerKind.COLLECTION,
            intake=lambda x: x + 1,
            options={"apply_intake_on_new_entries": True},
        )
        collection.put(5)
        assert collection.all() == [2, 6]


class TestConstructors:
    def test_record(self):
        assert Recordkit.record({"a": 1}).get("a") == 1

    def test_collection(self):
        assert Recordkit.collection([1, 2], lambda x: -x).all() == [-1, -2]

    def test_keyed(self):
        keyed = Recordkit.keyed([], {"age": 19})
        keyed.put({"name": "Aya"})
        assert keyed.raw_all() == [{"name": "Aya", "age": 19}]

    def test_kind_of(self):
        assert Recordkit.kind_of({}) is ContainerKind.RECORD
        assert Recordkit.kind_of([]) is ContainerKind.COLLECTION
