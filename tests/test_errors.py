"""Tests for the error hierarchy, the error sink and the read-only guard."""

from __future__ import annotations

import pytest

from recordkit import (
    KeyedCollection,
    OrderedCollection,
    ReadOnlyViolation,
    RecordkitError,
    RecordStore,
    raise_violation,
    set_error_sink,
)
from recordkit.errors import MESSAGES, get_error_sink, log_violation


class TestViolation:
    def test_hierarchy_and_code(self):
        violation = ReadOnlyViolation(RecordStore(), "put")
        assert isinstance(violation, RecordkitError)
        assert violation.code == "READ_ONLY"
        assert violation.message == MESSAGES["record"]["put"]
        assert str(violation) == violation.message

    def test_kind_follows_container(self):
        assert ReadOnlyViolation(OrderedCollection(), "cut").kind == "collection"
        assert ReadOnlyViolation(KeyedCollection(), "cut").kind == "keyed"

    def test_unknown_action_message(self):
        violation = ReadOnlyViolation(RecordStore(), "rename")
        assert violation.message == "Cannot rename this record, it is read only."

    def test_base_error_defaults_code(self):
        assert RecordkitError("boom").code == "RecordkitError"


class TestSink:
    def test_default_sink_logs(self):
        assert get_error_sink() is log_violation

    def test_custom_sink_result_is_returned(self):
        seen = []

        def sink(violation):
            seen.append((violation.kind, violation.action))
            return "rejected"

        previous = set_error_sink(sink)
        assert previous is log_violation
        store = RecordStore({"a": 1}, {"read_only": True})
        assert store.put("a", 2) == "rejected"
        assert seen == [("record", "put")]
        assert store.get("a") == 1

    def test_violation_carries_container(self):
        captured = []
        set_error_sink(captured.append)
        collection = OrderedCollection([1], None, {"read_only": True})
        collection.touch(lambda x: x)
        assert captured[0].container is collection
        assert captured[0].action == "touch"

    def test_raising_sink(self):
        set_error_sink(raise_violation)
        collection = OrderedCollection([1, 2], None, {"readOnly": True})
        with pytest.raises(ReadOnlyViolation, match="read only"):
            collection.put(3)
        assert collection.all() == [1, 2]

    def test_none_restores_default(self):
        set_error_sink(raise_violation)
        assert set_error_sink(None) is raise_violation
        assert get_error_sink() is log_violation


class TestGuardWiring:
    @pytest.mark.parametrize(
        "cls, names",
        [
            (RecordStore, ("put", "remove", "take", "clear", "upsert")),
            (OrderedCollection, ("put", "cut", "erase", "touch", "unique")),
            (KeyedCollection, ("put", "cut", "touch")),
        ],
    )
    def test_mutators_are_wrapped(self, cls, names):
        for name in names:
            assert cls.__dict__[name].__guarded__ == name

    def test_reads_are_not_wrapped(self):
        for name in ("get", "all", "count", "each", "first_of"):
            assert not hasattr(getattr(KeyedCollection, name), "__guarded__")
            assert not hasattr(getattr(OrderedCollection, name), "__guarded__")

    def test_wrapped_keeps_name_and_doc(self):
        assert OrderedCollection.cut.__name__ == "cut"
        assert "Remove entries" in OrderedCollection.cut.__doc__
