import logging

import pytest
from pydantic import ValidationError

from dictum.core.dictionary import Dict
from dictum.core.maybe import Just, Nothing


@pytest.fixture
def hash_map():
    return {"one": 1, "two": 2}


@pytest.fixture
def dict_(hash_map):
    return Dict.from_hash_map(hash_map)


MR_PB = "ooooh weee!"


# --- Construction ---


def test_empty():
    d = Dict.empty()
    assert isinstance(d, Dict)
    assert Dict.is_empty(d)
    assert Dict.size(d) == 0


def test_singleton():
    key = "python-is-awesome"
    d = Dict.singleton(key, True)
    assert isinstance(d, Dict)
    assert Dict.get(key, d) == Just(True)
    assert Dict.size(d) == 1


def test_singleton_curried():
    assert Dict.singleton("a")(1) == Dict.singleton("a", 1)


def test_from_hash_map(dict_, hash_map):
    assert isinstance(dict_, Dict)
    assert Dict.to_hash_map(dict_) == hash_map


def test_from_hash_map_copies_source(hash_map):
    d = Dict.from_hash_map(hash_map)
    hash_map["three"] = 3
    hash_map["one"] = 100

    assert Dict.to_hash_map(d) == {"one": 1, "two": 2}
    assert Dict.get("three", d) == Nothing()


@pytest.mark.parametrize("bad_input", [[1, 2, 3], "not a map", {1: "int key"}, None])
def test_from_hash_map_rejects_non_string_mapping(bad_input):
    with pytest.raises(ValidationError):
        Dict.from_hash_map(bad_input)  # type: ignore[arg-type]


def test_from_list():
    d = Dict.from_list([("a", 1), ("b", 2)])
    assert Dict.to_hash_map(d) == {"a": 1, "b": 2}
    assert Dict.keys(d) == ("a", "b")


def test_from_list_last_write_wins():
    d = Dict.from_list([("a", 1), ("b", 2), ("a", 3)])
    assert Dict.get("a", d) == Just(3)
    assert Dict.size(d) == 2


def test_from_list_logs_overridden_keys(caplog):
    logger = logging.getLogger("dictum")
    logger.propagate = True
    try:
        with caplog.at_level(logging.DEBUG, logger="dictum"):
            Dict.from_list([("a", 1), ("a", 2)])
    finally:
        logger.propagate = False
    assert "folded 2 pairs into 1 keys" in caplog.text


def test_from_list_rejects_malformed_pairs():
    with pytest.raises(ValidationError):
        Dict.from_list([("a", 1, 2)])  # type: ignore[list-item]
    with pytest.raises(ValidationError):
        Dict.from_list([(1, "a")])  # type: ignore[list-item]


def test_to_list_round_trip(dict_):
    assert Dict.to_list(dict_) == [("one", 1), ("two", 2)]
    assert Dict.from_list(Dict.to_list(dict_)) == dict_


# --- Query ---


def test_get_present(dict_, hash_map):
    assert Dict.get("one", dict_) == Just(hash_map["one"])


def test_get_missing(dict_):
    result = Dict.get("not-a-currently-valid-key")(dict_)
    assert result == Nothing()
    assert not hasattr(result, "value")


def test_get_present_none_value():
    d = Dict.singleton("empty", None)
    assert Dict.get("empty", d) == Just(None)


def test_member():
    key = "noob-noob"
    assert Dict.member(key, Dict.singleton(key, "gd!")) is True
    assert Dict.member(key)(Dict.empty()) is False


def test_is_empty():
    assert Dict.is_empty(Dict.empty()) is True
    assert Dict.is_empty(Dict.singleton("something", 7)) is False


def test_size(dict_, hash_map):
    assert Dict.size(dict_) == len(hash_map)


SAMPLE_DICTS = [
    pytest.param(Dict.empty(), id="empty"),
    pytest.param(Dict.singleton("solo", 1), id="singleton"),
    pytest.param(Dict.from_hash_map({"one": 1, "two": 2, "three": None}), id="multi"),
]


@pytest.mark.parametrize("d", SAMPLE_DICTS)
def test_size_matches_keys_and_values(d):
    assert Dict.size(d) == len(Dict.keys(d)) == len(Dict.values(d))


@pytest.mark.parametrize("d", SAMPLE_DICTS)
def test_insert_then_remove_new_key_restores_content(d):
    key = "never-seen-before"
    assert not Dict.member(key, d)

    restored = Dict.remove(key, Dict.insert(key, "temporary", d))

    assert Dict.to_hash_map(restored) == Dict.to_hash_map(d)


@pytest.mark.parametrize("d", SAMPLE_DICTS)
@pytest.mark.parametrize("key", ["solo", "one", "missing"])
def test_remove_is_idempotent(d, key):
    once = Dict.remove(key, d)
    assert Dict.remove(key, once) == once
    assert Dict.to_hash_map(Dict.remove(key, once)) == Dict.to_hash_map(once)


def test_keys_and_values_aligned(dict_, hash_map):
    assert Dict.keys(dict_) == tuple(hash_map.keys())
    assert Dict.values(dict_) == tuple(hash_map.values())
    assert dict(zip(Dict.keys(dict_), Dict.values(dict_))) == hash_map


def test_to_hash_map_is_a_copy(dict_):
    exported = Dict.to_hash_map(dict_)
    exported["one"] = -1
    exported["three"] = 3
    del exported["two"]

    assert Dict.to_hash_map(dict_) == {"one": 1, "two": 2}
    assert Dict.get("one", dict_) == Just(1)
    assert Dict.get("three", dict_) == Nothing()


# --- Transformation ---


def test_insert_collision():
    key = "foo"
    d = Dict.singleton(key, 7)
    updated = Dict.insert(key, 3, d)
    assert Dict.get(key, updated) == Just(3)
    assert Dict.get(key, d) == Just(7)


def test_insert_new_key():
    d = Dict.empty()
    updated = Dict.insert("foo", 3, d)
    assert Dict.get("foo", updated) == Just(3)
    assert Dict.is_empty(d)


def test_insert_overwrite_keeps_position(dict_):
    updated = Dict.insert("one", 10, dict_)
    assert Dict.keys(updated) == ("one", "two")


def test_update_present():
    d = Dict.singleton(MR_PB, "some lowercase")
    updated = Dict.update(MR_PB, str.upper, d)
    assert Dict.get(MR_PB, updated) == Just("SOME LOWERCASE")
    assert Dict.get(MR_PB, d) == Just("some lowercase")


def test_update_missing_is_noop(dict_):
    calls = []

    def transform(value):
        calls.append(value)
        return value

    updated = Dict.update(MR_PB, transform)(dict_)

    assert updated == dict_
    assert Dict.to_hash_map(updated) == Dict.to_hash_map(dict_)
    assert calls == []


def test_remove_present():
    d = Dict.singleton(MR_PB, "foo")
    assert Dict.get(MR_PB, d) == Just("foo")

    updated = Dict.remove(MR_PB)(d)

    assert Dict.get(MR_PB, updated) == Nothing()
    assert Dict.get(MR_PB, d) == Just("foo")


def test_remove_missing_is_noop(dict_):
    assert Dict.remove(MR_PB, Dict.empty()) == Dict.empty()
    assert Dict.remove(MR_PB, dict_) == dict_


def test_map(dict_, hash_map):
    def double_and_explain(key, val):
        return f"The value for key {key} is now {val * 2}"

    updated = Dict.map(double_and_explain, dict_)

    expected = tuple(double_and_explain(key, val) for key, val in hash_map.items())
    assert Dict.values(updated) == expected
    assert Dict.keys(updated) == Dict.keys(dict_)
    assert Dict.values(dict_) == (1, 2)


def test_filter(dict_):
    evens = Dict.filter(lambda _key, val: val % 2 == 0, dict_)
    assert Dict.to_hash_map(evens) == {"two": 2}


def test_filter_always_true_and_always_false(dict_):
    assert Dict.filter(lambda *_: True, dict_) == dict_
    assert Dict.is_empty(Dict.filter(lambda *_: False)(dict_))


def test_reduce_sum(dict_):
    assert Dict.reduce(lambda _key, val, accum: val + accum, 10, dict_) == 13


def test_reduce_follows_insertion_order():
    d = Dict.from_list([("c", 3), ("a", 1), ("b", 2)])
    assert Dict.reduce(lambda key, _val, accum: accum + key, "", d) == "cab"


def test_reduce_empty_returns_initial():
    assert Dict.reduce(lambda *_: pytest.fail("should not be called"), 42, Dict.empty()) == 42


def test_union_prefers_first(dict_):
    other = Dict.from_hash_map({"three": 3, "two": 2000000})

    result = Dict.union(dict_, other)

    assert Dict.to_hash_map(result) == {"one": 1, "two": 2, "three": 3}
    assert Dict.get("two", other) == Just(2000000)


def test_union_order():
    first = Dict.from_list([("a", 1), ("b", 2)])
    second = Dict.from_list([("b", 20), ("c", 30)])
    assert Dict.keys(Dict.union(first, second)) == ("b", "c", "a")


# --- Python protocol ---


def test_protocol(dict_):
    assert len(dict_) == 2
    assert "one" in dict_
    assert "three" not in dict_
    assert list(dict_) == ["one", "two"]
    assert repr(dict_) == "Dict({'one': 1, 'two': 2})"


def test_equality_ignores_order():
    assert Dict.from_list([("a", 1), ("b", 2)]) == Dict.from_list([("b", 2), ("a", 1)])
    assert Dict.singleton("a", 1) != Dict.singleton("a", 2)
    assert Dict.singleton("a", 1) != {"a": 1}


def test_hash_consistent_with_equality():
    first = Dict.from_list([("a", 1), ("b", 2)])
    second = Dict.from_list([("b", 2), ("a", 1)])
    assert hash(first) == hash(second)
    assert len({first, second}) == 1


def test_no_item_assignment(dict_):
    with pytest.raises(TypeError):
        dict_["one"] = 5  # type: ignore[index]
    assert Dict.get("one", dict_) == Just(1)


def test_direct_construction_rejects_entries():
    with pytest.raises(ValidationError):
        Dict(one=1)  # type: ignore[call-arg]
    assert Dict() == Dict.empty()
