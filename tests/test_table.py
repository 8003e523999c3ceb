import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from compactdict.table import Table, TableFullError


def _zero_hash(key):
    return 0


def test_update_and_get():
    table = Table(8)
    table.update("alpha", 1)
    table.update("beta", 2)
    assert table.get("alpha") == 1
    assert table.get("beta") == 2
    assert len(table) == 2


def test_update_existing_key_replaces_value():
    table = Table(8)
    table.update("key", "old")
    table.update("key", "new")
    assert table.get("key") == "new"
    assert len(table) == 1
    assert list(table.items()) == [("key", "new")]


def test_get_missing_raises_key_error():
    table = Table(8)
    table.update("present", 1)
    with pytest.raises(KeyError):
        table.get("absent")


def test_contains():
    table = Table(8)
    table.update("a", 1)
    assert "a" in table
    assert "b" not in table


def test_iteration_preserves_insertion_order():
    table = Table(16)
    keys = ["one", "two", "three", "four", "five"]
    for n, key in enumerate(keys):
        table.update(key, n)
    assert list(table) == keys
    assert list(table.items()) == [(k, n) for n, k in enumerate(keys)]


def test_delete_removes_key():
    table = Table(8)
    table.update("a", 1)
    table.update("b", 2)
    table.delete("a")
    assert "a" not in table
    assert table.get("b") == 2
    assert len(table) == 1
    with pytest.raises(KeyError):
        table.get("a")


def test_delete_missing_raises_key_error():
    table = Table(8)
    with pytest.raises(KeyError):
        table.delete("nothing")


def test_deleted_slot_is_reused():
    table = Table(2)
    table.update("a", 1)
    table.update("b", 2)
    table.delete("a")
    table.update("c", 3)
    assert list(table.items()) == [("c", 3), ("b", 2)]
    assert len(table) == 2


def test_full_table_raises():
    table = Table(2)
    table.update("a", 1)
    table.update("b", 2)
    with pytest.raises(TableFullError):
        table.update("c", 3)


def test_resize_doubles_capacity_and_keeps_order():
    table = Table(2)
    table.update("a", 1)
    table.update("b", 2)
    table.resize()
    assert table.length == 4
    table.update("c", 3)
    table.update("d", 4)
    assert list(table.items()) == [("a", 1), ("b", 2), ("c", 3), ("d", 4)]


def test_resize_restores_insertion_order_after_reuse():
    table = Table(4)
    for n, key in enumerate(["w", "x", "y", "z"]):
        table.update(key, n)
    table.delete("x")
    table.update("v", 9)
    assert list(table) == ["w", "v", "y", "z"]
    table.resize()
    assert list(table) == ["w", "y", "z", "v"]
    assert table.get("v") == 9


def test_collisions_with_constant_hash():
    table = Table(8, hash_function=_zero_hash)
    keys = [f"k{n}" for n in range(8)]
    for n, key in enumerate(keys):
        table.update(key, n)
    assert [table.get(k) for k in keys] == list(range(8))


def test_delete_inside_collision_chain_keeps_later_keys_reachable():
    table = Table(8, hash_function=_zero_hash)
    for key in ["first", "second", "third"]:
        table.update(key, key.upper())
    table.delete("second")
    assert table.get("third") == "THIRD"
    assert table.get("first") == "FIRST"
    table.update("fourth", "FOURTH")
    assert table.get("fourth") == "FOURTH"
    assert table.get("third") == "THIRD"


def test_custom_hash_function_is_used():
    seen = []

    def recording_hash(key):
        seen.append(key)
        return 3

    table = Table(4, hash_function=recording_hash)
    table.update("x", 1)
    assert table.get("x") == 1
    assert seen == ["x", "x"]


def test_invalid_length_raises():
    with pytest.raises(ValueError):
        Table(0)


def test_long_keys_share_hash_but_stay_distinct():
    table = Table(8)
    table.update("abcdefghijkl", 1)
    table.update("zyxwvutsrqpo", 2)
    assert table.get("abcdefghijkl") == 1
    assert table.get("zyxwvutsrqpo") == 2


_KEYS = st.sampled_from([f"key{n}" for n in range(10)])
_OPS = st.lists(
    st.tuples(st.sampled_from(["set", "del"]), _KEYS, st.integers()),
    max_size=60,
)


@settings(max_examples=100)
@given(_OPS)
def test_behaves_like_dict(ops):
    table = Table(16, hash_function=_zero_hash)
    model = {}
    for op, key, value in ops:
        if op == "set":
            table.update(key, value)
            model[key] = value
        elif key in model:
            table.delete(key)
            del model[key]
        else:
            with pytest.raises(KeyError):
                table.delete(key)
    assert len(table) == len(model)
    assert dict(table.items()) == model
    for key, value in model.items():
        assert table.get(key) == value