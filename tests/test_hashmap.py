import pytest

from hotrace.hashmap import HashMap
from hotrace.primes import is_prime, next_prime


def test_initial_capacity_is_next_prime():
    for requested in [0, 1, 10, 64, 1000]:
        table = HashMap(requested)
        assert table.capacity == next_prime(requested)
        assert is_prime(table.capacity)
        assert len(table) == 0


def test_default_capacity_matches_program_size():
    assert HashMap().capacity == 1048583


def test_insert_then_get_round_trip():
    table = HashMap(16)
    table.insert(b"alpha", b"one")
    table.insert(b"beta", b"two")
    assert table.get(b"alpha") == b"one"
    assert table.get(b"beta") == b"two"
    assert len(table) == 2


def test_missing_key_returns_none():
    table = HashMap(16)
    assert table.get(b"nothing") is None
    table.insert(b"present", b"v")
    assert table.get(b"absent") is None


def test_update_replaces_value_without_growing():
    table = HashMap(16)
    table.insert(b"k", b"first")
    table.insert(b"k", b"second")
    assert table.get(b"k") == b"second"
    assert len(table) == 1


def test_str_and_bytes_keys_are_equivalent():
    table = HashMap(16)
    table.insert("name", "value")
    assert table.get(b"name") == "value"
    assert "name" in table
    assert b"name" in table


def test_contains():
    table = HashMap(8)
    table.insert(b"x", b"1")
    assert b"x" in table
    assert b"y" not in table
    assert 42 not in table


def test_empty_value_is_stored():
    table = HashMap(8)
    table.insert(b"k", b"")
    assert table.get(b"k") == b""
    assert b"k" in table


def test_none_value_rejected():
    table = HashMap(8)
    with pytest.raises(TypeError):
        table.insert(b"k", None)
    assert len(table) == 0


def test_invalid_key_type_rejected():
    table = HashMap(8)
    with pytest.raises(TypeError):
        table.insert(3, b"v")


def test_resize_grows_to_next_prime_of_double_and_keeps_entries():
    table = HashMap(11)
    pairs = {("key%d" % n).encode(): ("val%d" % n).encode() for n in range(5)}
    for key, value in pairs.items():
        table.insert(key, value)
    old_capacity = table.capacity
    table.resize()
    assert table.capacity == next_prime(old_capacity * 2)
    assert len(table) == len(pairs)
    for key, value in pairs.items():
        assert table.get(key) == value


def test_many_inserts_grow_table_and_remain_retrievable():
    table = HashMap(2)
    pairs = {("k%d" % n).encode(): ("v%d" % n).encode() for n in range(2000)}
    for key, value in pairs.items():
        table.insert(key, value)
    assert len(table) == len(pairs)
    assert table.capacity >= len(pairs)
    assert is_prime(table.capacity)
    for key, value in pairs.items():
        assert table.get(key) == value


def test_load_factor_checked_before_insert():
    table = HashMap(100)
    for n in range(500):
        table.insert(("item%d" % n).encode(), b"x")
        assert (len(table) - 1) / table.capacity < 0.75
    assert len(table) == 500


def test_tiny_table_handles_collisions():
    table = HashMap(1)
    assert table.capacity == 2
    for n in range(10):
        table.insert(bytes([n]), bytes([n, n]))
    for n in range(10):
        assert table.get(bytes([n])) == bytes([n, n])