import pytest

from chaining_table import Entry, HashTableChaining
from hash_functions import CURRENT, LEGACY


def test_empty_bucket_search_returns_zero():
    table = HashTableChaining(10)
    assert table.search("a", LEGACY) == 0
    assert table.get("a", LEGACY) is None


def test_put_then_search_finds_key():
    table = HashTableChaining(10)
    table.put("a", 1, CURRENT)
    # 'k' (107) lands in the same bucket as 'a' (97)
    table.put("k", 2, CURRENT)
    assert table.search("a", CURRENT) == 1
    assert table.search("k", CURRENT) == 2
    assert table.get("k", CURRENT) == 2


def test_missing_key_scans_whole_bucket():
    table = HashTableChaining(10)
    table.put("a", 1, CURRENT)
    table.put("k", 2, CURRENT)
    assert table.search("u", CURRENT) == 2


def test_duplicate_key_returns_first_occurrence():
    table = HashTableChaining(10)
    table.put("a", 1, LEGACY)
    table.put("k", 2, LEGACY)
    table.put("a", 3, LEGACY)
    assert len(table) == 3
    assert table.search("a", LEGACY) == 1
    assert table.get("a", LEGACY) == 1
    assert table.bucket_sizes()[7] == 3


def test_entry_is_immutable():
    entry = Entry("a", 1)
    with pytest.raises(AttributeError):
        entry.value = 2


def test_size_must_be_positive():
    with pytest.raises(ValueError):
        HashTableChaining(0)
