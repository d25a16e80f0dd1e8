from typing import NamedTuple

from hash_functions import bucket_index

CHAINING_M = 1000  # Table size for separate chaining


class Entry(NamedTuple):
    key: str
    value: int


class HashTableChaining:
    """Fixed-size hash table resolving collisions by separate chaining."""

    def __init__(self, size=CHAINING_M):
        if size < 1:
            raise ValueError(f"Table size must be positive, got {size}")
        self.size = size
        self.table = [[] for _ in range(size)]

    def put(self, key, value, mode):
        # No uniqueness check, duplicate keys share the bucket
        self.table[bucket_index(key, self.size, mode)].append(Entry(key, value))

    def search(self, key, mode):
        """Return the number of key comparisons needed to find key (or to give up)."""
        bucket = self.table[bucket_index(key, self.size, mode)]
        comparisons = 0
        for entry in bucket:
            comparisons += 1
            if entry.key == key:
                return comparisons
        return comparisons

    def get(self, key, mode):
        for entry in self.table[bucket_index(key, self.size, mode)]:
            if entry.key == key:
                return entry.value
        return None

    def bucket_sizes(self):
        return [len(bucket) for bucket in self.table]

    def __len__(self):
        return sum(self.bucket_sizes())
