from hash_functions import bucket_index

PROBING_M = 20000  # Table size for linear probing


class TableFullError(RuntimeError):
    """Raised when a probe wraps around without finding an empty slot."""


class HashTableProbing:
    """Fixed-size open-addressing hash table with linear probing.

    put() never checks for an existing equal key: inserting the same key twice
    probes past the first copy and stores a second one further along the chain.
    """

    def __init__(self, size=PROBING_M):
        if size < 1:
            raise ValueError(f"Table size must be positive, got {size}")
        self.size = size
        self.keys = [None] * size
        self.values = [None] * size

    def put(self, key, value, mode):
        start = bucket_index(key, self.size, mode)
        slot = start
        while self.keys[slot] is not None:
            slot = (slot + 1) % self.size
            if slot == start:
                raise TableFullError(f"No empty slot for {key!r}: all {self.size} slots are occupied")
        self.keys[slot] = key
        self.values[slot] = value

    def search(self, key, mode):
        """Return the number of occupied slots compared before a match or a gap."""
        slot = bucket_index(key, self.size, mode)
        comparisons = 0
        while self.keys[slot] is not None and comparisons < self.size:
            comparisons += 1
            if self.keys[slot] == key:
                return comparisons
            slot = (slot + 1) % self.size
        return comparisons

    def get(self, key, mode):
        slot = bucket_index(key, self.size, mode)
        for _ in range(self.size):
            if self.keys[slot] is None:
                break
            if self.keys[slot] == key:
                return self.values[slot]
            slot = (slot + 1) % self.size
        return None

    def __len__(self):
        return sum(1 for key in self.keys if key is not None)
