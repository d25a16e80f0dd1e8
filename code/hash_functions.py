LEGACY = 'legacy'
CURRENT = 'current'
HASH_MODES = (LEGACY, CURRENT)

LEGACY_BASE = 37
CURRENT_BASE = 31
MASK32 = 0xFFFFFFFF


def to_int32(value):
    """Wrap an integer to a signed 32-bit value."""
    value &= MASK32
    if value >= 0x80000000:
        value -= 0x100000000
    return value


def legacy_hash(key):
    """Old-style hash: samples every skip-th character, skip = max(1, len // 8).

    Works on code points, so characters outside the BMP count once rather than
    as two UTF-16 units and hash differently than in Java.
    """
    hash_value = 0
    skip = max(1, len(key) // 8)
    for i in range(0, len(key), skip):
        hash_value = (hash_value * LEGACY_BASE + ord(key[i])) & MASK32
    return to_int32(hash_value)


def current_hash(key):
    """Stable base-31 polynomial hash over every character.

    The built-in hash() is salted per process, so it can't be used to compare
    runs. Like legacy_hash it iterates code points, not UTF-16 units.
    """
    hash_value = 0
    for char in key:
        hash_value = (hash_value * CURRENT_BASE + ord(char)) & MASK32
    return to_int32(hash_value)


def compute_hash(key, mode):
    if mode == LEGACY:
        return legacy_hash(key)
    if mode == CURRENT:
        return current_hash(key)
    raise ValueError(f"Unknown hash mode: {mode!r} (expected one of {HASH_MODES})")


def bucket_index(key, size, mode):
    # Python's modulo is already non-negative for a positive size
    return compute_hash(key, mode) % size
