import argparse
from collections import defaultdict

import torch

from chaining_table import CHAINING_M
from hash_functions import CURRENT, CURRENT_BASE, HASH_MODES, LEGACY, LEGACY_BASE, MASK32, compute_hash
from password_checker import DICTIONARY


def words_to_tensor(words, device="cpu"):
    """Group words by length; return {length: (indices, codepoints)} with int64 tensors."""
    groups = defaultdict(list)
    for index, word in enumerate(words):
        groups[len(word)].append(index)

    batches = {}
    for length, indices in groups.items():
        codes = torch.tensor([[ord(c) for c in words[i]] for i in indices], dtype=torch.int64, device=device)
        batches[length] = (torch.tensor(indices, dtype=torch.int64, device=device), codes.reshape(len(indices), length))
    return batches


def batched_hash(words, mode, device="cpu"):
    """GPU-friendly version of compute_hash for a whole word list, in input order."""
    if mode not in HASH_MODES:
        raise ValueError(f"Unknown hash mode: {mode!r} (expected one of {HASH_MODES})")

    hashes = torch.zeros(len(words), dtype=torch.int64, device=device)
    for length, (indices, codes) in words_to_tensor(words, device).items():
        if mode == LEGACY:
            base, positions = LEGACY_BASE, range(0, length, max(1, length // 8))
        else:
            base, positions = CURRENT_BASE, range(length)

        hash_value = torch.zeros(codes.shape[0], dtype=torch.int64, device=device)
        for i in positions:
            hash_value = (hash_value * base + codes[:, i]) & MASK32
        hashes[indices] = hash_value

    # Back to signed 32-bit, matching the scalar hash
    return torch.where(hashes >= 2**31, hashes - 2**32, hashes)


def verify_hash(words, mode):
    """Check the batched hashes against the scalar implementation."""
    batched = batched_hash(words, mode).tolist()
    return all(h == compute_hash(w, mode) for w, h in zip(words, batched))


def bucket_distribution(words, size, mode, device="cpu"):
    hashes = batched_hash(words, mode, device)
    indices = torch.remainder(hashes, size)
    counts = torch.bincount(indices, minlength=size)
    occupied = int((counts > 0).sum().item())
    return {
        'words': len(words),
        'unique_hashes': int(torch.unique(hashes).numel()),
        'occupied_buckets': occupied,
        'max_bucket': int(counts.max().item()),
        'collisions': len(words) - occupied,
    }


def compare_modes(words, size, device="cpu"):
    return {mode: bucket_distribution(words, size, mode, device) for mode in HASH_MODES}


def print_comparison(words, size, device="cpu"):
    print(f"Hash distribution over {size} buckets ({len(words)} words):")
    for mode, stats in compare_modes(words, size, device).items():
        label = "Old hashCode" if mode == LEGACY else "New hashCode"
        print(f"  {label}: {stats['unique_hashes']} unique hashes, "
              f"{stats['occupied_buckets']} buckets used, "
              f"longest chain {stats['max_bucket']}, "
              f"{stats['collisions']} collisions")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Compare legacy and current hash distributions")
    parser.add_argument("words", nargs="?", help="Word list, one per line (default: built-in dictionary)")
    parser.add_argument("--size", type=int, default=CHAINING_M, help="Number of buckets")
    parser.add_argument("--device", default="cuda" if torch.cuda.is_available() else "cpu")
    args = parser.parse_args(argv)

    if args.words:
        with open(args.words, encoding="utf-8", errors="replace") as f:
            word_list = [line.strip() for line in f]
    else:
        word_list = list(DICTIONARY)

    for mode in (LEGACY, CURRENT):
        if not verify_hash(word_list, mode):
            print(f"Batched {mode} hash disagrees with the scalar one")
    print_comparison(word_list, args.size, args.device)


if __name__ == "__main__":
    main()
