import pytest

from hash_diagnostic import batched_hash, bucket_distribution, compare_modes, main, verify_hash, words_to_tensor
from hash_functions import CURRENT, LEGACY, compute_hash
from password_checker import DICTIONARY

WORDS = ["", "a", "ab", "aaron", "abandoned", "accountability", "SafePass#9", "x" * 40, "pässwörd"]


def test_words_are_grouped_by_length():
    batches = words_to_tensor(["ab", "cd", "e"])
    indices, codes = batches[2]
    assert indices.tolist() == [0, 1]
    assert codes.tolist() == [[97, 98], [99, 100]]
    assert batches[1][1].shape == (1, 1)


@pytest.mark.parametrize("mode", [LEGACY, CURRENT])
def test_batched_hash_matches_scalar_hash(mode):
    assert batched_hash(WORDS, mode).tolist() == [compute_hash(w, mode) for w in WORDS]
    assert verify_hash(list(DICTIONARY), mode)


def test_batched_hash_rejects_unknown_mode():
    with pytest.raises(ValueError):
        batched_hash(WORDS, "md5")


def test_bucket_distribution_counts_collisions():
    stats = bucket_distribution(["a", "k", "u"], 10, CURRENT)
    assert stats == {
        'words': 3,
        'unique_hashes': 3,
        'occupied_buckets': 1,
        'max_bucket': 3,
        'collisions': 2,
    }


def test_legacy_mode_collides_on_sampled_characters():
    words = ["aXbXcXdXeXfXgXhX", "aYbYcYdYeYfYgYhY"]
    stats = compare_modes(words, 1000)
    assert stats[LEGACY]['unique_hashes'] == 1
    assert stats[CURRENT]['unique_hashes'] == 2


def test_main_with_dictionary(capsys):
    main(["--size", "100", "--device", "cpu"])
    out = capsys.readouterr().out
    assert f"Hash distribution over 100 buckets ({len(DICTIONARY)} words):" in out
    assert "disagrees" not in out


def test_main_with_latin1_word_file(tmp_path, capsys):
    path = tmp_path / "words.txt"
    path.write_bytes(b"caf\xe9\nabandoned\n")
    main([str(path), "--size", "10", "--device", "cpu"])
    assert "(2 words)" in capsys.readouterr().out
