import argparse
import sys

from chaining_table import CHAINING_M, HashTableChaining
from hash_functions import CURRENT, LEGACY
from password_checker import DICTIONARY, is_strong_password
from probing_table import PROBING_M, HashTableProbing

DEFAULT_PASSWORD_FILE = 'passwords.txt'


class CheckerConfig:
    """Dictionary, table sizes and input path for one checker run."""

    def __init__(self, password_file=DEFAULT_PASSWORD_FILE, dictionary=DICTIONARY,
                 chaining_size=CHAINING_M, probing_size=PROBING_M):
        self.password_file = password_file
        self.dictionary = tuple(dictionary)
        self.chaining_size = chaining_size
        self.probing_size = probing_size


def build_tables(config):
    """Populate both tables from the dictionary (legacy hash only), rank i + 1."""
    chaining_table = HashTableChaining(config.chaining_size)
    probing_table = HashTableProbing(config.probing_size)
    for i, word in enumerate(config.dictionary):
        chaining_table.put(word, i + 1, LEGACY)
        probing_table.put(word, i + 1, LEGACY)
    return chaining_table, probing_table


def read_passwords(filename):
    passwords = []
    try:
        with open(filename, encoding="utf-8", errors="replace") as f:
            for line in f:
                passwords.append(line.strip())
    except OSError as e:
        print(f"Could not read passwords from {filename}: {e}", file=sys.stderr)
        return []
    return passwords


def check_password(password, chaining_table, probing_table, dictionary=DICTIONARY):
    return {
        'strong': is_strong_password(password, dictionary),
        'chaining_legacy': chaining_table.search(password, LEGACY),
        'chaining_current': chaining_table.search(password, CURRENT),
        'probing_legacy': probing_table.search(password, LEGACY),
        'probing_current': probing_table.search(password, CURRENT),
    }


def format_report(password, result):
    return "\n".join([
        f"Testing password: {password}",
        f"Strong: {result['strong']}",
        f"Chaining Comparisons (Old hashCode): {result['chaining_legacy']}",
        f"Chaining Comparisons (New hashCode): {result['chaining_current']}",
        f"Probing Comparisons (Old hashCode): {result['probing_legacy']}",
        f"Probing Comparisons (New hashCode): {result['probing_current']}",
    ])


def run(config, out=None):
    out = out or sys.stdout
    chaining_table, probing_table = build_tables(config)

    results = []
    for password in read_passwords(config.password_file):
        result = check_password(password, chaining_table, probing_table, config.dictionary)
        result['password'] = password
        print(format_report(password, result), file=out)
        print(file=out)
        results.append(result)
    return results


def main(argv=None):
    parser = argparse.ArgumentParser(description="Strong password checker with hash table comparison counts")
    parser.add_argument("passwords", nargs="?", default=DEFAULT_PASSWORD_FILE,
                        help="File with one candidate password per line")
    parser.add_argument("--chaining-size", type=int, default=CHAINING_M, help="Buckets in the chaining table")
    parser.add_argument("--probing-size", type=int, default=PROBING_M, help="Slots in the probing table")
    parser.add_argument("--diagnostic", action="store_true",
                        help="Also print the hash distribution of the candidate passwords")
    args = parser.parse_args(argv)

    config = CheckerConfig(args.passwords, chaining_size=args.chaining_size, probing_size=args.probing_size)
    results = run(config)

    if args.diagnostic:
        from hash_diagnostic import print_comparison
        print_comparison([r['password'] for r in results], config.chaining_size)


if __name__ == "__main__":
    main()
