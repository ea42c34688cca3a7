# ==================================================
# probe_harness/cli.py
# ==================================================
"""
Experiment driver: size a twin-prime table, fill one linear-probing and
one double-hashing table to the requested load factor from the same key
source, and report insertions, duplicates and average probes for each.
"""
import argparse, math, sys
from pathlib import Path

from .const      import *
from .errors     import GeneratorExhausted, TableFull, UsageError
from .generators import build_generator
from .primes     import twin_prime
from .table      import HashTable

USAGE = """\
Usage: hashtable-test <dataSource> <loadFactor> [<debugLevel>]
       <dataSource>: 1 ==> random numbers
                     2 ==> date value as a long
                     3 ==> word list
       <loadFactor>: The ratio of objects to table size,
                       denoted by alpha = n/m
       <debugLevel>: 0 ==> print summary of experiment
                     1 ==> save the two hash tables to a file at the end
                     2 ==> print debugging output for each insert
"""

_END = object()


class _Parser(argparse.ArgumentParser):
    def format_usage(self):
        return USAGE

    def format_help(self):
        return USAGE

    def error(self, message):
        self.print_usage(sys.stdout)
        self.exit(1)


def _load_factor(text: str) -> float:
    alpha = float(text)
    if not 0.0 <= alpha <= 1.0:
        raise UsageError(f"load factor {text} not in [0.0, 1.0]")
    return alpha


def build_parser() -> argparse.ArgumentParser:
    p = _Parser(prog="hashtable-test", add_help=False)
    p.add_argument("data_source", type=int, choices=(1, 2, 3))
    p.add_argument("load_factor", type=_load_factor)
    p.add_argument("debug_level", type=int, choices=(0, 1, 2), nargs="?", default=0)
    return p


def parse_args(argv=None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


# ── experiment ────────────────────────────────────────────────
def load_table(table: HashTable, n: int, source, trace: bool = False) -> int:
    """Feed keys from `source` until `n` distinct keys are stored."""
    inserted = 0
    while inserted < n:
        key = next(source, _END)
        if key is _END:
            raise GeneratorExhausted(source.input_name, inserted, n)
        idx = table.insert(key)
        if idx != DUPLICATE:
            inserted += 1
        if trace:
            print(f"{'Duplicate' if idx == DUPLICATE else 'Inserted'}: {key}")
    return inserted


def dump_path(name: str) -> Path:
    path = Path(DUMP_DIR) / name
    if DUMP_COMPRESS:
        path = path.with_name(path.name + ZST_SUFFIX)
    return path


def run_strategy(table: HashTable, n: int, source, debug_level: int, dump_name: str):
    print(f"\tUsing {table.name}")
    print(f"{PROG}: size of hash table is {n}")
    load_table(table, n, source, trace=debug_level == 2)
    print(f"\tInserted {table.insertion_count()} elements, "
          f"of which {table.duplicate_count()} were duplicates")
    print(f"\tAvg. no. of probes = {table.average_probes():.2f}")
    if debug_level == 1:
        table.dump(dump_path(dump_name))
        print(f"{PROG}: Saved dump of hash table")


def run(args: argparse.Namespace) -> int:
    capacity = twin_prime(CAPACITY_MIN, CAPACITY_MAX)
    print(f"{PROG}: Found a twin prime table capacity: {capacity}")
    n = math.ceil(args.load_factor * capacity)

    runs = [(HashTable(capacity, "linear"), LINEAR_DUMP),
            (HashTable(capacity, "double"), DOUBLE_DUMP)]

    with build_generator(args.data_source, WORD_LIST) as source:
        print(f"{PROG}: Input: {source.input_name}\tLoadfactor: {args.load_factor:.2f}")
        for k, (table, dump_name) in enumerate(runs):
            if k:
                source.reset()
            run_strategy(table, n, source, args.debug_level, dump_name)
    return 0


def main(argv=None) -> int:
    args = parse_args(argv)
    try:
        return run(args)
    except (TableFull, GeneratorExhausted, OSError, ValueError) as e:
        sys.stdout.flush()
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
