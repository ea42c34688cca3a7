import re

import pytest

from probe_harness.dump  import dump_lines, format_slot, read_dump, write_dump
from probe_harness.slot  import Slot
from probe_harness.table import HashTable

LINE = re.compile(r"^table\[(\d+)\]: .+ \d+ \d+$")


def _chain_table():
    t = HashTable(11, "linear")
    for k in (0, 11, 22, 0):
        t.insert(k)
    return t


def test_format_slot():
    assert format_slot(4, Slot("cat", 2, 3)) == "table[4]: cat 2 3\n"


def test_dump_file(tmp_path):
    path = tmp_path / "linear-dump.txt"
    _chain_table().dump(path)
    assert path.read_text() == (
        "table[0]: 0 2 1\n"
        "table[1]: 11 1 2\n"
        "table[2]: 22 1 3\n"
    )
    assert read_dump(path) == ["table[0]: 0 2 1", "table[1]: 11 1 2", "table[2]: 22 1 3"]


def test_dump_lists_occupied_slots_in_order(tmp_path):
    t = HashTable(101, "double")
    for k in range(-300, 300, 7):
        t.insert(k)

    path = tmp_path / "double-dump.txt"
    write_dump(t, path)
    lines = read_dump(path)
    assert len(lines) == len(t)

    indices = [int(LINE.match(line).group(1)) for line in lines]
    assert indices == sorted(set(indices))
    assert indices == [q for q, _ in t]


def test_same_keys_same_dump(tmp_path):
    keys = ["pear", "apple", "fig", "apple", "kiwi", "plum"]
    for strategy in ("linear", "double"):
        a, b = HashTable(13, strategy), HashTable(13, strategy)
        for k in keys:
            a.insert(k)
            b.insert(k)
        a.dump(tmp_path / "a.txt")
        b.dump(tmp_path / "b.txt")
        assert (tmp_path / "a.txt").read_bytes() == (tmp_path / "b.txt").read_bytes()


def test_compressed_dump(tmp_path):
    t = _chain_table()
    path = tmp_path / "linear-dump.txt.zst"
    t.dump(path)

    raw = path.read_bytes()
    assert raw[:4] == b"\x28\xb5\x2f\xfd"     # zstd frame magic
    assert read_dump(path) == [line.rstrip("\n") for line in dump_lines(t)]


def test_dump_unwritable(tmp_path):
    with pytest.raises(OSError):
        _chain_table().dump(tmp_path / "missing" / "dump.txt")
