# ==================================================
# probe_harness/dump.py
# ==================================================
"""
Slot dumps: one `table[<index>]: <key> <frequency> <probes>` line per
occupied slot, ascending index, empty slots omitted.  A path ending in
`.zst` is written / read zstd-compressed.
"""
import os
from pathlib import Path
from typing import Iterator

from .compression import compress, decompress
from .const       import ZST_SUFFIX
from .slot        import Slot


def format_slot(index: int, slot: Slot) -> str:
    return f"table[{index}]: {slot}\n"


def dump_lines(table) -> Iterator[str]:
    for q, slot in table:
        yield format_slot(q, slot)


def write_dump(table, path: str | os.PathLike):
    path = Path(path)
    if path.suffix == ZST_SUFFIX:
        payload = compress("".join(dump_lines(table)).encode("utf-8"))
        with open(path, "wb") as f:
            f.write(payload)
    else:
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            f.writelines(dump_lines(table))


def read_dump(path: str | os.PathLike) -> list[str]:
    path = Path(path)
    if path.suffix == ZST_SUFFIX:
        text = decompress(path.read_bytes()).decode("utf-8")
    else:
        text = path.read_text(encoding="utf-8")
    return text.splitlines()
