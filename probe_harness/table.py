# ==================================================
# probe_harness/table.py
# ==================================================
import os
from typing import Any, Callable, Iterator, Optional, Union

import numpy as np

from .const   import *
from .dump    import write_dump
from .errors  import TableFull
from .probing import STRATEGIES, ProbeStrategy, hash_code
from .slot    import Slot


class HashTable:
    """Fixed-capacity open-addressing table; slots only ever go empty -> occupied."""
    def __init__(self, capacity: int,
                 strategy: Union[str, ProbeStrategy] = "linear",
                 key_hash: Callable[[Any], int] = hash_code):
        if isinstance(strategy, str):
            try:
                strategy = STRATEGIES[strategy](capacity, key_hash)
            except KeyError:
                raise ValueError(f"Unknown probing strategy: {strategy!r}") from None
        elif strategy.capacity != capacity:
            raise ValueError("Strategy capacity mismatch")

        self.capacity = capacity
        self.strategy = strategy
        self.slots: list[Optional[Slot]] = [None] * capacity

        # running totals; equal to a scan over the occupied slots
        self._occupied   = 0
        self._insertions = 0
        self._probes     = 0

    # ------------------------------------------------------------------
    @property
    def name(self) -> str:
        return self.strategy.name

    def hash(self, key: Any, i: int) -> int:
        return self.strategy.hash(key, i)

    # ------------------------------------------------------------------
    def insert(self, key: Any) -> int:
        """
        Place `key` and return its slot index, or DUPLICATE (-1) when an
        equal key is already stored (its frequency is bumped instead).
        Raises TableFull once all `capacity` probe positions are taken.
        """
        slots = self.slots
        for i, q in enumerate(self.strategy.sequence(key)):
            slot = slots[q]
            if slot is None:
                slot = Slot(key)
                slot.set_probe_count(i + 1)
                slots[q] = slot
                self._occupied   += 1
                self._insertions += 1
                self._probes     += i + 1
                return q
            if slot.key == key:
                slot.increment_frequency()
                self._insertions += 1
                return DUPLICATE
        raise TableFull(self.capacity)

    def search(self, key: Any) -> int:
        slots = self.slots
        for q in self.strategy.sequence(key):
            slot = slots[q]
            if slot is None:
                return NOT_FOUND
            if slot.key == key:
                return q
        return NOT_FOUND

    def __contains__(self, key: Any) -> bool:
        return self.search(key) != NOT_FOUND

    def slot(self, index: int) -> Optional[Slot]:
        return self.slots[index]

    def __len__(self) -> int:
        return self._occupied

    def __iter__(self) -> Iterator[tuple[int, Slot]]:
        for q, slot in enumerate(self.slots):
            if slot is not None:
                yield q, slot

    # ── summary queries ───────────────────────────────────────
    def insertion_count(self) -> int:
        return self._insertions

    def duplicate_count(self) -> int:
        return self._insertions - self._occupied

    def average_probes(self) -> float:
        if not self._occupied:
            return float("nan")
        return self._probes / self._occupied

    # ── probe-length analysis ─────────────────────────────────
    def probe_counts(self) -> np.ndarray:
        return np.fromiter((s.probes for _, s in self), dtype=np.int64, count=self._occupied)

    def max_probes(self) -> int:
        counts = self.probe_counts()
        return int(counts.max()) if counts.size else 0

    def probe_histogram(self) -> np.ndarray:
        """Entry k is the number of keys whose placement took exactly k probes."""
        return np.bincount(self.probe_counts(), minlength=1)

    # ------------------------------------------------------------------
    def dump(self, path: str | os.PathLike):
        write_dump(self, path)

    def __repr__(self):
        return (f"HashTable({self.name}, capacity={self.capacity}, "
                f"occupied={self._occupied})")
