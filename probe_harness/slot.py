# ==================================================
# probe_harness/slot.py
# ==================================================
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Slot:
    """An occupied table position: the key, how often it was offered, what it cost to place."""
    key:       Any
    frequency: int = 1
    probes:    int = 0          # 0 until the table records the placement cost

    def increment_frequency(self):
        self.frequency += 1

    def set_probe_count(self, probes: int):
        if self.probes:
            raise ValueError("probe count already recorded")
        if probes < 1:
            raise ValueError("probe count must be >= 1")
        self.probes = probes

    # equality is key equality; the counters are bookkeeping
    def __eq__(self, other):
        if isinstance(other, Slot):
            return self.key == other.key
        return NotImplemented

    __hash__ = None

    def __str__(self):
        return f"{self.key} {self.frequency} {self.probes}"
