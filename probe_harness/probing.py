# ==================================================
# probe_harness/probing.py
# ==================================================
"""
Probe sequences for open addressing.

Both strategies share h1 and differ only in the stride added per probe:
linear probing steps by 1, double hashing by h2(key).  A strategy is a
plain record holding its stride function, so the table never needs to
know which one it was handed.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Iterator

_MASK32 = 0xFFFFFFFF


def _signed32(x: int) -> int:
    x &= _MASK32
    return x - (1 << 32) if x & 0x80000000 else x


def hash_code(key: Any) -> int:
    """Stable integer hash; unlike builtin hash() it does not change per process for str."""
    if isinstance(key, int):
        return key
    if isinstance(key, str):
        h = 0
        for ch in key:
            h = (31 * h + ord(ch)) & _MASK32
        return _signed32(h)
    if isinstance(key, datetime):
        ms = round(key.timestamp() * 1000)
        return _signed32(ms ^ (ms >> 32))
    return hash(key)


def positive_mod(x: int, d: int) -> int:
    return ((x % d) + d) % d


def h1(code: int, m: int) -> int:
    return positive_mod(code, m)


def h2(code: int, m: int) -> int:
    return 1 + positive_mod(code, m - 2)


# -- strides ---------------------------------------------------------------
def _unit_stride(code: int, m: int) -> int:
    return 1


@dataclass(frozen=True)
class ProbeStrategy:
    name:     str
    capacity: int
    stride:   Callable[[int, int], int]
    key_hash: Callable[[Any], int] = field(default=hash_code)

    def hash(self, key: Any, i: int) -> int:
        code = self.key_hash(key)
        return (h1(code, self.capacity) + i * self.stride(code, self.capacity)) % self.capacity

    def sequence(self, key: Any) -> Iterator[int]:
        """Yield hash(key, 0), hash(key, 1), ... hash(key, m-1)."""
        m    = self.capacity
        code = self.key_hash(key)
        q    = h1(code, m)
        step = self.stride(code, m)
        for _ in range(m):
            yield q
            q = (q + step) % m


def linear_probing(capacity: int, key_hash: Callable[[Any], int] = hash_code) -> ProbeStrategy:
    if capacity < 1:
        raise ValueError("capacity must be positive")
    return ProbeStrategy("Linear Probing", capacity, _unit_stride, key_hash)


def double_hashing(capacity: int, key_hash: Callable[[Any], int] = hash_code) -> ProbeStrategy:
    if capacity < 3:
        raise ValueError("double hashing needs capacity >= 3")
    return ProbeStrategy("Double Hashing", capacity, h2, key_hash)


STRATEGIES = {
    "linear": linear_probing,
    "double": double_hashing,
}
