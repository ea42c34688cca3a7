# ==================================================
# probe_harness/primes.py
# ==================================================
from math import isqrt

from .const import CAPACITY_MIN, CAPACITY_MAX


def is_prime(n: int) -> bool:
    if n <= 1:
        return False
    if n == 2:
        return True
    if n % 2 == 0:
        return False
    for d in range(3, isqrt(n) + 1, 2):
        if n % d == 0:
            return False
    return True


def twin_prime(lo: int, hi: int) -> int:
    """
    Return p + 2 for the first twin-prime pair (p, p + 2) with lo <= p <= hi - 2.
    Both members are prime, so a table of this size works for double hashing.
    """
    for p in range(lo, hi - 1):
        if is_prime(p) and is_prime(p + 2):
            return p + 2
    raise ValueError(f"No twin primes found in [{lo}, {hi}]")


if __name__ == "__main__":
    print("The generated twin prime is:", twin_prime(CAPACITY_MIN, CAPACITY_MAX))
