# ==================================================
# examples/sweep_loads.py
# ==================================================
import argparse
import numpy as np
from probe_harness import HashTable, RandomNumbers, twin_prime

def sweep(capacity: int, loads, seed=None) -> list[tuple[float, float, float]]:
    """(alpha, avg probes linear, avg probes double) per load factor."""
    rows = []
    for alpha in loads:
        n = int(np.ceil(alpha * capacity))
        row = [float(alpha)]
        for strategy in ("linear", "double"):
            table = HashTable(capacity, strategy)
            keys  = RandomNumbers(seed)
            while len(table) < n:
                table.insert(next(keys))
            row.append(table.average_probes())
        rows.append(tuple(row))
    return rows

def main():
    p = argparse.ArgumentParser()
    p.add_argument("--min", type=int, default=1000, help="twin prime search start")
    p.add_argument("--max", type=int, default=1100, help="twin prime search end")
    p.add_argument("--steps", type=int, default=9)
    p.add_argument("--seed", type=int)
    args = p.parse_args()

    m = twin_prime(args.min, args.max)
    print(f"capacity {m}")
    print("alpha   linear   double")
    for alpha, lin, dbl in sweep(m, np.linspace(0.1, 0.9, args.steps), args.seed):
        print(f"{alpha:5.2f} {lin:8.2f} {dbl:8.2f}")

if __name__ == "__main__":
    main()
