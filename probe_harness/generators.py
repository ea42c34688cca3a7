# ==================================================
# probe_harness/generators.py
# ==================================================
"""
Key streams feeding the experiment.  Every source is an iterator with an
`input_name`, `reset()` and `close()`; the driver owns it and closes it once.
"""
import os
from datetime import datetime, timedelta
from typing import Optional

import numpy as np

from .const import *


class _Source:
    input_name = "?"

    def __iter__(self):
        return self

    def reset(self):
        pass

    def close(self):
        pass

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()


class RandomNumbers(_Source):
    """Uniform signed 32-bit integers.  Unseeded unless a test asks otherwise."""
    input_name = "Random-Numbers"
    CHUNK = 4096

    def __init__(self, seed: Optional[int] = None):
        self._rng = np.random.default_rng(seed)
        self._buf: list[int] = []

    def __next__(self) -> int:
        if not self._buf:
            draw = self._rng.integers(INT32_MIN, INT32_MAX, size=self.CHUNK,
                                      dtype=np.int64, endpoint=True)
            self._buf = draw.tolist()[::-1]
        return self._buf.pop()

    # reset(): without a seed there is nothing to rewind to


class RandomDates(_Source):
    """Timestamps starting one step after "now", advancing DATE_STEP_MS per key."""
    input_name = "Random-Dates"
    step = timedelta(milliseconds=DATE_STEP_MS)

    def __init__(self):
        self.reset()

    def __next__(self) -> datetime:
        self._current += self.step
        return self._current

    def reset(self):
        self._current = datetime.now()


class WordList(_Source):
    """One word per line of a text file; blank lines are skipped."""
    input_name = "Word-List"

    def __init__(self, path: str | os.PathLike = WORD_LIST):
        self.path = path
        self._fp  = None
        self.reset()

    def __next__(self) -> str:
        if self._fp is None:
            raise StopIteration
        for line in self._fp:
            word = line.strip()
            if word:
                return word
        raise StopIteration

    def reset(self):
        self.close()
        self._fp = open(self.path, encoding="utf-8")

    def close(self):
        if self._fp is not None:
            self._fp.close()
            self._fp = None


def build_generator(source: int, word_list: str | os.PathLike = WORD_LIST) -> _Source:
    if source == 1:
        return RandomNumbers()
    if source == 2:
        return RandomDates()
    if source == 3:
        return WordList(word_list)
    raise ValueError(f"Invalid data source: {source}")
