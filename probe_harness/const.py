# ==================================================
# probe_harness/const.py
# ==================================================
import os

PROG = "HashtableTest"

# ── table sizing (twin prime search window) ───────────────────
CAPACITY_MIN = int(os.getenv("HASHTABLE_MIN_CAPACITY", "95500"))
CAPACITY_MAX = int(os.getenv("HASHTABLE_MAX_CAPACITY", "96000"))

# ── inputs / outputs ──────────────────────────────────────────
WORD_LIST     = os.getenv("HASHTABLE_WORD_LIST", "word-list.txt")
DUMP_DIR      = os.getenv("HASHTABLE_DUMP_DIR",  ".")
DUMP_COMPRESS = os.getenv("HASHTABLE_DUMP_COMPRESS", "0").lower() in ("1", "true", "yes")
LINEAR_DUMP   = "linear-dump.txt"
DOUBLE_DUMP   = "double-dump.txt"
ZST_SUFFIX    = ".zst"

# ── table sentinels ───────────────────────────────────────────
DUPLICATE = -1          # insert() hit an equal key
NOT_FOUND = -1          # search() ran into an empty slot / full cycle

DATE_STEP_MS = 1000     # RandomDates advance per key
INT32_MIN, INT32_MAX = -2**31, 2**31 - 1
