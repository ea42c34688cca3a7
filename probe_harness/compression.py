# ==================================================
# probe_harness/compression.py
# ==================================================
import zstandard as zstd

# -------- zstd wrappers ---------------------------------------------------

cctx = zstd.ZstdCompressor(level=3)
dctx = zstd.ZstdDecompressor()

def compress(data: bytes) -> bytes:
    return cctx.compress(data)

def decompress(data: bytes) -> bytes:
    return dctx.decompress(data)
