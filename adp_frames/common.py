import numpy as np

# SonTek ADP 格式常量
SYNC_HEX = "a5 10 50"  # 0xA5, 0x10, 0x50(=80, 头长度)
HEADER_BYTES = 80
CHECKSUM_SEED = 0xA596
CHECKSUM_BYTES = 2
PROBE_WINDOW = 1000
SCAN_TAIL_SLACK = 3
BEAM_COUNT_OFFSET = 26
CELL_COUNT_OFFSET = 30
MIN_BEAMS = 2
MAX_BEAMS = 3
BYTES_PER_SAMPLE = 4

# 辅助数据段长度（当前版本均不支持）
AUX_STREAM_BYTES = {
    "ctd": 16,
    "gps": 40,
    "bottom_track": 18,
}

SYNC_PATTERN = bytes.fromhex(SYNC_HEX)


def read_all_bytes(path: str) -> bytes:
    with open(path, "rb") as f:
        return f.read()


def as_bytes(buf) -> bytes:
    if isinstance(buf, bytes):
        return buf
    if isinstance(buf, np.ndarray):
        if buf.ndim != 1 or buf.dtype != np.uint8:
            raise TypeError(f"expected 1-D uint8 array, got {buf.ndim}-D {buf.dtype}")
        return buf.tobytes()
    if isinstance(buf, (bytearray, memoryview)):
        return bytes(buf)
    raise TypeError(f"expected a bytes-like buffer, got {type(buf).__name__}")


def read_u16le(buf: bytes, pos: int) -> int:
    return buf[pos] | (buf[pos + 1] << 8)


def find_all(haystack: bytes, needle: bytes, start: int = 0, stop=None, max_hits: int = 200000):
    out = []
    for i in iter_find(haystack, needle, start, stop):
        out.append(i)
        if len(out) >= max_hits:
            break
    return out


def iter_find(haystack: bytes, needle: bytes, start: int = 0, stop=None):
    # 重叠匹配也逐个返回
    end = len(haystack) if stop is None else min(stop, len(haystack))
    st = start
    while True:
        i = haystack.find(needle, st, end)
        if i == -1:
            break
        yield i
        st = i + 1
