import logging
from typing import Iterator, List, Optional

import numpy as np

from .common import (
    CHECKSUM_BYTES,
    CHECKSUM_SEED,
    SCAN_TAIL_SLACK,
    SYNC_PATTERN,
    as_bytes,
    iter_find,
    read_u16le,
)

log = logging.getLogger(__name__)


def frame_checksum(buf: bytes, offset: int, frame_length: int) -> int:
    body = np.frombuffer(buf, dtype=np.uint8, count=frame_length, offset=offset)
    return (CHECKSUM_SEED + int(body.sum(dtype=np.uint64))) & 0xFFFF


def stored_checksum(buf: bytes, offset: int, frame_length: int) -> int:
    return read_u16le(buf, offset + frame_length)


def is_valid_frame(buf: bytes, offset: int, frame_length: int) -> bool:
    if offset < 0 or offset + frame_length + CHECKSUM_BYTES > len(buf):
        return False
    if buf[offset: offset + len(SYNC_PATTERN)] != SYNC_PATTERN:
        return False
    return frame_checksum(buf, offset, frame_length) == stored_checksum(buf, offset, frame_length)


def last_candidate(buf_len: int, frame_length: int) -> int:
    # 末尾保留 3 字节余量（校验和实际只需 2 字节）
    return buf_len - SCAN_TAIL_SLACK - frame_length


def iter_frames(buf, frame_length: int) -> Iterator[int]:
    """Yield the offset of every checksum-verified profile, in buffer order."""
    buf = as_bytes(buf)
    last = last_candidate(len(buf), frame_length)
    if last < 0:
        return
    for i in iter_find(buf, SYNC_PATTERN, 0, last + len(SYNC_PATTERN)):
        if is_valid_frame(buf, i, frame_length):
            log.debug("good match at i = %d", i)
            yield i
        else:
            log.debug("bad checksum at i = %d", i)


def scan_frames(buf, frame_length: int, max_count: Optional[int] = None) -> List[int]:
    if max_count is not None and max_count < 0:
        max_count = None
    matches: List[int] = []
    if max_count == 0:
        return matches
    for i in iter_frames(buf, frame_length):
        matches.append(i)
        if max_count is not None and len(matches) >= max_count:
            break
    return matches
