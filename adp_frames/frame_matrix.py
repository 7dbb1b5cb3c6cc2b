import logging
from typing import Optional, Sequence

import numpy as np

from .common import CHECKSUM_BYTES, as_bytes

log = logging.getLogger(__name__)


def extract_frame_matrix(
    buf,
    offsets: Sequence[int],
    frame_length: int,
    include_checksum: bool = True,
) -> Optional[np.ndarray]:
    if not offsets:
        log.info("no profile offsets, skipping frame matrix")
        return None
    buf = as_bytes(buf)
    width = frame_length + (CHECKSUM_BYTES if include_checksum else 0)
    raw = np.frombuffer(buf, dtype=np.uint8)
    rows = []
    for off in offsets:
        if off < 0 or off + width > raw.size:
            raise IndexError(f"profile at {off} (width {width}) runs outside a {raw.size}-byte buffer")
        rows.append(raw[off: off + width])
    M = np.vstack(rows)
    log.debug("frame matrix shape: %s", M.shape)
    return M


def frame_spacing(offsets: Sequence[int]) -> Optional[int]:
    if len(offsets) < 2:
        return None
    return int(np.median(np.diff(np.asarray(offsets, dtype=np.int64))))
