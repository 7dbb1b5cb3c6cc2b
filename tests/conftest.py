from adp_frames.common import BEAM_COUNT_OFFSET, CELL_COUNT_OFFSET, CHECKSUM_SEED, SYNC_PATTERN


def build_frame(nbeam=3, ncell=10, fill=0x11):
    """One profile (body + little-endian checksum) with a valid checksum."""
    length = 80 + 4 * nbeam * ncell
    body = bytearray([fill]) * length
    body[0:3] = SYNC_PATTERN
    body[BEAM_COUNT_OFFSET] = nbeam
    body[CELL_COUNT_OFFSET] = ncell & 0xFF
    body[CELL_COUNT_OFFSET + 1] = ncell >> 8
    cs = (CHECKSUM_SEED + sum(body)) & 0xFFFF
    return bytes(body) + bytes([cs & 0xFF, cs >> 8])


def build_buffer(offsets, size, nbeam=3, ncell=10, filler=0x00):
    buf = bytearray([filler]) * size
    frame = build_frame(nbeam, ncell)
    for off in offsets:
        buf[off: off + len(frame)] = frame
    assert len(buf) == size
    return buf
