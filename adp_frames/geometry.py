import logging
from dataclasses import dataclass

from .common import (
    AUX_STREAM_BYTES,
    BEAM_COUNT_OFFSET,
    BYTES_PER_SAMPLE,
    CELL_COUNT_OFFSET,
    HEADER_BYTES,
    MAX_BEAMS,
    MIN_BEAMS,
    PROBE_WINDOW,
    SYNC_PATTERN,
    as_bytes,
    read_u16le,
)
from .errors import GeometryNotFound, InsufficientData, InvalidGeometry, UnsupportedAuxiliaryStream

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class FrameGeometry:
    """Per-buffer frame layout, assumed constant for every profile in the buffer."""
    beam_count: int
    cell_count: int
    frame_length: int  # sync 到 payload 结尾，不含 2 字节校验和
    probe_offset: int = 0


def check_aux_streams(has_ctd: bool = False, has_gps: bool = False, has_bottom_track: bool = False):
    enabled = [name for name, flag in (("ctd", has_ctd), ("gps", has_gps), ("bottom_track", has_bottom_track)) if flag]
    if enabled:
        raise UnsupportedAuxiliaryStream(enabled)


def frame_length_for(
    beam_count: int,
    cell_count: int,
    has_ctd: bool = False,
    has_gps: bool = False,
    has_bottom_track: bool = False,
) -> int:
    length = HEADER_BYTES
    if has_ctd:
        length += AUX_STREAM_BYTES["ctd"]
    if has_gps:
        length += AUX_STREAM_BYTES["gps"]
    if has_bottom_track:
        length += AUX_STREAM_BYTES["bottom_track"]
    return length + BYTES_PER_SAMPLE * cell_count * beam_count


def probe_geometry(buf, has_ctd: bool = False, has_gps: bool = False, has_bottom_track: bool = False) -> FrameGeometry:
    """
    Read beam and cell counts from the first profile header found in the
    first PROBE_WINDOW bytes. Only that first sync hit is examined.
    """
    check_aux_streams(has_ctd, has_gps, has_bottom_track)
    buf = as_bytes(buf)
    if len(buf) < PROBE_WINDOW:
        raise InsufficientData(
            f"cannot read SonTek ADP from a buffer with fewer than {PROBE_WINDOW} bytes (got {len(buf)})"
        )

    pos = buf.find(SYNC_PATTERN, 0, PROBE_WINDOW)
    if pos == -1:
        raise GeometryNotFound(f"cannot determine #beams or #cells, based on first {PROBE_WINDOW} bytes in buffer")

    if pos + CELL_COUNT_OFFSET + 2 > len(buf):
        raise InvalidGeometry(f"profile header at buf[{pos}] runs past the end of the buffer")
    nbeam = buf[pos + BEAM_COUNT_OFFSET]
    ncell = read_u16le(buf, pos + CELL_COUNT_OFFSET)
    log.debug("tentative first profile at buf[%d]: number_of_beams=%d number_of_cells=%d", pos, nbeam, ncell)
    if not MIN_BEAMS <= nbeam <= MAX_BEAMS:
        raise InvalidGeometry(f"number of beams must be {MIN_BEAMS} or {MAX_BEAMS}, but it is {nbeam}")

    frame_length = frame_length_for(nbeam, ncell, has_ctd, has_gps, has_bottom_track)
    log.debug("frame_length = %d", frame_length)
    return FrameGeometry(beam_count=nbeam, cell_count=ncell, frame_length=frame_length, probe_offset=pos)
