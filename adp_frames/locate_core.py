import logging
from typing import List, Optional, Sequence, Tuple

from .common import SYNC_PATTERN, as_bytes, find_all, read_all_bytes
from .frame_matrix import frame_spacing
from .geometry import FrameGeometry, check_aux_streams, probe_geometry
from .scanner import scan_frames

log = logging.getLogger(__name__)


def locate_geometry_and_frames(
    buf,
    has_ctd: bool = False,
    has_gps: bool = False,
    has_bottom_track: bool = False,
    max_count: Optional[int] = None,
) -> Tuple[FrameGeometry, List[int]]:
    check_aux_streams(has_ctd, has_gps, has_bottom_track)
    buf = as_bytes(buf)
    log.debug("lbuf=%d max_count=%s", len(buf), max_count)
    geometry = probe_geometry(buf, has_ctd, has_gps, has_bottom_track)
    offsets = scan_frames(buf, geometry.frame_length, max_count)
    log.info(
        "located %d profiles (beams=%d cells=%d frame_length=%d)",
        len(offsets), geometry.beam_count, geometry.cell_count, geometry.frame_length,
    )
    return geometry, offsets


def locate_frames(
    buf,
    has_ctd: bool = False,
    has_gps: bool = False,
    has_bottom_track: bool = False,
    max_count: Optional[int] = None,
) -> List[int]:
    """
    Return 0-based offsets of the checksum-verified profiles in ``buf``.

    An empty list means no profile was found. ``max_count`` of None or a
    negative number means no cap; otherwise only the first ``max_count``
    profiles in buffer order are returned.
    """
    return locate_geometry_and_frames(buf, has_ctd, has_gps, has_bottom_track, max_count)[1]


def to_legacy_offsets(offsets: Sequence[int]) -> List[int]:
    # 旧 R 接口约定：1 起始下标，无匹配时返回 [0]
    if not offsets:
        return [0]
    return [i + 1 for i in offsets]


def run_locate(
    path: str,
    has_ctd: bool = False,
    has_gps: bool = False,
    has_bottom_track: bool = False,
    max_count: Optional[int] = None,
    one_based: bool = False,
) -> List[int]:
    buf = read_all_bytes(path)
    print(f"文件大小: {len(buf):,} bytes")

    geometry, offsets = locate_geometry_and_frames(buf, has_ctd, has_gps, has_bottom_track, max_count)
    print(f"波束数: {geometry.beam_count}  单元数: {geometry.cell_count}  "
          f"帧长: {geometry.frame_length} bytes（首帧 @ {geometry.probe_offset}）")

    n_sync = len(find_all(buf, SYNC_PATTERN))
    print(f"同步标记: {n_sync} 处，校验通过: {len(offsets)} 帧")
    gap = frame_spacing(offsets)
    if gap is not None:
        print(f"帧间距（中位数）: {gap} bytes")
    if not offsets:
        print("未找到有效帧")

    shown = [i + 1 for i in offsets] if one_based else list(offsets)
    for i in shown:
        print(i)
    return shown
