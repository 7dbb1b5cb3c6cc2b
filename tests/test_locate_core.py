import numpy as np
import pytest

from adp_frames.errors import InsufficientData, UnsupportedAuxiliaryStream
from adp_frames.locate_core import locate_frames, locate_geometry_and_frames, to_legacy_offsets
from conftest import build_buffer

OFFSETS = [0, 250, 777, 1500, 2100]


def test_round_trip():
    buf = bytes(build_buffer(OFFSETS, 3000))
    assert locate_frames(buf) == OFFSETS


def test_round_trip_two_beams():
    offsets = [13, 400, 800]
    buf = bytes(build_buffer(offsets, 2000, nbeam=2, ncell=25))
    assert locate_frames(buf, max_count=-1) == offsets


def test_geometry_is_returned():
    geometry, offsets = locate_geometry_and_frames(bytes(build_buffer(OFFSETS, 3000)), max_count=2)
    assert (geometry.beam_count, geometry.cell_count, geometry.frame_length) == (3, 10, 200)
    assert offsets == [0, 250]


def test_cap_returns_leading_offsets():
    buf = bytes(build_buffer(OFFSETS, 3000))
    for m in range(len(OFFSETS)):
        assert locate_frames(buf, max_count=m) == OFFSETS[:m]


def test_999_bytes_fails():
    with pytest.raises(InsufficientData):
        locate_frames(bytes(build_buffer([0], 999)))


def test_1000_bytes_with_frame_at_zero():
    assert locate_frames(bytes(build_buffer([0], 1000))) == [0]


@pytest.mark.parametrize("buf", [b"", bytes(5000), bytes(build_buffer(OFFSETS, 3000))])
@pytest.mark.parametrize("flags", [(True, False, False), (False, True, False), (False, False, True)])
def test_aux_flags_rejected_regardless_of_buffer(buf, flags):
    with pytest.raises(UnsupportedAuxiliaryStream):
        locate_frames(buf, *flags)


def test_no_match_is_empty_not_zero():
    buf = build_buffer([0, 500], 1200)
    buf[200] ^= 0xFF
    buf[700] ^= 0xFF

    result = locate_frames(bytes(buf))

    assert result == []
    assert result != [0]
    assert to_legacy_offsets(result) == [0]


def test_legacy_offsets_are_one_based():
    assert to_legacy_offsets([0, 250]) == [1, 251]


@pytest.mark.parametrize("wrap", [bytearray, memoryview, lambda b: np.frombuffer(b, dtype=np.uint8)])
def test_bytes_like_inputs(wrap):
    buf = bytes(build_buffer(OFFSETS, 3000))
    assert locate_frames(wrap(buf)) == OFFSETS


@pytest.mark.parametrize("bad", [list(range(1000)), "a" * 1000, np.zeros((10, 100), dtype=np.uint8),
                                 np.zeros(1000, dtype=np.int16)])
def test_non_bytes_input_rejected(bad):
    with pytest.raises(TypeError):
        locate_frames(bad)


def test_buffer_not_mutated():
    buf = build_buffer(OFFSETS, 3000)
    before = bytes(buf)
    locate_frames(buf)
    assert bytes(buf) == before
