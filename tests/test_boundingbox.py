import pytest

from pkrom.boundingbox import add_bounding_box

SIZE = 7 * 7 * 8


def _plane(seed):
    return bytes((seed + i) % 255 + 1 for i in range(SIZE))


def test_full_box_is_plain_interleave():
    plane0, plane1 = _plane(0), _plane(100)
    result = add_bounding_box(plane0, plane1, 0x77, 7, 7, 8)
    assert len(result) == 2 * SIZE
    assert result[0::2] == plane0
    assert result[1::2] == plane1


def test_five_by_five_box_is_bottom_centred():
    plane0, plane1 = _plane(3), _plane(50)
    result = add_bounding_box(plane0, plane1, 0x55, 7, 7, 8)
    even, odd = result[0::2], result[1::2]
    starts = [72, 128, 184, 240, 296]
    expected0 = bytearray(SIZE)
    expected1 = bytearray(SIZE)
    for column, start in enumerate(starts):
        expected0[start : start + 40] = plane0[40 * column : 40 * column + 40]
        expected1[start : start + 40] = plane1[40 * column : 40 * column + 40]
    assert even == bytes(expected0)
    assert odd == bytes(expected1)


def test_small_frame_single_tile_box():
    result = add_bounding_box(bytes([1, 2, 3, 4]), bytes([5, 6, 7, 8]), 0x11, 2, 2, 1)
    assert result == bytes([0, 0, 0, 0, 0, 0, 1, 5])


def test_empty_box_gives_blank_frame():
    result = add_bounding_box(_plane(1), _plane(2), 0x00, 7, 7, 8)
    assert result == bytes(2 * SIZE)


def test_mismatched_planes_rejected():
    with pytest.raises(ValueError):
        add_bounding_box(bytes(10), bytes(12), 0x11, 2, 2, 1)


def test_box_larger_than_plane_rejected():
    with pytest.raises(ValueError):
        add_bounding_box(_plane(0), _plane(1), 0x88, 7, 7, 8)