"""Tests for the Bitmap value type."""

import numpy as np
import pytest

from filterlab.core import Bitmap


def test_blank_fills_every_pixel():
    bitmap = Bitmap.blank(3, 2, (10, 20, 30, 40))
    assert bitmap.size == (3, 2)
    assert bitmap.pixels.shape == (2, 3, 4)
    assert (bitmap.pixels == [10, 20, 30, 40]).all()


@pytest.mark.parametrize(
    "pixels",
    [
        np.zeros((2, 2, 3), dtype=np.uint8),
        np.zeros((2, 2), dtype=np.uint8),
        np.zeros((2, 2, 4), dtype=np.float32),
        np.zeros((0, 2, 4), dtype=np.uint8),
    ],
)
def test_rejects_malformed_buffers(pixels):
    with pytest.raises(ValueError):
        Bitmap(pixels)


def test_rejects_non_arrays():
    with pytest.raises(ValueError):
        Bitmap([[[0, 0, 0, 0]]])


def test_copy_is_independent():
    bitmap = Bitmap.blank(2, 2, (1, 2, 3, 4))
    clone = bitmap.copy()
    assert clone == bitmap
    clone.pixels[0, 0, 0] = 99
    assert bitmap.pixels[0, 0, 0] == 1
    assert clone != bitmap


def test_tobytes_is_row_major_rgba():
    bitmap = Bitmap.blank(2, 1, (1, 2, 3, 4))
    assert bitmap.tobytes() == bytes([1, 2, 3, 4, 1, 2, 3, 4])


def test_same_size_compares_dimensions_only():
    assert Bitmap.blank(4, 3).same_size(Bitmap.blank(4, 3, (9, 9, 9, 9)))
    assert not Bitmap.blank(4, 3).same_size(Bitmap.blank(3, 4))
