"""Tests for the OpenImageIO adapter."""

import numpy as np
import pytest

pytest.importorskip("OpenImageIO")

from filterlab.core import Bitmap  # noqa: E402
from filterlab.oiio import OiioAdapter  # noqa: E402


def test_to_rgba_gray():
    gray = np.full((2, 3, 1), 77, dtype=np.uint8)
    rgba = OiioAdapter.to_rgba(gray)
    assert rgba.shape == (2, 3, 4)
    assert (rgba[0, 0] == [77, 77, 77, 255]).all()


def test_to_rgba_gray_alpha():
    pixels = np.zeros((1, 1, 2), dtype=np.uint8)
    pixels[0, 0] = [50, 9]
    assert OiioAdapter.to_rgba(pixels)[0, 0].tolist() == [50, 50, 50, 9]


def test_to_rgba_rgb_gets_opaque_alpha():
    pixels = np.zeros((1, 1, 3), dtype=np.uint8)
    pixels[0, 0] = [1, 2, 3]
    assert OiioAdapter.to_rgba(pixels)[0, 0].tolist() == [1, 2, 3, 255]


def test_to_rgba_drops_extra_channels():
    pixels = np.arange(5, dtype=np.uint8).reshape(1, 1, 5)
    assert OiioAdapter.to_rgba(pixels)[0, 0].tolist() == [0, 1, 2, 3]


def test_png_round_trip(tmp_path, gradient):
    path = tmp_path / "gradient.png"
    OiioAdapter.write_bitmap(gradient, path)
    assert OiioAdapter.load_bitmap(path) == gradient


def test_jpeg_export_is_opaque(tmp_path):
    path = tmp_path / "flat.jpg"
    OiioAdapter.write_bitmap(Bitmap.blank(8, 8, (120, 60, 30, 10)), path)
    loaded = OiioAdapter.load_bitmap(path)
    assert loaded.size == (8, 8)
    assert (loaded.pixels[..., 3] == 255).all()


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(RuntimeError):
        OiioAdapter.load_bitmap(tmp_path / "missing.png")


def test_supported_extensions_include_png():
    extensions = OiioAdapter.supported_extensions()
    assert "png" in extensions
    assert OiioAdapter.is_image_file("photo.PNG")
    assert not OiioAdapter.is_image_file("notes.txt")
    assert "*.png" in OiioAdapter.file_dialog_filter()
