"""Tests for the compositing filters."""

import numpy as np
import pytest

from filterlab.core import Bitmap
from filterlab.processing import COMPOSITING_STEPS, CompositingStage, FilterParameters, compose
from filterlab.processing.compositing import active_steps, gaussian_kernel, to_uint8

from conftest import solid


def rgb(bitmap, x=0, y=0):
    return tuple(int(v) for v in bitmap.pixels[y, x, :3])


def test_identity_returns_equal_copy(gradient):
    result = compose(gradient, FilterParameters())
    assert result == gradient
    assert result is not gradient
    assert result.pixels is not gradient.pixels


def test_step_order():
    assert [key for key, _ in COMPOSITING_STEPS] == [
        "brightness", "contrast", "saturate", "blur",
        "hue-rotate", "grayscale", "sepia", "invert",
    ]


def test_only_non_identity_steps_run():
    params = FilterParameters(sepia=40, brightness=120)
    assert [key for key, _ in active_steps(params)] == ["brightness", "sepia"]


def test_brightness_scales_channels():
    result = compose(solid((200, 100, 50, 255)), FilterParameters(brightness=50))
    assert rgb(result) == (100, 50, 25)


def test_brightness_clamps_at_white():
    result = compose(solid((200, 100, 50, 255)), FilterParameters(brightness=200))
    assert rgb(result) == (255, 200, 100)


def test_zero_contrast_is_mid_gray():
    result = compose(solid((10, 200, 90, 255)), FilterParameters(contrast=0))
    assert rgb(result) == (128, 128, 128)


def test_zero_saturation_uses_luma_weights():
    result = compose(solid((255, 0, 0, 255)), FilterParameters(saturate=0))
    assert rgb(result) == (54, 54, 54)


def test_full_grayscale_of_pure_red():
    result = compose(solid((255, 0, 0, 255)), FilterParameters(grayscale=100))
    assert rgb(result) == (54, 54, 54)


def test_full_invert():
    result = compose(solid((200, 100, 50, 255)), FilterParameters(invert=100))
    assert rgb(result) == (55, 155, 205)


def test_half_invert_of_black_is_mid_gray():
    result = compose(solid((0, 0, 0, 255)), FilterParameters(invert=50))
    assert rgb(result) == (128, 128, 128)


def test_full_sepia_of_white_is_warm():
    r, g, b = rgb(compose(solid((255, 255, 255, 255)), FilterParameters(sepia=100)))
    # Red and green rows sum past 1 and clamp; blue row sums to 0.937
    assert (r, g) == (255, 255)
    assert b == 239


def test_full_turn_hue_rotation_is_near_identity(gradient):
    result = compose(gradient, FilterParameters(hue_rotate=360))
    diff = np.abs(result.pixels.astype(int) - gradient.pixels.astype(int))
    assert diff.max() <= 1


def test_hue_rotation_moves_red_toward_green():
    r, g, _ = rgb(compose(solid((255, 0, 0, 255)), FilterParameters(hue_rotate=120)))
    assert g > r


def test_filters_apply_in_pipeline_order():
    # brightness first: 200 -> 100, then invert -> 155
    result = compose(solid((200, 200, 200, 255)), FilterParameters(brightness=50, invert=100))
    assert rgb(result) == (155, 155, 155)


def test_alpha_untouched_by_color_filters(gradient):
    params = FilterParameters(brightness=150, contrast=80, saturate=130, sepia=60, invert=30)
    result = CompositingStage().apply(gradient, params)
    assert np.array_equal(result.pixels[..., 3], gradient.pixels[..., 3])


@pytest.mark.parametrize("sigma, length", [(0.5, 5), (1.0, 7), (2.0, 13)])
def test_gaussian_kernel_is_normalized(sigma, length):
    kernel = gaussian_kernel(sigma)
    assert len(kernel) == length
    assert kernel.sum() == pytest.approx(1.0)
    assert kernel[len(kernel) // 2] == kernel.max()


def test_blur_keeps_uniform_image_uniform():
    bitmap = solid((90, 180, 30, 255), width=10, height=7)
    assert compose(bitmap, FilterParameters(blur=3)) == bitmap


def test_blur_spreads_a_bright_pixel():
    bitmap = solid((0, 0, 0, 255), width=9, height=9)
    bitmap.pixels[4, 4, :3] = 255
    result = compose(bitmap, FilterParameters(blur=1))
    assert result.pixels[4, 4, 0] < 255
    assert result.pixels[4, 5, 0] > 0
    assert result.pixels[3, 4, 0] == result.pixels[4, 5, 0]
    assert result.pixels[0, 0, 0] == 0


def test_to_uint8_rounds_half_to_even_and_clamps():
    values = np.array([-3.0, 0.5, 1.5, 2.5, 254.6, 300.0])
    assert to_uint8(values).tolist() == [0, 0, 2, 2, 255, 255]


def test_input_is_not_mutated(gradient):
    before = gradient.copy()
    compose(gradient, FilterParameters(brightness=180, blur=2, invert=100))
    assert gradient == before


def test_blur_does_not_bleed_transparent_color():
    pixels = np.zeros((1, 9, 4), dtype=np.uint8)
    pixels[0, :5] = [255, 255, 255, 255]
    result = compose(Bitmap(pixels), FilterParameters(blur=1))

    edge = result.pixels[0, 4]
    assert edge[:3].tolist() == [255, 255, 255]
    assert 0 < edge[3] < 255
    # Partly covered transparent pixels pick up white, not grey
    assert result.pixels[0, 5, :3].tolist() == [255, 255, 255]
    assert result.pixels[0, 5, 3] < edge[3]
