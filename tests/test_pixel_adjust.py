"""Tests for temperature, tint and vibrance."""

import numpy as np

from filterlab.processing import FilterParameters, PixelAdjustStage, adjust
from filterlab.processing.pixel_adjust import needs_adjustment

from conftest import solid


def first_pixel(bitmap):
    return tuple(int(v) for v in bitmap.pixels[0, 0])


def test_identity_returns_input_unchanged():
    bitmap = solid((100, 150, 200, 255))
    assert not needs_adjustment(FilterParameters())
    assert adjust(bitmap, FilterParameters()) is bitmap


def test_warm_temperature_raises_red_and_green():
    result = adjust(solid((100, 150, 200, 255)), FilterParameters(temperature=30))
    assert first_pixel(result) == (109, 153, 200, 255)


def test_cool_temperature_raises_blue_and_green():
    result = adjust(solid((100, 150, 200, 255)), FilterParameters(temperature=-50))
    assert first_pixel(result) == (100, 155, 215, 255)


def test_temperature_saturates_at_255():
    result = adjust(solid((250, 250, 250, 255)), FilterParameters(temperature=50))
    r, g, b, _ = first_pixel(result)
    assert (r, g, b) == (255, 255, 250)


def test_positive_tint_raises_green_only():
    result = adjust(solid((100, 100, 100, 255)), FilterParameters(tint=50))
    assert first_pixel(result) == (100, 110, 100, 255)


def test_negative_tint_raises_red_only():
    result = adjust(solid((100, 100, 100, 255)), FilterParameters(tint=-50))
    assert first_pixel(result) == (110, 100, 100, 255)


def test_vibrance_leaves_gray_alone():
    result = adjust(solid((128, 128, 128, 255)), FilterParameters(vibrance=200))
    assert first_pixel(result) == (128, 128, 128, 255)


def test_vibrance_skips_every_channel_tied_for_max():
    result = adjust(solid((200, 200, 100, 255)), FilterParameters(vibrance=150))
    r, g, b, _ = first_pixel(result)
    assert (r, g) == (200, 200)
    assert b == 113


def test_low_vibrance_pushes_muted_channels_away():
    result = adjust(solid((200, 100, 100, 255)), FilterParameters(vibrance=0))
    r, g, b, _ = first_pixel(result)
    assert r == 200
    assert g < 100 and g == b


def test_alpha_is_never_touched(gradient):
    params = FilterParameters(temperature=-40, tint=25, vibrance=170)
    result = PixelAdjustStage().apply(gradient, params)
    assert np.array_equal(result.pixels[..., 3], gradient.pixels[..., 3])


def test_input_is_not_mutated(gradient):
    before = gradient.copy()
    adjust(gradient, FilterParameters(temperature=50, tint=-50, vibrance=0))
    assert gradient == before
