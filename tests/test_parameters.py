"""Tests for adjustment definitions and FilterParameters."""

import math

import numpy as np
import pytest

from filterlab.processing import (
    ADJUSTMENT_REGISTRY,
    FilterParameters,
    format_value,
    get_adjustments_by_category,
    get_all_categories,
    get_definition,
    normalize_key,
)


def test_registry_identities_match_defaults():
    params = FilterParameters()
    for key, definition in ADJUSTMENT_REGISTRY.items():
        assert params.get(key) == definition.identity
    assert params.is_identity()


@pytest.mark.parametrize(
    "key, low, high",
    [
        ("brightness", 0, 200),
        ("contrast", 0, 200),
        ("saturate", 0, 200),
        ("blur", 0, 20),
        ("hue-rotate", 0, 360),
        ("temperature", -50, 50),
        ("tint", -50, 50),
        ("vibrance", 0, 200),
        ("grayscale", 0, 100),
        ("sepia", 0, 100),
        ("invert", 0, 100),
        ("vignette", 0, 100),
    ],
)
def test_ranges(key, low, high):
    definition = get_definition(key)
    assert (definition.min_val, definition.max_val) == (low, high)


def test_categories_in_tab_order():
    assert get_all_categories() == ["Basic", "Color", "Effects"]
    assert [d.key for d in get_adjustments_by_category("Color")] == [
        "hue-rotate", "temperature", "tint", "vibrance",
    ]


def test_normalize_key_accepts_attribute_names():
    assert normalize_key("hue_rotate") == "hue-rotate"
    assert normalize_key("hue-rotate") == "hue-rotate"
    with pytest.raises(KeyError):
        normalize_key("exposure")


@pytest.mark.parametrize(
    "key, value, text",
    [
        ("brightness", 120, "120%"),
        ("blur", 0.5, "0.5px"),
        ("hue-rotate", 90, "90°"),
        ("temperature", -25, "-25"),
        ("tint", 10, "10"),
    ],
)
def test_format_value_units(key, value, text):
    assert format_value(key, value) == text


def test_get_and_set_by_either_key_form():
    params = FilterParameters()
    params.set("hue-rotate", 45)
    assert params.hue_rotate == 45
    assert params.get("hue_rotate") == 45
    assert not params.is_identity("hue-rotate")
    assert params.is_identity("blur")


def test_validate_reports_every_bad_value():
    params = FilterParameters(brightness=-1, vignette=101, tint=math.inf)
    is_valid, errors = params.validate()
    assert not is_valid
    assert len(errors) == 3
    assert "brightness must be >= 0" in errors
    assert "vignette must be <= 100" in errors


def test_validate_rejects_non_numbers():
    is_valid, errors = FilterParameters(sepia="10").validate()
    assert not is_valid
    assert errors == ["sepia must be a number"]


def test_clamped_copy():
    params = FilterParameters(brightness=999, temperature=-80)
    clamped = params.clamped()
    assert clamped.brightness == 200
    assert clamped.temperature == -50
    assert params.brightness == 999


def test_reset_restores_identity():
    params = FilterParameters(contrast=150, sepia=20)
    params.reset()
    assert params.is_identity()


def test_dict_round_trip_uses_registry_keys():
    params = FilterParameters(hue_rotate=30, blur=1.5)
    data = params.to_dict()
    assert list(data) == list(ADJUSTMENT_REGISTRY)
    assert data["hue-rotate"] == 30
    assert FilterParameters.from_dict(data) == params


def test_from_dict_ignores_unknown_and_fills_missing():
    params = FilterParameters.from_dict({"sepia": 40, "exposure": 2})
    assert params.sepia == 40
    assert params.brightness == 100


def test_copy_is_independent():
    params = FilterParameters(brightness=120)
    clone = params.copy()
    clone.brightness = 80
    assert params.brightness == 120


def test_numpy_scalars_are_valid_numbers():
    params = FilterParameters(brightness=np.int64(120), blur=np.float32(1.5))
    assert params.validate() == (True, [])
    assert not FilterParameters(sepia=np.bool_(True)).validate()[0]
