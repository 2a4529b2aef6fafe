"""Tests for adjustment file save/load."""

import json

import pytest

from filterlab.processing import FilterParameters, apply_preset
from filterlab.services import AdjustmentSerializer


def test_serialize_layout():
    data = AdjustmentSerializer.serialize(FilterParameters(sepia=25), "vintage")
    assert data["format_version"] == "1.0"
    assert data["preset"] == "vintage"
    assert data["adjustments"]["sepia"] == 25
    assert data["adjustments"]["hue-rotate"] == 0


def test_file_round_trip(tmp_path):
    params = apply_preset("cinematic")
    path = tmp_path / "looks" / "cinematic.json"
    AdjustmentSerializer.save_to_file(params, path, "cinematic")

    loaded, preset = AdjustmentSerializer.load_from_file(path)
    assert loaded == params
    assert preset == "cinematic"


def test_missing_adjustments_take_identity_and_unknown_are_ignored():
    params, preset = AdjustmentSerializer.deserialize(
        {"format_version": "1.0", "adjustments": {"blur": 2, "sharpen": 5}}
    )
    assert params.blur == 2
    assert params.brightness == 100
    assert preset is None


def test_wrong_version_rejected():
    with pytest.raises(ValueError, match="version"):
        AdjustmentSerializer.deserialize({"format_version": "9.0", "adjustments": {}})


def test_out_of_range_values_rejected():
    with pytest.raises(ValueError, match="contrast"):
        AdjustmentSerializer.deserialize({"format_version": "1.0", "adjustments": {"contrast": 900}})


def test_adjustments_must_be_an_object():
    with pytest.raises(ValueError):
        AdjustmentSerializer.deserialize({"format_version": "1.0", "adjustments": [1, 2]})


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        AdjustmentSerializer.load_from_file(tmp_path / "nope.json")


def test_saved_file_is_plain_json(tmp_path):
    path = tmp_path / "look.json"
    AdjustmentSerializer.save_to_file(FilterParameters(tint=-10), path)
    data = json.loads(path.read_text())
    assert data["adjustments"]["tint"] == -10
    assert data["preset"] is None
