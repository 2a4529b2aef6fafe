"""
Built-in looks.

A preset only names the adjustments it changes. Applying one starts from
identity values, so nothing from the previous state leaks through.
"""

from typing import Dict, List

from .filters import FilterParameters


PRESETS: Dict[str, Dict[str, float]] = {
    "vintage": {
        "brightness": 110,
        "contrast": 120,
        "saturate": 80,
        "sepia": 30,
        "temperature": 20,
        "vignette": 25,
    },
    "cinematic": {
        "brightness": 90,
        "contrast": 140,
        "saturate": 110,
        "temperature": -10,
        "tint": 5,
        "vignette": 15,
    },
    "warm": {
        "brightness": 105,
        "contrast": 110,
        "saturate": 120,
        "temperature": 30,
        "tint": -5,
    },
    "cool": {
        "brightness": 95,
        "contrast": 105,
        "saturate": 90,
        "temperature": -25,
        "tint": 10,
    },
    "dramatic": {
        "brightness": 80,
        "contrast": 160,
        "saturate": 130,
        "vignette": 40,
    },
    "soft": {
        "brightness": 115,
        "contrast": 85,
        "saturate": 90,
        "blur": 0.5,
        "temperature": 10,
    },
}


def get_preset_names() -> List[str]:
    """Preset names in display order."""
    return list(PRESETS)


def apply_preset(name: str) -> FilterParameters:
    """Return identity parameters overlaid with the named preset."""
    if name not in PRESETS:
        raise KeyError(f"Unknown preset: {name}")

    params = FilterParameters()
    for key, value in PRESETS[name].items():
        params.set(key, value)
    return params
