"""Radial vignette: multiply the image by a black layer of growing opacity."""

import math

import numpy as np

from ..core.types import Bitmap
from .filters import FilterParameters
from .compositing import to_uint8

# (normalized distance, opacity per unit of intensity)
VIGNETTE_STOPS = ((0.0, 0.0), (0.6, 0.1), (1.0, 0.8))


def vignette_alpha(distance, intensity: float):
    """Darkening opacity at a normalized distance from the image center."""
    positions = [stop[0] for stop in VIGNETTE_STOPS]
    opacities = [stop[1] * intensity for stop in VIGNETTE_STOPS]
    return np.interp(np.minimum(distance, 1.0), positions, opacities)


def vignette_mask(width: int, height: int, intensity: float) -> np.ndarray:
    """Per-pixel opacity of the black layer, shape (height, width)."""
    cx, cy = width / 2, height / 2
    max_radius = math.sqrt(cx * cx + cy * cy)
    y, x = np.ogrid[:height, :width]
    distance = np.sqrt((x - cx) ** 2 + (y - cy) ** 2) / max_radius
    return vignette_alpha(distance, intensity)


class VignetteStage:
    """Darkens the image toward its corners."""

    name = "Vignette"

    def apply(self, bitmap: Bitmap, params: FilterParameters) -> Bitmap:
        if params.vignette == 0:
            return bitmap

        alpha = vignette_mask(bitmap.width, bitmap.height, params.vignette / 100)
        pixels = bitmap.pixels
        result = pixels.copy()
        # Multiplying by black at opacity a leaves c * (1 - a)
        result[..., :3] = to_uint8(pixels[..., :3] * (1.0 - alpha)[..., np.newaxis])
        return Bitmap(result)


def vignette(bitmap: Bitmap, params: FilterParameters) -> Bitmap:
    """Apply the vignette to a bitmap."""
    return VignetteStage().apply(bitmap, params)
