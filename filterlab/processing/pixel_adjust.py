"""
Per-pixel temperature, tint and vibrance adjustments.

Every pixel is processed independently: temperature, then tint, then
vibrance, then a single clamp to [0, 255]. Alpha is never touched.
Channel math runs in float64 on whole-image channel planes.
"""

import numpy as np

from ..core.types import Bitmap
from .filters import FilterParameters
from .compositing import to_uint8


def needs_adjustment(params: FilterParameters) -> bool:
    """False when temperature, tint and vibrance are all at identity."""
    return not (params.temperature == 0 and params.tint == 0 and params.vibrance == 100)


def apply_temperature(r: np.ndarray, g: np.ndarray, b: np.ndarray, temperature: float):
    """Warm shifts raise red/green, cool shifts raise blue/green."""
    t = temperature / 100
    if t > 0:
        r = np.minimum(255, r + t * 30)
        g = np.minimum(255, g + t * 10)
    elif t < 0:
        b = np.minimum(255, b - t * 30)
        g = np.minimum(255, g - t * 10)
    return r, g, b


def apply_tint(r: np.ndarray, g: np.ndarray, b: np.ndarray, tint: float):
    """Positive tint raises green, negative tint raises red."""
    u = tint / 100
    if u > 0:
        g = np.minimum(255, g + u * 20)
    elif u < 0:
        r = np.minimum(255, r - u * 20)
    return r, g, b


def apply_vibrance(r: np.ndarray, g: np.ndarray, b: np.ndarray, vibrance: float):
    """
    Pull non-dominant channels toward (or push away from) the dominant one.

    The pull is proportional to how far the pixel is from gray. Every channel
    equal to the per-pixel maximum is left alone, ties included.
    """
    v = (vibrance - 100) / 100
    peak = np.maximum(np.maximum(r, g), b)
    avg = (r + g + b) / 3
    amount = (np.abs(peak - avg) * 2 / 255) * v

    r = np.where(r != peak, r + (peak - r) * amount, r)
    g = np.where(g != peak, g + (peak - g) * amount, g)
    b = np.where(b != peak, b + (peak - b) * amount, b)
    return r, g, b


class PixelAdjustStage:
    """Temperature, tint and vibrance, in that order."""

    name = "Pixel Adjust"

    def apply(self, bitmap: Bitmap, params: FilterParameters) -> Bitmap:
        """
        Apply the per-pixel adjustments.

        Args:
            bitmap: Input bitmap (left untouched)
            params: Current filter parameters

        Returns:
            The input bitmap itself when nothing needs adjusting, otherwise a
            new bitmap.
        """
        if not needs_adjustment(params):
            return bitmap

        pixels = bitmap.pixels
        r = pixels[..., 0].astype(np.float64)
        g = pixels[..., 1].astype(np.float64)
        b = pixels[..., 2].astype(np.float64)

        if params.temperature != 0:
            r, g, b = apply_temperature(r, g, b, params.temperature)
        if params.tint != 0:
            r, g, b = apply_tint(r, g, b, params.tint)
        if params.vibrance != 100:
            r, g, b = apply_vibrance(r, g, b, params.vibrance)

        result = pixels.copy()
        result[..., 0] = to_uint8(r)
        result[..., 1] = to_uint8(g)
        result[..., 2] = to_uint8(b)
        return Bitmap(result)


def adjust(bitmap: Bitmap, params: FilterParameters) -> Bitmap:
    """Apply temperature, tint and vibrance to a bitmap."""
    return PixelAdjustStage().apply(bitmap, params)
