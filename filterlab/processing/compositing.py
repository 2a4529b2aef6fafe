"""
Compositing stage: global tone/color filters.

Brightness, contrast, saturation, blur, hue rotation, grayscale, sepia and
invert, applied in a fixed order whenever their value differs from identity.
Color formulas follow the CSS Filter Effects definitions, evaluated on RGB
normalized to [0, 1] with a clamp after each filter.
"""

import math
from typing import Callable, List, Tuple

import numpy as np

from ..core.types import Bitmap
from .filters import FilterParameters

# (height, width, 4) float array, amount in the adjustment's own units
Transform = Callable[[np.ndarray, float], np.ndarray]


def _apply_matrix(rgba: np.ndarray, matrix: np.ndarray) -> np.ndarray:
    """Multiply the RGB part of every pixel by a 3x3 color matrix."""
    rgba[..., :3] = rgba[..., :3] @ matrix.T
    return rgba


def brightness(rgba: np.ndarray, value: float) -> np.ndarray:
    rgba[..., :3] *= value / 100.0
    return rgba


def contrast(rgba: np.ndarray, value: float) -> np.ndarray:
    amount = value / 100.0
    rgba[..., :3] = rgba[..., :3] * amount + (0.5 - 0.5 * amount)
    return rgba


def saturate(rgba: np.ndarray, value: float) -> np.ndarray:
    s = value / 100.0
    matrix = np.array([
        [0.213 + 0.787 * s, 0.715 - 0.715 * s, 0.072 - 0.072 * s],
        [0.213 - 0.213 * s, 0.715 + 0.285 * s, 0.072 - 0.072 * s],
        [0.213 - 0.213 * s, 0.715 - 0.715 * s, 0.072 + 0.928 * s],
    ])
    return _apply_matrix(rgba, matrix)


def hue_rotate(rgba: np.ndarray, value: float) -> np.ndarray:
    angle = math.radians(value)
    cos, sin = math.cos(angle), math.sin(angle)
    matrix = np.array([
        [0.213 + cos * 0.787 - sin * 0.213, 0.715 - cos * 0.715 - sin * 0.715, 0.072 - cos * 0.072 + sin * 0.928],
        [0.213 - cos * 0.213 + sin * 0.143, 0.715 + cos * 0.285 + sin * 0.140, 0.072 - cos * 0.072 - sin * 0.283],
        [0.213 - cos * 0.213 - sin * 0.787, 0.715 - cos * 0.715 + sin * 0.715, 0.072 + cos * 0.928 + sin * 0.072],
    ])
    return _apply_matrix(rgba, matrix)


def grayscale(rgba: np.ndarray, value: float) -> np.ndarray:
    keep = 1.0 - value / 100.0
    matrix = np.array([
        [0.2126 + 0.7874 * keep, 0.7152 - 0.7152 * keep, 0.0722 - 0.0722 * keep],
        [0.2126 - 0.2126 * keep, 0.7152 + 0.2848 * keep, 0.0722 - 0.0722 * keep],
        [0.2126 - 0.2126 * keep, 0.7152 - 0.7152 * keep, 0.0722 + 0.9278 * keep],
    ])
    return _apply_matrix(rgba, matrix)


def sepia(rgba: np.ndarray, value: float) -> np.ndarray:
    keep = 1.0 - value / 100.0
    matrix = np.array([
        [0.393 + 0.607 * keep, 0.769 - 0.769 * keep, 0.189 - 0.189 * keep],
        [0.349 - 0.349 * keep, 0.686 + 0.314 * keep, 0.168 - 0.168 * keep],
        [0.272 - 0.272 * keep, 0.534 - 0.534 * keep, 0.131 + 0.869 * keep],
    ])
    return _apply_matrix(rgba, matrix)


def invert(rgba: np.ndarray, value: float) -> np.ndarray:
    amount = value / 100.0
    rgba[..., :3] = amount * (1.0 - rgba[..., :3]) + (1.0 - amount) * rgba[..., :3]
    return rgba


def gaussian_kernel(sigma: float) -> np.ndarray:
    """Normalized 1-D Gaussian kernel with radius ceil(3 * sigma)."""
    radius = max(1, int(math.ceil(3.0 * sigma)))
    x = np.arange(-radius, radius + 1, dtype=np.float64)
    kernel = np.exp(-(x * x) / (2.0 * sigma * sigma))
    return kernel / kernel.sum()


def _convolve_axis(data: np.ndarray, kernel: np.ndarray, axis: int) -> np.ndarray:
    radius = len(kernel) // 2
    pad = [(0, 0)] * data.ndim
    pad[axis] = (radius, radius)
    padded = np.pad(data, pad, mode="edge")
    result = np.zeros_like(data)
    length = data.shape[axis]
    for offset, weight in enumerate(kernel):
        result += weight * np.take(padded, np.arange(offset, offset + length), axis=axis)
    return result


def blur(rgba: np.ndarray, value: float) -> np.ndarray:
    """Separable Gaussian blur on premultiplied color, edges replicated."""
    kernel = gaussian_kernel(value)
    premultiplied = rgba.copy()
    premultiplied[..., :3] *= rgba[..., 3:]
    blurred = _convolve_axis(premultiplied, kernel, axis=0)
    blurred = _convolve_axis(blurred, kernel, axis=1)

    # Back to straight alpha; fully transparent pixels end up black
    alpha = blurred[..., 3:]
    blurred[..., :3] = np.divide(
        blurred[..., :3], alpha, out=np.zeros_like(blurred[..., :3]), where=alpha > 0
    )
    return blurred


# Applied in this order, each only when its value differs from identity
COMPOSITING_STEPS: List[Tuple[str, Transform]] = [
    ("brightness", brightness),
    ("contrast", contrast),
    ("saturate", saturate),
    ("blur", blur),
    ("hue-rotate", hue_rotate),
    ("grayscale", grayscale),
    ("sepia", sepia),
    ("invert", invert),
]


def active_steps(params: FilterParameters) -> List[Tuple[str, Transform]]:
    """Steps that will run for the given parameters, in pipeline order."""
    return [(key, fn) for key, fn in COMPOSITING_STEPS if not params.is_identity(key)]


def to_uint8(values: np.ndarray) -> np.ndarray:
    """Clamp to [0, 255] and round half-to-even into uint8."""
    return np.rint(np.clip(values, 0.0, 255.0)).astype(np.uint8)


class CompositingStage:
    """Global filters driven by the COMPOSITING_STEPS table."""

    name = "Compositing"

    def apply(self, bitmap: Bitmap, params: FilterParameters) -> Bitmap:
        """Return a new bitmap with every active compositing filter applied."""
        steps = active_steps(params)
        if not steps:
            return bitmap.copy()

        rgba = bitmap.pixels.astype(np.float64) / 255.0
        for key, transform in steps:
            rgba = transform(rgba, params.get(key))
            np.clip(rgba, 0.0, 1.0, out=rgba)

        return Bitmap(to_uint8(rgba * 255.0))


def compose(bitmap: Bitmap, params: FilterParameters) -> Bitmap:
    """Apply the compositing filters to a bitmap."""
    return CompositingStage().apply(bitmap, params)
