import sys
from pathlib import Path

import numpy as np
import pytest

ROOT = Path(__file__).resolve().parents[1]

# Make ``filterlab`` importable without installing the project.
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from filterlab.core import Bitmap  # noqa: E402


def solid(color, width=4, height=3) -> Bitmap:
    """Bitmap filled with one RGBA color."""
    return Bitmap.blank(width, height, color)


@pytest.fixture
def gradient() -> Bitmap:
    """Small image with distinct values in every channel, alpha included."""
    height, width = 6, 8
    y, x = np.mgrid[:height, :width]
    pixels = np.empty((height, width, 4), dtype=np.uint8)
    pixels[..., 0] = (x * 30) % 256
    pixels[..., 1] = (y * 40) % 256
    pixels[..., 2] = (x * y * 7 + 20) % 256
    pixels[..., 3] = 255 - (x + y) * 5
    return Bitmap(pixels)
