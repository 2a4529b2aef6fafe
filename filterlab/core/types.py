"""
Core data types for FilterLab.

All types use @dataclass and Enum for structured representations.
No loose dicts or bare arrays at the internal API boundary.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from typing import Tuple

import numpy as np


CHANNELS = 4  # R, G, B, A


class ValidationSeverity(Enum):
    """Validation issue severity."""
    ERROR = auto()
    WARNING = auto()


@dataclass(eq=False)
class Bitmap:
    """Fixed-size RGBA image, stored as a (height, width, 4) uint8 array."""
    pixels: np.ndarray

    def __post_init__(self) -> None:
        pixels = self.pixels
        if not isinstance(pixels, np.ndarray):
            raise ValueError("Bitmap pixels must be a numpy array")
        if pixels.ndim != 3 or pixels.shape[2] != CHANNELS:
            raise ValueError(f"Bitmap pixels must have shape (height, width, 4), got {pixels.shape}")
        if pixels.dtype != np.uint8:
            raise ValueError(f"Bitmap pixels must be uint8, got {pixels.dtype}")
        if pixels.shape[0] < 1 or pixels.shape[1] < 1:
            raise ValueError("Bitmap must be at least 1x1 pixels")

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    @property
    def size(self) -> Tuple[int, int]:
        """(width, height) tuple."""
        return self.width, self.height

    def same_size(self, other: "Bitmap") -> bool:
        """Check whether two bitmaps have identical dimensions."""
        return self.size == other.size

    def copy(self) -> "Bitmap":
        """Return an independent copy of this bitmap."""
        return Bitmap(self.pixels.copy())

    def tobytes(self) -> bytes:
        """Raw RGBA bytes in row-major order."""
        return self.pixels.tobytes()

    @classmethod
    def blank(
        cls,
        width: int,
        height: int,
        color: Tuple[int, int, int, int] = (0, 0, 0, 255),
    ) -> "Bitmap":
        """Create a bitmap filled with a single RGBA color."""
        pixels = np.empty((height, width, CHANNELS), dtype=np.uint8)
        pixels[...] = np.asarray(color, dtype=np.uint8)
        return cls(pixels)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bitmap):
            return NotImplemented
        return self.pixels.shape == other.pixels.shape and np.array_equal(self.pixels, other.pixels)

    __hash__ = None  # mutable buffer

    def __repr__(self) -> str:
        return f"Bitmap({self.width}x{self.height})"


@dataclass
class ExportSpec:
    """Where and how the rendered image gets written."""
    output_path: str

    @property
    def extension(self) -> str:
        """Lower-case file extension without the dot."""
        return Path(self.output_path).suffix.lower().lstrip(".")


@dataclass
class ValidationIssue:
    """A validation problem."""
    severity: ValidationSeverity
    code: str
    message: str
    context: dict = field(default_factory=dict)

    def __str__(self) -> str:
        return f"[{self.severity.name}] {self.code}: {self.message}"
