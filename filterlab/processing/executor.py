"""
Processing executor - runs the filter pipeline on a bitmap.

The same render() call backs the interactive preview and the exported file,
so what the user sees is exactly what gets written.
"""

from typing import List, Optional, Protocol

from ..core.types import Bitmap
from ..utils.logging import logger
from .filters import FilterParameters
from .compositing import CompositingStage
from .pixel_adjust import PixelAdjustStage
from .vignette import VignetteStage


class ProcessingStage(Protocol):
    """A pipeline stage: maps a bitmap to a bitmap of the same size."""

    name: str

    def apply(self, bitmap: Bitmap, params: FilterParameters) -> Bitmap:
        ...


def default_stages() -> List[ProcessingStage]:
    """Compositing, then per-pixel adjustments, then vignette."""
    return [CompositingStage(), PixelAdjustStage(), VignetteStage()]


class ProcessingExecutor:
    """Executes the stage chain. Holds no state between calls."""

    def __init__(self, stages: Optional[List[ProcessingStage]] = None):
        self.stages = stages if stages is not None else default_stages()

    def execute(self, original: Bitmap, params: FilterParameters) -> Bitmap:
        """
        Apply every stage in order to a copy of the original.

        Args:
            original: Source bitmap, never modified
            params: Filter parameters, already clamped by the caller

        Returns:
            Rendered bitmap with the same dimensions as the original

        Raises:
            ValueError: a parameter is out of range or not finite
            RuntimeError: a stage changed the bitmap dimensions
        """
        is_valid, errors = params.validate()
        if not is_valid:
            raise ValueError(f"Invalid filter parameters: {'; '.join(errors)}")

        result = original
        for stage in self.stages:
            output = stage.apply(result, params)
            if not output.same_size(result):
                raise RuntimeError(
                    f"Stage {stage.name} changed bitmap size from "
                    f"{result.width}x{result.height} to {output.width}x{output.height}"
                )
            result = output

        if result is original:
            result = original.copy()

        logger.debug("Rendered %dx%d bitmap", result.width, result.height)
        return result


def render(original: Bitmap, params: FilterParameters) -> Bitmap:
    """Render the original bitmap with the given parameters."""
    return ProcessingExecutor().execute(original, params)
