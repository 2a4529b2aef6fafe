"""
Filter pipeline for FilterLab.

Turns an original bitmap plus a FilterParameters record into a rendered
bitmap: compositing filters, then per-pixel temperature/tint/vibrance, then
the vignette. Pure numpy, no UI dependencies.
"""

from .filters import (
    AdjustmentDefinition,
    FilterParameters,
    ADJUSTMENT_REGISTRY,
    format_value,
    get_definition,
    get_adjustments_by_category,
    get_all_categories,
    normalize_key,
)
from .compositing import CompositingStage, COMPOSITING_STEPS, compose
from .pixel_adjust import PixelAdjustStage, adjust
from .vignette import VignetteStage
from .executor import ProcessingExecutor, render
from .presets import PRESETS, apply_preset, get_preset_names

__all__ = [
    "AdjustmentDefinition",
    "FilterParameters",
    "ADJUSTMENT_REGISTRY",
    "ProcessingExecutor",
    "render",
    # Stages
    "CompositingStage",
    "COMPOSITING_STEPS",
    "compose",
    "PixelAdjustStage",
    "adjust",
    "VignetteStage",
    # Helpers
    "format_value",
    "get_definition",
    "get_adjustments_by_category",
    "get_all_categories",
    "normalize_key",
    # Presets
    "PRESETS",
    "apply_preset",
    "get_preset_names",
]
