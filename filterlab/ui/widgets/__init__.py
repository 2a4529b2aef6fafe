"""UI widgets module."""
from .adjustment_panel import AdjustmentPanel
from .image_view import ImageView
from .preset_bar import PresetBar

__all__ = [
    "AdjustmentPanel",
    "ImageView",
    "PresetBar",
]
