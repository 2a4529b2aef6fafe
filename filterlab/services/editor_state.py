"""
Editor state management.

Central in-memory store for:
- The loaded original bitmap (read-only once loaded)
- The current filter parameters
- Preview/original display mode and the active preset
"""

import math
from typing import Optional

from ..core import Bitmap, ExportSpec
from ..processing import (
    FilterParameters,
    apply_preset,
    get_definition,
    render,
)


class EditorState:
    """Central state management for the editor."""

    def __init__(self):
        self.original: Optional[Bitmap] = None
        self.source_path: Optional[str] = None
        self.params = FilterParameters()
        self.preview_mode = True
        self.active_preset: Optional[str] = None

    # ========== Image ==========

    def load_image(self, bitmap: Bitmap, source_path: Optional[str] = None) -> None:
        """Set a freshly decoded image as the original."""
        self.original = bitmap
        self.source_path = source_path

    def has_image(self) -> bool:
        """Check if an image is loaded."""
        return self.original is not None

    # ========== Parameters ==========

    def set_parameter(self, key: str, value: float) -> float:
        """
        Store a UI value, clamped into the adjustment's range.

        Returns the value actually stored.

        Raises:
            KeyError: unknown adjustment
            ValueError: value is not a finite number
        """
        definition = get_definition(key)
        value = float(value)
        if not math.isfinite(value):
            raise ValueError(f"{definition.key} must be finite")

        stored = definition.clamp(value)
        self.params.set(definition.key, stored)
        self.active_preset = None
        return stored

    def set_parameters(self, params: FilterParameters, preset: Optional[str] = None) -> None:
        """Replace all parameters (clamped) at once."""
        self.params = params.clamped()
        self.active_preset = preset

    def get_parameters(self) -> FilterParameters:
        """Get a copy of the current parameters."""
        return self.params.copy()

    def reset(self) -> None:
        """Reset every adjustment to identity."""
        self.params.reset()
        self.active_preset = None

    def apply_preset(self, name: str) -> None:
        """Reset to identity, then overlay the named preset."""
        self.params = apply_preset(name)
        self.active_preset = name

    # ========== Display ==========

    def toggle_preview(self) -> bool:
        """Switch between the filtered preview and the original. Returns new mode."""
        self.preview_mode = not self.preview_mode
        return self.preview_mode

    def render(self) -> Optional[Bitmap]:
        """Render the original with the current parameters."""
        if self.original is None:
            return None
        return render(self.original, self.params)

    def display_bitmap(self) -> Optional[Bitmap]:
        """Bitmap to show on screen for the current mode."""
        if self.original is None:
            return None
        if not self.preview_mode:
            return self.original
        return self.render()

    # ========== Export ==========

    def build_export_spec(self, output_path: str) -> ExportSpec:
        """Export specification for the current image."""
        return ExportSpec(output_path=output_path)
