"""Zoom and pan state of the image view, kept free of Qt types."""

from dataclasses import dataclass

MIN_ZOOM = 0.1
MAX_ZOOM = 3.0
ZOOM_STEP = 0.1


@dataclass
class ViewTransform:
    """On-screen zoom factor and pan offset (in unzoomed pixels)."""
    zoom: float = 1.0
    offset_x: float = 0.0
    offset_y: float = 0.0

    def adjust_zoom(self, delta: float) -> float:
        """Change zoom by delta, clamped to [MIN_ZOOM, MAX_ZOOM]. Returns new zoom."""
        # Round away float drift from repeated 0.1 steps
        self.zoom = round(max(MIN_ZOOM, min(MAX_ZOOM, self.zoom + delta)), 4)
        return self.zoom

    def zoom_for_wheel(self, angle_delta_y: int) -> float:
        """Wheel down zooms out, wheel up zooms in."""
        return self.adjust_zoom(-ZOOM_STEP if angle_delta_y < 0 else ZOOM_STEP)

    def pan(self, dx: float, dy: float) -> None:
        """Move the image by a screen-space drag delta."""
        self.offset_x += dx / self.zoom
        self.offset_y += dy / self.zoom

    def reset(self) -> None:
        """Back to 100% and centered."""
        self.zoom = 1.0
        self.offset_x = 0.0
        self.offset_y = 0.0

    def zoom_label(self) -> str:
        return f"{round(self.zoom * 100)}%"
