"""Services module initialization.

The Qt-based export runner is imported from its own module so the rest of
the services stay usable without a Qt installation.
"""
from .editor_state import EditorState
from .adjustment_serializer import AdjustmentSerializer
from .settings import Settings

__all__ = ["EditorState", "AdjustmentSerializer", "Settings"]
