"""FilterLab: raster image filters with a live Qt preview."""

__version__ = "1.0.0"
