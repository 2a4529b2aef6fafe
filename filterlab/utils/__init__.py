"""Shared utilities."""
from .logging import get_logger, logger

__all__ = ["get_logger", "logger"]
