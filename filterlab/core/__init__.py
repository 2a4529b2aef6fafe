"""Core data types and validation."""
from .types import (
    Bitmap,
    ExportSpec,
    ValidationIssue,
    ValidationSeverity,
)
from .validation import ValidationEngine, has_errors

__all__ = [
    "Bitmap",
    "ExportSpec",
    "ValidationIssue",
    "ValidationSeverity",
    "ValidationEngine",
    "has_errors",
]
