"""
Adjustment file serialization.

Saves and loads filter parameters to/from JSON so a look can be reused
across images.
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from ..processing import ADJUSTMENT_REGISTRY, FilterParameters


class AdjustmentSerializer:
    """
    Serializes and deserializes FilterParameters to/from JSON.

    Format is extensible:
    - Version field allows backward compatibility
    - Missing adjustments fall back to identity values
    - Unknown adjustments are ignored
    """

    # Format version for future compatibility
    FORMAT_VERSION = "1.0"

    @staticmethod
    def serialize(params: FilterParameters, preset: Optional[str] = None) -> Dict[str, Any]:
        """Convert parameters to a serializable dictionary."""
        return {
            "format_version": AdjustmentSerializer.FORMAT_VERSION,
            "preset": preset,
            "adjustments": params.to_dict(),
        }

    @staticmethod
    def deserialize(data: Dict[str, Any]) -> Tuple[FilterParameters, Optional[str]]:
        """
        Convert a dictionary back to parameters.

        Returns (params, preset_name).

        Raises:
            ValueError: unsupported version or out-of-range values
        """
        version = data.get("format_version", "1.0")
        if version != AdjustmentSerializer.FORMAT_VERSION:
            raise ValueError(
                f"Unsupported adjustment format version: {version}. "
                f"Expected {AdjustmentSerializer.FORMAT_VERSION}"
            )

        adjustments = data.get("adjustments", {})
        if not isinstance(adjustments, dict):
            raise ValueError("'adjustments' must be an object")

        known = {k: v for k, v in adjustments.items() if k in ADJUSTMENT_REGISTRY}
        params = FilterParameters.from_dict(known)

        is_valid, errors = params.validate()
        if not is_valid:
            raise ValueError(f"Invalid adjustments: {'; '.join(errors)}")

        return params, data.get("preset")

    @staticmethod
    def save_to_file(params: FilterParameters, file_path: Path, preset: Optional[str] = None) -> None:
        """Save parameters to a JSON file."""
        data = AdjustmentSerializer.serialize(params, preset)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        with open(file_path, "w") as f:
            json.dump(data, f, indent=2)

    @staticmethod
    def load_from_file(file_path: Path) -> Tuple[FilterParameters, Optional[str]]:
        """Load parameters from a JSON file."""
        if not file_path.exists():
            raise FileNotFoundError(f"Adjustment file not found: {file_path}")

        with open(file_path, "r") as f:
            data = json.load(f)

        return AdjustmentSerializer.deserialize(data)
