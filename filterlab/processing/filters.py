"""
Adjustment definitions and the parameter record for the filter pipeline.

Each adjustment is a named numeric control with an identity value (no visible
effect), a legal range and a display unit. FilterParameters holds the current
value of every adjustment and is what the pipeline consumes.
"""

import math
import numbers
from dataclasses import dataclass, fields
from typing import Any, Dict, Iterator, List, Optional, Tuple


@dataclass(frozen=True)
class AdjustmentDefinition:
    """Static description of a single adjustment."""
    key: str
    name: str
    category: str
    identity: float
    min_val: float
    max_val: float
    unit: str = ""
    step: float = 1.0
    description: str = ""

    @property
    def attribute(self) -> str:
        """Python attribute name on FilterParameters."""
        return self.key.replace("-", "_")

    def validate(self, value: Any) -> Tuple[bool, str]:
        """Validate a value. Returns (is_valid, error_message)."""
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            return False, f"{self.key} must be a number"
        if not math.isfinite(value):
            return False, f"{self.key} must be finite"
        if value < self.min_val:
            return False, f"{self.key} must be >= {self.min_val:g}"
        if value > self.max_val:
            return False, f"{self.key} must be <= {self.max_val:g}"
        return True, ""

    def clamp(self, value: float) -> float:
        """Clamp a finite value into the legal range."""
        return float(max(self.min_val, min(self.max_val, value)))

    def format_value(self, value: float) -> str:
        """Human-readable value with unit, e.g. '120%' or '0.5px'."""
        return f"{value:g}{self.unit}"


# ============================================================================
# ADJUSTMENT REGISTRY
# ============================================================================

_DEFINITIONS = [
    AdjustmentDefinition(
        key="brightness", name="Brightness", category="Basic",
        identity=100, min_val=0, max_val=200, unit="%",
        description="Brightness multiplier (100% = no change)",
    ),
    AdjustmentDefinition(
        key="contrast", name="Contrast", category="Basic",
        identity=100, min_val=0, max_val=200, unit="%",
        description="Contrast multiplier around mid-gray (100% = no change)",
    ),
    AdjustmentDefinition(
        key="saturate", name="Saturation", category="Basic",
        identity=100, min_val=0, max_val=200, unit="%",
        description="Saturation multiplier (100% = no change)",
    ),
    AdjustmentDefinition(
        key="blur", name="Blur", category="Basic",
        identity=0, min_val=0, max_val=20, unit="px", step=0.1,
        description="Gaussian blur standard deviation in pixels",
    ),
    AdjustmentDefinition(
        key="hue-rotate", name="Hue Rotate", category="Color",
        identity=0, min_val=0, max_val=360, unit="°",
        description="Hue rotation angle in degrees",
    ),
    AdjustmentDefinition(
        key="temperature", name="Temperature", category="Color",
        identity=0, min_val=-50, max_val=50,
        description="Warm (positive) or cool (negative) white-balance shift",
    ),
    AdjustmentDefinition(
        key="tint", name="Tint", category="Color",
        identity=0, min_val=-50, max_val=50,
        description="Green (positive) or magenta (negative) shift",
    ),
    AdjustmentDefinition(
        key="vibrance", name="Vibrance", category="Color",
        identity=100, min_val=0, max_val=200, unit="%",
        description="Selective saturation of muted channels (100% = no change)",
    ),
    AdjustmentDefinition(
        key="grayscale", name="Grayscale", category="Effects",
        identity=0, min_val=0, max_val=100, unit="%",
        description="Amount of desaturation to gray",
    ),
    AdjustmentDefinition(
        key="sepia", name="Sepia", category="Effects",
        identity=0, min_val=0, max_val=100, unit="%",
        description="Amount of sepia toning",
    ),
    AdjustmentDefinition(
        key="invert", name="Invert", category="Effects",
        identity=0, min_val=0, max_val=100, unit="%",
        description="Amount of channel inversion",
    ),
    AdjustmentDefinition(
        key="vignette", name="Vignette", category="Effects",
        identity=0, min_val=0, max_val=100, unit="%",
        description="Strength of radial edge darkening",
    ),
]

# Registry of all adjustments, in display order
ADJUSTMENT_REGISTRY: Dict[str, AdjustmentDefinition] = {d.key: d for d in _DEFINITIONS}

_ATTRIBUTE_TO_KEY = {d.attribute: d.key for d in _DEFINITIONS}


def normalize_key(key: str) -> str:
    """Map a key or attribute name ('hue_rotate') to its registry key ('hue-rotate')."""
    if key in ADJUSTMENT_REGISTRY:
        return key
    if key in _ATTRIBUTE_TO_KEY:
        return _ATTRIBUTE_TO_KEY[key]
    raise KeyError(f"Unknown adjustment: {key}")


def get_definition(key: str) -> AdjustmentDefinition:
    """Look up an adjustment definition by key."""
    return ADJUSTMENT_REGISTRY[normalize_key(key)]


def get_adjustments_by_category(category: str) -> List[AdjustmentDefinition]:
    """Get all adjustments in a specific category."""
    return [d for d in ADJUSTMENT_REGISTRY.values() if d.category == category]


def get_all_categories() -> List[str]:
    """Get all adjustment categories in order."""
    categories = []
    for definition in ADJUSTMENT_REGISTRY.values():
        if definition.category not in categories:
            categories.append(definition.category)

    preferred_order = ["Basic", "Color", "Effects"]

    result = [cat for cat in preferred_order if cat in categories]
    result.extend(cat for cat in categories if cat not in result)
    return result


def format_value(key: str, value: float) -> str:
    """Format a value for display with the unit of its adjustment."""
    return get_definition(key).format_value(value)


# ============================================================================
# PARAMETER RECORD
# ============================================================================

@dataclass
class FilterParameters:
    """Current value of every adjustment. Defaults are the identity values."""
    brightness: float = 100
    contrast: float = 100
    saturate: float = 100
    blur: float = 0
    hue_rotate: float = 0
    temperature: float = 0
    tint: float = 0
    vibrance: float = 100
    grayscale: float = 0
    sepia: float = 0
    invert: float = 0
    vignette: float = 0

    def get(self, key: str) -> float:
        """Get a value by key ('hue-rotate' or 'hue_rotate')."""
        return getattr(self, get_definition(key).attribute)

    def set(self, key: str, value: float) -> None:
        """Set a value by key. The value is stored as given; see validate()."""
        setattr(self, get_definition(key).attribute, value)

    def reset(self) -> None:
        """Reset every adjustment to its identity value."""
        for definition in ADJUSTMENT_REGISTRY.values():
            setattr(self, definition.attribute, definition.identity)

    def is_identity(self, key: Optional[str] = None) -> bool:
        """Check if one adjustment (or all of them) sits at identity."""
        if key is not None:
            return self.get(key) == get_definition(key).identity
        return all(self.is_identity(k) for k in ADJUSTMENT_REGISTRY)

    def validate(self) -> Tuple[bool, List[str]]:
        """Validate all values. Returns (is_valid, list_of_errors)."""
        errors = []
        for key, definition in ADJUSTMENT_REGISTRY.items():
            is_valid, error_msg = definition.validate(self.get(key))
            if not is_valid:
                errors.append(error_msg)
        return len(errors) == 0, errors

    def clamped(self) -> "FilterParameters":
        """Return a copy with every value clamped into its legal range."""
        result = FilterParameters()
        for key, definition in ADJUSTMENT_REGISTRY.items():
            result.set(key, definition.clamp(self.get(key)))
        return result

    def copy(self) -> "FilterParameters":
        """Return an independent copy."""
        return FilterParameters(**{f.name: getattr(self, f.name) for f in fields(self)})

    def items(self) -> Iterator[Tuple[str, float]]:
        """Iterate (key, value) pairs in registry order."""
        for key in ADJUSTMENT_REGISTRY:
            yield key, self.get(key)

    def to_dict(self) -> Dict[str, float]:
        """Serialize to a dictionary keyed by adjustment key."""
        return dict(self.items())

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FilterParameters":
        """Build from a (possibly partial) mapping; unknown keys are ignored."""
        params = cls()
        for key, value in data.items():
            try:
                params.set(key, value)
            except KeyError:
                continue
        return params
