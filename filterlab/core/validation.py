"""
Validation engine for image export.

Structured validation rules that must pass before export.
Returns ValidationIssue list; ERROR severity blocks export.
"""

from pathlib import Path
from typing import Iterable, List, Optional, TYPE_CHECKING

from .types import (
    Bitmap,
    ExportSpec,
    ValidationIssue,
    ValidationSeverity,
)

# Avoid circular imports
if TYPE_CHECKING:
    from ..processing import FilterParameters


# Output formats that cannot carry an alpha channel
OPAQUE_FORMATS = ("jpg", "jpeg", "jpe")


class ValidationEngine:
    """Validates export configurations."""

    @staticmethod
    def validate_export(
        export_spec: ExportSpec,
        bitmap: Optional[Bitmap],
        params: "FilterParameters",
        supported_extensions: Iterable[str] = (),
    ) -> List[ValidationIssue]:
        """
        Validate an export request.

        Returns list of ValidationIssue; export is blocked if any ERROR present.
        """
        issues = []

        # 1. Something to export
        if bitmap is None:
            issues.append(
                ValidationIssue(
                    severity=ValidationSeverity.ERROR,
                    code="NO_IMAGE",
                    message="No image loaded.",
                )
            )

        # 2. Output path and format
        issues.extend(ValidationEngine._validate_output_path(export_spec, supported_extensions))

        # 3. Parameters
        issues.extend(ValidationEngine._validate_parameters(params))

        # 4. Alpha channel
        if bitmap is not None and export_spec.extension in OPAQUE_FORMATS:
            if (bitmap.pixels[..., 3] != 255).any():
                issues.append(
                    ValidationIssue(
                        severity=ValidationSeverity.WARNING,
                        code="ALPHA_DROPPED",
                        message=f"'{export_spec.extension}' has no alpha channel; transparency will be lost.",
                        context={"extension": export_spec.extension},
                    )
                )

        return issues

    @staticmethod
    def _validate_output_path(
        export_spec: ExportSpec,
        supported_extensions: Iterable[str],
    ) -> List[ValidationIssue]:
        """Validate output path and file format."""
        issues = []

        if not export_spec.output_path:
            issues.append(
                ValidationIssue(
                    severity=ValidationSeverity.ERROR,
                    code="MISSING_OUTPUT_PATH",
                    message="Output file not specified.",
                )
            )
            return issues

        supported = {ext.lower() for ext in supported_extensions}
        if supported and export_spec.extension not in supported:
            issues.append(
                ValidationIssue(
                    severity=ValidationSeverity.ERROR,
                    code="UNSUPPORTED_FORMAT",
                    message=f"Cannot write '.{export_spec.extension}' files.",
                    context={"extension": export_spec.extension},
                )
            )

        if Path(export_spec.output_path).exists():
            issues.append(
                ValidationIssue(
                    severity=ValidationSeverity.WARNING,
                    code="OUTPUT_EXISTS",
                    message=f"{export_spec.output_path} already exists and will be overwritten.",
                    context={"path": export_spec.output_path},
                )
            )

        return issues

    @staticmethod
    def _validate_parameters(params: "FilterParameters") -> List[ValidationIssue]:
        """Validate filter parameter ranges."""
        _, errors = params.validate()
        return [
            ValidationIssue(
                severity=ValidationSeverity.ERROR,
                code="INVALID_PARAMETER",
                message=error,
            )
            for error in errors
        ]


def has_errors(issues: List[ValidationIssue]) -> bool:
    """True if any issue blocks export."""
    return any(issue.severity == ValidationSeverity.ERROR for issue in issues)
