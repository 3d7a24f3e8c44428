"""QA package for Template Studio.

Grades templates (contrast, spacing, typography, brand) and checks exported
PPTX files against the export contract.
"""

from .validator import (
    ExportChecker,
    ValidationIssue,
    ValidationResult,
    validate_brand,
    validate_contrast,
    validate_spacing,
    validate_template,
    validate_typography,
)

__all__ = [
    "ExportChecker",
    "ValidationIssue",
    "ValidationResult",
    "validate_template",
    "validate_contrast",
    "validate_spacing",
    "validate_typography",
    "validate_brand",
]
