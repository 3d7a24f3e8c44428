"""Template quality checks and exported-document checks.

Two entry points:

- :func:`validate_template` grades an editing-session template for
  contrast, spacing, typography and brand completeness.  Errors block a
  confident export; warnings and info are advisory.
- :class:`ExportChecker` reads an exported PPTX back with python-pptx and
  confirms it honours the export contract (zip signature, one slide and one
  ``MASTER_<TYPE>`` layout per enabled layout, slide size, native charts).

Usage::

    from template_studio.qa import validate_template

    result = validate_template(store.template, store.logos, store.fonts)
    print(result.report())
"""

import io
from dataclasses import dataclass, field

from pptx import Presentation
from pptx.util import Inches

from ..color.contrast import WCAG_AA_LARGE_TEXT, WCAG_AA_NORMAL_TEXT, contrast_ratio
from ..generator.shapes import SLIDE_HEIGHT, SLIDE_WIDTH
from ..schema.models import Template, TemplateState


# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------

@dataclass
class ValidationIssue:
    """A single finding."""
    id: str
    type: str           # contrast | spacing | typography | brand | export
    severity: str       # error | warning | info
    message: str
    field: str
    details: str = ""

    def __str__(self) -> str:
        text = f"[{self.severity.upper()}] {self.field}: {self.message}"
        if self.details:
            text += f" ({self.details})"
        return text


@dataclass
class ValidationResult:
    """Aggregated findings, grouped by severity."""
    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def errors(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.severity == "error"]

    @property
    def warnings(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.severity == "warning"]

    @property
    def info(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.severity == "info"]

    @property
    def valid(self) -> bool:
        return len(self.errors) == 0

    def find(self, issue_id: str) -> ValidationIssue | None:
        return next((i for i in self.issues if i.id == issue_id), None)

    def summary(self) -> str:
        """One-line summary string."""
        status = "PASS" if self.valid else "FAIL"
        return (
            f"Validation {status}: {len(self.errors)} error(s), "
            f"{len(self.warnings)} warning(s), {len(self.info)} info"
        )

    def report(self) -> str:
        """Multi-line report of all issues."""
        lines = [self.summary()]
        for issue in self.issues:
            lines.append(f"  {issue}")
        return "\n".join(lines)


# ---------------------------------------------------------------------------
# Template checks
# ---------------------------------------------------------------------------

_CONTRAST_ROLES = (
    ("primary", "Primary color has low contrast on background"),
    ("secondary", "Secondary color has low contrast on background"),
    ("neutral", "Neutral (body text) color has low contrast on background"),
)


def validate_contrast(template: Template) -> list[ValidationIssue]:
    colors = template.tokens.colors
    issues = []
    for role, message in _CONTRAST_ROLES:
        ratio = contrast_ratio(getattr(colors, role), colors.background)
        if ratio < WCAG_AA_NORMAL_TEXT:
            issues.append(ValidationIssue(
                id=f"contrast-{role}-bg",
                type="contrast",
                severity="error" if ratio < 3 else "warning",
                message=message,
                details=f"Contrast ratio {ratio:.2f}:1 (minimum 4.5:1 required)",
                field=f"tokens.colors.{role}",
            ))

    ratio = contrast_ratio(colors.accent, colors.background)
    if ratio < WCAG_AA_LARGE_TEXT:
        issues.append(ValidationIssue(
            id="contrast-accent-bg",
            type="contrast",
            severity="warning",
            message="Accent color may have insufficient contrast",
            details=f"Contrast ratio {ratio:.2f}:1 (minimum 3:1 for large text)",
            field="tokens.colors.accent",
        ))
    return issues


def validate_spacing(template: Template) -> list[ValidationIssue]:
    spacing = template.tokens.spacing
    issues = []
    if spacing.base < 2:
        issues.append(ValidationIssue(
            "spacing-base-min", "spacing", "error", "Base spacing is too small",
            "tokens.spacing.base", f"Base spacing {spacing.base:g}px is below the 2px minimum"))
    if spacing.m < 8:
        issues.append(ValidationIssue(
            "spacing-m-min", "spacing", "warning", "Medium spacing is too small",
            "tokens.spacing.m", f"Medium spacing {spacing.m:g}px is below the 8px minimum"))
    if spacing.l < 16:
        issues.append(ValidationIssue(
            "spacing-l-min", "spacing", "warning", "Large spacing is too small",
            "tokens.spacing.l", f"Large spacing {spacing.l:g}px is below the 16px minimum"))

    density = getattr(template, "spacing_density", 1.0)
    if density < 0.7:
        issues.append(ValidationIssue(
            "spacing-density-low", "spacing", "warning", "Spacing density is very compact",
            "spacingDensity",
            "Content may appear cramped. Consider increasing spacing density."))
    return issues


def validate_typography(template: Template) -> list[ValidationIssue]:
    title, body = template.typography.title, template.typography.body
    issues = []
    if title.font_size < 18:
        issues.append(ValidationIssue(
            "typography-title-size", "typography", "error", "Title font size is too small",
            "typography.title.fontSize",
            f"Title size {title.font_size:g}pt is below the 18pt minimum"))
    if body.font_size < 12:
        issues.append(ValidationIssue(
            "typography-body-size", "typography", "error", "Body font size is too small",
            "typography.body.fontSize",
            f"Body size {body.font_size:g}pt is below the 12pt minimum"))
    if title.line_height < 1:
        issues.append(ValidationIssue(
            "typography-title-lineheight", "typography", "warning",
            "Title line height is too tight", "typography.title.lineHeight",
            "Line height should be at least 1 for readability"))
    if body.line_height < 1.2:
        issues.append(ValidationIssue(
            "typography-body-lineheight", "typography", "info",
            "Body line height may be too tight", "typography.body.lineHeight",
            "Consider using at least 1.2 line height for better readability"))
    return issues


def validate_brand(template: Template, logos=(), fonts=()) -> list[ValidationIssue]:
    issues = []
    if not logos:
        issues.append(ValidationIssue(
            "brand-no-logo", "brand", "info", "No logo uploaded", "logos",
            "Consider adding a logo for brand consistency"))
    if not fonts and template.typography.title.font_family == "Arial":
        issues.append(ValidationIssue(
            "brand-default-fonts", "brand", "info", "Using default system fonts", "fonts",
            "Upload custom fonts to match your brand identity"))
    return issues


def validate_template(template: TemplateState, logos=(), fonts=()) -> ValidationResult:
    """Run every template check.

    Parameters
    ----------
    template : TemplateState
        The template to grade.  A plain Template is accepted; the density
        check then assumes 1.0.
    logos, fonts : sequence
        Uploaded assets; only their presence matters.
    """
    return ValidationResult(issues=[
        *validate_contrast(template),
        *validate_spacing(template),
        *validate_typography(template),
        *validate_brand(template, logos, fonts),
    ])


# ---------------------------------------------------------------------------
# Exported document checks
# ---------------------------------------------------------------------------

class ExportChecker:
    """Reads an exported PPTX back and checks it against its template."""

    def check(self, buffer: bytes, template: Template) -> ValidationResult:
        result = ValidationResult()

        if buffer[:2] != b"PK":
            self._error(result, "export-signature", "Document is not a zip archive",
                        "buffer", f"First bytes {buffer[:2]!r}, expected b'PK'")
            return result

        try:
            prs = Presentation(io.BytesIO(buffer))
        except Exception as e:
            self._error(result, "export-unreadable", "Document cannot be opened",
                        "buffer", str(e))
            return result

        layouts = template.enabled_layouts
        self._check_slide_count(prs, layouts, result)
        self._check_dimensions(prs, result)
        if len(prs.slides) == len(layouts):
            for index, (slide, layout) in enumerate(zip(prs.slides, layouts)):
                self._check_slide(index, slide, layout, result)
        return result

    @staticmethod
    def _error(result, issue_id, message, field_name, details="") -> None:
        result.issues.append(ValidationIssue(issue_id, "export", "error", message,
                                             field_name, details))

    def _check_slide_count(self, prs, layouts, result) -> None:
        expected, actual = len(layouts), len(prs.slides)
        if actual != expected:
            self._error(result, "export-slide-count", "Slide count mismatch", "slides",
                        f"Expected {expected} slides (one per enabled layout), got {actual}")

    def _check_dimensions(self, prs, result) -> None:
        if prs.slide_width != Inches(SLIDE_WIDTH) or prs.slide_height != Inches(SLIDE_HEIGHT):
            result.issues.append(ValidationIssue(
                "export-dimensions", "export", "warning", "Unexpected slide size",
                "slideSize", f"Expected {SLIDE_WIDTH:g} x {SLIDE_HEIGHT:g} in"))

    def _check_slide(self, index: int, slide, layout, result) -> None:
        expected = f"MASTER_{layout.type.value.upper()}"
        actual = slide.slide_layout.name
        if actual != expected:
            self._error(result, "export-master-name", "Slide is not built on its master",
                        f"slides[{index}]", f"Expected layout '{expected}', got '{actual}'")

        if layout.type.is_chart and not any(s.has_chart for s in slide.shapes):
            result.issues.append(ValidationIssue(
                "export-chart-missing", "export", "warning", "Data slide has no native chart",
                f"slides[{index}]", f"Layout '{layout.name}' ({layout.type.value})"))
