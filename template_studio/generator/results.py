"""Result records returned by the document exporter.

The exporter never raises past its entry point; every outcome is an
:class:`ExportResult` carrying warnings, errors and one metrics record.
"""

import time
from dataclasses import dataclass, field


def now_ms() -> int:
    return int(time.time() * 1000)


@dataclass
class ExportWarning:
    """A degraded-but-successful condition, e.g. a substituted font."""
    code: str
    message: str
    severity: str = "medium"         # low | medium | high

    def __str__(self) -> str:
        return f"[{self.severity.upper()}] {self.code}: {self.message}"

    def to_dict(self) -> dict:
        return {"code": self.code, "message": self.message, "severity": self.severity}


@dataclass
class ExportError:
    code: str
    message: str
    recoverable: bool = False

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"

    def to_dict(self) -> dict:
        return {"code": self.code, "message": self.message, "recoverable": self.recoverable}


@dataclass
class ExportMetrics:
    start_time: int
    end_time: int = 0
    slide_count: int = 0
    master_slide_count: int = 0
    font_substitutions: int = 0

    @property
    def duration_ms(self) -> int:
        return max(self.end_time - self.start_time, 0)

    def to_dict(self) -> dict:
        return {
            "startTime": self.start_time,
            "endTime": self.end_time,
            "slideCount": self.slide_count,
            "masterSlideCount": self.master_slide_count,
            "fontSubstitutions": self.font_substitutions,
        }


@dataclass
class ExportResult:
    success: bool
    metrics: ExportMetrics
    buffer: bytes | None = None
    warnings: list[ExportWarning] = field(default_factory=list)
    errors: list[ExportError] = field(default_factory=list)

    @property
    def error_messages(self) -> list[str]:
        return [e.message for e in self.errors]

    def to_dict(self) -> dict:
        """JSON-friendly view; the buffer is reported by size only."""
        return {
            "success": self.success,
            "bufferSize": len(self.buffer) if self.buffer else 0,
            "warnings": [w.to_dict() for w in self.warnings],
            "errors": [e.to_dict() for e in self.errors],
            "metrics": self.metrics.to_dict(),
        }


@dataclass(frozen=True)
class AdapterCapabilities:
    supports_master_slides: bool = True
    supports_editable_text: bool = True
    supports_editable_shapes: bool = True
    supports_gradients: bool = True
    supports_custom_fonts: bool = True
    max_slide_count: int = 500
