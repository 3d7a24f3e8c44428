"""Export orchestration package - job lifecycle around the PPTX exporter."""

from .jobs import (
    DOWNLOAD_URL,
    ExportJob,
    ExportJobError,
    ExportJobManager,
    InMemoryTemplateRepository,
    InvalidExportFormat,
    JobNotCompleted,
    JobNotFound,
    JobStatus,
    MissingExportBuffer,
    TemplateNotFound,
    TemplateRepository,
)

__all__ = [
    # Jobs
    "ExportJob",
    "ExportJobManager",
    "JobStatus",
    "DOWNLOAD_URL",
    # Storage
    "TemplateRepository",
    "InMemoryTemplateRepository",
    # Errors
    "ExportJobError",
    "InvalidExportFormat",
    "TemplateNotFound",
    "JobNotFound",
    "JobNotCompleted",
    "MissingExportBuffer",
]
