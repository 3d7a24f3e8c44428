"""Export job orchestration.

Wraps the synchronous :class:`TemplateExporter` in a small job lifecycle::

    pending -> processing -> completed | failed

Jobs are processed inline, or on a ``concurrent.futures`` executor when one
is supplied.  A worker that raises marks its job failed from the future's
done-callback.  Progress values are coarse markers set around the exporter
call (10, 30, 80, 100); the exporter itself reports none.  Terminal states
are final: a failed export must be resubmitted as a new job.

Storage is abstracted behind :class:`TemplateRepository` so that a
persistent store can replace :class:`InMemoryTemplateRepository`.
"""

import functools
import logging
import threading
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from ..generator import TemplateExporter
from ..schema.models import ExportFormat, Template, TemplateState

logger = logging.getLogger(__name__)

MIME_TYPES = {
    ExportFormat.PPTX: "application/vnd.openxmlformats-officedocument.presentationml.presentation",
}

EXTENSIONS = {
    ExportFormat.PPTX: "pptx",
}

DOWNLOAD_URL = "/api/export/download/{job_id}"


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class ExportJobError(Exception):
    """Base class; ``status_code`` is the HTTP status a web layer should send."""
    status_code = 500

    def __init__(self, message: str, **details: Any) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict:
        return {"error": self.message, **self.details}


class InvalidExportFormat(ExportJobError):
    status_code = 400

    def __init__(self) -> None:
        super().__init__("Invalid export format", validFormats=[f.value for f in ExportFormat])


class TemplateNotFound(ExportJobError):
    status_code = 404

    def __init__(self) -> None:
        super().__init__("Template not found")


class JobNotFound(ExportJobError):
    status_code = 404

    def __init__(self) -> None:
        super().__init__("Export job not found")


class JobNotCompleted(ExportJobError):
    status_code = 400

    def __init__(self, status: "JobStatus") -> None:
        super().__init__("Export not yet completed", status=status.value)


class MissingExportBuffer(ExportJobError):
    status_code = 500

    def __init__(self) -> None:
        super().__init__("Export file not found")


# ---------------------------------------------------------------------------
# Template storage
# ---------------------------------------------------------------------------

class TemplateRepository:
    """Storage interface the job manager depends on."""

    def get(self, template_id: str) -> Template | None:
        raise NotImplementedError

    def save(self, template: Template) -> Template:
        raise NotImplementedError

    def delete(self, template_id: str) -> bool:
        raise NotImplementedError

    def list(self) -> list[Template]:
        raise NotImplementedError


class InMemoryTemplateRepository(TemplateRepository):
    """Dict-backed repository; contents are lost with the process."""

    def __init__(self, templates: list[Template] | None = None) -> None:
        self._templates: dict[str, Template] = {}
        for template in templates or []:
            self.save(template)

    def get(self, template_id: str) -> Template | None:
        return self._templates.get(template_id)

    def save(self, template: Template) -> Template:
        self._templates[template.id] = template
        return template

    def create(self, template: Template) -> Template:
        """Store *template* under a freshly generated id."""
        template.id = str(uuid.uuid4())
        return self.save(template)

    def delete(self, template_id: str) -> bool:
        return self._templates.pop(template_id, None) is not None

    def list(self) -> list[Template]:
        return list(self._templates.values())


# ---------------------------------------------------------------------------
# Jobs
# ---------------------------------------------------------------------------

class JobStatus(Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass
class ExportJob:
    id: str
    template_id: str
    format: ExportFormat
    status: JobStatus = JobStatus.PENDING
    progress: int = 0
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    completed_at: datetime | None = None
    error: str | None = None
    buffer: bytes | None = None

    @property
    def is_terminal(self) -> bool:
        return self.status in (JobStatus.COMPLETED, JobStatus.FAILED)

    def to_dict(self) -> dict:
        """Status view; keys match the JSON status response."""
        d: dict[str, Any] = {
            "id": self.id,
            "templateId": self.template_id,
            "format": self.format.value,
            "status": self.status.value,
            "progress": self.progress,
            "createdAt": self.created_at.isoformat(),
        }
        if self.completed_at is not None:
            d["completedAt"] = self.completed_at.isoformat()
        if self.error is not None:
            d["error"] = self.error
        if self.status == JobStatus.COMPLETED:
            d["downloadUrl"] = DOWNLOAD_URL.format(job_id=self.id)
        return d


def _coerce_template(template: Template | dict) -> Template:
    if isinstance(template, Template):
        return template
    if "styleFamily" in template:
        return TemplateState.from_dict(template)
    return Template.from_dict(template)


def _coerce_format(fmt: ExportFormat | str) -> ExportFormat:
    try:
        return ExportFormat(fmt)
    except ValueError:
        raise InvalidExportFormat() from None


class ExportJobManager:
    """Creates, runs and serves export jobs.

    Parameters
    ----------
    repository : TemplateRepository
        Where templates are looked up when a submit carries no template.
    executor : concurrent.futures.Executor, optional
        Runs :meth:`process`; None processes inline before ``submit`` returns.
    """

    def __init__(self, repository: TemplateRepository, executor=None) -> None:
        self.repository = repository
        self.executor = executor
        self._jobs: dict[str, ExportJob] = {}
        self._lock = threading.Lock()

    def submit(self, template_id: str, format: ExportFormat | str,
               template: Template | dict | None = None) -> ExportJob:
        """Start an export; raises InvalidExportFormat or TemplateNotFound."""
        export_format = _coerce_format(format)
        if template is None:
            template = self.repository.get(template_id)
        if not template:
            raise TemplateNotFound()
        template = _coerce_template(template)

        job = ExportJob(id=str(uuid.uuid4()), template_id=template_id, format=export_format)
        with self._lock:
            self._jobs[job.id] = job
        logger.info("Export job %s created for template %s", job.id, template_id)

        if self.executor is None:
            self.process(job.id, template)
        else:
            future = self.executor.submit(self.process, job.id, template)
            future.add_done_callback(functools.partial(self._on_done, job.id))
        return job

    def process(self, job_id: str, template: Template) -> None:
        """Run the exporter for a pending job and record the outcome."""
        with self._lock:
            job = self._jobs.get(job_id)
        if job is None or job.is_terminal:
            return

        job.progress = 10
        job.status = JobStatus.PROCESSING
        logger.info("Export job %s processing", job_id)
        try:
            job.progress = 30
            result = TemplateExporter(template).export()
            job.progress = 80
        except Exception as e:
            job.status = JobStatus.FAILED
            job.error = str(e) or "Unknown error"
            logger.error("Export job %s failed: %s", job_id, job.error)
            return

        if result.success and result.buffer:
            job.buffer = result.buffer
            job.completed_at = datetime.now(timezone.utc)
            job.progress = 100
            job.status = JobStatus.COMPLETED
            for warning in result.warnings:
                logger.info("Export job %s warning: %s", job_id, warning)
            logger.info("Export job %s completed (%d bytes)", job_id, len(job.buffer))
        else:
            job.status = JobStatus.FAILED
            job.error = "; ".join(result.error_messages)
            logger.error("Export job %s failed: %s", job_id, job.error)

    def _on_done(self, job_id: str, future) -> None:
        """Executor callback; a job whose worker raised is marked failed."""
        if future.cancelled():
            return
        exc = future.exception()
        if exc is None:
            return
        logger.error("Export job %s worker raised: %r", job_id, exc)
        with self._lock:
            job = self._jobs.get(job_id)
        if job is not None and not job.is_terminal:
            job.status = JobStatus.FAILED
            job.error = str(exc) or "Unknown error"

    def get(self, job_id: str) -> ExportJob:
        with self._lock:
            job = self._jobs.get(job_id)
        if job is None:
            raise JobNotFound()
        return job

    def status(self, job_id: str) -> dict:
        return self.get(job_id).to_dict()

    def download(self, job_id: str) -> tuple[bytes, str, str]:
        """Return (body, content_type, filename) for a completed job."""
        job = self.get(job_id)
        if job.status != JobStatus.COMPLETED:
            raise JobNotCompleted(job.status)
        if not job.buffer:
            raise MissingExportBuffer()
        return job.buffer, MIME_TYPES[job.format], f"template.{EXTENSIONS[job.format]}"

    def list_jobs(self) -> list[ExportJob]:
        with self._lock:
            return list(self._jobs.values())
