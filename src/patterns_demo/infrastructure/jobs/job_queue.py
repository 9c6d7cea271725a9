"""In-process job queue standing in for a background worker."""
import uuid
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Callable, Deque, Dict, List, Optional

from patterns_demo.infrastructure.logging.logger import get_logger


@dataclass
class Job:
    """A deferred call."""
    name: str
    func: Callable[..., Any] = field(repr=False)
    kwargs: Dict[str, Any] = field(default_factory=dict, repr=False)
    job_id: str = field(default_factory=lambda: str(uuid.uuid4()))


@dataclass
class JobResult:
    """Outcome of running one job."""
    job_id: str
    name: str
    status: str
    result: Any = None
    error: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.status == "completed"


class JobQueue:
    """First-in first-out queue of jobs, drained explicitly with ``run_pending``."""

    def __init__(self, logger: Any = None):
        self._pending: Deque[Job] = deque()
        self._logger = logger or get_logger(__name__)

    def __len__(self) -> int:
        return len(self._pending)

    def dispatch(self, name: str, func: Callable[..., Any], **kwargs: Any) -> Job:
        job = Job(name=name, func=func, kwargs=kwargs)
        self._pending.append(job)
        self._logger.debug("Job queued", job=name, job_id=job.job_id)
        return job

    def run_pending(self) -> List[JobResult]:
        """Run every queued job in order.

        A failing job is recorded as failed and does not stop the others.
        """
        results: List[JobResult] = []
        while self._pending:
            job = self._pending.popleft()
            try:
                value = job.func(**job.kwargs)
            except Exception as e:
                self._logger.error("Job failed", job=job.name, job_id=job.job_id, error=str(e))
                results.append(JobResult(job.job_id, job.name, "failed", error=str(e)))
                continue
            self._logger.info("Job completed", job=job.name, job_id=job.job_id)
            results.append(JobResult(job.job_id, job.name, "completed", result=value))
        return results
