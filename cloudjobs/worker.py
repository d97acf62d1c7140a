import logging
import time
import uuid
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from . import metrics
from .scheduler import schedule as schedule_task

logger = logging.getLogger(__name__)


class Worker(ABC):
    """Base class for job workers.

    Subclasses implement ``perform``; the arguments given to ``perform_async``
    (or ``perform_in`` / ``perform_at``) are stored as ``job_args`` and passed
    back positionally when the job is delivered. Arguments cross a JSON
    boundary, so stick to strings, numbers, booleans, None, lists and dicts.

    Example::

        @register
        class SendEmail(Worker):
            def perform(self, user_id, template):
                ...

        SendEmail.perform_in(60, 42, "welcome")
    """

    def __init__(
        self,
        job_args: Optional[List[Any]] = None,
        job_id: Optional[str] = None,
        job_meta: Optional[Dict[str, Any]] = None,
    ):
        self.job_args = list(job_args or [])
        self.job_id = job_id or str(uuid.uuid4())
        self.job_meta = dict(job_meta or {})

    @classmethod
    def worker_name(cls) -> str:
        return f"{cls.__module__}.{cls.__qualname__}"

    @abstractmethod
    def perform(self, *args):
        ...

    def execute(self):
        """Run ``perform`` with the job arguments and return its result."""
        extra = {"job_id": self.job_id, "worker": self.worker_name()}
        logger.info("job started", extra={**extra, "event": "job.started"})
        start = time.time()
        try:
            result = self.perform(*self.job_args)
        except Exception:
            metrics.job_failures_total.inc()
            logger.exception("job failed", extra={**extra, "event": "job.failed"})
            raise
        finally:
            metrics.execution_latency_seconds.observe(time.time() - start)
        metrics.jobs_executed_total.inc()
        logger.info("job completed", extra={**extra, "event": "job.completed"})
        return result

    def schedule(self, interval=None, time_at=None):
        return schedule_task(self, interval=interval, time_at=time_at)

    @classmethod
    def perform_async(cls, *args):
        return cls(job_args=args).schedule()

    @classmethod
    def perform_in(cls, interval, *args):
        return cls(job_args=args).schedule(interval=interval)

    @classmethod
    def perform_at(cls, time_at, *args):
        return cls(job_args=args).schedule(time_at=time_at)
