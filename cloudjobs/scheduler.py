import logging
import time
from datetime import datetime, timedelta
from typing import Any, Dict, Optional, Union

from google.cloud import tasks_v2
from google.protobuf import timestamp_pb2

from . import codec
from . import metrics
from .authenticator import Authenticator
from .config import Config, get_config
from .queue_client import get_client, queue_path

logger = logging.getLogger(__name__)

Interval = Union[int, float, timedelta]
TimeAt = Union[int, float, datetime]


def _seconds(interval: Optional[Interval]) -> float:
    if interval is None:
        return 0
    if isinstance(interval, timedelta):
        return interval.total_seconds()
    return interval


def _epoch(time_at: TimeAt) -> float:
    if isinstance(time_at, datetime):
        return time_at.timestamp()
    return time_at


def schedule_time(interval: Optional[Interval] = None, time_at: Optional[TimeAt] = None) -> Optional[timestamp_pb2.Timestamp]:
    """Return the delivery timestamp for a task, or None to run it now.

    The delivery time is ``(time_at or now) + interval``, truncated to whole
    seconds.
    """
    if interval is None and time_at is None:
        return None
    base = _epoch(time_at) if time_at is not None else time.time()
    return timestamp_pb2.Timestamp(seconds=int(base + _seconds(interval)))


def worker_payload(worker) -> bytes:
    """Return the body Cloud Tasks will eventually POST to the processor."""
    return codec.encode(worker.worker_name(), worker.job_id, worker.job_args, worker.job_meta)


def task_payload(worker, config: Optional[Config] = None, not_before: Optional[float] = None) -> Dict[str, Any]:
    config = config or get_config()
    token = Authenticator.from_config(config).issue(not_before=not_before)
    return {
        "http_request": {
            "http_method": tasks_v2.HttpMethod.POST,
            "url": config.processor_url,
            "headers": {
                "Content-Type": "application/json",
                "Authorization": f"Bearer {token}",
            },
            "body": worker_payload(worker),
        }
    }


def schedule(worker, interval: Optional[Interval] = None, time_at: Optional[TimeAt] = None, client=None, config: Optional[Config] = None):
    """Create the Cloud Task for ``worker`` and return the queue's response.

    Errors raised by the queue client are not retried or wrapped.
    """
    config = config or get_config()
    client = client or get_client()

    run_at = schedule_time(interval=interval, time_at=time_at)
    task = task_payload(worker, config=config, not_before=run_at.seconds if run_at is not None else None)
    if run_at is not None:
        task["schedule_time"] = run_at

    extra = {
        "job_id": worker.job_id,
        "worker": worker.worker_name(),
        "schedule_time": run_at.seconds if run_at is not None else None,
    }
    start = time.time()
    try:
        response = client.create_task(parent=queue_path(client, config), task=task)
    except Exception:
        metrics.schedule_errors_total.inc()
        logger.exception("task submission failed", extra={**extra, "event": "job.schedule_failed"})
        raise
    finally:
        metrics.schedule_latency_seconds.observe(time.time() - start)

    metrics.jobs_scheduled_total.inc()
    logger.info("job scheduled", extra={**extra, "event": "job.scheduled"})
    return response
