import logging
from typing import Optional

from . import metrics
from .codec import RawPayload, decode
from .errors import DecodeError, InvalidPayloadError, InvalidWorkerError, UnresolvableWorkerError
from .registry import WorkerRegistry, default_registry
from .worker import Worker

logger = logging.getLogger(__name__)


def worker_from_payload(raw: RawPayload, registry: Optional[WorkerRegistry] = None) -> Worker:
    """Return an instantiated worker from a Cloud Task payload.

    Raises ``InvalidPayloadError`` when the payload cannot be decoded and
    ``InvalidWorkerError`` when its worker name does not resolve. The latter
    never says why resolution failed.
    """
    registry = registry or default_registry
    try:
        envelope = decode(raw)
    except DecodeError as exc:
        metrics.rejected_payloads_total.labels(reason="invalid_payload").inc()
        logger.warning("payload rejected", extra={"event": "payload.rejected", "error": str(exc)})
        raise InvalidPayloadError(str(exc)) from exc

    try:
        worker_cls = registry.resolve(envelope.worker_type)
    except UnresolvableWorkerError:
        metrics.rejected_payloads_total.labels(reason="invalid_worker").inc()
        logger.warning(
            "worker rejected",
            extra={"event": "payload.rejected", "job_id": envelope.job_id, "worker": envelope.worker_type},
        )
        raise InvalidWorkerError("invalid worker") from None

    return worker_cls(job_args=envelope.job_args, job_id=envelope.job_id, job_meta=envelope.job_meta)


def execute_from_payload(raw: RawPayload, registry: Optional[WorkerRegistry] = None):
    """Execute a task worker from a task payload and return what it returns."""
    worker = worker_from_payload(raw, registry=registry)
    return worker.execute()
