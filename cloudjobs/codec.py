import json
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import ValidationError

from .errors import DecodeError
from .schemas import JobEnvelope

RawPayload = Union[bytes, bytearray, str, Mapping[str, Any]]


def encode(worker_type: str, job_id: Optional[str], job_args: List[Any], job_meta: Dict[str, Any]) -> bytes:
    """Serialize a job to the JSON body sent to the processor.

    Arguments and metadata are dumped as-is and must already be JSON-safe.
    """
    payload = {
        "worker": worker_type,
        "job_id": job_id,
        "job_args": list(job_args),
        "job_meta": job_meta,
    }
    return json.dumps(payload).encode("utf-8")


def decode(raw: RawPayload) -> JobEnvelope:
    """Parse a delivered payload into a ``JobEnvelope``.

    Already-parsed mappings go through a JSON round-trip so keys end up in the
    same textual form as a payload read off the wire. The worker name is not
    resolved here.
    """
    try:
        if isinstance(raw, (bytes, bytearray, str)):
            data = json.loads(raw)
        else:
            data = json.loads(json.dumps(raw))
    except (TypeError, ValueError, RecursionError) as exc:
        raise DecodeError(f"malformed payload: {exc}") from exc

    if not isinstance(data, dict):
        raise DecodeError("payload must be a JSON object")
    if "worker" not in data:
        raise DecodeError("payload is missing the 'worker' key")

    try:
        return JobEnvelope.model_validate(data)
    except ValidationError as exc:
        raise DecodeError(f"invalid payload: {exc.error_count()} field error(s)") from exc
