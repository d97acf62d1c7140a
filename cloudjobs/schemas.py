from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Optional


class JobEnvelope(BaseModel):
    """Job payload exchanged with Cloud Tasks. ``worker_type`` travels as ``worker``."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", strict=True)

    worker_type: str = Field(alias="worker")
    job_id: Optional[str] = None
    job_args: List[Any] = Field(default_factory=list)
    job_meta: Dict[str, Any] = Field(default_factory=dict)
