import os
from typing import Optional

from pydantic import BaseModel

from .errors import ConfigurationError

TESTING = os.getenv("TESTING") == "1"

DEFAULT_PROCESSOR_PATH = "/cloudjobs/run"
DEFAULT_TOKEN_TTL = 7 * 24 * 3600


def _ttl_from_env(value: Optional[str]) -> Optional[int]:
    if value is None:
        return DEFAULT_TOKEN_TTL
    value = value.strip()
    if not value or value == "0":
        return None
    return int(value)


class Config(BaseModel):
    processor_host: Optional[str] = None
    processor_path: str = DEFAULT_PROCESSOR_PATH
    secret: Optional[str] = None
    gcp_project_id: Optional[str] = None
    gcp_location_id: Optional[str] = None
    gcp_queue_id: str = "default"
    # seconds; None disables token expiry
    token_ttl: Optional[int] = DEFAULT_TOKEN_TTL

    @classmethod
    def from_env(cls) -> "Config":
        return cls(
            processor_host=os.getenv("CLOUDJOBS_PROCESSOR_HOST"),
            processor_path=os.getenv("CLOUDJOBS_PROCESSOR_PATH", DEFAULT_PROCESSOR_PATH),
            secret=os.getenv("CLOUDJOBS_SECRET"),
            gcp_project_id=os.getenv("CLOUDJOBS_GCP_PROJECT_ID"),
            gcp_location_id=os.getenv("CLOUDJOBS_GCP_LOCATION_ID"),
            gcp_queue_id=os.getenv("CLOUDJOBS_GCP_QUEUE_ID", "default"),
            token_ttl=_ttl_from_env(os.getenv("CLOUDJOBS_TOKEN_TTL")),
        )

    @property
    def processor_url(self) -> str:
        """Full URL Cloud Tasks will POST job payloads to."""
        if not self.processor_host:
            raise ConfigurationError("CLOUDJOBS_PROCESSOR_HOST is not configured.")
        return self.processor_host.rstrip("/") + self.processor_path

    def queue_location(self):
        if not self.gcp_project_id or not self.gcp_location_id:
            raise ConfigurationError("CLOUDJOBS_GCP_PROJECT_ID and CLOUDJOBS_GCP_LOCATION_ID must be configured.")
        return self.gcp_project_id, self.gcp_location_id, self.gcp_queue_id


_config: Optional[Config] = None


def get_config() -> Config:
    global _config
    if _config is None:
        _config = Config.from_env()
    return _config


def configure(**overrides) -> Config:
    """Replace the active configuration, starting from the environment values."""
    global _config
    base = Config.from_env().model_dump()
    base.update(overrides)
    _config = Config(**base)
    return _config
