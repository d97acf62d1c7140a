"""Enqueue jobs on Google Cloud Tasks and run them when Cloud Tasks calls back."""

from .config import Config, configure, get_config
from .dispatcher import execute_from_payload, worker_from_payload
from .errors import (
    CloudJobsError,
    ConfigurationError,
    DecodeError,
    InvalidPayloadError,
    InvalidWorkerError,
    UnresolvableWorkerError,
)
from .registry import WorkerRegistry, default_registry, register
from .worker import Worker

__all__ = [
    "CloudJobsError",
    "Config",
    "ConfigurationError",
    "DecodeError",
    "InvalidPayloadError",
    "InvalidWorkerError",
    "UnresolvableWorkerError",
    "Worker",
    "WorkerRegistry",
    "configure",
    "default_registry",
    "execute_from_payload",
    "get_config",
    "register",
    "worker_from_payload",
]
