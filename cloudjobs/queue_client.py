import logging
import threading
from typing import Any, Dict, List, Optional

from google.cloud import tasks_v2

from . import config as config_module

logger = logging.getLogger(__name__)


class InMemoryQueueClient:
    """Stand-in for ``CloudTasksClient`` that keeps created tasks in a list."""

    def __init__(self):
        self.tasks: List[Dict[str, Any]] = []
        self._lock = threading.Lock()

    @staticmethod
    def queue_path(project: str, location: str, queue: str) -> str:
        return f"projects/{project}/locations/{location}/queues/{queue}"

    def create_task(self, parent: str, task: Dict[str, Any]) -> Dict[str, Any]:
        with self._lock:
            handle = dict(task, name=f"{parent}/tasks/{len(self.tasks) + 1}")
            self.tasks.append(handle)
        return handle

    def clear(self):
        with self._lock:
            self.tasks.clear()


# Process-wide client: built on first use, reused until the process exits.
_client = None
_client_lock = threading.Lock()


def _build_client():
    if config_module.TESTING:
        return InMemoryQueueClient()
    return tasks_v2.CloudTasksClient()


def get_client():
    global _client
    if _client is None:
        with _client_lock:
            if _client is None:
                _client = _build_client()
                logger.info("queue client created", extra={"event": "queue_client.created", "client": type(_client).__name__})
    return _client


def queue_path(client, config: Optional[config_module.Config] = None) -> str:
    config = config or config_module.get_config()
    project, location, queue = config.queue_location()
    return client.queue_path(project, location, queue)
