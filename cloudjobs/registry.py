import inspect
import logging
from typing import Dict, List, Type

from .errors import UnresolvableWorkerError
from .worker import Worker

logger = logging.getLogger(__name__)

UNRESOLVABLE_MESSAGE = "worker cannot be resolved"


class WorkerRegistry:
    """Explicit name -> class mapping of the workers a process may execute.

    Names are never imported dynamically: only classes registered at startup
    can be looked up, and a lookup only succeeds for concrete ``Worker``
    subclasses.
    """

    def __init__(self):
        self._workers: Dict[str, type] = {}

    def register(self, cls: type, name: str = None) -> type:
        if name is None:
            name = cls.worker_name() if hasattr(cls, "worker_name") else f"{cls.__module__}.{cls.__qualname__}"
        existing = self._workers.get(name)
        if existing is not None and existing is not cls:
            raise ValueError(f"worker name already registered: {name}")
        self._workers[name] = cls
        logger.debug("worker registered", extra={"worker": name})
        return cls

    def resolve(self, name: str) -> Type[Worker]:
        cls = self._workers.get(name)
        if cls is None or not is_executable(cls):
            raise UnresolvableWorkerError(UNRESOLVABLE_MESSAGE)
        return cls

    def names(self) -> List[str]:
        return sorted(self._workers)

    def __contains__(self, name: str) -> bool:
        return name in self._workers


def is_executable(cls) -> bool:
    return inspect.isclass(cls) and issubclass(cls, Worker) and not inspect.isabstract(cls)


default_registry = WorkerRegistry()


def register(cls: type = None, *, name: str = None):
    """Register a worker on the default registry. Usable bare or as ``@register(name=...)``."""
    if cls is None:
        return lambda c: default_registry.register(c, name=name)
    return default_registry.register(cls, name=name)
