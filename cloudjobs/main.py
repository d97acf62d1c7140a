import logging
import time

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .api import processor as processor_api
from .authenticator import Authenticator
from .config import get_config
from .errors import ConfigurationError
from .metrics import metrics_response, request_latency_seconds
from .queue_client import get_client

logger = logging.getLogger(__name__)


def readiness_problems():
    """Return what keeps the processor from scheduling and accepting jobs."""
    config = get_config()
    problems = []
    for check in (lambda: config.processor_url, config.queue_location, lambda: Authenticator.from_config(config)):
        try:
            check()
        except ConfigurationError as exc:
            problems.append(str(exc))
    if not problems:
        try:
            get_client()
        except Exception as exc:
            logger.warning("queue client unavailable", extra={"event": "readyz.client_failed", "error_type": type(exc).__name__})
            problems.append(f"queue client unavailable: {type(exc).__name__}")
    return problems


app = FastAPI(title="cloudjobs processor")


@app.middleware("http")
async def observe_latency(request: Request, call_next):
    start = time.time()
    try:
        return await call_next(request)
    finally:
        request_latency_seconds.observe(time.time() - start)


@app.get("/healthz")
async def healthz():
    return {"status": "ok"}


@app.get("/readyz")
async def readyz():
    problems = readiness_problems()
    if problems:
        return JSONResponse(status_code=503, content={"ready": False, "problems": problems})
    return {"ready": True}


@app.get("/metrics")
async def metrics():
    return metrics_response()


# catch-all POST route; registered after the fixed endpoints
app.include_router(processor_api.router)
