import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response
from starlette.concurrency import run_in_threadpool

from .. import dispatcher
from ..auth import require_verification_token
from ..config import get_config
from ..errors import InvalidPayloadError, InvalidWorkerError

logger = logging.getLogger(__name__)

router = APIRouter()


async def require_processor_path(request: Request):
    # processor_path is read per request so configure() applies to a running app
    if request.url.path != get_config().processor_path:
        raise HTTPException(status_code=404, detail="Not Found")


@router.post("/{path:path}", status_code=204, dependencies=[Depends(require_processor_path)])
async def run_job(request: Request, authorized: bool = Depends(require_verification_token)):
    raw = await request.body()
    try:
        # worker code is synchronous; keep it off the event loop
        await run_in_threadpool(dispatcher.execute_from_payload, raw)
    except InvalidPayloadError as exc:
        raise HTTPException(status_code=422, detail=str(exc))
    except InvalidWorkerError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    except Exception as exc:
        # Any non-2xx response makes Cloud Tasks redeliver the task
        logger.error("job execution failed", extra={"event": "job.delivery_failed", "error_type": type(exc).__name__})
        raise HTTPException(status_code=500, detail="job execution failed")
    return Response(status_code=204)
