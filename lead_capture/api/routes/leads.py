from __future__ import annotations
import json
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool

from lead_capture.api.dependencies import ServiceProvider, get_service_provider, get_settings
from lead_capture.utils.logger import get_logger
from lead_capture.workflows.leads.models import UPDATE_MEETING
from lead_capture.workflows.result import Result

logger = get_logger("lead_capture.api")

router = APIRouter()


def _error(message: Any, **extra) -> Dict[str, Any]:
    return {"status": "error", "message": str(message), **extra}


def _search(provider: ServiceProvider, query: str) -> Dict[str, Any]:
    try:
        result = provider().search(query)
    except Exception as e:
        logger.exception("❌ Search unavailable")
        result = Result.failure(e)
    if not result.ok:
        return _error(result.error, results=[])
    return {"status": "success", "results": result.value}


def _dispatch_post(provider: ServiceProvider, payload: Any) -> Dict[str, Any]:
    if not isinstance(payload, dict):
        return _error("Request body must be a JSON object")
    try:
        service = provider()
    except Exception as e:
        logger.exception("❌ Lead service unavailable")
        return _error(e)

    if payload.get("action") == UPDATE_MEETING:
        result = service.update_meeting(payload)
        if not result.ok:
            return _error(result.error)
        return {"status": "success", **result.value}

    result = service.submit(payload)
    if not result.ok:
        return _error(result.error)
    return {"status": "success", **result.value}


@router.get("/")
def lead_endpoint_get(
    action: Optional[str] = None,
    q: Optional[str] = None,
    provider: ServiceProvider = Depends(get_service_provider),
):
    if action == "search" and q:
        return _search(provider, q)
    try:
        event = get_settings().event_name
    except Exception as e:
        logger.exception("❌ Settings unavailable")
        return _error(e)
    return {
        "status": "ok",
        "message": f"{event} Lead Capture endpoint is live. Use POST to submit leads.",
    }


@router.post("/")
async def lead_endpoint_post(request: Request, provider: ServiceProvider = Depends(get_service_provider)):
    # The capture page posts JSON as text/plain, so the body is parsed by hand
    try:
        payload = json.loads(await request.body())
    except (ValueError, UnicodeDecodeError) as e:
        logger.error("❌ Malformed request body: %s", e)
        return _error(e)
    return await run_in_threadpool(_dispatch_post, provider, payload)


@router.get("/health")
def health():
    return {"status": "ok"}
