# path: astrosolar/api/http/lead_handlers.py
from fastapi import APIRouter, Request
from starlette.concurrency import run_in_threadpool

from astrosolar.app.services.lead_service import LeadService
from astrosolar.api.http.responses import (
    ALL_METHODS, json_response, error_response, preflight_response, read_json_body
)
from astrosolar.domain.errors import RelayError, MethodNotAllowed, InternalError
from astrosolar.shared.logger import logger

router = APIRouter()


@router.api_route("/api/save-lead", methods=ALL_METHODS)
async def save_lead(request: Request):
    if request.method == "OPTIONS":
        return preflight_response()

    lead_service: LeadService = request.app.state.lead_service
    try:
        if request.method != "POST":
            raise MethodNotAllowed()
        body = await read_json_body(request)
        # Backend clients are blocking; keep them off the event loop.
        result = await run_in_threadpool(lead_service.save_lead, body)
    except RelayError as e:
        logger.info(f"Lead request rejected with {e.status_code}: {e.message}")
        return error_response(e)
    except Exception as e:
        logger.error(f"Save lead error: {e}", exc_info=True)
        return error_response(InternalError("Failed to save lead data"))

    return json_response(200, result)
# path: astrosolar/api/http/lead_handlers.py
