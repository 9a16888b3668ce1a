# path: astrosolar/api/http/chat_handlers.py
from fastapi import APIRouter, Request

from astrosolar.app.services.chat_service import ChatService
from astrosolar.api.http.responses import (
    ALL_METHODS, json_response, error_response, preflight_response, read_json_body
)
from astrosolar.domain.errors import RelayError, MethodNotAllowed, InternalError
from astrosolar.shared.logger import logger

router = APIRouter()


@router.api_route("/api/chat", methods=ALL_METHODS)
async def chat(request: Request):
    if request.method == "OPTIONS":
        return preflight_response()

    chat_service: ChatService = request.app.state.chat_service
    try:
        if request.method != "POST":
            raise MethodNotAllowed()
        body = await read_json_body(request)
        result = await chat_service.reply(body)
    except RelayError as e:
        logger.info(f"Chat request rejected with {e.status_code}: {e.message}")
        return error_response(e)
    except Exception as e:
        logger.error(f"Server error in chat handler: {e}", exc_info=True)
        return error_response(InternalError())

    return json_response(200, result.to_dict())
# path: astrosolar/api/http/chat_handlers.py
