# START OF FILE: astrosolar/api/http/responses.py

from typing import Any, Dict

from fastapi import Request
from fastapi.responses import JSONResponse, Response

from astrosolar.domain.errors import RelayError, InvalidInput

# Routes accept every method so that wrong ones get our JSON 405, not FastAPI's.
ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


def json_response(status_code: int, content: Dict[str, Any]) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=content, headers=CORS_HEADERS)


def error_response(error: RelayError) -> JSONResponse:
    return json_response(error.status_code, error.to_dict())


def preflight_response() -> Response:
    return Response(status_code=200, headers=CORS_HEADERS)


async def read_json_body(request: Request) -> Dict[str, Any]:
    try:
        body = await request.json()
    except ValueError as e:
        raise InvalidInput("Invalid JSON body") from e
    if not isinstance(body, dict):
        raise InvalidInput("Request body must be a JSON object")
    return body

# END OF FILE: astrosolar/api/http/responses.py
