from typing import Optional

from fastapi.responses import JSONResponse

from domain.schemas.upload_schema import UploadResponse

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


def json_response(payload: UploadResponse, status_code: int = 200, headers: Optional[dict] = None) -> JSONResponse:
    return JSONResponse(
        content=payload.to_content(),
        status_code=status_code,
        headers={**(headers or {}), **CORS_HEADERS}
    )


def error_response(message: str, status_code: int, headers: Optional[dict] = None) -> JSONResponse:
    return json_response(UploadResponse(success=False, error=message), status_code, headers)
