from pathlib import Path
import logging

from fastapi import APIRouter, Request, Depends
from fastapi.responses import HTMLResponse
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool

from api.dependencies import get_upload_service
from api.responses import json_response, error_response
from core.config import Settings, get_settings
from domain.enums.backend import Backend
from domain.errors import UploadError
from domain.schemas.upload_schema import UploadRequest, UploadResponse
from services.upload_service import UploadService

logger = logging.getLogger(__name__)

router = APIRouter()

INDEX_PAGE = Path(__file__).parent / "static" / "index.html"


@router.get("/", response_class=HTMLResponse)
async def index():
    """Página de subida"""
    return HTMLResponse(INDEX_PAGE.read_text(encoding="utf-8"))


@router.post("/upload")
async def upload(
        request: Request,
        settings: Settings = Depends(get_settings),
        upload_service: UploadService = Depends(get_upload_service)
):
    """
    Sube una imagen o un lote de imágenes al backend indicado.

    - **image**: data URL o base64 (subida individual)
    - **images**: lista de data URLs o base64 (lote, máx. MAX_BATCH_SIZE)
    - **backend**: "cloudinary" (por defecto) o "imgbb"
    """
    try:
        payload = await request.json()

        try:
            upload_request = UploadRequest.model_validate(payload)
        except ValidationError as e:
            first_error = e.errors()[0]
            location = ".".join(str(part) for part in first_error["loc"])
            message = f"{location}: {first_error['msg']}" if location else first_error["msg"]
            return error_response(message, 400)

        backend = Backend.resolve(upload_request.backend)

        # Subida por lotes
        if upload_request.images is not None:
            max_batch_size = settings.MAX_BATCH_SIZE
            if len(upload_request.images) > max_batch_size:
                return error_response(f"批量上传最多 {max_batch_size} 张图片", 400)

            results = await run_in_threadpool(upload_service.upload_batch, upload_request.images, backend)
            return json_response(UploadResponse(success=True, batch=True, results=results))

        # Subida individual
        if not upload_request.image:
            return error_response("No image provided", 400)

        result = await run_in_threadpool(upload_service.upload_single, upload_request.image, backend)
        return json_response(UploadResponse(success=True, data=result))

    except UploadError as e:
        logger.error(f"Error subiendo imagen: {str(e)}")
        return error_response(str(e), 500)
    except Exception as e:
        logger.exception(f"Error inesperado: {str(e)}")
        return error_response(str(e), 500)
