import logging

import uvicorn
from dotenv import load_dotenv

load_dotenv()  # Load environment variables from a .env file

from fastapi import FastAPI, Request
from fastapi.responses import Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from api import api
from api.responses import CORS_HEADERS, error_response
from core.config import Settings

logging.basicConfig(
    level=Settings.from_env().LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Image Bed Relay", version="1.0.0")

HTTP_ERROR_MESSAGES = {
    404: "Not found",
    405: "Method not allowed",
}


# CORS permisivo en todas las respuestas
@app.middleware("http")
async def cors_headers(request: Request, call_next):
    if request.method == "OPTIONS":
        return Response(status_code=200, headers=CORS_HEADERS)
    response = await call_next(request)
    response.headers.update(CORS_HEADERS)
    return response


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    message = HTTP_ERROR_MESSAGES.get(exc.status_code, str(exc.detail))
    # Se conservan las cabeceras propias del error, p. ej. Allow en un 405
    return error_response(message, exc.status_code, getattr(exc, "headers", None))


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Error no controlado en {request.url.path}")
    return error_response(str(exc), 500)


app.include_router(api.router)


# Punto de entrada para ejecutar la aplicación
if __name__ == "__main__":
    uvicorn.run(
        "main:app",  # Módulo y nombre de la aplicación
        host="127.0.0.1",
        port=8000,
        reload=True,  # Recarga automática en desarrollo
        log_level="info"
    )
