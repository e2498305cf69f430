from typing import Any, List
import logging

import requests

from core.config import Settings
from domain.enums.backend import Backend
from domain.errors import BackendNotConfiguredError, UploadError
from domain.schemas.upload_schema import UploadResult, BatchItemResult
from infrastructure.cloudinary_client import CloudinaryClient
from infrastructure.imgbb_client import ImgBBClient

logger = logging.getLogger(__name__)

INVALID_IMAGE_MESSAGE = "Image must be a data URL or base64 string"

# Un proveedor nuevo solo necesita su cliente y una entrada aquí
BACKEND_CLIENTS = {
    Backend.CLOUDINARY: CloudinaryClient,
    Backend.IMGBB: ImgBBClient,
}


class UploadService:
    def __init__(self, settings: Settings, session: requests.Session):
        self.settings = settings
        self.session = session

    def get_client(self, backend: Backend):
        client_class = BACKEND_CLIENTS[backend]
        # Se valida la configuración antes de cualquier llamada de red
        if not client_class.is_configured(self.settings):
            raise BackendNotConfiguredError(client_class.not_configured_message)
        return client_class(self.settings, self.session)

    def upload_single(self, image: str, backend: Backend) -> UploadResult:
        client = self.get_client(backend)
        result = client.upload(image)
        logger.info(f"Imagen subida a {backend.value}: {result.id}")
        return result

    def upload_batch(self, images: List[Any], backend: Backend) -> List[BatchItemResult]:
        """
        Sube las imágenes una a una en el orden recibido.

        El fallo de una imagen queda recogido en su propio resultado y no
        interrumpe el resto del lote.
        """
        results = []
        for index, image in enumerate(images):
            try:
                if not isinstance(image, str):
                    raise UploadError(INVALID_IMAGE_MESSAGE)
                data = self.upload_single(image, backend)
                results.append(BatchItemResult(success=True, data=data))
            except Exception as e:
                logger.error(f"Error subiendo imagen {index} del lote: {str(e)}")
                results.append(BatchItemResult(success=False, error=str(e)))
        return results
