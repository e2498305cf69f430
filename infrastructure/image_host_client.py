"""
Clase base para los clientes de proveedores de imágenes
"""
from abc import ABC, abstractmethod
import logging

import requests

from core.config import Settings
from domain.errors import UploadError
from domain.schemas.upload_schema import UploadResult

logger = logging.getLogger(__name__)


class ImageHostClient(ABC):
    """Interfaz común para los proveedores de alojamiento de imágenes"""

    name: str = ""
    not_configured_message: str = ""

    def __init__(self, settings: Settings, session: requests.Session):
        self.settings = settings
        self.session = session
        self.timeout = settings.UPLOAD_TIMEOUT

    @classmethod
    @abstractmethod
    def is_configured(cls, settings: Settings) -> bool:
        """Indica si las credenciales necesarias están presentes"""

    @abstractmethod
    def upload(self, image: str) -> UploadResult:
        """
        Sube una imagen al proveedor.

        Args:
            image: data URL o cadena base64

        Returns:
            UploadResult normalizado

        Raises:
            UploadError: si el proveedor rechaza la subida o la conexión falla
        """

    def _post_multipart(self, url: str, fields: dict) -> dict:
        """Envía un formulario multipart y devuelve la respuesta JSON"""
        # (None, valor) hace que requests envíe cada campo como parte del multipart
        files = {key: (None, str(value)) for key, value in fields.items()}
        try:
            response = self.session.post(url, files=files, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.error(f"Error de conexión con {self.name}: {str(e)}")
            # El texto de requests incluye la URL de destino; al cliente solo le llega el tipo de error
            raise UploadError(f"{self.name} request failed ({type(e).__name__})") from e

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Respuesta inválida de {self.name}: {response.status_code}")
            raise UploadError(f"Invalid response from {self.name}: {str(e)}") from e

    def _build_result(self, **fields) -> UploadResult:
        try:
            return UploadResult(**fields)
        except ValueError as e:
            raise UploadError(f"Unexpected response from {self.name}: {str(e)}") from e
