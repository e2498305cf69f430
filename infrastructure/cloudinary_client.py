import hashlib
import time
import logging

from core.config import Settings
from domain.errors import UploadError
from domain.schemas.upload_schema import UploadResult
from infrastructure.image_host_client import ImageHostClient

logger = logging.getLogger(__name__)

CLOUDINARY_UPLOAD_URL = "https://api.cloudinary.com/v1_1/{cloud_name}/image/upload"


def generate_signature(params: dict, api_secret: str) -> str:
    """Firma los parámetros de una subida a Cloudinary"""
    # Claves ordenadas, pares key=value unidos por '&' y el secreto al final sin separador
    canonical = "&".join(f"{key}={params[key]}" for key in sorted(params))
    return hashlib.sha1(f"{canonical}{api_secret}".encode("utf-8")).hexdigest()


class CloudinaryClient(ImageHostClient):
    name = "Cloudinary"
    not_configured_message = "Cloudinary credentials not configured"

    def __init__(self, settings: Settings, session):
        super().__init__(settings, session)
        self.cloud_name = settings.CLOUDINARY_CLOUD_NAME
        self.api_key = settings.CLOUDINARY_API_KEY
        self.api_secret = settings.CLOUDINARY_API_SECRET
        self.folder = settings.CLOUDINARY_FOLDER

    @classmethod
    def is_configured(cls, settings: Settings) -> bool:
        return settings.cloudinary_configured

    def upload(self, image: str, timestamp: int = None) -> UploadResult:
        """Sube una imagen con una petición firmada"""
        # 1. Timestamp Unix en segundos
        if timestamp is None:
            timestamp = int(time.time())

        # 2. Firmar los parámetros
        params = {"folder": self.folder, "timestamp": timestamp}
        signature = generate_signature(params, self.api_secret)

        # 3. Enviar el formulario
        result = self._post_multipart(
            CLOUDINARY_UPLOAD_URL.format(cloud_name=self.cloud_name),
            {
                "file": image,
                "api_key": self.api_key,
                "timestamp": timestamp,
                "folder": self.folder,
                "signature": signature,
            },
        )

        # 4. Normalizar la respuesta
        if result.get("error"):
            error = result["error"]
            message = error.get("message") if isinstance(error, dict) else str(error)
            logger.error(f"Error en Cloudinary: {message}")
            raise UploadError(message or "Cloudinary upload failed")

        return self._build_result(
            id=result.get("public_id"),
            link=result.get("secure_url"),
            width=result.get("width"),
            height=result.get("height"),
        )
