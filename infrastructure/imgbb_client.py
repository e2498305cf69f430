import re
import logging

from core.config import Settings
from domain.errors import UploadError
from domain.schemas.upload_schema import UploadResult
from infrastructure.image_host_client import ImageHostClient

logger = logging.getLogger(__name__)

IMGBB_UPLOAD_URL = "https://api.imgbb.com/1/upload"
DATA_URL_PREFIX = re.compile(r"^data:image/\w+;base64,")


def strip_data_url_prefix(image: str) -> str:
    return DATA_URL_PREFIX.sub("", image, count=1)


class ImgBBClient(ImageHostClient):
    name = "ImgBB"
    not_configured_message = "ImgBB API key not configured"

    def __init__(self, settings: Settings, session):
        super().__init__(settings, session)
        self.api_key = settings.IMGBB_API_KEY

    @classmethod
    def is_configured(cls, settings: Settings) -> bool:
        return settings.imgbb_configured

    def upload(self, image: str) -> UploadResult:
        # ImgBB solo acepta el base64 sin el prefijo data:image/xxx;base64,
        result = self._post_multipart(
            IMGBB_UPLOAD_URL,
            {"key": self.api_key, "image": strip_data_url_prefix(image)},
        )

        if not result.get("success"):
            error = result.get("error")
            message = error.get("message") if isinstance(error, dict) else None
            logger.error(f"Error en ImgBB: {message or result.get('status_code')}")
            raise UploadError(message or "ImgBB upload failed")

        data = result.get("data") or {}
        return self._build_result(
            id=data.get("id"),
            link=data.get("url"),
            width=data.get("width"),
            height=data.get("height"),
            delete_url=data.get("delete_url"),
        )
