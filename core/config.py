from typing import Optional

from pydantic import BaseModel
from dotenv import load_dotenv
import os

load_dotenv()  # Carga las variables de entorno desde .env


class Settings(BaseModel):
    CLOUDINARY_CLOUD_NAME: Optional[str] = None
    CLOUDINARY_API_KEY: Optional[str] = None
    CLOUDINARY_API_SECRET: Optional[str] = None
    CLOUDINARY_FOLDER: str = "imagebed"
    IMGBB_API_KEY: Optional[str] = None
    MAX_BATCH_SIZE: int = 10
    UPLOAD_TIMEOUT: float = 30
    LOG_LEVEL: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Construye la configuración a partir de las variables de entorno"""
        values = {}
        for name in cls.model_fields:
            value = os.getenv(name)
            # Una variable vacía cuenta como ausente
            if value:
                values[name] = value
        return cls(**values)

    @property
    def cloudinary_configured(self) -> bool:
        return bool(self.CLOUDINARY_CLOUD_NAME and self.CLOUDINARY_API_KEY and self.CLOUDINARY_API_SECRET)

    @property
    def imgbb_configured(self) -> bool:
        return bool(self.IMGBB_API_KEY)


def get_settings() -> Settings:
    return Settings.from_env()
