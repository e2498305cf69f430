from enum import Enum
import logging

logger = logging.getLogger(__name__)


class Backend(str, Enum):
    """
    Proveedores de alojamiento de imágenes soportados.
    - CLOUDINARY: subida firmada (SHA-1) a una carpeta fija.
    - IMGBB: subida con API key, devuelve además una URL de borrado.
    """

    CLOUDINARY = "cloudinary"
    IMGBB = "imgbb"

    @classmethod
    def default(cls) -> "Backend":
        return cls.CLOUDINARY

    @classmethod
    def resolve(cls, name: str = None) -> "Backend":
        """Devuelve el backend por nombre; cualquier nombre desconocido usa Cloudinary."""
        if not name:
            return cls.default()
        try:
            return cls(name.lower())
        except ValueError:
            logger.warning(f"Backend desconocido '{name}', usando {cls.default().value}")
            return cls.default()
