from pydantic import BaseModel
from typing import Any, Optional, List


class UploadRequest(BaseModel):
    image: Optional[str] = None  # data URL o base64 sin prefijo
    images: Optional[List[Any]] = None  # subida por lotes; cada elemento se valida al subirlo
    backend: Optional[str] = None  # "cloudinary" (por defecto) o "imgbb"


class UploadResult(BaseModel):
    id: str
    link: str
    width: int
    height: int
    delete_url: Optional[str] = None  # solo ImgBB


class BatchItemResult(BaseModel):
    success: bool
    data: Optional[UploadResult] = None
    error: Optional[str] = None


class UploadResponse(BaseModel):
    success: bool
    data: Optional[UploadResult] = None
    batch: Optional[bool] = None
    results: Optional[List[BatchItemResult]] = None
    error: Optional[str] = None

    def to_content(self) -> dict:
        return self.model_dump(exclude_none=True)
