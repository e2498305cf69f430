"""
Dependencies for FastAPI routes
"""
from fastapi import Depends
import requests

from core.config import Settings, get_settings
from services.upload_service import UploadService


def get_http_session():
    """Sesión HTTP saliente, una por petición entrante"""
    session = requests.Session()
    try:
        yield session
    finally:
        session.close()


def get_upload_service(
        settings: Settings = Depends(get_settings),
        session: requests.Session = Depends(get_http_session)
) -> UploadService:
    return UploadService(settings, session)
