# Nombre de archivo: health.py
# Ubicación de archivo: api/app/routes/health.py
# Descripción: Endpoints de health y versión de build
from fastapi import APIRouter
from datetime import datetime, timezone
import os

from core.config import get_settings

router = APIRouter()


def _detect_build_version() -> str:
    return os.getenv("API_BUILD_VERSION") or os.getenv("APP_VERSION") or "0.1.0"


BUILD_VERSION = _detect_build_version()


@router.get("/health")
def health():
    return {
        "status": "ok",
        "service": get_settings().service_name,
        "time": datetime.now(timezone.utc).isoformat(),
    }


@router.get("/health/version")
def health_version():
    return {"status": "ok", "service": get_settings().service_name, "version": BUILD_VERSION}
