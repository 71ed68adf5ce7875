# Nombre de archivo: logging.py
# Ubicación de archivo: core/logging.py
# Descripción: Logging centralizado del comparador (stdout + archivo rotativo opcional)

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .config import get_settings

_FORMAT = "%(asctime)s service=%(name)s level=%(levelname)s msg=%(message)s"


def _file_logging_enabled(enable_file: bool | None) -> bool:
    if enable_file is not None:
        return enable_file
    configured = get_settings().log_to_file
    if configured is not None:
        return configured
    return os.getenv("ENV", "development").lower() == "development"


def setup_logging(
    service: str | None = None,
    level: str | int | None = None,
    enable_file: bool | None = None,
    logs_dir: str | Path | None = None,
    max_bytes: int = 5_000_000,
    backup_count: int = 3,
) -> logging.Logger:
    """Configura logging estándar para el servicio.

    Args:
        service: nombre lógico (api, worker); por defecto ``Settings.service_name``
        level: nivel (str o int); por defecto ``Settings.log_level``
        enable_file: fuerza escritura a archivo; si None se toma de settings/ENV
        logs_dir: carpeta destino (default: settings o ./Logs)
        max_bytes: tamaño máximo antes de rotar
        backup_count: cantidad de backups
    """
    settings = get_settings()
    service = service or settings.service_name
    level = level if level is not None else settings.log_level
    lvl = logging.getLevelName(level.upper()) if isinstance(level, str) else level
    logging.basicConfig(level=lvl, format=_FORMAT)
    logger = logging.getLogger(service)
    logger.setLevel(lvl)
    # Llamadas repetidas no duplican handlers
    if any(isinstance(h, RotatingFileHandler) for h in logger.handlers):
        return logger
    if _file_logging_enabled(enable_file):
        try:
            base_dir = Path(logs_dir or settings.logs_dir or (Path.cwd() / "Logs"))
            base_dir.mkdir(parents=True, exist_ok=True)
            fh = RotatingFileHandler(base_dir / f"{service}.log", maxBytes=max_bytes, backupCount=backup_count)
            fh.setFormatter(logging.Formatter(_FORMAT))
            fh.setLevel(lvl)
            logger.addHandler(fh)
            logger.debug("action=logging file_handler=enabled path=%s", base_dir / f"{service}.log")
        except OSError as exc:
            logger.error("action=logging file_handler=failed error=%s", exc)
    return logger


__all__ = ["setup_logging"]
