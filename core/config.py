# Nombre de archivo: config.py
# Ubicación de archivo: core/config.py
# Descripción: Configuración centralizada (entorno) del comparador de archivos

"""Settings compartidos por el motor de digestos, el worker y la API."""

from __future__ import annotations

from functools import lru_cache
from os import getenv

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CHUNK_SIZE = 64 * 1024


def _default_redis_url() -> str:
    return f"redis://:{getenv('REDIS_PASSWORD', '')}@redis:6379/0"


class Settings(BaseSettings):
    """Parámetros configurables del servicio."""

    service_name: str = Field(default="hash-comparator", description="Nombre lógico del servicio")
    log_level: str = Field(default="INFO", description="Nivel de logging del servicio")
    log_to_file: bool | None = Field(
        default=None,
        description="Fuerza el log a archivo; si es None se activa sólo con ENV=development",
    )
    logs_dir: str | None = Field(default=None, description="Carpeta para el log rotativo (default ./Logs)")
    chunk_size: int = Field(
        default=DEFAULT_CHUNK_SIZE,
        description="Tamaño en bytes del buffer de lectura usado al calcular digestos",
    )
    redis_url: str = Field(default_factory=_default_redis_url, description="Conexión a Redis para la cola")
    queue_name: str = Field(default="comparaciones", description="Nombre de la cola RQ")
    worker_async: bool = Field(default=True, description="Si es False RQ ejecuta los jobs en línea")

    model_config = SettingsConfigDict(env_prefix="HASHCMP_", case_sensitive=False, extra="ignore")

    @field_validator("chunk_size")
    @classmethod
    def _chunk_size_positivo(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("chunk_size debe ser mayor a cero")
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Retorna settings cacheados para reutilizar en el proyecto."""

    return Settings()


__all__ = ["DEFAULT_CHUNK_SIZE", "Settings", "get_settings"]
