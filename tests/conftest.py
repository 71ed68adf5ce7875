# Nombre de archivo: conftest.py
# Ubicación de archivo: tests/conftest.py
# Descripción: Configuraciones comunes para Pytest (PYTHONPATH y entorno de pruebas)

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:  # pragma: no cover - inicialización
    sys.path.insert(0, str(ROOT_DIR))

# Sin log a archivo durante las pruebas
os.environ.setdefault("HASHCMP_LOG_TO_FILE", "false")


@pytest.fixture
def escribir(tmp_path):
    """Crea un archivo binario dentro de tmp_path y devuelve su ruta como str."""

    def _escribir(nombre: str, contenido: bytes) -> str:
        ruta = tmp_path / nombre
        ruta.write_bytes(contenido)
        return str(ruta)

    return _escribir
