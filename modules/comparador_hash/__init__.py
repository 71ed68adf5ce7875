# Nombre de archivo: __init__.py
# Ubicación de archivo: modules/comparador_hash/__init__.py
# Descripción: Inicializa el paquete del comparador de archivos por digestos

from .engine import calcular_digestos
from .runner import run
from .schemas import (
    EstadoComparacion,
    Fallo,
    ParDigestos,
    ResultadoComparacion,
    ResultadoDigesto,
    TipoFallo,
)
from .service import comparar_digestos, evaluar, evaluar_async

__all__ = [
    "EstadoComparacion",
    "Fallo",
    "ParDigestos",
    "ResultadoComparacion",
    "ResultadoDigesto",
    "TipoFallo",
    "calcular_digestos",
    "comparar_digestos",
    "evaluar",
    "evaluar_async",
    "run",
]
