# Nombre de archivo: runner.py
# Ubicación de archivo: modules/comparador_hash/runner.py
# Descripción: Compara dos archivos por MD5 y SHA256 y devuelve un resumen serializable

import logging
from typing import Dict, Optional

from .schemas import ResultadoComparacion
from .service import evaluar

logger = logging.getLogger(__name__)


def resumen(resultado: ResultadoComparacion) -> Dict[str, object]:
    """Convierte el resultado en un dict apto para JSON y para la cola RQ."""
    data: Dict[str, object] = resultado.model_dump(mode="json")
    data["iguales"] = resultado.iguales
    data["fallidos"] = resultado.fallidos
    data["mensaje"] = resultado.mensaje
    return data


def run(archivo_a: Optional[str], archivo_b: Optional[str] = None) -> Dict[str, object]:
    """Compara dos archivos (o calcula los digestos de uno solo).

    Pensado para ejecutarse fuera del flujo interactivo, por ejemplo desde el worker.
    """
    resultado = evaluar(archivo_a, archivo_b)

    logger.info(
        "action=run estado=%s iguales=%s mensaje=%s",
        resultado.estado.value,
        resultado.iguales,
        resultado.mensaje,
    )

    return resumen(resultado)
