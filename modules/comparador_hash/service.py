# Nombre de archivo: service.py
# Ubicación de archivo: modules/comparador_hash/service.py
# Descripción: Orquesta el cálculo de digestos de hasta dos archivos y su comparación

"""Servicio de comparación de archivos por digestos."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from . import engine
from .schemas import EstadoComparacion, ParDigestos, ResultadoComparacion, ResultadoDigesto

logger = logging.getLogger(__name__)


def _normalizar(ruta: Optional[str]) -> Optional[str]:
    # Una entrada vacía equivale a no haber seleccionado archivo
    if ruta is None or not str(ruta).strip():
        return None
    return str(ruta)


def comparar_digestos(a: ParDigestos, b: ParDigestos) -> bool:
    """Dos archivos son iguales sólo si coinciden MD5 y SHA256."""
    return a.md5 == b.md5 and a.sha256 == b.sha256


def _combinar(r1: ResultadoDigesto, r2: ResultadoDigesto) -> ResultadoComparacion:
    if r1.digestos is None or r2.digestos is None:
        estado = EstadoComparacion.FALLO_PARCIAL
    elif comparar_digestos(r1.digestos, r2.digestos):
        estado = EstadoComparacion.IGUALES
    else:
        estado = EstadoComparacion.DISTINTOS
    return ResultadoComparacion(estado=estado, resultado_1=r1, resultado_2=r2)


def _log(resultado: ResultadoComparacion) -> ResultadoComparacion:
    logger.info(
        "action=evaluar estado=%s ruta_1=%s ruta_2=%s fallidos=%s",
        resultado.estado.value,
        resultado.resultado_1.ruta if resultado.resultado_1 else None,
        resultado.resultado_2.ruta if resultado.resultado_2 else None,
        resultado.fallidos,
    )
    return resultado


def evaluar(ruta_1: Optional[str] = None, ruta_2: Optional[str] = None) -> ResultadoComparacion:
    """Calcula los digestos de las rutas presentes y, si son dos, las compara."""
    ruta_1, ruta_2 = _normalizar(ruta_1), _normalizar(ruta_2)

    if ruta_1 is None and ruta_2 is None:
        return _log(ResultadoComparacion(estado=EstadoComparacion.SIN_ENTRADA))
    if ruta_2 is None:
        return _log(
            ResultadoComparacion(
                estado=EstadoComparacion.RESULTADO_UNICO,
                resultado_1=engine.calcular_digestos(ruta_1),
            )
        )
    if ruta_1 is None:
        return _log(
            ResultadoComparacion(
                estado=EstadoComparacion.RESULTADO_UNICO,
                resultado_2=engine.calcular_digestos(ruta_2),
            )
        )

    r1 = engine.calcular_digestos(ruta_1)
    r2 = engine.calcular_digestos(ruta_2)
    return _log(_combinar(r1, r2))


async def evaluar_async(ruta_1: Optional[str] = None, ruta_2: Optional[str] = None) -> ResultadoComparacion:
    """Igual que :func:`evaluar`, calculando ambos digestos en hilos concurrentes."""
    ruta_1, ruta_2 = _normalizar(ruta_1), _normalizar(ruta_2)

    if ruta_1 is None or ruta_2 is None:
        return await asyncio.to_thread(evaluar, ruta_1, ruta_2)

    r1, r2 = await asyncio.gather(
        asyncio.to_thread(engine.calcular_digestos, ruta_1),
        asyncio.to_thread(engine.calcular_digestos, ruta_2),
    )
    return _log(_combinar(r1, r2))
