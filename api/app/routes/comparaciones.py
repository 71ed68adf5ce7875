# Nombre de archivo: comparaciones.py
# Ubicación de archivo: api/app/routes/comparaciones.py
# Descripción: Endpoints para calcular digestos y comparar archivos
"""Rutas que exponen el comparador de archivos por digestos.

Los cálculos síncronos corren en hilos (``asyncio.to_thread``) para no bloquear
el event loop; las comparaciones largas pueden encolarse en el worker RQ.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field
from rq.exceptions import NoSuchJobError
from rq.job import Job

from modules import worker
from modules.comparador_hash import EstadoComparacion, ResultadoDigesto, calcular_digestos, evaluar_async
from modules.comparador_hash.runner import resumen, run as run_comparacion
from modules.comparador_hash.schemas import MENSAJES

router = APIRouter(tags=["comparaciones"])

logger = logging.getLogger(__name__)


class DigestoRequest(BaseModel):
    """Archivo cuyo digesto se quiere calcular."""

    archivo: str = Field(..., min_length=1, description="Ruta del archivo en el servidor")


class ComparacionRequest(BaseModel):
    """Rutas a comparar; cualquiera de las dos puede omitirse."""

    archivo_1: Optional[str] = Field(default=None, description="Ruta del primer archivo")
    archivo_2: Optional[str] = Field(default=None, description="Ruta del segundo archivo")

    def sin_entrada(self) -> bool:
        return not (self.archivo_1 or "").strip() and not (self.archivo_2 or "").strip()


def _sin_entrada() -> HTTPException:
    return HTTPException(status_code=400, detail=MENSAJES[EstadoComparacion.SIN_ENTRADA.value])


@router.post("/digestos", response_model=ResultadoDigesto)
async def digestos(req: DigestoRequest) -> ResultadoDigesto:
    """Calcula MD5 y SHA256 de un archivo."""
    return await asyncio.to_thread(calcular_digestos, req.archivo)


@router.post("/comparaciones")
async def comparar(req: ComparacionRequest) -> Dict[str, Any]:
    """Calcula los digestos de las rutas recibidas y las compara si son dos."""
    resultado = await evaluar_async(req.archivo_1, req.archivo_2)
    if resultado.estado is EstadoComparacion.SIN_ENTRADA:
        raise _sin_entrada()
    return resumen(resultado)


@router.post("/comparaciones/jobs")
def encolar_comparacion(req: ComparacionRequest) -> Dict[str, str]:
    """Encola la comparación en el worker y devuelve el id del job."""
    if req.sin_entrada():
        raise _sin_entrada()
    job = worker.enqueue_comparacion(run_comparacion, req.archivo_1, req.archivo_2)
    return {"job_id": job.id}


@router.get("/comparaciones/jobs/{job_id}")
def estado_job(job_id: str) -> Dict[str, Any]:
    """Devuelve el estado de un job y, si terminó, su resultado."""
    try:
        job = Job.fetch(job_id, connection=worker.redis_conn)
    except NoSuchJobError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    status = job.get_status()
    data: Dict[str, Any] = {"job_id": job.id, "status": str(getattr(status, "value", status))}
    if job.is_finished:
        data["resultado"] = job.return_value()
    elif job.is_failed:
        ultimo = job.latest_result()
        traza = (ultimo.exc_string if ultimo is not None else None) or job.exc_info or ""
        lineas = [linea for linea in traza.strip().splitlines() if linea.strip()]
        # La última línea del traceback trae el tipo y mensaje de la excepción
        data["error"] = lineas[-1].strip() if lineas else "Error desconocido"
        logger.warning("action=estado_job job_id=%s status=failed error=%s", job.id, data["error"])
    return data
