# Nombre de archivo: engine.py
# Ubicación de archivo: modules/comparador_hash/engine.py
# Descripción: Cálculo de digestos MD5 y SHA256 de un archivo en una sola pasada

"""Motor de digestos.

Lee el archivo una única vez, en bloques de tamaño fijo, y alimenta cada bloque
a los dos acumuladores antes de leer el siguiente. La memoria usada no depende
del tamaño del archivo.
"""

from __future__ import annotations

import hashlib
import logging
import os
import stat
from typing import Optional

from core.config import get_settings

from .schemas import Fallo, ParDigestos, ResultadoDigesto, TipoFallo

logger = logging.getLogger(__name__)


def _fallo(tipo: TipoFallo, ruta: str, exc: OSError) -> ResultadoDigesto:
    logger.warning("action=calcular_digestos ruta=%s fallo=%s error=%s", ruta, tipo.value, exc)
    return ResultadoDigesto(
        ruta=ruta,
        fallo=Fallo(tipo=tipo, ruta=ruta, detalle=str(exc), errno=exc.errno),
    )


def _no_regular(ruta: str) -> OSError:
    return OSError(f"no es un archivo regular: {ruta}")


def calcular_digestos(ruta: str, chunk_size: Optional[int] = None) -> ResultadoDigesto:
    """Calcula los digestos MD5 y SHA256 del archivo ubicado en ``ruta``.

    Los errores al abrir (inexistente, sin permisos, no es un archivo regular)
    se devuelven como ``unreadable``; los errores durante la lectura como
    ``io_error``. En ningún caso se devuelve un digesto parcial.
    """
    ruta = os.fspath(ruta)
    size = chunk_size if chunk_size is not None else get_settings().chunk_size
    if size <= 0:
        raise ValueError("chunk_size debe ser mayor a cero")

    # Abrir un FIFO bloquea hasta que aparece un escritor: se descarta antes de open
    try:
        modo = os.stat(ruta).st_mode
    except OSError as exc:
        return _fallo(TipoFallo.ILEGIBLE, ruta, exc)
    if not stat.S_ISREG(modo):
        return _fallo(TipoFallo.ILEGIBLE, ruta, _no_regular(ruta))

    try:
        archivo = open(ruta, "rb")
    except OSError as exc:
        return _fallo(TipoFallo.ILEGIBLE, ruta, exc)

    with archivo:
        # La ruta pudo reemplazarse entre stat y open
        try:
            modo = os.fstat(archivo.fileno()).st_mode
        except OSError as exc:
            return _fallo(TipoFallo.ILEGIBLE, ruta, exc)
        if not stat.S_ISREG(modo):
            return _fallo(TipoFallo.ILEGIBLE, ruta, _no_regular(ruta))

        md5 = hashlib.md5(usedforsecurity=False)
        sha256 = hashlib.sha256()
        total = 0
        try:
            for bloque in iter(lambda: archivo.read(size), b""):
                md5.update(bloque)
                sha256.update(bloque)
                total += len(bloque)
        except OSError as exc:
            return _fallo(TipoFallo.ERROR_IO, ruta, exc)

    digestos = ParDigestos(md5=md5.hexdigest(), sha256=sha256.hexdigest())
    logger.info("action=calcular_digestos ruta=%s bytes=%s", ruta, total)
    logger.debug("action=calcular_digestos ruta=%s md5=%s sha256=%s", ruta, digestos.md5, digestos.sha256)
    return ResultadoDigesto(ruta=ruta, digestos=digestos)
