# Nombre de archivo: schemas.py
# Ubicación de archivo: modules/comparador_hash/schemas.py
# Descripción: Modelos de datos para digestos y resultados de comparación

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

MENSAJES = {
    "no_input": "No se seleccionó ningún archivo",
    "single_result": "La comparación requiere dos archivos",
    "equal": "Los archivos son iguales",
    "different": "Los archivos son distintos",
    "partial_failure": "No se pudo calcular el digesto de uno de los archivos",
}


class TipoFallo(str, Enum):
    ILEGIBLE = "unreadable"
    ERROR_IO = "io_error"


class EstadoComparacion(str, Enum):
    SIN_ENTRADA = "no_input"
    RESULTADO_UNICO = "single_result"
    IGUALES = "equal"
    DISTINTOS = "different"
    FALLO_PARCIAL = "partial_failure"


class ParDigestos(BaseModel):
    """Digestos MD5 (legado) y SHA256 (principal) de un archivo, en hex minúscula."""

    md5: str = Field(..., pattern=r"^[0-9a-f]{32}$")
    sha256: str = Field(..., pattern=r"^[0-9a-f]{64}$")

    model_config = ConfigDict(frozen=True)


class Fallo(BaseModel):
    """Motivo por el que no se pudo calcular el digesto de una ruta."""

    tipo: TipoFallo
    ruta: str
    detalle: str
    errno: Optional[int] = None

    model_config = ConfigDict(frozen=True)


class ResultadoDigesto(BaseModel):
    """Resultado para una entrada: exactamente uno de ``digestos`` o ``fallo``."""

    ruta: str
    digestos: Optional[ParDigestos] = None
    fallo: Optional[Fallo] = None

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _una_sola_variante(self) -> "ResultadoDigesto":
        if (self.digestos is None) == (self.fallo is None):
            raise ValueError("ResultadoDigesto requiere digestos o fallo, no ambos")
        return self

    @property
    def ok(self) -> bool:
        return self.digestos is not None


class ResultadoComparacion(BaseModel):
    """Resultado de evaluar cero, una o dos rutas.

    ``resultado_1`` y ``resultado_2`` conservan la posición de cada entrada,
    por lo que en ``single_result`` sólo una de las dos está presente.
    """

    estado: EstadoComparacion
    resultado_1: Optional[ResultadoDigesto] = None
    resultado_2: Optional[ResultadoDigesto] = None

    model_config = ConfigDict(frozen=True)

    @property
    def iguales(self) -> Optional[bool]:
        """True/False sólo cuando hubo comparación efectiva."""
        if self.estado is EstadoComparacion.IGUALES:
            return True
        if self.estado is EstadoComparacion.DISTINTOS:
            return False
        return None

    @property
    def fallidos(self) -> List[int]:
        """Índices (1 y/o 2) de las entradas cuyo digesto falló."""
        return [
            indice
            for indice, resultado in ((1, self.resultado_1), (2, self.resultado_2))
            if resultado is not None and not resultado.ok
        ]

    @property
    def mensaje(self) -> str:
        return MENSAJES[self.estado.value]
