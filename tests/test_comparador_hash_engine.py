# Nombre de archivo: test_comparador_hash_engine.py
# Ubicación de archivo: tests/test_comparador_hash_engine.py
# Descripción: Pruebas del cálculo de digestos MD5/SHA256 por bloques

import errno
import hashlib
import io
import os
import stat
import threading

import pytest

from modules.comparador_hash import TipoFallo, calcular_digestos
from modules.comparador_hash import engine

MD5_ABC = "900150983cd24fb0d6963f7d28e17f72"
SHA256_ABC = "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
MD5_VACIO = "d41d8cd98f00b204e9800998ecf8427e"
SHA256_VACIO = "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"


def test_vector_abc(escribir):
    resultado = calcular_digestos(escribir("abc.bin", b"abc"))

    assert resultado.ok
    assert resultado.fallo is None
    assert resultado.digestos.md5 == MD5_ABC
    assert resultado.digestos.sha256 == SHA256_ABC


def test_archivo_vacio(escribir):
    resultado = calcular_digestos(escribir("vacio.bin", b""))

    assert resultado.digestos.md5 == MD5_VACIO
    assert resultado.digestos.sha256 == SHA256_VACIO


def test_mismo_contenido_mismos_digestos(escribir):
    contenido = bytes(range(256)) * 10
    a = calcular_digestos(escribir("uno.dat", contenido))
    b = calcular_digestos(escribir("otro_nombre.txt", contenido))

    assert a.digestos == b.digestos
    assert a.ruta != b.ruta


@pytest.mark.parametrize(
    "contenido_a,contenido_b",
    [
        (b"traza 1", b"traza 2"),
        (b"", b"\x00"),
        (b"abc", b"abcd"),
    ],
)
def test_contenido_distinto_digestos_distintos(escribir, contenido_a, contenido_b):
    a = calcular_digestos(escribir("a.bin", contenido_a))
    b = calcular_digestos(escribir("b.bin", contenido_b))

    assert a.digestos != b.digestos


def test_lectura_por_bloques_es_transparente(escribir):
    contenido = b"0123456789abcdef" * 1000 + b"cola"
    ruta = escribir("grande.bin", contenido)

    por_bloques = calcular_digestos(ruta, chunk_size=7)
    de_una_vez = calcular_digestos(ruta, chunk_size=len(contenido) + 1)

    assert por_bloques.digestos == de_una_vez.digestos
    assert por_bloques.digestos.md5 == hashlib.md5(contenido).hexdigest()
    assert por_bloques.digestos.sha256 == hashlib.sha256(contenido).hexdigest()


class _ArchivoEspiado(io.FileIO):
    """Registra el tamaño pedido en cada lectura."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.pedidos = []

    def read(self, size=-1):
        self.pedidos.append(size)
        return super().read(size)


def test_chunk_size_por_defecto_desde_settings(escribir, monkeypatch):
    ruta = escribir("datos.bin", b"x" * 100)
    abiertos = []

    class _Settings:
        chunk_size = 10

    def _abrir(path, mode):
        archivo = _ArchivoEspiado(path, "r")
        abiertos.append(archivo)
        return archivo

    monkeypatch.setattr(engine, "get_settings", lambda: _Settings())
    monkeypatch.setattr(engine, "open", _abrir, raising=False)

    resultado = calcular_digestos(ruta)

    assert resultado.ok
    assert set(abiertos[0].pedidos) == {10}
    # 10 bloques completos más la lectura vacía que marca el fin
    assert len(abiertos[0].pedidos) == 11
    assert abiertos[0].closed


def test_chunk_size_invalido(escribir):
    with pytest.raises(ValueError):
        calcular_digestos(escribir("a.bin", b"a"), chunk_size=0)


def test_archivo_inexistente_es_ilegible(tmp_path):
    ruta = str(tmp_path / "no_existe.bin")

    resultado = calcular_digestos(ruta)

    assert not resultado.ok
    assert resultado.digestos is None
    assert resultado.fallo.tipo is TipoFallo.ILEGIBLE
    assert resultado.fallo.ruta == ruta
    assert resultado.fallo.detalle


def test_directorio_es_ilegible(tmp_path):
    resultado = calcular_digestos(str(tmp_path))

    assert resultado.fallo.tipo is TipoFallo.ILEGIBLE


@pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="requiere os.mkfifo")
def test_fifo_es_ilegible_sin_bloquear(tmp_path):
    fifo = tmp_path / "canal"
    os.mkfifo(fifo)
    resultados = []

    hilo = threading.Thread(target=lambda: resultados.append(calcular_digestos(str(fifo))), daemon=True)
    hilo.start()
    hilo.join(timeout=3)

    assert not hilo.is_alive(), "calcular_digestos quedó bloqueado abriendo el FIFO"
    assert resultados[0].fallo.tipo is TipoFallo.ILEGIBLE
    assert "no es un archivo regular" in resultados[0].fallo.detalle


def test_archivo_reemplazado_tras_stat_es_ilegible(escribir, monkeypatch):
    ruta = escribir("normal.bin", b"datos")
    lectura, escritura = os.pipe()
    os.close(escritura)
    extremo = os.fdopen(lectura, "rb")
    # open devuelve un pipe aunque stat vio un archivo regular
    monkeypatch.setattr(engine, "open", lambda path, mode: extremo, raising=False)

    resultado = calcular_digestos(ruta)

    assert resultado.fallo.tipo is TipoFallo.ILEGIBLE
    assert extremo.closed


@pytest.mark.skipif(
    not hasattr(os, "geteuid") or os.geteuid() == 0,
    reason="root ignora los permisos de archivo",
)
def test_sin_permiso_de_lectura_es_ilegible(escribir):
    ruta = escribir("privado.bin", b"secreto")
    os.chmod(ruta, 0)
    try:
        resultado = calcular_digestos(ruta)
    finally:
        os.chmod(ruta, stat.S_IRUSR | stat.S_IWUSR)

    assert resultado.fallo.tipo is TipoFallo.ILEGIBLE
    assert resultado.fallo.errno == errno.EACCES


class _ArchivoDefectuoso(io.FileIO):
    """Archivo real cuyo read falla después del primer bloque."""

    instancias = []

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.lecturas = 0
        _ArchivoDefectuoso.instancias.append(self)

    def read(self, size=-1):
        self.lecturas += 1
        if self.lecturas > 1:
            raise OSError(5, "Input/output error")
        return super().read(size)


def test_error_de_lectura_devuelve_io_error_y_cierra(escribir, monkeypatch):
    ruta = escribir("defectuoso.bin", b"z" * 64)
    _ArchivoDefectuoso.instancias.clear()
    monkeypatch.setattr(engine, "open", lambda path, mode: _ArchivoDefectuoso(path, "r"), raising=False)

    resultado = calcular_digestos(ruta, chunk_size=16)

    assert resultado.digestos is None
    assert resultado.fallo.tipo is TipoFallo.ERROR_IO
    assert resultado.fallo.errno == 5
    assert "Input/output error" in resultado.fallo.detalle
    assert all(archivo.closed for archivo in _ArchivoDefectuoso.instancias)


def test_acepta_pathlib(tmp_path):
    ruta = tmp_path / "abc.txt"
    ruta.write_bytes(b"abc")

    resultado = calcular_digestos(ruta)

    assert resultado.ruta == str(ruta)
    assert resultado.digestos.md5 == MD5_ABC
