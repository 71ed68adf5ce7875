# Nombre de archivo: __init__.py
# Ubicación de archivo: core/__init__.py
# Descripción: Inicializa el paquete de utilidades centrales

"""Punto de entrada para configuración y logging compartidos."""

from .config import Settings, get_settings
from .logging import setup_logging

__all__ = ["Settings", "get_settings", "setup_logging"]
