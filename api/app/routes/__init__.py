# Nombre de archivo: __init__.py
# Ubicación de archivo: api/app/routes/__init__.py
# Descripción: Init del paquete routes

"""Routers de la API: health y comparaciones."""
