# Nombre de archivo: main.py
# Ubicación de archivo: api/app/main.py
# Descripción: Aplicación FastAPI principal (health + comparador de archivos)

from fastapi import FastAPI

from core.logging import setup_logging
from api.app.routes.comparaciones import router as comparaciones_router
from api.app.routes.health import router as health_router


def create_app() -> FastAPI:
    setup_logging("api")
    app = FastAPI(title="Hash Comparator API", version="0.1.0")
    app.include_router(health_router, tags=["health"])
    app.include_router(comparaciones_router)
    return app


app = create_app()
