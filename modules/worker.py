# Nombre de archivo: worker.py
# Ubicación de archivo: modules/worker.py
# Descripción: Cola de tareas con RQ para comparar archivos de forma asíncrona
"""Módulo que configura la cola y el worker basado en RQ."""

import logging
from typing import Any, Callable

from redis import Redis
from rq import Queue, Worker

from core.config import get_settings
from core.logging import setup_logging

logger = logging.getLogger("worker")

_settings = get_settings()
REDIS_URL = _settings.redis_url
IS_ASYNC = _settings.worker_async
redis_conn = Redis.from_url(REDIS_URL)
queue = Queue(_settings.queue_name, connection=redis_conn, is_async=IS_ASYNC)


def enqueue_comparacion(func: Callable[..., Any], *args: Any, **kwargs: Any):
    """Encola una función para su ejecución en segundo plano."""
    job = queue.enqueue(func, *args, **kwargs)
    logger.info("action=enqueue queue=%s job_id=%s", queue.name, job.id)
    return job


def main() -> None:
    """Inicia un worker que procesa la cola de comparaciones."""
    setup_logging("worker")
    worker = Worker([queue], connection=redis_conn)
    logger.info("action=worker_iniciado queue=%s", queue.name)
    worker.work(with_scheduler=False)


if __name__ == "__main__":
    main()
