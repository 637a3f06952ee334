# apps/app_log/utils.py
"""
Utilidades para manejo de contexto en logs:
- Guardar el request actual en un thread-local.
- Generar y asegurar un request_id único por cada request.
- Recuperar request actual desde cualquier parte del código (ej. en filtros de logging).
"""

import threading
import uuid
from typing import Optional
from django.http import HttpRequest

# Thread-local para almacenar el request actual
_local = threading.local()

# Nombre del header estándar que usamos para correlación
REQUEST_ID_HEADER = "X-Request-ID"


def set_current_request(request: Optional[HttpRequest]):
    """
    Guarda el request actual en el contexto local del thread.

    Usado desde middleware al inicio de cada request (y con None al final).
    """
    _local.request = request


def get_current_request() -> Optional[HttpRequest]:
    """
    Recupera el request actual almacenado en thread-local.
    Devuelve None si no existe.
    """
    return getattr(_local, "request", None)


def ensure_request_id(request: HttpRequest) -> str:
    """
    Asegura que el request tenga un request_id.
    - Si el cliente/proxy mandó X-Request-ID, se respeta.
    - Si ya existe en el request, lo devuelve.
    - Si no, genera un UUID nuevo y lo asigna al request.
    """
    rid = getattr(request, "request_id", None)
    if not rid:
        incoming = request.META.get("HTTP_X_REQUEST_ID", "").strip()
        rid = incoming[:64] or str(uuid.uuid4())
        request.request_id = rid
    return rid
