import os
from django.core.asgi import get_asgi_application

# tomamos el entorno de ejecución.
env = os.getenv("DJANGO_ENV", "development").strip().lower()

os.environ.setdefault("DJANGO_SETTINGS_MODULE", f"encontra.settings.{env}")

# Aplicación ASGI para Uvicorn/Daphne/Hypercorn.
application = get_asgi_application()
