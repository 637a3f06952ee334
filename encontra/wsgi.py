import os
from django.core.wsgi import get_wsgi_application

# DJANGO_ENV elige el módulo de settings: development | production | test.
# Si no está definida, por defecto será "development".
env = os.getenv("DJANGO_ENV", "development").strip().lower()

# Ejemplo: si DJANGO_ENV=production → encontra/settings/production.py
os.environ.setdefault("DJANGO_SETTINGS_MODULE", f"encontra.settings.{env}")

application = get_wsgi_application()
