from .base import *

DEBUG = True
ALLOWED_HOSTS = [".localhost", "localhost", "127.0.0.1"]  # tdf.localhost:3000

# DB simple (sqlite) para desarrollo
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "db.sqlite3",
    }
}

APP_LOG_LEVEL = "DEBUG"
LOGGING["loggers"]["apps"]["level"] = APP_LOG_LEVEL
LOGGING["loggers"]["encontra"]["level"] = APP_LOG_LEVEL
