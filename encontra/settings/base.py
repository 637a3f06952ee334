from pathlib import Path
import os

# -------------------------------------------------------------------
# BASE
# -------------------------------------------------------------------
BASE_DIR = Path(__file__).resolve().parent.parent.parent  # .../project_root
DEBUG = False  # se sobreescribe en cada entorno
SECRET_KEY = os.environ.get(
    "SECRET_KEY", "insecure-dev-key")  # prod: siempre por env

ALLOWED_HOSTS = []  # se sobreescribe por entorno

# -------------------------------------------------------------------
# APPS
# -------------------------------------------------------------------
INSTALLED_APPS = [
    # Django core (admin = capa CRUD del store de locales)
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",

    # Apps del proyecto
    "apps.regions",
    "apps.venues",
    "apps.saas",
    "apps.app_log",
]

# -------------------------------------------------------------------
# MIDDLEWARE
# -------------------------------------------------------------------
MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "apps.app_log.middleware.RequestIDMiddleware",
    "encontra.middleware.RegionMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "encontra.urls"

# -------------------------------------------------------------------
# TEMPLATES
# -------------------------------------------------------------------
TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [BASE_DIR / "templates"],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
                "apps.regions.context_processors.region",
            ],
        },
    },
]

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# -------------------------------------------------------------------
# I18N / ZONA HORARIA
# -------------------------------------------------------------------
LANGUAGE_CODE = "es-ar"
TIME_ZONE = "America/Argentina/Buenos_Aires"
USE_I18N = True
USE_TZ = True

# -------------------------------------------------------------------
# STATIC
# -------------------------------------------------------------------
STATIC_URL = "/static/"
MEDIA_URL = "/media/"

# -------------------------------------------------------------------
# ENCONTRÁ: tenants por subdominio, textos y gating
# -------------------------------------------------------------------
# Primer label del dominio canónico (encontra.com.ar): nunca es una región.
ENCONTRA_APEX_LABEL = os.environ.get("ENCONTRA_APEX_LABEL", "encontra")
# Host de desarrollo: tdf.localhost:3000 → región "tdf".
ENCONTRA_DEV_HOST_MARKER = os.environ.get(
    "ENCONTRA_DEV_HOST_MARKER", "localhost")
# Header que se agrega al request con la región resuelta.
ENCONTRA_REGION_HEADER = "X-Encontra-Region"

# Textos multi-idioma del store ({"es": ..., "en": ...})
ENCONTRA_DEFAULT_LANGUAGE = "es"
ENCONTRA_FALLBACK_LANGUAGE = "en"

# Límites de plan: True = bloqueo (HARD), False = solo aviso (SOFT).
ENCONTRA_ENFORCE_LIMITS = os.environ.get(
    "ENCONTRA_ENFORCE_LIMITS", "1") == "1"

# -------------------------------------------------------------------
# LOGGING
# -------------------------------------------------------------------
APP_LOG_LEVEL = os.environ.get("APP_LOG_LEVEL", "INFO")
APP_LOG_ENABLE_FILES = os.environ.get(
    "APP_LOG_ENABLE_FILES", "0") == "1"  # archivo rotativo además de consola
APP_LOG_FILES_BASE_DIR = os.environ.get(
    "APP_LOG_FILES_BASE_DIR", "logs")  # carpeta logs

if APP_LOG_ENABLE_FILES:
    Path(APP_LOG_FILES_BASE_DIR).mkdir(parents=True, exist_ok=True)


LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,

    "filters": {
        "request_context": {
            "()": "apps.app_log.logging_filters.RequestContextFilter",
        },
    },

    "formatters": {
        "request_line": {
            "format": (
                "%(asctime)s %(levelname)s %(name)s "
                "region=%(region_code)s req=%(request_id)s "
                "method=%(method)s path=%(path)s "
                "%(message)s"
            ),
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },

    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "filters": ["request_context"],
            "formatter": "request_line",
        },
        # Archivo rotativo (5 MB × 5), solo si APP_LOG_ENABLE_FILES=1
        "rotating_file": {
            "level": "INFO",
            "class": "logging.handlers.RotatingFileHandler",
            "filters": ["request_context"],
            "formatter": "request_line",
            "filename": str(Path(APP_LOG_FILES_BASE_DIR) / "encontra.log"),
            "maxBytes": 5 * 1024 * 1024,
            "backupCount": 5,
            "encoding": "utf-8",
            "delay": True,
        },
    },

    "loggers": {
        # Errores HTTP → consola
        "django.request": {
            "handlers": ["console"],
            "level": "ERROR",
            "propagate": False,
        },

        # Logs de negocio (regiones, lookup, gating)
        "apps": {
            "handlers": ["console"]
            + (["rotating_file"] if APP_LOG_ENABLE_FILES else []),
            "level": APP_LOG_LEVEL,
            "propagate": False,
        },

        "encontra": {
            "handlers": ["console"]
            + (["rotating_file"] if APP_LOG_ENABLE_FILES else []),
            "level": APP_LOG_LEVEL,
            "propagate": False,
        },
    },
}
