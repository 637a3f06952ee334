from .base import *

DEBUG = False
ALLOWED_HOSTS = ["*"]
SECRET_KEY = "test-only-key"

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]
ENCONTRA_ENFORCE_LIMITS = True
