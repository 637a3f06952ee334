# apps/regions/apps.py
from django.apps import AppConfig


class RegionsConfig(AppConfig):
    name = "apps.regions"
    verbose_name = "Regiones (tenants por subdominio)"
