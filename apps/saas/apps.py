# apps/saas/apps.py
from django.apps import AppConfig


class SaasConfig(AppConfig):
    name = "apps.saas"
    verbose_name = "Planes y límites de locales"
