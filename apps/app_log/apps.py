# apps/app_log/apps.py
"""
Configuración de la aplicación app_log (contexto de request para logging).
"""

from django.apps import AppConfig


class AppLogConfig(AppConfig):
    name = "apps.app_log"
    verbose_name = "Observabilidad (contexto de logs)"
