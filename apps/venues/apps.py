# apps/venues/apps.py
from django.apps import AppConfig


class VenuesConfig(AppConfig):
    name = "apps.venues"
    verbose_name = "Locales (store de lectura)"
